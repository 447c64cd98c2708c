"""Grid widget containing the slot widgets."""

import logging

from textual.containers import Container

from chorder.models import GridGeometry

from .slot_widget import SlotWidget

logger = logging.getLogger(__name__)

# Terminal cell size used to map pixel geometry to cells
CELL_WIDTH_PX = 8
CELL_HEIGHT_PX = 16


def _cells(pixels: int, cell_size: int, minimum: int = 0) -> int:
    return max(minimum, round(pixels / cell_size))


class SlotGrid(Container):
    """
    rows x cols grid of slot widgets (layout container).

    Slots are laid out row-major: index i sits in column ``i % cols`` of
    row ``i // cols``.
    """

    DEFAULT_CSS = """
    SlotGrid {
        layout: grid;
        height: auto;
        width: auto;
    }
    """

    def __init__(self, shortcut_font: str = "", description_font: str = "") -> None:
        super().__init__()
        self.slot_widgets: dict[int, SlotWidget] = {}
        self._shortcut_font = shortcut_font
        self._description_font = description_font

    def build(self, rows: int, cols: int, geometry: GridGeometry) -> None:
        """
        Replace the grid with rows * cols hidden slots.

        Args:
            rows: Number of rows
            cols: Number of columns
            geometry: Pixel geometry, mapped to terminal cells
        """
        for widget in self.slot_widgets.values():
            widget.remove()
        self.slot_widgets.clear()

        self.styles.grid_size_columns = cols
        self.styles.grid_size_rows = rows
        self.styles.grid_gutter_horizontal = _cells(geometry.spacing, CELL_WIDTH_PX)
        self.styles.grid_gutter_vertical = _cells(geometry.spacing, CELL_HEIGHT_PX)
        self.styles.padding = (
            _cells(geometry.margin, CELL_HEIGHT_PX),
            _cells(geometry.margin, CELL_WIDTH_PX),
        )

        width = _cells(geometry.button_width, CELL_WIDTH_PX, minimum=3)
        height = _cells(geometry.button_height, CELL_HEIGHT_PX, minimum=3)

        widgets = []
        for index in range(rows * cols):
            widget = SlotWidget(index, self._shortcut_font, self._description_font)
            widget.styles.width = width
            widget.styles.height = height
            self.slot_widgets[index] = widget
            widgets.append(widget)

        self.mount(*widgets)
        logger.debug(f"Built {rows}x{cols} slot grid ({width}x{height} cells per slot)")

    def set_slot(self, index: int, visible: bool, shortcut: str, description: str) -> None:
        widget = self.slot_widgets.get(index)
        if widget is None:
            return
        if visible:
            widget.show_option(shortcut, description)
        else:
            widget.clear()

    def visible_slots(self) -> list[int]:
        return [index for index, widget in self.slot_widgets.items() if widget.is_shown]

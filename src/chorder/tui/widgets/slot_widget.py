"""Widget representing a single slot in the grid."""

from textual.app import ComposeResult
from textual.containers import Vertical
from textual.widgets import Label


def _font_is_bold(font: str) -> bool:
    return "bold" in font.lower().split()


class SlotWidget(Vertical):
    """
    One slot: the shortcut over its description.

    Hidden slots keep their grid cell (visibility, not display), so slot
    indices always map to the same position.
    """

    DEFAULT_CSS = """
    SlotWidget {
        border: solid $primary;
        align: center middle;
        visibility: hidden;
    }

    SlotWidget Label {
        width: 100%;
        content-align: center middle;
    }

    SlotWidget .shortcut {
        color: $accent;
    }
    """

    def __init__(self, index: int, shortcut_font: str = "", description_font: str = "") -> None:
        """
        Initialize slot widget.

        Args:
            index: Row-major slot index
            shortcut_font: Font hint for the shortcut label
            description_font: Font hint for the description label
        """
        super().__init__()
        self.index = index
        self.shortcut_text = ""
        self.description_text = ""
        self.is_shown = False
        self._shortcut = Label("", markup=False, classes="shortcut")
        self._description = Label("", markup=False, classes="description")
        if _font_is_bold(shortcut_font):
            self._shortcut.styles.text_style = "bold"
        if _font_is_bold(description_font):
            self._description.styles.text_style = "bold"

    def compose(self) -> ComposeResult:
        yield self._shortcut
        yield self._description

    def show_option(self, shortcut: str, description: str) -> None:
        self.shortcut_text = shortcut
        self.description_text = description
        self.is_shown = True
        self._shortcut.update(shortcut)
        self._description.update(description)
        self.styles.visibility = "visible"

    def clear(self) -> None:
        self.shortcut_text = ""
        self.description_text = ""
        self.is_shown = False
        self._shortcut.update("")
        self._description.update("")
        self.styles.visibility = "hidden"

"""Application configuration model."""

from typing import NamedTuple

from pydantic import BaseModel, ConfigDict, Field, field_serializer

from .option import OptionRecord

DEFAULT_PAGE = "main"

OptionsTable = dict[str, list[OptionRecord]]


class GridGeometry(NamedTuple):
    """Pixel geometry handed to the renderer."""

    margin: int
    spacing: int
    button_width: int
    button_height: int
    window_width: int
    window_height: int


def _span(button_size: int, count: int, margin: int, spacing: int) -> int:
    return button_size * count + margin * 2 + (count - 1) * spacing


class ChorderConfig(BaseModel):
    """
    Launcher settings and the options table.

    Loaded and validated once at startup, then never mutated.
    """

    model_config = ConfigDict(frozen=True, extra="ignore")

    # Grid capacity
    max_rows: int = Field(default=3, ge=1, description="Number of slot rows")
    max_columns: int = Field(default=4, ge=1, description="Number of slot columns")

    # Layout geometry (pixels), only used by the renderer
    margin: int = Field(default=16, ge=0, description="Outer margin around the grid")
    spacing: int = Field(default=16, ge=0, description="Gap between slots")
    button_width: int = Field(default=150, ge=0, description="Slot width")
    button_height: int = Field(default=150, ge=0, description="Slot height")

    shell: str = Field(default="", description="Default interpreter for 'script' options")

    # Rendering hints, opaque to the core
    shortcut_font: str = Field(default="Sans Bold 24", description="Font for shortcut labels")
    description_font: str = Field(default="Sans 12", description="Font for descriptions")

    options: OptionsTable = Field(
        default_factory=dict,
        description="Page name -> ordered list of options (list index is the slot index)",
    )

    @field_serializer("options")
    def serialize_options(self, options: OptionsTable) -> dict[str, list[dict]]:
        """Serialize options without the keys a record leaves out."""
        return {
            page: [record.model_dump(exclude_none=True) for record in records]
            for page, records in options.items()
        }

    @property
    def capacity(self) -> int:
        """Number of slots in the grid."""
        return self.max_rows * self.max_columns

    def get_window_width(self) -> int:
        return _span(self.button_width, self.max_columns, self.margin, self.spacing)

    def get_window_height(self) -> int:
        return _span(self.button_height, self.max_rows, self.margin, self.spacing)

    @property
    def geometry(self) -> GridGeometry:
        return GridGeometry(
            margin=self.margin,
            spacing=self.spacing,
            button_width=self.button_width,
            button_height=self.button_height,
            window_width=self.get_window_width(),
            window_height=self.get_window_height(),
        )

    def page_options(self, page: str) -> list[OptionRecord]:
        """
        Options of a page in slot order.

        A page missing from the table has no options; this is not an error.
        """
        return self.options.get(page, [])

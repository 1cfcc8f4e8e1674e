from __future__ import annotations

from dataclasses import dataclass

from rich.text import Text

from padview.models.view import ViewState
from padview.services.formatting import crop_line

HEADER_STYLE = "reverse"


@dataclass(slots=True, frozen=True)
class DisplayGeometry:
    columns: int
    rows: int
    char_width: int

    @property
    def pixel_width(self) -> int:
        return self.columns * self.char_width


def render_rows(state: ViewState, geometry: DisplayGeometry) -> list[str]:
    """Lay *state* out as exactly ``geometry.rows`` strings of ``geometry.columns`` characters.

    ``x_offset`` is in pixels and never positive; it shifts every line left by
    whole characters.
    """
    first_column = -state.x_offset // geometry.char_width if state.x_offset < 0 else 0
    rows: list[str] = []
    for i in range(geometry.rows):
        index = state.line_offset + i
        line = state.lines[index] if 0 <= index < len(state.lines) else ""
        rows.append(crop_line(line, first_column, geometry.columns))
    return rows


def render_text(state: ViewState, geometry: DisplayGeometry) -> Text:
    text = Text(no_wrap=True, overflow="crop")
    for i, row in enumerate(render_rows(state, geometry)):
        if i:
            text.append("\n")
        is_header = state.line_offset + i == 0 and bool(state.lines)
        text.append(row, style=HEADER_STYLE if is_header else "")
    return text

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable


@dataclass(slots=True, frozen=True)
class ViewState:
    lines: tuple[str, ...] = ()
    line_offset: int = 0
    x_offset: int = 0

    @classmethod
    def of(cls, lines: Iterable[str]) -> ViewState:
        return cls(lines=tuple(lines))

    def visible_lines(self, page_size: int) -> tuple[str, ...]:
        return self.lines[self.line_offset : self.line_offset + page_size]


def max_line_offset(state: ViewState, page_size: int) -> int:
    return max(0, len(state.lines) - page_size)

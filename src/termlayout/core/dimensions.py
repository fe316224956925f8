"""Dimensions value type and cell-width measurement."""

from __future__ import annotations

from dataclasses import dataclass

from ..config import ANSI_ESCAPE_RE


@dataclass(frozen=True)
class Dimensions:
    """Size of an element in terminal character cells."""

    width: int
    height: int

    def __str__(self) -> str:
        return f"{self.width}x{self.height}"


def visible_width(line: str) -> int:
    """Count the terminal cells a rendered line occupies.

    ANSI SGR escape sequences are stripped before counting, so a bold
    heading measures the same as its plain text.

    Args:
        line: A single rendered line without its terminator

    Returns:
        Number of character cells
    """
    return len(ANSI_ESCAPE_RE.sub("", line))

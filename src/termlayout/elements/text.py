"""Leaf elements: plain and bold text."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TextIO

from ..config import BOLD, RESET
from ..core.dimensions import Dimensions
from ..core.element import Element, resolve_output


@dataclass
class Text(Element):
    """A single line of plain text.

    The width is the character count of the string, so an empty string
    yields a zero-width, one-row element.
    """

    text: str

    def dimensions(self) -> Dimensions:
        return Dimensions(width=len(self.text), height=1)

    def render(self, out: TextIO | None = None) -> None:
        resolve_output(out).write(self.text)

    def describe(self) -> str:
        return f"{self.__class__.__name__}({self.text!r}) {self.dimensions()}"


@dataclass
class Heading(Text):
    """Text rendered in bold. Measures exactly like Text."""

    def render(self, out: TextIO | None = None) -> None:
        resolve_output(out).write(f"{BOLD}{self.text}{RESET}")

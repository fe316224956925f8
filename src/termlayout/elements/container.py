"""Container element for bordered vertical layout."""

from __future__ import annotations

import io
import logging
from dataclasses import dataclass, field
from typing import Iterator, TextIO

from ..config import CORNER, HORIZONTAL, PADDING, VERTICAL
from ..core.dimensions import Dimensions, visible_width
from ..core.element import Element, LayoutError, Renderable, resolve_output

logger = logging.getLogger(__name__)


@dataclass
class Container(Element):
    """A bordered box that stacks its children vertically.

    The box is two columns wider than its widest child and exactly as
    tall as its children combined; the top and bottom rules are drawn
    outside that height.

    Every row is ``|`` + the child's raw output + padding + ``|``, where
    the padding is the interior width minus the child's reported width.
    A nested container contributes one row per line it draws, all of them
    as wide as the nested box, so its right border stays aligned.

    Example:
        box = Container([Heading("Hi"), Text("Bye")])
        box.dimensions()  # Dimensions(width=5, height=2)
        box.render()
        # +---+
        # |Hi |   ("Hi" in bold)
        # |Bye|
        # +---+
    """

    children: list[Renderable] = field(default_factory=list)

    def __post_init__(self) -> None:
        # Own a private copy so the caller's sequence can't reshape the tree
        self.children = list(self.children)

    @classmethod
    def of(cls, *children: Renderable) -> Container:
        """Build a container from positional children."""
        return cls(list(children))

    def dimensions(self) -> Dimensions:
        child_dims = [child.dimensions() for child in self.children]
        width = max((dims.width for dims in child_dims), default=0) + 2
        height = sum(dims.height for dims in child_dims)
        return Dimensions(width=width, height=height)

    def render(self, out: TextIO | None = None) -> None:
        out = resolve_output(out)
        for row in self.iter_rows():
            out.write(f"{row}\n")

    def iter_rows(self) -> Iterator[str]:
        """Yield the border rules and framed child rows in order.

        Raises:
            LayoutError: If a child row is visibly wider than the interior,
                which only happens when a child under-reports its width.
        """
        dims = self.dimensions()
        interior = dims.width - 2
        logger.debug("Rendering container %s with %d children", dims, len(self.children))

        rule = f"{CORNER}{HORIZONTAL * interior}{CORNER}"
        yield rule

        for index, child in enumerate(self.children):
            padding = interior - child.dimensions().width
            for row in _child_rows(child):
                if padding < 0 or visible_width(row) > interior:
                    raise LayoutError(
                        f"Child {index} ({child.__class__.__name__}) renders "
                        f"wider than the container interior of {interior}"
                    )
                yield f"{VERTICAL}{row}{PADDING * padding}{VERTICAL}"

        yield rule

    def iter_elements(self, depth: int = 0) -> Iterator[tuple[int, Element]]:
        yield depth, self
        for child in self.children:
            if isinstance(child, Element):
                yield from child.iter_elements(depth + 1)
            else:
                yield depth + 1, child

    def describe(self) -> str:
        count = len(self.children)
        noun = "child" if count == 1 else "children"
        return f"{self.__class__.__name__}[{count} {noun}] {self.dimensions()}"


def _child_rows(child: Renderable) -> Iterator[str]:
    """Rows of a child; objects outside the Element hierarchy are one row."""
    if isinstance(child, Element):
        yield from child.iter_rows()
    else:
        buffer = io.StringIO()
        child.render(buffer)
        yield buffer.getvalue()

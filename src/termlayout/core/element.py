"""Base classes and protocols for displayable elements."""

from __future__ import annotations

import io
import sys
from abc import ABC, abstractmethod
from typing import Iterator, Protocol, TextIO, runtime_checkable

from .dimensions import Dimensions


class LayoutError(ValueError):
    """Raised when an element renders wider than its container allows."""


@runtime_checkable
class Renderable(Protocol):
    """Protocol for anything that can be laid out inside a Container.

    Any class with dimensions() and render() methods satisfies this protocol.
    """

    def dimensions(self) -> Dimensions:
        """Return the element's size in character cells."""
        ...

    def render(self, out: TextIO | None = None) -> None:
        """Write the element to the output sink."""
        ...


class Element(ABC):
    """Abstract base class for elements in a layout tree.

    Subclasses implement dimensions() and render(). Sizes are never
    cached; every call walks the subtree again.

    Example:
        box = Container([Heading("Hello"), Text("world")])
        box.render()                  # writes to sys.stdout
        text = box.render_to_string() # same bytes, as a string
    """

    @abstractmethod
    def dimensions(self) -> Dimensions:
        """Compute the element's size.

        Returns:
            Width and height in terminal character cells.
        """
        pass

    @abstractmethod
    def render(self, out: TextIO | None = None) -> None:
        """Write the element to an output sink.

        Args:
            out: Text stream to write to. Defaults to sys.stdout.
        """
        pass

    def render_to_string(self) -> str:
        """Render into an in-memory buffer and return its contents."""
        buffer = io.StringIO()
        self.render(buffer)
        return buffer.getvalue()

    def iter_rows(self) -> Iterator[str]:
        """Yield the rows a parent Container frames, without terminators.

        A leaf is a single row holding its raw rendered output, even when
        that output contains escapes or newlines.
        """
        yield self.render_to_string()

    def iter_elements(self, depth: int = 0) -> Iterator[tuple[int, Element]]:
        """Iterate over this element and all descendants (depth-first).

        Args:
            depth: Depth reported for this element

        Yields:
            Tuples of (depth, element)
        """
        yield depth, self

    def describe(self) -> str:
        """One-line summary of the element and its size."""
        return f"{self.__class__.__name__} {self.dimensions()}"


def resolve_output(out: TextIO | None) -> TextIO:
    """Return the sink to write to, falling back to sys.stdout."""
    return sys.stdout if out is None else out

"""Text layout renderer: bordered boxes of plain and bold text."""

from .core import Dimensions, Element, LayoutError, visible_width
from .elements import Container, Heading, Text
from .layout import LayoutLoader

__all__ = [
    "Dimensions",
    "Element",
    "LayoutError",
    "visible_width",
    "Text",
    "Heading",
    "Container",
    "LayoutLoader",
]

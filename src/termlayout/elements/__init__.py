"""Displayable elements."""

from .container import Container
from .text import Heading, Text

__all__ = ["Text", "Heading", "Container"]

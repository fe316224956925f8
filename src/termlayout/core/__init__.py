"""Core element protocol components."""

from .dimensions import Dimensions, visible_width
from .element import Element, LayoutError, Renderable

__all__ = ["Dimensions", "visible_width", "Element", "LayoutError", "Renderable"]

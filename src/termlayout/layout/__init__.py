"""Layout system for data-driven element trees."""

from .loader import LayoutLoader

__all__ = ["LayoutLoader"]

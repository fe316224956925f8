"""Nested layout."""

from ..core.element import Element
from ..layout import LayoutLoader


def create_nested_layout() -> Element:
    """Create a layout with boxes nested inside boxes.

    Returns:
        Root element loaded from assets/nested.yaml.
    """
    return LayoutLoader().load_named("nested")

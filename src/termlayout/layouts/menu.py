"""Menu layout."""

from ..core.element import Element
from ..layout import LayoutLoader


def create_menu_layout() -> Element:
    """Create a titled menu with a boxed list of options.

    Returns:
        Root element loaded from assets/menu.yaml.
    """
    return LayoutLoader().load_named("menu")

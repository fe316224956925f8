"""Pre-built layouts for termlayout."""

from .greeting import create_greeting_layout
from .menu import create_menu_layout
from .nested import create_nested_layout

__all__ = ["create_greeting_layout", "create_menu_layout", "create_nested_layout"]

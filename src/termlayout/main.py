"""Main entry point for termlayout."""

from __future__ import annotations

import argparse
import logging
import sys

from .core.element import Element
from .layout import LayoutLoader
from .layouts import create_greeting_layout, create_menu_layout, create_nested_layout

logger = logging.getLogger(__name__)


# Layout registry - maps layout names to factory functions
LAYOUTS = {
    "greeting": create_greeting_layout,
    "nested": create_nested_layout,
    "menu": create_menu_layout,
}


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        description="termlayout - render bordered text layouts to the terminal",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "-l", "--layout",
        choices=list(LAYOUTS.keys()),
        default="greeting",
        help="Layout to render (default: greeting)",
    )
    parser.add_argument(
        "-f", "--file",
        metavar="PATH",
        help="Render a YAML layout file instead of a built-in layout",
    )
    parser.add_argument(
        "--tree",
        action="store_true",
        help="Print the element tree with dimensions instead of rendering",
    )
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Log debug output to stderr",
    )
    return parser.parse_args(argv)


def print_tree(root: Element) -> None:
    """Print one line per element, indented by depth."""
    for depth, element in root.iter_elements():
        indent = "  " * depth
        print(f"{indent}- {element.describe()}")


def main(argv: list[str] | None = None) -> int:
    """Run termlayout.

    Returns:
        Process exit status
    """
    args = parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        stream=sys.stderr,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        if args.file:
            root = LayoutLoader().load(args.file)
        else:
            logger.debug("Using built-in layout '%s'", args.layout)
            root = LAYOUTS[args.layout]()

        if args.tree:
            print_tree(root)
        else:
            root.render(sys.stdout)
    except (ValueError, OSError) as e:
        print(f"termlayout: error: {e}", file=sys.stderr)
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())

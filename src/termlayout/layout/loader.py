"""YAML loader for element tree definitions."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

import yaml

from ..config import ASSETS_DIR
from ..core.element import Element
from ..elements import Container, Heading, Text

logger = logging.getLogger(__name__)


# Registry of leaf element types keyed by their YAML name
LEAF_REGISTRY: dict[str, type[Text]] = {
    "text": Text,
    "heading": Heading,
}


class LayoutLoader:
    """Loads element trees from YAML files.

    YAML format:
        name: greeting        # optional, informational
        root:
          container:
            - heading: Hello world
            - text: This is a long string of text
            - container:
                - text: nested
                - plain scalars are shorthand for text

    Every node is a mapping with exactly one key: ``text``, ``heading``
    or ``container``. Leaf values are converted with str(); a container
    value is a list of nodes (null or omitted means no children).
    """

    def __init__(self, assets_dir: str | Path | None = None) -> None:
        """Initialize the loader.

        Args:
            assets_dir: Directory searched by load_named(). Defaults to the
                packaged assets/ directory.
        """
        self._assets_dir = ASSETS_DIR if assets_dir is None else Path(assets_dir)

    def load(self, path: str | Path) -> Element:
        """Load an element tree from a YAML file.

        Args:
            path: Path to the YAML file

        Returns:
            Root element of the tree
        """
        path = Path(path)
        if not path.is_file():
            raise FileNotFoundError(f"Layout file not found: {path}")

        logger.debug("Loading layout from %s", path)
        with open(path) as f:
            return self.load_string(f.read())

    def load_string(self, yaml_string: str) -> Element:
        """Load an element tree from a YAML string.

        Args:
            yaml_string: YAML content as a string

        Returns:
            Root element of the tree
        """
        try:
            data = yaml.safe_load(yaml_string)
        except yaml.YAMLError as e:
            raise ValueError(f"Invalid layout YAML: {e}") from e
        return self._build_tree(data)

    def load_named(self, name: str) -> Element:
        """Load ``<assets_dir>/<name>.yaml``."""
        return self.load(self._assets_dir / f"{name}.yaml")

    def _build_tree(self, data: Any) -> Element:
        """Build an element tree from parsed YAML data."""
        if not isinstance(data, dict) or "root" not in data:
            raise ValueError("Layout definition must be a mapping with a 'root' key")

        root = self._build_element(data["root"], "root")
        logger.debug(
            "Built layout '%s' with %d elements",
            data.get("name", "layout"),
            sum(1 for _ in root.iter_elements()),
        )
        return root

    def _build_element(self, node: Any, where: str) -> Element:
        """Build a single element (and its subtree) from a YAML node.

        Args:
            node: Parsed YAML node
            where: Dotted location of the node, used in error messages

        Returns:
            The constructed element
        """
        if node is not None and not isinstance(node, (dict, list)):
            return Text(str(node))

        if not isinstance(node, dict) or len(node) != 1:
            raise ValueError(
                f"Element at '{where}' must be a scalar or a single-key mapping, got {node!r}"
            )

        kind, value = next(iter(node.items()))

        if kind in LEAF_REGISTRY:
            if isinstance(value, (dict, list)):
                raise ValueError(f"Element '{kind}' at '{where}' expects a scalar value")
            return LEAF_REGISTRY[kind]("" if value is None else str(value))

        if kind == "container":
            if value is None:
                value = []
            if not isinstance(value, list):
                raise ValueError(f"Container at '{where}' expects a list of children")
            children = [
                self._build_element(child, f"{where}.{i}")
                for i, child in enumerate(value)
            ]
            return Container(children)

        raise ValueError(f"Unknown element type '{kind}' at '{where}'")

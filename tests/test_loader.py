"""Tests for building element trees from YAML."""

import textwrap
from pathlib import Path

import pytest

import termlayout
from termlayout import Container, Heading, LayoutLoader, Text
from termlayout.config import ASSETS_DIR


@pytest.fixture
def loader(tmp_path):
    return LayoutLoader(assets_dir=tmp_path)


def test_load_string_builds_tree(loader):
    root = loader.load_string(textwrap.dedent(
        """
        name: greeting
        root:
          container:
            - heading: Hello world
            - text: This is a long string of text
        """
    ))

    assert root == Container([Heading("Hello world"), Text("This is a long string of text")])


def test_bare_string_is_text(loader):
    root = loader.load_string("root:\n  container:\n    - just text\n")
    assert root == Container([Text("just text")])


def test_leaf_root(loader):
    assert loader.load_string("root:\n  heading: Alone\n") == Heading("Alone")


def test_scalars_are_stringified(loader):
    root = loader.load_string("root:\n  container:\n    - text: 42\n    - heading:\n")
    assert root == Container([Text("42"), Heading("")])


def test_bare_scalars_are_text(loader):
    root = loader.load_string("root:\n  container:\n    - 42\n    - 1.5\n    - true\n")
    assert root == Container([Text("42"), Text("1.5"), Text("True")])


@pytest.mark.parametrize("body", ["container:", "container: []"])
def test_empty_container(loader, body):
    assert loader.load_string(f"root:\n  {body}\n") == Container([])


def test_nested_containers(loader):
    root = loader.load_string(textwrap.dedent(
        """
        root:
          container:
            - container:
                - container:
                    - text: deep
        """
    ))

    depths = [depth for depth, _ in root.iter_elements()]
    assert depths == [0, 1, 2, 3]


def test_load_file(loader, tmp_path):
    path = tmp_path / "box.yaml"
    path.write_text("root:\n  container:\n    - text: from file\n")

    assert loader.load(path) == Container([Text("from file")])
    assert loader.load(str(path)) == Container([Text("from file")])


def test_load_named(loader, tmp_path):
    (tmp_path / "named.yaml").write_text("root:\n  text: by name\n")
    assert loader.load_named("named") == Text("by name")


def test_missing_file(loader, tmp_path):
    with pytest.raises(FileNotFoundError):
        loader.load(tmp_path / "nope.yaml")


def test_missing_named_layout(loader):
    with pytest.raises(FileNotFoundError):
        loader.load_named("nope")


@pytest.mark.parametrize(
    "document,message",
    [
        ("", "'root' key"),
        ("- a\n- b\n", "'root' key"),
        ("name: only\n", "'root' key"),
        ("root:\n  table: x\n", "Unknown element type 'table'"),
        ("root:\n  text: a\n  heading: b\n", "single-key mapping"),
        ("root:\n", "single-key mapping"),
        ("root: [a, b]\n", "single-key mapping"),
        ("root: [unclosed\n", "Invalid layout YAML"),
        ("root: 'unterminated\n", "Invalid layout YAML"),
        ("root:\n  container: nope\n", "expects a list"),
        ("root:\n  text: [a, b]\n", "expects a scalar"),
        ("root:\n  container:\n    - image: x\n", "at 'root.0'"),
    ],
)
def test_invalid_documents(loader, document, message):
    with pytest.raises(ValueError, match=message):
        loader.load_string(document)


def test_directory_is_not_a_layout_file(loader, tmp_path):
    with pytest.raises(FileNotFoundError):
        loader.load(tmp_path)


def test_default_assets_ship_inside_package():
    assert ASSETS_DIR.parent == Path(termlayout.__file__).parent
    assert (ASSETS_DIR / "nested.yaml").is_file()
    assert (ASSETS_DIR / "menu.yaml").is_file()

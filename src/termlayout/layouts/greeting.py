"""Greeting layout."""

from ..elements import Container, Heading, Text


def create_greeting_layout() -> Container:
    """Create a box holding a bold greeting above a longer line of text.

    Returns:
        A Container with a Heading and a Text child.
    """
    heading = Heading("Hello world")
    text = Text("This is a long string of text")
    return Container([heading, text])

"""Rendering constants for termlayout."""

import re
from pathlib import Path

# Packaged directory holding the YAML layout definitions
ASSETS_DIR = Path(__file__).parent / "assets"

# ANSI SGR sequences used by Heading
BOLD = "\x1b[1m"
RESET = "\x1b[0m"

# Matches any SGR sequence (ESC [ params m); these occupy no terminal cells
ANSI_ESCAPE_RE = re.compile(r"\x1b\[[0-9;]*m")

# Box drawing characters for Container
CORNER = "+"
HORIZONTAL = "-"
VERTICAL = "|"
PADDING = " "

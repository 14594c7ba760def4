"""CLI defaults and layout loading."""

from pathlib import Path
from typing import Optional

from engine.models import ProjectLayout

TOOL_VERSION = "1.0.0"

DEFAULT_HOST = "0.0.0.0"
DEFAULT_PORT = 3333
DEFAULT_OUTPUT = Path("public")


def load_layout(root: Optional[Path] = None, output: Optional[Path] = None) -> ProjectLayout:
    """Build the project layout for ``root`` (defaults to the working directory)."""
    root = (root or Path.cwd()).resolve()
    return ProjectLayout(root=root, output=output or DEFAULT_OUTPUT)

"""assetpipe engine: module discovery, encoding and bundle composition."""

from .bundle import compose_script, compose_styles, write_artifacts
from .models import ProjectLayout

__all__ = [
    "compose_script",
    "compose_styles",
    "write_artifacts",
    "ProjectLayout",
]

"""Module identifiers and name resolution.

Identifiers are slash-separated paths relative to the app root with the
source extension removed, e.g. ``app/scripts/views/list.js`` -> ``views/list``.
The loader runtime resolves names with the same algorithm as ``resolve``.
"""

import os
import re
from pathlib import Path
from typing import List, Union

RELATIVE_NAME = re.compile(r"^\.\.?(/|$)")


def module_id(path: Union[str, Path], root: Union[str, Path], extension: str = ".js") -> str:
    """Derive the module identifier for ``path`` stored under ``root``."""
    relative = os.path.relpath(str(path), str(root))
    name = relative.replace(os.sep, "/")
    if os.altsep:
        name = name.replace(os.altsep, "/")
    if extension and name.endswith(extension):
        name = name[: -len(extension)]
    return name


def dirname(identifier: str) -> str:
    """Directory part of a module identifier ("" for top-level modules)."""
    return "/".join(identifier.split("/")[:-1])


def is_relative(name: str) -> bool:
    return RELATIVE_NAME.match(name) is not None


def fold_segments(parts: List[str]) -> List[str]:
    """Collapse ``.``, ``..`` and empty segments.

    A ``..`` with nothing left to pop is dropped.
    """
    results: List[str] = []
    for part in parts:
        if part == "..":
            if results:
                results.pop()
        elif part not in (".", ""):
            results.append(part)
    return results


def resolve(requester: str, name: str) -> str:
    """Resolve ``name`` as requested from the module ``requester``.

    Relative names are anchored at the requester's directory; anything else
    is already absolute and returned as given.
    """
    if not is_relative(name):
        return name
    joined = "/".join([dirname(requester), name])
    return "/".join(fold_segments(joined.split("/")))

"""Deterministic source tree walk."""

from pathlib import Path
from typing import List, Union

from loguru import logger


def walk_tree(root: Union[str, Path], extension: str) -> List[Path]:
    """List files under ``root`` whose suffix is ``extension``.

    Entries at each level are visited in lexical name order, descending into
    directories as they are met, so the result is stable for an unchanged
    tree. A missing or empty root gives an empty list.

    Args:
        root: Directory to walk (a matching file is returned as itself)
        extension: Suffix to keep, including the dot (e.g. ".js")

    Returns:
        Matching file paths in walk order
    """
    root = Path(root)
    files: List[Path] = []

    if not root.exists():
        logger.debug(f"Skipping missing tree {root}")
        return files

    if root.is_file():
        if root.suffix == extension:
            files.append(root)
        return files

    _walk(root, extension, files)
    return files


def _walk(directory: Path, extension: str, files: List[Path]) -> None:
    try:
        entries = sorted(directory.iterdir(), key=lambda p: p.name)
    except OSError as e:
        logger.warning(f"Could not list {directory}: {e}")
        return

    for entry in entries:
        # symlinked directories are not followed
        if entry.is_dir() and not entry.is_symlink():
            _walk(entry, extension, files)
        elif entry.suffix == extension:
            files.append(entry)

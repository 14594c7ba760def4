"""Script and style composition.

A script bundle is vendor scripts (verbatim), then the loader runtime, then
every app module wrapped by the encoder. A style bundle is the style sheets
concatenated. Both are written straight to ``out`` one file at a time; the
first open, read or write error aborts and propagates, and discarding what
was already written is the caller's job.
"""

import shutil
from pathlib import Path
from typing import BinaryIO, Callable, Dict, List, Optional, Union

from loguru import logger

from engine.bundle.encoder import encode_module
from engine.bundle.runtime import LOADER_RUNTIME
from engine.models import CompositionResult, FileSetSnapshot, ScriptModule
from engine.paths import module_id
from engine.walker import walk_tree

SCRIPT_EXTENSION = ".js"
STYLE_EXTENSION = ".css"
SEPARATOR = b"\n"

Reporter = Callable[[FileSetSnapshot], None]


class _CountingWriter:
    """Forwards writes to ``out`` and counts bytes."""

    def __init__(self, out: BinaryIO):
        self._out = out
        self.count = 0

    def write(self, data: bytes) -> int:
        self._out.write(data)
        self.count += len(data)
        return len(data)


def _publish(report: Optional[Reporter], snapshot: FileSetSnapshot) -> None:
    if report is None:
        return
    try:
        report(snapshot)
    except Exception as e:
        logger.warning(f"File set reporter failed for {snapshot.kind} build: {e}")


def _absolute(paths: List[Path]) -> List[Path]:
    return [p.absolute() for p in paths]


def _copy_file(path: Path, writer: _CountingWriter) -> None:
    with open(path, "rb") as fh:
        shutil.copyfileobj(fh, writer)
    writer.write(SEPARATOR)


def collect_modules(app_root: Union[str, Path]) -> List[ScriptModule]:
    """Walk the app tree and name every script module.

    Duplicate identifiers are kept in walk order (the later registration
    wins at runtime) and logged.
    """
    app_root = Path(app_root)
    modules = [
        ScriptModule(module_id=module_id(path, app_root, SCRIPT_EXTENSION), path=path)
        for path in walk_tree(app_root, SCRIPT_EXTENSION)
    ]

    seen: Dict[str, Path] = {}
    for module in modules:
        if module.module_id in seen:
            logger.warning(
                f"Module {module.module_id!r} defined by both {seen[module.module_id]} and {module.path}; "
                f"the later one wins"
            )
        seen[module.module_id] = module.path
    return modules


def compose_script(
    out: BinaryIO,
    vendor_root: Union[str, Path],
    app_root: Union[str, Path],
    report: Optional[Reporter] = None,
) -> CompositionResult:
    """Write the script bundle to ``out``.

    Args:
        out: Binary destination (file, spool, socket wrapper)
        vendor_root: Tree of third-party scripts included verbatim
        app_root: Tree of app modules, named relative to this root
        report: Called once with the files considered, before writing starts

    Returns:
        CompositionResult with the snapshot, byte count and module ids
    """
    vendor_files = walk_tree(vendor_root, SCRIPT_EXTENSION)
    modules = collect_modules(app_root)

    snapshot = FileSetSnapshot(
        kind="script",
        files=_absolute(vendor_files) + _absolute([m.path for m in modules]),
    )
    _publish(report, snapshot)

    writer = _CountingWriter(out)

    for path in vendor_files:
        logger.debug(f"Adding vendor script {path}")
        _copy_file(path, writer)

    writer.write(LOADER_RUNTIME.encode("utf-8"))

    for module in modules:
        logger.debug(f"Registering module {module.module_id} from {module.path}")
        with open(module.path, "rb") as fh:
            for chunk in encode_module(module.module_id, fh):
                writer.write(chunk)

    return CompositionResult(
        snapshot=snapshot,
        bytes_written=writer.count,
        modules=[m.module_id for m in modules],
    )


def compose_styles(
    out: BinaryIO,
    styles_root: Union[str, Path],
    report: Optional[Reporter] = None,
) -> CompositionResult:
    """Write every style sheet under ``styles_root`` to ``out``, newline separated."""
    files = walk_tree(styles_root, STYLE_EXTENSION)

    snapshot = FileSetSnapshot(kind="style", files=_absolute(files))
    _publish(report, snapshot)

    writer = _CountingWriter(out)
    for path in files:
        logger.debug(f"Adding style sheet {path}")
        _copy_file(path, writer)

    return CompositionResult(snapshot=snapshot, bytes_written=writer.count)

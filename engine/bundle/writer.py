from pathlib import Path
from typing import BinaryIO, Callable

from loguru import logger

from engine.bundle.composer import compose_script, compose_styles
from engine.bundle.page import INDEX_HTML
from engine.models import BuildArtifacts, CompositionResult, ProjectLayout


def _write_artifact(path: Path, compose: Callable[[BinaryIO], CompositionResult]) -> CompositionResult:
    """Compose into ``path``, removing the file if composition fails."""
    try:
        with open(path, "wb") as f:
            return compose(f)
    except BaseException:
        if path.is_file():
            path.unlink()
            logger.debug(f"Removed partial artifact {path}")
        raise


def write_artifacts(layout: ProjectLayout) -> BuildArtifacts:
    """Write the entry page, script bundle and style bundle to the output directory."""
    output_dir = layout.output_dir
    output_dir.mkdir(parents=True, exist_ok=True)

    index_path = output_dir / "index.html"
    script_path = output_dir / "index.js"
    style_path = output_dir / "index.css"

    with open(index_path, "w", encoding="utf-8") as f:
        f.write(INDEX_HTML)

    script = _write_artifact(
        script_path,
        lambda out: compose_script(out, layout.vendor_root, layout.app_root),
    )
    logger.info(f"Wrote {script_path} ({len(script.modules)} modules, {script.bytes_written} bytes)")

    style = _write_artifact(style_path, lambda out: compose_styles(out, layout.styles_root))
    logger.info(f"Wrote {style_path} ({len(style.snapshot)} style sheets, {style.bytes_written} bytes)")

    return BuildArtifacts(
        index_html=index_path,
        index_js=script_path,
        index_css=style_path,
        script=script,
        style=style,
    )

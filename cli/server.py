"""Development server.

Every request for ``/index.js`` or ``/index.css`` composes a fresh bundle.
The bundle is composed into a spool first and only sent once complete, so a
failed build answers 500 instead of a truncated script.
"""

import tempfile
from typing import BinaryIO, Callable, Iterator

from fastapi import FastAPI, Request
from fastapi.responses import HTMLResponse, PlainTextResponse, Response, StreamingResponse
from loguru import logger

from engine.bundle import INDEX_HTML, compose_script, compose_styles
from engine.models import CompositionResult, FileSetSnapshot, ProjectLayout

SCRIPT_CONTENT_TYPE = "text/javascript; charset=utf-8"
STYLE_CONTENT_TYPE = "text/css; charset=utf-8"

# Spools switch from memory to a temp file past this size.
SPOOL_MAX_MEMORY = 4 * 1024 * 1024
STREAM_CHUNK = 64 * 1024

ALL_METHODS = ["GET", "HEAD", "POST", "PUT", "DELETE", "PATCH", "OPTIONS"]

_LABELS = {"script": "JS FILES", "style": "CSS FILES"}


def log_snapshot(snapshot: FileSetSnapshot) -> None:
    logger.info(f"{_LABELS[snapshot.kind]}: {snapshot.as_strings()}")


def _drain(spool: BinaryIO) -> Iterator[bytes]:
    try:
        while True:
            chunk = spool.read(STREAM_CHUNK)
            if not chunk:
                break
            yield chunk
    finally:
        spool.close()


def _serve_composed(compose: Callable[[BinaryIO], CompositionResult], media_type: str) -> Response:
    spool = tempfile.SpooledTemporaryFile(max_size=SPOOL_MAX_MEMORY)
    try:
        result = compose(spool)
    except Exception as e:
        spool.close()
        logger.error(f"Build failed: {e}")
        return PlainTextResponse(str(e), status_code=500)

    spool.seek(0)
    return StreamingResponse(
        _drain(spool),
        media_type=media_type,
        headers={"Content-Length": str(result.bytes_written)},
    )


def create_app(layout: ProjectLayout) -> FastAPI:
    """Build the dev server application for ``layout``."""
    app = FastAPI(title="assetpipe", docs_url=None, redoc_url=None, openapi_url=None)

    @app.api_route("/", methods=ALL_METHODS)
    def index() -> Response:
        return HTMLResponse(INDEX_HTML, media_type="text/html")

    @app.api_route("/index.js", methods=ALL_METHODS)
    def script() -> Response:
        return _serve_composed(
            lambda out: compose_script(out, layout.vendor_root, layout.app_root, report=log_snapshot),
            SCRIPT_CONTENT_TYPE,
        )

    @app.api_route("/index.css", methods=ALL_METHODS)
    def style() -> Response:
        return _serve_composed(
            lambda out: compose_styles(out, layout.styles_root, report=log_snapshot),
            STYLE_CONTENT_TYPE,
        )

    @app.api_route("/{full_path:path}", methods=ALL_METHODS, include_in_schema=False)
    def not_found(request: Request, full_path: str = "") -> Response:
        return PlainTextResponse("not found", status_code=404)

    return app

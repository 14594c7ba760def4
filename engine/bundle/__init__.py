from .composer import compose_script, compose_styles, collect_modules
from .encoder import Base64Pipe, encode_module, decode_payload
from .page import INDEX_HTML
from .runtime import LOADER_RUNTIME
from .writer import write_artifacts

__all__ = [
    "compose_script",
    "compose_styles",
    "collect_modules",
    "Base64Pipe",
    "encode_module",
    "decode_payload",
    "INDEX_HTML",
    "LOADER_RUNTIME",
    "write_artifacts",
]

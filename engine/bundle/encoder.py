"""Module encoder.

Wraps one app module in a ``require.register`` call whose body evaluates the
module source from a base64 literal. Base64 keeps quotes, backslashes and
non-ASCII bytes in the source from ever ending the enclosing script.

The base64 payload is produced by ``Base64Pipe``: a producer thread reads the
source and hands encoded chunks to the consumer through a bounded queue, so
memory stays flat no matter how large the module is.
"""

import base64
import json
import queue
import re
import threading
from typing import BinaryIO, Iterator, Optional

from loguru import logger

# Multiple of 3 so every chunk encodes without padding.
CHUNK_SIZE = 48 * 1024
QUEUE_DEPTH = 4

_PUT_TIMEOUT = 0.1
_DONE = object()

_PAYLOAD = re.compile(rb'atob\("([A-Za-z0-9+/=]*)"\)')


class _Failure:
    def __init__(self, error: Exception):
        self.error = error


class Base64Pipe:
    """Base64-encode a binary stream on a producer thread.

    Iterating the pipe starts the producer and yields encoded chunks as they
    become available. The producer blocks while ``depth`` chunks are waiting;
    the consumer blocks while none are. A read error on the producer side is
    re-raised in the consumer. Closing the iterator early stops the producer
    and joins its thread.

    Usage:
        with open(path, "rb") as fh:
            for chunk in Base64Pipe(fh, trailer=b"\\n"):
                out.write(chunk)
    """

    def __init__(
        self,
        source: BinaryIO,
        trailer: bytes = b"",
        chunk_size: int = CHUNK_SIZE,
        depth: int = QUEUE_DEPTH,
    ):
        if chunk_size <= 0 or chunk_size % 3:
            raise ValueError(f"chunk_size must be a positive multiple of 3, got {chunk_size}")
        self._source = source
        self._trailer = trailer
        self._chunk_size = chunk_size
        self._queue: "queue.Queue[object]" = queue.Queue(maxsize=depth)
        self._stop = threading.Event()
        self._thread = threading.Thread(target=self._produce, name="base64-pipe", daemon=True)

    def __iter__(self) -> Iterator[bytes]:
        self._thread.start()
        try:
            while True:
                item = self._queue.get()
                if item is _DONE:
                    return
                if isinstance(item, _Failure):
                    raise item.error
                yield item
        finally:
            self._stop.set()
            self._thread.join()

    def _put(self, item: object) -> bool:
        while not self._stop.is_set():
            try:
                self._queue.put(item, timeout=_PUT_TIMEOUT)
                return True
            except queue.Full:
                continue
        return False

    def _blocks(self) -> Iterator[bytes]:
        while True:
            block = self._source.read(self._chunk_size)
            if not block:
                break
            yield block
        if self._trailer:
            yield self._trailer

    def _produce(self) -> None:
        pending = b""
        try:
            for block in self._blocks():
                data = pending + block
                usable = len(data) - len(data) % 3
                pending = data[usable:]
                if usable and not self._put(base64.b64encode(data[:usable])):
                    return
            if pending and not self._put(base64.b64encode(pending)):
                return
        except Exception as e:
            logger.debug(f"Encoder producer failed: {e}")
            self._put(_Failure(e))
            return
        self._put(_DONE)


def source_url(module_id: str) -> bytes:
    """Debug annotation appended to every module before encoding."""
    return f"\n//# sourceURL={module_id}.js".encode("utf-8")


def fragment_head(module_id: str) -> bytes:
    # json.dumps yields a valid JavaScript string literal for any identifier
    return (
        f"require.register({json.dumps(module_id)}, function(exports, require, module) {{\n"
        'eval(decodeURIComponent(escape(atob("'
    ).encode("utf-8")


FRAGMENT_TAIL = b'"))));\n});\n'


def encode_module(
    module_id: str,
    source: BinaryIO,
    chunk_size: int = CHUNK_SIZE,
    depth: int = QUEUE_DEPTH,
) -> Iterator[bytes]:
    """Yield the registration fragment for one module, chunk by chunk.

    Args:
        module_id: Identifier the module registers under
        source: Open binary stream with the module source
        chunk_size: Bytes read per producer step
        depth: Encoded chunks allowed to wait for the consumer

    Yields:
        Pieces of the fragment; their concatenation is the whole fragment
    """
    yield fragment_head(module_id)
    yield from Base64Pipe(source, trailer=source_url(module_id), chunk_size=chunk_size, depth=depth)
    yield FRAGMENT_TAIL


def decode_payload(fragment: bytes) -> Optional[bytes]:
    """Decode the base64 literal of a registration fragment.

    Returns the module bytes followed by the sourceURL annotation, or None
    when ``fragment`` carries no payload.
    """
    match = _PAYLOAD.search(fragment)
    if not match:
        return None
    return base64.b64decode(match.group(1))

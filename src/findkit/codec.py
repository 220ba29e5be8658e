"""Buffer-to-buffer DEFLATE compression.

The codec is raw DEFLATE (RFC 1951, no zlib or gzip header) with the standard
32 KiB window, as produced by :mod:`zlib` with ``wbits=-15``.  Output is
interchangeable with other raw DEFLATE implementations such as Go's
``compress/flate``.

Every operation opens a :class:`DeflateWriter` or :class:`DeflateReader`,
performs the whole transform and closes the handle in a ``with`` block, so
pending output is flushed and the codec state released even when the caller's
stream raises midway.

Levels run from ``0`` (stored, no compression) to ``9`` (smallest output).
Levels outside that range raise :class:`CompressionLevelError`; they are never
clamped.  Decoding errors and input cut short before the final block raise
:class:`DecompressionError` and :class:`TruncatedStreamError`.
"""

from __future__ import annotations

import io
import zlib
from collections.abc import Iterator
from types import TracebackType
from typing import BinaryIO

from .utils.errors import CodecError, CompressionLevelError, DecompressionError, TruncatedStreamError
from .utils.logging import TRACE, get_logger

__all__ = [
    "NO_COMPRESSION",
    "BEST_SPEED",
    "BEST_COMPRESSION",
    "CHUNK_SIZE",
    "DeflateWriter",
    "DeflateReader",
    "validate_level",
    "compress_to",
    "decompress_stream",
    "compress",
    "decompress",
    "compress_bytes",
    "decompress_bytes",
]

NO_COMPRESSION = 0
BEST_SPEED = 1
BEST_COMPRESSION = 9

CHUNK_SIZE = 64 * 1024

_WBITS = -15

_log = get_logger("trace")


def validate_level(level: int) -> int:
    """Return ``level`` if it is an integer in ``0..9``.

    Raises
    ------
    CompressionLevelError
        If ``level`` is not an integer or lies outside ``0..9``.
    """

    if isinstance(level, bool) or not isinstance(level, int):
        raise CompressionLevelError(f"Compression level must be an integer, got {level!r}")
    if not NO_COMPRESSION <= level <= BEST_COMPRESSION:
        raise CompressionLevelError(
            f"Compression level must be between {NO_COMPRESSION} and {BEST_COMPRESSION}, got {level}"
        )
    return level


# ---------------------------------------------------------------------------
# Stream handles
# ---------------------------------------------------------------------------


class DeflateWriter:
    """Compress bytes written to it into ``dest``.

    The trailing block is only emitted by :meth:`close`; use the writer as a
    context manager so that happens on every exit path.
    """

    def __init__(self, dest: BinaryIO, level: int = BEST_COMPRESSION) -> None:
        self.level = validate_level(level)
        self._dest = dest
        self._compressor = zlib.compressobj(self.level, zlib.DEFLATED, _WBITS)
        self._closed = False
        self.bytes_in = 0
        self.bytes_out = 0

    def write(self, data: bytes) -> int:
        if self._closed:
            raise CodecError("write to closed DeflateWriter")
        self.bytes_in += len(data)
        self._emit(self._compressor.compress(data))
        return len(data)

    def close(self) -> None:
        """Flush the final block to ``dest``.  Calling twice is a no-op."""

        if self._closed:
            return
        self._closed = True
        self._emit(self._compressor.flush(zlib.Z_FINISH))

    @property
    def closed(self) -> bool:
        return self._closed

    def _emit(self, chunk: bytes) -> None:
        if chunk:
            self._dest.write(chunk)
            self.bytes_out += len(chunk)

    def __enter__(self) -> "DeflateWriter":
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.close()


class DeflateReader:
    """Iterate over the decompressed chunks of ``src``."""

    def __init__(self, src: BinaryIO, *, chunk_size: int = CHUNK_SIZE) -> None:
        self._src = src
        self._chunk_size = chunk_size
        self._decompressor = zlib.decompressobj(_WBITS)
        self._closed = False

    def __iter__(self) -> Iterator[bytes]:
        if self._closed:
            raise CodecError("read from closed DeflateReader")
        decompressor = self._decompressor
        while not decompressor.eof:
            raw = self._src.read(self._chunk_size)
            if not raw:
                raise TruncatedStreamError("compressed stream ended before its final block")
            try:
                out = decompressor.decompress(raw)
            except zlib.error as exc:
                raise DecompressionError(f"corrupt compressed stream: {exc}") from exc
            if out:
                yield out
        if decompressor.unused_data:
            _log.log(TRACE, "ignored %d bytes after end of stream", len(decompressor.unused_data))

    def read(self) -> bytes:
        """Return the whole decompressed payload."""

        return b"".join(self)

    def close(self) -> None:
        self._closed = True

    def __enter__(self) -> "DeflateReader":
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.close()


# ---------------------------------------------------------------------------
# Stream transforms
# ---------------------------------------------------------------------------


def compress_to(src: bytes, dest: BinaryIO, level: int) -> int:
    """Compress ``src`` into ``dest`` at ``level`` and return the bytes written."""

    with DeflateWriter(dest, level) as writer:
        writer.write(src)
    return writer.bytes_out


def decompress_stream(src: BinaryIO, dest: BinaryIO) -> int:
    """Decompress everything readable from ``src`` into ``dest``.

    Returns the number of decompressed bytes written.
    """

    total = 0
    with DeflateReader(src) as reader:
        for chunk in reader:
            dest.write(chunk)
            total += len(chunk)
    return total


# ---------------------------------------------------------------------------
# Buffer transforms
# ---------------------------------------------------------------------------


def compress(data: bytes, level: int) -> bytes:
    """Return ``data`` compressed at ``level``."""

    out = io.BytesIO()
    written = compress_to(data, out, level)
    _log.log(TRACE, "compressed %d -> %d bytes at level %d", len(data), written, level)
    return out.getvalue()


def decompress(data: bytes) -> bytes:
    """Return the payload that produced ``data`` through :func:`compress`."""

    out = io.BytesIO()
    decompress_stream(io.BytesIO(data), out)
    return out.getvalue()


def compress_bytes(data: bytes) -> bytes:
    """Compress ``data`` at :data:`BEST_COMPRESSION`."""

    return compress(data, BEST_COMPRESSION)


def decompress_bytes(data: bytes) -> bytes:
    """Alias of :func:`decompress` paired with :func:`compress_bytes`."""

    return decompress(data)

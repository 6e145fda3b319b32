"""Zlib compression of strings, as used for savegames."""

from __future__ import annotations

import zlib


class CompressionError(Exception):
    """Raised when data cannot be compressed or decompressed."""


def compress_string(data: str | bytes) -> bytes:
    """Compress ``data`` into a zlib stream at the best compression level.

    Text is encoded as UTF-8 first.
    """
    raw = data.encode("utf-8") if isinstance(data, str) else bytes(data)
    try:
        return zlib.compress(raw, zlib.Z_BEST_COMPRESSION)
    except zlib.error as exc:
        raise CompressionError(f"Error while compressing file: {exc}") from exc


def decompress_string(data: bytes) -> bytes:
    """Decompress a zlib stream.

    Anything after the end of the stream is ignored. Raises CompressionError
    if the stream is corrupt or ends early.
    """
    decompressor = zlib.decompressobj()
    try:
        result = decompressor.decompress(bytes(data))
    except zlib.error as exc:
        raise CompressionError(f"Error while decompressing file: {exc}") from exc
    if not decompressor.eof:
        raise CompressionError("Error while decompressing file")
    return result
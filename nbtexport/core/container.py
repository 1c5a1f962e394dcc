"""Gzip framing for exported files.

The stream is assembled by hand rather than through :mod:`gzip` so that the
header carries the exact metadata voxel editors read back: the output file's
own name, the given mtime, and a fixed unix OS byte.
"""

from __future__ import annotations

import contextlib
import logging
import os
import struct
import tempfile
import zlib
from pathlib import Path

from .errors import IoFailure, MalformedOutputPath

logger = logging.getLogger(__name__)

GZIP_MAGIC = b"\x1f\x8b"
DEFLATE = 0x08
FNAME = 0x08
XFL = 0x00
OS_UNIX = 0x03

# os.umask() can only be read by setting it; read once at import
_UMASK = os.umask(0)
os.umask(_UMASK)


def output_filename(path: str | Path) -> bytes:
    name = Path(path).name
    if not name or name in (".", "..") or "\x00" in name:
        raise MalformedOutputPath(path)
    return os.fsencode(name)


def pack_gzip(filename: bytes, mtime: int, payload: bytes) -> bytes:
    header = (
        GZIP_MAGIC
        + struct.pack("<BBIBB", DEFLATE, FNAME, mtime & 0xFFFFFFFF, XFL, OS_UNIX)
        + filename
        + b"\x00"
    )

    compressor = zlib.compressobj(
        zlib.Z_DEFAULT_COMPRESSION, zlib.DEFLATED, -zlib.MAX_WBITS
    )
    body = compressor.compress(payload) + compressor.flush()

    footer = struct.pack("<II", zlib.crc32(payload), len(payload) & 0xFFFFFFFF)
    return header + body + footer


def write_gzip(path: str | Path, mtime: int, payload: bytes) -> None:
    path = Path(path)
    data = pack_gzip(output_filename(path), mtime, payload)
    logger.debug(
        "gzip: %d bytes uncompressed, %d bytes framed", len(payload), len(data)
    )
    _write_atomic(path, data)


def _write_atomic(path: Path, data: bytes) -> None:
    # Nothing appears at the destination until the whole stream is on disk.
    try:
        fd, temp_path = tempfile.mkstemp(
            dir=path.parent, prefix=f".{path.name}.", suffix=".tmp"
        )
    except (OSError, ValueError) as e:
        raise IoFailure(path, e) from e

    try:
        with os.fdopen(fd, "wb") as f:
            f.write(data)
        os.chmod(temp_path, _target_mode(path))
        os.replace(temp_path, path)
    except OSError as e:
        with contextlib.suppress(FileNotFoundError):
            os.unlink(temp_path)
        raise IoFailure(path, e) from e


def _target_mode(path: Path) -> int:
    # mkstemp creates 0600 files; match what a plain open() would have produced
    with contextlib.suppress(FileNotFoundError):
        return path.stat().st_mode & 0o777
    return 0o666 & ~_UMASK

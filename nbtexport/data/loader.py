from __future__ import annotations

import re
from io import BytesIO
from pathlib import Path
from sys import stdin
from typing import TYPE_CHECKING

from msgspec import DecodeError, json

from .schema import RawVoxelMap

if TYPE_CHECKING:
    from .schema import XYZ, VoxelMap

# prevent infinite loop on infinite input (like `yes | nbtexport`)
MAX_PIPE_SIZE = 100 * 1024 * 1024  # 100 MB

_KEY_PATTERN = re.compile(
    r"\(?\s*([+-]?\d+)\s*,\s*([+-]?\d+)\s*,\s*([+-]?\d+)\s*\)?"
)
_decoder = json.Decoder(RawVoxelMap)


class InputError(Exception): ...


def load(path: Path | None) -> VoxelMap:
    return decode(_read_source(_load_source(path)))


def decode(data: bytes | bytearray) -> VoxelMap:
    try:
        raw = _decoder.decode(data)
    except DecodeError:
        raise InputError("Input data does not match expected format.")
    return {parse_coordinates(key): block for key, block in raw.items()}


def parse_coordinates(key: str) -> XYZ:
    match = _KEY_PATTERN.fullmatch(key.strip())
    if not match:
        raise InputError(f"Invalid coordinates {key!r}; expected '(x, y, z)'.")
    x, y, z = map(int, match.groups())
    return x, y, z


def _load_source(path: Path | None) -> Path | BytesIO:
    if path:
        return path

    if stdin.isatty():
        raise InputError(
            "Missing input: Either provide file path with --in, or pipe content to stdin.",
        )

    return BytesIO(stdin.buffer.read(MAX_PIPE_SIZE))


def _read_source(src: Path | BytesIO) -> bytes:
    if isinstance(src, Path):
        return src.read_bytes()
    return src.getvalue()

from __future__ import annotations

from typing import TYPE_CHECKING, Literal, cast

from .errors import UnknownMode
from .schem import encode_schem
from .structure import encode_structure

if TYPE_CHECKING:
    from amulet_nbt import NamedTag

    from ..data.schema import VoxelMap

ModeName = Literal["schem", "structure"]
MODES: tuple[ModeName, ...] = ("schem", "structure")
SUFFIXES: dict[ModeName, str] = {"schem": ".schem", "structure": ".nbt"}


def validate_mode(mode: str) -> ModeName:
    if mode not in MODES:
        raise UnknownMode(mode)
    return cast(ModeName, mode)


def encode(voxels: VoxelMap, mode: str, *, workers: int | None = None) -> NamedTag:
    match validate_mode(mode):
        case "schem":
            return encode_schem(voxels)
        case "structure":
            return encode_structure(voxels, workers=workers)

"""Sponge schematic (.schem) encoding.

Blocks are stored as a dense byte grid indexed by ``x + width * (z + length * y)``,
one palette code per cell, so the palette is capped at 256 entries including air.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

import numpy
from amulet_nbt import ByteArrayTag, CompoundTag, IntTag, NamedTag, ShortTag

from .bounds import calculate_bounds
from .errors import DimensionOverflow, PaletteOverflow
from .nbt import empty_compound_list
from .palette import build_palette

if TYPE_CHECKING:
    from ..data.schema import VoxelMap

logger = logging.getLogger(__name__)

SCHEM_VERSION = 3
DATA_VERSION = 4325
MAX_PALETTE_SIZE = 256
MAX_DIMENSION = 2**15 - 1


def encode_schem(voxels: VoxelMap) -> NamedTag:
    bounds = calculate_bounds(voxels)
    size = bounds.size
    for axis, value in (("Width", size.width), ("Height", size.height), ("Length", size.length)):
        if value > MAX_DIMENSION:
            raise DimensionOverflow(
                f"Schematic {axis} {value} exceeds the format's limit of {MAX_DIMENSION}."
            )

    palette = build_palette(voxels)
    if len(palette) > MAX_PALETTE_SIZE:
        raise PaletteOverflow(len(palette), MAX_PALETTE_SIZE)

    width, length = size.width, size.length
    grid = bytearray(size.volume)
    for coords, name in voxels.items():
        x, y, z = bounds.to_local(coords)
        grid[x + width * (z + length * y)] = palette[name]

    logger.debug(
        "schem: %dx%dx%d, %d palette entries, %d placed blocks",
        size.width,
        size.height,
        size.length,
        len(palette),
        len(voxels),
    )

    return NamedTag(
        CompoundTag({
            "Schematic": CompoundTag({
                "Version": IntTag(SCHEM_VERSION),
                "DataVersion": IntTag(DATA_VERSION),
                "Width": ShortTag(size.width),
                "Height": ShortTag(size.height),
                "Length": ShortTag(size.length),
                "Blocks": CompoundTag({
                    "BlockEntities": empty_compound_list(),
                    "Palette": CompoundTag({
                        name: IntTag(code) for name, code in palette.codes.items()
                    }),
                    # NBT byte arrays are signed; reinterpret without changing the bytes
                    "Data": ByteArrayTag(numpy.frombuffer(bytes(grid), dtype=numpy.int8)),
                }),
            })
        }),
        "",
    )

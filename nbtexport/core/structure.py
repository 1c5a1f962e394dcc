"""Structure block (.nbt) encoding.

Every cell of the bounding box gets a record, absent cells included (as air).
Records are built per x-slice on a thread pool and joined in slice order, which
gives the same list as a sequential x, y, z sweep.
"""

from __future__ import annotations

import logging
from concurrent.futures import ThreadPoolExecutor
from itertools import chain
from typing import TYPE_CHECKING

from amulet_nbt import CompoundTag, IntTag, ListTag, NamedTag

from .bounds import calculate_bounds
from .nbt import COMPOUND_TAG_ID, empty_compound_list, int_list, name_entry
from .palette import build_palette

if TYPE_CHECKING:
    from ..data.schema import VoxelMap
    from .bounds import Bounds
    from .palette import Palette

logger = logging.getLogger(__name__)

DATA_VERSION = 3953


def encode_structure(voxels: VoxelMap, *, workers: int | None = None) -> NamedTag:
    bounds = calculate_bounds(voxels)
    size = bounds.size
    palette = build_palette(voxels)

    def build_slice(x: int) -> list[CompoundTag]:
        return _build_slice(voxels, bounds, palette, x)

    with ThreadPoolExecutor(max_workers=workers) as executor:
        # map() yields in submission order, not completion order
        slices = list(executor.map(build_slice, range(size.width)))

    blocks = ListTag(list(chain.from_iterable(slices)), COMPOUND_TAG_ID)

    logger.debug(
        "structure: %dx%dx%d, %d palette entries, %d records",
        size.width,
        size.height,
        size.length,
        len(palette),
        len(blocks),
    )

    return NamedTag(
        CompoundTag({
            "blocks": blocks,
            "entities": empty_compound_list(),
            "palette": ListTag([name_entry(name) for name in palette.names], COMPOUND_TAG_ID),
            "size": int_list(size.width, size.height, size.length),
            "DataVersion": IntTag(DATA_VERSION),
        }),
        "",
    )


def _build_slice(
    voxels: VoxelMap, bounds: Bounds, palette: Palette, x: int
) -> list[CompoundTag]:
    size = bounds.size
    origin_x, origin_y, origin_z = bounds.origin
    records = []
    for y in range(size.height):
        for z in range(size.length):
            name = voxels.get((origin_x + x, origin_y + y, origin_z + z))
            state = 0 if name is None else palette[name]
            records.append(
                CompoundTag({"pos": int_list(x, y, z), "state": IntTag(state)})
            )
    return records

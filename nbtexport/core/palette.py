from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from ..data.schema import BlockName, VoxelMap

AIR: BlockName = "minecraft:air"


@dataclass(frozen=True)
class Palette:
    codes: dict[BlockName, int]
    names: list[BlockName]

    def __len__(self) -> int:
        return len(self.names)

    def __getitem__(self, name: BlockName) -> int:
        return self.codes[name]


def build_palette(voxels: VoxelMap) -> Palette:
    """Assign integer codes to the distinct block names of a voxel map.

    Air always takes code 0, whether or not it occurs. The remaining names
    are numbered from 1 in order of first appearance when the voxels are
    visited in ascending (x, y, z) order, so the result does not depend on
    the mapping's own iteration order.
    """
    codes = {AIR: 0}
    names = [AIR]
    for coords in sorted(voxels):
        name = voxels[coords]
        if name not in codes:
            codes[name] = len(names)
            names.append(name)
    return Palette(codes, names)

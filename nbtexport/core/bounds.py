from __future__ import annotations

from typing import TYPE_CHECKING, NamedTuple

from ..data.schema import Size
from .errors import DimensionOverflow, EmptyInput

if TYPE_CHECKING:
    from ..data.schema import XYZ, VoxelMap

INT32_MIN = -(2**31)
INT32_MAX = 2**31 - 1


class Bounds(NamedTuple):
    min_x: int
    max_x: int
    min_y: int
    max_y: int
    min_z: int
    max_z: int

    @property
    def origin(self) -> XYZ:
        return self.min_x, self.min_y, self.min_z

    @property
    def size(self) -> Size:
        return Size(
            width=self.max_x - self.min_x + 1,
            height=self.max_y - self.min_y + 1,
            length=self.max_z - self.min_z + 1,
        )

    def to_local(self, coords: XYZ) -> XYZ:
        x, y, z = coords
        return x - self.min_x, y - self.min_y, z - self.min_z


def calculate_bounds(voxels: VoxelMap) -> Bounds:
    if not voxels:
        raise EmptyInput

    xs, ys, zs = zip(*voxels)
    bounds = Bounds(
        min_x=min(xs),
        max_x=max(xs),
        min_y=min(ys),
        max_y=max(ys),
        min_z=min(zs),
        max_z=max(zs),
    )

    for axis, value in zip(("min_x", "max_x", "min_y", "max_y", "min_z", "max_z"), bounds):
        if not INT32_MIN <= value <= INT32_MAX:
            raise DimensionOverflow(
                f"Coordinate {axis}={value} does not fit in a signed 32-bit integer."
            )

    size = bounds.size
    for axis, value in (("width", size.width), ("height", size.height), ("length", size.length)):
        if value > INT32_MAX:
            raise DimensionOverflow(
                f"Structure {axis} {value} does not fit in a signed 32-bit integer."
            )

    return bounds

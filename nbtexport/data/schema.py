from msgspec import Struct

BlockName = str  # "minecraft:stone"
XYZ = tuple[int, int, int]
VoxelMap = dict[XYZ, BlockName]

StrCoords = str  # "(x, y, z)"
RawVoxelMap = dict[StrCoords, BlockName]


class Size(Struct, frozen=True):
    width: int
    height: int
    length: int

    @property
    def volume(self) -> int:
        return self.width * self.height * self.length

import pytest

from nbtexport.core.errors import DimensionOverflow, PaletteOverflow
from nbtexport.core.schem import DATA_VERSION, SCHEM_VERSION, encode_schem


def _schematic(voxels):
    return encode_schem(voxels).compound["Schematic"]


def _data(schematic) -> bytes:
    return schematic["Blocks"]["Data"].np_array.tobytes()


def test_header_fields(voxels):
    schematic = _schematic(voxels)
    assert schematic["Version"].py_int == SCHEM_VERSION
    assert schematic["DataVersion"].py_int == DATA_VERSION
    assert schematic["Width"].py_int == 2
    assert schematic["Height"].py_int == 2
    assert schematic["Length"].py_int == 1
    assert len(schematic["Blocks"]["BlockEntities"]) == 0


def test_palette(voxels):
    palette = _schematic(voxels)["Blocks"]["Palette"]
    assert {name: tag.py_int for name, tag in palette.items()} == {
        "minecraft:air": 0,
        "minecraft:stone": 1,
        "minecraft:dirt": 2,
    }


def test_grid(voxels):
    assert _data(_schematic(voxels)) == bytes([1, 1, 2, 0])


def test_grid_uses_y_major_index_with_offset_origin():
    voxels = {(10, 20, 30): "minecraft:stone", (11, 21, 32): "minecraft:dirt"}
    data = _data(_schematic(voxels))
    width, length = 2, 3
    assert len(data) == 2 * 2 * 3
    assert data[0] == 1
    assert data[1 + width * (2 + length * 1)] == 2
    assert data.count(0) == len(data) - 2


def test_largest_palette_fits_in_a_byte():
    voxels = {(x, 0, 0): f"minecraft:block_{x:03}" for x in range(255)}
    data = _data(_schematic(voxels))
    assert data[254] == 255


def test_palette_overflow():
    voxels = {(x, 0, 0): f"minecraft:block_{x:03}" for x in range(256)}
    with pytest.raises(PaletteOverflow):
        encode_schem(voxels)


def test_dimension_overflow():
    with pytest.raises(DimensionOverflow):
        encode_schem({(0, 0, 0): "a", (2**15, 0, 0): "b"})

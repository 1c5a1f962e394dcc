from nbtexport.core.nbt import serialize
from nbtexport.core.structure import DATA_VERSION, encode_structure


def _records(compound):
    return [
        (tuple(tag.py_int for tag in record["pos"]), record["state"].py_int)
        for record in compound["blocks"]
    ]


def test_scenario(voxels):
    compound = encode_structure(voxels).compound
    assert [entry["Name"].py_str for entry in compound["palette"]] == [
        "minecraft:air",
        "minecraft:stone",
        "minecraft:dirt",
    ]
    assert [tag.py_int for tag in compound["size"]] == [2, 2, 1]
    assert compound["DataVersion"].py_int == DATA_VERSION
    assert len(compound["entities"]) == 0
    assert _records(compound) == [
        ((0, 0, 0), 1),
        ((0, 1, 0), 2),
        ((1, 0, 0), 1),
        ((1, 1, 0), 0),
    ]


def test_every_cell_is_present_with_local_positions():
    voxels = {(-3, 5, 100): "minecraft:stone", (-1, 6, 102): "minecraft:glass"}
    records = _records(encode_structure(voxels).compound)
    assert len(records) == 3 * 2 * 3
    assert [pos for pos, _ in records] == [
        (x, y, z) for x in range(3) for y in range(2) for z in range(3)
    ]
    states = dict(records)
    assert states[0, 0, 0] == 1
    assert states[2, 1, 2] == 2
    assert sum(1 for state in states.values() if state == 0) == len(records) - 2


def test_output_independent_of_worker_count():
    voxels = {
        (x, y, z): f"minecraft:block_{(x * 7 + y * 3 + z) % 5}"
        for x in range(9)
        for y in range(3)
        for z in range(4)
        if (x + y + z) % 3
    }
    expected = serialize(encode_structure(voxels, workers=1))
    for workers in (2, 4, 16):
        assert serialize(encode_structure(voxels, workers=workers)) == expected


def test_palette_has_no_byte_ceiling():
    voxels = {(x, 0, 0): f"minecraft:block_{x:03}" for x in range(300)}
    records = _records(encode_structure(voxels).compound)
    assert records[-1] == ((299, 0, 0), 300)

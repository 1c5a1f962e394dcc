from io import BytesIO

import pytest

from nbtexport.data.loader import InputError, decode, load, parse_coordinates


@pytest.mark.parametrize(
    "key, expected",
    [
        ("(0, 6, 23)", (0, 6, 23)),
        ("(-1,-2,-3)", (-1, -2, -3)),
        (" ( 4 , +5 , 6 ) ", (4, 5, 6)),
        ("7, 8, 9", (7, 8, 9)),
    ],
)
def test_parse_coordinates(key, expected):
    assert parse_coordinates(key) == expected


@pytest.mark.parametrize("key", ["(1, 2)", "(1, 2, 3, 4)", "(a, b, c)", "(1.5, 2, 3)", ""])
def test_invalid_coordinates(key):
    with pytest.raises(InputError):
        parse_coordinates(key)


def test_decode():
    data = b'{"(0, 0, 0)": "minecraft:stone", "(1, 0, 0)": "minecraft:dirt"}'
    assert decode(data) == {
        (0, 0, 0): "minecraft:stone",
        (1, 0, 0): "minecraft:dirt",
    }


@pytest.mark.parametrize(
    "data", [b"not json", b"[]", b'{"(0, 0, 0)": 1}', b'{"(0, 0)": "minecraft:stone"}']
)
def test_decode_rejects_malformed_input(data):
    with pytest.raises(InputError):
        decode(data)


def test_load_file(tmp_path):
    path = tmp_path / "blocks.json"
    path.write_text('{"(3, 2, 1)": "minecraft:glass"}')
    assert load(path) == {(3, 2, 1): "minecraft:glass"}


class _Stdin:
    def __init__(self, data: bytes, *, tty: bool):
        self.buffer = BytesIO(data)
        self._tty = tty

    def isatty(self):
        return self._tty


def test_load_stdin(monkeypatch):
    monkeypatch.setattr(
        "nbtexport.data.loader.stdin",
        _Stdin(b'{"(1, 2, 3)": "minecraft:stone"}', tty=False),
    )
    assert load(None) == {(1, 2, 3): "minecraft:stone"}


def test_load_refuses_interactive_stdin(monkeypatch):
    monkeypatch.setattr("nbtexport.data.loader.stdin", _Stdin(b"", tty=True))
    with pytest.raises(InputError, match="Missing input"):
        load(None)

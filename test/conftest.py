import pytest


@pytest.fixture(autouse=True)
def mock_console(monkeypatch):
    from nbtexport.cli.console import Console

    for attr in dir(Console):
        if not attr.startswith("_") and callable(getattr(Console, attr)):
            monkeypatch.setattr(Console, attr, lambda *a, **k: None)
    monkeypatch.setattr(Console, "status", lambda text, fn: fn())


@pytest.fixture
def voxels():
    return {
        (0, 0, 0): "minecraft:stone",
        (1, 0, 0): "minecraft:stone",
        (0, 1, 0): "minecraft:dirt",
    }

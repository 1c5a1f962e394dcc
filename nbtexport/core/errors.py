from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from pathlib import Path


class ExportError(Exception): ...


class EmptyInput(ExportError):
    def __init__(self):
        super().__init__("Nothing to export: the voxel map is empty.")


class UnknownMode(ExportError):
    def __init__(self, mode: str):
        super().__init__(f"Unknown export mode {mode!r}; expected 'schem' or 'structure'.")
        self.mode = mode


class PaletteOverflow(ExportError):
    def __init__(self, size: int, limit: int):
        super().__init__(
            f"Palette has {size} entries, but the schem format holds at most {limit}."
        )
        self.size = size
        self.limit = limit


class DimensionOverflow(ExportError): ...


class MalformedOutputPath(ExportError):
    def __init__(self, path: str | Path):
        super().__init__(f"Output path '{path}' has no file name.")
        self.path = path


class IoFailure(ExportError):
    def __init__(self, path: str | Path, reason: Exception):
        detail = getattr(reason, "strerror", None) or reason
        super().__init__(f"Failed to write '{path}': {detail}")
        self.path = path

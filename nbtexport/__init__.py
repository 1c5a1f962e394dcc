__version__ = "0.1.0"

from .core.errors import (  # noqa: E402
    DimensionOverflow,
    EmptyInput,
    ExportError,
    IoFailure,
    MalformedOutputPath,
    PaletteOverflow,
    UnknownMode,
)
from .core.exporter import export  # noqa: E402

__all__ = [
    "DimensionOverflow",
    "EmptyInput",
    "ExportError",
    "IoFailure",
    "MalformedOutputPath",
    "PaletteOverflow",
    "UnknownMode",
    "export",
]

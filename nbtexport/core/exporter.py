from __future__ import annotations

import logging
import time
from dataclasses import dataclass
from pathlib import Path
from typing import TYPE_CHECKING

from .container import output_filename, write_gzip
from .errors import EmptyInput
from .formats import encode, validate_mode
from .nbt import serialize

if TYPE_CHECKING:
    from ..data.schema import VoxelMap
    from .formats import ModeName

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ExportConfig:
    mode: ModeName
    mtime: int | None = None
    workers: int | None = None


def export(
    voxels: VoxelMap,
    output_path: str | Path,
    mode: str,
    *,
    mtime: int | None = None,
    workers: int | None = None,
) -> None:
    """Encode a voxel map as ``mode`` and write it gzip-framed to ``output_path``.

    All input checks happen before anything touches the filesystem, and the
    file only appears once it is complete, so a failed export leaves no file
    behind.

    Raises:
        UnknownMode: ``mode`` is neither ``"schem"`` nor ``"structure"``.
        EmptyInput: ``voxels`` has no entries.
        MalformedOutputPath: ``output_path`` has no file name component.
        DimensionOverflow: a coordinate or dimension does not fit the format.
        PaletteOverflow: more than 255 distinct non-air blocks in schem mode.
        IoFailure: the file could not be written.
        ValueError: ``workers`` is less than 1.
    """
    if workers is not None and workers < 1:
        raise ValueError(f"workers must be at least 1, got {workers}")
    validate_mode(mode)
    if not voxels:
        raise EmptyInput
    output_filename(output_path)

    tree = encode(voxels, mode, workers=workers)
    payload = serialize(tree)

    if mtime is None:
        mtime = int(time.time())

    write_gzip(output_path, mtime, payload)
    logger.debug("exported %d blocks as %s to %s", len(voxels), mode, output_path)


def export_with(config: ExportConfig, voxels: VoxelMap, output_path: str | Path) -> None:
    export(
        voxels, output_path, config.mode, mtime=config.mtime, workers=config.workers
    )

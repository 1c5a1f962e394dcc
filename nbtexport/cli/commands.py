from __future__ import annotations

import logging
from enum import Enum
from pathlib import Path
from typing import TYPE_CHECKING, Annotated, NoReturn

import typer
from humanize import naturalsize
from rich.logging import RichHandler
from typer import Context, Option

from .. import __version__
from ..core.errors import ExportError
from ..core.exporter import ExportConfig, export_with
from ..core.formats import SUFFIXES
from ..data import loader, watcher
from ..data.loader import InputError
from .console import Console

if TYPE_CHECKING:
    from ..data.schema import VoxelMap


class Mode(Enum):
    schem = "schem"
    structure = "structure"


def _show_version(ctx: Context, value: bool):
    if value:
        print(__version__)
        ctx.exit()


def _show_help(ctx: Context, value: bool):
    if value:
        typer.echo(ctx.get_help())
        ctx.exit()


def _default_mode(output_path: Path) -> Mode:
    if output_path.suffix == SUFFIXES["schem"]:
        return Mode.schem
    return Mode.structure


def _enable_logging():
    logging.basicConfig(
        level=logging.DEBUG,
        format="%(message)s",
        handlers=[RichHandler(show_path=False)],
    )


def run(
    output_path: Annotated[
        Path,
        Option(
            "--out",
            "-o",
            help="Destination file (.schem or .nbt)",
            show_default=False,
            metavar="file",
            rich_help_panel="Input & output",
            dir_okay=False,
        ),
    ],
    input_path: Annotated[
        Path | None,
        Option(
            "--in",
            "-i",
            help='Voxel map as JSON, keyed by "(x, y, z)"',
            show_default="read from stdin",
            metavar="file",
            rich_help_panel="Input & output",
            exists=True,
            file_okay=True,
            dir_okay=False,
        ),
    ] = None,
    watch: Annotated[
        bool,
        Option(
            "--watch",
            help="Watch input and re-export on changes",
            rich_help_panel="Input & output",
        ),
    ] = False,
    mode: Annotated[
        Mode | None,
        Option(
            "--mode",
            "-m",
            help="Output format",
            show_default="from output suffix",
            rich_help_panel="Format",
            case_sensitive=False,
        ),
    ] = None,
    mtime: Annotated[
        int | None,
        Option(
            "--mtime",
            help="Modification time stored in the gzip header",
            show_default="current time",
            rich_help_panel="Format",
            metavar="seconds",
        ),
    ] = None,
    workers: Annotated[
        int | None,
        Option(
            "--workers",
            help="Threads used to build structure files",
            show_default="automatic",
            rich_help_panel="Format",
            min=1,
        ),
    ] = None,
    verbose: Annotated[
        bool,
        Option("--verbose", "-v", help="Show debug logging"),
    ] = False,
    _version: Annotated[
        bool,
        Option("--version", is_eager=True, hidden=True, callback=_show_version),
    ] = False,
    _help: Annotated[
        bool,
        Option("--help", is_eager=True, hidden=True, callback=_show_help),
    ] = False,
):
    if verbose:
        _enable_logging()

    config = ExportConfig(
        mode=(mode or _default_mode(output_path)).value,
        mtime=mtime,
        workers=workers,
    )

    if not watch:
        try:
            _export(config, loader.load(input_path), output_path)
        except (InputError, ExportError) as e:
            _fail(str(e))
        return

    if not input_path:
        _fail("--watch requires an input file.")

    try:
        for voxels in watcher.watch(input_path):
            try:
                _export(config, voxels, output_path)
            except ExportError as e:
                Console.warn(str(e))
    except InputError as e:
        _fail(str(e))


def _fail(message: str) -> NoReturn:
    Console.warn(message)
    raise typer.Exit(code=2)


def _export(config: ExportConfig, voxels: VoxelMap, output_path: Path):
    export_with(config, voxels, output_path)
    Console.success(
        "Exported {blocks} as {mode} to {path} ({size}).",
        blocks=f"{len(voxels)} blocks",
        mode=config.mode,
        path=output_path,
        size=naturalsize(output_path.stat().st_size),
    )

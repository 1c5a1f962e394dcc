from __future__ import annotations

import os
import time
from threading import Thread
from typing import TYPE_CHECKING

import watchfiles

from ..cli.console import Console
from .loader import InputError, decode

if TYPE_CHECKING:
    from collections.abc import Generator
    from pathlib import Path

    from .schema import VoxelMap


def watch(path: Path) -> Generator[VoxelMap]:
    data_stream = _file_stream(path)
    is_first_run = True

    while True:
        try:
            if is_first_run:
                voxels = next(data_stream)
            else:
                Console.newline()
                voxels = Console.status("Waiting for changes", data_stream.__next__)
        except StopIteration:
            return
        is_first_run = False
        yield voxels


def _file_stream(path: Path) -> Generator[VoxelMap]:
    def trigger_initial_run():
        # Need a way to trigger the first run.
        # Only alternative to yield once before the watch loop;
        # but then changes during the initial run would be missed.
        while not triggered:
            time.sleep(0.2)
            os.utime(path)

    triggered = False
    trigger_thread = Thread(target=trigger_initial_run, daemon=True)
    trigger_thread.start()

    is_first_run = True
    for _ in watchfiles.watch(path, debounce=0, rust_timeout=0):
        triggered = True
        try:
            yield decode(path.read_bytes())
            is_first_run = False
        except InputError:
            # Ignore read errors on subsequent runs
            # because file may temporarily be in an invalid state
            if is_first_run:
                raise

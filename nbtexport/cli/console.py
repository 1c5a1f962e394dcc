from __future__ import annotations

from typing import TYPE_CHECKING, TypeVar

from rich.console import Console as _Console
from rich.panel import Panel

if TYPE_CHECKING:
    from collections.abc import Callable

T = TypeVar("T")

_console = _Console(stderr=True)
_print = _console.print


class Console:
    @staticmethod
    def newline():
        _print()

    @staticmethod
    def status(text: str, fn: Callable[[], T]) -> T:
        with _console.status(text):
            return fn()

    @staticmethod
    def success(text: str, **kwargs):
        if kwargs:
            text = text.format(**{
                k: f"[bold green]{v}[/bold green]" for k, v in kwargs.items()
            })
        _print(text, style="dim green")

    @staticmethod
    def warn(text: str):
        _print(Panel(text, expand=False, border_style="red"))

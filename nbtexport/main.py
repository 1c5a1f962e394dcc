from typer import Typer

from .cli.commands import run


def create_app() -> Typer:
    app = Typer(add_completion=False)
    app.command(no_args_is_help=True)(run)
    return app


def main():
    create_app()()

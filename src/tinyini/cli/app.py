from __future__ import annotations

import typer

from tinyini import __version__
from tinyini.cli.commands.check import check_cmd
from tinyini.cli.commands.get import get_cmd
from tinyini.cli.commands.init import init_cmd
from tinyini.cli.commands.show import show_cmd

app = typer.Typer(
    name="tinyini",
    help="Check and inspect INI-like configuration files.",
    add_completion=False,
    no_args_is_help=True,
)


def _version_callback(value: bool) -> None:
    if value:
        typer.echo(f"tinyini {__version__}")
        raise typer.Exit(0)


@app.callback()
def main(
    version: bool = typer.Option(
        False, "--version", help="Show version and exit.", callback=_version_callback, is_eager=True
    ),
) -> None:
    pass


app.command("check")(check_cmd)
app.command("show")(show_cmd)
app.command("get")(get_cmd)
app.command("init")(init_cmd)


if __name__ == "__main__":  # pragma: no cover
    app()

"""Command-line entry point.

The Typer application resolves the project root, configuration file and
verbosity once, then hands them to the command groups through ctx.obj.
"""

from pathlib import Path
from typing import Annotated

import typer

from assetsweep import __version__
from assetsweep.cli.commands import assets, components, init
from assetsweep.utils.formatting import configure_logging

app = typer.Typer(
    name="assetsweep",
    help="Find and remove unused images and Blade components.",
    no_args_is_help=True,
    rich_markup_mode="rich",
    context_settings={"help_option_names": ["-h", "--help"]},
)


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        typer.echo(f"assetsweep version {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    ctx: typer.Context,
    version: Annotated[
        bool | None,
        typer.Option(
            "--version",
            "-V",
            callback=version_callback,
            is_eager=True,
            help="Show version and exit.",
        ),
    ] = None,
    path: Annotated[
        Path | None,
        typer.Option(
            "--path",
            "-p",
            help="Project root directory (default: current directory).",
        ),
    ] = None,
    config: Annotated[
        Path | None,
        typer.Option(
            "--config",
            "-c",
            help="Configuration file (default: <project>/assetsweep.toml).",
        ),
    ] = None,
    verbose: Annotated[
        bool,
        typer.Option(
            "--verbose",
            "-v",
            help="Enable verbose output.",
        ),
    ] = False,
    quiet: Annotated[
        bool,
        typer.Option(
            "--quiet",
            "-q",
            help="Suppress non-essential output.",
        ),
    ] = False,
) -> None:
    """assetsweep - Find and remove unused images and Blade components.

    Scan a project for files nothing refers to, review the generated
    manifest, then clean.
    """
    configure_logging(verbose=verbose, quiet=quiet)

    # Subcommands resolve the project from these
    ctx.ensure_object(dict)
    ctx.obj["verbose"] = verbose
    ctx.obj["quiet"] = quiet
    ctx.obj["base_path"] = path
    ctx.obj["config_path"] = config


app.add_typer(assets.app, name="assets")
app.add_typer(components.app, name="components")
app.add_typer(init.app, name="init")


if __name__ == "__main__":
    app()

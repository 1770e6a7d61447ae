"""Configuration bootstrap command.

Creates an assetsweep.toml file holding the default configuration.
"""

from typing import Annotated

import typer

from assetsweep.cli.types import get_project
from assetsweep.core.config import ConfigError, SweepConfig, save_config
from assetsweep.utils.formatting import (
    console,
    print_error,
    print_info,
    print_success,
    print_warning,
)

app = typer.Typer(
    help="Create a default configuration file.",
    invoke_without_command=True,
)


@app.callback(invoke_without_command=True)
def init_config(
    ctx: typer.Context,
    force: Annotated[
        bool,
        typer.Option(
            "--force",
            "-f",
            help="Overwrite an existing configuration file.",
        ),
    ] = False,
) -> None:
    """Write the default configuration to the project.

    Every key is optional: edit the file to override only what your
    project lays out differently.

    Examples:
        assetsweep init                  # Create assetsweep.toml in the current directory
        assetsweep -p ../site init       # Create it in another project
        assetsweep init --force          # Overwrite an existing file
    """
    project = get_project(ctx)
    config_path = project.config_path

    if config_path.exists():
        if not force:
            print_error(f"Configuration already exists: {config_path}")
            print_info("Use --force to overwrite.")
            raise typer.Exit(code=1)
        print_warning(f"Overwriting existing configuration: {config_path}")

    try:
        saved_path = save_config(SweepConfig(), config_path)
    except ConfigError as e:
        print_error(f"Failed to save configuration: {e}")
        raise typer.Exit(code=1) from e

    print_success(f"Configuration created: {saved_path}")
    console.print(
        "[muted]Run `assetsweep assets scan` or `assetsweep components scan` next.[/muted]"
    )

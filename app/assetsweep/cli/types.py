"""Shared types and utilities for CLI commands.

This module resolves the project root and configuration from the
global options so every command handles them the same way.
"""

from dataclasses import dataclass
from pathlib import Path

import typer

from assetsweep.core.config import ConfigError, SweepConfig, load_config
from assetsweep.core.paths import get_config_path
from assetsweep.utils.formatting import print_error, print_info


@dataclass(frozen=True, slots=True)
class Project:
    """Project root and configuration file selected on the command line."""

    base_path: Path
    config_path: Path


def get_project(ctx: typer.Context) -> Project:
    """Resolve the project from the global options.

    Exits with code 1 if the project root is not a directory.
    """
    obj = ctx.obj or {}
    base_path = (obj.get("base_path") or Path.cwd()).resolve()

    if not base_path.is_dir():
        print_error(f"Project directory not found: {base_path}")
        raise typer.Exit(code=1)

    config_path = obj.get("config_path") or get_config_path(base_path)
    return Project(base_path=base_path, config_path=config_path)


def load_project_config(project: Project) -> SweepConfig:
    """Load the project configuration, exiting with code 1 on errors."""
    try:
        return load_config(project.config_path)
    except ConfigError as e:
        print_error(str(e))
        print_info("Fix the configuration file or run `assetsweep init --force`.")
        raise typer.Exit(code=1) from e

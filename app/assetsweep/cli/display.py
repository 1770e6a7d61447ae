"""Shared Rich display functions for scan and clean results.

Provides table builders and summary printers used by the asset and
component commands.
"""

from collections.abc import Sequence
from pathlib import Path

import typer
from rich.table import Table

from assetsweep.assets.manifest import AssetEntry
from assetsweep.components.manifest import ComponentEntry
from assetsweep.core.cleaner import Statistics
from assetsweep.core.operator import DeletionResult
from assetsweep.utils.formatting import console, print_info, print_success, print_warning
from assetsweep.utils.sizes import human_file_size

# Maximum number of entries listed after a scan
SCAN_PREVIEW_LIMIT = 20


def create_assets_table(entries: Sequence[AssetEntry], title: str = "Unused Assets") -> Table:
    """Create a Rich table listing asset manifest entries.

    Args:
        entries: Entries to display.
        title: Table title.

    Returns:
        Rich Table with Path, Size and Modified columns.
    """
    table = Table(
        title=title,
        show_header=True,
        header_style="bold_header",
        border_style="border",
    )
    table.add_column("Path", no_wrap=True)
    table.add_column("Size", justify="right", width=10)
    table.add_column("Modified", style="muted")

    for entry in entries:
        table.add_row(entry.path, entry.size_human, entry.modified_at or "-")

    return table


def create_components_table(
    entries: Sequence[ComponentEntry],
    title: str = "Unused Components",
) -> Table:
    """Create a Rich table listing component manifest entries.

    Args:
        entries: Entries to display.
        title: Table title.

    Returns:
        Rich Table with Component, Type, Files and Size columns.
    """
    table = Table(
        title=title,
        show_header=True,
        header_style="bold_header",
        border_style="border",
    )
    table.add_column("Component", no_wrap=True)
    table.add_column("Type", width=10)
    table.add_column("Files", style="muted")
    table.add_column("Size", justify="right", width=10)

    for entry in entries:
        if not entry.is_class_based:
            kind = "anonymous"
        elif entry.view_path is None:
            kind = "inline"
        else:
            kind = "class"
        files = "\n".join(p for p in (entry.view_path, entry.class_path) if p)
        table.add_row(f"<x-{entry.name}>", kind, files, entry.size_human)

    return table


def create_statistics_table(stats: Statistics, title: str) -> Table:
    """Create a Rich table summarizing scan statistics."""
    table = Table(
        title=title,
        show_header=True,
        header_style="bold_header",
        border_style="border",
    )
    table.add_column("Metric")
    table.add_column("Count", justify="right")
    table.add_column("Size", justify="right")

    table.add_row("Total", str(stats.total), stats.total_size_human)
    table.add_row("Used", str(stats.used), human_file_size(stats.total_size - stats.unused_size))
    table.add_row(
        "[warning]Unused[/warning]",
        f"[warning]{stats.unused}[/warning]",
        f"[warning]{stats.unused_size_human}[/warning]",
    )

    return table


def print_preview_footer(total: int, shown: int, manifest_path: str, noun: str) -> None:
    """Print the summary shown below a scan preview.

    Args:
        total: Number of unused entries in the manifest.
        shown: Number of entries listed in the table.
        manifest_path: Manifest location relative to the project root.
        noun: Plural name of the candidates (e.g., "assets").
    """
    if shown < total:
        console.print(f"[dim]... and {total - shown} more[/dim]")
    console.print()
    print_info(f"Found {total} unused {noun}. Manifest written to {manifest_path}")
    console.print(f"[muted]Review {manifest_path} and remove entries you want to keep.[/muted]")


def confirm_deletion(count: int, noun: str) -> None:
    """Ask before deleting, exiting with code 0 if the user declines."""
    confirmed = typer.confirm(f"\nProceed with deleting {count} {noun}?", default=False)
    if not confirmed:
        print_info("Aborted.")
        raise typer.Exit(code=0)


def print_deletion_result(
    result: DeletionResult,
    noun: str,
    dry_run: bool = False,
    backup_root: Path | None = None,
) -> None:
    """Print the outcome of a delete run.

    Args:
        result: Result returned by the cleaner.
        noun: Plural name of the candidates (e.g., "assets").
        dry_run: Whether nothing was actually deleted.
        backup_root: Backup location, shown when files were backed up.
    """
    size = human_file_size(result.total_size)

    if result.scanned is not None:
        print_info(f"Scanned {result.scanned} {noun}.")

    if dry_run:
        print_info(f"[DRY-RUN] Would delete {result.deleted} {noun} ({size}).")
    elif result.deleted:
        print_success(f"Deleted {result.deleted} {noun} ({size}).")
    else:
        print_info(f"No {noun} deleted.")

    if result.backed_up and backup_root is not None:
        console.print(f"[muted]Backed up {result.backed_up} file(s) to {backup_root}[/muted]")

    if result.failed:
        print_warning(f"{len(result.failed)} failed:")
        for failure in result.failed:
            console.print(f"  [error]x[/error] {failure}")

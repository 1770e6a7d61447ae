"""Blade component scanning and cleanup commands.

Provides commands to find unused components, delete them from the
reviewed manifest (or in one pass) and look up where a component is
referenced.
"""

from typing import Annotated

import typer

from assetsweep.cli.display import (
    SCAN_PREVIEW_LIMIT,
    confirm_deletion,
    create_components_table,
    create_statistics_table,
    print_deletion_result,
    print_preview_footer,
)
from assetsweep.cli.types import get_project, load_project_config
from assetsweep.components.cleaner import BladeCleaner
from assetsweep.core.manifest import ManifestError
from assetsweep.utils.formatting import console, print_error, print_info, print_success

app = typer.Typer(
    help="Find and remove unused Blade components.",
    no_args_is_help=True,
)


def _get_cleaner(ctx: typer.Context, backup: bool | None = None) -> BladeCleaner:
    """Build a component cleaner for the selected project."""
    project = get_project(ctx)
    config = load_project_config(project)
    return BladeCleaner.from_config(config.components, project.base_path, backup=backup)


@app.command()
def scan(
    ctx: typer.Context,
    stats: Annotated[
        bool,
        typer.Option("--stats", help="Show statistics only, without writing a manifest."),
    ] = False,
) -> None:
    """Scan for unused components and write the review manifest."""
    cleaner = _get_cleaner(ctx)

    if stats:
        console.print(create_statistics_table(cleaner.get_statistics(), "Component Statistics"))
        return

    print_info("Scanning for unused components...")
    try:
        manifest = cleaner.generate_manifest()
    except ManifestError as e:
        print_error(str(e))
        raise typer.Exit(code=1) from e

    if not manifest.components:
        cleaner.manifest.delete()
        print_success(f"No unused components found ({manifest.total_scanned} scanned).")
        return

    preview = manifest.components[:SCAN_PREVIEW_LIMIT]
    console.print(create_components_table(preview))
    print_preview_footer(
        len(manifest.components), len(preview), cleaner.manifest.manifest_path, "components"
    )
    console.print(f"[muted]Total size: {manifest.total_size_human}[/muted]")
    console.print("[muted]Then run `assetsweep components clean`.[/muted]")


@app.command()
def clean(
    ctx: typer.Context,
    dry_run: Annotated[
        bool,
        typer.Option("--dry-run", help="Show what would be deleted."),
    ] = False,
    force: Annotated[
        bool,
        typer.Option("--force", "-f", help="Skip confirmation prompt."),
    ] = False,
    trust: Annotated[
        bool,
        typer.Option("--trust", help="Scan and delete in one pass, without a manifest."),
    ] = False,
    no_backup: Annotated[
        bool,
        typer.Option("--no-backup", help="Delete without backing files up first."),
    ] = False,
) -> None:
    """Delete the unused components listed in the manifest."""
    cleaner = _get_cleaner(ctx, backup=False if no_backup else None)

    if trust:
        if not dry_run and not force:
            confirmed = typer.confirm(
                "Delete every unused component without reviewing a manifest?",
                default=False,
            )
            if not confirmed:
                print_info("Aborted.")
                raise typer.Exit(code=0)

        result = cleaner.clean_all(dry_run=dry_run)
        print_deletion_result(
            result, "components", dry_run=dry_run, backup_root=cleaner.backup_root
        )
        if result.has_failures:
            raise typer.Exit(code=1)
        return

    manager = cleaner.manifest
    if not manager.exists():
        print_error(f"No manifest found at {manager.manifest_path}.")
        print_info("Run `assetsweep components scan` first.")
        raise typer.Exit(code=1)

    try:
        manifest = manager.read()
    except ManifestError as e:
        print_error(str(e))
        print_info("Run `assetsweep components scan` to regenerate it.")
        raise typer.Exit(code=1) from e

    if not manifest.components:
        print_info("The manifest lists no components to delete.")
        return

    title = "Components to Delete (dry-run)" if dry_run else "Components to Delete"
    console.print(create_components_table(manifest.components, title=title))

    if not dry_run and not force:
        confirm_deletion(len(manifest.components), "component(s)")

    result = cleaner.clean_from_manifest(dry_run=dry_run)
    print_deletion_result(result, "components", dry_run=dry_run, backup_root=cleaner.backup_root)

    if not dry_run and result.deleted and not result.has_failures:
        manager.delete()
        print_info(f"Removed manifest {manager.manifest_path}.")

    if result.has_failures:
        raise typer.Exit(code=1)


@app.command()
def refs(
    ctx: typer.Context,
    name: Annotated[str, typer.Argument(help="Component name (e.g., forms.input).")],
) -> None:
    """List the files that reference a component."""
    cleaner = _get_cleaner(ctx)

    component = next((c for c in cleaner.scan() if c.name == name), None)
    if component is None:
        print_error(f"Component not found: {name}")
        raise typer.Exit(code=1)

    references = cleaner.find_references(component)

    if not references:
        print_info(f"No references found for <{component.tag_name}>.")
        return

    print_success(f"<{component.tag_name}> is referenced in {len(references)} file(s):")
    for reference in references:
        console.print(f"  {reference}")

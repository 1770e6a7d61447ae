"""Image asset scanning and cleanup commands.

Provides commands to find unused images, delete them from the reviewed
manifest (or in one pass) and look up where an image is referenced.
"""

from typing import Annotated

import typer

from assetsweep.assets.cleaner import AssetCleaner
from assetsweep.assets.models import ImageAsset
from assetsweep.cli.display import (
    SCAN_PREVIEW_LIMIT,
    confirm_deletion,
    create_assets_table,
    create_statistics_table,
    print_deletion_result,
    print_preview_footer,
)
from assetsweep.cli.types import get_project, load_project_config
from assetsweep.core.manifest import ManifestError
from assetsweep.core.paths import resolve_relative
from assetsweep.utils.formatting import console, print_error, print_info, print_success

app = typer.Typer(
    help="Find and remove unused image assets.",
    no_args_is_help=True,
)


def _get_cleaner(ctx: typer.Context, backup: bool | None = None) -> AssetCleaner:
    """Build an asset cleaner for the selected project."""
    project = get_project(ctx)
    config = load_project_config(project)
    return AssetCleaner.from_config(config.assets, project.base_path, backup=backup)


@app.command()
def scan(
    ctx: typer.Context,
    stats: Annotated[
        bool,
        typer.Option("--stats", help="Show statistics only, without writing a manifest."),
    ] = False,
) -> None:
    """Scan for unused images and write the review manifest."""
    cleaner = _get_cleaner(ctx)

    if stats:
        console.print(create_statistics_table(cleaner.get_statistics(), "Asset Statistics"))
        return

    print_info("Scanning for unused assets...")
    try:
        manifest = cleaner.generate_manifest()
    except ManifestError as e:
        print_error(str(e))
        raise typer.Exit(code=1) from e

    if not manifest.assets:
        cleaner.manifest.delete()
        print_success(f"No unused assets found ({manifest.total_scanned} scanned).")
        return

    preview = manifest.assets[:SCAN_PREVIEW_LIMIT]
    console.print(create_assets_table(preview))
    print_preview_footer(
        len(manifest.assets), len(preview), cleaner.manifest.manifest_path, "assets"
    )
    console.print(f"[muted]Total size: {manifest.total_size_human}[/muted]")
    console.print("[muted]Then run `assetsweep assets clean`.[/muted]")


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
    """Delete the unused images listed in the manifest."""
    cleaner = _get_cleaner(ctx, backup=False if no_backup else None)

    if trust:
        if not dry_run and not force:
            confirmed = typer.confirm(
                "Delete every unused asset without reviewing a manifest?",
                default=False,
            )
            if not confirmed:
                print_info("Aborted.")
                raise typer.Exit(code=0)

        result = cleaner.clean_all(dry_run=dry_run)
        print_deletion_result(result, "assets", dry_run=dry_run, backup_root=cleaner.backup_root)
        if result.has_failures:
            raise typer.Exit(code=1)
        return

    manager = cleaner.manifest
    if not manager.exists():
        print_error(f"No manifest found at {manager.manifest_path}.")
        print_info("Run `assetsweep assets scan` first.")
        raise typer.Exit(code=1)

    try:
        manifest = manager.read()
    except ManifestError as e:
        print_error(str(e))
        print_info("Run `assetsweep assets scan` to regenerate it.")
        raise typer.Exit(code=1) from e

    if not manifest.assets:
        print_info("The manifest lists no assets to delete.")
        return

    title = "Assets to Delete (dry-run)" if dry_run else "Assets to Delete"
    console.print(create_assets_table(manifest.assets, title=title))

    if not dry_run and not force:
        confirm_deletion(len(manifest.assets), "asset(s)")

    result = cleaner.clean_from_manifest(dry_run=dry_run)
    print_deletion_result(result, "assets", dry_run=dry_run, backup_root=cleaner.backup_root)

    if not dry_run and result.deleted and not result.has_failures:
        manager.delete()
        print_info(f"Removed manifest {manager.manifest_path}.")

    if result.has_failures:
        raise typer.Exit(code=1)


@app.command()
def refs(
    ctx: typer.Context,
    path: Annotated[str, typer.Argument(help="Image path relative to the project root.")],
) -> None:
    """List the files that reference an image."""
    project = get_project(ctx)
    config = load_project_config(project)
    cleaner = AssetCleaner.from_config(config.assets, project.base_path)

    full_path = resolve_relative(path, project.base_path)
    if not full_path.is_file():
        print_error(f"Asset not found: {path}")
        raise typer.Exit(code=1)

    asset = ImageAsset.from_path(full_path, project.base_path)
    references = cleaner.find_references(asset)

    if not references:
        print_info(f"No references found for {asset.relative_path}.")
        return

    print_success(f"{asset.relative_path} is referenced in {len(references)} file(s):")
    for reference in references:
        console.print(f"  {reference}")

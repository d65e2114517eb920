"""Click CLI entry point for version-sync."""

from __future__ import annotations

import click
from rich.console import Console
from rich.table import Table

from version_sync.config import Config
from version_sync.manifest import load_version
from version_sync.syncer import read_document_version, sync
from version_sync.utils.logger import setup_logger

console = Console()


def _init() -> Config:
    """Load config and configure logging."""
    config = Config.load()
    setup_logger(
        level=config.log_level,
        log_file=str(config.log_file) if config.log_file else None,
        max_size_mb=config.get("logging.max_size_mb", default=5),
        backup_count=config.get("logging.backup_count", default=3),
    )
    return config


def _variant_command(name: str, plugin_id: str | None) -> click.Command:
    """Build the flagless sync command for one variant."""

    def run():
        config = _init()
        variant = config.variant(name)
        sync(
            variant.manifest_path(config.project_root),
            variant.document_path(config.project_root),
            variant.plugin_id,
        )

    target = plugin_id or "(no plugin_id configured)"
    return click.Command(
        name,
        callback=run,
        help=f"Write the package.json version into plugin.xml for {target}.",
    )


class VariantGroup(click.Group):
    """Command group that exposes one sync command per configured variant."""

    def list_commands(self, ctx):
        builtin = super().list_commands(ctx)
        variants = [name for name in Config.load().variant_names if name not in builtin]
        return builtin + variants

    def get_command(self, ctx, cmd_name):
        command = super().get_command(ctx, cmd_name)
        if command is not None:
            return command
        config = Config.load()
        if cmd_name not in config.variant_names:
            return None
        # A misconfigured entry only fails when its own command runs
        return _variant_command(cmd_name, config.get("variants", cmd_name, "plugin_id"))


@click.group(cls=VariantGroup)
def cli():
    """Keep plugin.xml versions in sync with package.json."""


# =============================================================================
# variants
# =============================================================================

@cli.command("variants")
def list_variants():
    """List the configured plugin variants."""
    config = _init()

    table = Table(title="Plugin Variants")
    table.add_column("Name", style="cyan")
    table.add_column("Plugin ID", style="white")
    table.add_column("Manifest", style="dim")
    table.add_column("Document", style="dim")

    for name in config.variant_names:
        try:
            variant = config.variant(name)
        except ValueError as e:
            table.add_row(name, f"[red]{e}[/red]", "-", "-")
            continue
        table.add_row(name, variant.plugin_id, variant.manifest, variant.document)

    console.print(table)


# =============================================================================
# status
# =============================================================================

@cli.command("status")
def show_status():
    """Compare manifest and plugin.xml versions for every variant."""
    config = _init()

    table = Table(title="Version Status")
    table.add_column("Variant", style="cyan")
    table.add_column("Manifest", style="white")
    table.add_column("plugin.xml", style="white")
    table.add_column("State")

    for name in config.variant_names:
        try:
            variant = config.variant(name)
            wanted = load_version(variant.manifest_path(config.project_root))
            current = read_document_version(variant.document_path(config.project_root), variant.plugin_id)
        except (OSError, ValueError) as e:
            table.add_row(name, "-", "-", f"[red]{e}[/red]")
            continue

        if current is None:
            state = "[yellow]id not found[/yellow]"
        elif current == wanted:
            state = "[green]in sync[/green]"
        else:
            state = "[red]out of date[/red]"
        table.add_row(name, wanted, current or "-", state)

    console.print(table)


# =============================================================================
# Entry point
# =============================================================================

if __name__ == "__main__":
    cli()

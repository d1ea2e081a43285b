"""Thin CLI wrapper — Typer commands that delegate to Use Cases.

All pipeline logic is accessed through the Container (bootstrap.py).
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Annotated, Optional

import typer
from rich.logging import RichHandler

from sass_importer.presentation.cli.formatters import (
    console,
    error_message,
    import_set_table,
    json_panel,
    results_table,
    success_panel,
)

app = typer.Typer(
    name="sass-importer",
    help="🎨 Import .scss/.sass sources as structured stylesheets",
    rich_markup_mode="rich",
    no_args_is_help=True,
)

# Sub-app for config commands
config_app = typer.Typer(
    name="config",
    help="⚙️  Inspect the importer configuration",
    rich_markup_mode="rich",
    no_args_is_help=True,
)
app.add_typer(config_app, name="config")


ConfigOption = Annotated[
    Optional[str],
    typer.Option("--config", "-c", help="Path to a JSON configuration file"),
]


@app.callback()
def main(
    verbose: Annotated[
        bool, typer.Option("--verbose", "-v", help="Log pipeline steps (DEBUG)")
    ] = False,
) -> None:
    """Configure logging for every command."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(console=console, show_path=False)],
        force=True,
    )


def _load_container(config: Optional[str]):
    from sass_importer.bootstrap import Container
    from sass_importer.domain.errors import ConfigurationError

    try:
        return Container(config_path=config)
    except ConfigurationError as e:
        error_message(str(e))
        raise typer.Exit(code=1)


# ---------------------------------------------------------------------------
# sass-importer import
# ---------------------------------------------------------------------------


@app.command("import")
def import_files(
    sources: Annotated[list[Path], typer.Argument(help="Source files (.scss / .sass)")],
    workers: Annotated[
        int, typer.Option("--workers", "-w", min=1, help="Files imported in parallel")
    ] = 1,
    manifest: Annotated[
        Optional[Path], typer.Option("--manifest", "-m", help="Write a JSON manifest here")
    ] = None,
    config: ConfigOption = None,
) -> None:
    """Import stylesheet sources and report what each one produced."""
    from sass_importer.infrastructure.context.memory_context import InMemoryImportContext

    missing = [path for path in sources if not path.is_file()]
    if missing:
        error_message(f"File not found: {', '.join(str(p) for p in missing)}")
        raise typer.Exit(code=1)

    container = _load_container(config)
    items = container.import_batch().execute(sources, workers=workers)
    results_table(items)

    if manifest is not None:
        entries = []
        for item in items:
            entry = (
                item.context.to_manifest()
                if isinstance(item.context, InMemoryImportContext)
                else {"asset": str(item.path)}
            )
            entry["error"] = item.error
            entries.append(entry)
        manifest.write_text(json.dumps(entries, indent=2), encoding="utf-8")
        success_panel(f"✅ Manifest written: [bold green]{manifest}[/]")

    if any(not item.ok for item in items):
        raise typer.Exit(code=1)


# ---------------------------------------------------------------------------
# sass-importer resolve
# ---------------------------------------------------------------------------


@app.command()
def resolve(
    source: Annotated[Path, typer.Argument(help="Source file to inspect")],
    config: ConfigOption = None,
) -> None:
    """Show the files SOURCE imports, without compiling anything."""
    from sass_importer.domain.errors import SourceReadError, UnresolvedImportError
    from sass_importer.domain.models.asset import SourceAsset

    if not source.is_file():
        error_message(f"File not found: {source}")
        raise typer.Exit(code=1)

    container = _load_container(config)
    try:
        asset = SourceAsset.read(source, encoding=container.config.encoding)
    except (SourceReadError, OSError) as e:
        error_message(str(e))
        raise typer.Exit(code=1)

    try:
        import_set = container.resolver.resolve(asset)
    except UnresolvedImportError as e:
        error_message(f"{source}: unresolved import '{e.name}'")
        raise typer.Exit(code=1)

    import_set_table(source, import_set)


# ---------------------------------------------------------------------------
# sass-importer config show
# ---------------------------------------------------------------------------


@config_app.command("show")
def config_show(config: ConfigOption = None) -> None:
    """Show the active importer configuration."""
    container = _load_container(config)
    json_panel(container.config.model_dump_json(indent=2))


if __name__ == "__main__":
    app()

"""Rich formatting utilities for the CLI.

Keeps all Rich rendering (tables, panels, syntax) in a dedicated module that
knows nothing about the import pipeline itself.
"""

from __future__ import annotations

from collections.abc import Iterable
from pathlib import Path
from typing import TYPE_CHECKING

from rich.console import Console
from rich.panel import Panel
from rich.syntax import Syntax
from rich.table import Table

if TYPE_CHECKING:
    from sass_importer.application.use_cases.import_batch import BatchItem

console = Console()


# ---------------------------------------------------------------------------
# Success / error panels
# ---------------------------------------------------------------------------


def success_panel(message: str, title: str = "Sass Importer") -> None:
    """Print a green success panel."""
    console.print(Panel(message, title=title, border_style="green"))


def error_message(message: str) -> None:
    """Print a red error message."""
    console.print(f"[bold red]❌ {message}[/]")


# ---------------------------------------------------------------------------
# JSON / config rendering
# ---------------------------------------------------------------------------


def json_panel(raw_json: str, title: str = "⚙️  Active configuration") -> None:
    """Render JSON inside a syntax-highlighted panel."""
    console.print(
        Panel(
            Syntax(raw_json, "json", theme="monokai", line_numbers=True),
            title=title,
            border_style="blue",
        )
    )


# ---------------------------------------------------------------------------
# Import results
# ---------------------------------------------------------------------------


def import_set_table(source: Path, dependencies: Iterable[Path]) -> None:
    """Print the resolved dependencies of one source file."""
    table = Table(title=f"📎 Imports of {source}", show_header=True, border_style="blue")
    table.add_column("#", style="dim", width=4)
    table.add_column("Resolved path", style="cyan")

    for index, path in enumerate(sorted(dependencies), start=1):
        table.add_row(str(index), str(path))

    console.print(table)


def results_table(items: list[BatchItem]) -> None:
    """Print one row per imported file plus a summary line."""
    table = Table(title="🎨 Stylesheet import", show_header=True, border_style="blue")
    table.add_column("", width=3)
    table.add_column("Source", style="cyan")
    table.add_column("Result")
    table.add_column("Deps", justify="right")
    table.add_column("Rules", justify="right")
    table.add_column("Path", style="dim")
    table.add_column("Notes")

    failed = 0
    for item in items:
        outcome = item.outcome
        if outcome is None:
            failed += 1
            table.add_row("❌", str(item.path), "[red]error[/]", "-", "-", "-", item.error or "")
            continue

        kind = outcome.kind.value
        rules = str(len(outcome.artifact.rules)) if kind == "stylesheet" else "-"
        notes = ""
        if outcome.fallback_reason is not None:
            notes = outcome.fallback_reason.value
            if outcome.unresolved_import is not None:
                notes += f" ('{outcome.unresolved_import}')"
        elif outcome.adapter_result is not None and not outcome.adapter_result.ok:
            notes = f"[yellow]{outcome.adapter_result.error}[/]"
        elif outcome.compiler_run is not None and not outcome.compiler_run.succeeded:
            notes = f"[yellow]compiler exit {outcome.compiler_run.exit_status}[/]"

        icon = "🎨" if kind == "stylesheet" else "📄"
        path_text = " → ".join(state.value for state in outcome.states)
        table.add_row(
            icon, str(item.path), kind, str(len(outcome.dependencies)), rules, path_text, notes
        )

    console.print(table)

    color = "green" if failed == 0 else "red"
    console.print(
        f"[bold {color}]{len(items) - failed}/{len(items)} imported[/]"
        + (f"  |  ❌ {failed} failed" if failed else "")
    )

"""Rich output formatting helpers for the LoadOrder CLI.

Provides consistent terminal output for load orders, rejected packs, and
satisfaction checks.
"""

from __future__ import annotations

from typing import Any

from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from loadorder.core.resolution import LoadPlan

console = Console()


def _source_label(item: Any) -> str:
    path = getattr(item, "source_path", None)
    return path.name if path is not None else "-"


def print_load_plan(plan: LoadPlan, warnings: list[str]) -> None:
    """Print both load orders followed by any rejection warnings.

    Args:
        plan: Outcome of running both resolution phases.
        warnings: Messages collected from the diagnostic sink.
    """
    for title, items in (("Primary Load Order", plan.primary),
                         ("Secondary Load Order", plan.secondary)):
        if not items:
            console.print(f"[dim]{title}: no packs loaded.[/dim]")
            continue
        table = Table(title=title, show_header=True, header_style="bold")
        table.add_column("#", justify="right", style="dim")
        table.add_column("Pack", style="bold")
        table.add_column("Manifest", style="dim")
        for position, item in enumerate(items, start=1):
            table.add_row(str(position), escape(item.name), escape(_source_label(item)))
        console.print(table)

    for message in warnings:
        console.print(f"  [yellow]- {escape(message)}[/yellow]")
    _print_plan_summary(plan)


def _print_plan_summary(plan: LoadPlan) -> None:
    """Print a one-line summary after the load order tables."""
    loaded = len(plan.primary) + len(plan.secondary)
    rejected = len(plan.rejected_primary) + len(plan.rejected_secondary)
    parts = [f"[bold]{loaded}[/bold] packs loaded"]
    if rejected > 0:
        parts.append(f"[red]{rejected} rejected[/red]")
    else:
        parts.append("[green]all dependencies met[/green]")
    console.print(" | ".join(parts))


def print_check_result(name: str, satisfied: bool, missing: list[str]) -> None:
    """Print whether a downstream consumer's prerequisites are met.

    Args:
        name: Label of the checked consumer.
        satisfied: Result of the satisfaction query.
        missing: Missing prerequisites as ``category:name`` strings.
    """
    if satisfied:
        verdict = Text("SATISFIED", style="bold green")
    else:
        verdict = Text("UNMET", style="bold red")
    header = Text.assemble(("Consumer: ", "bold"), (name, ""),
                           ("  Status: ", "bold"), verdict)
    console.print(Panel(header, title="Dependency Check"))
    for entry in missing:
        console.print(f"  [red]- missing {escape(entry)}[/red]")

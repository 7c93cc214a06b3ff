"""``loadorder resolve`` — Compute the load order of primary and secondary packs.

Loads every manifest in the primary and secondary pack directories, runs the
two resolution phases in order, and prints the resulting load order along
with any packs dropped for unmet dependencies.

Exit Codes:
    0 — Load order computed.
    1 — ``--strict`` was given and at least one pack was rejected.
    2 — A manifest could not be loaded.
"""

from __future__ import annotations

import json
import sys
from pathlib import Path

import click

from loadorder.core.resolution import CollectingSink, LoadPlan, StagedResolver
from loadorder.exceptions import ManifestError
from loadorder.manifests import load_primary_roster, load_secondary_roster


def run_resolution(
    primary_dir: str, secondary_dir: str | None
) -> tuple[StagedResolver, LoadPlan, list[str]]:
    """Load both rosters and resolve them.

    Args:
        primary_dir: Directory of primary pack manifests.
        secondary_dir: Directory of secondary pack manifests, or None for
            an empty secondary roster.

    Returns:
        The resolver (for later queries), the load plan, and the warnings
        emitted during resolution.

    Raises:
        ManifestError: If any manifest cannot be loaded.
    """
    primary = load_primary_roster(Path(primary_dir))
    secondary = load_secondary_roster(Path(secondary_dir)) if secondary_dir else []

    sink = CollectingSink()
    resolver = StagedResolver(sink=sink)
    plan = resolver.resolve(primary, secondary)
    return resolver, plan, sink.messages


def plan_to_json(plan: LoadPlan, warnings: list[str]) -> dict:
    """Convert a load plan to a JSON-serializable dict."""
    return {
        "primary": [item.name for item in plan.primary],
        "secondary": [item.name for item in plan.secondary],
        "rejected": {
            "primary": plan.rejected_primary,
            "secondary": plan.rejected_secondary,
        },
        "warnings": warnings,
    }


def echo_manifest_error(exc: ManifestError, output_format: str) -> None:
    """Report a manifest failure in the requested output format."""
    if output_format == "json":
        click.echo(json.dumps({"error": str(exc)}))
    else:
        click.echo(f"Error: {exc}")


@click.command("resolve")
@click.option(
    "--primary", "primary_dir",
    type=click.Path(exists=True, file_okay=False),
    required=True,
    help="Directory of primary pack manifests.",
)
@click.option(
    "--secondary", "secondary_dir",
    type=click.Path(exists=True, file_okay=False),
    default=None,
    help="Directory of secondary pack manifests.",
)
@click.option(
    "--format", "output_format",
    type=click.Choice(["text", "json"]),
    default="text",
    help="Output format (default: text).",
)
@click.option(
    "--strict", is_flag=True, default=False,
    help="Exit with code 1 if any pack was rejected.",
)
def resolve_command(
    primary_dir: str,
    secondary_dir: str | None,
    output_format: str,
    strict: bool,
) -> None:
    """Compute the load order for the packs in --primary and --secondary.

    Packs whose dependencies can never be met are reported and left out.

    Exit code 0 on success, 1 with --strict if packs were rejected,
    2 if a manifest could not be loaded.
    """
    try:
        _, plan, warnings = run_resolution(primary_dir, secondary_dir)
    except ManifestError as exc:
        echo_manifest_error(exc, output_format)
        sys.exit(2)

    if output_format == "json":
        click.echo(json.dumps(plan_to_json(plan, warnings), indent=2))
    else:
        from loadorder.cli.output import print_load_plan
        print_load_plan(plan, warnings)

    sys.exit(1 if strict and not plan.complete else 0)

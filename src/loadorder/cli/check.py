"""``loadorder check <query-file>`` — Test whether a consumer's packs are loaded.

Resolves the primary and secondary pack directories, then checks the
prerequisites declared by QUERY_FILE (e.g. a level manifest) against the
accepted packs.

Exit Codes:
    0 — Every prerequisite is loaded.
    1 — At least one prerequisite is missing.
    2 — A manifest could not be loaded.
"""

from __future__ import annotations

import json
import sys
from pathlib import Path

import click

from loadorder.cli.resolve import echo_manifest_error, run_resolution
from loadorder.exceptions import ManifestError
from loadorder.manifests import load_query_manifest


@click.command("check")
@click.argument("query_file", type=click.Path(exists=True, dir_okay=False))
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
def check_command(
    query_file: str,
    primary_dir: str,
    secondary_dir: str | None,
    output_format: str,
) -> None:
    """Check whether the packs required by QUERY_FILE are loaded.

    Exit code 0 if satisfied, 1 if not, 2 if a manifest could not be loaded.
    """
    try:
        query = load_query_manifest(Path(query_file))
        resolver, _, warnings = run_resolution(primary_dir, secondary_dir)
    except ManifestError as exc:
        echo_manifest_error(exc, output_format)
        sys.exit(2)

    satisfied = resolver.is_satisfied(query)
    missing = resolver.explain(query)

    if output_format == "json":
        click.echo(json.dumps({
            "name": query.name,
            "satisfied": satisfied,
            "missing": missing,
            "warnings": warnings,
        }, indent=2))
    else:
        from loadorder.cli.output import print_check_result
        print_check_result(query.name, satisfied, missing)

    sys.exit(0 if satisfied else 1)

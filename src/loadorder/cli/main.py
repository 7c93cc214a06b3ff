"""LoadOrder CLI — Staged dependency resolution for content packs.

Entry point for the ``loadorder`` command-line tool. Registers all
subcommands under a single Click group.

Commands:
    resolve — Compute the load order of primary and secondary packs.
    check   — Test whether a consumer's required packs are loaded.

Usage::

    loadorder resolve --primary packs/enemies --secondary packs/cards
    loadorder resolve --primary packs/enemies --format json --strict
    loadorder check levels/crypt.yaml --primary packs/enemies --secondary packs/cards
"""

from __future__ import annotations

import click

from loadorder import __version__
from loadorder.cli.check import check_command
from loadorder.cli.resolve import resolve_command


@click.group()
@click.version_option(version=__version__)
def cli() -> None:
    """LoadOrder: Staged dependency resolution for content packs.

    Orders primary packs, then secondary packs that may build on them,
    and drops any pack whose dependencies can never be met.
    """


cli.add_command(resolve_command)
cli.add_command(check_command)

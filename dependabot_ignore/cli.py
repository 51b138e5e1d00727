"""CLI entry point for dependabot-ignore."""

from __future__ import annotations

import logging
from pathlib import Path

import click

from dependabot_ignore.errors import DependabotIgnoreError
from dependabot_ignore.pipeline import run

LOG_FORMAT = "%(levelname)s: %(message)s"


def _configure_logging(verbose: int) -> None:
    """Map -v / -vv to INFO / DEBUG. Log output goes to stderr."""
    if verbose <= 0:
        level = logging.WARNING
    elif verbose == 1:
        level = logging.INFO
    else:
        level = logging.DEBUG
    logging.basicConfig(level=level, format=LOG_FORMAT, force=True)


@click.command(context_settings={"help_option_names": ["-h", "--help"]})
@click.option(
    "-w",
    "--write",
    is_flag=True,
    help="Write result to .github/dependabot.yaml instead of printing it.",
)
@click.option(
    "-v",
    "--verbose",
    count=True,
    help="Increase verbosity (can be repeated: -v, -vv).",
)
@click.version_option(package_name="dependabot-ignore")
@click.argument(
    "path",
    type=click.Path(file_okay=False, path_type=Path),
    default=".",
)
def cli(write: bool, verbose: int, path: Path) -> None:
    """Generate Dependabot ignore rules from Cargo version requirements.

    Crates required as 1.x only get major-update PRs, 0.x crates get
    minor and major ones, and every crate skips patch-only bumps.
    """
    _configure_logging(verbose)
    try:
        run(path, write=write)
    except DependabotIgnoreError as exc:
        raise click.ClickException(str(exc)) from exc

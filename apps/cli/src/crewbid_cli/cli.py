"""CLI for ranking pairings and asking questions about them."""

from __future__ import annotations

import asyncio
import json
import logging
from pathlib import Path

import click
from pydantic import ValidationError

from crewbid_core.schemas import Pairing, Preference, PreferenceKind, ScoredPairing
from crewbid_ml import analyze_schedule, rank_pairings

from .config import settings
from .loader import load_pairings, parse_preference

logger = logging.getLogger(__name__)

_PAIRINGS_ARG = click.argument(
    "pairings_file", type=click.Path(exists=True, dir_okay=False, path_type=Path)
)
_PREF_OPTION = click.option(
    "-p",
    "--pref",
    "prefs",
    multiple=True,
    help="Preference as KIND=VALUE (repeatable), e.g. -p ROUTE=LHR",
)


def _load(path: Path) -> list[Pairing]:
    try:
        return load_pairings(path)
    except (ValueError, ValidationError) as exc:
        raise click.ClickException(f"Could not load pairings: {exc}") from exc


def _preferences(options: tuple[str, ...]) -> list[Preference]:
    return [parse_preference(o) for o in options]


def _print_results(pairings: list[ScoredPairing], limit: int) -> None:
    if not pairings:
        click.echo("No pairings found.")
        return
    click.echo(f"\nRanked {len(pairings)} pairing(s):\n")
    for i, p in enumerate(pairings[:limit], 1):
        matches = "; ".join(p.matches) if p.matches else "-"
        click.echo(
            f"  {i}. {p.pairing_number} | score {p.score:+d} | "
            f"{p.departure_time:%b %d %H:%M} - {p.arrival_time:%b %d %H:%M} | "
            f"{p.block_hours} BH | {len(p.layovers)} layover(s) | {matches}"
        )


@click.group()
@click.option("-v", "--verbose", is_flag=True, help="Enable debug logging")
def cli(verbose: bool) -> None:
    """Crewbid pairing ranker CLI."""
    level = logging.DEBUG if verbose else settings.log_level.upper()
    logging.basicConfig(level=level, format="%(levelname)s: %(message)s")


@cli.command("rank")
@_PAIRINGS_ARG
@_PREF_OPTION
@click.option("--limit", type=int, default=None, help="Rows to print")
@click.option("--json-output", is_flag=True, help="Output as JSON")
def rank(
    pairings_file: Path, prefs: tuple[str, ...], limit: int | None, json_output: bool
) -> None:
    """Score pairings against preferences and print them best first."""
    ranked = rank_pairings(_load(pairings_file), _preferences(prefs))
    if json_output:
        click.echo(
            json.dumps([p.model_dump(mode="json") for p in ranked], indent=2)
        )
        return
    _print_results(ranked, settings.default_limit if limit is None else limit)


@cli.command("ask")
@_PAIRINGS_ARG
@click.argument("question")
@_PREF_OPTION
def ask(pairings_file: Path, question: str, prefs: tuple[str, ...]) -> None:
    """Rank pairings, then answer a question about the ranked list."""
    ranked = rank_pairings(_load(pairings_file), _preferences(prefs))
    click.echo(asyncio.run(analyze_schedule(ranked, question)))


@cli.command("kinds")
def kinds() -> None:
    """List the supported preference kinds."""
    for kind in PreferenceKind:
        if kind is not PreferenceKind.UNKNOWN:
            click.echo(kind.value)


if __name__ == "__main__":
    cli()

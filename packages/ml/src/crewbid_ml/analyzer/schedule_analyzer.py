"""Keyword-driven summaries of a scored pairing list."""

from __future__ import annotations

import logging
import re
from typing import TYPE_CHECKING, Protocol

from crewbid_ml.analyzer.messages import (
    CLOSE_SCORES_NOTE,
    DATE_FORMAT,
    EMPTY_LIST_MESSAGE,
    EUROPE_CUES,
    FALLBACK_MESSAGE,
    LONGEST_CUES,
    MAX_BLOCK_CUES,
    NO_EUROPE_MESSAGE,
    build_header,
)
from crewbid_ml.config import RankingSettings, settings

if TYPE_CHECKING:
    from collections.abc import Sequence

    from crewbid_core.schemas import ScoredPairing

logger = logging.getLogger(__name__)


class ScheduleAnalyzer(Protocol):
    """Anything that can answer a question about a scored pairing list."""

    async def analyze(
        self, pairings: Sequence[ScoredPairing], query: str
    ) -> str: ...


def _window(pairing: ScoredPairing) -> str:
    return (
        f"{pairing.departure_time.strftime(DATE_FORMAT)} → "
        f"{pairing.arrival_time.strftime(DATE_FORMAT)}"
    )


def _has_cue(query: str, cues: tuple[str, ...]) -> bool:
    return any(cue in query for cue in cues)


class HeuristicScheduleAnalyzer:
    """Summarizes pairings by substring cues in the question.

    No language model is involved: the question only toggles which extra
    paragraphs (longest layovers, European trips, max block hours) precede
    the always-present list of top picks.
    """

    def __init__(self, config: RankingSettings | None = None) -> None:
        self._config = config if config is not None else settings
        self._europe_pattern = re.compile(
            "|".join(re.escape(m) for m in self._config.european_markers),
            re.IGNORECASE,
        )

    def summarize(self, pairings: Sequence[ScoredPairing], query: str) -> str:
        """Build the summary text. Errors propagate to the caller."""
        if not pairings:
            return EMPTY_LIST_MESSAGE

        query = query or ""
        q = query.lower()

        lines: list[str] = [build_header(len(pairings), query), ""]

        if _has_cue(q, LONGEST_CUES):
            lines.extend(self._longest_layovers(pairings))
        if _has_cue(q, EUROPE_CUES):
            lines.extend(self._european_trips(pairings))
        if _has_cue(q, MAX_BLOCK_CUES):
            lines.extend(self._max_block(pairings))

        lines.extend(self._top_picks(pairings))

        scores = [p.score for p in pairings]
        if max(scores) - min(scores) < self._config.close_score_spread:
            lines.extend(["", CLOSE_SCORES_NOTE])

        return "\n".join(lines)

    async def analyze(self, pairings: Sequence[ScoredPairing], query: str) -> str:
        """Summarize the list; internal failures become a fixed apology."""
        try:
            return self.summarize(pairings, query)
        except Exception:
            logger.exception("Schedule analyzer failed for query %r", query)
            return FALLBACK_MESSAGE

    # -- paragraphs ----------------------------------------------------------

    @staticmethod
    def _longest_layovers(pairings: Sequence[ScoredPairing]) -> list[str]:
        # max() keeps the first of equal candidates
        pick = max(pairings, key=lambda p: len(p.layovers))
        return [
            f"Longest layovers (approx): Pairing {pick.pairing_number} • "
            f"{len(pick.layovers)} layovers — {_window(pick)}",
            "",
        ]

    def _european_trips(self, pairings: Sequence[ScoredPairing]) -> list[str]:
        found = [p for p in pairings if self._europe_pattern.search(p.details)]
        if not found:
            return [NO_EUROPE_MESSAGE, ""]
        names = ", ".join(
            f"Pairing {p.pairing_number}" for p in found[: self._config.europe_limit]
        )
        return [f"Trips mentioning common European airports: {names}.", ""]

    @staticmethod
    def _max_block(pairings: Sequence[ScoredPairing]) -> list[str]:
        pick = max(pairings, key=lambda p: p.block_hours_decimal)
        return [
            f"Highest block hours: Pairing {pick.pairing_number} • "
            f"{pick.block_hours} BH ({pick.block_hours_decimal:.1f} hrs) — "
            f"Score: {pick.score}",
            "",
        ]

    def _top_picks(self, pairings: Sequence[ScoredPairing]) -> list[str]:
        ranked = sorted(pairings, key=lambda p: p.score, reverse=True)
        lines = ["Top picks (by computed score):"]
        for idx, p in enumerate(ranked[: self._config.top_picks], 1):
            line = (
                f"{idx}. Pairing {p.pairing_number} • Score: {p.score} • "
                f"{_window(p)} • {p.block_hours} BH"
            )
            if p.matches:
                snippet = "; ".join(p.matches[: self._config.match_snippets])
                line += f" • Matches: {snippet}"
            lines.append(line)
        return lines


_default_analyzer = HeuristicScheduleAnalyzer()


def build_summary(pairings: Sequence[ScoredPairing], query: str) -> str:
    """Synchronous summary of a scored pairing list (may raise)."""
    return _default_analyzer.summarize(pairings, query)


async def analyze_schedule(
    pairings: Sequence[ScoredPairing],
    query: str,
    analyzer: ScheduleAnalyzer | None = None,
) -> str:
    """Answer a free-text question about scored pairings.

    Always resolves: an empty list yields guidance to widen filters, and
    any internal error, including one raised by a supplied analyzer, is
    logged and replaced by a fixed apology.
    """
    if analyzer is None:
        analyzer = _default_analyzer
    try:
        return await analyzer.analyze(pairings, query)
    except Exception:
        logger.exception("Schedule analyzer failed for query %r", query)
        return FALLBACK_MESSAGE

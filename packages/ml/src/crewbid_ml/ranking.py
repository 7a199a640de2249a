"""Pairing ranking engine with additive per-preference scoring."""

from __future__ import annotations

import logging
import math
import re
from datetime import date, datetime, timedelta
from typing import TYPE_CHECKING

from crewbid_core.schemas import PreferenceKind, ScoredPairing
from crewbid_ml.config import ScoreWeights, settings

if TYPE_CHECKING:
    from collections.abc import Callable, Iterable, Sequence

    from crewbid_core.schemas import Pairing, Preference

logger = logging.getLogger(__name__)

_LEADING_INT = re.compile(r"^\s*([+-]?\d+)")


class _Evaluation:
    """Mutable score accumulator for a single pairing."""

    def __init__(self, pairing: Pairing) -> None:
        self.pairing = pairing
        self.flight_days = flight_days(pairing)
        self.score = 0
        self.matches: list[str] = []

    def add(self, delta: int, match: str | None = None) -> None:
        self.score += delta
        if match is not None:
            self.matches.append(match)


class PairingRanker:
    """Scores pairings against a preference list using a fixed weight table."""

    def __init__(self, weights: ScoreWeights | None = None) -> None:
        self._weights = weights if weights is not None else settings.weights()
        self._rules: dict[PreferenceKind, Callable[[_Evaluation, str], None]] = {
            PreferenceKind.STRATEGY_MONEY: self._score_money,
            PreferenceKind.SPECIFIC_DATE_OFF: self._score_date_off,
            PreferenceKind.DAY_OF_WEEK_OFF: self._score_weekday_off,
            PreferenceKind.AVOID_RED_EYE: self._score_red_eye,
            PreferenceKind.MAX_LEGS_PER_DAY: self._score_max_legs,
            PreferenceKind.ROUTE: self._score_route,
            PreferenceKind.TIME_WINDOW: self._score_time_window,
            PreferenceKind.MAX_DURATION: self._score_max_duration,
            PreferenceKind.AVOID_AIRPORT: self._score_avoid_airport,
        }

    @property
    def weights(self) -> ScoreWeights:
        return self._weights

    def rank(
        self, pairings: Iterable[Pairing], preferences: Sequence[Preference]
    ) -> list[ScoredPairing]:
        """Score every pairing and return them sorted by score descending.

        The sort is stable, so pairings with equal scores keep their input
        order.
        """
        scored = [self.score_pairing(p, preferences) for p in pairings]
        return sorted(scored, key=lambda sp: sp.score, reverse=True)

    def score_pairing(
        self, pairing: Pairing, preferences: Sequence[Preference]
    ) -> ScoredPairing:
        """Apply each preference to a single pairing."""
        ev = _Evaluation(pairing)
        for pref in preferences:
            rule = self._rules.get(pref.type)
            if rule is None:
                logger.debug("Ignoring preference of kind %s", pref.type)
                continue
            rule(ev, pref.value)

        return ScoredPairing(
            **pairing.model_dump(exclude={"score", "matches"}),
            score=ev.score,
            matches=list(dict.fromkeys(ev.matches)),
        )

    # -- rules ---------------------------------------------------------------

    def _score_money(self, ev: _Evaluation, _value: str) -> None:
        hours = ev.pairing.block_hours_decimal
        ev.add(_round_half_up(hours * self._weights.money_multiplier))
        if hours > self._weights.high_earnings_threshold:
            ev.add(0, "High Earnings")

    def _score_date_off(self, ev: _Evaluation, value: str) -> None:
        day_off = parse_date(value)
        if day_off is None:
            logger.debug("Unparseable date-off value %r; skipping", value)
            return
        if day_off in ev.flight_days:
            ev.add(
                self._weights.specific_date_off,
                f"Conflicts with {day_off:%b %d} (Violated)",
            )

    def _score_weekday_off(self, ev: _Evaluation, value: str) -> None:
        # An unparseable value matches no flight day and counts as kept free
        weekday = parse_int(value)
        if weekday is not None and any(
            weekday_index(day) == weekday for day in ev.flight_days
        ):
            ev.add(
                self._weights.day_of_week_off,
                "Works on a requested Day Off (Violated)",
            )
        else:
            ev.add(self._weights.day_of_week_free, "Keeps preferred weekday free")

    def _score_red_eye(self, ev: _Evaluation, _value: str) -> None:
        arrival_hour = ev.pairing.arrival_time.hour
        if 0 <= arrival_hour <= self._weights.red_eye_last_hour:
            ev.add(self._weights.red_eye, f"Red Eye Arrival ({arrival_hour}:00)")

    def _score_max_legs(self, ev: _Evaluation, value: str) -> None:
        max_legs = parse_int(value)
        if max_legs is None or ev.pairing.duration <= 0:
            logger.debug(
                "Cannot evaluate legs/day for %s with value %r",
                ev.pairing.pairing_number,
                value,
            )
            return
        legs_per_day = ev.pairing.leg_count / ev.pairing.duration
        if legs_per_day <= max_legs:
            ev.add(
                self._weights.max_legs,
                f"Low workload (~{math.ceil(legs_per_day)} legs/day)",
            )

    def _score_route(self, ev: _Evaluation, value: str) -> None:
        if _details_contain(ev.pairing, value):
            ev.add(self._weights.route, f"Route includes {value}")

    def _score_time_window(self, ev: _Evaluation, value: str) -> None:
        start_str, _, end_str = value.partition("-")
        start_hour = parse_int(start_str)
        end_hour = parse_int(end_str)
        if start_hour is None or end_hour is None:
            logger.debug("Unparseable time window %r; skipping", value)
            return
        if start_hour <= ev.pairing.departure_time.hour <= end_hour:
            ev.add(
                self._weights.time_window,
                f"Departure between {start_hour}:00-{end_hour}:00",
            )

    def _score_max_duration(self, ev: _Evaluation, value: str) -> None:
        max_days = parse_int(value)
        if max_days is None:
            logger.debug("Unparseable max duration %r; skipping", value)
            return
        if ev.pairing.duration <= max_days:
            ev.add(self._weights.max_duration, f"Duration under {max_days} days")

    def _score_avoid_airport(self, ev: _Evaluation, value: str) -> None:
        if _details_contain(ev.pairing, value):
            ev.add(self._weights.avoid_airport, f"Avoids {value} (Violated)")


def rank_pairings(
    pairings: Iterable[Pairing],
    preferences: Sequence[Preference],
    weights: ScoreWeights | None = None,
) -> list[ScoredPairing]:
    """Score pairings against preferences and sort them by score descending."""
    return PairingRanker(weights).rank(pairings, preferences)


def flight_days(pairing: Pairing) -> list[date]:
    """Every calendar day touched by the pairing, departure to arrival inclusive."""
    first = pairing.departure_time.date()
    last = pairing.arrival_time.date()
    return [first + timedelta(days=i) for i in range((last - first).days + 1)]


def weekday_index(day: date) -> int:
    """Weekday index with Sunday as 0 and Saturday as 6."""
    return day.isoweekday() % 7


def parse_int(value: str) -> int | None:
    """Parse a leading integer, ignoring trailing text ("3 legs" -> 3)."""
    match = _LEADING_INT.match(value or "")
    if match is None:
        return None
    return int(match.group(1))


def parse_date(value: str) -> date | None:
    """Parse an ISO date or datetime string into a calendar date."""
    text = (value or "").strip()
    try:
        return date.fromisoformat(text)
    except ValueError:
        pass
    try:
        return datetime.fromisoformat(text).date()
    except ValueError:
        return None


def _details_contain(pairing: Pairing, value: str) -> bool:
    return value.upper() in pairing.details.upper()


def _round_half_up(x: float) -> int:
    """Round to the nearest integer, halves toward positive infinity."""
    return math.floor(x + 0.5)

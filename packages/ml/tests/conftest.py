"""Shared fixtures for ranking and analyzer tests."""

from __future__ import annotations

from datetime import datetime

import pytest

from crewbid_core.schemas import Layover, Pairing, ScoredPairing


@pytest.fixture
def make_pairing():
    """Factory fixture for Pairing instances (3-day JFK-LHR trip by default)."""

    def _make(
        number: str = "P100",
        departure: datetime = datetime(2024, 1, 5, 9, 15),
        arrival: datetime = datetime(2024, 1, 7, 18, 30),
        duration: float = 3,
        layovers: int = 2,
        block_hours: str = "12:30",
        block_hours_decimal: float = 12.5,
        details: str = "JFK-LHR-JFK",
    ) -> Pairing:
        return Pairing(
            pairing_number=number,
            departure_time=departure,
            arrival_time=arrival,
            duration=duration,
            layovers=[Layover(station="LHR") for _ in range(layovers)],
            block_hours=block_hours,
            block_hours_decimal=block_hours_decimal,
            details=details,
        )

    return _make


@pytest.fixture
def make_scored(make_pairing):
    """Factory fixture for ScoredPairing instances with a fixed score."""

    def _make(
        number: str = "P100",
        score: int = 0,
        matches: list[str] | None = None,
        **kwargs,
    ) -> ScoredPairing:
        pairing = make_pairing(number=number, **kwargs)
        return ScoredPairing(
            **pairing.model_dump(), score=score, matches=matches or []
        )

    return _make

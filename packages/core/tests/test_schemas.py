"""Tests for pairing and preference schemas."""

from __future__ import annotations

from datetime import datetime

import pytest
from pydantic import ValidationError

from crewbid_core.schemas import (
    Layover,
    Pairing,
    Preference,
    PreferenceKind,
    ScoredPairing,
)

PAIRING_KWARGS = {
    "pairing_number": "P1",
    "departure_time": datetime(2024, 1, 5, 9, 0),
    "arrival_time": datetime(2024, 1, 6, 17, 0),
    "duration": 2,
    "block_hours": "9:45",
    "block_hours_decimal": 9.75,
}


class TestPairing:
    def test_minimal(self):
        p = Pairing(**PAIRING_KWARGS)
        assert p.layovers == []
        assert p.details == ""
        assert p.leg_count == 1

    def test_camel_case_aliases(self):
        p = Pairing.model_validate(
            {
                "pairingNumber": "P2",
                "departureTime": "2024-01-05T09:00:00",
                "arrivalTime": "2024-01-06T17:00:00",
                "duration": 2,
                "layovers": [{"station": "LHR", "durationHours": 26.5}],
                "blockHours": "9:45",
                "blockHoursDecimal": 9.75,
                "details": "JFK-LHR-JFK",
            }
        )
        assert p.pairing_number == "P2"
        assert p.layovers == [Layover(station="LHR", duration_hours=26.5)]
        assert p.leg_count == 2

    def test_arrival_before_departure_rejected(self):
        kwargs = {**PAIRING_KWARGS, "arrival_time": datetime(2024, 1, 4, 9, 0)}
        with pytest.raises(ValidationError, match="arrival_time"):
            Pairing(**kwargs)

    def test_negative_block_hours_rejected(self):
        with pytest.raises(ValidationError):
            Pairing(**{**PAIRING_KWARGS, "block_hours_decimal": -1})

    def test_frozen(self):
        p = Pairing(**PAIRING_KWARGS)
        with pytest.raises(ValidationError):
            p.duration = 5  # type: ignore[misc]

    def test_scored_defaults(self):
        sp = ScoredPairing(**PAIRING_KWARGS)
        assert sp.score == 0
        assert sp.matches == []


class TestPreference:
    def test_known_kind(self):
        pref = Preference(type="ROUTE", value="LHR")
        assert pref.type is PreferenceKind.ROUTE

    def test_kind_tag_is_case_sensitive(self):
        assert Preference(type="route", value="LHR").type is PreferenceKind.UNKNOWN
        assert Preference(type=" AVOID_RED_EYE ").type is PreferenceKind.UNKNOWN

    def test_unknown_kind_is_inert_variant(self):
        pref = Preference(type="LUCKY_NUMBER", value="7")
        assert pref.type is PreferenceKind.UNKNOWN
        assert pref.value == "7"

    def test_numeric_value_stringified(self):
        assert Preference(type="MAX_DURATION", value=4).value == "4"

    def test_missing_value_defaults_empty(self):
        assert Preference(type=PreferenceKind.STRATEGY_MONEY).value == ""
        assert Preference(type="STRATEGY_MONEY", value=None).value == ""

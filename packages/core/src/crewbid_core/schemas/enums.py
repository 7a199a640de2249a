"""Pydantic-compatible enums for pairing preferences."""

from enum import StrEnum


class PreferenceKind(StrEnum):
    """Kind of scoring rule a preference applies."""

    STRATEGY_MONEY = "STRATEGY_MONEY"
    SPECIFIC_DATE_OFF = "SPECIFIC_DATE_OFF"
    DAY_OF_WEEK_OFF = "DAY_OF_WEEK_OFF"
    AVOID_RED_EYE = "AVOID_RED_EYE"
    MAX_LEGS_PER_DAY = "MAX_LEGS_PER_DAY"
    ROUTE = "ROUTE"
    TIME_WINDOW = "TIME_WINDOW"
    MAX_DURATION = "MAX_DURATION"
    AVOID_AIRPORT = "AVOID_AIRPORT"
    # Tags the ranker does not know about; always ignored.
    UNKNOWN = "UNKNOWN"

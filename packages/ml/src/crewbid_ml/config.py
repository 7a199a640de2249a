"""Ranking and analyzer configuration via environment variables."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict
from pydantic_settings import BaseSettings, SettingsConfigDict


class ScoreWeights(BaseModel):
    """Immutable per-rule score deltas used by the pairing ranker."""

    model_config = ConfigDict(frozen=True)

    money_multiplier: float = 2  # points per block hour
    specific_date_off: int = -500  # dealbreaker
    day_of_week_off: int = -40
    day_of_week_free: int = 10
    red_eye: int = -50
    max_legs: int = 15
    route: int = 30
    time_window: int = 20
    max_duration: int = 15
    avoid_airport: int = -100

    high_earnings_threshold: float = 15
    red_eye_last_hour: int = 7  # arrivals from 00:00 through this hour


DEFAULT_WEIGHTS = ScoreWeights()


class RankingSettings(BaseSettings):
    """Settings loaded from environment / .env file."""

    model_config = SettingsConfigDict(
        env_prefix="CREWBID_", env_file=".env", extra="ignore"
    )

    # Score deltas (defaults come from ScoreWeights)
    money_multiplier: float = DEFAULT_WEIGHTS.money_multiplier
    specific_date_off: int = DEFAULT_WEIGHTS.specific_date_off
    day_of_week_off: int = DEFAULT_WEIGHTS.day_of_week_off
    day_of_week_free: int = DEFAULT_WEIGHTS.day_of_week_free
    red_eye: int = DEFAULT_WEIGHTS.red_eye
    max_legs: int = DEFAULT_WEIGHTS.max_legs
    route: int = DEFAULT_WEIGHTS.route
    time_window: int = DEFAULT_WEIGHTS.time_window
    max_duration: int = DEFAULT_WEIGHTS.max_duration
    avoid_airport: int = DEFAULT_WEIGHTS.avoid_airport

    # Thresholds
    high_earnings_threshold: float = DEFAULT_WEIGHTS.high_earnings_threshold
    red_eye_last_hour: int = DEFAULT_WEIGHTS.red_eye_last_hour

    # Schedule analyzer
    top_picks: int = 5
    match_snippets: int = 3
    europe_limit: int = 5
    close_score_spread: int = 20
    european_markers: list[str] = [
        "LON",
        "CDG",
        "FRA",
        "MAD",
        "BCN",
        "AMS",
        "ZRH",
        "MXP",
        "FCO",
        "VIE",
    ]

    def weights(self) -> ScoreWeights:
        """Freeze the score-related fields into a ScoreWeights instance."""
        return ScoreWeights(
            **self.model_dump(include=set(ScoreWeights.model_fields))
        )


settings = RankingSettings()

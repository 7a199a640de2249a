"""Pairing, layover and scored pairing DTOs."""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field, model_validator
from pydantic.alias_generators import to_camel


class _CamelModel(BaseModel):
    """Frozen model accepting both snake_case names and camelCase aliases."""

    model_config = ConfigDict(
        frozen=True, alias_generator=to_camel, populate_by_name=True
    )


class Layover(_CamelModel):
    """Rest period between two legs of a pairing."""

    station: str = Field(default="", description="IATA airport code")
    duration_hours: float | None = None


class Pairing(_CamelModel):
    """Multi-day crew work trip as supplied by the host application."""

    pairing_number: str

    # Schedule (local wall-clock time)
    departure_time: datetime
    arrival_time: datetime
    duration: float = Field(description="Days spanned by the pairing")

    layovers: list[Layover] = Field(default_factory=list)

    # Block hours
    block_hours: str = Field(description="Display string, e.g. 12:30")
    block_hours_decimal: float = Field(ge=0)

    details: str = ""

    @model_validator(mode="after")
    def _validate_times(self) -> Pairing:
        if self.arrival_time < self.departure_time:
            msg = (
                f"Pairing {self.pairing_number}: arrival_time must not be "
                "before departure_time"
            )
            raise ValueError(msg)
        return self

    @property
    def leg_count(self) -> int:
        """Number of flight legs (one more than the layover count)."""
        return len(self.layovers) + 1


class ScoredPairing(Pairing):
    """Pairing enriched with its preference score and match explanations."""

    score: int = 0
    matches: list[str] = Field(default_factory=list)

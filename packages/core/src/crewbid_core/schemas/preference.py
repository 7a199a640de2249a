"""User preference schema."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, field_validator

from .enums import PreferenceKind


class Preference(BaseModel):
    """A single scoring rule: a kind plus its raw parameter value.

    ``value`` is kept as the string the user entered; each rule parses it
    on its own terms at scoring time.
    """

    model_config = ConfigDict(frozen=True)

    type: PreferenceKind
    value: str = ""

    @field_validator("type", mode="before")
    @classmethod
    def _coerce_unknown(cls, v: Any) -> Any:
        # Tags match exactly; "route" is not ROUTE
        if isinstance(v, PreferenceKind):
            return v
        try:
            return PreferenceKind(v)
        except ValueError:
            return PreferenceKind.UNKNOWN

    @field_validator("value", mode="before")
    @classmethod
    def _stringify(cls, v: Any) -> Any:
        if v is None:
            return ""
        if isinstance(v, (int, float)) and not isinstance(v, bool):
            return str(v)
        return v

"""Core schemas for Crewbid."""

from .enums import PreferenceKind
from .pairing import Layover, Pairing, ScoredPairing
from .preference import Preference

__all__ = [
    "Layover",
    "Pairing",
    "Preference",
    "PreferenceKind",
    "ScoredPairing",
]

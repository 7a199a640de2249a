"""Load pairings and parse preference options for the CLI."""

from __future__ import annotations

import json
import logging
from typing import TYPE_CHECKING, Any

from pydantic import TypeAdapter

from crewbid_core.schemas import Pairing, Preference, PreferenceKind

if TYPE_CHECKING:
    from pathlib import Path

logger = logging.getLogger(__name__)

_pairing_list = TypeAdapter(list[Pairing])


def load_pairings(path: Path) -> list[Pairing]:
    """Read a JSON file holding a list of pairings or {"pairings": [...]}.

    Raises:
        ValueError: If the file is not valid JSON or has the wrong shape.
        pydantic.ValidationError: If a pairing fails schema validation.
    """
    data: Any = json.loads(path.read_text(encoding="utf-8"))
    if isinstance(data, dict):
        data = data.get("pairings")
    if not isinstance(data, list):
        msg = f"{path}: expected a JSON list of pairings"
        raise ValueError(msg)

    pairings = _pairing_list.validate_python(data)
    logger.info("Loaded %d pairings from %s", len(pairings), path)
    return pairings


def parse_preference(option: str) -> Preference:
    """Parse a KIND=VALUE option, e.g. ``ROUTE=LHR`` or ``AVOID_RED_EYE``."""
    kind, _, value = option.partition("=")
    pref = Preference(type=kind, value=value)
    if pref.type is PreferenceKind.UNKNOWN:
        logger.warning("Unknown preference kind %r will be ignored", kind)
    return pref

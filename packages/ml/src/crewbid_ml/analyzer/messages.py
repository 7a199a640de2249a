"""Fixed user-facing texts and keyword cues for the schedule analyzer."""

from __future__ import annotations

EMPTY_LIST_MESSAGE = (
    "There are no pairings in the current filtered list. Try widening your "
    "filters (dates, aircraft, or duration) to get more results."
)

FALLBACK_MESSAGE = (
    "Sorry, I couldn't analyze the schedule due to an internal error. "
    "Try again or ask a simpler question."
)

NO_EUROPE_MESSAGE = "I couldn't find obvious European trips in the filtered list."

CLOSE_SCORES_NOTE = (
    "Note: Scores are close across pairings — consider tightening preferences "
    "or adding a strategy (e.g., Maximize Earnings) to make clearer distinctions."
)

LONGEST_CUES = ("longest", "long layover", "long layovers")
EUROPE_CUES = ("europe", "europ")
MAX_BLOCK_CUES = ("block", "earn", "money", "hours")

DATE_FORMAT = "%b %d %H:%M"


def build_header(count: int, query: str) -> str:
    """Opening line quoting the user's question."""
    return (
        f"I've reviewed {count} filtered pairings and here are highlights "
        f'based on your query: "{query}".'
    )

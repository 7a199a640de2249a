"""Crewbid ML - pairing ranking and schedule summaries."""

from crewbid_ml.analyzer import (
    HeuristicScheduleAnalyzer,
    ScheduleAnalyzer,
    analyze_schedule,
    build_summary,
)
from crewbid_ml.config import RankingSettings, ScoreWeights
from crewbid_ml.ranking import PairingRanker, rank_pairings

__all__ = [
    "HeuristicScheduleAnalyzer",
    "PairingRanker",
    "RankingSettings",
    "ScheduleAnalyzer",
    "ScoreWeights",
    "analyze_schedule",
    "build_summary",
    "rank_pairings",
]

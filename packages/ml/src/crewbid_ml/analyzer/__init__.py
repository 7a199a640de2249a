"""Heuristic question answering over scored pairing lists."""

from __future__ import annotations

from crewbid_ml.analyzer.schedule_analyzer import (
    HeuristicScheduleAnalyzer,
    ScheduleAnalyzer,
    analyze_schedule,
    build_summary,
)

__all__ = [
    "HeuristicScheduleAnalyzer",
    "ScheduleAnalyzer",
    "analyze_schedule",
    "build_summary",
]

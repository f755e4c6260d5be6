# ospa/scoring/aggregation.py
"""
Aggregation rules shared by the Adviser and Journalist calculators.

    level_weighted_sum   Σ_level ( Σ_entries points[level][rank] ) × weight[level]
    max_per_level        { level: max points of that level's entries }
    service_sum          Σ_entries points[level]
    flat_achievement_sum Σ_entries points[level][rank]

Repeated entries (same level and rank) all count; only leadership collapses
to the best entry per level.
"""
from collections import defaultdict
from decimal import Decimal
from typing import Dict, Iterable, Mapping

from ospa.models.candidate import Achievement, LeadershipEntry, ServiceEntry
from ospa.models.enumerations import Level, Position, Rank
from ospa.scoring.rubric import (
    AchievementRubric,
    achievement_points,
    flat_points,
    position_points,
    rank_points,
)
from ospa.scoring.utils import ZERO, decimal_sum


def level_weighted_sum(entries: Iterable[Achievement], rubric: AchievementRubric) -> Decimal:
    """Adviser achievement category total."""
    points_by_level: Dict[Level, int] = defaultdict(int)
    for entry in entries:
        points_by_level[entry.level] += achievement_points(rubric, entry.level, entry.rank)

    total = ZERO
    for level, level_rubric in rubric.levels.items():
        total += points_by_level.get(level, 0) * level_rubric.weight
    return total


def max_per_level(
    entries: Iterable[LeadershipEntry],
    table: Mapping[Level, Mapping[Position, int]],
) -> Dict[Level, int]:
    """Best officer points per level; levels without entries are absent."""
    best: Dict[Level, int] = {}
    for entry in entries:
        pts = position_points(table, entry.level, entry.position)
        if pts > best.get(entry.level, 0):
            best[entry.level] = pts
    return best


def service_sum(entries: Iterable[ServiceEntry], points: Mapping[Level, int]) -> Decimal:
    """Raw (unweighted) points over every entry."""
    return decimal_sum(Decimal(flat_points(points, entry.level)) for entry in entries)


def flat_achievement_sum(
    entries: Iterable[Achievement],
    table: Mapping[Level, Mapping[Rank, int]],
) -> Decimal:
    """Journalist achievement category total: per-entry points, no weighting."""
    return decimal_sum(
        Decimal(rank_points(table, entry.level, entry.rank)) for entry in entries
    )

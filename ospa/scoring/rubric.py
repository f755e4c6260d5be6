# ospa/scoring/rubric.py
"""
Rubric Configuration
--------------------
Point tables and weights for both nomination types.

Adviser achievement tables carry a weight per level:
    contribution = Σ_level ( Σ_entries points[level][rank] ) × weight[level]
Adviser leadership and service tables carry one category-wide weight.
Journalist tables carry no weights at all; points are summed as-is.

Every lookup is total: a level, rank or position missing from a table is
worth 0. Tables are frozen pydantic models so they can be replaced from a
JSON file (ADVISER_RUBRIC_PATH / JOURNALIST_RUBRIC_PATH) without touching
the calculators.
"""
import json
from decimal import Decimal
from functools import lru_cache
from pathlib import Path
from typing import Annotated, Dict, Mapping, Union

import structlog
from pydantic import BaseModel, ConfigDict, Field, ValidationError

from ospa.config import get_settings
from ospa.core.exceptions import RubricConfigurationException
from ospa.models.enumerations import (
    AcademicRank,
    Level,
    NominationType,
    Position,
    PublicationPosition,
    Rank,
)

logger = structlog.get_logger(__name__)


# ---------------------------------------------------------------------------
# Table shapes
# ---------------------------------------------------------------------------

Points = Annotated[int, Field(ge=0)]
Weight = Annotated[Decimal, Field(ge=0)]


class LevelRubric(BaseModel):
    """Rank points for one level of an achievement category, plus its weight."""
    model_config = ConfigDict(frozen=True)

    points: Dict[Rank, Points] = Field(default_factory=dict)
    weight: Weight = Decimal("0")


class AchievementRubric(BaseModel):
    model_config = ConfigDict(frozen=True)

    levels: Dict[Level, LevelRubric] = Field(default_factory=dict)


class LeadershipRubric(BaseModel):
    model_config = ConfigDict(frozen=True)

    levels: Dict[Level, Dict[Position, Points]] = Field(default_factory=dict)
    weight: Weight = Decimal("1")


class ServiceRubric(BaseModel):
    model_config = ConfigDict(frozen=True)

    points: Dict[Level, Points] = Field(default_factory=dict)
    weight: Weight = Decimal("1")


class AdviserRubric(BaseModel):
    model_config = ConfigDict(frozen=True)

    individual: AchievementRubric
    group: AchievementRubric
    special_awards: AchievementRubric
    publication: AchievementRubric
    leadership: LeadershipRubric
    extension: ServiceRubric
    innovations: ServiceRubric
    speakership: ServiceRubric
    books: ServiceRubric
    articles: ServiceRubric


class JournalistRubric(BaseModel):
    model_config = ConfigDict(frozen=True)

    individual: Dict[Level, Dict[Rank, Points]]
    group: Dict[Level, Dict[Rank, Points]]
    special_awards: Dict[Level, Dict[Rank, Points]]
    publication: Dict[Level, Dict[Rank, Points]]
    guild_leadership: Dict[Level, Dict[Position, Points]]
    academic_rank: Dict[AcademicRank, Points]
    pub_position: Dict[PublicationPosition, Points]
    community: Dict[Level, Points]
    published_works: Dict[Level, Points]
    trainings: Dict[Level, Points]


# ---------------------------------------------------------------------------
# Total lookups
# ---------------------------------------------------------------------------

def achievement_points(rubric: AchievementRubric, level: Level, rank: Rank) -> int:
    """Points for one placement; 0 when the level or rank is not in the table."""
    level_rubric = rubric.levels.get(level)
    if level_rubric is None:
        return 0
    return level_rubric.points.get(rank, 0)


def position_points(
    table: Mapping[Level, Mapping[Position, int]],
    level: Level,
    position: Position,
) -> int:
    """Points for one officer role; 0 when unmapped."""
    return table.get(level, {}).get(position, 0)


def rank_points(
    table: Mapping[Level, Mapping[Rank, int]],
    level: Level,
    rank: Rank,
) -> int:
    """Points for one placement in a flat (unweighted) table; 0 when unmapped."""
    return table.get(level, {}).get(rank, 0)


def flat_points(table: Mapping, key) -> int:
    """Single-key lookup (level, academic rank, publication position); 0 when unmapped or unset."""
    if key is None:
        return 0
    return table.get(key, 0)


# ---------------------------------------------------------------------------
# Defaults
# ---------------------------------------------------------------------------

_ALL_RANKS = list(Rank)
_PODIUM = [Rank.FIRST, Rank.SECOND, Rank.THIRD]


def _descending(ranks, top: int) -> Dict[Rank, int]:
    """{1st: top, 2nd: top-1, ...} for the given ranks."""
    return {rank: top - i for i, rank in enumerate(ranks)}


def _achievement(national: int, regional: int, division: int, weights) -> AchievementRubric:
    w_nat, w_reg, w_div = weights
    return AchievementRubric(levels={
        Level.NATIONAL: LevelRubric(points=_descending(_ALL_RANKS, national), weight=Decimal(w_nat)),
        Level.REGIONAL: LevelRubric(points=_descending(_PODIUM, regional), weight=Decimal(w_reg)),
        Level.DIVISION: LevelRubric(points=_descending(_PODIUM, division), weight=Decimal(w_div)),
    })


def _flat_achievement(national: int, regional: int, division: int) -> Dict[Level, Dict[Rank, int]]:
    return {
        Level.NATIONAL: _descending(_ALL_RANKS, national),
        Level.REGIONAL: _descending(_PODIUM, regional),
        Level.DIVISION: _descending(_PODIUM, division),
    }


_OFFICER_TABLE: Dict[Level, Dict[Position, int]] = {
    Level.NATIONAL: {Position.PRESIDENT: 25, Position.VICE_PRESIDENT: 20, Position.OTHER: 18},
    Level.REGIONAL: {Position.PRESIDENT: 20, Position.VICE_PRESIDENT: 15, Position.OTHER: 12},
    Level.DIVISION: {Position.PRESIDENT: 15, Position.VICE_PRESIDENT: 10, Position.OTHER: 8},
}


DEFAULT_ADVISER_RUBRIC = AdviserRubric(
    individual=_achievement(20, 12, 7, ("0.08", "0.05", "0.03")),
    group=_achievement(20, 12, 7, ("0.08", "0.05", "0.03")),
    special_awards=_achievement(15, 7, 4, ("0.03", "0.02", "0.01")),
    publication=_achievement(13, 6, 3, ("0.06", "0.03", "0.02")),
    leadership=LeadershipRubric(levels=_OFFICER_TABLE, weight=Decimal("0.13")),
    extension=ServiceRubric(
        points={Level.NATIONAL: 10, Level.REGIONAL: 7, Level.DIVISION: 5},
        weight=Decimal("0.13"),
    ),
    innovations=ServiceRubric(
        points={
            Level.NATIONAL: 15, Level.REGIONAL: 12, Level.DIVISION: 10,
            Level.DISTRICT: 8, Level.SCHOOL: 6,
        },
        weight=Decimal("0.13"),
    ),
    speakership=ServiceRubric(
        points={Level.NATIONAL: 10, Level.REGIONAL: 7, Level.DIVISION: 5},
        weight=Decimal("0.10"),
    ),
    books=ServiceRubric(
        points={Level.NATIONAL: 10, Level.REGIONAL: 7, Level.DIVISION: 5},
        weight=Decimal("0.05"),
    ),
    articles=ServiceRubric(
        points={Level.NATIONAL: 5, Level.REGIONAL: 3, Level.DIVISION: 1},
        weight=Decimal("0.05"),
    ),
)


DEFAULT_JOURNALIST_RUBRIC = JournalistRubric(
    individual=_flat_achievement(25, 15, 10),
    group=_flat_achievement(20, 12, 7),
    special_awards=_flat_achievement(15, 7, 4),
    publication=_flat_achievement(13, 6, 3),
    guild_leadership=_OFFICER_TABLE,
    academic_rank={
        AcademicRank.HIGHEST: 10,
        AcademicRank.HIGH: 8,
        AcademicRank.HONORS: 5,
        AcademicRank.AVERAGE: 3,
        AcademicRank.NONE: 0,
    },
    pub_position={
        PublicationPosition.EIC: 10,
        PublicationPosition.ASSOC: 8,
        PublicationPosition.SECTION: 6,
        PublicationPosition.WRITER: 4,
    },
    community={
        Level.NATIONAL: 10, Level.REGIONAL: 7, Level.DIVISION: 5,
        Level.DISTRICT: 3, Level.SCHOOL: 2,
    },
    published_works={
        Level.NATIONAL: 5, Level.REGIONAL: 3, Level.DIVISION: 2,
        Level.DISTRICT: 1, Level.SCHOOL: 1,
    },
    trainings={Level.NATIONAL: 3, Level.REGIONAL: 2, Level.DIVISION: 1},
)


# ---------------------------------------------------------------------------
# Loading
# ---------------------------------------------------------------------------

Rubric = Union[AdviserRubric, JournalistRubric]


def load_rubric(path: Union[str, Path], nomination_type: NominationType) -> Rubric:
    """
    Load a rubric override from a JSON file.

    Floats are parsed as Decimal so weights like 0.13 stay exact.

    Raises:
        RubricConfigurationException: file missing, not JSON, or wrong shape.
    """
    model = AdviserRubric if nomination_type == NominationType.ADVISER else JournalistRubric
    try:
        raw = json.loads(Path(path).read_text(encoding="utf-8"), parse_float=Decimal)
        rubric = model.model_validate(raw)
    except OSError as e:
        raise RubricConfigurationException(str(path), str(e)) from e
    except json.JSONDecodeError as e:
        raise RubricConfigurationException(str(path), f"not valid JSON ({e})") from e
    except ValidationError as e:
        raise RubricConfigurationException(str(path), str(e)) from e

    logger.info("rubric_loaded", path=str(path), nomination_type=nomination_type.value)
    return rubric


@lru_cache
def get_rubric(nomination_type: NominationType) -> Rubric:
    """Active rubric: the configured override file if any, else the defaults."""
    settings = get_settings()
    if nomination_type == NominationType.ADVISER:
        if settings.ADVISER_RUBRIC_PATH:
            return load_rubric(settings.ADVISER_RUBRIC_PATH, nomination_type)
        return DEFAULT_ADVISER_RUBRIC
    if settings.JOURNALIST_RUBRIC_PATH:
        return load_rubric(settings.JOURNALIST_RUBRIC_PATH, nomination_type)
    return DEFAULT_JOURNALIST_RUBRIC

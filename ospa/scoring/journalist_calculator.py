"""
scoring/journalist_calculator.py

Grand total for an Outstanding Campus Journalist nomination.

Journalist tables carry no weights. Every contribution is raw points:

    Contest category  = Σ_entries points[level][rank]
    Guild leadership  = Σ_level max(points of that level's roles)
    Academic standing = points[academic_rank]
    Publication role  = points[pub_position]
    Community / published works / trainings = Σ_entries points[level]
    Interview         = 2 × Σ sub-scores
"""

from dataclasses import dataclass, field
from decimal import Decimal
from typing import Dict
import logging

from ospa.models.candidate import JournalistCandidate
from ospa.models.enumerations import Level
from ospa.scoring.aggregation import flat_achievement_sum, max_per_level, service_sum
from ospa.scoring.interview_calculator import interview_total
from ospa.scoring.rubric import JournalistRubric, flat_points
from ospa.scoring.utils import decimal_sum

logger = logging.getLogger(__name__)


@dataclass
class JournalistScoreResult:
    """Journalist breakdown, unrounded."""
    individual: Decimal
    group: Decimal
    special_awards: Decimal
    publication: Decimal
    academic_rank: Decimal
    pub_position: Decimal
    guild_leadership: Decimal
    community: Decimal
    published_works: Decimal
    trainings: Decimal
    interview: Decimal
    grand_total: Decimal
    leadership_by_level: Dict[Level, int] = field(default_factory=dict)

    @property
    def contests(self) -> Decimal:
        return self.individual + self.group + self.special_awards + self.publication

    @property
    def leadership(self) -> Decimal:
        return self.guild_leadership

    @property
    def services(self) -> Decimal:
        return self.community

    def categories(self) -> Dict[str, Decimal]:
        return {
            "individual": self.individual,
            "group": self.group,
            "special_awards": self.special_awards,
            "publication": self.publication,
            "academic_rank": self.academic_rank,
            "pub_position": self.pub_position,
            "guild_leadership": self.guild_leadership,
            "community": self.community,
            "published_works": self.published_works,
            "trainings": self.trainings,
            "interview": self.interview,
        }


class JournalistCalculator:
    """
    Score a JournalistCandidate against a JournalistRubric.

    Example:
        With Honors (5) + Individual National 1st (25) + every interview
        criterion at 0.6 (0.6 × 5 × 2 = 6) gives a grand total of 36.
    """

    def __init__(self, rubric: JournalistRubric):
        self.rubric = rubric

    def calculate(self, candidate: JournalistCandidate) -> JournalistScoreResult:
        r = self.rubric

        individual = flat_achievement_sum(candidate.individual_contests, r.individual)
        group = flat_achievement_sum(candidate.group_contests, r.group)
        special = flat_achievement_sum(candidate.special_awards, r.special_awards)
        publication = flat_achievement_sum(candidate.publication_contests, r.publication)

        academic = Decimal(flat_points(r.academic_rank, candidate.academic_rank))
        position = Decimal(flat_points(r.pub_position, candidate.pub_position))

        by_level = max_per_level(candidate.guild_leadership, r.guild_leadership)
        guild = decimal_sum(Decimal(v) for v in by_level.values())

        community = service_sum(candidate.extension_services, r.community)
        works = service_sum(candidate.published_works, r.published_works)
        trainings = service_sum(candidate.trainings_attended, r.trainings)

        interview = interview_total(candidate.interview)

        grand_total = (
            individual + group + special + publication
            + academic + position
            + guild
            + community + works + trainings
            + interview
        )

        logger.info(
            f"Journalist score: candidate={candidate.candidate_name!r}, "
            f"contests={float(individual + group + special + publication):.2f}, "
            f"academic={float(academic):.2f}, position={float(position):.2f}, "
            f"guild={float(guild):.2f}, interview={float(interview):.2f}, "
            f"total={float(grand_total):.2f}"
        )

        return JournalistScoreResult(
            individual=individual,
            group=group,
            special_awards=special,
            publication=publication,
            academic_rank=academic,
            pub_position=position,
            guild_leadership=guild,
            community=community,
            published_works=works,
            trainings=trainings,
            interview=interview,
            grand_total=grand_total,
            leadership_by_level=by_level,
        )

# ospa/scoring/adviser_calculator.py
"""
Adviser Calculator
------------------
Grand total for an Outstanding School Paper Adviser nomination.

Formula:
    Contest category   = Σ_level ( Σ_entries points[level][rank] ) × weight[level]
                         (individual, group, special awards, publication)
    Leadership         = Σ_level max(points of that level's roles) × 0.13
    Service category   = Σ_entries points[level] × category weight
                         (extension, innovations, speakership, books, articles)
    Interview          = 2 × Σ sub-scores
    Grand total        = Σ all of the above (uncapped)

The average performance rating is computed alongside but never added in.
"""
import structlog
from dataclasses import dataclass, field
from decimal import Decimal
from typing import Dict, Optional

from ospa.models.candidate import AdviserCandidate
from ospa.models.enumerations import Level
from ospa.scoring.aggregation import level_weighted_sum, max_per_level, service_sum
from ospa.scoring.interview_calculator import interview_total
from ospa.scoring.rating_calculator import RatingCalculator, RatingResult
from ospa.scoring.rubric import AdviserRubric, ServiceRubric
from ospa.scoring.utils import decimal_sum

logger = structlog.get_logger(__name__)


@dataclass
class AdviserScoreResult:
    """Output of AdviserCalculator.calculate(). All values unrounded."""
    individual: Decimal
    group: Decimal
    special_awards: Decimal
    publication: Decimal
    leadership: Decimal
    extension: Decimal
    innovations: Decimal
    speakership: Decimal
    books: Decimal
    articles: Decimal
    interview: Decimal
    grand_total: Decimal
    rating: RatingResult
    leadership_by_level: Dict[Level, int] = field(default_factory=dict)

    @property
    def contests(self) -> Decimal:
        return self.individual + self.group + self.special_awards + self.publication

    @property
    def services(self) -> Decimal:
        # Grouping used on the summary card and in the submitted "details"
        return self.extension + self.innovations + self.speakership

    def categories(self) -> Dict[str, Decimal]:
        return {
            "individual": self.individual,
            "group": self.group,
            "special_awards": self.special_awards,
            "publication": self.publication,
            "leadership": self.leadership,
            "extension": self.extension,
            "innovations": self.innovations,
            "speakership": self.speakership,
            "books": self.books,
            "articles": self.articles,
            "interview": self.interview,
        }


def _weighted_service(candidate_entries, rubric: ServiceRubric) -> Decimal:
    return service_sum(candidate_entries, rubric.points) * rubric.weight


class AdviserCalculator:
    """Score an AdviserCandidate against an AdviserRubric."""

    def __init__(self, rubric: AdviserRubric, rating_calculator: Optional[RatingCalculator] = None):
        self.rubric = rubric
        self.rating_calculator = rating_calculator or RatingCalculator()

    def calculate(self, candidate: AdviserCandidate) -> AdviserScoreResult:
        r = self.rubric

        individual = level_weighted_sum(candidate.individual_contests, r.individual)
        group = level_weighted_sum(candidate.group_contests, r.group)
        special = level_weighted_sum(candidate.special_awards, r.special_awards)
        publication = level_weighted_sum(candidate.publication_contests, r.publication)

        by_level = max_per_level(candidate.leadership, r.leadership.levels)
        leadership = decimal_sum(Decimal(v) for v in by_level.values()) * r.leadership.weight

        extension = _weighted_service(candidate.extension_services, r.extension)
        innovations = _weighted_service(candidate.innovations, r.innovations)
        speakership = _weighted_service(candidate.speakership, r.speakership)
        books = _weighted_service(candidate.published_books, r.books)
        articles = _weighted_service(candidate.published_articles, r.articles)

        interview = interview_total(candidate.interview)

        grand_total = (
            individual + group + special + publication
            + leadership
            + extension + innovations + speakership + books + articles
            + interview
        )

        rating = self.rating_calculator.calculate(candidate.performance_ratings)

        logger.info(
            "adviser_score_calculated",
            candidate=candidate.candidate_name,
            contests=float(individual + group + special + publication),
            leadership=float(leadership),
            services=float(extension + innovations + speakership + books + articles),
            interview=float(interview),
            grand_total=float(grand_total),
            average_rating=float(rating.average),
        )

        return AdviserScoreResult(
            individual=individual,
            group=group,
            special_awards=special,
            publication=publication,
            leadership=leadership,
            extension=extension,
            innovations=innovations,
            speakership=speakership,
            books=books,
            articles=articles,
            interview=interview,
            grand_total=grand_total,
            rating=rating,
            leadership_by_level=by_level,
        )

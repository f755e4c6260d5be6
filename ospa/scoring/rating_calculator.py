"""
scoring/rating_calculator.py

Average performance rating for Adviser nominations.

The average is informational: it is shown and submitted but never enters the
grand total. It is the arithmetic mean over however many ratings the record
holds, then classified into a band:

    average >= RATING_OUTSTANDING_MIN        → "Outstanding"
    average >= RATING_VERY_SATISFACTORY_MIN  → "Very Satisfactory"
    otherwise                                → "Needs Improvement"
"""

from dataclasses import dataclass
from decimal import Decimal
from typing import Optional, Sequence

from ospa.config import get_settings
from ospa.models.candidate import RatingEntry
from ospa.scoring.utils import ZERO, decimal_sum, to_decimal

OUTSTANDING = "Outstanding"
VERY_SATISFACTORY = "Very Satisfactory"
NEEDS_IMPROVEMENT = "Needs Improvement"


@dataclass
class RatingResult:
    average: Decimal
    band: str
    count: int


class RatingCalculator:
    """Average and classify performance ratings."""

    def __init__(
        self,
        outstanding_min: Optional[float] = None,
        very_satisfactory_min: Optional[float] = None,
    ):
        settings = get_settings()
        self.outstanding_min = to_decimal(
            settings.RATING_OUTSTANDING_MIN if outstanding_min is None else outstanding_min
        )
        self.very_satisfactory_min = to_decimal(
            settings.RATING_VERY_SATISFACTORY_MIN
            if very_satisfactory_min is None
            else very_satisfactory_min
        )

    def average(self, ratings: Sequence[RatingEntry]) -> Decimal:
        """Mean score; 0 for an empty sequence."""
        if not ratings:
            return ZERO
        total = decimal_sum(to_decimal(r.score) for r in ratings)
        return total / Decimal(len(ratings))

    def band(self, average: Decimal) -> str:
        if average >= self.outstanding_min:
            return OUTSTANDING
        elif average >= self.very_satisfactory_min:
            return VERY_SATISFACTORY
        else:
            return NEEDS_IMPROVEMENT

    def calculate(self, ratings: Sequence[RatingEntry]) -> RatingResult:
        avg = self.average(ratings)
        return RatingResult(average=avg, band=self.band(avg), count=len(ratings))

"""
scoring/projection.py

Display / payload formatting of a ScoreResult.

Subtotals and the grand total are rendered with 2 decimals, the average
rating with 3. Rounding is half-up and happens only here.
"""

from decimal import Decimal
from typing import Dict, Optional

from pydantic import BaseModel

from ospa.models.enumerations import NominationType
from ospa.scoring.adviser_calculator import AdviserScoreResult
from ospa.scoring.engine import ScoreResult
from ospa.scoring.utils import THREE_PLACES, TWO_PLACES, quantize


def format_score(value: Decimal) -> str:
    """Subtotal / total as a 2-decimal string, e.g. Decimal('1.6') -> '1.60'."""
    return str(quantize(value, TWO_PLACES))


def format_rating(value: Decimal) -> str:
    """Average rating as a 3-decimal string, e.g. Decimal('4') -> '4.000'."""
    return str(quantize(value, THREE_PLACES))


class ScoreDetails(BaseModel):
    """Grouped totals shown on the summary card."""
    contests: str
    leadership: str
    services: str
    interview: str


class ScoreProjection(BaseModel):
    nomination_type: NominationType
    grand_total: str
    details: ScoreDetails
    categories: Dict[str, str]
    average_rating: Optional[str] = None
    rating_band: Optional[str] = None


def project(result: ScoreResult) -> ScoreProjection:
    """Format every subtotal of a result for display or submission."""
    is_adviser = isinstance(result, AdviserScoreResult)
    return ScoreProjection(
        nomination_type=NominationType.ADVISER if is_adviser else NominationType.JOURNALIST,
        grand_total=format_score(result.grand_total),
        details=ScoreDetails(
            contests=format_score(result.contests),
            leadership=format_score(result.leadership),
            services=format_score(result.services),
            interview=format_score(result.interview),
        ),
        categories={name: format_score(v) for name, v in result.categories().items()},
        average_rating=format_rating(result.rating.average) if is_adviser else None,
        rating_band=result.rating.band if is_adviser else None,
    )

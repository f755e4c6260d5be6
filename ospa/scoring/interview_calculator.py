"""
scoring/interview_calculator.py

Interview total, shared by both nomination types:

    Interview = 2 × (principles + leadership + engagement + commitment + communication)

Each sub-score is in [0, 1], so the total is in [0, 10].
"""

from decimal import Decimal

from ospa.models.candidate import InterviewScores
from ospa.models.enumerations import InterviewCriterion
from ospa.scoring.utils import decimal_sum, to_decimal

INTERVIEW_FACTOR = Decimal("2")


def interview_total(scores: InterviewScores) -> Decimal:
    raw = decimal_sum(
        to_decimal(getattr(scores, criterion.value)) for criterion in InterviewCriterion
    )
    return raw * INTERVIEW_FACTOR

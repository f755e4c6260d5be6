"""
scoring/engine.py

Single entry point for scoring a candidate record.

Dispatches on the candidate variant to the matching calculator. The engine is
pure: the same record and rubric always produce the same result, and the
record is never modified.
"""

from typing import Optional, Union

from ospa.models.candidate import AdviserCandidate, JournalistCandidate
from ospa.models.enumerations import NominationType
from ospa.scoring.adviser_calculator import AdviserCalculator, AdviserScoreResult
from ospa.scoring.journalist_calculator import JournalistCalculator, JournalistScoreResult
from ospa.scoring.rating_calculator import RatingCalculator
from ospa.scoring.rubric import AdviserRubric, JournalistRubric, get_rubric

ScoreResult = Union[AdviserScoreResult, JournalistScoreResult]


class ScoringEngine:
    """Score either nomination type with its own rubric."""

    def __init__(
        self,
        adviser_rubric: Optional[AdviserRubric] = None,
        journalist_rubric: Optional[JournalistRubric] = None,
        rating_calculator: Optional[RatingCalculator] = None,
    ):
        self.adviser = AdviserCalculator(
            adviser_rubric or get_rubric(NominationType.ADVISER),
            rating_calculator,
        )
        self.journalist = JournalistCalculator(
            journalist_rubric or get_rubric(NominationType.JOURNALIST)
        )

    def score(self, candidate: Union[AdviserCandidate, JournalistCandidate]) -> ScoreResult:
        if isinstance(candidate, AdviserCandidate):
            return self.adviser.calculate(candidate)
        if isinstance(candidate, JournalistCandidate):
            return self.journalist.calculate(candidate)
        raise TypeError(f"Unsupported candidate type: {type(candidate).__name__}")


def score_candidate(candidate: Union[AdviserCandidate, JournalistCandidate]) -> ScoreResult:
    """Score with the active (configured or default) rubrics."""
    return ScoringEngine().score(candidate)

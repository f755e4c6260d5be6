"""
Dependencies - OSPA Scorer
ospa/core/dependencies.py

FastAPI dependency injection for the scoring engine and submission service.
"""

from functools import lru_cache

from ospa.scoring.engine import ScoringEngine
from ospa.services.submission_service import SubmissionService


@lru_cache()
def get_scoring_engine() -> ScoringEngine:
    """Get cached ScoringEngine built from the active rubrics."""
    return ScoringEngine()


@lru_cache()
def get_submission_service() -> SubmissionService:
    """Get cached SubmissionService posting to SUBMISSION_URL."""
    return SubmissionService(engine=get_scoring_engine())

"""
routers/scoring.py - Scoring Endpoints

Endpoints:
  GET  /api/v1/rubrics/{nomination}  - active rubric ("adviser" or "journalist")
  POST /api/v1/scoring/score         - score a record, 2/3-decimal breakdown
"""

from typing import Any, Dict, Literal

from fastapi import APIRouter, Body, Depends

from ospa.core.dependencies import get_scoring_engine
from ospa.models.enumerations import NominationType
from ospa.routers.errors import ErrorResponse
from ospa.routers.records import parse_record
from ospa.scoring.engine import ScoringEngine
from ospa.scoring.projection import ScoreProjection, project
from ospa.scoring.rubric import get_rubric

router = APIRouter(prefix="/api/v1", tags=["Scoring"])

_NOMINATION_KEYS = {
    "adviser": NominationType.ADVISER,
    "journalist": NominationType.JOURNALIST,
}


@router.get(
    "/rubrics/{nomination}",
    summary="Active rubric for a nomination type",
    responses={500: {"model": ErrorResponse, "description": "Rubric override file could not be loaded"}},
)
async def get_active_rubric(nomination: Literal["adviser", "journalist"]):
    return get_rubric(_NOMINATION_KEYS[nomination]).model_dump(mode="json")


@router.post(
    "/scoring/score",
    response_model=ScoreProjection,
    summary="Score a candidate record",
    responses={422: {"model": ErrorResponse, "description": "Invalid candidate record"}},
)
async def score_record(
    payload: Dict[str, Any] = Body(...),
    engine: ScoringEngine = Depends(get_scoring_engine),
):
    candidate = parse_record(payload)
    return project(engine.score(candidate))

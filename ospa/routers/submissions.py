"""
routers/submissions.py - Submission Endpoint

  POST /api/v1/submissions - validate, score and forward a nomination

Missing identity fields or MOV → 422 SUBMISSION_INCOMPLETE (nothing is sent).
Transport failure → 200 with status "failed"; the client keeps its record.
"""

from typing import Any, Dict

from fastapi import APIRouter, Body, Depends

from ospa.core.dependencies import get_submission_service
from ospa.routers.errors import ErrorResponse
from ospa.routers.records import parse_record
from ospa.services.submission_service import SubmissionResult, SubmissionService

router = APIRouter(prefix="/api/v1", tags=["Submissions"])


@router.post(
    "/submissions",
    response_model=SubmissionResult,
    summary="Submit a nomination",
    responses={
        422: {
            "model": ErrorResponse,
            "description": "Invalid record, missing required items, or unacceptable MOV",
            "content": {
                "application/json": {
                    "example": {
                        "error_code": "SUBMISSION_INCOMPLETE",
                        "message": "Please complete the following: Consolidated MOV PDF",
                        "details": {"missing": ["Consolidated MOV PDF"]},
                        "timestamp": "2025-06-01T08:00:00+00:00",
                    }
                }
            },
        },
    },
)
async def submit_record(
    payload: Dict[str, Any] = Body(...),
    service: SubmissionService = Depends(get_submission_service),
):
    candidate = parse_record(payload)
    return await service.submit(candidate)

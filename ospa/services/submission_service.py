"""
Submission Service - OSPA Scorer
ospa/services/submission_service.py

Sends a scored nomination to the spreadsheet web app.

Flow:
    1. check_ready        - identity fields and MOV present, else SubmissionValidationException
    2. score + project    - ScoringEngine, 2/3-decimal strings
    3. build_payload      - JSON body with the MOV renamed to its normalized filename
    4. POST               - httpx; the response body is never inspected

A transport error is reported as SubmissionResult(status="failed"); the caller
keeps its record and may retry. There is no automatic retry.
"""

import json
from datetime import datetime, timezone
from typing import Any, Dict, List, Literal, Optional, Union

import httpx
import structlog
from pydantic import BaseModel

from ospa.config import get_settings
from ospa.core.exceptions import SubmissionValidationException
from ospa.models.candidate import AdviserCandidate, JournalistCandidate
from ospa.scoring.engine import ScoreResult, ScoringEngine
from ospa.scoring.projection import project
from ospa.services.mov_service import normalized_filename, validate_mov

logger = structlog.get_logger(__name__)

Record = Union[AdviserCandidate, JournalistCandidate]


class SubmissionResult(BaseModel):
    status: Literal["success", "failed"]
    file_name: Optional[str] = None
    grand_total: Optional[str] = None
    error: Optional[str] = None
    submitted_at: str


def check_ready(candidate: Record) -> List[str]:
    """Labels of the required items that are still missing."""
    missing = []
    if not candidate.division:
        missing.append("Division")
    if not candidate.school_name.strip():
        missing.append("School Name")
    if not candidate.candidate_name.strip():
        missing.append("Candidate Name")
    if candidate.mov_file is None:
        missing.append("Consolidated MOV PDF")
    return missing


def build_payload(candidate: Record, result: ScoreResult) -> Dict[str, Any]:
    """
    Outbound JSON body.

    Scores are strings (2 decimals, average rating 3). ``rawJson`` is the
    record without the MOV bytes, which already travel in ``movFile``.
    """
    projection = project(result)
    file_name = normalized_filename(
        candidate.division or "", candidate.school_name, candidate.candidate_name
    )
    mov = candidate.mov_file

    return {
        "timestamp": datetime.now(timezone.utc).isoformat(),
        "nominationType": candidate.nomination_type.value,
        "candidateName": candidate.candidate_name,
        "division": candidate.division,
        "schoolName": candidate.school_name,
        "averageRating": projection.average_rating,
        "ratingBand": projection.rating_band,
        "grandTotal": projection.grand_total,
        "details": projection.details.model_dump(),
        "categories": projection.categories,
        "movFile": {
            "name": file_name,
            "data": mov.data,
            "mimeType": mov.mime_type,
        } if mov is not None else None,
        "rawJson": json.dumps(candidate.model_dump(mode="json", exclude={"mov_file"})),
    }


class SubmissionService:
    """POST scored nominations to the configured endpoint."""

    def __init__(
        self,
        url: Optional[str] = None,
        timeout: Optional[float] = None,
        engine: Optional[ScoringEngine] = None,
        client: Optional[httpx.AsyncClient] = None,
    ):
        settings = get_settings()
        self.url = url or settings.SUBMISSION_URL
        self.timeout = timeout or settings.SUBMISSION_TIMEOUT_SECONDS
        self.engine = engine or ScoringEngine()
        self._client = client

    async def _post(self, payload: Dict[str, Any]) -> None:
        if self._client is not None:
            await self._client.post(self.url, json=payload)
            return
        async with httpx.AsyncClient(timeout=self.timeout, follow_redirects=True) as client:
            await client.post(self.url, json=payload)

    async def submit(self, candidate: Record) -> SubmissionResult:
        """
        Validate, score and send one nomination.

        Raises:
            SubmissionValidationException: required fields or MOV missing
            InvalidMOVFileException: attached MOV is not an acceptable PDF
        """
        missing = check_ready(candidate)
        if missing:
            logger.warning("submission_blocked", missing=missing)
            raise SubmissionValidationException(missing)
        candidate = candidate.model_copy(update={"mov_file": validate_mov(candidate.mov_file)})

        result = self.engine.score(candidate)
        payload = build_payload(candidate, result)
        file_name = payload["movFile"]["name"]

        try:
            await self._post(payload)
        except httpx.HTTPError as e:
            logger.error(
                "submission_failed",
                candidate=candidate.candidate_name,
                url=self.url,
                error=str(e),
            )
            return SubmissionResult(
                status="failed",
                file_name=file_name,
                grand_total=payload["grandTotal"],
                error=str(e) or type(e).__name__,
                submitted_at=payload["timestamp"],
            )

        logger.info(
            "submission_sent",
            candidate=candidate.candidate_name,
            division=candidate.division,
            file_name=file_name,
            grand_total=payload["grandTotal"],
        )
        return SubmissionResult(
            status="success",
            file_name=file_name,
            grand_total=payload["grandTotal"],
            submitted_at=payload["timestamp"],
        )

"""
Records Router - OSPA Scorer
ospa/routers/records.py

Stateless record editing: the client holds the record and sends it back with
each command. Nothing is persisted.

Endpoints:
  GET  /api/v1/divisions          - the 16 NCR divisions
  POST /api/v1/records/new        - initial record for a nomination type
  POST /api/v1/records/commands   - apply one command, return the new record
"""

from typing import Any, Dict, List, Union

from fastapi import APIRouter
from fastapi.exceptions import RequestValidationError
from pydantic import BaseModel, ValidationError

from ospa.config import NCR_DIVISIONS
from ospa.models.candidate import (
    AdviserCandidate,
    Candidate,
    JournalistCandidate,
    new_record,
    parse_candidate,
)
from ospa.models.commands import Command
from ospa.models.enumerations import NominationType
from ospa.routers.errors import ErrorResponse
from ospa.services.record_service import apply_command

router = APIRouter(prefix="/api/v1", tags=["Records"])

Record = Union[AdviserCandidate, JournalistCandidate]


#  Schemas


class NewRecordRequest(BaseModel):
    nomination_type: NominationType


class CommandRequest(BaseModel):
    record: Candidate
    command: Command


def parse_record(payload: Dict[str, Any]) -> Record:
    """Validate a raw body into a candidate, reporting errors as a 422."""
    try:
        return parse_candidate(payload)
    except ValidationError as e:
        raise RequestValidationError(e.errors())


#  Endpoints


@router.get("/divisions", response_model=List[str], summary="NCR divisions")
async def list_divisions():
    return NCR_DIVISIONS


@router.post(
    "/records/new",
    summary="Initial record for a nomination type",
    responses={422: {"model": ErrorResponse, "description": "Unknown nomination type"}},
)
async def create_record(request: NewRecordRequest):
    return new_record(request.nomination_type).model_dump(mode="json", by_alias=True)


@router.post(
    "/records/commands",
    summary="Apply one edit command to a record",
    responses={
        400: {"model": ErrorResponse, "description": "Category or field not part of this nomination type"},
        422: {"model": ErrorResponse, "description": "Invalid record, command or entry"},
    },
)
async def run_command(request: CommandRequest):
    try:
        updated = apply_command(request.record, request.command)
    except ValidationError as e:
        raise RequestValidationError(e.errors())
    return updated.model_dump(mode="json", by_alias=True)

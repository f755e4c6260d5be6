"""
Record Service - OSPA Scorer
ospa/services/record_service.py

Pure state transitions for an in-progress nomination record:

    apply_command(record, command) -> new record

The input record is never modified. Commands that name a category or field
the nomination type does not have raise CategoryNotApplicableException, so
wrong-mode data never reaches the scoring engine.
"""

from typing import Union

import structlog

from ospa.core.exceptions import CategoryNotApplicableException
from ospa.models.candidate import (
    AdviserCandidate,
    InterviewScores,
    JournalistCandidate,
    new_entry_id,
    new_record,
)
from ospa.models.commands import (
    AddEntry,
    Command,
    RemoveEntry,
    ResetRecord,
    SetField,
    SetInterviewScore,
    UpdateRating,
)
from ospa.models.enumerations import Category

logger = structlog.get_logger(__name__)

Record = Union[AdviserCandidate, JournalistCandidate]


def _require_category(record: Record, category: Category) -> None:
    if category not in record.CATEGORIES:
        raise CategoryNotApplicableException(category.value, record.nomination_type.value)


def _add_entry(record: Record, command: AddEntry) -> Record:
    _require_category(record, command.category)
    entry_model = record.CATEGORIES[command.category]
    entry = entry_model.model_validate({**command.entry, "id": new_entry_id()})
    current = getattr(record, command.category.value)
    return record.model_copy(update={command.category.value: [*current, entry]})


def _remove_entry(record: Record, command: RemoveEntry) -> Record:
    _require_category(record, command.category)
    current = getattr(record, command.category.value)
    remaining = [e for e in current if e.id != command.entry_id]
    return record.model_copy(update={command.category.value: remaining})


def _set_field(record: Record, command: SetField) -> Record:
    if command.field not in record.SCALAR_FIELDS:
        raise CategoryNotApplicableException(command.field, record.nomination_type.value)
    # Re-validate the whole record so field validators (division, mov_file) run
    data = record.model_dump()
    data[command.field] = command.value
    return type(record).model_validate(data)


def _update_rating(record: Record, command: UpdateRating) -> Record:
    if not isinstance(record, AdviserCandidate):
        raise CategoryNotApplicableException("performance_ratings", record.nomination_type.value)
    ratings = [
        r.model_copy(update={"score": command.score}) if r.year == command.year else r
        for r in record.performance_ratings
    ]
    return record.model_copy(update={"performance_ratings": ratings})


def _set_interview_score(record: Record, command: SetInterviewScore) -> Record:
    interview = InterviewScores.model_validate(
        {**record.interview.model_dump(), command.criterion.value: command.score}
    )
    return record.model_copy(update={"interview": interview})


def apply_command(record: Record, command: Command) -> Record:
    """Return the record that results from applying one command."""
    if isinstance(command, AddEntry):
        updated = _add_entry(record, command)
    elif isinstance(command, RemoveEntry):
        updated = _remove_entry(record, command)
    elif isinstance(command, SetField):
        updated = _set_field(record, command)
    elif isinstance(command, UpdateRating):
        updated = _update_rating(record, command)
    elif isinstance(command, SetInterviewScore):
        updated = _set_interview_score(record, command)
    elif isinstance(command, ResetRecord):
        updated = new_record(record.nomination_type)
    else:
        raise TypeError(f"Unsupported command: {type(command).__name__}")

    logger.debug("command_applied", kind=command.kind, nomination_type=record.nomination_type.value)
    return updated

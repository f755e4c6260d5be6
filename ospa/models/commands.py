from pydantic import BaseModel, Field
from typing import Annotated, Any, Dict, Literal, Union

from ospa.models.enumerations import Category, InterviewCriterion


class AddEntry(BaseModel):
    """Append an entry to a category; a fresh id is always assigned."""

    kind: Literal["add_entry"] = "add_entry"
    category: Category
    entry: Dict[str, Any] = Field(
        ...,
        description="Entry fields, e.g. {'level': 'National', 'rank': '1st', 'year': '2024'}"
    )


class RemoveEntry(BaseModel):
    """Delete an entry by id; unknown ids leave the record unchanged."""

    kind: Literal["remove_entry"] = "remove_entry"
    category: Category
    entry_id: str


class SetField(BaseModel):
    """Set a scalar field (identity fields, academic_rank, pub_position, mov_file)."""

    kind: Literal["set_field"] = "set_field"
    field: str
    value: Any = None


class UpdateRating(BaseModel):
    kind: Literal["update_rating"] = "update_rating"
    year: str
    score: float = Field(..., ge=0.0, le=5.0)


class SetInterviewScore(BaseModel):
    kind: Literal["set_interview_score"] = "set_interview_score"
    criterion: InterviewCriterion
    score: float = Field(..., ge=0.0, le=1.0)


class ResetRecord(BaseModel):
    kind: Literal["reset"] = "reset"


Command = Annotated[
    Union[AddEntry, RemoveEntry, SetField, UpdateRating, SetInterviewScore, ResetRecord],
    Field(discriminator="kind"),
]

"""
Candidate Record Models - OSPA Scorer
ospa/models/candidate.py

A nomination is one of two mutually exclusive record shapes, discriminated by
``nomination_type``. Each shape only carries the categories its scoring
algorithm reads, and unknown fields are rejected.
"""

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter, field_validator
from uuid import uuid4
from typing import Annotated, ClassVar, Dict, FrozenSet, List, Literal, Optional, Type, Union

from ospa.config import find_division, get_settings
from ospa.models.enumerations import (
    AcademicRank,
    Category,
    Level,
    NominationType,
    Position,
    PublicationPosition,
    Rank,
)


def new_entry_id() -> str:
    """Short random identifier used to address an entry in remove commands."""
    return uuid4().hex[:9]


# =============================================================================
# ENTRIES
# =============================================================================

class Achievement(BaseModel):
    """A contest placement (individual, group, special award, publication)."""

    id: str = Field(default_factory=new_entry_id)
    level: Level
    rank: Rank
    year: str = Field(default="", max_length=20)


class ServiceEntry(BaseModel):
    """A level-only entry: extension service, innovation, speakership, etc."""

    id: str = Field(default_factory=new_entry_id)
    level: Level


class LeadershipEntry(BaseModel):
    """An officer role in a press conference / campus journalism guild."""

    id: str = Field(default_factory=new_entry_id)
    level: Level
    position: Position


class RatingEntry(BaseModel):
    year: str
    score: float = Field(..., ge=0.0, le=5.0)


class InterviewScores(BaseModel):
    principles: float = Field(default=0.0, ge=0.0, le=1.0)
    leadership: float = Field(default=0.0, ge=0.0, le=1.0)
    engagement: float = Field(default=0.0, ge=0.0, le=1.0)
    commitment: float = Field(default=0.0, ge=0.0, le=1.0)
    communication: float = Field(default=0.0, ge=0.0, le=1.0)


class MOVFile(BaseModel):
    """Consolidated Means of Verification PDF, base64 encoded."""

    name: str = Field(..., min_length=1)
    data: str = Field(..., description="Base64 payload without the data: URL prefix")
    mime_type: str = Field(..., alias="mimeType")

    model_config = ConfigDict(populate_by_name=True)


def default_performance_ratings() -> List[RatingEntry]:
    settings = get_settings()
    return [
        RatingEntry(year=year, score=settings.DEFAULT_RATING_SCORE)
        for year in settings.PERFORMANCE_RATING_YEARS
    ]


# =============================================================================
# CANDIDATE VARIANTS
# =============================================================================

class CandidateBase(BaseModel):
    """Identity fields shared by both nomination types."""

    model_config = ConfigDict(extra="forbid")

    candidate_name: str = Field(default="", max_length=255)
    school_name: str = Field(default="", max_length=255)
    division: Optional[str] = Field(
        default=None,
        description="One of the 16 NCR divisions; required only at submission"
    )
    mov_file: Optional[MOVFile] = None
    interview: InterviewScores = Field(default_factory=InterviewScores)

    CATEGORIES: ClassVar[Dict[Category, Type[BaseModel]]] = {}
    SCALAR_FIELDS: ClassVar[FrozenSet[str]] = frozenset(
        {"candidate_name", "school_name", "division", "mov_file"}
    )

    @field_validator("division")
    @classmethod
    def validate_division(cls, value: Optional[str]) -> Optional[str]:
        if value is None or value.strip() == "":
            return None
        division = find_division(value)
        if division is None:
            raise ValueError(f"Unknown NCR division: {value}")
        return division


class AdviserCandidate(CandidateBase):
    """Outstanding School Paper Adviser nomination."""

    nomination_type: Literal[NominationType.ADVISER] = NominationType.ADVISER

    performance_ratings: List[RatingEntry] = Field(
        default_factory=default_performance_ratings,
        min_length=5,
        max_length=5,
    )
    individual_contests: List[Achievement] = Field(default_factory=list)
    group_contests: List[Achievement] = Field(default_factory=list)
    special_awards: List[Achievement] = Field(default_factory=list)
    publication_contests: List[Achievement] = Field(default_factory=list)
    leadership: List[LeadershipEntry] = Field(default_factory=list)
    extension_services: List[ServiceEntry] = Field(default_factory=list)
    innovations: List[ServiceEntry] = Field(default_factory=list)
    speakership: List[ServiceEntry] = Field(default_factory=list)
    published_books: List[ServiceEntry] = Field(default_factory=list)
    published_articles: List[ServiceEntry] = Field(default_factory=list)

    CATEGORIES: ClassVar[Dict[Category, Type[BaseModel]]] = {
        Category.INDIVIDUAL_CONTESTS: Achievement,
        Category.GROUP_CONTESTS: Achievement,
        Category.SPECIAL_AWARDS: Achievement,
        Category.PUBLICATION_CONTESTS: Achievement,
        Category.LEADERSHIP: LeadershipEntry,
        Category.EXTENSION_SERVICES: ServiceEntry,
        Category.INNOVATIONS: ServiceEntry,
        Category.SPEAKERSHIP: ServiceEntry,
        Category.PUBLISHED_BOOKS: ServiceEntry,
        Category.PUBLISHED_ARTICLES: ServiceEntry,
    }


class JournalistCandidate(CandidateBase):
    """Outstanding Campus Journalist nomination."""

    nomination_type: Literal[NominationType.JOURNALIST] = NominationType.JOURNALIST

    academic_rank: AcademicRank = AcademicRank.NONE
    pub_position: Optional[PublicationPosition] = None
    individual_contests: List[Achievement] = Field(default_factory=list)
    group_contests: List[Achievement] = Field(default_factory=list)
    special_awards: List[Achievement] = Field(default_factory=list)
    publication_contests: List[Achievement] = Field(default_factory=list)
    guild_leadership: List[LeadershipEntry] = Field(default_factory=list)
    extension_services: List[ServiceEntry] = Field(default_factory=list)
    published_works: List[ServiceEntry] = Field(default_factory=list)
    trainings_attended: List[ServiceEntry] = Field(default_factory=list)

    CATEGORIES: ClassVar[Dict[Category, Type[BaseModel]]] = {
        Category.INDIVIDUAL_CONTESTS: Achievement,
        Category.GROUP_CONTESTS: Achievement,
        Category.SPECIAL_AWARDS: Achievement,
        Category.PUBLICATION_CONTESTS: Achievement,
        Category.GUILD_LEADERSHIP: LeadershipEntry,
        Category.EXTENSION_SERVICES: ServiceEntry,
        Category.PUBLISHED_WORKS: ServiceEntry,
        Category.TRAININGS_ATTENDED: ServiceEntry,
    }
    SCALAR_FIELDS: ClassVar[FrozenSet[str]] = CandidateBase.SCALAR_FIELDS | {
        "academic_rank",
        "pub_position",
    }


Candidate = Annotated[
    Union[AdviserCandidate, JournalistCandidate],
    Field(discriminator="nomination_type"),
]

_candidate_adapter = TypeAdapter(Candidate)


def parse_candidate(data: dict) -> Union[AdviserCandidate, JournalistCandidate]:
    """Validate a raw dict into the matching candidate variant."""
    return _candidate_adapter.validate_python(data)


def new_record(nomination_type: NominationType) -> Union[AdviserCandidate, JournalistCandidate]:
    """Fresh record: empty collections, zeroed interview, default ratings."""
    if nomination_type == NominationType.ADVISER:
        return AdviserCandidate()
    return JournalistCandidate()

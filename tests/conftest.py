# tests/conftest.py

"""
Pytest Fixtures - Shared records, MOV attachments and the API client
"""

import base64

import pytest
from fastapi.testclient import TestClient

from ospa.main import app
from ospa.models.candidate import (
    Achievement,
    AdviserCandidate,
    JournalistCandidate,
    LeadershipEntry,
    MOVFile,
    ServiceEntry,
)
from ospa.models.enumerations import Level, Position, Rank
from ospa.scoring.engine import ScoringEngine
from ospa.scoring.rubric import DEFAULT_ADVISER_RUBRIC, DEFAULT_JOURNALIST_RUBRIC


# =============================================================================
# FASTAPI TEST CLIENT FIXTURE
# =============================================================================

@pytest.fixture(scope="module")
def client():
    """Create a TestClient for FastAPI application."""
    with TestClient(app) as test_client:
        yield test_client


# =============================================================================
# ENGINE FIXTURES
# =============================================================================

@pytest.fixture
def engine():
    """Engine pinned to the built-in rubrics, independent of any override files."""
    return ScoringEngine(DEFAULT_ADVISER_RUBRIC, DEFAULT_JOURNALIST_RUBRIC)


# =============================================================================
# MOV FIXTURES
# =============================================================================

@pytest.fixture
def pdf_bytes():
    """Tiny but well-formed-looking PDF body."""
    return b"%PDF-1.4\n1 0 obj << /Type /Catalog >> endobj\ntrailer << /Root 1 0 R >>\n%%EOF\n"


@pytest.fixture
def sample_mov(pdf_bytes):
    return MOVFile(
        name="scan.pdf",
        data=base64.b64encode(pdf_bytes).decode("ascii"),
        mime_type="application/pdf",
    )


# =============================================================================
# RECORD FIXTURES
# =============================================================================

@pytest.fixture
def adviser_record():
    """Adviser with one entry in most categories."""
    return AdviserCandidate(
        candidate_name="Maria Clara Santos",
        school_name="Rizal High School",
        division="Pasig",
        individual_contests=[Achievement(level=Level.NATIONAL, rank=Rank.FIRST, year="2024")],
        leadership=[
            LeadershipEntry(level=Level.DIVISION, position=Position.PRESIDENT),
            LeadershipEntry(level=Level.DIVISION, position=Position.VICE_PRESIDENT),
        ],
        extension_services=[ServiceEntry(level=Level.REGIONAL)],
    )


@pytest.fixture
def complete_adviser_record(adviser_record, sample_mov):
    """Adviser record that passes submission checks."""
    return adviser_record.model_copy(update={"mov_file": sample_mov})


@pytest.fixture
def journalist_record():
    return JournalistCandidate(
        candidate_name="Jose Rizal Jr.",
        school_name="Manila Science High School",
        division="Manila",
    )


@pytest.fixture
def journalist_example_data():
    """With Honors + National 1st individual + interview 0.6 across the board."""
    return {
        "nomination_type": "Outstanding Campus Journalist",
        "candidate_name": "Andres Bonifacio",
        "school_name": "Tondo High School",
        "division": "Manila",
        "academic_rank": "With Honors",
        "individual_contests": [{"level": "National", "rank": "1st", "year": "2024"}],
        "interview": {
            "principles": 0.6,
            "leadership": 0.6,
            "engagement": 0.6,
            "commitment": 0.6,
            "communication": 0.6,
        },
    }


@pytest.fixture
def adviser_data():
    return {
        "nomination_type": "Outstanding School Paper Adviser",
        "candidate_name": "Maria Clara Santos",
        "school_name": "Rizal High School",
        "division": "Pasig",
        "individual_contests": [{"level": "National", "rank": "1st", "year": "2024"}],
        "leadership": [
            {"level": "Division", "position": "President"},
            {"level": "Division", "position": "Vice President"},
        ],
    }

"""
Custom Exceptions - OSPA Scorer
ospa/core/exceptions.py

Exception classes for record commands, MOV handling and submission.
Rubric lookup misses are not exceptions: they score 0.
"""

from typing import List


class OSPAException(Exception):
    """Base exception for the scorer."""

    pass


class SubmissionValidationException(OSPAException):
    """Required identity fields or the MOV attachment are missing."""

    def __init__(self, missing: List[str]):
        self.missing = missing
        super().__init__(
            "Please complete the following: " + ", ".join(missing)
        )


class InvalidMOVFileException(OSPAException):
    """MOV attachment is not an acceptable PDF."""

    def __init__(self, reason: str):
        self.reason = reason
        super().__init__(reason)


class CategoryNotApplicableException(OSPAException):
    """Command targets a category or field the nomination type does not have."""

    def __init__(self, category: str, nomination_type: str):
        self.category = category
        self.nomination_type = nomination_type
        super().__init__(f"'{category}' is not part of a {nomination_type} nomination")


class RubricConfigurationException(OSPAException):
    """Rubric override file could not be loaded."""

    def __init__(self, path: str, reason: str):
        self.path = path
        self.reason = reason
        super().__init__(f"Invalid rubric file {path}: {reason}")

"""
Core Package - OSPA Scorer
ospa/core/__init__.py

Core infrastructure: exceptions, logging.
"""

from ospa.core.exceptions import (
    CategoryNotApplicableException,
    InvalidMOVFileException,
    OSPAException,
    RubricConfigurationException,
    SubmissionValidationException,
)
from ospa.core.logging import configure_logging

__all__ = [
    # Logging
    "configure_logging",
    # Exceptions
    "CategoryNotApplicableException",
    "InvalidMOVFileException",
    "OSPAException",
    "RubricConfigurationException",
    "SubmissionValidationException",
]

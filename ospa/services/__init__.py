"""
Services module for the OSPA Scorer.
"""

from ospa.services.mov_service import encode_mov, encode_mov_path, normalized_filename, validate_mov
from ospa.services.record_service import apply_command
from ospa.services.submission_service import SubmissionResult, SubmissionService, build_payload, check_ready

__all__ = [
    "apply_command",
    "build_payload",
    "check_ready",
    "encode_mov",
    "encode_mov_path",
    "normalized_filename",
    "validate_mov",
    "SubmissionResult",
    "SubmissionService",
]

"""
MOV Service - OSPA Scorer
ospa/services/mov_service.py

Encoding and checks for the consolidated Means of Verification (MOV) PDF.

- Only application/pdf is accepted.
- Files above MOV_MAX_BYTES are rejected.
- The submitted filename is rebuilt as "{division}_{school}_{candidate}.pdf".
"""

import asyncio
import base64
import binascii
import mimetypes
import re
from pathlib import Path
from typing import Optional, Union

import structlog

from ospa.config import get_settings
from ospa.core.exceptions import InvalidMOVFileException
from ospa.models.candidate import MOVFile

logger = structlog.get_logger(__name__)

PDF_MIME_TYPE = "application/pdf"
MIB = 1024 * 1024

_NON_WORD = re.compile(r"[^\w\s]")
_WHITESPACE = re.compile(r"\s+")


def _format_limit(limit: int) -> str:
    """15728640 -> "15MB", 1572864 -> "1.5MB", 512000 -> "512000 bytes"."""
    if limit < MIB:
        return f"{limit} bytes"
    return f"{round(limit / MIB, 1):g}MB"


def _check_mime_and_size(mime_type: str, size: int, max_bytes: Optional[int]) -> None:
    settings = get_settings()
    limit = settings.MOV_MAX_BYTES if max_bytes is None else max_bytes

    if mime_type not in settings.MOV_ALLOWED_MIME_TYPES:
        raise InvalidMOVFileException("Invalid Format: Please upload a PDF file only.")
    if size > limit:
        raise InvalidMOVFileException(
            f"File too large: Please limit your consolidated PDF to {_format_limit(limit)}."
        )


def encode_mov(
    content: bytes,
    filename: str,
    mime_type: str = PDF_MIME_TYPE,
    max_bytes: Optional[int] = None,
) -> MOVFile:
    """
    Validate and base64-encode an uploaded MOV.

    Args:
        content: Raw file bytes
        filename: Original filename (replaced by the normalized one at submission)
        mime_type: Declared MIME type
        max_bytes: Size ceiling; defaults to settings.MOV_MAX_BYTES

    Raises:
        InvalidMOVFileException: not a PDF, or larger than the ceiling
    """
    _check_mime_and_size(mime_type, len(content), max_bytes)
    data = base64.b64encode(content).decode("ascii")
    logger.info("mov_encoded", filename=filename, size_bytes=len(content))
    return MOVFile(name=filename, data=data, mime_type=mime_type)


async def encode_mov_path(path: Union[str, Path], max_bytes: Optional[int] = None) -> MOVFile:
    """Read a file off the event loop, guess its MIME type, and encode it."""
    path = Path(path)
    mime_type = mimetypes.guess_type(path.name)[0] or "application/octet-stream"
    content = await asyncio.to_thread(path.read_bytes)
    return encode_mov(content, path.name, mime_type, max_bytes)


def validate_mov(mov_file: MOVFile, max_bytes: Optional[int] = None) -> MOVFile:
    """
    Re-check a MOV that arrives already encoded (API clients).

    Line breaks in the base64 body are dropped; the returned MOV carries the
    compacted data.
    """
    data = _WHITESPACE.sub("", mov_file.data)
    try:
        decoded = base64.b64decode(data, validate=True)
    except (binascii.Error, ValueError) as e:
        raise InvalidMOVFileException(f"MOV data is not valid base64: {e}") from e
    _check_mime_and_size(mov_file.mime_type, len(decoded), max_bytes)
    return mov_file.model_copy(update={"data": data})


def _sanitize(value: str) -> str:
    return _WHITESPACE.sub("_", _NON_WORD.sub("", value))


def normalized_filename(division: str, school_name: str, candidate_name: str) -> str:
    """
    Deterministic MOV filename.

    Examples:
        >>> normalized_filename("Manila", "Rizal High School", "Juan P. Dela Cruz")
        'Manila_Rizal_High_School_Juan_P_Dela_Cruz.pdf'
        >>> normalized_filename("Taguig City and Pateros (TAPAT)", "Signal Village NHS", "Ana")
        'Taguig_City_and_Pateros_TAPAT_Signal_Village_NHS_Ana.pdf'
    """
    return f"{_sanitize(division)}_{_sanitize(school_name)}_{_sanitize(candidate_name)}.pdf"

"""
Score a nomination record from a JSON file, optionally attach a MOV and submit.

Usage:
    python -m ospa.scripts.score_record record.json                        # print breakdown
    python -m ospa.scripts.score_record record.json --mov mov.pdf --submit  # attach and send
    python -m ospa.scripts.score_record --new adviser > record.json         # blank record
"""

import argparse
import asyncio
import json
import sys
from pathlib import Path

import structlog
from pydantic import ValidationError

from ospa.core.exceptions import OSPAException
from ospa.core.logging import configure_logging
from ospa.models.candidate import new_record, parse_candidate
from ospa.models.enumerations import NominationType
from ospa.scoring.engine import score_candidate
from ospa.scoring.projection import project
from ospa.services.mov_service import encode_mov_path
from ospa.services.submission_service import SubmissionService

logger = structlog.get_logger(__name__)

_NEW_RECORD_TYPES = {
    "adviser": NominationType.ADVISER,
    "journalist": NominationType.JOURNALIST,
}


async def main(record_path: Path, mov_path: Path = None, submit: bool = False) -> int:
    raw = json.loads(record_path.read_text(encoding="utf-8"))
    candidate = parse_candidate(raw)

    if mov_path is not None:
        mov = await encode_mov_path(mov_path)
        candidate = candidate.model_copy(update={"mov_file": mov})

    print(json.dumps(project(score_candidate(candidate)).model_dump(mode="json"), indent=2))

    if not submit:
        return 0

    result = await SubmissionService().submit(candidate)
    print(json.dumps(result.model_dump(), indent=2))
    return 0 if result.status == "success" else 1


if __name__ == "__main__":
    parser = argparse.ArgumentParser(description="Score (and optionally submit) an OSPA nomination")
    parser.add_argument("record", nargs="?", type=Path, help="Candidate record JSON file")
    parser.add_argument("--new", choices=sorted(_NEW_RECORD_TYPES), help="Print a blank record and exit")
    parser.add_argument("--mov", type=Path, help="Consolidated MOV PDF to attach")
    parser.add_argument("--submit", action="store_true", help="Send to SUBMISSION_URL after scoring")
    args = parser.parse_args()

    configure_logging()

    if args.new:
        blank = new_record(_NEW_RECORD_TYPES[args.new])
        print(json.dumps(blank.model_dump(mode="json", by_alias=True), indent=2))
        sys.exit(0)
    if args.record is None:
        parser.error("record is required unless --new is given")

    try:
        sys.exit(asyncio.run(main(args.record, args.mov, args.submit)))
    except (OSPAException, ValidationError, OSError, json.JSONDecodeError) as e:
        logger.error("score_record_failed", error=str(e))
        sys.exit(2)

# jobboard/scripts/import_listings_jsonl.py
"""Bulk-load job listings from a JSONL file (one camelCase listing per line).

    python -m jobboard.scripts.import_listings_jsonl [path]

Every line goes through the same validation and defaults as POST /job-posting.
"""
import json
import logging
import os
import sys
from typing import Optional, Tuple

from pydantic import ValidationError as SchemaError

from jobboard.database import Database
from jobboard.errors import JobBoardError
from jobboard.schemas.jobs import JobListingIn
from jobboard.services.listings import create_listing

log = logging.getLogger("jobboard.scripts.import_listings")

JSONL_PATH = os.environ.get("LISTINGS_JSONL", "data/listings.jsonl")


def run(path: str = JSONL_PATH, database: Optional[Database] = None) -> Tuple[int, int]:
    """Returns (imported, skipped)."""
    if not os.path.exists(path):
        log.warning("No file found at %s. Nothing to import.", path)
        return 0, 0

    database = database or Database()
    database.create_all()
    db = database.session()
    added = skipped = 0
    try:
        with open(path, "r", encoding="utf-8") as f:
            for lineno, line in enumerate(f, start=1):
                line = line.strip()
                if not line:
                    continue
                try:
                    payload = JobListingIn.model_validate(json.loads(line))
                    create_listing(db, payload)
                except (json.JSONDecodeError, SchemaError, JobBoardError) as e:
                    log.warning("line %d skipped: %s", lineno, e)
                    skipped += 1
                    continue
                added += 1
    finally:
        db.close()

    log.info("Imported %d job listings from %s (%d skipped).", added, path, skipped)
    return added, skipped


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO, format="%(asctime)s %(levelname)s %(name)s: %(message)s")
    run(sys.argv[1] if len(sys.argv) > 1 else JSONL_PATH)

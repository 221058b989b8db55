# jobboard/services/listings.py
from __future__ import annotations

import logging
import re
from typing import Any, Dict, Iterable, List, Optional, Set, Union

from sqlalchemy import func, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from jobboard import config
from jobboard.errors import InternalError, NotFoundError, ValidationError
from jobboard.models import JobListing
from jobboard.schemas.jobs import JobListingIn

log = logging.getLogger("jobboard.services.listings")

LOGO_URL_RE = re.compile(r'^(http|https)://[^ "]+$')

# Must be present and non-empty (job_location may be "" and becomes "Remote")
REQUIRED_FIELDS = (
    "company_name",
    "job_position",
    "monthly_salary",
    "job_type",
    "remote_onsite",
    "job_location",
    "job_description",
    "about_company",
)

NOT_FOUND = "Job listing not found"

# Largest value a signed 64-bit INTEGER primary key can hold
MAX_ID = 2 ** 63 - 1


# ---- Helpers ----
def split_skills(raw: Union[str, Iterable[str], None]) -> List[str]:
    """Accept "a, b" or ["a", " b "]; return trimmed, non-empty items in order."""
    if raw is None:
        return []
    parts = raw.split(",") if isinstance(raw, str) else raw
    return [str(p).strip() for p in parts if p is not None and str(p).strip()]


def normalize_listing(payload: JobListingIn) -> Dict[str, Any]:
    """
    Validate a listing payload and apply defaults.
    Returns the column values to store; raises ValidationError.
    """
    data = payload.model_dump()

    missing = [
        name for name in REQUIRED_FIELDS
        if data.get(name) is None or (name != "job_location" and data[name] == "")
    ]
    if missing:
        log.debug("listing rejected, missing: %s", missing)
        raise ValidationError("All fields are required")

    if data["job_location"] == "":
        data["job_location"] = "Remote"

    logo = data.get("add_logo_url") or ""
    if not LOGO_URL_RE.match(logo):
        data["add_logo_url"] = config.DEFAULT_LOGO_URL

    data["skills_required"] = split_skills(data.get("skills_required"))
    return data


def _like_escape(term: str) -> str:
    return term.replace("/", "//").replace("%", "/%").replace("_", "/_")


def _parse_id(listing_id: Union[int, str]) -> Optional[int]:
    """Canonical ASCII digits (no sign or leading zeros) within the 64-bit INTEGER range, else None."""
    if isinstance(listing_id, bool):
        return None
    if isinstance(listing_id, int):
        pk = listing_id
    elif isinstance(listing_id, str) and listing_id.isascii() and listing_id.isdigit() \
            and listing_id == str(int(listing_id)):
        pk = int(listing_id)
    else:
        return None
    return pk if 0 <= pk <= MAX_ID else None


def _find(db: Session, listing_id: Union[int, str]) -> JobListing:
    pk = _parse_id(listing_id)
    listing = db.get(JobListing, pk) if pk is not None else None
    if not listing:
        raise NotFoundError(NOT_FOUND)
    return listing


# ---- Operations ----
def create_listing(db: Session, payload: JobListingIn, user_id: Optional[Union[int, str]] = None) -> JobListing:
    data = normalize_listing(payload)
    listing = JobListing(user_id=_parse_id(user_id) if user_id is not None else None, **data)
    try:
        db.add(listing)
        db.commit()
        db.refresh(listing)
    except SQLAlchemyError:
        db.rollback()
        log.exception("create_listing failed")
        raise InternalError()
    log.info("Created job listing id=%s", listing.id)
    return listing


def update_listing(db: Session, listing_id: Union[int, str], payload: JobListingIn) -> JobListing:
    """Replace every field of an existing listing."""
    data = normalize_listing(payload)
    try:
        listing = _find(db, listing_id)
        for key, value in data.items():
            setattr(listing, key, value)
        db.commit()
        db.refresh(listing)
    except SQLAlchemyError:
        db.rollback()
        log.exception("update_listing failed")
        raise InternalError()
    log.info("Updated job listing id=%s", listing.id)
    return listing


def _skills_clause(db: Session, wanted: Set[str]):
    """EXISTS over the skills JSON array, or None where the dialect has no array function."""
    dialect = db.get_bind().dialect.name
    if dialect == "sqlite":
        elements = func.json_each(JobListing.skills_required).table_valued("value")
    elif dialect == "postgresql":
        elements = func.json_array_elements_text(JobListing.skills_required).table_valued("value")
    else:
        return None
    return select(elements.c.value).where(elements.c.value.in_(sorted(wanted))).exists()


def list_listings(db: Session, skills: Optional[str] = None, search_term: Optional[str] = None) -> List[JobListing]:
    """
    - skills: comma-separated, a listing matches if it requires any of them
    - search_term: case-insensitive substring of job_position
    """
    q = db.query(JobListing)
    term = (search_term or "").strip()
    if term:
        q = q.filter(JobListing.job_position.ilike(f"%{_like_escape(term)}%", escape="/"))

    wanted: Set[str] = set(split_skills(skills))
    clause = _skills_clause(db, wanted) if wanted else None
    if clause is not None:
        q = q.filter(clause)

    try:
        rows = q.order_by(JobListing.id.asc()).all()
    except SQLAlchemyError:
        log.exception("list_listings failed")
        raise InternalError()

    if wanted and clause is None:
        rows = [r for r in rows if wanted.intersection(r.skills_required or [])]
    return rows


def get_listing(db: Session, listing_id: Union[int, str]) -> JobListing:
    try:
        return _find(db, listing_id)
    except SQLAlchemyError:
        log.exception("get_listing failed")
        raise InternalError()

# jobboard/routes/jobs.py
import logging
from typing import Optional

from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from jobboard.deps import get_db, require_user_id
from jobboard.schemas.jobs import (
    JobListingIn,
    JobListingOut,
    JobListingResponse,
    JobListingsResponse,
    MessageOut,
)
from jobboard.services import listings

log = logging.getLogger("routes.jobs")

router = APIRouter(tags=["Jobs"])


@router.post("/job-posting", response_model=MessageOut, status_code=201)
def create_job_posting(
    body: JobListingIn,
    db: Session = Depends(get_db),
    uid: str = Depends(require_user_id),
):
    listing = listings.create_listing(db, body, user_id=uid)
    return MessageOut(message="Job listing created successfully", id=listing.id)


@router.put("/job-posting/{listing_id}", response_model=MessageOut, response_model_exclude_none=True)
def update_job_posting(
    listing_id: str,
    body: JobListingIn,
    db: Session = Depends(get_db),
    uid: str = Depends(require_user_id),
):
    listings.update_listing(db, listing_id, body)
    return MessageOut(message="Job listing updated successfully")


@router.get("/jobs", response_model=JobListingsResponse)
def list_jobs(
    skills: Optional[str] = Query(None, description="Comma-separated, e.g. 'python,sql' (any of)"),
    search_term: Optional[str] = Query(None, alias="searchTerm", description="Matches job position, case-insensitive"),
    db: Session = Depends(get_db),
):
    rows = listings.list_listings(db, skills=skills, search_term=search_term)
    log.debug("GET /jobs skills=%r searchTerm=%r -> %d", skills, search_term, len(rows))
    return JobListingsResponse(job_listings=[JobListingOut.model_validate(r) for r in rows])


@router.get("/jobs/{job_id}", response_model=JobListingResponse)
def get_job(job_id: str, db: Session = Depends(get_db)):
    listing = listings.get_listing(db, job_id)
    return JobListingResponse(job_listing=JobListingOut.model_validate(listing))

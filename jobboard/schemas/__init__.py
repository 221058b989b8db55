# jobboard/schemas/__init__.py
from jobboard.schemas.auth import RegisterIn, LoginIn, AuthOut
from jobboard.schemas.jobs import (
    JobListingIn,
    JobListingOut,
    JobListingsResponse,
    JobListingResponse,
    MessageOut,
)

__all__ = [
    "RegisterIn", "LoginIn", "AuthOut",
    "JobListingIn", "JobListingOut", "JobListingsResponse", "JobListingResponse", "MessageOut",
]

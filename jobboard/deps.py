# jobboard/deps.py
from typing import Iterator, Optional

from fastapi import Header, Request
from sqlalchemy.orm import Session

from jobboard.services.auth import authorize


def get_db(request: Request) -> Iterator[Session]:
    """Yield a DB session from the app's Database handle and ensure it closes."""
    db = request.app.state.db.session()
    try:
        yield db
    finally:
        db.close()


def require_user_id(authorization: Optional[str] = Header(None)) -> str:
    """
    Strict auth dependency. Returns the authenticated user's id (the `sub`
    claim) or raises AuthError (401), never 403.
    """
    return authorize(authorization)

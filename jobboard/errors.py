# jobboard/errors.py
"""Error taxonomy shared by the auth and listing flows.

Each error carries the HTTP status it maps to; ``main.py`` turns them into
``{"error": message}`` responses.
"""
from typing import Dict, Optional


class JobBoardError(Exception):
    status_code = 500
    default_message = "Internal Server Error"

    def __init__(self, message: Optional[str] = None):
        self.message = message or self.default_message
        super().__init__(self.message)

    @property
    def headers(self) -> Optional[Dict[str, str]]:
        return None


class ValidationError(JobBoardError):
    status_code = 400
    default_message = "All fields are required"


class ConflictError(JobBoardError):
    status_code = 409
    default_message = "User already exists"


class AuthError(JobBoardError):
    status_code = 401
    default_message = "Invalid credentials"

    @property
    def headers(self) -> Optional[Dict[str, str]]:
        return {"WWW-Authenticate": "Bearer"}


class NotFoundError(JobBoardError):
    status_code = 404
    default_message = "Not found"


class InternalError(JobBoardError):
    pass


__all__ = [
    "JobBoardError", "ValidationError", "ConflictError",
    "AuthError", "NotFoundError", "InternalError",
]

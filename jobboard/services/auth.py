# jobboard/services/auth.py
"""Registration, login and the bearer-token gate.

Routes call these with a SQLAlchemy session; failures are raised as
``jobboard.errors`` exceptions and mapped to HTTP responses in ``main.py``.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional

from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session

from jobboard import config
from jobboard.errors import AuthError, ConflictError, InternalError, ValidationError
from jobboard.models import User
from jobboard.security import (
    bearer_token,
    create_access_token,
    decode_token,
    hash_password,
    verify_password,
)

log = logging.getLogger("jobboard.services.auth")

# Same message for unknown email and wrong password
INVALID_CREDENTIALS = "Invalid credentials"


@dataclass(frozen=True)
class AuthResult:
    name: str
    token: str


def _norm_email(email: str) -> str:
    return email.strip().lower()


def _blank(value: Optional[str]) -> bool:
    return value is None or not str(value).strip()


def _issue_token(user: User, seconds: int) -> str:
    return create_access_token(sub=str(user.id), seconds=seconds)


def get_user_by_email(db: Session, email: str) -> Optional[User]:
    return db.query(User).filter(User.email == _norm_email(email)).first()


def register(db: Session, name: Optional[str], email: Optional[str],
             mobile: Optional[str], password: Optional[str]) -> AuthResult:
    """Create a user with a hashed password and issue a short-lived token."""
    if any(_blank(v) for v in (name, email, mobile, password)):
        raise ValidationError("All fields are required")

    try:
        if get_user_by_email(db, email):
            raise ConflictError("User already exists")

        user = User(
            name=name.strip(),
            email=_norm_email(email),
            mobile=mobile.strip(),
            password_hash=hash_password(password),
        )
        db.add(user)
        db.commit()
        db.refresh(user)
    except IntegrityError:
        # Lost a race with a concurrent registration for the same email
        db.rollback()
        raise ConflictError("User already exists")
    except SQLAlchemyError:
        db.rollback()
        log.exception("register failed")
        raise InternalError()

    log.info("Registered user id=%s", user.id)
    return AuthResult(name=user.name, token=_issue_token(user, config.REGISTER_TOKEN_TTL_SECONDS))


def login(db: Session, email: Optional[str], password: Optional[str]) -> AuthResult:
    if _blank(email) or _blank(password):
        raise ValidationError("Email and password are required")

    try:
        user = get_user_by_email(db, email)
    except SQLAlchemyError:
        log.exception("login lookup failed")
        raise InternalError()

    if not user or not verify_password(password, user.password_hash):
        raise AuthError(INVALID_CREDENTIALS)

    return AuthResult(name=user.name, token=_issue_token(user, config.LOGIN_TOKEN_TTL_SECONDS))


def authorize(authorization: Optional[str], secret: Optional[str] = None) -> str:
    """
    Validate an `Authorization` header value and return the user id (the
    `sub` claim) as a string. Decode only; the store is not consulted.
    """
    claims = decode_token(bearer_token(authorization), secret=secret)
    sub = claims.get("sub")
    if not isinstance(sub, str) or not sub.strip():
        raise AuthError("Invalid token subject")
    return sub

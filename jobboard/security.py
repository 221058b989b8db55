# jobboard/security.py
from __future__ import annotations

from datetime import datetime, timedelta, timezone
from typing import Any, Dict, Optional

import jwt  # PyJWT
from passlib.context import CryptContext

from jobboard import config
from jobboard.errors import AuthError

_pwd = CryptContext(schemes=["bcrypt"], deprecated="auto", bcrypt__rounds=config.BCRYPT_ROUNDS)


def hash_password(plain: str) -> str:
    return _pwd.hash(plain)


def verify_password(plain: str, hashed: str) -> bool:
    try:
        return _pwd.verify(plain, hashed)
    except ValueError:
        # Unrecognised or corrupt digest
        return False


# ---------- Token creation ----------
def _now_utc() -> datetime:
    return datetime.now(timezone.utc)


def create_access_token(
    sub: str,
    seconds: int,
    extra: Optional[Dict[str, Any]] = None,
    secret: Optional[str] = None,
) -> str:
    """
    Create a signed ACCESS token that expires after `seconds`.
    `sub` should be the user's stable id (string).
    """
    if not isinstance(sub, str) or not sub.strip():
        raise ValueError("sub must be a non-empty string")

    now = _now_utc()
    payload: Dict[str, Any] = {
        "sub": sub,
        "typ": "access",
        "iat": int(now.timestamp()),
        "exp": int((now + timedelta(seconds=seconds)).timestamp()),
    }
    if extra:
        payload.update(extra)
    return jwt.encode(payload, secret or config.JWT_SECRET, algorithm=config.JWT_ALGO)


# ---------- Token decoding / validation ----------
def decode_token(token: str, secret: Optional[str] = None) -> Dict[str, Any]:
    """
    Decode & validate token. Raises AuthError on any failure.
    """
    try:
        return jwt.decode(
            token,
            secret or config.JWT_SECRET,
            algorithms=[config.JWT_ALGO],
            leeway=config.JWT_LEEWAY_SEC,
        )
    except jwt.ExpiredSignatureError:
        raise AuthError("Token expired")
    except jwt.PyJWTError:
        raise AuthError("Invalid token")


def bearer_token(authorization: Optional[str]) -> str:
    """Pull the token out of an `Authorization: Bearer <token>` header value."""
    if not authorization:
        raise AuthError("Missing or invalid Authorization header")
    scheme, _, token = authorization.strip().partition(" ")
    if scheme.lower() != "bearer" or not token.strip():
        raise AuthError("Missing or invalid Authorization header")
    return token.strip()


__all__ = [
    "hash_password", "verify_password",
    "create_access_token", "decode_token", "bearer_token",
]

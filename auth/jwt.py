"""
JWT creation and verification.

Tokens are standard compact JWTs signed with HMAC-SHA256 (PyJWT).  The
signing secret is always passed in by the caller; the HTTP layer reads it
from ``config.jwt_secret`` (env var: ``JWT_SECRET``).

Validation order: algorithm, signature, issuer, expiry, subject.  Each
step has its own exception so callers can tell an expired session from a
forged or malformed token.
"""

from __future__ import annotations

import uuid
from datetime import datetime, timedelta, timezone
from typing import Any, Dict, Optional

import jwt as pyjwt

from auth.errors import (
    BadIssuerError,
    BadSignatureError,
    InvalidSubjectError,
    TokenExpiredError,
    TokenInvalidError,
    UnsupportedAlgorithmError,
)

ISSUER = "chirpy"
ALGORITHM = "HS256"

# PyJWT would check exp/iat against the wall clock and before the issuer;
# expiry is evaluated here instead, against the caller's ``now``.
_DECODE_OPTIONS = {
    "verify_signature": True,
    "verify_iss": True,
    "verify_exp": False,
    "verify_iat": False,
    "verify_nbf": False,
    "verify_sub": False,
    "require": [],
}


def make_jwt(
    user_id: uuid.UUID,
    token_secret: str,
    expires_in: timedelta,
    now: Optional[datetime] = None,
) -> str:
    """
    Create a signed token whose subject is ``user_id``.

    ``expires_in`` may be zero or negative, which yields a token that is
    already expired.  ``now`` pins the issue time (defaults to UTC now).
    """
    issued_at = now if now is not None else datetime.now(timezone.utc)
    claims = {
        "iss": ISSUER,
        "sub": str(user_id),
        "iat": issued_at,
        "exp": issued_at + expires_in,
    }
    return pyjwt.encode(claims, token_secret, algorithm=ALGORITHM)


def validate_jwt(
    token: str,
    token_secret: str,
    now: Optional[datetime] = None,
) -> uuid.UUID:
    """
    Verify ``token`` and return the user id it was issued for.

    Raises a ``TokenInvalidError`` subclass describing the first check
    that failed.
    """
    claims = _decode(token, token_secret)

    current = now if now is not None else datetime.now(timezone.utc)
    exp = claims.get("exp")
    if isinstance(exp, bool) or not isinstance(exp, (int, float)):
        raise TokenInvalidError("expiry claim missing or not a number")
    if exp <= current.timestamp():
        raise TokenExpiredError("token has expired")

    subject = claims.get("sub")
    if not subject or not isinstance(subject, str):
        raise InvalidSubjectError("subject claim missing")
    try:
        return uuid.UUID(subject)
    except ValueError as exc:
        raise InvalidSubjectError("subject is not a valid UUID") from exc


def _decode(token: str, token_secret: str) -> Dict[str, Any]:
    try:
        return pyjwt.decode(
            token,
            token_secret,
            algorithms=[ALGORITHM],
            issuer=ISSUER,
            options=_DECODE_OPTIONS,
        )
    except pyjwt.InvalidAlgorithmError as exc:
        raise UnsupportedAlgorithmError(f"unexpected signing method: {exc}") from exc
    except pyjwt.InvalidSignatureError as exc:
        raise BadSignatureError("signature verification failed") from exc
    except pyjwt.InvalidIssuerError as exc:
        raise BadIssuerError(f"invalid issuer: {exc}") from exc
    except pyjwt.MissingRequiredClaimError as exc:
        if exc.claim == "iss":
            raise BadIssuerError("issuer claim missing") from exc
        raise TokenInvalidError(str(exc)) from exc
    except pyjwt.InvalidTokenError as exc:
        raise TokenInvalidError(f"malformed token: {exc}") from exc

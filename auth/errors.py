"""
Exceptions raised by the credential core.

``TokenInvalidError`` is the catch-all for callers that only need to know a
token was rejected; the subclasses say why.
"""

from __future__ import annotations


class AuthError(Exception):
    """Base class for credential errors."""


class HashingError(AuthError):
    """Password hashing or verification could not be carried out."""


class TokenInvalidError(AuthError):
    """The presented token is not acceptable."""


class UnsupportedAlgorithmError(TokenInvalidError):
    pass


class BadSignatureError(TokenInvalidError):
    pass


class BadIssuerError(TokenInvalidError):
    pass


class TokenExpiredError(TokenInvalidError):
    pass


class InvalidSubjectError(TokenInvalidError):
    """Subject claim is missing, empty or not a UUID."""

"""
Input validators used by the HTTP routes.
"""

from __future__ import annotations

from config.settings import config


def is_valid_email_format(email: str) -> bool:
    """
    Loose shape check: one ``@`` that is neither first nor last, followed
    somewhere by a ``.`` that is not the final character.
    """
    at = email.find("@")
    if at <= 0 or at == len(email) - 1:
        return False
    dot = email.find(".", at + 1)
    return dot != -1 and dot < len(email) - 1


def validate_chirp_body(body: str, max_length: int | None = None) -> None:
    """Raise ``ValueError`` if the chirp cannot be posted.

    The limit counts UTF-8 bytes, so multi-byte characters use up more of it.
    """
    limit = config.chirp_max_length if max_length is None else max_length
    if len(body.encode("utf-8")) > limit:
        raise ValueError("Chirp is too long")

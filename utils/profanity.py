"""
Profanity filter for chirp bodies.
"""

from __future__ import annotations

PROFANE_WORDS = frozenset({"kerfuffle", "sharbert", "fornax"})
REPLACEMENT = "****"


def clean_chirp(body: str) -> str:
    """
    Replace profane words with ``****``.

    Splits on single spaces only, so a word with punctuation attached
    (``"Sharbert!"``) is not matched.
    """
    words = body.split(" ")
    cleaned = [REPLACEMENT if word.lower() in PROFANE_WORDS else word for word in words]
    return " ".join(cleaned)

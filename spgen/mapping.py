"""
Mapping logic: turn random words into password characters.
"""

from __future__ import annotations

from .charset import Charset
from .errors import RandomSourceUnavailableError
from .random_source import DEFAULT_SOURCE, RandomSource


def sample(
    charset: Charset,
    count: int,
    source: RandomSource | None = None,
) -> str:
    """
    Draw `count` characters from `charset`.

    We:
    - Ask the source for `count` fresh 32-bit words (one per character).
    - Map each word into the charset with modulo.
    - Join the characters in draw order.

    Modulo bias: for a charset of N <= 100 characters the most favoured
    index is at most 1 / floor(2**32 / N) more likely than the least, i.e.
    below 1e-7 relative. This is accepted rather than rejection-sampled.
    """
    if count < 0:
        raise ValueError("count must be >= 0")

    src = source or DEFAULT_SOURCE
    words = src.words(count)
    if len(words) != count:
        raise RandomSourceUnavailableError(
            f"Random source returned {len(words)} words, expected {count}."
        )

    size = charset.size
    return "".join(charset[word % size] for word in words)

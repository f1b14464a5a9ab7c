"""
Random word sources.

The sampler never calls a platform RNG directly; it asks a RandomSource
for unsigned 32-bit words. Production code uses SystemRandomSource (the
OS CSPRNG through `secrets`); tests can pass any object with a matching
`words()` method.
"""

from __future__ import annotations

import secrets
from typing import List, Protocol, runtime_checkable

from .errors import RandomSourceUnavailableError
from .logging_config import get_logger

logger = get_logger(__name__)

WORD_BITS = 32


@runtime_checkable
class RandomSource(Protocol):
    """Anything that can hand out fresh, independent 32-bit words."""

    def words(self, count: int) -> List[int]:
        ...


class SystemRandomSource:
    """
    Cryptographically secure words from the operating system.
    """

    def words(self, count: int) -> List[int]:
        if count < 0:
            raise ValueError("count must be >= 0")
        try:
            return [secrets.randbits(WORD_BITS) for _ in range(count)]
        except (OSError, NotImplementedError) as exc:
            logger.error("random_source_failed", source="system", error=repr(exc))
            raise RandomSourceUnavailableError(
                "Operating system random source is unavailable."
            ) from exc


DEFAULT_SOURCE = SystemRandomSource()

from __future__ import annotations

from typing import List

from spgen.errors import RandomSourceUnavailableError


class FixedSource:
    """Deterministic RandomSource: hands out words from a fixed sequence."""

    def __init__(self, words: List[int]) -> None:
        self._words = list(words)
        self.calls: List[int] = []

    def words(self, count: int) -> List[int]:
        self.calls.append(count)
        if count > len(self._words):
            raise RandomSourceUnavailableError("FixedSource ran out of words")
        out, self._words = self._words[:count], self._words[count:]
        return out


class BrokenSource:
    def words(self, count: int) -> List[int]:
        raise RandomSourceUnavailableError("no entropy")

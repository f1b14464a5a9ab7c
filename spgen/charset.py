"""
Charset construction: turn class selections and exclusion flags into the
ordered character universe used for sampling and entropy math.
"""

from __future__ import annotations

from dataclasses import dataclass

from .config import (
    ALPHABETS,
    AMBIGUOUS_CHARS,
    CLASS_ORDER,
    SIMILAR_CHARS,
    GenerationOptions,
)
from .errors import EmptyCharsetError
from .logging_config import get_logger

logger = get_logger(__name__)


@dataclass(frozen=True)
class Charset:
    """
    Ordered, duplicate-free sequence of characters eligible for sampling.
    """

    chars: str

    def __post_init__(self) -> None:
        if not self.chars:
            raise EmptyCharsetError("Charset must contain at least one character.")

    @property
    def size(self) -> int:
        return len(self.chars)

    def __len__(self) -> int:
        return len(self.chars)

    def __getitem__(self, index: int) -> str:
        return self.chars[index]

    def __contains__(self, ch: object) -> bool:
        return ch in self.chars

    def __str__(self) -> str:
        return self.chars


def build_charset(options: GenerationOptions) -> Charset:
    """
    Build the charset for `options`.

    - Concatenate the selected alphabets in UPPER, LOWER, DIGIT, SYMBOL order.
    - Drop similar and/or ambiguous characters from the concatenation.

    Raises EmptyCharsetError if nothing is selected or the exclusions leave
    no characters at all.
    """
    if not options.classes:
        raise EmptyCharsetError("Select at least one character class.")

    chars = "".join(
        ALPHABETS[cls] for cls in CLASS_ORDER if cls in options.classes
    )

    excluded: set[str] = set()
    if options.exclude_similar:
        excluded |= SIMILAR_CHARS
    if options.exclude_ambiguous:
        excluded |= AMBIGUOUS_CHARS
    if excluded:
        chars = "".join(ch for ch in chars if ch not in excluded)

    if not chars:
        raise EmptyCharsetError(
            "Exclusions removed every character; select more classes "
            "or relax the exclusion filters."
        )

    logger.debug(
        "charset_built",
        classes=sorted(cls.value for cls in options.classes),
        exclude_similar=options.exclude_similar,
        exclude_ambiguous=options.exclude_ambiguous,
        size=len(chars),
    )
    return Charset(chars)

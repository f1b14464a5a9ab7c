"""
Strength analysis: entropy, crack-time estimate, tier and composition.

Everything here is a pure function of the password text and the size of
the charset it was (or is assumed to have been) drawn from.
"""

from __future__ import annotations

import enum
import math
import re
from dataclasses import dataclass

from .config import ALPHABETS, CLASS_ORDER, CharacterClass

# Offline brute-force attacker, guesses per second.
ATTEMPTS_PER_SECOND = 1e9

MINUTE = 60
HOUR = 3_600
DAY = 86_400
YEAR = 31_536_000
MILLENNIUM = 31_536_000_000

COMMON_SEQUENCES = ("123", "abc", "qwe")

_UPPER = re.compile(r"[A-Z]")
_LOWER = re.compile(r"[a-z]")
_DIGIT = re.compile(r"[0-9]")
_SYMBOL = re.compile("[" + re.escape(ALPHABETS[CharacterClass.SYMBOL]) + "]")
_REPEAT = re.compile(r"(.)\1{2,}")
_COMMON = re.compile("|".join(map(re.escape, COMMON_SEQUENCES)), re.IGNORECASE)


class StrengthTier(enum.Enum):
    WEAK = "weak"
    MEDIUM = "medium"
    STRONG = "strong"
    VERY_STRONG = "very-strong"

    @property
    def label(self) -> str:
        return self.value.replace("-", " ").capitalize()


# (tier, min entropy bits, min length); first match wins.
TIER_THRESHOLDS: tuple[tuple[StrengthTier, float, int], ...] = (
    (StrengthTier.VERY_STRONG, 100.0, 16),
    (StrengthTier.STRONG, 60.0, 12),
    (StrengthTier.MEDIUM, 40.0, 8),
)


class CompositionFact(enum.Enum):
    HAS_UPPER = "Contains uppercase letters"
    HAS_LOWER = "Contains lowercase letters"
    HAS_DIGIT = "Contains digits"
    HAS_SYMBOL = "Contains symbols"
    LENGTH_RECOMMENDED = "Length >= 16 (recommended)"
    LENGTH_GOOD = "Length >= 12 (good)"
    LENGTH_SHORT = "Length < 12 (increase length)"
    REPEATED_CHARS = "Warning: repeated characters (avoid)"
    COMMON_SEQUENCE = "Warning: common sequence (avoid)"

    @property
    def is_warning(self) -> bool:
        return self in (CompositionFact.REPEATED_CHARS, CompositionFact.COMMON_SEQUENCE)


@dataclass(frozen=True)
class CrackTime:
    seconds: float
    value: float
    unit: str

    def __str__(self) -> str:
        if self.unit == "millennia":
            return f"{self.value:.1f} millennia"
        value = int(self.value)
        unit = self.unit[:-1] if value == 1 else self.unit
        return f"{value} {unit}"


@dataclass(frozen=True)
class StrengthReport:
    entropy_bits: float
    tier: StrengthTier
    crack_time: CrackTime
    composition: tuple[CompositionFact, ...]

    @property
    def warnings(self) -> tuple[CompositionFact, ...]:
        return tuple(f for f in self.composition if f.is_warning)


def entropy_bits(length: int, charset_size: int) -> float:
    """
    Brute-force search space of a password in bits:
    length * log2(charset_size).
    """
    if charset_size < 1:
        raise ValueError("charset_size must be >= 1")
    if length < 0:
        raise ValueError("length must be >= 0")
    return length * math.log2(charset_size)


def _round_half_up(x: float) -> float:
    return math.floor(x + 0.5)


def estimate_crack_time(bits: float) -> CrackTime:
    """
    Time to exhaust 2**bits guesses at ATTEMPTS_PER_SECOND, bucketed
    into seconds, minutes, hours, days, years or millennia.
    """
    try:
        seconds = 2.0 ** bits / ATTEMPTS_PER_SECOND
    except OverflowError:
        seconds = math.inf

    if seconds < MINUTE:
        return CrackTime(seconds, _round_half_up(seconds), "seconds")
    if seconds < HOUR:
        return CrackTime(seconds, _round_half_up(seconds / MINUTE), "minutes")
    if seconds < DAY:
        return CrackTime(seconds, _round_half_up(seconds / HOUR), "hours")
    if seconds < YEAR:
        return CrackTime(seconds, _round_half_up(seconds / DAY), "days")
    if seconds < MILLENNIUM:
        return CrackTime(seconds, _round_half_up(seconds / YEAR), "years")
    return CrackTime(seconds, seconds / MILLENNIUM, "millennia")


def classify(bits: float, length: int) -> StrengthTier:
    """Strength tier for a password of `length` characters and `bits` entropy."""
    for tier, min_bits, min_length in TIER_THRESHOLDS:
        if bits >= min_bits and length >= min_length:
            return tier
    return StrengthTier.WEAK


def analyze_composition(password: str) -> tuple[CompositionFact, ...]:
    """
    Facts about the literal characters of `password`, independent of how
    it was generated.
    """
    facts: list[CompositionFact] = []

    if _UPPER.search(password):
        facts.append(CompositionFact.HAS_UPPER)
    if _LOWER.search(password):
        facts.append(CompositionFact.HAS_LOWER)
    if _DIGIT.search(password):
        facts.append(CompositionFact.HAS_DIGIT)
    if _SYMBOL.search(password):
        facts.append(CompositionFact.HAS_SYMBOL)

    if len(password) >= 16:
        facts.append(CompositionFact.LENGTH_RECOMMENDED)
    elif len(password) >= 12:
        facts.append(CompositionFact.LENGTH_GOOD)
    else:
        facts.append(CompositionFact.LENGTH_SHORT)

    if _REPEAT.search(password):
        facts.append(CompositionFact.REPEATED_CHARS)
    if _COMMON.search(password):
        facts.append(CompositionFact.COMMON_SEQUENCE)

    return tuple(facts)


def infer_charset_size(password: str) -> int:
    """
    Guess the charset size of an externally supplied password: the full
    alphabet of every class it uses, plus each distinct character that
    belongs to no class. Never less than 1.
    """
    pool = 0
    known: set[str] = set()
    for cls in CLASS_ORDER:
        alphabet = ALPHABETS[cls]
        known.update(alphabet)
        if any(ch in alphabet for ch in password):
            pool += len(alphabet)
    pool += len(set(password) - known)
    return max(pool, 1)


def evaluate(password: str, charset_size: int) -> StrengthReport:
    """
    Score `password` assuming it was drawn uniformly from `charset_size`
    characters.
    """
    bits = entropy_bits(len(password), charset_size)
    return StrengthReport(
        entropy_bits=bits,
        tier=classify(bits, len(password)),
        crack_time=estimate_crack_time(bits),
        composition=analyze_composition(password),
    )

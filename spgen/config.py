"""
Configuration for the secure password generator.

Character-class alphabets, exclusion sets and limits are immutable
module-level constants; per-request choices travel in a frozen
GenerationOptions value.
"""

from __future__ import annotations

import enum
from dataclasses import dataclass
from types import MappingProxyType
from typing import Mapping

from .errors import UnknownPresetError


class CharacterClass(enum.Enum):
    UPPER = "upper"
    LOWER = "lower"
    DIGIT = "digit"
    SYMBOL = "symbol"


ALPHABETS: Mapping[CharacterClass, str] = MappingProxyType({
    CharacterClass.UPPER: "ABCDEFGHIJKLMNOPQRSTUVWXYZ",
    CharacterClass.LOWER: "abcdefghijklmnopqrstuvwxyz",
    CharacterClass.DIGIT: "0123456789",
    CharacterClass.SYMBOL: "!@#$%^&*()_+-=[]{}|;:,.<>?",
})

# Concatenation order of selected classes.
CLASS_ORDER: tuple[CharacterClass, ...] = (
    CharacterClass.UPPER,
    CharacterClass.LOWER,
    CharacterClass.DIGIT,
    CharacterClass.SYMBOL,
)

# Visually confusable glyphs.
SIMILAR_CHARS = frozenset("0O1lI")

# Punctuation that is easy to mistype or unsafe in shells / CSV.
AMBIGUOUS_CHARS = frozenset("{}[]()/\\'\"`~,;:.<>")

# Lengths the CLI accepts. The engine itself only needs length >= 1.
MIN_LENGTH = 4
MAX_LENGTH = 64

MIN_BATCH = 1
MAX_BATCH = 100


@dataclass(frozen=True)
class GenerationOptions:
    # Which alphabets go into the charset.
    classes: frozenset[CharacterClass] = frozenset(CLASS_ORDER)

    # Drop 0/O/1/l/I from the charset.
    exclude_similar: bool = False

    # Drop brackets, quotes, slashes and similar punctuation.
    exclude_ambiguous: bool = False

    # Desired password length in characters.
    length: int = 16

    def __post_init__(self) -> None:
        # Accept any iterable of classes but store a frozenset.
        classes = frozenset(self.classes)
        for cls in classes:
            if not isinstance(cls, CharacterClass):
                raise TypeError(f"classes must hold CharacterClass members, got {cls!r}")
        object.__setattr__(self, "classes", classes)


@dataclass
class QuantumSourceConfig:
    # Number of qubits to prepare in superposition.
    # Each qubit gives one raw bit.
    # NOTE: Keep this <= backend limit (often 20–29 for local simulators).
    num_qubits: int = 20

    # How many independent circuit runs are XOR-combined per seed.
    quantum_streams: int = 2

    # How many rounds of SHA-256 amplification to apply to the combined bits.
    entropy_rounds: int = 2

    # Bytes pulled from os.urandom and mixed into every seed.
    system_seed_bytes: int = 32


DEFAULT_OPTIONS = GenerationOptions()
DEFAULT_QUANTUM_CONFIG = QuantumSourceConfig()

PRESETS: Mapping[str, GenerationOptions] = MappingProxyType({
    "strong": GenerationOptions(
        classes=frozenset(CLASS_ORDER),
        length=16,
    ),
    "medium": GenerationOptions(
        classes=frozenset(
            {CharacterClass.UPPER, CharacterClass.LOWER, CharacterClass.DIGIT}
        ),
        length=12,
    ),
    "pin": GenerationOptions(
        classes=frozenset({CharacterClass.DIGIT}),
        length=6,
    ),
})


def preset(name: str) -> GenerationOptions:
    """Return the named preset ("strong", "medium" or "pin")."""
    try:
        return PRESETS[name]
    except KeyError:
        raise UnknownPresetError(
            f"Unknown preset {name!r}; choose one of {', '.join(PRESETS)}."
        ) from None

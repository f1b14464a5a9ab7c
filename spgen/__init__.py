"""
Secure password generator package.
"""

from .charset import Charset, build_charset
from .config import (
    CharacterClass,
    GenerationOptions,
    DEFAULT_OPTIONS,
    PRESETS,
    preset,
)
from .errors import (
    SpgenError,
    EmptyCharsetError,
    InvalidBatchSizeError,
    InvalidLengthError,
    RandomSourceUnavailableError,
    UnknownPresetError,
    ExportError,
)
from .export import format_csv, write_csv
from .generator import (
    GenerationResult,
    generate,
    generate_batch,
    generate_password,
    generate_with_meta,
)
from .mapping import sample
from .random_source import RandomSource, SystemRandomSource
from .strength import StrengthReport, StrengthTier, evaluate

__all__ = [
    "Charset",
    "build_charset",
    "CharacterClass",
    "GenerationOptions",
    "DEFAULT_OPTIONS",
    "PRESETS",
    "preset",
    "SpgenError",
    "EmptyCharsetError",
    "InvalidBatchSizeError",
    "InvalidLengthError",
    "RandomSourceUnavailableError",
    "UnknownPresetError",
    "ExportError",
    "format_csv",
    "write_csv",
    "GenerationResult",
    "generate",
    "generate_batch",
    "generate_password",
    "generate_with_meta",
    "sample",
    "RandomSource",
    "SystemRandomSource",
    "StrengthReport",
    "StrengthTier",
    "evaluate",
]

"""
High-level password generation: single passwords, passwords with their
strength metadata, and batches.
"""
from __future__ import annotations

from dataclasses import dataclass

from .charset import Charset, build_charset
from .config import DEFAULT_OPTIONS, MAX_BATCH, MIN_BATCH, GenerationOptions
from .errors import InvalidBatchSizeError, InvalidLengthError
from .logging_config import get_logger
from .mapping import sample
from .random_source import RandomSource
from .strength import StrengthReport, evaluate

logger = get_logger(__name__)


@dataclass(frozen=True)
class GenerationResult:
    """
    Full result of one password generation.
    """
    password: str
    charset: Charset
    report: StrengthReport
    options: GenerationOptions


def _check_length(length: int) -> None:
    # bool is an int subclass; True is not a length.
    if isinstance(length, bool) or not isinstance(length, int) or length < 1:
        raise InvalidLengthError(f"Password length must be an integer >= 1, got {length!r}.")


def generate(
    length: int,
    options: GenerationOptions | None = None,
    source: RandomSource | None = None,
) -> str:
    """
    Generate one password of exactly `length` characters.

    The charset is built first, so an empty selection fails before any
    random words are drawn.
    """
    _check_length(length)
    charset = build_charset(options or DEFAULT_OPTIONS)
    password = sample(charset, length, source)
    logger.debug("password_generated", length=length, charset_size=charset.size)
    return password


def generate_password(
    options: GenerationOptions | None = None,
    source: RandomSource | None = None,
) -> str:
    """
    Generate one password using the length carried by `options`.
    """
    opts = options or DEFAULT_OPTIONS
    return generate(opts.length, opts, source)


def generate_with_meta(
    options: GenerationOptions | None = None,
    source: RandomSource | None = None,
) -> GenerationResult:
    """
    Generation pipeline with metadata:

    - Build the charset from the options.
    - Sample `options.length` characters.
    - Score the password against the charset it came from.
    """
    opts = options or DEFAULT_OPTIONS
    _check_length(opts.length)
    charset = build_charset(opts)
    password = sample(charset, opts.length, source)
    return GenerationResult(
        password=password,
        charset=charset,
        report=evaluate(password, charset.size),
        options=opts,
    )


def generate_batch(
    count: int,
    length: int,
    options: GenerationOptions | None = None,
    source: RandomSource | None = None,
) -> list[str]:
    """
    Generate `count` independent passwords, in request order.

    `count` must lie in MIN_BATCH..MAX_BATCH; out-of-range values are
    rejected, not clamped.
    """
    if (
        isinstance(count, bool)
        or not isinstance(count, int)
        or not MIN_BATCH <= count <= MAX_BATCH
    ):
        raise InvalidBatchSizeError(
            f"Batch size must be between {MIN_BATCH} and {MAX_BATCH}, got {count!r}."
        )
    _check_length(length)
    opts = options or DEFAULT_OPTIONS
    # Fail on an empty charset before drawing anything.
    build_charset(opts)

    passwords = [generate(length, opts, source) for _ in range(count)]
    logger.info("batch_generated", count=count, length=length)
    return passwords

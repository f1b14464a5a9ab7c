from __future__ import annotations

import math

import pytest

from spgen.charset import build_charset
from spgen.config import CharacterClass, GenerationOptions
from spgen.errors import (
    EmptyCharsetError,
    InvalidBatchSizeError,
    InvalidLengthError,
    RandomSourceUnavailableError,
)
from spgen.generator import (
    generate,
    generate_batch,
    generate_password,
    generate_with_meta,
)
from spgen.strength import StrengthTier
from tests.fakes import FixedSource

LOWER_ONLY = GenerationOptions(classes={CharacterClass.LOWER})


def test_generate_draws_in_order(counting_source):
    assert generate(12, GenerationOptions(), counting_source) == "ABCDEFGHIJKL"


@pytest.mark.parametrize("length", [1, 4, 16, 64, 200])
@pytest.mark.parametrize(
    "options",
    [
        GenerationOptions(),
        GenerationOptions(classes={CharacterClass.DIGIT}, exclude_similar=True),
        GenerationOptions(
            classes={CharacterClass.SYMBOL, CharacterClass.UPPER},
            exclude_ambiguous=True,
        ),
    ],
)
def test_generate_length_and_membership(length, options):
    password = generate(length, options)
    charset = build_charset(options)
    assert len(password) == length
    assert all(ch in charset for ch in password)


def test_empty_selection_fails_before_drawing(counting_source):
    with pytest.raises(EmptyCharsetError):
        generate(8, GenerationOptions(classes=frozenset()), counting_source)
    assert counting_source.calls == []


@pytest.mark.parametrize("length", [0, -1, True, 3.5, "8"])
def test_invalid_length(length):
    with pytest.raises(InvalidLengthError):
        generate(length, GenerationOptions())


def test_random_source_failure_yields_no_password(broken_source):
    with pytest.raises(RandomSourceUnavailableError):
        generate(10, GenerationOptions(), broken_source)


def test_generate_password_uses_options_length():
    password = generate_password(GenerationOptions(classes={CharacterClass.DIGIT}, length=6))
    assert len(password) == 6
    assert password.isdigit()


def test_generate_with_meta_scores_against_charset():
    options = GenerationOptions(
        classes={CharacterClass.LOWER, CharacterClass.DIGIT}, length=8
    )
    result = generate_with_meta(options)

    assert len(result.password) == 8
    assert result.charset.size == 36
    assert result.report.entropy_bits == pytest.approx(8 * math.log2(36))
    assert result.report.entropy_bits == pytest.approx(41.36, abs=0.01)
    assert result.report.tier is StrengthTier.MEDIUM
    assert result.options is options


def test_batch_returns_distinct_passwords():
    passwords = generate_batch(5, 10, GenerationOptions())
    assert len(passwords) == 5
    assert all(len(p) == 10 for p in passwords)
    assert len(set(passwords)) == 5


def test_batch_preserves_request_order(counting_source):
    assert generate_batch(3, 2, LOWER_ONLY, counting_source) == ["ab", "cd", "ef"]


@pytest.mark.parametrize("count", [1, 100])
def test_batch_bounds_accepted(count):
    assert len(generate_batch(count, 4, LOWER_ONLY)) == count


@pytest.mark.parametrize("count", [0, 101, -5, True, 2.0])
def test_batch_size_out_of_range(count, counting_source):
    with pytest.raises(InvalidBatchSizeError):
        generate_batch(count, 10, GenerationOptions(), counting_source)
    assert counting_source.calls == []


def test_batch_empty_charset(counting_source):
    with pytest.raises(EmptyCharsetError):
        generate_batch(3, 10, GenerationOptions(classes=()), counting_source)
    assert counting_source.calls == []


def test_batch_is_all_or_nothing():
    # Enough words for two passwords, not three.
    source = FixedSource([0] * 20)
    with pytest.raises(RandomSourceUnavailableError):
        generate_batch(3, 10, LOWER_ONLY, source)

from __future__ import annotations

import math

import pytest

from spgen.strength import (
    DAY,
    HOUR,
    MILLENNIUM,
    YEAR,
    CompositionFact as F,
    StrengthTier,
    analyze_composition,
    classify,
    entropy_bits,
    estimate_crack_time,
    evaluate,
    infer_charset_size,
)


def _bits_for_seconds(seconds: float) -> float:
    return math.log2(seconds * 1e9)


def test_entropy_formula():
    assert entropy_bits(8, 36) == pytest.approx(8 * math.log2(36))
    assert entropy_bits(16, 64) == pytest.approx(96.0)


def test_entropy_single_char_charset_is_zero():
    assert entropy_bits(30, 1) == 0.0


def test_entropy_rejects_empty_charset():
    with pytest.raises(ValueError):
        entropy_bits(8, 0)


@pytest.mark.parametrize("size", [2, 10, 36, 88])
def test_entropy_strictly_increasing_in_length(size):
    values = [entropy_bits(n, size) for n in range(1, 40)]
    assert all(a < b for a, b in zip(values, values[1:]))


@pytest.mark.parametrize("length", [1, 8, 16])
def test_entropy_strictly_increasing_in_charset_size(length):
    values = [entropy_bits(length, k) for k in range(1, 100)]
    assert all(a < b for a, b in zip(values, values[1:]))


@pytest.mark.parametrize(
    "bits, length, tier",
    [
        (100.0, 16, StrengthTier.VERY_STRONG),
        (99.9, 16, StrengthTier.STRONG),
        (100.0, 15, StrengthTier.STRONG),
        (60.0, 12, StrengthTier.STRONG),
        (59.9, 12, StrengthTier.MEDIUM),
        (60.0, 11, StrengthTier.MEDIUM),
        (40.0, 8, StrengthTier.MEDIUM),
        (39.9, 8, StrengthTier.WEAK),
        (40.0, 7, StrengthTier.WEAK),
        (0.0, 0, StrengthTier.WEAK),
    ],
)
def test_tier_boundaries(bits, length, tier):
    assert classify(bits, length) is tier


def test_tier_labels():
    assert StrengthTier.VERY_STRONG.label == "Very strong"
    assert StrengthTier.WEAK.label == "Weak"


@pytest.mark.parametrize(
    "seconds, unit, value",
    [
        (59, "seconds", 59),
        (61, "minutes", 1),
        (125, "minutes", 2),
        (2 * HOUR, "hours", 2),
        (3 * DAY, "days", 3),
        (5 * YEAR, "years", 5),
    ],
)
def test_crack_time_buckets(seconds, unit, value):
    crack = estimate_crack_time(_bits_for_seconds(seconds))
    assert crack.unit == unit
    assert crack.value == value


def test_crack_time_millennia_one_decimal():
    crack = estimate_crack_time(_bits_for_seconds(2.5 * MILLENNIUM))
    assert crack.unit == "millennia"
    assert str(crack) == "2.5 millennia"


def test_crack_time_text():
    assert str(estimate_crack_time(0)) == "0 seconds"
    assert str(estimate_crack_time(_bits_for_seconds(1))) == "1 second"
    assert str(estimate_crack_time(_bits_for_seconds(61))) == "1 minute"
    assert str(estimate_crack_time(_bits_for_seconds(3 * DAY))) == "3 days"


def test_crack_time_huge_entropy_does_not_overflow():
    crack = estimate_crack_time(5000)
    assert crack.unit == "millennia"
    assert math.isinf(crack.seconds)


def test_composition_all_classes_short():
    assert analyze_composition("Aa1!") == (
        F.HAS_UPPER,
        F.HAS_LOWER,
        F.HAS_DIGIT,
        F.HAS_SYMBOL,
        F.LENGTH_SHORT,
    )


@pytest.mark.parametrize(
    "length, fact",
    [(11, F.LENGTH_SHORT), (12, F.LENGTH_GOOD), (15, F.LENGTH_GOOD), (16, F.LENGTH_RECOMMENDED)],
)
def test_composition_length_tier(length, fact):
    facts = analyze_composition("xy" * (length // 2) + "z" * (length % 2))
    length_facts = {F.LENGTH_SHORT, F.LENGTH_GOOD, F.LENGTH_RECOMMENDED} & set(facts)
    assert length_facts == {fact}


def test_composition_repeated_characters():
    assert F.REPEATED_CHARS in analyze_composition("xyzzzw")
    assert F.REPEATED_CHARS not in analyze_composition("xyzzw")


def test_repeated_newlines_are_not_repeated_characters():
    assert F.REPEATED_CHARS not in analyze_composition("ab\n\n\ncd")
    assert F.REPEATED_CHARS in analyze_composition("ab\n\nzzz")


@pytest.mark.parametrize("password", ["a123b", "xxABCyy", "QwErTy", "zzqwe"])
def test_composition_common_sequence(password):
    assert F.COMMON_SEQUENCE in analyze_composition(password)


def test_composition_symbol_outside_symbol_set():
    # "~" is not part of the symbol alphabet.
    assert F.HAS_SYMBOL not in analyze_composition("ab~")


def test_report_warnings():
    report = evaluate("aaa123", 36)
    assert report.warnings == (F.REPEATED_CHARS, F.COMMON_SEQUENCE)
    assert report.composition[-2:] == report.warnings


def test_evaluate_example():
    report = evaluate("k3v9x1q7", 36)
    assert report.entropy_bits == pytest.approx(41.36, abs=0.01)
    assert report.tier is StrengthTier.MEDIUM
    assert report.crack_time.unit == "minutes"


def test_evaluate_is_independent_of_generation():
    report = evaluate("Tr0ub4dor&3xyzQW", 88)
    assert report.tier is StrengthTier.VERY_STRONG
    assert F.LENGTH_RECOMMENDED in report.composition


@pytest.mark.parametrize(
    "password, size",
    [("abc", 26), ("aB3", 62), ("aB3!", 88), ("1234", 10), ("", 1), ("é", 1), ("a é", 28)],
)
def test_infer_charset_size(password, size):
    assert infer_charset_size(password) == size

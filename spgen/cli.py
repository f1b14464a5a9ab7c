"""
Command-line interface.

    spgen generate [--length N] [class / exclusion flags] [--preset NAME]
    spgen batch --count N [...] [--export DIR]
    spgen analyze PASSWORD [--charset-size N]
"""
from __future__ import annotations

import argparse
import dataclasses
import sys
from typing import Sequence

from .config import (
    CLASS_ORDER,
    DEFAULT_OPTIONS,
    MAX_BATCH,
    MAX_LENGTH,
    MIN_BATCH,
    MIN_LENGTH,
    PRESETS,
    CharacterClass,
    GenerationOptions,
    preset,
)
from .errors import SpgenError
from .export import write_csv
from .generator import generate_batch, generate_with_meta
from .logging_config import get_logger, setup_logging
from .random_source import RandomSource, SystemRandomSource
from .strength import StrengthReport, evaluate, infer_charset_size

logger = get_logger(__name__)

_CLASS_FLAGS = {
    CharacterClass.UPPER: "no_upper",
    CharacterClass.LOWER: "no_lower",
    CharacterClass.DIGIT: "no_digits",
    CharacterClass.SYMBOL: "no_symbols",
}


def _length(value: str) -> int:
    n = int(value)
    if not MIN_LENGTH <= n <= MAX_LENGTH:
        raise argparse.ArgumentTypeError(
            f"length must be between {MIN_LENGTH} and {MAX_LENGTH}"
        )
    return n


def _add_option_flags(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("-l", "--length", type=_length, default=None,
                        help=f"password length ({MIN_LENGTH}-{MAX_LENGTH})")
    parser.add_argument("--preset", choices=sorted(PRESETS),
                        help="start from a preset instead of the defaults")
    parser.add_argument("--no-upper", action="store_true", help="leave out A-Z")
    parser.add_argument("--no-lower", action="store_true", help="leave out a-z")
    parser.add_argument("--no-digits", action="store_true", help="leave out 0-9")
    parser.add_argument("--no-symbols", action="store_true", help="leave out symbols")
    parser.add_argument("--exclude-similar", action="store_true",
                        help="drop look-alike characters (0 O 1 l I)")
    parser.add_argument("--exclude-ambiguous", action="store_true",
                        help="drop brackets, quotes, slashes and similar punctuation")
    parser.add_argument("--quantum", action="store_true",
                        help="seed draws from the quantum simulator as well as the OS")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="spgen",
        description="Secure password generator with strength analysis.",
    )
    parser.add_argument("--log-level", default=None, help="e.g. DEBUG, INFO, WARNING")
    sub = parser.add_subparsers(dest="command", required=True)

    gen = sub.add_parser("generate", help="generate one password")
    _add_option_flags(gen)

    batch = sub.add_parser("batch", help="generate several passwords")
    _add_option_flags(batch)
    batch.add_argument("-n", "--count", type=int, default=10,
                       help=f"how many passwords ({MIN_BATCH}-{MAX_BATCH})")
    batch.add_argument("--export", metavar="DIR", nargs="?", const=".",
                       help="also write passwords_<date>.csv into DIR")

    analyze = sub.add_parser("analyze", help="score an existing password")
    analyze.add_argument("password")
    analyze.add_argument("--charset-size", type=int, default=None,
                         help="assumed charset size (inferred when omitted)")

    return parser


def options_from_args(args: argparse.Namespace) -> GenerationOptions:
    """
    Build GenerationOptions from parsed flags: start from the preset (or
    defaults), remove classes switched off, then apply exclusions and length.
    """
    base = preset(args.preset) if args.preset else DEFAULT_OPTIONS
    classes = frozenset(
        cls for cls in CLASS_ORDER
        if cls in base.classes and not getattr(args, _CLASS_FLAGS[cls])
    )
    return dataclasses.replace(
        base,
        classes=classes,
        exclude_similar=base.exclude_similar or args.exclude_similar,
        exclude_ambiguous=base.exclude_ambiguous or args.exclude_ambiguous,
        length=args.length if args.length is not None else base.length,
    )


def _source_from_args(args: argparse.Namespace) -> RandomSource:
    if args.quantum:
        # qiskit is slow to import; only pay for it when asked.
        from .quantum_engine import QuantumRandomSource

        return QuantumRandomSource()
    return SystemRandomSource()


def format_report(report: StrengthReport) -> str:
    lines = [
        f"Strength:   {report.tier.label}",
        f"Entropy:    {report.entropy_bits:.1f} bits",
        f"Crack time: {report.crack_time}",
    ]
    lines.extend(f"  - {fact.value}" for fact in report.composition)
    return "\n".join(lines)


def _cmd_generate(args: argparse.Namespace) -> int:
    result = generate_with_meta(options_from_args(args), _source_from_args(args))
    print(result.password)
    print(format_report(result.report))
    return 0


def _cmd_batch(args: argparse.Namespace) -> int:
    options = options_from_args(args)
    passwords = generate_batch(args.count, options.length, options, _source_from_args(args))
    for i, password in enumerate(passwords, start=1):
        print(f"{i}. {password}")
    if args.export is not None:
        path = write_csv(passwords, args.export)
        print(f"Exported {len(passwords)} passwords to {path}", file=sys.stderr)
    return 0


def _cmd_analyze(args: argparse.Namespace) -> int:
    size = (
        args.charset_size
        if args.charset_size is not None
        else infer_charset_size(args.password)
    )
    print(format_report(evaluate(args.password, size)))
    return 0


_COMMANDS = {
    "generate": _cmd_generate,
    "batch": _cmd_batch,
    "analyze": _cmd_analyze,
}


def main(argv: Sequence[str] | None = None) -> int:
    """
    Entry point for the `spgen` console script and `run_spgen.py`.
    """
    parser = build_parser()
    args = parser.parse_args(argv)
    setup_logging(args.log_level)

    try:
        return _COMMANDS[args.command](args)
    except SpgenError as exc:
        logger.warning("command_failed", command=args.command, error=type(exc).__name__)
        print(f"error: {exc}", file=sys.stderr)
        return 2
    except ValueError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 2


if __name__ == "__main__":
    sys.exit(main())

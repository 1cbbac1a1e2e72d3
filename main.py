#!/usr/bin/env python3
"""
Word Nums: Command Line Entry Point
===================================

Parses English number phrases and prints the typed literal for each.

Usage:
    python main.py "one hundred fifty five thousand three hundred seventy two"
    python main.py "plus two hundred fifty five" "minus ten"
    python main.py --policy always_signed "plus one"
    python main.py --render 1337
"""

from __future__ import annotations

import argparse
import sys

from dotenv import load_dotenv

from word_nums.config import ParserSettings, configure_logging
from word_nums.exceptions import ParseError
from word_nums.models import SignPolicy, TypedLiteral
from word_nums.parser import NumberWordsParser
from word_nums.renderer import number_to_words

# ─── ANSI Color Constants ───────────────────────────────────────────

_RED = "\033[91m"
_GREEN = "\033[92m"
_CYAN = "\033[96m"
_DIM = "\033[2m"
_BOLD = "\033[1m"
_RESET = "\033[0m"


# ─── Pretty Printer Helpers ─────────────────────────────────────────


def _print_literal(text: str, literal: TypedLiteral) -> None:
    print(f"  {_DIM}{text}{_RESET}")
    print(f"    {_GREEN}{_BOLD}{literal.render()}{_RESET}  {_DIM}({literal.bits}-bit "
          f"{'signed' if literal.signed else 'unsigned'}){_RESET}")


def _print_error(text: str, error: ParseError) -> None:
    print(f"  {_DIM}{text}{_RESET}")
    print(f"    {_RED}[{error.code}]{_RESET} {error.message}")
    for k, v in error.details.items():
        print(f"      {_DIM}{k}: {v}{_RESET}")


def parse_phrases(parser: NumberWordsParser, phrases: list[str]) -> int:
    """Parse and print every phrase.

    Returns:
        0 if all phrases parsed, 1 otherwise.
    """
    failures = 0
    for phrase in phrases:
        try:
            literal = parser.parse(phrase)
        except ParseError as e:
            failures += 1
            _print_error(phrase, e)
        else:
            _print_literal(phrase, literal)
    return 0 if failures == 0 else 1


def render_number(value: str) -> int:
    try:
        print(number_to_words(int(value)))
    except ValueError as e:
        print(f"  {_RED}{e}{_RESET}", file=sys.stderr)
        return 1
    return 0


# ─── Main ────────────────────────────────────────────────────────────


def build_arg_parser() -> argparse.ArgumentParser:
    arg_parser = argparse.ArgumentParser(
        prog="word-nums",
        description="Convert English number phrases into typed integer literals.",
    )
    arg_parser.add_argument("phrases", nargs="*", help="number phrases, one per argument")
    arg_parser.add_argument(
        "--policy",
        choices=[p.value for p in SignPolicy],
        help="signed/unsigned selection rule (default from WORD_NUMS_SIGN_POLICY)",
    )
    arg_parser.add_argument("--render", metavar="N", help="print the English phrase for N and exit")
    return arg_parser


def main(argv: list[str] | None = None) -> int:
    load_dotenv()
    args = build_arg_parser().parse_args(argv)

    settings = ParserSettings.from_env()
    if args.policy:
        settings = settings.model_copy(update={"sign_policy": SignPolicy(args.policy)})
    configure_logging(settings)

    if args.render is not None:
        return render_number(args.render)

    phrases = args.phrases or [line.strip() for line in sys.stdin if line.strip()]
    print(f"\n{_BOLD}{_CYAN}  WORD NUMS{_RESET}  {_DIM}policy: {settings.sign_policy.value}{_RESET}\n")
    return parse_phrases(NumberWordsParser(settings), phrases)


if __name__ == "__main__":
    sys.exit(main())

"""CLI entrypoint for ipa-sounds: subcommand dispatcher."""

import argparse
import logging
import sys

from ipa_sounds.errors import TranscriptionError
from ipa_sounds.formatter import describe_sound, format_transcription
from ipa_sounds.parser import parse
from ipa_sounds.symbols import inventory
from ipa_sounds.types import Transcription

logger = logging.getLogger("ipa_sounds.cli")


def _add_text_arg(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "text",
        help="IPA transcription to read, or '-' to read from stdin.",
    )


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse CLI arguments with subcommands."""
    parser = argparse.ArgumentParser(
        prog="ipa-sounds",
        description="Parse and render IPA transcriptions",
    )
    parser.add_argument("-v", "--verbose", action="store_true", default=False,
                        help="Enable debug logging (default: warnings only)")

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    parse_parser = subparsers.add_parser(
        "parse",
        help="List the sounds in a transcription",
        description="Parse a transcription and print one line per sound",
    )
    _add_text_arg(parse_parser)

    check_parser = subparsers.add_parser(
        "check",
        help="Check that a transcription is in canonical form",
        description="Parse a transcription and compare its canonical rendering to the input",
    )
    _add_text_arg(check_parser)

    subparsers.add_parser(
        "inventory",
        help="List supported symbols",
        description="Print every supported vowel and consonant symbol",
    )

    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        sys.exit(1)

    return args


def _read_text(text: str) -> str:
    if text == "-":
        return sys.stdin.read().rstrip("\n")
    return text


def _parse_or_exit(text: str) -> Transcription:
    try:
        return parse(text)
    except TranscriptionError as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)


def _run_parse(args: argparse.Namespace) -> None:
    """Print each sound, the word count, then the canonical form."""
    transcription = _parse_or_exit(_read_text(args.text))
    for sound in transcription:
        print(describe_sound(sound))
    words = [word for word in transcription.words() if word]
    print(f"Words: {len(words)}")
    print(f"Canonical: {format_transcription(transcription)}")


def _run_check(args: argparse.Namespace) -> None:
    """Report whether the input is already in canonical form."""
    text = _read_text(args.text)
    transcription = _parse_or_exit(text)
    canonical = format_transcription(transcription)
    if canonical == text:
        print("Canonical")
    else:
        logger.info(f"Input differs from canonical rendering: {text!r} -> {canonical!r}")
        print(f"Not canonical, expected: {canonical}")


def _run_inventory(args: argparse.Namespace) -> None:
    """Print the symbol tables."""
    for kind, symbol, description in inventory():
        print(f"{kind:<10} {symbol}  {description}")


def main(argv: list[str] | None = None) -> None:
    """CLI entrypoint."""
    args = parse_args(argv)

    level = logging.DEBUG if args.verbose else logging.WARNING
    logging.basicConfig(level=level, format="%(name)s %(levelname)s: %(message)s")

    if args.command == "parse":
        _run_parse(args)
    elif args.command == "check":
        _run_check(args)
    elif args.command == "inventory":
        _run_inventory(args)


if __name__ == "__main__":
    main()

"""One-shot reply suggestions from the command line."""

from __future__ import annotations

import argparse
import asyncio
import sys

from loguru import logger

from replysuggest.application.dispatcher import SuggestionDispatcher
from replysuggest.domain import PROVIDERS, EmailContext, EmailValidationError, SuggestionError
from replysuggest.infrastructure import configure_logging, get_settings


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Generate AI reply suggestions for an email")
    parser.add_argument("--subject", default=None, help="Subject of the email being answered")
    parser.add_argument("--body", default=None, help="Email content (plain text or JSON); '-' reads stdin")
    parser.add_argument(
        "--thread",
        action="append",
        default=[],
        metavar="MESSAGE",
        help="Earlier message in the thread, oldest first (repeatable)",
    )
    parser.add_argument(
        "--provider",
        default=None,
        help=f"Provider id: {', '.join(p.value for p in PROVIDERS)} (default: configured provider)",
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    settings = get_settings()
    configure_logging(settings.log_level)

    body = sys.stdin.read() if args.body == "-" else args.body

    try:
        context = EmailContext(
            subject=args.subject,
            body=body,
            thread_history=tuple(args.thread),
        ).ensure_content()
    except EmailValidationError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 2

    dispatcher = SuggestionDispatcher(settings)
    provider = args.provider if args.provider is not None else settings.default_provider

    try:
        result = asyncio.run(dispatcher.generate(context, provider))
    except SuggestionError as e:
        logger.error(f"Suggestion generation failed: {e}")
        print(f"Error: {e}", file=sys.stderr)
        return 1

    print(f"Suggestions from {result.provider}:")
    for i, suggestion in enumerate(result.suggestions, 1):
        print(f"  {i}. {suggestion}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())

"""Entry point for the age breakdown CLI.

Run with:
    python main.py [BIRTH_DATE] [--agent]

The script configures structured logging, reads a birthdate (from the command
line or an interactive prompt), validates it, and prints the age breakdown.
With ``--agent`` the question is sent to the Strands agent instead.
"""

import argparse
import json
import logging
import os
import sys

from age_chronos import calculate_age, create_agent, parse_birth_date, render_result
from age_chronos.agent import invoke_with_audit
from age_chronos.config import current_date, settings
from age_chronos.validation import BirthDateError


def _configure_logging() -> None:
    """Configure logging format based on the LOG_FORMAT environment variable.

    Set LOG_FORMAT=json for structured JSON output (CloudWatch-friendly).
    Any other value (or absent) falls back to human-readable plaintext.
    """
    log_format = os.environ.get("LOG_FORMAT", "text").lower()

    if log_format == "json":
        class _JsonFormatter(logging.Formatter):
            def format(self, record: logging.LogRecord) -> str:
                payload: dict = {
                    "timestamp": self.formatTime(record, "%Y-%m-%dT%H:%M:%S"),
                    "level": record.levelname,
                    "logger": record.name,
                    "message": record.getMessage(),
                }
                # Merge any extra fields passed via logger.info(..., extra={...})
                for key, value in record.__dict__.items():
                    if key not in logging.LogRecord.__dict__ and not key.startswith("_"):
                        payload[key] = value
                return json.dumps(payload, default=str)

        handler = logging.StreamHandler()
        handler.setFormatter(_JsonFormatter())
        logging.basicConfig(level=logging.INFO, handlers=[handler], force=True)
    else:
        logging.basicConfig(
            level=logging.INFO,
            format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        )


def _parse_args(argv: list[str] | None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Show your exact age and the countdown to your next birthday.",
    )
    parser.add_argument(
        "birth_date",
        nargs="?",
        help="Birthdate in YYYY-MM-DD format. Prompted for when omitted.",
    )
    parser.add_argument(
        "--agent",
        action="store_true",
        help="Ask the Bedrock-backed agent instead of computing locally (needs MODEL_ARN).",
    )
    return parser.parse_args(argv)


def run(argv: list[str] | None = None) -> None:
    """Configure logging, read a birthdate, and print the age breakdown.

    The birthdate is validated with ``parse_birth_date`` before anything is
    computed.  Exits with code 1 on invalid input so that callers (shell
    scripts, Docker health checks, etc.) can detect failure cleanly.

    In ``--agent`` mode the validated birthdate is sent to the agent through
    ``invoke_with_audit``, which writes the single audit record for the call.
    The birthdate itself is never logged.
    """
    _configure_logging()
    args = _parse_args(argv)

    print("Welcome to Age Chronos!")
    if args.birth_date is None:
        birthdate_raw = input("Please enter your birthdate (YYYY-MM-DD, e.g. 1990-05-15): ")
    else:
        birthdate_raw = args.birth_date

    today = current_date()
    try:
        birth_date = parse_birth_date(birthdate_raw, today, min_date=settings.min_birth_date)
    except BirthDateError as exc:
        print(f"Error: {exc}")
        sys.exit(1)

    if not args.agent:
        print(render_result(calculate_age(birth_date, today)))
        return

    agent = create_agent()
    prompt = (
        f"My birthdate is {birth_date.isoformat()}. How old am I in years, months and days, "
        "and how long until my next birthday?"
    )
    print(invoke_with_audit(agent, prompt))


if __name__ == "__main__":
    run()

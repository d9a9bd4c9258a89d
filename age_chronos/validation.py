"""Validation of user-supplied birth dates.

Runs before the calculator so that the calculator only ever sees a real
calendar date between ``min_date`` and today.
"""

import datetime
import logging
import re

logger: logging.Logger = logging.getLogger(__name__)

MIN_BIRTH_DATE: datetime.date = datetime.date(1900, 1, 1)
_MAX_DATE_LEN = 10
# fromisoformat also takes basic and week dates on 3.11+
_ISO_DATE_RE = re.compile(r"^\d{4}-\d{2}-\d{2}$", re.ASCII)

REQUIRED_MESSAGE = "A date of birth is required."
FUTURE_MESSAGE = "Date of birth cannot be in the future."


class BirthDateError(ValueError):
    """Raised when a birth date is missing, malformed or out of range.

    ``str(exc)`` is the message shown to the user next to the input.
    """


def parse_birth_date(
    raw: str | datetime.date | None,
    today: datetime.date,
    min_date: datetime.date = MIN_BIRTH_DATE,
) -> datetime.date:
    """Turn raw input into a birth date the calculator can accept.

    Args:
        raw: An ISO ``YYYY-MM-DD`` string, a ``date``, or ``None``.
        today: The reference date; birth dates after it are rejected.
        min_date: The earliest accepted birth date.

    Returns:
        The validated birth date.

    Raises:
        BirthDateError: If the value is missing, not an ISO date, in the
            future, or earlier than ``min_date``.
    """
    if raw is None:
        raise BirthDateError(REQUIRED_MESSAGE)

    if isinstance(raw, datetime.datetime):
        birth_date = raw.date()
    elif isinstance(raw, datetime.date):
        birth_date = raw
    else:
        text = raw.strip()
        if not text:
            raise BirthDateError(REQUIRED_MESSAGE)
        # log the length only; the value itself is personal data
        logger.debug("parse_birth_date called with %d-char input", len(text))
        if len(text) > _MAX_DATE_LEN or not _ISO_DATE_RE.match(text):
            raise BirthDateError(_format_message(raw))
        try:
            birth_date = datetime.date.fromisoformat(text)
        except ValueError as exc:
            raise BirthDateError(_format_message(raw)) from exc

    if birth_date > today:
        raise BirthDateError(FUTURE_MESSAGE)
    if birth_date < min_date:
        raise BirthDateError(f"Date of birth cannot be before {min_date.isoformat()}.")
    return birth_date


def _format_message(raw: str) -> str:
    return f"'{raw}' is not a valid date. Please use the format YYYY-MM-DD (e.g. 1990-05-15)."

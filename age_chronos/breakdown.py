"""Calendar-aware age breakdown.

All arithmetic works on whole calendar dates through ``relativedelta``, which
clamps month steps to the last day of the target month.  The anniversary of a
Feb 29 birth date is therefore Feb 28 in a common year, for the elapsed age
and for the next-birthday countdown alike.
"""

import datetime
import logging

from dateutil.relativedelta import relativedelta

from age_chronos.models import AgeResult, NextBirthday

logger: logging.Logger = logging.getLogger(__name__)


def _as_date(value: datetime.date) -> datetime.date:
    # datetime is a subclass of date; drop the time of day.
    if isinstance(value, datetime.datetime):
        return value.date()
    return value


def add_months(value: datetime.date, months: int) -> datetime.date:
    """Return ``value`` shifted by ``months`` calendar months.

    The day is clamped to the length of the target month, e.g. Jan 31 plus one
    month is Feb 28 (or Feb 29 in a leap year).
    """
    return value + relativedelta(months=months)


def anniversary(birth_date: datetime.date, year: int) -> datetime.date:
    """Return the month/day of ``birth_date`` in ``year`` (Feb 29 -> Feb 28 in common years)."""
    return add_months(birth_date, 12 * (year - birth_date.year))


def elapsed_age(birth_date: datetime.date, today: datetime.date) -> tuple[int, int, int]:
    """Split the interval from ``birth_date`` to ``today`` into years, months and days.

    Whole years are counted first, then whole months, then the remaining days.
    ``relativedelta`` steps months from the birth date itself, so a clamped
    Feb 28 anniversary does not shift later month boundaries.

    Raises:
        ValueError: If ``birth_date`` is after ``today``.
    """
    birth_date, today = _as_date(birth_date), _as_date(today)
    if birth_date > today:
        raise ValueError("birth_date must not be after today.")

    delta = relativedelta(today, birth_date)
    return delta.years, delta.months, delta.days


def next_birthday(birth_date: datetime.date, today: datetime.date) -> NextBirthday:
    """Return the countdown to the nearest anniversary on or after ``today``."""
    birth_date, today = _as_date(birth_date), _as_date(today)

    candidate = anniversary(birth_date, today.year)
    if candidate < today:
        candidate = anniversary(birth_date, today.year + 1)

    if candidate == today:
        return NextBirthday(months=0, days=0, is_today=True)

    # a Feb 28 birthday seen from Feb 29 is one clamped year away
    delta = relativedelta(candidate, today)
    return NextBirthday(months=delta.years * 12 + delta.months, days=delta.days, is_today=False)


def calculate_age(birth_date: datetime.date, today: datetime.date) -> AgeResult:
    """Compute the full age breakdown of ``birth_date`` as seen on ``today``.

    Args:
        birth_date: The date of birth.  ``datetime`` values are truncated to
            their calendar date.
        today: The reference date, truncated the same way.

    Returns:
        A frozen ``AgeResult`` holding the elapsed years, months and days and
        the next-birthday countdown.

    Raises:
        ValueError: If ``birth_date`` is after ``today``.
    """
    years, months, days = elapsed_age(birth_date, today)
    upcoming = next_birthday(birth_date, today)
    logger.debug(
        "calculate_age result: %dy %dm %dd, next birthday in %dm %dd (is_today=%s)",
        years,
        months,
        days,
        upcoming.months,
        upcoming.days,
        upcoming.is_today,
    )
    return AgeResult(years=years, months=months, days=days, next_birthday=upcoming)

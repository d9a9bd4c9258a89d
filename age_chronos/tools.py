"""Strands tools that expose the age breakdown to the agent.

Each function is decorated with ``@tool`` so the Strands framework can
expose it to the language model.  Input validation is performed before any
computation so that the model receives a clear error message rather than a
cryptic Python traceback.
"""

import logging

from strands import tool

from age_chronos.breakdown import calculate_age
from age_chronos.config import current_date, settings
from age_chronos.validation import parse_birth_date

logger: logging.Logger = logging.getLogger(__name__)


@tool
def get_current_date() -> str:
    """Get today's date in YYYY-MM-DD format.

    Use this tool to retrieve the current date when the user asks how old
    they are or how long it is until their next birthday.

    Returns:
        Today's date as a string in YYYY-MM-DD format.
    """
    today = current_date().isoformat()
    logger.debug("get_current_date called, returning %s", today)
    return today


@tool
def calculate_age_breakdown(birth_date: str) -> dict:
    """Calculate someone's exact age and the time until their next birthday.

    Use this tool whenever the user gives a birthdate and wants to know their
    age in years, months and days, or how many months and days remain until
    their next birthday.  Today's date is resolved automatically.

    Args:
        birth_date: The birthdate in YYYY-MM-DD format.  It must not be in the
            future and must not be earlier than 1900-01-01.

    Returns:
        A dictionary with ``years``, ``months`` and ``days`` elapsed since the
        birthdate, and ``next_birthday`` holding ``months``, ``days`` and
        ``is_today`` (true when today is the birthday).

    Raises:
        ValueError: If birth_date is not a string, is not in YYYY-MM-DD
            format, is in the future, or is before the earliest allowed date.
    """
    if not isinstance(birth_date, str):
        raise ValueError("birth_date must be a string.")

    today = current_date()
    born = parse_birth_date(birth_date, today, min_date=settings.min_birth_date)
    result = calculate_age(born, today)
    return result.model_dump()

"""age_chronos — exact age in years, months and days, plus a birthday countdown.

Public API
----------
calculate_age
    Pure function ``(birth_date, today) -> AgeResult``.
parse_birth_date
    Validates raw input before it reaches the calculator.
render_result
    Turns an ``AgeResult`` into display text.
create_agent
    Factory function that builds and returns a configured ``strands.Agent``.

Example
-------
>>> import datetime
>>> from age_chronos import calculate_age
>>> calculate_age(datetime.date(2000, 6, 15), datetime.date(2024, 1, 1)).years
23
"""

from age_chronos.agent import create_agent
from age_chronos.breakdown import calculate_age
from age_chronos.models import AgeResult, NextBirthday
from age_chronos.render import render_result
from age_chronos.validation import BirthDateError, parse_birth_date

__all__: list[str] = [
    "AgeResult",
    "BirthDateError",
    "NextBirthday",
    "calculate_age",
    "create_agent",
    "parse_birth_date",
    "render_result",
]

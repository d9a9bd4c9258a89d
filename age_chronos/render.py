"""Plain-text rendering of an ``AgeResult``."""

from age_chronos.models import AgeResult

SEPARATOR = "-" * 32


def render_result(result: AgeResult) -> str:
    """Return the display text for ``result``.

    The elapsed age comes first as three labelled values, followed by either
    the birthday greeting or the countdown to the next birthday.
    """
    lines = [
        f"{'Years':<8}{result.years:>6}",
        f"{'Months':<8}{result.months:>6}",
        f"{'Days':<8}{result.days:>6}",
        SEPARATOR,
    ]
    upcoming = result.next_birthday
    if upcoming.is_today:
        lines.append("It's your Birthday!")
        lines.append("Happy Birthday! 🎉")
    else:
        lines.append("Next Birthday")
        lines.append(f"{upcoming.months} Months {upcoming.days} Days")
        lines.append("Until your special day")
    return "\n".join(lines)

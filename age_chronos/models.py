"""Immutable result types returned by the age breakdown calculator."""

from pydantic import BaseModel, ConfigDict, Field


class NextBirthday(BaseModel):
    """Countdown from today to the next anniversary of the birth date."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    months: int = Field(..., ge=0)
    days: int = Field(..., ge=0)
    is_today: bool


class AgeResult(BaseModel):
    """Elapsed years, months and days since the birth date, plus the countdown.

    ``months`` and ``days`` are remainders: whole years are taken first, then
    whole months, and the leftover days last.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    years: int = Field(..., ge=0)
    months: int = Field(..., ge=0, le=11)
    days: int = Field(..., ge=0, le=30)
    next_birthday: NextBirthday

"""Runtime configuration for the age_chronos package.

Settings are loaded in priority order:
  1. Environment variables (highest priority)
  2. .env file in the project root
  3. Field defaults

Usage::

    from age_chronos.config import settings, current_date

    print(settings.min_birth_date, current_date())
"""

import datetime

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="forbid",
    )

    model_arn: str | None = Field(
        default=None,
        alias="MODEL_ARN",
        description="AWS Bedrock application inference profile ARN. Only the agent needs it.",
    )
    reference_date: datetime.date | None = Field(
        default=None,
        alias="AGE_CHRONOS_TODAY",
        description="Pins the date treated as 'today'. Unset means the local calendar date.",
    )
    min_birth_date: datetime.date = Field(
        default=datetime.date(1900, 1, 1),
        alias="MIN_BIRTH_DATE",
        description="Earliest birth date accepted by validation.",
    )


settings = Settings()


def current_date() -> datetime.date:
    """Return the configured reference date, or today's local date."""
    return settings.reference_date or datetime.date.today()

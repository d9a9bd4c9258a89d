"""Shared pytest fixtures for the age_chronos test suite.

Fixtures defined here are available to all test modules (unit, integration)
without any import.

No AWS credentials are required — the ``agent_runner`` fixture patches
``BedrockModel`` before any SDK initialisation can attempt a network call.
"""

import datetime
import os

import pytest
from unittest.mock import MagicMock, patch

# ---------------------------------------------------------------------------
# Pin MODEL_ARN before any test module is collected so that the module-level
# ``settings = Settings()`` in config.py sees a value and create_agent() can
# build an agent.  AGE_CHRONOS_TODAY is removed so the real clock is used
# unless a test pins it explicitly.
# ---------------------------------------------------------------------------
os.environ.setdefault("MODEL_ARN", "arn:aws:bedrock:us-east-1:123456789012:application-inference-profile/test")
os.environ.pop("AGE_CHRONOS_TODAY", None)


# ---------------------------------------------------------------------------
# Model fixtures
# ---------------------------------------------------------------------------

@pytest.fixture
def mock_bedrock_model() -> MagicMock:
    """A MagicMock standing in for ``BedrockModel`` — no AWS credentials needed."""
    model = MagicMock()
    model.invoke.return_value = {
        "role": "assistant",
        "content": [{"type": "text", "text": "Mocked response"}],
    }
    return model


# ---------------------------------------------------------------------------
# Agent fixtures
# ---------------------------------------------------------------------------

@pytest.fixture
def agent_runner(mock_bedrock_model: MagicMock):
    """Fully constructed ``strands.Agent`` with ``BedrockModel`` patched out.

    The tool registry, system prompt, and message list are live, but the
    underlying model never makes a Bedrock API call.
    """
    with patch("age_chronos.agent.BedrockModel", return_value=mock_bedrock_model):
        from age_chronos import create_agent
        return create_agent()


# ---------------------------------------------------------------------------
# Date fixtures
# ---------------------------------------------------------------------------

@pytest.fixture
def fixed_today() -> datetime.date:
    """The reference 'today' used by the worked examples."""
    return datetime.date(2024, 1, 1)


@pytest.fixture
def pinned_today(fixed_today: datetime.date):
    """Patch ``current_date`` wherever it is imported so 'today' is ``fixed_today``."""
    with patch("age_chronos.tools.current_date", return_value=fixed_today), \
            patch("main.current_date", return_value=fixed_today):
        yield fixed_today


@pytest.fixture
def leap_day_birth() -> datetime.date:
    """A leap-day birth date (2000 is a leap year)."""
    return datetime.date(2000, 2, 29)

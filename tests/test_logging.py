"""Tests for structlog configuration."""

import pytest
import structlog

from volunteer_match.core.config import get_settings
from volunteer_match.core.logging import configure_logging


@pytest.fixture
def restore_logging():
    yield
    configure_logging(get_settings().ENV)


@pytest.mark.parametrize(
    "env, renderer",
    [
        ("development", structlog.dev.ConsoleRenderer),
        ("staging", structlog.processors.JSONRenderer),
        ("production", structlog.processors.JSONRenderer),
    ],
)
def test_renderer_follows_environment(restore_logging, env, renderer):
    configure_logging(env)

    processors = structlog.get_config()["processors"]

    assert isinstance(processors[-1], renderer)

"""Shared test configuration and fixtures."""

import pytest

from config import Settings


def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line(
        "markers", "slow: exercises real timeouts or backoff delays"
    )


@pytest.fixture
def settings():
    return Settings(
        gemini_api_key="",
        llm_max_attempts=2,
        llm_retry_base_delay=0.0,
        llm_retry_max_delay=0.0,
        llm_timeout_seconds=1.0,
        chunk_timeout_seconds=2.0,
        analysis_timeout_seconds=5.0,
        enhancement_min_chars=100,
        rate_limit="1000/minute",
    )

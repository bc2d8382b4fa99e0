"""
Pytest configuration and shared fixtures for the test suite.

Keeps tests independent of the caller's environment: logging handlers
installed by a CLI run and ``RELEASE_CANDIDATE_*`` variables exported in
the shell do not leak into other tests.
"""

import pytest

from release_candidate.utils.console import reconfigure_console
from release_candidate.utils.logger import disable_logging

_ENV_VARS = (
    "RELEASE_CANDIDATE_CONFIG",
    "RELEASE_CANDIDATE_COLOR",
    "RELEASE_CANDIDATE_VERSION_FORMAT",
    "RELEASE_CANDIDATE_OUTPUT_URI",
    "RELEASE_CANDIDATE_OUTPUT_TEMPLATE",
    "RELEASE_CANDIDATE_ENCODING",
    "NO_COLOR",
)


@pytest.fixture(autouse=True)
def clean_environment(monkeypatch):
    """Remove configuration variables and reset logging after each test."""
    for name in _ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    yield
    disable_logging()
    reconfigure_console()

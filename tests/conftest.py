"""Shared pytest fixtures for the beancheck test suite.

Fixtures defined here are available to all tests without explicit imports.
Bean classes used by the unit tests live in ``tests/unit/sample_beans.py``.
"""

from __future__ import annotations

import pytest

from beancheck import RecordingPropertyVerifier


@pytest.fixture
def recording_verifier() -> RecordingPropertyVerifier:
    """Return a fresh verifier that collects failures instead of raising."""
    return RecordingPropertyVerifier()

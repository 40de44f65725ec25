"""pytest integration.

Registered through the ``pytest11`` entry point, so installing beancheck
with pytest (the ``pytest`` extra) makes the ``bean_verifier`` fixture
available to every test session::

    def test_person_accessors(bean_verifier):
        bean_verifier.verify(Person, "id")
"""

from __future__ import annotations

from typing import Any

import pytest

from beancheck.verifier import PropertyVerifier


class PytestPropertyVerifier(PropertyVerifier):
    """Verifier that fails the running test on the first problem."""

    def report_equality_failure(self, message: str, expected: Any, actual: Any) -> None:
        pytest.fail(f"{message}: expected {expected!r}, got {actual!r}", pytrace=False)

    def report_failure(self, message: str) -> None:
        pytest.fail(message, pytrace=False)


@pytest.fixture
def bean_verifier() -> PytestPropertyVerifier:
    """Return a fresh :class:`PytestPropertyVerifier` with default settings."""
    return PytestPropertyVerifier()

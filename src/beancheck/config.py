"""Pydantic configuration shared by every verifier."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, field_validator

from beancheck.strategies import get_strategy


class VerifierConfig(BaseModel):
    """Settings applied to every ``verify`` call of a verifier.

    Attributes:
        mock_strategy: Name of a registered mock-construction strategy.
        skip: Property names never tested, in addition to the names passed
            to ``verify``.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    mock_strategy: str = "none"
    skip: frozenset[str] = frozenset()

    @field_validator("mock_strategy")
    @classmethod
    def _check_strategy_registered(cls, value: str) -> str:
        # StrategyNotFoundError is a KeyError; pydantic only collects ValueError.
        try:
            get_strategy(value)
        except KeyError as exc:
            raise ValueError(exc.args[0]) from exc
        return value

"""Plugin registry for mock-construction strategies.

A strategy is a callable ``(value_type) -> value | None`` tried before the
built-in synthesis rules.  Returning ``None`` declines, letting the built-in
rules run.  Strategies are registered by name so that configuration files
and the CLI can select one without importing it.
"""

from __future__ import annotations

import enum
import inspect
from collections.abc import Callable
from typing import Any, TypeVar
from unittest import mock

import numpy as np

MockStrategy = Callable[[Any], Any]

_S = TypeVar("_S", bound=MockStrategy)

_STRATEGY_REGISTRY: dict[str, MockStrategy] = {}


class StrategyNotFoundError(KeyError):
    """Raised when a requested strategy name is not in the registry."""


def register_strategy(name: str) -> Callable[[_S], _S]:
    """Decorator that registers a mock-construction strategy.

    Usage::

        @register_strategy("factory")
        def build_from_factory(value_type: Any) -> Any:
            ...
    """

    def decorator(func: _S) -> _S:
        if name in _STRATEGY_REGISTRY:
            msg = f"Strategy name {name!r} is already registered to {_STRATEGY_REGISTRY[name].__name__}"
            raise ValueError(msg)
        _STRATEGY_REGISTRY[name] = func
        return func

    return decorator


def get_strategy(name: str) -> MockStrategy:
    """Return the strategy registered under *name*.

    Raises :class:`StrategyNotFoundError` if not found.
    """
    try:
        return _STRATEGY_REGISTRY[name]
    except KeyError:
        msg = f"No strategy registered with name {name!r}. Available: {list_strategies()}"
        raise StrategyNotFoundError(msg) from None


def list_strategies() -> list[str]:
    """Return all registered strategy names (sorted)."""
    return sorted(_STRATEGY_REGISTRY)


# ---------------------------------------------------------------------------
# Built-in strategies
# ---------------------------------------------------------------------------


@register_strategy("none")
def no_mock(value_type: Any) -> None:
    """Never produce a value."""
    return None


def _is_mockable(value_type: Any) -> bool:
    if value_type is Any or not inspect.isclass(value_type):
        return False
    if getattr(value_type, "__final__", False):
        return False
    if value_type.__module__ == "builtins":
        return False
    return not issubclass(value_type, (enum.Enum, np.generic, np.ndarray))


@register_strategy("autospec")
def autospec_mock(value_type: Any) -> Any:
    """Build an autospecced instance mock for user-defined, non-final classes."""
    if not _is_mockable(value_type):
        return None
    return mock.create_autospec(value_type, instance=True)

"""Test value synthesis for bean property types.

:class:`ValueSynthesizer` resolves a declared type to a deterministic,
non-default test value.  Resolution order (first match wins):

1. ``build_mock_value`` (the configured mock strategy).
2. Built-in sentinel rules, one overridable provider per rule:

    ==========  ==================================  ==================
    Rule        Types                               Default value
    ==========  ==================================  ==================
    string      ``str``                             ``"test string"``
    array       ``np.ndarray`` / ``NDArray[dtype]``  ``np.zeros(1, dtype)``
    boolean     ``bool``, ``np.bool_``              ``True``
    int         ``int``, ``np.int32``               ``1``
    long        ``np.int64``                        ``1``
    double      ``float``, ``np.float64``           ``1.0``
    float       ``np.float32``                      ``1.0``
    char        :data:`Char`                        ``"Y"``
    enum        ``enum.Enum`` subclasses            first member
    ==========  ==================================  ==================

3. A no-argument instance of the type itself.

``X | None`` is synthesized as ``X``.  Anything else raises
:class:`~beancheck.errors.UnsupportedTypeError`.
"""

from __future__ import annotations

import enum
import inspect
import types
import typing
from typing import Any, NewType

import numpy as np

from beancheck.errors import UnsupportedTypeError
from beancheck.strategies import MockStrategy, get_strategy

Char = NewType("Char", str)
"""Annotation for single-character string properties."""

_NONE_TYPE = type(None)
_NO_ARG_KINDS = (inspect.Parameter.VAR_POSITIONAL, inspect.Parameter.VAR_KEYWORD)


def unwrap_optional(tp: Any) -> Any:
    """Return ``X`` for ``X | None``; any other type is returned unchanged."""
    if typing.get_origin(tp) not in (typing.Union, types.UnionType):
        return tp
    args = [arg for arg in typing.get_args(tp) if arg is not _NONE_TYPE]
    if len(args) == 1:
        return args[0]
    return tp


def is_array_type(tp: Any) -> bool:
    return tp is np.ndarray or typing.get_origin(tp) is np.ndarray


def array_dtype(tp: Any) -> np.dtype[Any]:
    """Return the element dtype of an ``NDArray[...]`` annotation (float64 if unspecified)."""
    args = typing.get_args(tp)
    if len(args) == 2:
        dtype_args = typing.get_args(args[1])
        if dtype_args and inspect.isclass(dtype_args[0]) and issubclass(dtype_args[0], np.generic):
            return np.dtype(dtype_args[0])
    return np.dtype(np.float64)


def _coerce(tp: type, value: Any) -> Any:
    if type(value) is tp:
        return value
    return tp(value)


def has_no_arg_constructor(tp: type) -> bool:
    """Return True if *tp* is a concrete class callable without arguments."""
    if inspect.isabstract(tp):
        return False
    try:
        signature = inspect.signature(tp)
    except (TypeError, ValueError):
        return False
    return all(
        param.default is not inspect.Parameter.empty or param.kind in _NO_ARG_KINDS
        for param in signature.parameters.values()
    )


class ValueSynthesizer:
    """Build test values for property types.

    Every ``test_*_value`` provider and :meth:`build_mock_value` may be
    overridden by subclasses to change the values used.

    Args:
        mock_strategy: A registered strategy name or a strategy callable.
    """

    def __init__(self, mock_strategy: str | MockStrategy = "none") -> None:
        if isinstance(mock_strategy, str):
            mock_strategy = get_strategy(mock_strategy)
        self._mock_strategy = mock_strategy

    def synthesize(self, value_type: Any) -> Any:
        """Return a test value for *value_type*.

        Raises:
            UnsupportedTypeError: If no rule applies to *value_type*.
        """
        tp = unwrap_optional(value_type)

        mocked = self.build_mock_value(tp)
        if mocked is not None:
            return mocked

        if tp is str:
            return self.test_string_value()
        if is_array_type(tp):
            return self.test_array_value(array_dtype(tp))
        if tp in (bool, np.bool_):
            return _coerce(tp, self.test_boolean_value())
        if tp in (int, np.int32):
            return _coerce(tp, self.test_int_value())
        if tp is np.int64:
            return _coerce(tp, self.test_long_value())
        if tp in (float, np.float64):
            return _coerce(tp, self.test_double_value())
        if tp is np.float32:
            return _coerce(tp, self.test_float_value())
        if tp is Char:
            return self.test_char_value()
        if inspect.isclass(tp) and issubclass(tp, enum.Enum):
            return self.test_enum_value(tp)

        value = self.get_non_standard_test_value(tp)
        if value is None:
            raise UnsupportedTypeError(value_type)
        return value

    def build_mock_value(self, value_type: Any) -> Any:
        """Return a mock for *value_type*, or ``None`` to fall through to the built-in rules."""
        return self._mock_strategy(value_type)

    def get_non_standard_test_value(self, value_type: Any) -> Any:
        """Instantiate *value_type* with no arguments, or return ``None`` if it cannot be."""
        if value_type is Any or not inspect.isclass(value_type) or not has_no_arg_constructor(value_type):
            return None
        return value_type()

    def test_string_value(self) -> str:
        return "test string"

    def test_array_value(self, dtype: np.dtype[Any]) -> np.ndarray[Any, Any]:
        return np.zeros(1, dtype=dtype)

    def test_boolean_value(self) -> bool:
        return True

    def test_int_value(self) -> int:
        return 1

    def test_long_value(self) -> int:
        return 1

    def test_double_value(self) -> float:
        return 1.0

    def test_float_value(self) -> float:
        return 1.0

    def test_char_value(self) -> str:
        return "Y"

    def test_enum_value(self, enum_type: type[enum.Enum]) -> enum.Enum:
        """Return the first declared member of *enum_type*."""
        members = list(enum_type)
        if not members:
            raise UnsupportedTypeError(enum_type)
        return members[0]

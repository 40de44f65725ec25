"""Property round-trip verification for bean-style classes.

:class:`PropertyVerifier` walks every accessor/mutator pair of a class,
sets a synthesized value on a fresh instance and checks the accessor hands
the same value back.  Outcomes are reported only through two hooks that a
test-framework adapter supplies:

* ``report_equality_failure(message, expected, actual)`` for values that do
  not round-trip;
* ``report_failure(message)`` for unsupported property types and exceptions
  raised by an accessor or mutator.

Per-property problems are reported and the run moves on.  A class that
cannot be introspected or instantiated without arguments raises
(:class:`~beancheck.errors.IntrospectionError`,
:class:`~beancheck.errors.BeanInstantiationError`) and aborts the run.

Usage:
    >>> from beancheck import RecordingPropertyVerifier
    >>> verifier = RecordingPropertyVerifier()
    >>> verifier.verify(Person, "id")  # doctest: +SKIP
    >>> verifier.passed  # doctest: +SKIP
    True
"""

from __future__ import annotations

import abc
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any, Literal

import numpy as np

from beancheck.config import VerifierConfig
from beancheck.errors import BeanInstantiationError, UnsupportedTypeError, type_name
from beancheck.introspect import (
    PropertyDescriptor,
    discover_properties,
    find_boolean_is_methods,
    parameter_types,
    return_type,
)
from beancheck.strategies import MockStrategy
from beancheck.synthesis import ValueSynthesizer
from beancheck.utils.logger import VERBOSE, get_logger

log = get_logger("verifier")


def values_equal(expected: Any, actual: Any) -> bool:
    """Compare a set value with the value read back.

    NumPy arrays compare by dtype and contents; everything else uses ``==``.
    """
    if isinstance(expected, np.ndarray) or isinstance(actual, np.ndarray):
        return (
            isinstance(expected, np.ndarray)
            and isinstance(actual, np.ndarray)
            and expected.dtype == actual.dtype
            and bool(np.array_equal(expected, actual))
        )
    return bool(expected == actual)


def is_round_trip_testable(descriptor: PropertyDescriptor) -> bool:
    """Return True if *descriptor* has a one-argument mutator matching its accessor's type."""
    if descriptor.read_method is None or descriptor.write_method is None:
        return False
    params = parameter_types(descriptor.write_method)
    if len(params) != 1:
        return False
    read_type = return_type(descriptor.read_method)
    return read_type is not None and params[0] == read_type


class PropertyVerifier(ValueSynthesizer, abc.ABC):
    """Template verifier; subclasses supply the two reporting hooks.

    Args:
        config: Verifier settings.  Defaults to :class:`VerifierConfig()`.
        mock_strategy: Strategy callable overriding ``config.mock_strategy``.
    """

    def __init__(
        self,
        config: VerifierConfig | None = None,
        *,
        mock_strategy: MockStrategy | None = None,
    ) -> None:
        self.config = config if config is not None else VerifierConfig()
        super().__init__(mock_strategy if mock_strategy is not None else self.config.mock_strategy)
        self.tested: list[str] = []
        self.current_property: str | None = None

    # ------------------------------------------------------------------
    # Reporting hooks
    # ------------------------------------------------------------------

    @abc.abstractmethod
    def report_equality_failure(self, message: str, expected: Any, actual: Any) -> None:
        """Called when a property does not return the value it was given."""
        ...

    @abc.abstractmethod
    def report_failure(self, message: str) -> None:
        """Called for unsupported property types and raised exceptions.

        Implementations should raise to stop the run; returning lets the
        verifier continue with the next property.
        """
        ...

    # ------------------------------------------------------------------
    # Verification
    # ------------------------------------------------------------------

    def verify(self, target_type: type, *skip: str) -> None:
        """Round-trip every testable property of *target_type*.

        Args:
            target_type: Bean class; must be constructible with no arguments.
            *skip: Names of properties that must not be tested.

        Raises:
            IntrospectionError: If *target_type* cannot be introspected.
            BeanInstantiationError: If *target_type* cannot be constructed
                without arguments.
        """
        self.tested = []
        skip_names = self.config.skip | frozenset(skip)
        descriptors = discover_properties(target_type)
        log.log(VERBOSE, "Verifying %d properties of %s", len(descriptors), type_name(target_type))

        for descriptor in descriptors:
            if descriptor.name in skip_names:
                log.debug("Skipping %s: listed in skip names", descriptor.name)
                continue
            descriptor = find_boolean_is_methods(target_type, descriptor)
            read_method, write_method = descriptor.read_method, descriptor.write_method
            if read_method is None or write_method is None or not is_round_trip_testable(descriptor):
                log.debug("Skipping %s: no matching accessor/mutator pair", descriptor.name)
                continue
            self.current_property = descriptor.name
            try:
                self._verify_property(target_type, descriptor, read_method, write_method)
            finally:
                self.current_property = None

    def _verify_property(
        self,
        target_type: type,
        descriptor: PropertyDescriptor,
        read_method: Callable[[Any], Any],
        write_method: Callable[[Any, Any], Any],
    ) -> None:
        name = descriptor.name

        try:
            expected = self.synthesize(descriptor.property_type)
        except UnsupportedTypeError as exc:
            self.report_failure(
                f"{exc} for property {name}; register a mock strategy or override "
                f"build_mock_value() to build it"
            )
            return
        except Exception as exc:
            self.report_failure(f"An exception was thrown while testing the property {name}: {_describe(exc)}")
            return

        bean = self._instantiate(target_type)

        try:
            write_method(bean, expected)
            actual = read_method(bean)
        except Exception as exc:
            self.report_failure(f"An exception was thrown while testing the property {name}: {_describe(exc)}")
            return

        self.tested.append(name)
        log.log(VERBOSE, "Tested %s.%s with %r", type_name(target_type), name, expected)
        try:
            matched = values_equal(expected, actual)
        except Exception as exc:
            self.report_failure(f"An exception was thrown while testing the property {name}: {_describe(exc)}")
            return
        if not matched:
            self.report_equality_failure(f"Failed while testing property {name}", expected, actual)

    @staticmethod
    def _instantiate(target_type: type) -> Any:
        try:
            return target_type()
        except Exception as exc:
            msg = f"Unable to instantiate {type_name(target_type)} with no arguments: {_describe(exc)}"
            raise BeanInstantiationError(msg) from exc


def _describe(exc: BaseException) -> str:
    return f"{type(exc).__name__}: {exc}"


class CallbackPropertyVerifier(PropertyVerifier):
    """Verifier whose reporting hooks are injected callables."""

    def __init__(
        self,
        on_equality_failure: Callable[[str, Any, Any], None],
        on_failure: Callable[[str], None],
        config: VerifierConfig | None = None,
        *,
        mock_strategy: MockStrategy | None = None,
    ) -> None:
        super().__init__(config, mock_strategy=mock_strategy)
        self._on_equality_failure = on_equality_failure
        self._on_failure = on_failure

    def report_equality_failure(self, message: str, expected: Any, actual: Any) -> None:
        self._on_equality_failure(message, expected, actual)

    def report_failure(self, message: str) -> None:
        self._on_failure(message)


@dataclass(frozen=True)
class VerificationFailure:
    """One failure recorded by :class:`RecordingPropertyVerifier`."""

    kind: Literal["equality", "failure"]
    message: str
    property_name: str | None = None
    expected: Any = None
    actual: Any = None


class RecordingPropertyVerifier(PropertyVerifier):
    """Verifier that collects failures instead of raising.

    ``failures`` is reset at the start of every :meth:`verify` call.
    """

    def __init__(
        self,
        config: VerifierConfig | None = None,
        *,
        mock_strategy: MockStrategy | None = None,
    ) -> None:
        super().__init__(config, mock_strategy=mock_strategy)
        self.failures: list[VerificationFailure] = []

    @property
    def passed(self) -> bool:
        return not self.failures

    def verify(self, target_type: type, *skip: str) -> None:
        self.failures = []
        super().verify(target_type, *skip)

    def report_equality_failure(self, message: str, expected: Any, actual: Any) -> None:
        self.failures.append(
            VerificationFailure("equality", message, self.current_property, expected, actual)
        )

    def report_failure(self, message: str) -> None:
        self.failures.append(VerificationFailure("failure", message, self.current_property))

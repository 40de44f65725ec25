"""beancheck: round-trip tests for bean-style property accessors."""

from __future__ import annotations

from beancheck.config import VerifierConfig
from beancheck.errors import (
    BeanCheckError,
    BeanInstantiationError,
    IntrospectionError,
    UnsupportedTypeError,
)
from beancheck.introspect import PropertyDescriptor, discover_properties, find_boolean_is_methods
from beancheck.strategies import (
    MockStrategy,
    StrategyNotFoundError,
    get_strategy,
    list_strategies,
    register_strategy,
)
from beancheck.synthesis import Char, ValueSynthesizer
from beancheck.verifier import (
    CallbackPropertyVerifier,
    PropertyVerifier,
    RecordingPropertyVerifier,
    VerificationFailure,
    values_equal,
)

__all__ = [
    "BeanCheckError",
    "BeanInstantiationError",
    "CallbackPropertyVerifier",
    "Char",
    "IntrospectionError",
    "MockStrategy",
    "PropertyDescriptor",
    "PropertyVerifier",
    "RecordingPropertyVerifier",
    "StrategyNotFoundError",
    "UnsupportedTypeError",
    "ValueSynthesizer",
    "VerificationFailure",
    "VerifierConfig",
    "discover_properties",
    "find_boolean_is_methods",
    "get_strategy",
    "list_strategies",
    "register_strategy",
    "values_equal",
]

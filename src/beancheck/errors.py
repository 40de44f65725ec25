"""Exception hierarchy for bean verification.

Structural failures (the bean type cannot be introspected or instantiated)
are raised to the caller and abort a verification run.  Per-property
problems are reported through the verifier's reporting hooks instead; the
only one modelled as an exception is :class:`UnsupportedTypeError`, which
the synthesizer raises and the verifier converts into a failure report.
"""

from __future__ import annotations

from typing import Any


class BeanCheckError(Exception):
    """Base exception for all beancheck errors."""


class IntrospectionError(BeanCheckError):
    """The target type cannot be inspected for properties."""


class BeanInstantiationError(BeanCheckError):
    """The target type has no usable no-argument constructor."""


class UnsupportedTypeError(BeanCheckError):
    """No synthesis rule can build a test value for a type."""

    def __init__(self, value_type: Any) -> None:
        self.value_type = value_type
        super().__init__(f"Unable to build an instance of type {type_name(value_type)}")


def type_name(tp: Any) -> str:
    """Return a readable, module-qualified name for *tp*."""
    if isinstance(tp, type):
        if tp.__module__ == "builtins":
            return tp.__qualname__
        return f"{tp.__module__}.{tp.__qualname__}"
    return repr(tp)

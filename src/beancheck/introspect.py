"""Property descriptor discovery for bean-style classes.

A property is recognised from any of three shapes:

* snake_case method pairs: ``get_name`` / ``set_name`` (``is_name`` for booleans);
* camelCase method pairs: ``getName`` / ``setName`` / ``isName``, named
  after the decapitalised suffix (``getFirstName`` -> ``firstName``);
* ``property`` objects, using ``fget`` and ``fset``.

Declared types are read from annotations through :func:`typing.get_type_hints`,
so classes written under ``from __future__ import annotations`` are supported
as long as their annotations resolve in the defining module.

Usage:
    >>> from beancheck.introspect import discover_properties
    >>> class Point:
    ...     def get_x(self) -> int:
    ...         return self._x
    ...     def set_x(self, x: int) -> None:
    ...         self._x = x
    >>> [d.name for d in discover_properties(Point)]
    ['x']
"""

from __future__ import annotations

import inspect
import re
import types
import typing
from collections.abc import Callable
from dataclasses import dataclass, replace
from typing import Any

import numpy as np

from beancheck.errors import IntrospectionError

_SNAKE_ACCESSOR = re.compile(r"^(get|set|is)_([A-Za-z0-9]\w*)$")
_CAMEL_ACCESSOR = re.compile(r"^(get|set|is)([A-Z]\w*)$")

_NONE_TYPE = type(None)
_BOOLEAN_TYPES = (bool, np.bool_)


@dataclass(frozen=True)
class PropertyDescriptor:
    """Discovered metadata about one bean property.

    Attributes:
        name: Property name, unique per type.
        property_type: Declared value type, or ``None`` when no annotation
            is available.
        read_method: Unbound accessor, called as ``read_method(bean)``.
        write_method: Unbound mutator, called as ``write_method(bean, value)``.
    """

    name: str
    property_type: Any = None
    read_method: Callable[..., Any] | None = None
    write_method: Callable[..., Any] | None = None


def decapitalize(name: str) -> str:
    """Lower-case the first character unless the first two are both upper-case."""
    if not name:
        return name
    if len(name) > 1 and name[0].isupper() and name[1].isupper():
        return name
    return name[0].lower() + name[1:]


def _parse_accessor_name(attr: str) -> tuple[str, str] | None:
    """Split ``get_foo`` / ``getFoo`` into ``("get", "foo")``."""
    match = _SNAKE_ACCESSOR.match(attr)
    if match is not None:
        return match.group(1), match.group(2)
    match = _CAMEL_ACCESSOR.match(attr)
    if match is not None:
        return match.group(1), decapitalize(match.group(2))
    return None


def _type_hints(func: Callable[..., Any]) -> dict[str, Any]:
    try:
        return typing.get_type_hints(func)
    except (NameError, TypeError, AttributeError) as exc:
        name = getattr(func, "__qualname__", repr(func))
        msg = f"Cannot resolve annotations of {name}: {exc}"
        raise IntrospectionError(msg) from exc


def _parameters(func: Callable[..., Any]) -> list[inspect.Parameter]:
    """Return the parameters of an unbound method, excluding ``self``."""
    try:
        params = list(inspect.signature(func).parameters.values())
    except (TypeError, ValueError) as exc:
        name = getattr(func, "__qualname__", repr(func))
        msg = f"Cannot read the signature of {name}: {exc}"
        raise IntrospectionError(msg) from exc
    return params[1:]


def return_type(func: Callable[..., Any]) -> Any:
    """Return the resolved return annotation of *func*, or ``None`` if absent."""
    return _type_hints(func).get("return")


def parameter_types(func: Callable[..., Any]) -> list[Any]:
    """Return the resolved annotation of every parameter after ``self``.

    Unannotated parameters appear as ``None``.
    """
    hints = _type_hints(func)
    return [hints.get(param.name) for param in _parameters(func)]


def _is_reader(func: Callable[..., Any]) -> bool:
    return len(_parameters(func)) == 0


def is_boxed_bool(tp: Any) -> bool:
    """Return True for ``bool | None`` or ``np.bool_ | None``."""
    if typing.get_origin(tp) not in (typing.Union, types.UnionType):
        return False
    args = typing.get_args(tp)
    return len(args) == 2 and _NONE_TYPE in args and any(arg in _BOOLEAN_TYPES for arg in args)


def discover_properties(target_type: type) -> list[PropertyDescriptor]:
    """Discover the property descriptors of *target_type*, sorted by name.

    An ``is``-prefixed method only counts as an accessor here when it is
    annotated to return ``bool`` or ``np.bool_``; see
    :func:`find_boolean_is_methods` for the lookup that covers optional
    boolean properties.

    Raises:
        IntrospectionError: If *target_type* is not a class or an
            accessor's annotations cannot be resolved.
    """
    if not inspect.isclass(target_type):
        msg = f"Expected a class to introspect, got {target_type!r}"
        raise IntrospectionError(msg)

    readers: dict[str, Callable[..., Any]] = {}
    writers: dict[str, Callable[..., Any]] = {}

    for attr in dir(target_type):
        if attr.startswith("__"):
            continue
        member = inspect.getattr_static(target_type, attr)

        if isinstance(member, property):
            if member.fget is not None:
                readers.setdefault(attr, member.fget)
            if member.fset is not None:
                writers.setdefault(attr, member.fset)
            continue

        if not inspect.isfunction(member):
            continue
        parsed = _parse_accessor_name(attr)
        if parsed is None:
            continue
        prefix, name = parsed

        if prefix == "set":
            writers.setdefault(name, member)
        elif prefix == "get":
            if _is_reader(member):
                readers.setdefault(name, member)
        elif _is_reader(member) and return_type(member) in _BOOLEAN_TYPES:
            # is-accessors win over get-accessors for booleans
            readers[name] = member

    descriptors: list[PropertyDescriptor] = []
    for name in sorted(readers.keys() | writers.keys()):
        read_method = readers.get(name)
        write_method = writers.get(name)
        descriptors.append(
            PropertyDescriptor(
                name=name,
                property_type=_property_type(read_method, write_method),
                read_method=read_method,
                write_method=write_method,
            )
        )
    return descriptors


def _property_type(
    read_method: Callable[..., Any] | None,
    write_method: Callable[..., Any] | None,
) -> Any:
    if read_method is not None:
        return return_type(read_method)
    if write_method is not None:
        params = parameter_types(write_method)
        if len(params) == 1:
            return params[0]
    return None


def _find_is_method(target_type: type, name: str) -> Callable[..., Any] | None:
    candidates = (f"is_{name}", f"is{name[:1].upper()}{name[1:]}")
    for attr in candidates:
        member = inspect.getattr_static(target_type, attr, None)
        if inspect.isfunction(member) and _is_reader(member):
            return member
    return None


def find_boolean_is_methods(target_type: type, descriptor: PropertyDescriptor) -> PropertyDescriptor:
    """Attach a missing ``is`` accessor to an optional boolean property.

    :func:`discover_properties` ignores ``is``-prefixed methods that do not
    return a plain boolean, which leaves optional-boolean properties without
    an accessor.  This looks the accessor up explicitly.

    Returns:
        The descriptor with ``read_method`` filled in, or *descriptor*
        unchanged if nothing needed (or could be) found.
    """
    if descriptor.read_method is not None or not is_boxed_bool(descriptor.property_type):
        return descriptor
    read_method = _find_is_method(target_type, descriptor.name)
    if read_method is None:
        return descriptor
    return replace(descriptor, read_method=read_method)

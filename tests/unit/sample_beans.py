"""Bean classes shared by the unit tests.

Defined at module level so that ``typing.get_type_hints`` can resolve their
annotations.
"""

from __future__ import annotations

import enum
from typing import Any

import numpy as np
from numpy.typing import NDArray

from beancheck import Char

CALLS: list[str] = []
"""Names of guarded methods that were invoked (cleared by a fixture)."""


class Color(enum.Enum):
    RED = "red"
    GREEN = "green"


class Nothing(enum.Enum):
    pass


class Address:
    def __init__(self) -> None:
        self.street = ""


class Engine:
    def __init__(self, horsepower: int) -> None:
        self.horsepower = horsepower


class Person:
    """Correct snake_case bean covering every built-in sentinel rule."""

    def __init__(self) -> None:
        self._name = ""
        self._age = 0
        self._active = False
        self._score = 0.0
        self._initial = Char(" ")
        self._color = Color.GREEN
        self._nickname: str | None = None
        self._address = Address()
        self._readings: NDArray[np.int32] = np.zeros(0, dtype=np.int32)
        self._raw: np.ndarray[Any, Any] = np.zeros(0)
        self._count32 = np.int32(0)
        self._count64 = np.int64(0)
        self._ratio = np.float32(0)
        self._weight = np.float64(0)
        self._flag = np.bool_(False)

    def get_name(self) -> str:
        return self._name

    def set_name(self, name: str) -> None:
        self._name = name

    def get_age(self) -> int:
        return self._age

    def set_age(self, age: int) -> None:
        self._age = age

    def is_active(self) -> bool:
        return self._active

    def set_active(self, active: bool) -> None:
        self._active = active

    def get_score(self) -> float:
        return self._score

    def set_score(self, score: float) -> None:
        self._score = score

    def get_initial(self) -> Char:
        return self._initial

    def set_initial(self, initial: Char) -> None:
        self._initial = initial

    def get_color(self) -> Color:
        return self._color

    def set_color(self, color: Color) -> None:
        self._color = color

    def get_nickname(self) -> str | None:
        return self._nickname

    def set_nickname(self, nickname: str | None) -> None:
        self._nickname = nickname

    def get_address(self) -> Address:
        return self._address

    def set_address(self, address: Address) -> None:
        self._address = address

    def get_readings(self) -> NDArray[np.int32]:
        return self._readings

    def set_readings(self, readings: NDArray[np.int32]) -> None:
        self._readings = readings

    def get_raw(self) -> np.ndarray[Any, Any]:
        return self._raw

    def set_raw(self, raw: np.ndarray[Any, Any]) -> None:
        self._raw = raw

    def get_count32(self) -> np.int32:
        return self._count32

    def set_count32(self, value: np.int32) -> None:
        self._count32 = value

    def get_count64(self) -> np.int64:
        return self._count64

    def set_count64(self, value: np.int64) -> None:
        self._count64 = value

    def get_ratio(self) -> np.float32:
        return self._ratio

    def set_ratio(self, value: np.float32) -> None:
        self._ratio = value

    def get_weight(self) -> np.float64:
        return self._weight

    def set_weight(self, value: np.float64) -> None:
        self._weight = value

    def get_flag(self) -> np.bool_:
        return self._flag

    def set_flag(self, value: np.bool_) -> None:
        self._flag = value


PERSON_PROPERTIES = [
    "active",
    "address",
    "age",
    "color",
    "count32",
    "count64",
    "flag",
    "initial",
    "name",
    "nickname",
    "ratio",
    "raw",
    "readings",
    "score",
    "weight",
]


class CamelCaseBean:
    def __init__(self) -> None:
        self._first_name = ""
        self._enabled = False
        self._url = ""

    def getFirstName(self) -> str:  # noqa: N802
        return self._first_name

    def setFirstName(self, value: str) -> None:  # noqa: N802
        self._first_name = value

    def isEnabled(self) -> bool:  # noqa: N802
        return self._enabled

    def setEnabled(self, value: bool) -> None:  # noqa: N802
        self._enabled = value

    def getURL(self) -> str:  # noqa: N802
        return self._url

    def setURL(self, value: str) -> None:  # noqa: N802
        self._url = value


class PropertyBean:
    def __init__(self) -> None:
        self._title = ""
        self._pages = 0

    @property
    def title(self) -> str:
        return self._title

    @title.setter
    def title(self, value: str) -> None:
        self._title = value

    @property
    def pages(self) -> int:
        return self._pages

    @pages.setter
    def pages(self, value: int) -> None:
        self._pages = value

    @property
    def summary(self) -> str:
        return f"{self._title} ({self._pages})"


class OptionalBooleanBean:
    """``is`` accessor returning ``bool | None``; only found by the explicit lookup."""

    def __init__(self) -> None:
        self._verified: bool | None = None

    def is_verified(self) -> bool | None:
        return self._verified

    def set_verified(self, verified: bool | None) -> None:
        self._verified = verified


class NumpyBoolBean:
    """``is`` accessors returning ``np.bool_`` and ``np.bool_ | None``."""

    def __init__(self) -> None:
        self._on = np.bool_(False)
        self._armed: np.bool_ | None = None

    def is_on(self) -> np.bool_:
        return self._on

    def set_on(self, on: np.bool_) -> None:
        self._on = on

    def is_armed(self) -> np.bool_ | None:
        return self._armed

    def set_armed(self, armed: np.bool_ | None) -> None:
        self._armed = armed


class Touchy:
    """Value whose equality comparison always raises."""

    def __eq__(self, other: object) -> bool:
        raise TypeError("cannot compare Touchy")

    __hash__ = object.__hash__


class UncomparableBean:
    """Property ``a`` cannot be compared; property ``b`` is well-behaved."""

    def __init__(self) -> None:
        self._a = Touchy()
        self._b = ""

    def get_a(self) -> Touchy:
        return self._a

    def set_a(self, a: Touchy) -> None:
        self._a = a

    def get_b(self) -> str:
        return self._b

    def set_b(self, b: str) -> None:
        self._b = b


class AsymmetricBean:
    """Accessor/mutator pairs whose shapes do not match."""

    def get_size(self) -> int:
        CALLS.append("get_size")
        return 0

    def set_size(self, size: str) -> None:
        CALLS.append("set_size")
        raise RuntimeError("set_size must not be called")

    def get_range(self) -> int:
        CALLS.append("get_range")
        return 0

    def set_range(self, low: int, high: int) -> None:
        CALLS.append("set_range")
        raise RuntimeError("set_range must not be called")

    def get_token(self) -> str:
        CALLS.append("get_token")
        return ""

    def set_token(self) -> None:
        CALLS.append("set_token")
        raise RuntimeError("set_token must not be called")

    def get_identifier(self) -> int:
        CALLS.append("get_identifier")
        return 0

    def set_secret(self, secret: str) -> None:
        CALLS.append("set_secret")
        raise RuntimeError("set_secret must not be called")


class UnannotatedBean:
    def get_value(self):  # type: ignore[no-untyped-def]
        CALLS.append("get_value")
        return None

    def set_value(self, value):  # type: ignore[no-untyped-def]
        CALLS.append("set_value")


class SkippedBean:
    def __init__(self) -> None:
        self._label = ""

    def get_broken(self) -> str:
        CALLS.append("get_broken")
        return "never"

    def set_broken(self, value: str) -> None:
        CALLS.append("set_broken")
        raise RuntimeError("set_broken must not be called")

    def get_label(self) -> str:
        return self._label

    def set_label(self, value: str) -> None:
        self._label = value


class OffByOneBean:
    def __init__(self) -> None:
        self._count = 0
        self._label = ""

    def get_count(self) -> int:
        return self._count

    def set_count(self, count: int) -> None:
        self._count = count + 1

    def get_label(self) -> str:
        return self._label

    def set_label(self, label: str) -> None:
        self._label = label


class UnmodifiedBean:
    def __init__(self) -> None:
        self._enabled = False
        self._name = ""

    def is_enabled(self) -> bool:
        return self._enabled

    def set_enabled(self, enabled: bool) -> None:
        pass

    def get_name(self) -> str:
        return self._name

    def set_name(self, name: str) -> None:
        self._name = name


class RaisingMutatorBean:
    def __init__(self) -> None:
        self._name = ""

    def get_email(self) -> str:
        return ""

    def set_email(self, email: str) -> None:
        raise ValueError(f"invalid email {email!r}")

    def get_name(self) -> str:
        return self._name

    def set_name(self, name: str) -> None:
        self._name = name


class RequiredArgumentBean:
    def __init__(self, name: str) -> None:
        self._name = name

    def get_name(self) -> str:
        return self._name

    def set_name(self, name: str) -> None:
        self._name = name


class RequiredArgumentReadOnlyBean:
    def __init__(self, name: str) -> None:
        self._name = name

    def get_name(self) -> str:
        return self._name


class FailingConstructorBean:
    def __init__(self) -> None:
        raise RuntimeError("database unavailable")

    def get_name(self) -> str:
        return ""

    def set_name(self, name: str) -> None:
        pass


class UnsupportedTypeBean:
    def __init__(self) -> None:
        self._engine = Engine(100)
        self._name = ""

    def get_engine(self) -> Engine:
        return self._engine

    def set_engine(self, engine: Engine) -> None:
        self._engine = engine

    def get_name(self) -> str:
        return self._name

    def set_name(self, name: str) -> None:
        self._name = name


class EmptyEnumBean:
    def __init__(self) -> None:
        self._nothing: Nothing | None = None

    def get_nothing(self) -> Nothing:
        assert self._nothing is not None
        return self._nothing

    def set_nothing(self, nothing: Nothing) -> None:
        self._nothing = nothing


class UnresolvableAnnotationBean:
    def get_thing(self) -> MissingType:  # type: ignore[name-defined]  # noqa: F821
        return None

    def set_thing(self, thing: MissingType) -> None:  # type: ignore[name-defined]  # noqa: F821
        pass


def make_value_bean(value_type: Any) -> type:
    """Build a bean whose single ``value`` property is annotated with *value_type*."""

    def get_value(self: Any) -> Any:
        return self._value

    def set_value(self: Any, value: Any) -> None:
        self._value = value

    def __init__(self: Any) -> None:
        self._value = None

    get_value.__annotations__ = {"return": value_type}
    set_value.__annotations__ = {"value": value_type, "return": None}
    name = f"ValueBean_{getattr(value_type, '__name__', 'generic')}"
    return type(name, (), {"__init__": __init__, "get_value": get_value, "set_value": set_value})

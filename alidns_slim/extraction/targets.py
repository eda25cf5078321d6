"""Destinations that extracted values are bound into.

Callers pick the destination kind explicitly:

- ``ScalarTarget`` holds one value; with several matches the last one wins.
- ``ListTarget`` appends every match in walk order, across calls.
- ``RawTarget`` receives the raw response body (whole-document form only).

Unresolved positions are delivered with ``present=False`` and replaced by the
element type's zero value, so a ``ListTarget`` always grows by exactly the
number of matched positions.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Callable, Iterable, Iterator
from typing import Any, Generic, TypeVar

from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError

from .shape import ABSENT

T = TypeVar("T")


def zero_value(element_type: Any) -> Any:
    """Return the zero value for ``element_type``.

    ``int`` → ``0``, ``str`` → ``""``, ``list`` → ``[]``; pydantic models with
    required fields are built with ``model_construct()``; ``Any``, ``object``
    and types that cannot be built without arguments give ``None``.
    """
    if element_type is Any or element_type is object:
        return None
    if isinstance(element_type, type) and issubclass(element_type, BaseModel):
        try:
            return element_type()
        except PydanticValidationError:
            return element_type.model_construct()
    try:
        return element_type()
    except TypeError:
        return None


class Target(ABC, Generic[T]):
    """Common base for destinations."""

    def __init__(
        self,
        element_type: type[T] | Any = Any,
        *,
        default_factory: Callable[[], T] | None = None,
    ) -> None:
        self.element_type = element_type
        self._default_factory = default_factory

    def zero(self) -> T:
        if self._default_factory is not None:
            return self._default_factory()
        return zero_value(self.element_type)

    @abstractmethod
    def accept(self, value: Any, present: bool) -> None:
        """Receive one collected value; ``present=False`` marks an unresolved position."""


class ScalarTarget(Target[T]):
    """Single-slot destination; last accepted value wins."""

    def __init__(
        self,
        element_type: type[T] | Any = Any,
        *,
        default_factory: Callable[[], T] | None = None,
    ) -> None:
        super().__init__(element_type, default_factory=default_factory)
        self.value: T = self.zero()

    def accept(self, value: Any, present: bool) -> None:
        self.value = value if present else self.zero()

    def __repr__(self) -> str:
        return f"ScalarTarget({self.value!r})"


class ListTarget(Target[T]):
    """Appendable destination; values accumulate across calls and pages."""

    def __init__(
        self,
        element_type: type[T] | Any = Any,
        *,
        default_factory: Callable[[], T] | None = None,
    ) -> None:
        super().__init__(element_type, default_factory=default_factory)
        self.items: list[T] = []

    def accept(self, value: Any, present: bool) -> None:
        self.items.append(value if present else self.zero())

    def __len__(self) -> int:
        return len(self.items)

    def __iter__(self) -> Iterator[T]:
        return iter(self.items)

    def __repr__(self) -> str:
        return f"ListTarget({self.items!r})"


class RawTarget(Target[bytes]):
    """Receives the undecoded response body."""

    def __init__(self) -> None:
        super().__init__(bytes)
        self.body: bytes = b""

    def accept(self, value: Any, present: bool) -> None:
        self.body = value if present else b""


def bind(values: Iterable[Any], target: Target[Any]) -> int:
    """Deliver ``values`` to ``target``; returns how many were delivered."""
    count = 0
    for value in values:
        target.accept(value, value is not ABSENT)
        count += 1
    return count

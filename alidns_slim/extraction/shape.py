"""Shape descriptors derived from a destination type and a path.

A shape describes the nesting the document is expected to have along a path.
It is built by folding the path's segments from last to first around the
destination's element type:

    ``Domains.Domain.*.DomainName`` with ``str`` →
    ``MapOf("Domains", MapOf("Domain", SeqOf(MapOf("DomainName", Scalar(str)))))``

which corresponds to ``dict[str, dict[str, list[dict[str, str]]]]``.

``decode`` interprets a shape against an already JSON-decoded document. Only
the subset reachable through the path is visited; sibling keys are never
validated. Leaves are validated with pydantic, so models, ints, strings and
other annotated types all work as element types.
"""

from __future__ import annotations

from dataclasses import dataclass
from functools import lru_cache
from typing import Any

from pydantic import TypeAdapter
from pydantic import ValidationError as PydanticValidationError

from ..core.exceptions import DecodeError
from .path import WILDCARD, Path


class _Absent:
    """Marker for a position the path could not resolve."""

    _instance: _Absent | None = None

    def __new__(cls) -> _Absent:
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "ABSENT"

    def __bool__(self) -> bool:
        return False


ABSENT = _Absent()


@dataclass(frozen=True)
class Scalar:
    """Leaf holding a value of ``element_type``."""

    element_type: Any

    def annotation(self) -> Any:
        return self.element_type


@dataclass(frozen=True)
class MapOf:
    """Mapping from string keys to ``inner``; ``key`` is the literal segment."""

    key: str
    inner: Shape

    def annotation(self) -> Any:
        return dict[str, self.inner.annotation()]


@dataclass(frozen=True)
class SeqOf:
    """Ordered sequence of ``inner`` (a wildcard segment)."""

    inner: Shape

    def annotation(self) -> Any:
        return list[self.inner.annotation()]


Shape = Scalar | MapOf | SeqOf


def build_shape(element_type: Any, path: Path) -> Shape:
    """Fold ``path`` in reverse around ``element_type``.

    An empty path yields ``Scalar(element_type)`` itself.
    """
    shape: Shape = Scalar(element_type)
    for segment in reversed(path):
        if segment is WILDCARD:
            shape = SeqOf(shape)
        elif segment:
            shape = MapOf(segment, shape)
    return shape


@lru_cache(maxsize=256)
def _adapter(element_type: Any) -> TypeAdapter[Any]:
    return TypeAdapter(element_type)


def _validate_leaf(element_type: Any, value: Any, where: str) -> Any:
    if element_type is Any or element_type is object:
        return value
    try:
        return _adapter(element_type).validate_python(value)
    except PydanticValidationError as e:
        raise DecodeError(
            f"cannot decode value at '{where or '<root>'}' as {_type_name(element_type)}: "
            f"{e.errors()[0]['msg'] if e.errors() else e}",
            path=where,
        ) from e
    except TypeError as e:
        # Unhashable or otherwise unsupported element types
        raise DecodeError(f"unsupported element type {element_type!r}", path=where) from e


def _type_name(tp: Any) -> str:
    return getattr(tp, "__name__", repr(tp))


def decode(shape: Shape, document: Any, *, where: str = "") -> Any:
    """Build an instance of ``shape`` from a JSON-decoded ``document``.

    ``None``, missing keys, a non-object where a key is expected and a
    non-array where a sequence is expected all decode to ``ABSENT``. A leaf
    value that fails validation raises ``DecodeError``.
    """
    if document is None or document is ABSENT:
        return ABSENT
    if isinstance(shape, Scalar):
        return _validate_leaf(shape.element_type, document, where)
    if isinstance(shape, MapOf):
        if not isinstance(document, dict) or shape.key not in document:
            return ABSENT
        child = f"{where}.{shape.key}" if where else shape.key
        return {shape.key: decode(shape.inner, document[shape.key], where=child)}
    if not isinstance(document, list):
        return ABSENT
    return [
        decode(shape.inner, item, where=f"{where}[{i}]") for i, item in enumerate(document)
    ]

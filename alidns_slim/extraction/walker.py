"""Walk a decoded shape instance along a path."""

from __future__ import annotations

from collections.abc import Iterator
from typing import Any

from .path import WILDCARD, Path
from .shape import ABSENT


def collect(instance: Any, path: Path) -> Iterator[Any]:
    """Yield every value reachable through ``path``, in document order.

    Literal segments are map lookups; a missing key yields ``ABSENT`` so the
    position is kept. A wildcard branches over each element of the current
    array and recurses on the remaining segments, so nested wildcards flatten
    depth-first. A wildcard over a non-array yields a single ``ABSENT``; over
    an empty array it yields nothing.

    Without a wildcard exactly one value (or ``ABSENT``) is produced.
    """
    current = instance
    for i, segment in enumerate(path):
        if segment is WILDCARD:
            if not isinstance(current, list):
                yield ABSENT
                return
            rest = path[i + 1 :]
            for element in current:
                yield from collect(element, rest)
            return
        current = current.get(segment, ABSENT) if isinstance(current, dict) else ABSENT
    yield current

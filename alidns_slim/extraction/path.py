"""Dot-separated key paths with a ``*`` wildcard segment.

A path such as ``Domains.Domain.*.DomainName`` addresses the ``DomainName``
of every element in the ``Domains.Domain`` array. Empty segments (from a
leading, trailing or doubled ``.``) mean "stay at the current level" and are
dropped, so ``""`` addresses the whole document.

Parsing never fails; a path that does not fit the document simply matches
nothing at walk time.
"""

from __future__ import annotations

from typing import Final


class _Wildcard:
    """Marker for the ``*`` segment."""

    _instance: _Wildcard | None = None

    def __new__(cls) -> _Wildcard:
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "WILDCARD"


WILDCARD: Final = _Wildcard()
WILDCARD_TOKEN: Final = "*"
SEPARATOR: Final = "."

Segment = str | _Wildcard
Path = tuple[Segment, ...]


def parse_path(text: str) -> Path:
    """Split ``text`` into segments, dropping empty ones.

    Examples:
        >>> parse_path("Domains.Domain.*.DomainName")
        ('Domains', 'Domain', WILDCARD, 'DomainName')
        >>> parse_path("")
        ()
    """
    segments: list[Segment] = []
    for part in text.split(SEPARATOR):
        if part == WILDCARD_TOKEN:
            segments.append(WILDCARD)
        elif part:
            segments.append(part)
    return tuple(segments)


def format_path(path: Path) -> str:
    """Render segments back to dotted form (for error messages and logs)."""
    return SEPARATOR.join(WILDCARD_TOKEN if s is WILDCARD else s for s in path)


def wildcard_count(path: Path) -> int:
    return sum(1 for s in path if s is WILDCARD)

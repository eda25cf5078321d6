"""Generic path-based extraction of values from JSON documents.

Example:
    >>> doc = {"Domains": {"Domain": [{"DomainName": "a.com"}, {"DomainName": "b.com"}]}}
    >>> names = ListTarget(str)
    >>> extract(doc, names, "Domains.Domain.*.DomainName")
    2
    >>> names.items
    ['a.com', 'b.com']
"""

from .engine import extract, extract_body, load_document
from .path import WILDCARD, Path, Segment, format_path, parse_path, wildcard_count
from .shape import ABSENT, MapOf, Scalar, SeqOf, Shape, build_shape, decode
from .targets import ListTarget, RawTarget, ScalarTarget, Target, bind, zero_value
from .walker import collect

__all__ = [
    "ABSENT",
    "WILDCARD",
    "ListTarget",
    "MapOf",
    "Path",
    "RawTarget",
    "Scalar",
    "ScalarTarget",
    "Segment",
    "SeqOf",
    "Shape",
    "Target",
    "bind",
    "build_shape",
    "collect",
    "decode",
    "extract",
    "extract_body",
    "format_path",
    "load_document",
    "parse_path",
    "wildcard_count",
    "zero_value",
]

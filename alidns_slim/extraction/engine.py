"""Path-based extraction: shape → decode → collect → bind."""

from __future__ import annotations

import json
from typing import Any

from ..core.exceptions import DecodeError
from .path import Path, parse_path
from .shape import build_shape, decode
from .targets import RawTarget, Target, bind
from .walker import collect


def load_document(body: bytes | str) -> Any:
    """Decode a JSON response body."""
    try:
        return json.loads(body)
    except (json.JSONDecodeError, UnicodeDecodeError) as e:
        raise DecodeError(f"response body is not valid JSON: {e}") from e


def extract(document: Any, target: Target[Any], path: str | Path = "") -> int:
    """Extract the values at ``path`` in ``document`` into ``target``.

    ``document`` is already JSON-decoded and is not modified, so the same
    document can be extracted from any number of times.

    Returns:
        Number of values delivered to the target (including zero-filled
        positions)

    Raises:
        DecodeError: If a reachable leaf does not validate as the target's
            element type
    """
    segments = parse_path(path) if isinstance(path, str) else path
    shape = build_shape(target.element_type, segments)
    instance = decode(shape, document)
    return bind(collect(instance, segments), target)


def extract_body(body: bytes, target: Target[Any], path: str | Path = "") -> int:
    """Like ``extract`` but starting from raw response bytes."""
    if isinstance(target, RawTarget):
        target.accept(body, True)
        return 1
    return extract(load_document(body), target, path)

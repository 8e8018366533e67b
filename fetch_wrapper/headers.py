"""Request header helpers.

Request headers may be supplied in three shapes: an ``httpx.Headers``
collection (case-insensitive lookup), a sequence of ``(name, value)`` pairs,
or a plain mapping. The helpers below read all three without raising.
"""

from collections.abc import Mapping, Sequence
from typing import Any

import httpx

HeadersInit = httpx.Headers | Mapping[str, str] | Sequence[Sequence[str]]

CONTENT_TYPE = "Content-Type"


def _is_pair_sequence(headers: Any) -> bool:
    return isinstance(headers, Sequence) and not isinstance(headers, (str, bytes, bytearray))


def _as_text(value: Any) -> str | None:
    """Header text as httpx reads it: str as-is, bytes decoded as latin-1."""
    if isinstance(value, str):
        return value
    if isinstance(value, (bytes, bytearray)):
        return bytes(value).decode("latin-1")
    return None


def _pair(name: Any, value: Any) -> tuple[str, str]:
    text = _as_text(value)
    if text is None:
        text = "" if value is None else str(value)
    return (_as_text(name) or str(name), text)


def normalize_headers(headers: HeadersInit | None) -> list[tuple[str, str]]:
    """
    Return a canonical ordered list of ``(name, value)`` pairs.

    Entries that are not well-formed name/value pairs are dropped.
    """
    if not headers:
        return []
    if isinstance(headers, httpx.Headers):
        return list(headers.multi_items())
    if isinstance(headers, Mapping):
        return [_pair(key, value) for key, value in headers.items() if key is not None]
    if _is_pair_sequence(headers):
        pairs: list[tuple[str, str]] = []
        for entry in headers:
            if not _is_pair_sequence(entry) or len(entry) != 2 or entry[0] is None:
                continue
            pairs.append(_pair(*entry))
        return pairs
    return []


def content_type_of(headers: HeadersInit | None) -> str | None:
    """
    Read the Content-Type declared in request headers.

    - ``httpx.Headers``: case-insensitive lookup, ``None`` when absent.
    - pair sequence: ``None`` when empty; the name is matched case-insensitively
      and ``""`` is returned when it is missing or its pair has no text value.
    - plain mapping: exact ``"Content-Type"`` key only, ``None`` when absent.

    Bytes values are decoded as latin-1; values of any other type count as
    no content type, so the result is always text or ``None``.
    """
    if headers is None:
        return None
    if isinstance(headers, httpx.Headers):
        return headers.get(CONTENT_TYPE)
    if isinstance(headers, Mapping):
        return _as_text(headers.get(CONTENT_TYPE)) or None
    if _is_pair_sequence(headers):
        if len(headers) == 0:
            return None
        lower = CONTENT_TYPE.lower()
        for entry in headers:
            if not _is_pair_sequence(entry) or not entry:
                continue
            name = _as_text(entry[0])
            if name is not None and name.lower() == lower:
                value = _as_text(entry[1]) if len(entry) > 1 else None
                return value if value is not None else ""
        return ""
    return None


__all__ = ["CONTENT_TYPE", "HeadersInit", "content_type_of", "normalize_headers"]

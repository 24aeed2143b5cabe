"""Header source adapter.

Normalizes the header containers the web stacks hand us into one lookup:

  * mapping headers: any ``collections.abc.Mapping`` (Starlette ``Headers``,
    plain dicts, ASGI-style dicts with lower-cased or bytes keys). ``get(name)``
    is tried first, then a case-insensitive scan of the keys. Bytes decode as
    latin-1.
  * message headers: any other object exposing ``get(name, default)``
    (``email.message.Message``, ``http.client.HTTPMessage``, werkzeug
    ``Headers``).
  * lookup callables: ``fn(name) -> str | None``.

Absent headers read as ``""``. Anything else is an integration bug and raises
UnsupportedHeaderSource immediately.
"""
from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Callable, Optional, Protocol, Union

from .utils.logging import get_logger

__all__ = [
    "MessageHeaders",
    "HeaderLookup",
    "HeaderSource",
    "UnsupportedHeaderSource",
    "get_header",
    "header_shape",
]

log = get_logger()


class MessageHeaders(Protocol):
    def get(self, name: str, *default: str) -> Optional[str]: ...


HeaderLookup = Callable[[str], Optional[str]]
HeaderSource = Union[Mapping, MessageHeaders, HeaderLookup]


class UnsupportedHeaderSource(TypeError):
    """Raised when a header source matches none of the supported shapes."""

    def __init__(self, source: Any):
        self.source_type = type(source).__name__
        super().__init__(f"unsupported header type: {self.source_type}")


def header_shape(source: Any) -> str:
    """Return "mapping", "message" or "lookup" for a supported source."""
    if isinstance(source, Mapping):
        return "mapping"
    if callable(getattr(source, "get", None)):
        return "message"
    if callable(source):
        return "lookup"
    raise UnsupportedHeaderSource(source)


def _text(value: Any) -> str:
    # ASGI carries header names and values as latin-1 bytes
    if isinstance(value, (bytes, bytearray)):
        return bytes(value).decode("latin-1")
    return str(value)


def _from_mapping(source: Mapping, name: str) -> Optional[Any]:
    value = source.get(name)
    if value is not None:
        return value
    wanted = name.lower()
    for k, v in source.items():
        if isinstance(k, (str, bytes, bytearray)) and _text(k).lower() == wanted:
            return v
    return None


def get_header(source: Any, name: str) -> str:
    shape = header_shape(source)
    if shape == "mapping":
        value = _from_mapping(source, name)
    elif shape == "message":
        value = source.get(name, "")
    else:
        value = source(name)
    log.debug(f"header lookup {name} via {shape} source")
    if value is None:
        return ""
    return _text(value)

"""HTMX request facts and chainable response directives.

Typical use inside a handler::

    hx = Htmx(request.headers)
    if hx.is_request():
        hx.trigger("saved").reswap(Swap.OUTER_HTML).apply(response.headers)

``apply`` only writes directives that are set and never removes headers it
wrote earlier, so it can be called again after more setters.
"""
from __future__ import annotations

import json
from collections.abc import Mapping, MutableMapping
from typing import Any, Optional, Union

from .adapter import HeaderSource, MessageHeaders, get_header
from .config import log_directives
from .headers import HX_REQUEST, REQUEST_HEADERS, RESPONSE_HEADER_ORDER, Swap
from .models import RequestFacts, ResponseDirectives
from .utils.logging import get_logger

__all__ = [
    "Htmx",
    "new",
    "new_message",
    "new_universal",
    "is_htmx_request",
    "is_htmx_message_request",
]

log = get_logger()

Payload = Union[str, Mapping[str, Any]]

_HEADER_FOR = dict(RESPONSE_HEADER_ORDER)


def _read_facts(headers: Any) -> RequestFacts:
    values: dict[str, Any] = {}
    for field, name, as_bool in REQUEST_HEADERS:
        raw = get_header(headers, name)
        values[field] = raw == "true" if as_bool else raw
    return RequestFacts(**values)


def _payload(value: Payload) -> str:
    # HTMX accepts JSON for HX-Location and the HX-Trigger* family
    if isinstance(value, Mapping):
        return json.dumps(value, separators=(",", ":"), ensure_ascii=False)
    return str(value)


class Htmx:
    def __init__(self, headers: HeaderSource):
        self._request = _read_facts(headers)
        self._response = ResponseDirectives()
        self._bound: Optional[MutableMapping[str, str]] = None

    def __repr__(self) -> str:  # pragma: no cover - debugging aid
        return f"Htmx(request={self._request!r}, response={self._response!r})"

    @property
    def request(self) -> RequestFacts:
        return self._request

    @property
    def response(self) -> ResponseDirectives:
        return self._response

    # --- request facts --------------------------------------------------------

    def is_request(self) -> bool:
        return self._request.request

    def is_boosted(self) -> bool:
        return self._request.boosted

    def is_history_restore_request(self) -> bool:
        return self._request.history_restore_request

    def get_current_url(self) -> str:
        return self._request.current_url

    def get_prompt(self) -> str:
        return self._request.prompt

    def get_target(self) -> str:
        return self._request.target

    def get_trigger_name(self) -> str:
        return self._request.trigger_name

    def get_trigger(self) -> str:
        return self._request.trigger

    # --- response directives --------------------------------------------------

    def _set(self, field: str, value: str) -> "Htmx":
        setattr(self._response, field, value)
        if self._bound is not None and value != "":
            self._bound[_HEADER_FOR[field]] = value
        return self

    def bind(self, headers: MutableMapping[str, str]) -> "Htmx":
        """Write each directive into ``headers`` as soon as it is set.

        Directives already set are flushed immediately. Used where nothing
        calls ``apply`` after the handler, e.g. FastAPI's dependency response.
        """
        self._bound = headers
        return self.apply(headers)

    def location(self, location: Payload) -> "Htmx":
        return self._set("location", _payload(location))

    def push_url(self, url: str) -> "Htmx":
        return self._set("push_url", str(url))

    def redirect(self, url: str) -> "Htmx":
        return self._set("redirect", str(url))

    def refresh(self, refresh: Union[bool, str]) -> "Htmx":
        if isinstance(refresh, bool):
            refresh = "true" if refresh else "false"
        return self._set("refresh", str(refresh))

    def replace_url(self, url: str) -> "Htmx":
        return self._set("replace_url", str(url))

    def reswap(self, swap: Union[Swap, str]) -> "Htmx":
        """Set HX-Reswap. Modifiers such as ``"innerHTML swap:1s"`` pass through as-is."""
        return self._set("reswap", swap.value if isinstance(swap, Swap) else str(swap))

    def retarget(self, selector: str) -> "Htmx":
        return self._set("retarget", str(selector))

    def reselect(self, selector: str) -> "Htmx":
        return self._set("reselect", str(selector))

    def trigger(self, trigger: Payload) -> "Htmx":
        return self._set("trigger", _payload(trigger))

    def trigger_after_settle(self, trigger: Payload) -> "Htmx":
        return self._set("trigger_after_settle", _payload(trigger))

    def trigger_after_swap(self, trigger: Payload) -> "Htmx":
        return self._set("trigger_after_swap", _payload(trigger))

    def apply(self, headers: MutableMapping[str, str]) -> "Htmx":
        """Write every set directive into ``headers``; unset ones are left untouched."""
        level = "info" if log_directives() else "debug"
        for name, value in self._response.items():
            headers[name] = value
            getattr(log, level)(f"htmx directive {name}={value}")
        return self


def new(headers: Mapping) -> Htmx:
    return Htmx(headers)


def new_message(headers: MessageHeaders) -> Htmx:
    return Htmx(headers)


def new_universal(headers: Any) -> Htmx:
    return Htmx(headers)


def is_htmx_request(headers: Mapping) -> bool:
    return get_header(headers, HX_REQUEST) == "true"


def is_htmx_message_request(headers: MessageHeaders) -> bool:
    return get_header(headers, HX_REQUEST) == "true"

"""Prometheus instrumentation for the HTMX middleware.

Keeps labels minimal: route plus a collapsed request kind, and the directive
header name (a closed set of eleven values).
"""
from __future__ import annotations
from typing import Iterable
from prometheus_client import (
    CollectorRegistry,
    Counter,
    generate_latest,
    CONTENT_TYPE_LATEST,
)

from ..htmx import Htmx

# Registry must be created before metric objects reference it.
REGISTRY = CollectorRegistry()

REQUEST_COUNTER = Counter(
    "hxheaders_requests_total",
    "Requests seen by the HTMX middleware by kind (htmx, boosted, history_restore, plain).",
    ["route", "kind"],
    registry=REGISTRY,
)
DIRECTIVE_COUNTER = Counter(
    "hxheaders_directives_total",
    "HTMX response directive headers written.",
    ["header"],
    registry=REGISTRY,
)


def request_kind(hx: Htmx) -> str:
    if not hx.is_request():
        return "plain"
    if hx.is_history_restore_request():
        return "history_restore"
    if hx.is_boosted():
        return "boosted"
    return "htmx"


def observe_request(*, route: str, hx: Htmx) -> str:
    kind = request_kind(hx)
    REQUEST_COUNTER.labels(route=route, kind=kind).inc()
    return kind


def observe_directives(headers: Iterable[str]):
    for name in headers:
        DIRECTIVE_COUNTER.labels(header=name).inc()


def prometheus_latest() -> tuple[bytes, str]:
    return generate_latest(REGISTRY), CONTENT_TYPE_LATEST

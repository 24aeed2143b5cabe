"""HTMX request header parsing and response directive helpers."""

from .adapter import UnsupportedHeaderSource, get_header
from .headers import Swap
from .htmx import (
    Htmx,
    is_htmx_message_request,
    is_htmx_request,
    new,
    new_message,
    new_universal,
)
from .models import RequestFacts, ResponseDirectives

__all__ = [
    "Htmx",
    "RequestFacts",
    "ResponseDirectives",
    "Swap",
    "UnsupportedHeaderSource",
    "get_header",
    "is_htmx_request",
    "is_htmx_message_request",
    "new",
    "new_message",
    "new_universal",
]

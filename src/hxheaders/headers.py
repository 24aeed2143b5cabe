"""Canonical HTMX header names and swap modes.

Request headers are read once per request; response headers are written in
RESPONSE_HEADER_ORDER when their directive is non-empty.
"""
from __future__ import annotations

from enum import Enum
from typing import Final, Tuple

__all__ = [
    "HX_REQUEST",
    "HX_BOOSTED",
    "HX_CURRENT_URL",
    "HX_HISTORY_RESTORE_REQUEST",
    "HX_PROMPT",
    "HX_TARGET",
    "HX_TRIGGER_NAME",
    "HX_TRIGGER",
    "HX_LOCATION",
    "HX_PUSH_URL",
    "HX_REDIRECT",
    "HX_REFRESH",
    "HX_REPLACE_URL",
    "HX_RESWAP",
    "HX_RETARGET",
    "HX_RESELECT",
    "HX_TRIGGER_AFTER_SETTLE",
    "HX_TRIGGER_AFTER_SWAP",
    "REQUEST_HEADERS",
    "RESPONSE_HEADER_ORDER",
    "Swap",
]

# --- Request headers ----------------------------------------------------------
HX_REQUEST: Final[str] = "HX-Request"
HX_BOOSTED: Final[str] = "HX-Boosted"
HX_CURRENT_URL: Final[str] = "HX-Current-URL"
HX_HISTORY_RESTORE_REQUEST: Final[str] = "HX-History-Restore-Request"
HX_PROMPT: Final[str] = "HX-Prompt"
HX_TARGET: Final[str] = "HX-Target"
HX_TRIGGER_NAME: Final[str] = "HX-Trigger-Name"
HX_TRIGGER: Final[str] = "HX-Trigger"  # also a response header

# --- Response headers ---------------------------------------------------------
HX_LOCATION: Final[str] = "HX-Location"
HX_PUSH_URL: Final[str] = "HX-Push-URL"
HX_REDIRECT: Final[str] = "HX-Redirect"
HX_REFRESH: Final[str] = "HX-Refresh"
HX_REPLACE_URL: Final[str] = "HX-Replace-URL"
HX_RESWAP: Final[str] = "HX-Reswap"
HX_RETARGET: Final[str] = "HX-Retarget"
HX_RESELECT: Final[str] = "HX-Reselect"
HX_TRIGGER_AFTER_SETTLE: Final[str] = "HX-Trigger-After-Settle"
HX_TRIGGER_AFTER_SWAP: Final[str] = "HX-Trigger-After-Swap"

# (RequestFacts field, header name, coerce to bool)
REQUEST_HEADERS: Final[Tuple[Tuple[str, str, bool], ...]] = (
    ("request", HX_REQUEST, True),
    ("boosted", HX_BOOSTED, True),
    ("current_url", HX_CURRENT_URL, False),
    ("history_restore_request", HX_HISTORY_RESTORE_REQUEST, True),
    ("prompt", HX_PROMPT, False),
    ("target", HX_TARGET, False),
    ("trigger_name", HX_TRIGGER_NAME, False),
    ("trigger", HX_TRIGGER, False),
)

# (ResponseDirectives field, header name) in flush order
RESPONSE_HEADER_ORDER: Final[Tuple[Tuple[str, str], ...]] = (
    ("location", HX_LOCATION),
    ("push_url", HX_PUSH_URL),
    ("redirect", HX_REDIRECT),
    ("refresh", HX_REFRESH),
    ("replace_url", HX_REPLACE_URL),
    ("reswap", HX_RESWAP),
    ("retarget", HX_RETARGET),
    ("reselect", HX_RESELECT),
    ("trigger", HX_TRIGGER),
    ("trigger_after_settle", HX_TRIGGER_AFTER_SETTLE),
    ("trigger_after_swap", HX_TRIGGER_AFTER_SWAP),
)


class Swap(str, Enum):
    INNER_HTML = "innerHTML"
    OUTER_HTML = "outerHTML"
    TEXT_CONTENT = "textContent"
    BEFOREBEGIN = "beforebegin"
    AFTERBEGIN = "afterbegin"
    BEFOREEND = "beforeend"
    AFTEREND = "afterend"
    DELETE = "delete"
    NONE = "none"

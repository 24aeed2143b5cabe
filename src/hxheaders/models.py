from typing import Iterator, Tuple

from pydantic import BaseModel, ConfigDict

from .headers import RESPONSE_HEADER_ORDER


class RequestFacts(BaseModel):
    """HTMX facts extracted from the request headers at construction time."""

    model_config = ConfigDict(frozen=True)

    request: bool = False
    boosted: bool = False
    current_url: str = ""
    history_restore_request: bool = False
    prompt: str = ""
    target: str = ""
    trigger_name: str = ""
    trigger: str = ""


class ResponseDirectives(BaseModel):
    """Pending response directives. An empty string means "not set"."""

    model_config = ConfigDict(validate_assignment=True)

    location: str = ""
    push_url: str = ""
    redirect: str = ""
    refresh: str = ""
    replace_url: str = ""
    reswap: str = ""
    retarget: str = ""
    reselect: str = ""
    trigger: str = ""
    trigger_after_settle: str = ""
    trigger_after_swap: str = ""

    def is_set(self, field: str) -> bool:
        return getattr(self, field) != ""

    def items(self) -> Iterator[Tuple[str, str]]:
        """Yield (header name, value) for every set directive, in flush order."""
        for field, header in RESPONSE_HEADER_ORDER:
            if self.is_set(field):
                yield header, getattr(self, field)

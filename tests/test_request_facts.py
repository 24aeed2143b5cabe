from email.message import Message

import pytest
from pydantic import ValidationError

from src.hxheaders import Htmx, is_htmx_message_request, is_htmx_request, new, new_message, new_universal


def _message(**headers):
    msg = Message()
    for k, v in headers.items():
        msg[k] = v
    return msg


def test_no_htmx_headers():
    hx = Htmx({})
    assert hx.is_request() is False
    assert hx.is_boosted() is False
    assert hx.is_history_restore_request() is False
    assert hx.get_current_url() == ""
    assert hx.get_prompt() == ""
    assert hx.get_target() == ""
    assert hx.get_trigger_name() == ""
    assert hx.get_trigger() == ""
    assert is_htmx_request({}) is False
    assert is_htmx_message_request(Message()) is False


@pytest.mark.parametrize("value,expected", [("true", True), ("True", False), ("1", False), ("", False), ("false", False)])
def test_hx_request_exact_match(value, expected):
    headers = {"HX-Request": value}
    assert is_htmx_request(headers) is expected
    assert is_htmx_message_request(_message(**{"HX-Request": value})) is expected
    assert Htmx(headers).is_request() is expected


def test_example_request():
    hx = new({"HX-Request": "true", "HX-Target": "#content"})
    assert hx.is_request() is True
    assert hx.get_target() == "#content"
    assert hx.is_boosted() is False
    assert hx.is_history_restore_request() is False
    assert hx.get_prompt() == ""
    assert hx.get_trigger() == ""
    assert hx.get_trigger_name() == ""
    assert hx.get_current_url() == ""


def test_all_fields_verbatim():
    headers = {
        "HX-Request": "true",
        "HX-Boosted": "true",
        "HX-Current-URL": "http://localhost:8000/items?page=2",
        "HX-History-Restore-Request": "true",
        "HX-Prompt": "  are you sure?  ",
        "HX-Target": "item-list",
        "HX-Trigger-Name": "q",
        "HX-Trigger": "search-box",
    }
    for hx in (new(headers), new_message(_message(**headers)), new_universal(headers)):
        assert hx.is_request() is True
        assert hx.is_boosted() is True
        assert hx.is_history_restore_request() is True
        assert hx.get_current_url() == "http://localhost:8000/items?page=2"
        assert hx.get_prompt() == "  are you sure?  "
        assert hx.get_target() == "item-list"
        assert hx.get_trigger_name() == "q"
        assert hx.get_trigger() == "search-box"


def test_request_facts_are_frozen():
    hx = Htmx({"HX-Target": "#a"})
    with pytest.raises(ValidationError):
        hx.request.target = "#b"
    assert hx.get_target() == "#a"


def test_unsupported_source_fails_at_construction():
    with pytest.raises(TypeError):
        Htmx(object())


def test_asgi_style_bytes_headers():
    hx = Htmx({b"hx-request": b"true", b"hx-trigger": b"save-btn"})
    assert hx.is_request() is True
    assert hx.get_trigger() == "save-btn"
    assert is_htmx_request({"HX-Request": b"true"}) is True

from email.message import Message

import pytest
from starlette.datastructures import Headers

from src.hxheaders.adapter import UnsupportedHeaderSource, get_header, header_shape


class FastHeaders:
    """Header object with a variadic-default getter and no mapping protocol."""

    def __init__(self, values):
        self._values = values

    def get(self, name, *default):
        if name in self._values:
            return self._values[name]
        return default[0] if default else ""


def test_mapping_exact_and_case_insensitive():
    assert get_header({"HX-Target": "#content"}, "HX-Target") == "#content"
    assert get_header({"hx-target": "#content"}, "HX-Target") == "#content"
    assert header_shape({}) == "mapping"


def test_starlette_headers_are_mapping_shape():
    h = Headers(headers={"hx-request": "true"})
    assert header_shape(h) == "mapping"
    assert get_header(h, "HX-Request") == "true"


def test_message_shape():
    msg = Message()
    msg["HX-Prompt"] = "yes please"
    assert header_shape(msg) == "message"
    assert get_header(msg, "HX-Prompt") == "yes please"
    assert get_header(msg, "HX-Target") == ""


def test_variadic_default_getter():
    src = FastHeaders({"HX-Trigger": "btn"})
    assert header_shape(src) == "message"
    assert get_header(src, "HX-Trigger") == "btn"
    assert get_header(src, "HX-Trigger-Name") == ""


def test_lookup_callable():
    values = {"HX-Current-URL": "http://localhost/items"}
    assert header_shape(values.get) == "lookup"
    assert get_header(lambda name: values.get(name), "HX-Current-URL") == "http://localhost/items"
    assert get_header(lambda name: None, "HX-Current-URL") == ""


def test_absent_header_is_empty_string():
    assert get_header({}, "HX-Request") == ""


@pytest.mark.parametrize("source", [42, None, "HX-Request: true", ["HX-Request"]])
def test_unsupported_source_raises(source):
    with pytest.raises(UnsupportedHeaderSource) as exc:
        get_header(source, "HX-Request")
    assert isinstance(exc.value, TypeError)
    assert "unsupported header type" in str(exc.value)


def test_bytes_headers_decode_as_latin1():
    assert get_header({"HX-Request": b"true"}, "HX-Request") == "true"
    assert get_header({b"hx-target": b"#caf\xe9"}, "HX-Target") == "#café"

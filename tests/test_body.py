"""
Tests for BodyFormat encoders.
"""
import pytest

from reqwest.body import BodyFormat
from reqwest.options import RequestOptions


def test_json_attaches_payload_as_is():
    options = RequestOptions()
    payload = {"name": "item", "tags": ["a", "b"]}
    BodyFormat.JSON.apply(options, payload)

    assert options.json is payload
    assert options.form is None
    assert options.multipart is None


def test_form_urlencodes_stringified_values():
    options = RequestOptions()
    BodyFormat.FORM.apply(options, {"a": 1, "b": "two words", "c": 2.5})

    assert str(options.form) == "a=1&b=two+words&c=2.5"
    assert options.json is None


def test_form_lowercases_booleans():
    options = RequestOptions()
    BodyFormat.FORM.apply(options, {"remember": True, "admin": False, "count": 0})

    assert str(options.form) == "remember=true&admin=false&count=0"


def test_multipart_keeps_one_part_per_entry():
    options = RequestOptions()
    BodyFormat.MULTIPART.apply(options, {"field": "value", "file": b"bytes"})

    assert options.multipart == [("field", "value"), ("file", b"bytes")]


@pytest.mark.parametrize(
    "body_format,content_type",
    [
        (BodyFormat.JSON, "application/json"),
        (BodyFormat.FORM, "application/x-www-form-urlencoded"),
        (BodyFormat.MULTIPART, None),
    ],
)
def test_content_types(body_format, content_type):
    assert body_format.content_type == content_type


def test_lookup_by_value():
    assert BodyFormat("form_params") is BodyFormat.FORM

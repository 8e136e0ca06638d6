"""Tests for response body and header normalization."""

import datetime

import httpx
import pytest

from courier_sdk._internal.execution.normalization import normalize_body, normalize_headers


class TestNormalizeBody:
    """Tests for normalize_body."""

    @pytest.mark.parametrize("raw", [None, "", "   ", "\n\t \r\n"])
    def test_blank_payload_is_none(self, raw):
        """Empty or whitespace-only payloads normalize to None."""
        assert normalize_body(raw) is None

    def test_json_object(self):
        """Should parse JSON objects into dicts."""
        assert normalize_body('{"a":1}') == {"a": 1}

    def test_nested_json(self):
        """Should parse nested structures with arrays, scalars and nulls."""
        raw = '{"items": [1, "two", null, {"three": 3.5}], "ok": false}'
        assert normalize_body(raw) == {"items": [1, "two", None, {"three": 3.5}], "ok": False}

    @pytest.mark.parametrize(
        ("raw", "expected"),
        [("[1, 2]", [1, 2]), ("42", 42), ('"text"', "text"), ("true", True)],
    )
    def test_json_scalars_and_arrays(self, raw, expected):
        """Should parse any JSON value, not only objects."""
        assert normalize_body(raw) == expected

    def test_surrounding_whitespace(self):
        """Should parse JSON surrounded by whitespace."""
        assert normalize_body('  {"a": 1}\n') == {"a": 1}

    @pytest.mark.parametrize("raw", ["plain text", "{a:}", "<html></html>", '{"a": 1'])
    def test_non_json_falls_back_to_raw(self, raw):
        """Should return the original string when it is not JSON."""
        assert normalize_body(raw) == raw

    @pytest.mark.parametrize("raw", ["NaN", "Infinity", '{"a": -Infinity}'])
    def test_non_standard_constants_fall_back_to_raw(self, raw):
        """Should not accept NaN or Infinity as JSON."""
        assert normalize_body(raw) == raw

    def test_deeply_nested_falls_back_to_raw(self):
        """Should return the raw string when nesting is too deep to parse."""
        raw = "[" * 100000
        assert normalize_body(raw) == raw


class TestNormalizeHeaders:
    """Tests for normalize_headers."""

    def test_empty_headers(self):
        """Should return empty derived fields for missing headers."""
        for headers in (None, {}):
            result = normalize_headers(headers)
            assert result.content_type is None
            assert result.date is None
            assert result.connection == []

    def test_charset(self):
        """Should extract the charset from Content-Type."""
        result = normalize_headers({"Content-Type": "application/json; charset=UTF-8"})
        assert result.content_type == "UTF-8"

    def test_quoted_charset(self):
        """Should unquote a quoted charset."""
        result = normalize_headers({"content-type": 'text/plain; charset="iso-8859-1"'})
        assert result.content_type == "iso-8859-1"

    def test_content_type_without_charset(self):
        """Should leave the charset empty when not declared."""
        result = normalize_headers({"Content-Type": "application/json"})
        assert result.content_type is None

    def test_date_in_local_time_zone(self):
        """Should convert the Date header to a local calendar date."""
        result = normalize_headers({"Date": "Wed, 21 Oct 2015 07:28:00 GMT"})
        expected = (
            datetime.datetime(2015, 10, 21, 7, 28, tzinfo=datetime.UTC).astimezone().date()
        )
        assert result.date == expected

    def test_invalid_date(self):
        """Should ignore an unparseable Date header."""
        result = normalize_headers({"Date": "not a date"})
        assert result.date is None

    def test_connection_tokens(self):
        """Should split the Connection header into tokens."""
        result = normalize_headers({"Connection": "keep-alive, Upgrade"})
        assert result.connection == ["keep-alive", "Upgrade"]

    def test_httpx_headers(self):
        """Should accept httpx.Headers instances."""
        headers = httpx.Headers({"CONNECTION": "close", "content-type": "text/html; charset=utf-8"})
        result = normalize_headers(headers)
        assert result.connection == ["close"]
        assert result.content_type == "utf-8"

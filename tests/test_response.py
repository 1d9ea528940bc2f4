"""Response marshaling and domain-level error composition."""

from __future__ import annotations

import json

import pytest

from core.errors import (
    ERROR_BODY_PREVIEW_CHARS,
    INVALID_PARAMS,
    METHOD_NOT_FOUND,
    ProtocolError,
    upstream_failure_message,
)
from core.models import FetchedResponse
from core.response import marshal_response


def _ok(body: str) -> FetchedResponse:
    return FetchedResponse(status_code=200, reason_phrase="OK", body=body)


class TestMarshalResponse:
    def test_json_is_pretty_printed(self) -> None:
        body = '{"query":"x","results":[{"title":"a","score":1.5}]}'
        result = marshal_response(_ok(body), "json")
        assert not result.is_error
        assert len(result.content) == 1
        assert result.content[0].type == "text"
        assert result.first_text == json.dumps(json.loads(body), indent=2)

    def test_json_keeps_unicode(self) -> None:
        result = marshal_response(_ok('{"title":"Zürich"}'), "json")
        assert "Zürich" in result.first_text

    def test_pretty_printing_is_idempotent(self) -> None:
        once = marshal_response(_ok('{"results": []}'), "json").first_text
        twice = marshal_response(_ok(once), "json").first_text
        assert once == twice

    @pytest.mark.parametrize(
        ("fmt", "body"),
        [
            ("csv", "a,b\n1,2"),
            ("rss", "<?xml version='1.0'?><rss><channel/></rss>"),
            ("html", "<html>  <body>not   reformatted</body></html>\n"),
        ],
    )
    def test_raw_formats_are_untouched(self, fmt: str, body: str) -> None:
        result = marshal_response(_ok(body), fmt)
        assert not result.is_error
        assert result.first_text == body

    def test_bad_json_on_2xx_is_a_failed_result(self) -> None:
        result = marshal_response(_ok("<html>oops</html>"), "json")
        assert result.is_error
        assert result.first_text.startswith("Error executing search: Invalid JSON response")


class TestUpstreamFailureMessage:
    def test_json_message_is_appended(self) -> None:
        response = FetchedResponse(500, "Internal Server Error", '{"message":"rate limited"}')
        assert (
            upstream_failure_message(response, "json")
            == "SearxNG API error: 500 Internal Server Error - rate limited"
        )

    def test_json_without_message_field(self) -> None:
        response = FetchedResponse(403, "Forbidden", '{"error": "nope"}')
        assert upstream_failure_message(response, "json") == "SearxNG API error: 403 Forbidden"

    def test_unparseable_json_error_body_is_ignored(self) -> None:
        response = FetchedResponse(502, "Bad Gateway", "<html>bad gateway</html>")
        assert upstream_failure_message(response, "json") == "SearxNG API error: 502 Bad Gateway"

    def test_text_body_is_quoted_for_raw_formats(self) -> None:
        response = FetchedResponse(429, "Too Many Requests", "slow down")
        assert (
            upstream_failure_message(response, "csv")
            == "SearxNG API error: 429 Too Many Requests - slow down"
        )

    def test_long_text_body_is_truncated(self) -> None:
        body = "x" * 150 + "y" * 150
        response = FetchedResponse(500, "Internal Server Error", body)
        message = upstream_failure_message(response, "html")
        detail = message.split(" - ", 1)[1]
        assert detail == body[:ERROR_BODY_PREVIEW_CHARS] + "..."
        assert "y" * 51 not in detail

    def test_empty_text_body_adds_nothing(self) -> None:
        response = FetchedResponse(404, "Not Found", "")
        assert upstream_failure_message(response, "rss") == "SearxNG API error: 404 Not Found"


class TestProtocolError:
    def test_unknown_tool(self) -> None:
        exc = ProtocolError.unknown_tool("fetch")
        assert exc.code == METHOD_NOT_FOUND
        assert exc.message == "Unknown tool: fetch"

    def test_missing_query(self) -> None:
        exc = ProtocolError.missing_query()
        assert exc.code == INVALID_PARAMS
        assert "'q'" in str(exc)

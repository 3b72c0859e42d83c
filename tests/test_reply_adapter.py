"""
Tests for the reply-builder adapter.

Uses a recording builder in place of a framework reply function,
plus the JSONReply builder that renders starlette responses.
"""

import json

import pytest
from fastapi import HTTPException

from errorbridge.application.translate_error import ErrorTranslator
from errorbridge.domain.errors import (
    CredentialsError,
    ExistsError,
    FormatError,
    InvalidArgumentError,
    ValidationError,
)
from errorbridge.interfaces.reply import JSONReply, reply_error

CT = "content-type"
JT = "application/json"


class RecordingReply:
    """Builder that records every call made on it."""

    def __init__(self, payload: dict) -> None:
        self.payload = payload
        self.status_code = 200
        self.headers: dict[str, str] = {}
        self.calls: list[str] = ["reply"]

    def type(self, mime_type: str) -> "RecordingReply":
        self.calls.append("type")
        self.headers[CT] = mime_type
        return self

    def code(self, status_code: int) -> "RecordingReply":
        self.calls.append("code")
        self.status_code = status_code
        return self

    def header(self, name: str, value: str) -> "RecordingReply":
        self.calls.append("header")
        self.headers[name] = value
        return self


class TestArguments:
    """Argument validation of reply_error."""

    def test_primitive_error_rejected(self) -> None:
        """A primitive error raises before reply is called."""
        with pytest.raises(InvalidArgumentError):
            reply_error(123, RecordingReply)

    def test_none_error_rejected(self) -> None:
        """None raises before reply is called."""
        with pytest.raises(InvalidArgumentError):
            reply_error(None, RecordingReply)

    def test_reply_must_be_callable(self) -> None:
        """A non-callable reply is a misuse error."""
        with pytest.raises(InvalidArgumentError, match="reply"):
            reply_error({"message": "test"}, 123)  # type: ignore[arg-type]


class TestBuilderChain:
    """The builder is configured with payload, type, code and headers."""

    def test_format_error(self) -> None:
        """Message-only kinds produce a single-key payload."""
        res = reply_error(FormatError(), RecordingReply)
        assert res.status_code == 400
        assert res.headers[CT] == JT
        assert list(res.payload) == ["message"]
        assert isinstance(res.payload["message"], str)

    def test_validation_error(self) -> None:
        """Data kinds include data in the payload."""
        res = reply_error(ValidationError(data=123), RecordingReply)
        assert res.status_code == 400
        assert res.payload["data"] == 123
        assert sorted(res.payload) == ["data", "message"]

    def test_exists_error_default_data(self) -> None:
        """Missing data on a conflict becomes an empty dict."""
        res = reply_error(ExistsError(), RecordingReply)
        assert res.status_code == 409
        assert res.payload["data"] == {}

    def test_credentials_header(self) -> None:
        """Credentials errors set www-authenticate after the status."""
        res = reply_error(CredentialsError(data="digest"), RecordingReply)
        assert res.status_code == 401
        assert res.headers["www-authenticate"] == "digest"
        assert res.headers[CT] == JT
        assert res.calls == ["reply", "type", "code", "header"]

    def test_credentials_without_challenge(self) -> None:
        """A credentials error without string data is a misuse error."""
        with pytest.raises(InvalidArgumentError):
            reply_error(CredentialsError(), RecordingReply)

    def test_default(self) -> None:
        """Unknown errors produce a 500 reply."""
        res = reply_error({"message": "Default"}, RecordingReply)
        assert res.status_code == 500
        assert res.payload == {"message": "Default"}
        assert res.calls == ["reply", "type", "code"]

    def test_custom_translator(self) -> None:
        """A translator can be supplied explicitly."""
        translator = ErrorTranslator(content_type="application/problem+json")
        res = reply_error(FormatError(), RecordingReply, translator)
        assert res.headers[CT] == "application/problem+json"


class TestBuilderFailures:
    """Failures of the builder itself are not suppressed."""

    def test_reply_exception_propagates(self) -> None:
        """An exception from reply reaches the caller."""

        def broken_reply(payload: dict) -> RecordingReply:
            raise RuntimeError("builder failed")

        with pytest.raises(RuntimeError, match="builder failed"):
            reply_error(FormatError(), broken_reply)

    def test_reply_called_once(self) -> None:
        """The builder is called exactly once."""
        calls = []

        def counting_reply(payload: dict) -> RecordingReply:
            calls.append(payload)
            return RecordingReply(payload)

        reply_error(ValidationError(), counting_reply)
        assert len(calls) == 1


class TestPassThrough:
    """Already boxed errors are returned unchanged."""

    def test_http_exception_returned_as_is(self) -> None:
        """reply is not called for an HTTPException."""
        err = HTTPException(status_code=418)

        def never(payload: dict) -> RecordingReply:
            raise AssertionError("reply must not be called")

        assert reply_error(err, never) is err


class TestJSONReply:
    """Tests for the starlette-backed builder."""

    def test_renders_response(self) -> None:
        """The configured reply renders a matching JSONResponse."""
        response = reply_error(
            CredentialsError("Sign in.", "Bearer"), JSONReply
        ).to_response()
        assert response.status_code == 401
        assert response.headers["www-authenticate"] == "Bearer"
        assert response.headers["content-type"] == JT
        assert json.loads(response.body) == {"message": "Sign in."}

    def test_renders_data(self) -> None:
        """Data is serialized into the body."""
        response = reply_error(
            {"kind": "ValidationError", "data": {"qty": "required"}}, JSONReply
        ).to_response()
        assert response.status_code == 400
        assert json.loads(response.body)["data"] == {"qty": "required"}

"""Unit tests for normalized request errors and payload rendering."""

from __future__ import annotations

from typing import Any

import pytest
from webdash_service_libs.error_handling import (
    FALLBACK_STATUS_CODE,
    HttpRequestError,
    StructuredHttpFailure,
    UnknownHttpFailure,
    normalize_exchange_error,
    render_payload,
)
from webdash_service_libs.http import TransportFailure, TransportResponse


class TestRenderPayload:
    @pytest.mark.parametrize(
        "payload, expected",
        [
            ({"error": "Bad Request"}, "[object Object]"),
            ({}, "[object Object]"),
            (object(), "[object Object]"),
            ("Bad Request", "Bad Request"),
            ("", ""),
            (None, "null"),
            (True, "true"),
            (False, "false"),
            (404, "404"),
            (1.0, "1"),
            (2.5, "2.5"),
            ([1, 2, 3], "1,2,3"),
            (["a", None, "b"], "a,,b"),
            ([{"a": 1}], "[object Object]"),
            ([], ""),
            (b"plain bytes", "plain bytes"),
        ],
    )
    def test_default_coercion(self, payload: Any, expected: str) -> None:
        assert render_payload(payload) == expected

    def test_non_finite_numbers(self) -> None:
        assert render_payload(float("nan")) == "NaN"
        assert render_payload(float("inf")) == "Infinity"
        assert render_payload(float("-inf")) == "-Infinity"


class TestNormalizeExchangeError:
    def test_transport_failure_with_response_is_structured(self) -> None:
        exc = TransportFailure(
            "Request failed with status code 400",
            TransportResponse(status=400, data={"error": "Bad Request"}),
        )

        error = normalize_exchange_error(exc)

        assert isinstance(error, StructuredHttpFailure)
        assert error.status_code == 400
        assert error.payload == {"error": "Bad Request"}
        assert error.message == "Request failed with status 400: [object Object]"

    def test_transport_failure_without_response_uses_its_message(self) -> None:
        error = normalize_exchange_error(TransportFailure("Connection refused"))

        assert isinstance(error, UnknownHttpFailure)
        assert error.message == "Request failed with status 500: Connection refused"

    def test_plain_exception_uses_str(self) -> None:
        error = normalize_exchange_error(ValueError("Unknown error"))

        assert isinstance(error, UnknownHttpFailure)
        assert error.status_code == FALLBACK_STATUS_CODE
        assert str(error) == "Request failed with status 500: Unknown error"

    def test_response_without_status_and_data_is_unknown(self) -> None:
        class PartialResponseError(Exception):
            def __init__(self) -> None:
                super().__init__("partial")
                self.message = "socket hang up"
                self.response = object()

        error = normalize_exchange_error(PartialResponseError())

        assert isinstance(error, UnknownHttpFailure)
        assert error.message == "Request failed with status 500: socket hang up"

    def test_non_string_message_attribute_falls_back_to_str(self) -> None:
        class OddError(Exception):
            message = 42

        error = normalize_exchange_error(OddError("described"))

        assert error.message == "Request failed with status 500: described"

    def test_errors_are_exceptions_of_common_base(self) -> None:
        structured = StructuredHttpFailure(418, "teapot")
        unknown = UnknownHttpFailure("boom")

        assert isinstance(structured, HttpRequestError)
        assert isinstance(unknown, HttpRequestError)
        with pytest.raises(HttpRequestError, match="status 418: teapot"):
            raise structured

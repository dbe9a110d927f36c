"""Tests for HTTP request contracts."""

from __future__ import annotations

import dataclasses

import pytest
from common_core.http_contracts import HttpMethod, HttpRequest


class TestHttpMethod:
    def test_contains_standard_verbs(self) -> None:
        assert {m.value for m in HttpMethod} >= {"GET", "POST", "PUT", "PATCH", "DELETE"}

    def test_members_compare_equal_to_their_wire_names(self) -> None:
        assert HttpMethod.PATCH == "PATCH"
        assert HttpMethod("DELETE") is HttpMethod.DELETE


class TestHttpRequest:
    def test_params_default_to_none(self) -> None:
        request: HttpRequest[None] = HttpRequest(
            endpoint="/login", method=HttpMethod.GET, body=None, headers={}
        )

        assert request.params is None
        assert request.body is None

    def test_is_immutable(self) -> None:
        request: HttpRequest[dict[str, str]] = HttpRequest(
            endpoint="/users",
            method=HttpMethod.POST,
            body={"name": "Test"},
            headers={"Content-Type": "application/json"},
        )

        with pytest.raises(dataclasses.FrozenInstanceError):
            request.endpoint = "/other"  # type: ignore[misc]

    def test_body_is_not_validated_against_its_type_parameter(self) -> None:
        request: HttpRequest[dict[str, str]] = HttpRequest(
            endpoint="/users",
            method=HttpMethod.PUT,
            body=[1, 2, 3],  # type: ignore[arg-type]
            headers={},
            params={"page": 1, "active": True},
        )

        assert request.body == [1, 2, 3]
        assert request.params == {"page": 1, "active": True}

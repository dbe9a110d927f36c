from __future__ import annotations

import pytest
from common_core.http_contracts import HttpMethod, HttpRequest


@pytest.fixture
def get_request() -> HttpRequest[None]:
    """Provide the basic GET request used across client tests."""
    return HttpRequest(
        endpoint="/test-endpoint",
        method=HttpMethod.GET,
        body=None,
        headers={"Content-Type": "application/json"},
    )

"""Text rendering of upstream error payloads for normalized error messages."""

from __future__ import annotations

import math
from collections.abc import Sequence
from typing import Any

OPAQUE_OBJECT_TOKEN = "[object Object]"


def render_payload(payload: Any) -> str:
    """
    Render an error payload using default object-to-text coercion.

    Scalars render as their literal text, sequences render as their items
    joined by commas, and any other object renders as an opaque token rather
    than its contents. Error messages built from this stay single-line and
    never leak structured response bodies.

    Args:
        payload: Response body attached to a failed exchange

    Returns:
        Coerced text form of the payload
    """
    if payload is None:
        return "null"
    if isinstance(payload, bool):
        return "true" if payload else "false"
    if isinstance(payload, str):
        return payload
    if isinstance(payload, int):
        return str(payload)
    if isinstance(payload, float):
        return _render_number(payload)
    if isinstance(payload, (bytes, bytearray)):
        return payload.decode("utf-8", errors="replace")
    if isinstance(payload, Sequence):
        return ",".join("" if item is None else render_payload(item) for item in payload)
    return OPAQUE_OBJECT_TOKEN


def _render_number(value: float) -> str:
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "Infinity" if value > 0 else "-Infinity"
    if value.is_integer():
        return str(int(value))
    return repr(value)

"""Helpers for turning HTTP response bodies into tool text.

Bodies are always parsed strictly: a body that is not JSON is a transport
failure for the caller, not something to salvage.
"""
from __future__ import annotations

import json
from typing import Any

import httpx


def parse_json_body(response: httpx.Response) -> Any:
    """Decode the response body as JSON.

    Raises `ValueError` (json.JSONDecodeError) when the body is empty or not JSON.
    """
    return json.loads(response.content)


def pretty_json(data: Any) -> str:
    """Serialize `data` with a 2-space indent, keeping non-ASCII characters as-is."""
    return json.dumps(data, indent=2, ensure_ascii=False)

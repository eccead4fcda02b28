"""Helpers for turning Loco response bodies into tool output.

Loco answers most calls with a JSON document but some with a bare
acknowledgement string, so decoding never fails on a successful response.
"""
from __future__ import annotations

import json
from typing import Any


def parse_text(text: str) -> Any:
    """Parse `text` as JSON, or return it unchanged when it is not JSON."""
    try:
        return json.loads(text)
    except ValueError:
        return text


def format_result(data: Any) -> str:
    """Render a decoded result as the text payload of a tool call.

    Strings are returned verbatim; anything else is pretty-printed JSON.
    """
    if isinstance(data, str):
        return data
    return json.dumps(data, indent=2, ensure_ascii=False)

"""Hex quantity codec for JSON-RPC numeric fields."""

from __future__ import annotations

import re

HEX_QUANTITY_RE = re.compile(r"0x[0-9a-fA-F]+")


def number_to_hex(value: int) -> str:
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValueError(f"Expected a non-negative integer, got {value!r}")
    if value < 0:
        raise ValueError(f"Cannot encode negative number {value} as a hex quantity")
    return f"0x{value:x}"


def hex_to_int(value: str | None) -> int:
    if not isinstance(value, str) or not HEX_QUANTITY_RE.fullmatch(value):
        raise ValueError(f"Invalid hex quantity: {value!r}")
    return int(value, 16)

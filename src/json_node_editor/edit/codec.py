"""Strict JSON text parsing.

``json.loads`` accepts ``NaN``, ``Infinity`` and ``-Infinity``, which are not
JSON.  ``parse_json`` rejects them so every document the engine reads (and
therefore every document it writes back) is plain JSON text.
"""

from __future__ import annotations

import json
from typing import Any

__all__ = ["parse_json"]


def _reject_constant(name: str) -> Any:
    msg = f"{name} is not valid JSON"
    raise ValueError(msg)


def parse_json(text: str) -> Any:
    """Parse ``text`` as strict JSON.

    Raises:
        ValueError: If ``text`` is not valid JSON, including non-finite
            number words (``json.JSONDecodeError`` is a ``ValueError``).
        TypeError: If ``text`` is not a str, bytes or bytearray.
        RecursionError: If ``text`` nests deeper than the interpreter allows.
    """
    return json.loads(text, parse_constant=_reject_constant)

#!/usr/bin/env python3
"""
Purpose:
    Parses back-quoted literals from comments into typed values.
"""
from __future__ import annotations

import ast
import json
from typing import Any

from docschema.core.errors import LiteralParseError


def parse_literal(text: str) -> Any:
    """
    Parse `text` as a JSON value, falling back to a Python literal.

    Examples:
        '"baz"'  -> "baz"
        "42"     -> 42
        "true"   -> True
        "'baz'"  -> "baz"
        "None"   -> None

    Raises:
        LiteralParseError: if `text` is neither valid JSON nor a Python literal.
    """
    try:
        return json.loads(text)
    except (json.JSONDecodeError, RecursionError):
        pass
    try:
        return ast.literal_eval(text.strip())
    except (ValueError, SyntaxError, TypeError, MemoryError, RecursionError) as e:
        raise LiteralParseError(f"Invalid literal {text!r}", text=text) from e

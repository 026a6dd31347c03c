#!/usr/bin/env python3
"""
Purpose:
    Parses textual type references (`str`, `pkg.Type`, `list[Foo]`,
    `dict[str, Bar]`, `Optional[X]`, `X | None`) into `ast` expressions.
"""
from __future__ import annotations

import ast

from docschema.core.errors import TypeExpressionError


def parse_type_expression(text: str) -> ast.expr:
    """
    Parse `text` as a single Python expression.

    Raises:
        TypeExpressionError: if `text` is empty or not a valid expression.
    """
    if not text or not text.strip():
        raise TypeExpressionError("Empty type expression", text=text)
    try:
        tree = ast.parse(text.strip(), mode="eval")
    except SyntaxError as e:
        raise TypeExpressionError(f"Invalid type expression {text!r}: {e.msg}", text=text) from e
    except (RecursionError, MemoryError) as e:
        raise TypeExpressionError(f"Type expression {text!r} is nested too deeply", text=text) from e
    return tree.body


def expression_name(expr: ast.expr) -> str:
    """Dotted name for `Name`/`Attribute` chains; empty string for anything else."""
    if isinstance(expr, ast.Name):
        return expr.id
    if isinstance(expr, ast.Attribute):
        base = expression_name(expr.value)
        return f"{base}.{expr.attr}" if base else ""
    return ""

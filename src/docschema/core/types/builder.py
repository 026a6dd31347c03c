#!/usr/bin/env python3
"""
Purpose:
    Implements the SchemaNodeBuilder, which materializes a parsed type
    expression into a Definition stub: builtin names become JSON types,
    containers become array/object nodes, unions become oneOf, and any other
    name becomes a `$ref` (or an inlined copy of a registered definition).
"""
from __future__ import annotations

import ast
from typing import Dict, List, Optional

from docschema.core.constants import DEFAULT_DEFINITIONS_PREFIX
from docschema.core.errors import TypeExpressionError
from docschema.core.schema.definition import Definition
from docschema.core.types.expression import expression_name, parse_type_expression


# --- Name registries --- #
# Builtin type names and the JSON schema keys they map to.
SCALAR_TYPES: Dict[str, Dict[str, str]] = {
    "str":       {"type": "string"},
    "string":    {"type": "string"},
    "int":       {"type": "integer"},
    "integer":   {"type": "integer"},
    "float":     {"type": "number"},
    "number":    {"type": "number"},
    "bool":      {"type": "boolean"},
    "boolean":   {"type": "boolean"},
    "bytes":     {"type": "string", "format": "byte"},
    "datetime":  {"type": "string", "format": "date-time"},
    "datetime.datetime": {"type": "string", "format": "date-time"},
    "date":      {"type": "string", "format": "date"},
    "datetime.date": {"type": "string", "format": "date"},
    "Any":       {},
    "typing.Any": {},
    "object":    {},
}

ARRAY_NAMES = frozenset({"list", "List", "Sequence", "Iterable", "set", "Set", "frozenset", "tuple", "Tuple",
                         "typing.List", "typing.Sequence", "typing.Set", "typing.Tuple"})
MAP_NAMES = frozenset({"dict", "Dict", "Mapping", "typing.Dict", "typing.Mapping"})
OPTIONAL_NAMES = frozenset({"Optional", "typing.Optional"})
UNION_NAMES = frozenset({"Union", "typing.Union"})


class SchemaNodeBuilder:
    """
    Builds Definition stubs from parsed type expressions.

    Args:
        definitions:
            Known named definitions, keyed by qualified name ("pkg.Type"). Used
            when a reference is built with `inline=True`.
        prefix:
            Prefix for `$ref` values (default "#/definitions/").
    """

    def __init__(
        self,
        definitions: Optional[Dict[str, Definition]] = None,
        prefix: str = DEFAULT_DEFINITIONS_PREFIX,
    ) -> None:
        self.definitions: Dict[str, Definition] = dict(definitions or {})
        self.prefix = prefix

    def register(self, name: str, definition: Definition) -> None:
        """Record a named definition for inline resolution."""
        self.definitions[name] = definition

    def __call__(self, name: str, expr: ast.expr, context: str = "", inline: bool = False) -> Definition:
        """
        Return a new Definition for `expr`.

        `name` identifies the field being built (used in error messages),
        `context` qualifies bare type names, and `inline` resolves registered
        references to copies instead of `$ref` nodes.
        """
        try:
            return self._build(name, expr, context, inline)
        except RecursionError as e:
            raise TypeExpressionError(f"Type expression nested too deeply on field {name}", field=name) from e

    # --- Internals --- #

    def _build(self, name: str, expr: ast.expr, context: str, inline: bool) -> Definition:
        if isinstance(expr, ast.Constant):
            if expr.value is None:
                return Definition(type="null")
            if isinstance(expr.value, str):
                # forward reference: "Foo"
                return self._build(name, parse_type_expression(expr.value), context, inline)

        if isinstance(expr, (ast.Name, ast.Attribute)):
            dotted = expression_name(expr)
            if dotted:
                return self._named(dotted, context, inline)

        if isinstance(expr, ast.Subscript):
            return self._subscript(name, expr, context, inline)

        if isinstance(expr, ast.BinOp) and isinstance(expr.op, ast.BitOr):
            return self._union(name, _flatten_bitor(expr), context, inline)

        text = ast.unparse(expr)
        raise TypeExpressionError(f"Unsupported type expression {text!r}", field=name, text=text)

    def _named(self, dotted: str, context: str, inline: bool) -> Definition:
        if dotted in SCALAR_TYPES:
            return Definition(**SCALAR_TYPES[dotted])
        if dotted in ARRAY_NAMES:
            return Definition(type="array")
        if dotted in MAP_NAMES:
            return Definition(type="object")

        qualified = dotted if ("." in dotted or not context) else f"{context}.{dotted}"
        if inline and qualified in self.definitions:
            return self.definitions[qualified].model_copy(deep=True)
        return Definition(ref=f"{self.prefix}{qualified}")

    def _subscript(self, name: str, expr: ast.Subscript, context: str, inline: bool) -> Definition:
        base = expression_name(expr.value)
        args = list(expr.slice.elts) if isinstance(expr.slice, ast.Tuple) else [expr.slice]

        if base in ARRAY_NAMES:
            return Definition(type="array", items=self._build(name, args[0], context, inline))

        if base in MAP_NAMES:
            if len(args) != 2:
                text = ast.unparse(expr)
                raise TypeExpressionError(
                    f"Mapping type {text!r} needs exactly two parameters", field=name, text=text
                )
            return Definition(type="object", additional_properties=self._build(name, args[1], context, inline))

        if base in OPTIONAL_NAMES:
            node = self._build(name, args[0], context, inline)
            node.nullable = True
            return node

        if base in UNION_NAMES:
            return self._union(name, args, context, inline)

        text = ast.unparse(expr)
        raise TypeExpressionError(f"Unsupported generic type {text!r}", field=name, text=text)

    def _union(self, name: str, members: List[ast.expr], context: str, inline: bool) -> Definition:
        non_null = [m for m in members if not (isinstance(m, ast.Constant) and m.value is None)]
        has_null = len(non_null) != len(members)

        if len(non_null) == 1:
            node = self._build(name, non_null[0], context, inline)
        else:
            node = Definition(one_of=[self._build(name, m, context, inline) for m in non_null])
        if has_null:
            node.nullable = True
        return node


def _flatten_bitor(expr: ast.expr) -> List[ast.expr]:
    """`A | B | C` -> [A, B, C]"""
    if isinstance(expr, ast.BinOp) and isinstance(expr.op, ast.BitOr):
        return _flatten_bitor(expr.left) + _flatten_bitor(expr.right)
    return [expr]

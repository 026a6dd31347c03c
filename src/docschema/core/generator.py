#!/usr/bin/env python3
"""
Purpose:
    Implements the Generator, which interprets the documentation comment of a
    single field and records what it finds on the field's Definition:
    requiredness, default value, type override or oneOf alternatives,
    example, plain description and HTML description.

    Passes run in a fixed order on a shrinking description string; later
    passes only see what earlier passes left behind.
"""
from __future__ import annotations

import ast
import logging
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, Iterable, List, Optional, Tuple

from docschema.core.comment.enums import EnumInformation, handle_enum_comments
from docschema.core.comment.passes import (
    extract_default,
    extract_example,
    extract_one_of,
    extract_type_override,
    is_required,
    join_if_not_empty,
    remove_type_name,
    strip_tags,
)
from docschema.core.config import configure_logging, load_config
from docschema.core.constants import DEFAULT_DEFINITIONS_PREFIX
from docschema.core.errors import (
    CommentError,
    LiteralParseError,
    MalformedCommentError,
    TypeExpressionError,
)
from docschema.core.literals import parse_literal
from docschema.core.render.markdown import render_markdown, strip_paragraph_tags
from docschema.core.schema.definition import Definition, Meta
from docschema.core.types.builder import SchemaNodeBuilder
from docschema.core.types.expression import parse_type_expression
from docschema.core.types.reference import interpret_reference
from docschema.core.validation import ValidationResult

logger = logging.getLogger(__name__)


# --- Collaborator signatures --- #

ReferenceResolver = Callable[[str], Tuple[str, str]]
EnumPass = Callable[[str, Definition, str], Optional[EnumInformation]]
TypeParser = Callable[[str], ast.expr]
NodeBuilder = Callable[[str, ast.expr, str, bool], Definition]
LiteralParser = Callable[[str], Any]
Renderer = Callable[[str], str]


@dataclass(frozen=True)
class Generator:
    """
    Field comment interpreter.

    Every collaborator can be swapped out; the defaults cover Python-style
    type expressions, JSON/Python literals and plain Markdown.
    """
    strict: bool = False
    resolve_reference: ReferenceResolver = interpret_reference
    enum_pass: EnumPass = handle_enum_comments
    parse_type: TypeParser = parse_type_expression
    build_node: NodeBuilder = field(default_factory=SchemaNodeBuilder)
    parse_literal: LiteralParser = parse_literal
    render: Renderer = render_markdown

    # --- Public API --- #

    def handle_comment(self, raw_name: str, comment: str, definition: Definition) -> Meta:
        """
        Interpret `comment` for the field `raw_name` and update `definition`.

        `definition` is only modified when the whole comment was interpreted
        successfully; on a type override it ends up holding the stub built for
        the overriding type (plus description and examples).

        Raises:
            MalformedCommentError: strict-mode documentation rule violated.
            LiteralParseError: the default literal could not be parsed.
            TypeExpressionError: an override or oneOf type could not be parsed or built.
            EnumCommentError: the enum block is malformed.
            InternalConsistencyError: the oneOf clause matched without entries.
        """
        context, name = self.resolve_reference(raw_name)
        if self.strict and name and not comment.startswith(name + " "):
            raise MalformedCommentError(
                f"comment should start with field name on field {name}", field=name, text=comment
            )

        work = definition.model_copy(deep=True)
        no_derive = False

        try:
            enum_info = self.enum_pass(context, work, comment)
        except CommentError as e:
            e.field = e.field or name
            raise
        synthesized = ""
        if enum_info is not None:
            comment = enum_info.remaining_comment
            synthesized = enum_info.synthesized_comment

        required = is_required(comment)
        description = strip_tags(comment)

        description, literal = extract_default(description)
        if literal is not None:
            try:
                work.default = self.parse_literal(literal)
            except ValueError as e:
                raise LiteralParseError(
                    f"couldn't parse default value from {literal} on field {name}: {e}", field=name, text=literal
                ) from e
            logger.debug("Field %r: default %r", name, work.default)

        description, override = extract_type_override(description)
        if override is not None:
            no_derive = True
            work = self._build_type(name, override, context, "type override")
            logger.debug("Field %r: definition replaced by type override %r", name, override)
        else:
            description, entries = extract_one_of(description)
            if entries is not None:
                work.one_of = [self._build_type(name, e, context, "`oneOf` type") for e in entries]
                logger.debug("Field %r: oneOf %r", name, entries)

        description, example = extract_example(description)
        if example is not None:
            work.examples = [example]

        description = remove_type_name(name, description)

        if self.strict and name:
            self._validate_strict(name, description)

        work.description = join_if_not_empty(" ", description, synthesized)
        work.html_description = strip_paragraph_tags(self.render(work.description))

        definition.adopt(work)
        return Meta(required=required, no_derive=no_derive)

    def handle_fields(
        self,
        fields: Iterable[Tuple[str, str, Definition]],
        collector: Optional[ValidationResult] = None,
    ) -> Tuple[List[Tuple[str, Meta]], ValidationResult]:
        """
        Run `handle_comment` over `(raw_name, comment, definition)` triples.

        Results are `(raw_name, meta)` pairs for the fields that succeeded, in
        input order; repeated raw names each keep their own entry.

        Comment errors are recorded on `collector` and the field is skipped
        (raised immediately in strict mode). InternalConsistencyError always
        propagates.
        """
        if collector is None:
            collector = ValidationResult()
        results: List[Tuple[str, Meta]] = []
        for raw_name, comment, definition in fields:
            try:
                results.append((raw_name, self.handle_comment(raw_name, comment, definition)))
            except CommentError as e:
                logger.warning("Skipping field %s: %s", raw_name, e)
                collector.report(e.field or raw_name, str(e), strict=self.strict, exc=e)
        return results, collector

    # --- Internals --- #

    def _build_type(self, name: str, text: str, context: str, what: str) -> Definition:
        try:
            expr = self.parse_type(text)
        except (ValueError, SyntaxError, RecursionError) as e:
            raise TypeExpressionError(f"couldn't parse {what} {text} on field {name}: {e}", field=name, text=text) from e
        try:
            return self.build_node(name, expr, context, False)
        except CommentError as e:
            e.field = e.field or name
            raise
        except RecursionError as e:
            raise TypeExpressionError(
                f"couldn't build {what} {text} on field {name}: nested too deeply", field=name, text=text
            ) from e

    @staticmethod
    def _validate_strict(name: str, description: str) -> None:
        if description == "":
            raise MalformedCommentError(f"no description on field {name}", field=name)
        if not description.endswith("."):
            raise MalformedCommentError(
                f"description should end with a dot on field {name}", field=name, text=description
            )


# --- Factory --- #

def build_generator(config: Optional[Dict[str, Any]] = None, **overrides: Any) -> Generator:
    """
    Build a `Generator` from configuration.

    Args:
        config:
            Pre-merged configuration. If omitted, `load_config()` is used.
        overrides:
            Generator fields (e.g. `strict`, `build_node`) taking precedence over config.
    """
    cfg = config or load_config()
    configure_logging(cfg)

    params: Dict[str, Any] = {
        "strict": bool(cfg.get("strict", False)),
        "build_node": SchemaNodeBuilder(prefix=cfg.get("definitions_prefix", DEFAULT_DEFINITIONS_PREFIX)),
    }
    params.update(overrides)
    return Generator(**params)

#!/usr/bin/env python3
"""
Purpose:
    Recognizes enum blocks in field comments, records the listed values on
    the Definition, and synthesizes a description fragment for them.

    Block shape:

        Possible values are:
        - `a`: first value.
        - `b`
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional

from docschema.core.constants import ENUM_BULLET_RE, ENUM_HEADER_RE
from docschema.core.errors import EnumCommentError
from docschema.core.schema.definition import Definition


@dataclass(frozen=True)
class EnumInformation:
    """Comment with the enum block removed, plus the synthesized fragment."""
    remaining_comment: str
    synthesized_comment: str


def handle_enum_comments(context: str, definition: Definition, comment: str) -> Optional[EnumInformation]:
    """
    Extract the first enum block from `comment`.

    Returns None when the comment has no enum header. Values are stored on
    `definition.enum` unless the caller already set them.

    Raises:
        EnumCommentError: header without bullets, or a bullet without a back-quoted value.
    """
    lines = comment.split("\n")
    start = _find_header(lines)
    if start is None:
        return None

    values: List[str] = []
    end = start + 1
    while end < len(lines) and lines[end].strip().startswith("-"):
        bullet = lines[end].strip()
        m = ENUM_BULLET_RE.match(bullet)
        if m is None:
            raise EnumCommentError(f"Malformed enum value line {bullet!r}", text=bullet)
        values.append(m.group(1))
        end += 1

    if not values:
        raise EnumCommentError(f"Enum block {lines[start].strip()!r} lists no values", text=lines[start])

    if definition.enum is None:
        definition.enum = list(values)

    remaining = "\n".join(lines[:start] + lines[end:])
    fragment = "Possible values are " + ", ".join(f"`{v}`" for v in values) + "."
    return EnumInformation(remaining_comment=remaining, synthesized_comment=fragment)


def _find_header(lines: List[str]) -> Optional[int]:
    for i, line in enumerate(lines):
        if ENUM_HEADER_RE.match(line.strip()):
            return i
    return None

#!/usr/bin/env python3
"""
Purpose:
    Exception types raised while interpreting field comments.

    User-input problems derive from `CommentError` (a `ValueError`) and only
    abort the field being processed. `InternalConsistencyError` signals a
    defect in the annotation grammar itself and must abort the whole run.
"""
from __future__ import annotations

from typing import Optional


class CommentError(ValueError):
    """Base class for problems caused by the content of a field comment."""

    def __init__(self, msg: str, *, field: str = "", text: Optional[str] = None) -> None:
        super().__init__(msg)
        self.field = field
        self.text = text


class MalformedCommentError(CommentError):
    """Strict-mode documentation rule violated (name prefix, empty or unterminated description)."""


class LiteralParseError(CommentError):
    """A back-quoted literal could not be parsed into a value."""


class TypeExpressionError(CommentError):
    """A back-quoted type expression could not be parsed or resolved."""


class EnumCommentError(CommentError):
    """An enum block inside a comment is malformed."""


class InternalConsistencyError(RuntimeError):
    """The annotation grammar produced an impossible match."""

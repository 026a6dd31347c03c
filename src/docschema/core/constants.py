#!/usr/bin/env python3
"""
Core constants used across docschema.

- Annotation grammar: compiled patterns for the clauses recognized in field comments.
- Defaults: reference prefix for named definitions and default text encoding.
"""

import re
from typing import Final

# --- docschema constants --- #

# Default text encoding
DEFAULT_TEXT_ENCODING: Final[str] = "utf-8"

# Prefix prepended to named type references when building `$ref` nodes
DEFAULT_DEFINITIONS_PREFIX: Final[str] = "#/definitions/"

# Kubernetes-style markers removed from descriptions
REQUIRED_MARKER: Final[str] = "+required"
OPTIONAL_MARKER: Final[str] = "+optional"


# --- Regular Expressions --- #
# Standalone requiredness lines (`+required` or `Required`)
PLUS_REQUIRED_RE: re.Pattern[str] = re.compile(r"^\+required$", re.MULTILINE)
REQUIRED_RE: re.Pattern[str] = re.compile(r"^Required$", re.MULTILINE)

# Whole marker lines, newline included, removed before newlines are collapsed
MARKER_LINE_RE: re.Pattern[str] = re.compile(r"^(?:\+required|\+optional|Required)(?:\n|$)", re.MULTILINE)

# "<prefix>Defaults to `<literal>`"
DEFAULTS_RE: re.Pattern[str] = re.compile(r"(.*)Defaults to `(.*)`")

# "<prefix>For example: `<text>`"
EXAMPLE_RE: re.Pattern[str] = re.compile(r"(.*)For example: `(.*)`")

# "<prefix>Schema type is `<expr>`"
TYPE_OVERRIDE_RE: re.Pattern[str] = re.compile(r"(.*)Schema type is `(.*)`")

# "<prefix>Schema type is one of `<expr>`, `<expr>` ..."
ONE_OF_ENTRY: Final[str] = r"`([^`]+)`,?[ \t]*"
ONE_OF_ENTRY_RE: re.Pattern[str] = re.compile(ONE_OF_ENTRY)
TYPE_ONE_OF_RE: re.Pattern[str] = re.compile(r"(.*)Schema type is one of ((?:" + ONE_OF_ENTRY + r")*)")

# Paragraph tags dropped from rendered HTML descriptions
P_TAGS_RE: re.Pattern[str] = re.compile(r"(<p>)|(</p>)")

# Enum blocks: header line followed by "- `value`[: description]" bullets
ENUM_HEADER_RE: re.Pattern[str] = re.compile(r"^Possible values(?: are)?:$")
ENUM_BULLET_RE: re.Pattern[str] = re.compile(r"^- `([^`]+)`(?::\s*(.*))?$")


# --- Runtime guard --- #
def validate_constants():
    """
    Ensure constants are valid at runtime.
    """
    if ONE_OF_ENTRY_RE.groups != 1:
        raise RuntimeError(
            f"ONE_OF_ENTRY must capture exactly one group, got {ONE_OF_ENTRY_RE.groups}"
        )

validate_constants()

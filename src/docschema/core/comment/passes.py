#!/usr/bin/env python3
"""
Purpose:
    Individual text passes applied to a field comment. Each extractor returns
    the remaining description plus what it consumed (or None when its clause
    is absent). Order of application matters and is owned by the Generator.
"""
from __future__ import annotations

import re
from typing import List, Optional, Tuple

from docschema.core.constants import (
    DEFAULTS_RE,
    EXAMPLE_RE,
    MARKER_LINE_RE,
    ONE_OF_ENTRY_RE,
    OPTIONAL_MARKER,
    PLUS_REQUIRED_RE,
    REQUIRED_MARKER,
    REQUIRED_RE,
    TYPE_ONE_OF_RE,
    TYPE_OVERRIDE_RE,
)
from docschema.core.errors import InternalConsistencyError


# --- Requiredness / tags --- #

def is_required(comment: str) -> bool:
    """True if a line is exactly `+required` or exactly `Required`."""
    return bool(PLUS_REQUIRED_RE.search(comment) or REQUIRED_RE.search(comment))


def strip_tags(comment: str) -> str:
    """Remove marker lines and `+required`/`+optional` tokens, turn newlines into spaces, and trim."""
    text = MARKER_LINE_RE.sub("", comment)
    text = text.replace(REQUIRED_MARKER, "").replace(OPTIONAL_MARKER, "")
    return text.replace("\n", " ").strip()


# --- Clause extractors --- #

def extract_default(description: str) -> Tuple[str, Optional[str]]:
    """`... Defaults to `x`` -> (prefix, "x")"""
    return _extract(DEFAULTS_RE, description)


def extract_type_override(description: str) -> Tuple[str, Optional[str]]:
    """`... Schema type is `T`` -> (prefix, "T")"""
    return _extract(TYPE_OVERRIDE_RE, description)


def extract_one_of(description: str) -> Tuple[str, Optional[List[str]]]:
    """
    `... Schema type is one of `A`, `B`` -> (prefix, ["A", "B"])

    Raises:
        InternalConsistencyError: the clause matched but no entries were found.
    """
    m = TYPE_ONE_OF_RE.search(description)
    if m is None:
        return description, None
    entries = ONE_OF_ENTRY_RE.findall(m.group(2))
    if not entries:
        raise InternalConsistencyError(
            f"oneOf clause matched without entries in {description!r}"
        )
    return m.group(1).strip(), entries


def extract_example(description: str) -> Tuple[str, Optional[str]]:
    """`... For example: `x`` -> (prefix, "x")"""
    return _extract(EXAMPLE_RE, description)


# --- Prose cleanup --- #

def remove_type_name(name: str, description: str) -> str:
    """
    Drop a leading "<name> [*aside* ][is [the ]|are [the ]|lists ]" paraphrase,
    keeping the italic aside.
    """
    if not name:
        return description
    pattern = "^" + re.escape(name) + r" (\*.*\* )?((is (the )?)|(are (the )?)|(lists ))?"
    return re.sub(pattern, lambda m: m.group(1) or "", description, count=1)


def join_if_not_empty(sep: str, *elems: str) -> str:
    return sep.join(e for e in elems if e)


# --- Internals --- #

def _extract(pattern: re.Pattern[str], description: str) -> Tuple[str, Optional[str]]:
    m = pattern.search(description)
    if m is None:
        return description, None
    return m.group(1).strip(), m.group(2)

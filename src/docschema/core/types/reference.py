#!/usr/bin/env python3
"""
Purpose:
    Splits raw declaration names (which may be qualified references) into a
    resolution context and the plain field name.
"""
from __future__ import annotations

from typing import Tuple

from docschema.core.constants import DEFAULT_DEFINITIONS_PREFIX


def interpret_reference(raw_name: str) -> Tuple[str, str]:
    """
    Return `(context, name)` for a raw declaration name.

    Examples:
        "Name"                      -> ("", "Name")
        "pkg.Name"                  -> ("pkg", "Name")
        "#/definitions/pkg.sub.Name" -> ("pkg.sub", "Name")
    """
    s = (raw_name or "").strip()
    if s.startswith(DEFAULT_DEFINITIONS_PREFIX):
        s = s[len(DEFAULT_DEFINITIONS_PREFIX):]
    context, _, name = s.rpartition(".")
    return context, name

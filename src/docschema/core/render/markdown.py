#!/usr/bin/env python3
"""
Purpose:
    Markdown-to-HTML rendering for descriptions (no extensions enabled).
"""
from __future__ import annotations

import markdown

from docschema.core.constants import P_TAGS_RE


def render_markdown(text: str) -> str:
    """Render `text` with plain Markdown (no extensions)."""
    return markdown.markdown(text, extensions=[])


def strip_paragraph_tags(html: str) -> str:
    """Drop `<p>`/`</p>` wrappers and surrounding whitespace."""
    return P_TAGS_RE.sub("", html).strip()

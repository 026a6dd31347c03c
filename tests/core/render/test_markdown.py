#!/usr/bin/env python3
import pytest

from docschema.core.render.markdown import render_markdown, strip_paragraph_tags


def test_render_markdown_wraps_paragraph():
    assert render_markdown("*a* and `b`") == "<p><em>a</em> and <code>b</code></p>"


def test_render_markdown_empty():
    assert render_markdown("") == ""


@pytest.mark.parametrize("html,expected", [
    ("<p>x</p>", "x"),
    ("  <p>x</p>\n", "x"),
    ("<p>a</p>\n<p>b</p>", "a\nb"),
    ("<em>x</em>", "<em>x</em>"),
])
def test_strip_paragraph_tags(html, expected):
    assert strip_paragraph_tags(html) == expected

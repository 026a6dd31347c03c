#!/usr/bin/env python3
import pytest

from docschema.core.comment.enums import EnumInformation, handle_enum_comments
from docschema.core.errors import EnumCommentError
from docschema.core.schema.definition import Definition


def test_no_enum_block_returns_none():
    d = Definition()
    assert handle_enum_comments("", d, "Foo is the bar.") is None
    assert d.enum is None


def test_enum_block_extracted():
    d = Definition(type="string")
    comment = "Mode is the mode.\nPossible values are:\n- `fast`: go fast.\n- `slow`\nTrailing text."
    info = handle_enum_comments("pkg", d, comment)
    assert info == EnumInformation(
        remaining_comment="Mode is the mode.\nTrailing text.",
        synthesized_comment="Possible values are `fast`, `slow`.",
    )
    assert d.enum == ["fast", "slow"]


def test_short_header_accepted():
    d = Definition()
    info = handle_enum_comments("", d, "Possible values:\n- `a`")
    assert info is not None
    assert info.remaining_comment == ""
    assert d.enum == ["a"]


def test_existing_enum_values_kept():
    d = Definition(enum=[1, 2])
    handle_enum_comments("", d, "Possible values are:\n- `a`")
    assert d.enum == [1, 2]


def test_header_without_values_raises():
    with pytest.raises(EnumCommentError, match="lists no values"):
        handle_enum_comments("", Definition(), "Possible values are:\nnext line")


def test_bullet_without_backquoted_value_raises():
    with pytest.raises(EnumCommentError, match="Malformed enum value line") as exc_info:
        handle_enum_comments("", Definition(), "Possible values are:\n- `a`\n- b")
    assert exc_info.value.text == "- b"

#!/usr/bin/env python3
import pytest

from docschema.core.errors import LiteralParseError
from docschema.core.validation import ValidationResult


def test_empty_result_is_valid():
    r = ValidationResult()
    assert r.is_valid()
    assert len(r) == 0
    assert repr(r) == "<ValidationResult valid=True errors=0>"


def test_report_non_strict_collects():
    r = ValidationResult()
    r.report("Foo", "bad default")
    r.report("Foo", "bad type")
    r.report("", "orphan")
    assert not r.is_valid()
    assert r.errors == ["Foo: bad default", "Foo: bad type", "orphan"]
    assert list(r) == r.errors
    assert r.fields() == ["Foo", ""]


def test_report_strict_raises_given_exception():
    err = LiteralParseError("boom", field="Foo", text="x")
    with pytest.raises(LiteralParseError) as exc_info:
        ValidationResult().report("Foo", "boom", strict=True, exc=err)
    assert exc_info.value is err


def test_report_strict_defaults_to_value_error():
    r = ValidationResult()
    with pytest.raises(ValueError, match="boom"):
        r.report("Foo", "boom", strict=True)
    assert r.is_valid()

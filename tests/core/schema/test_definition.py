#!/usr/bin/env python3
import pytest
from pydantic import ValidationError

from docschema.core.schema.definition import Definition, Meta


# --- Construction --- #

def test_defaults():
    d = Definition()
    assert d.type is None
    assert d.default is None
    assert d.one_of == []
    assert d.examples == []
    assert d.description == ""
    assert d.html_description == ""


def test_aliases_accepted_on_input():
    d = Definition(**{"$ref": "#/definitions/X", "oneOf": [{"type": "string"}]})
    assert d.ref == "#/definitions/X"
    assert d.one_of == [Definition(type="string")]


def test_extra_keys_forbidden():
    with pytest.raises(ValidationError):
        Definition(unknown="x")  # type: ignore[call-arg]


def test_assignment_is_validated():
    d = Definition()
    with pytest.raises(ValidationError):
        d.examples = "not-a-list"  # type: ignore[assignment]


# --- adopt --- #

def test_adopt_overwrites_every_field():
    d = Definition(type="string", enum=["a"], description="old")
    d.adopt(Definition(**{"$ref": "#/definitions/T"}))
    assert d.ref == "#/definitions/T"
    assert d.type is None
    assert d.enum is None
    assert d.description == ""


# --- Serialization --- #

def test_to_json_schema_uses_aliases_and_prunes_empty():
    d = Definition(
        type="array",
        items=Definition(type="string"),
        one_of=[Definition(**{"$ref": "#/definitions/A"})],
        description="Things.",
        html_description="Things.",
    )
    assert d.to_json_schema() == {
        "type": "array",
        "items": {"type": "string"},
        "oneOf": [{"$ref": "#/definitions/A"}],
        "description": "Things.",
        "htmlDescription": "Things.",
    }


@pytest.mark.parametrize("default", [0, "", False, []])
def test_to_json_schema_keeps_falsy_defaults(default):
    assert Definition(type="integer", default=default).to_json_schema() == {"type": "integer", "default": default}


def test_to_json_schema_additional_properties():
    d = Definition(type="object", additional_properties=Definition(type="integer"))
    assert d.to_json_schema() == {"type": "object", "additionalProperties": {"type": "integer"}}


# --- Meta --- #

def test_meta_defaults_and_frozen():
    m = Meta()
    assert m.required is False and m.no_derive is False
    with pytest.raises(Exception):
        m.required = True  # type: ignore[misc]

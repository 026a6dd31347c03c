#!/usr/bin/env python3
"""
Purpose:
    Implements the Definition model (a JSON-Schema-like node describing one
    field) and the Meta record returned alongside it when a field comment is
    interpreted.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field


# --- Model --- #

class Definition(BaseModel):
    """
    Schema node for one field.

    Type information (`type`, `ref`, `items`, ...) is usually filled in by the
    caller from the declaration; `handle_comment` then adds what the comment
    says (default, oneOf, examples, description) or replaces the node entirely
    when the comment overrides the type.

    Serialized keys follow JSON Schema spelling (`$ref`, `oneOf`,
    `additionalProperties`, `htmlDescription`).
    """

    model_config = ConfigDict(validate_assignment=True, extra="forbid", populate_by_name=True)

    # Type information
    type: Optional[str] = Field(default=None, description="JSON type name.")
    ref: Optional[str] = Field(default=None, alias="$ref", description="Reference to a named definition.")
    format: Optional[str] = Field(default=None, description="Format hint for string types.")
    nullable: Optional[bool] = Field(default=None, description="Whether null is accepted.")
    items: Optional[Definition] = Field(default=None, description="Element schema for arrays.")
    additional_properties: Optional[Definition] = Field(
        default=None,
        alias="additionalProperties",
        description="Value schema for maps.",
    )
    enum: Optional[List[Any]] = Field(default=None, description="Allowed values.")

    # Comment-derived
    default: Optional[Any] = Field(default=None, description="Default value.")
    one_of: List[Definition] = Field(default_factory=list, alias="oneOf", description="Alternative schemas.")
    examples: List[str] = Field(default_factory=list, description="Illustrative values.")
    description: str = Field(default="", description="Plain-text description.")
    html_description: str = Field(default="", alias="htmlDescription", description="HTML description.")

    def adopt(self, other: Definition) -> None:
        """Overwrite every field of this node with the values of `other`."""
        for name in type(self).model_fields:
            setattr(self, name, getattr(other, name))

    def to_json_schema(self) -> Dict[str, Any]:
        """Alias-keyed dict without unset or empty entries (nested nodes included)."""
        return _prune(self.model_dump(by_alias=True, exclude_none=True))


@dataclass(frozen=True)
class Meta:
    """
    Annotation metadata that does not live on the Definition.

    - required: a `+required` / `Required` marker line was present
    - no_derive: the comment overrides the type; callers must not re-derive
      the schema from the declared type
    """
    required: bool = False
    no_derive: bool = False


# --- Internals --- #

def _prune(data: Dict[str, Any]) -> Dict[str, Any]:
    out: Dict[str, Any] = {}
    for k, v in data.items():
        if k == "default":
            out[k] = v
        elif isinstance(v, dict):
            out[k] = _prune(v)
        elif isinstance(v, list) and v and all(isinstance(e, dict) for e in v):
            out[k] = [_prune(e) for e in v]
        elif v not in ("", []):
            out[k] = v
    return out


# --- Forward-Ref Resolution --- #
Definition.model_rebuild()

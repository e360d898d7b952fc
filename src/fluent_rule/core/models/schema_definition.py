"""
Models for declarative rule schemas read from YAML.
"""

from pydantic import BaseModel, Field
from typing import Any, List


class RuleDefinition(BaseModel):
    """
    One rule entry under a field.

    Attributes:
        name: Rule name ("required", "between", "requiredUnless", ...)
        args: Positional rule arguments, serialized in order
        message: Optional custom message for this rule
    """

    name: str = Field(..., min_length=1)
    args: List[Any] = Field(default_factory=list)
    message: str | None = None


class FieldDefinition(BaseModel):
    """
    Declaration of a single field.

    Attributes:
        attribute: Optional display label
        rules: Rules in the order they are applied
    """

    attribute: str | None = None
    rules: List[RuleDefinition] = Field(default_factory=list)

    class Config:
        json_schema_extra = {
            "example": {
                "attribute": "User name",
                "rules": [
                    {"name": "required"},
                    {"name": "between", "args": [5, 15]},
                    {"name": "unique", "args": ["users", "username"], "message": "Username is taken"}
                ]
            }
        }

"""
RuleSchema model: one snapshot of the rules, messages and attributes of a schema.
"""

from pydantic import BaseModel, Field
from typing import Dict, List


class RuleSchema(BaseModel):
    """
    The three mappings a validation engine consumes, captured together.

    Attributes:
        rules: Field name -> ordered rule-strings ("required", "between:5,15")
        messages: "field.rule" -> custom message
        attributes: Field name -> display label
    """

    rules: Dict[str, List[str]] = Field(default_factory=dict)
    messages: Dict[str, str] = Field(default_factory=dict)
    attributes: Dict[str, str] = Field(default_factory=dict)

    def field_names(self) -> List[str]:
        """Fields that carry rules, in declaration order."""
        return list(self.rules)

    def to_dict(self) -> Dict[str, dict]:
        return self.model_dump()

    def to_json(self, indent: int | None = 2) -> str:
        return self.model_dump_json(indent=indent)

    class Config:
        json_schema_extra = {
            "example": {
                "rules": {
                    "username": ["required", "between:5,15"],
                    "email": ["required", "email", "unique:users,email"]
                },
                "messages": {
                    "username.required": "Username is required"
                },
                "attributes": {
                    "email": "E-mail address"
                }
            }
        }

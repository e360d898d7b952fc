"""
Data models for fluent-rule.

All models use Pydantic for runtime validation and serialization.
"""

from .rule_schema import RuleSchema
from .schema_definition import FieldDefinition, RuleDefinition

__all__ = [
    "RuleSchema",
    "FieldDefinition",
    "RuleDefinition",
]

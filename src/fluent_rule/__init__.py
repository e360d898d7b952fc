"""
fluent-rule: build validation rule, message and attribute mappings fluently.
"""

from fluent_rule.core.models import RuleSchema
from fluent_rule.core.rules import (
    MessageBuilder,
    RuleBuilder,
    RuleContext,
    RuleSchemaLoader,
    SchemaDefinitionError,
)

__version__ = "1.0.0"

__all__ = [
    "RuleBuilder",
    "MessageBuilder",
    "RuleContext",
    "RuleSchema",
    "RuleSchemaLoader",
    "SchemaDefinitionError",
]

"""
Fluent rule builders and declarative schema loading.
"""

from .context import RuleContext
from .message_builder import MessageBuilder
from .rule_builder import BUILTIN_RULES, RuleBuilder
from .schema_loader import RuleSchemaLoader, SchemaDefinitionError

__all__ = [
    "RuleBuilder",
    "MessageBuilder",
    "RuleContext",
    "RuleSchemaLoader",
    "SchemaDefinitionError",
    "BUILTIN_RULES",
]

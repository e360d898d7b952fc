"""
Storage for accumulated rules, messages and attributes.

A builder writes into a RuleContext. By default every builder owns its
own context; pass one context to several builders to let them
accumulate into the same schema.
"""

from fluent_rule.observability.logger import get_logger

logger = get_logger(__name__)


class RuleContext:
    """
    Caller-owned storage of the three mappings an engine consumes.

    Attributes:
        rules: field name -> ordered list of rule-strings
        messages: "field.rule" -> message text
        attributes: field name -> display label

    Not thread-safe. A shared context must be fully built and drained
    before it is reused for another schema.
    """

    def __init__(self):
        self.rules: dict[str, list[str]] = {}
        self.messages: dict[str, str] = {}
        self.attributes: dict[str, str] = {}

    def drain_rules(self) -> dict[str, list[str]]:
        """Return a copy of the rule mapping and reset it to empty."""
        rules = {field: list(field_rules) for field, field_rules in self.rules.items()}
        self.rules = {}
        logger.debug("Drained rules", extra={"field_count": len(rules)})
        return rules

    def drain_messages(self) -> dict[str, str]:
        """Return a copy of the message mapping and reset it to empty."""
        messages = dict(self.messages)
        self.messages = {}
        logger.debug("Drained messages", extra={"message_count": len(messages)})
        return messages

    def drain_attributes(self) -> dict[str, str]:
        """Return a copy of the attribute mapping and reset it to empty."""
        attributes = dict(self.attributes)
        self.attributes = {}
        logger.debug("Drained attributes", extra={"attribute_count": len(attributes)})
        return attributes

    def clear(self) -> None:
        """Discard everything accumulated so far."""
        self.rules = {}
        self.messages = {}
        self.attributes = {}

    def is_empty(self) -> bool:
        return not (self.rules or self.messages or self.attributes)

    def __repr__(self) -> str:
        return (
            f"RuleContext(fields={len(self.rules)}, "
            f"messages={len(self.messages)}, attributes={len(self.attributes)})"
        )

"""
Declarative rule schemas.

Loads field declarations from YAML files and replays them through a
RuleBuilder, so a schema can live in configuration instead of code.
"""

from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError

from fluent_rule.core.models import FieldDefinition, RuleDefinition, RuleSchema
from fluent_rule.observability.logger import get_logger

from .formatting import parse_rule_string
from .rule_builder import RuleBuilder

logger = get_logger(__name__)


class SchemaDefinitionError(ValueError):
    """Raised when a rule schema file is malformed."""
    pass


class RuleSchemaLoader:
    """
    Loads a rule schema from a YAML file.

    Expected YAML format:
    ```yaml
    fields:
      username:
        attribute: User name
        rules:
          - required
          - "between:5,15"
          - name: unique
            args: [users, username]
            message: Username is taken

      email:
        - required
        - email
    ```

    A field maps either to a list of rules or to a mapping with optional
    ``attribute`` and ``rules`` keys. A rule is a rule-string or a mapping
    with ``name`` and optional ``args`` and ``message``.
    """

    def __init__(self, schema_path: str | Path):
        """
        Initialize the schema loader.

        Args:
            schema_path: Path to the YAML schema file
        """
        self.schema_path = Path(schema_path)
        if not self.schema_path.exists():
            raise FileNotFoundError(f"Rule schema file not found: {schema_path}")

    def load_definitions(self) -> dict[str, FieldDefinition]:
        """
        Parse the YAML file into field definitions, in file order.

        Raises:
            SchemaDefinitionError: If YAML is invalid or the structure is wrong
        """
        try:
            with open(self.schema_path) as f:
                config = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise SchemaDefinitionError(f"Invalid YAML in {self.schema_path}: {e}") from e

        if not isinstance(config, dict) or "fields" not in config:
            raise SchemaDefinitionError("Schema file must contain a 'fields' section")

        fields = config["fields"]
        if not isinstance(fields, dict):
            raise SchemaDefinitionError("'fields' must map field names to rule declarations")

        return {
            str(field_name): self._parse_field(str(field_name), field_def)
            for field_name, field_def in fields.items()
        }

    def load_into(self, builder: RuleBuilder) -> RuleBuilder:
        """
        Replay the schema into an existing builder without draining it.

        The schema is built in a scratch builder first and merged only once
        every rule has been applied, so a bad schema leaves ``builder``
        untouched.

        Returns:
            The same builder, for chaining

        Raises:
            SchemaDefinitionError: If the file is malformed or a rule gets
                the wrong number of arguments
        """
        definitions = self.load_definitions()
        scratch = RuleBuilder()

        for field_name, definition in definitions.items():
            scratch.add(field_name, definition.attribute)
            for rule in definition.rules:
                try:
                    scratch.apply(rule.name, *rule.args)
                except TypeError as e:
                    raise SchemaDefinitionError(
                        f"Bad arguments for rule '{rule.name}' on field '{field_name}': {e}"
                    ) from e
                if rule.message is not None:
                    scratch.message(rule.message)

        builder.context.rules.update(scratch.context.rules)
        builder.context.messages.update(scratch.context.messages)
        builder.context.attributes.update(scratch.context.attributes)
        if scratch.current_target is not None:
            builder.current_target = scratch.current_target
            builder.current_rule_name = scratch.current_rule_name

        logger.info(
            f"Loaded {len(definitions)} field(s) from {self.schema_path}",
            extra={"schema_path": str(self.schema_path), "field_count": len(definitions)},
        )
        return builder

    def load(self) -> RuleSchema:
        """Load the schema into a fresh builder and return the drained result."""
        return self.load_into(RuleBuilder()).get_schema()

    def _parse_field(self, field_name: str, field_def: Any) -> FieldDefinition:
        if field_def is None:
            return FieldDefinition()

        if isinstance(field_def, list):
            field_def = {"rules": field_def}

        if not isinstance(field_def, dict):
            raise SchemaDefinitionError(
                f"Field '{field_name}' must be a list of rules or a mapping"
            )

        raw_rules = field_def.get("rules") or []
        if not isinstance(raw_rules, list):
            raise SchemaDefinitionError(f"Rules for field '{field_name}' must be a list")

        try:
            return FieldDefinition(
                attribute=field_def.get("attribute"),
                rules=[self._parse_rule(field_name, rule_def) for rule_def in raw_rules],
            )
        except ValidationError as e:
            raise SchemaDefinitionError(f"Invalid definition for field '{field_name}': {e}") from e

    def _parse_rule(self, field_name: str, rule_def: Any) -> RuleDefinition:
        """
        Parse a single rule entry.

        Args:
            field_name: The field this rule belongs to
            rule_def: Rule-string or mapping from YAML

        Raises:
            SchemaDefinitionError: If the entry has no rule name
        """
        if isinstance(rule_def, str):
            name, args = parse_rule_string(rule_def)
            if not name:
                raise SchemaDefinitionError(f"Empty rule on field '{field_name}'")
            return RuleDefinition(name=name, args=args)

        if not isinstance(rule_def, dict) or not rule_def.get("name"):
            raise SchemaDefinitionError(f"Rule on field '{field_name}' is missing 'name'")

        args = rule_def.get("args")
        if args is None:
            args = []
        if not isinstance(args, list):
            args = [args]

        return RuleDefinition(name=rule_def["name"], args=args, message=rule_def.get("message"))

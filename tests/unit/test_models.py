"""
Unit tests for pydantic models.
"""

import json

import pytest
from pydantic import ValidationError

from fluent_rule.core.models import FieldDefinition, RuleDefinition, RuleSchema

pytestmark = pytest.mark.unit


class TestRuleSchema:
    """Tests for RuleSchema"""

    def test_defaults_are_empty(self):
        schema = RuleSchema()

        assert schema.rules == {}
        assert schema.messages == {}
        assert schema.attributes == {}

    def test_to_dict(self):
        schema = RuleSchema(
            rules={"email": ["required", "email"]},
            messages={"email.email": "Invalid"},
            attributes={"email": "E-mail"},
        )

        assert schema.to_dict() == {
            "rules": {"email": ["required", "email"]},
            "messages": {"email.email": "Invalid"},
            "attributes": {"email": "E-mail"},
        }

    def test_to_json(self):
        schema = RuleSchema(rules={"age": ["between:5,15"]})

        assert json.loads(schema.to_json()) == {
            "rules": {"age": ["between:5,15"]},
            "messages": {},
            "attributes": {},
        }

    def test_field_names_keep_order(self):
        schema = RuleSchema(rules={"b": [], "a": ["required"]})

        assert schema.field_names() == ["b", "a"]


class TestDefinitions:
    """Tests for RuleDefinition and FieldDefinition"""

    def test_rule_definition_defaults(self):
        rule = RuleDefinition(name="required")

        assert rule.args == []
        assert rule.message is None

    def test_rule_definition_requires_name(self):
        with pytest.raises(ValidationError):
            RuleDefinition(name="")

    def test_field_definition(self):
        field = FieldDefinition(
            attribute="User name",
            rules=[{"name": "between", "args": [5, 15]}],
        )

        assert field.rules[0].name == "between"
        assert field.rules[0].args == [5, 15]

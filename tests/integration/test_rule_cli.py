"""
Integration tests for the rule schema CLI.
"""

import json

import pytest

from fluent_rule.cli.rule_cli import main
from fluent_rule.core.rules import BUILTIN_RULES

pytestmark = pytest.mark.integration


EXPECTED_SIGNUP = {
    "rules": {
        "username": ["required", "between:5,15", "unique:users,username"],
        "email": ["required", "email", "unique:users,email,NULL"],
        "password": ["required", "confirmed", r"regex:^(?=.*\d).{8,}$"],
        "role": ["in:admin,editor,viewer", "required_unless:plan,free"],
    },
    "messages": {
        "username.unique": "Username is taken",
        "password.regex": "Password needs a digit",
    },
    "attributes": {
        "username": "User name",
    },
}


class TestCompileCommand:
    """Tests for the compile command"""

    def test_compile_to_stdout(self, fixtures_dir, capsys):
        exit_code = main(["compile", "--schema", str(fixtures_dir / "signup.yaml")])

        assert exit_code == 0
        assert json.loads(capsys.readouterr().out) == EXPECTED_SIGNUP

    def test_compile_to_file(self, fixtures_dir, tmp_path):
        output = tmp_path / "build" / "signup.json"

        exit_code = main([
            "compile",
            "--schema", str(fixtures_dir / "signup.yaml"),
            "--output", str(output),
            "--indent", "0",
        ])

        assert exit_code == 0
        content = output.read_text()
        assert "\n" not in content.strip()
        assert json.loads(content) == EXPECTED_SIGNUP

    def test_compile_is_repeatable(self, fixtures_dir, capsys):
        """Test a second run starts from empty storage"""
        schema = str(fixtures_dir / "signup.yaml")
        main(["compile", "--schema", schema])
        first = json.loads(capsys.readouterr().out)
        main(["compile", "--schema", schema])
        second = json.loads(capsys.readouterr().out)

        assert first == second

    def test_missing_schema(self, tmp_path):
        assert main(["compile", "--schema", str(tmp_path / "nope.yaml")]) == 1

    def test_invalid_schema(self, write_schema):
        path = write_schema("rules: {}")

        assert main(["compile", "--schema", str(path)]) == 1


class TestDirectivesCommand:
    """Tests for the directives command"""

    def test_lists_builtin_rules(self, capsys):
        assert main(["directives"]) == 0

        lines = capsys.readouterr().out.split()
        assert lines == sorted(BUILTIN_RULES)
        assert "unique" in lines
        assert "array" in lines


def test_no_command_prints_help(capsys):
    assert main([]) == 1
    assert "compile" in capsys.readouterr().out

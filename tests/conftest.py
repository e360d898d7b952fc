"""
Pytest configuration and fixtures for fluent-rule tests
"""
from pathlib import Path

import pytest

from fluent_rule.core.rules import RuleBuilder, RuleContext


FIXTURES_DIR = Path(__file__).parent / "integration" / "fixtures"


def pytest_configure(config):
    """Configure pytest with custom markers"""
    config.addinivalue_line(
        "markers", "unit: Unit tests with no external resources"
    )
    config.addinivalue_line(
        "markers", "integration: Tests that exercise files on disk and the CLI"
    )


@pytest.fixture
def builder() -> RuleBuilder:
    """A builder with its own empty context"""
    return RuleBuilder()


@pytest.fixture
def shared_context() -> RuleContext:
    """A context meant to be handed to several builders"""
    return RuleContext()


@pytest.fixture
def fixtures_dir() -> Path:
    return FIXTURES_DIR


@pytest.fixture
def write_schema(tmp_path):
    """
    Write YAML text to a temporary schema file

    Returns:
        Callable taking the YAML text and returning the file path
    """
    def _write(content: str, name: str = "schema.yaml") -> Path:
        path = tmp_path / name
        path.write_text(content)
        return path

    return _write

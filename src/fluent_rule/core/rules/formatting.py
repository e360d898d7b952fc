"""
Rule-string formatting.

A rule-string is either a bare rule name (``required``) or a name
followed by a colon and a comma-separated argument list
(``between:5,15``). These helpers are the only place arguments get
turned into text.
"""

import re
from typing import Any

NULL_TOKEN = "NULL"

# Rules whose single argument may legitimately contain commas.
UNSPLIT_RULES = frozenset({"regex", "not_regex"})

_CAMEL_BOUNDARY = re.compile(r"(?<=[a-z0-9])(?=[A-Z])|(?<=[A-Z])(?=[A-Z][a-z])")
_SEPARATORS = re.compile(r"[\s\-]+")
_REPEATED_UNDERSCORES = re.compile(r"_{2,}")


def format_argument(value: Any) -> str:
    """
    Serialize one rule argument.

    ``None`` becomes the literal ``NULL`` token and booleans become
    ``1``/``0``; anything else goes through ``str()`` untouched.
    """
    if value is None:
        return NULL_TOKEN
    if isinstance(value, bool):
        return "1" if value else "0"
    return str(value)


def join_arguments(values) -> str:
    """Comma-join arguments in the order given."""
    return ",".join(format_argument(value) for value in values)


def format_rule(name: str, *args: Any) -> str:
    """
    Build a rule-string from a rule name and its arguments.

    Args:
        name: Bare rule name
        *args: Arguments, serialized in call order

    Returns:
        ``name`` when there are no arguments, ``name:a,b,...`` otherwise

    Examples:
        >>> format_rule("required")
        'required'
        >>> format_rule("between", 5, 15)
        'between:5,15'
    """
    if not args:
        return name
    return f"{name}:{join_arguments(args)}"


def flatten_values(values: tuple) -> list[Any]:
    """
    Accept either a single list/tuple or varargs for list-taking rules.

    ``in_(["a", "b"])`` and ``in_("a", "b")`` both yield ``["a", "b"]``.
    """
    if len(values) == 1 and isinstance(values[0], (list, tuple)):
        return list(values[0])
    return list(values)


def snake_case(name: str) -> str:
    """
    Normalize a rule name to lower-case, underscore-separated form.

    Examples:
        >>> snake_case("requiredUnless")
        'required_unless'
        >>> snake_case("starts-with")
        'starts_with'
        >>> snake_case("already_snake")
        'already_snake'
    """
    name = _SEPARATORS.sub("_", name.strip())
    name = _CAMEL_BOUNDARY.sub("_", name)
    return _REPEATED_UNDERSCORES.sub("_", name).lower()


def rule_name(rule: str) -> str:
    """Strip the parameter suffix from a rule-string (``between:5,15`` -> ``between``)."""
    return rule.split(":", 1)[0]


def parse_rule_string(rule: str) -> tuple[str, list[str]]:
    """
    Split a rule-string into its name and raw string arguments.

    Arguments of ``regex`` rules are kept whole, since a pattern may
    contain commas.

    Examples:
        >>> parse_rule_string("between:5,15")
        ('between', ['5', '15'])
        >>> parse_rule_string("regex:^[a,b]+$")
        ('regex', ['^[a,b]+$'])
    """
    name, sep, raw_args = rule.strip().partition(":")
    name = name.strip()
    if not sep or raw_args == "":
        return name, []
    if name in UNSPLIT_RULES:
        return name, [raw_args]
    return name, raw_args.split(",")

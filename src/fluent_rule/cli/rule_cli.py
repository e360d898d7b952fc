"""
Command-line interface for rule schemas.

Usage:
    python -m fluent_rule.cli.rule_cli compile --schema <schema.yaml> [options]
    python -m fluent_rule.cli.rule_cli directives
"""

import argparse
import sys
from pathlib import Path

from fluent_rule.core.rules import BUILTIN_RULES, RuleSchemaLoader, SchemaDefinitionError
from fluent_rule.observability.logger import get_logger, log_operation


logger = get_logger(__name__)


def compile_command(args) -> int:
    """
    Compile a YAML rule schema into the JSON mappings an engine consumes.

    Args:
        args: Command-line arguments

    Returns:
        Process exit code
    """
    try:
        with log_operation("Compiling rule schema", logger=logger, schema_path=args.schema):
            schema = RuleSchemaLoader(args.schema).load()
    except FileNotFoundError as e:
        logger.error(str(e))
        return 1
    except SchemaDefinitionError as e:
        logger.error(f"Invalid rule schema: {e}")
        return 1

    output = schema.to_json(indent=args.indent)

    if args.output:
        output_path = Path(args.output)
        output_path.parent.mkdir(parents=True, exist_ok=True)
        output_path.write_text(output + "\n")
        logger.info(f"Wrote compiled schema to {output_path}")
    else:
        print(output)

    return 0


def directives_command(args) -> int:
    """Print the built-in rule names, one per line."""
    for rule in sorted(BUILTIN_RULES):
        print(rule)
    return 0


def main(argv: list[str] | None = None) -> int:
    """Main CLI entry point."""
    parser = argparse.ArgumentParser(
        description="Compile declarative rule schemas for a validation engine",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Print compiled rules, messages and attributes as JSON
  python -m fluent_rule.cli.rule_cli compile --schema schemas/signup.yaml

  # Write to a file with compact output
  python -m fluent_rule.cli.rule_cli compile --schema schemas/signup.yaml \\
      --output build/signup.json --indent 0

  # List built-in rule names
  python -m fluent_rule.cli.rule_cli directives
        """
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    compile_parser = subparsers.add_parser("compile", help="Compile a YAML rule schema")
    compile_parser.add_argument(
        "--schema",
        required=True,
        help="Path to the YAML rule schema"
    )
    compile_parser.add_argument(
        "--output",
        help="Write JSON here instead of stdout"
    )
    compile_parser.add_argument(
        "--indent",
        type=int,
        default=2,
        help="JSON indentation (default: 2, 0 for compact)"
    )

    subparsers.add_parser("directives", help="List built-in rule names")

    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        return 1

    if args.command == "compile":
        if args.indent == 0:
            args.indent = None
        return compile_command(args)

    return directives_command(args)


if __name__ == "__main__":
    sys.exit(main())

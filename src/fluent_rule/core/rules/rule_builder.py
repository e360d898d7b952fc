"""
Fluent builder for validation rule declarations.

Select a field with add(), chain directives onto it, optionally attach a
message to the latest directive, then drain the accumulated mappings:

    builder = RuleBuilder()
    builder.add("username", "User name").required().between(5, 15)
    builder.add("email").required().email().message("Email is invalid")

    rules = builder.get()
    messages = builder.get_messages()
    attributes = builder.get_attributes()

The builder never validates anything itself; arguments are serialized
as given and interpreted by whatever engine consumes the mappings.
"""

from typing import Any

from fluent_rule.core.models import RuleSchema
from fluent_rule.observability.logger import get_logger

from .context import RuleContext
from .formatting import flatten_values, format_argument, format_rule, rule_name, snake_case

logger = get_logger(__name__)

# Marks an argument the caller did not pass, as opposed to an explicit None.
_UNSET = object()

# Engine rule name -> builder method name
BUILTIN_RULES = {
    "accepted": "accepted",
    "active_url": "active_url",
    "after": "after",
    "alpha": "alpha",
    "alpha_dash": "alpha_dash",
    "alpha_num": "alpha_num",
    "array": "is_array",
    "before": "before",
    "between": "between",
    "boolean": "boolean",
    "confirmed": "confirmed",
    "date": "date",
    "date_format": "date_format",
    "different": "different",
    "digits": "digits",
    "digits_between": "digits_between",
    "email": "email",
    "exists": "exists",
    "image": "image",
    "in": "in_",
    "integer": "integer",
    "ip": "ip",
    "max": "max",
    "mimes": "mimes",
    "min": "min",
    "not_in": "not_in",
    "numeric": "numeric",
    "regex": "regex",
    "required": "required",
    "required_if": "required_if",
    "required_with": "required_with",
    "required_with_all": "required_with_all",
    "required_without": "required_without",
    "required_without_all": "required_without_all",
    "same": "same",
    "size": "size",
    "sometimes": "sometimes",
    "string": "string",
    "timezone": "timezone",
    "unique": "unique",
    "url": "url",
}

# Method names that differ from the rule name they emit
_METHOD_ALIASES = {
    "in_": "in",
    "is_array": "array",
}


def resolve_rule_name(name: str) -> str:
    """
    Map a rule or method name to the rule name the engine expects.

    ``in_`` and ``is_array`` resolve to ``in`` and ``array``; camelCase
    names are snake-cased.
    """
    name = name.strip()
    if name in _METHOD_ALIASES:
        return _METHOD_ALIASES[name]
    return snake_case(name)


class RuleBuilder:
    """
    Accumulates rule-strings, messages and display labels per field.

    Each builder owns a fresh RuleContext unless one is passed in; builders
    sharing a context write into (and drain) the same mappings.
    """

    def __init__(self, context: RuleContext | None = None):
        self.context = context if context is not None else RuleContext()
        self.current_target: str | None = None
        self.current_rule_name: str | None = None

    @classmethod
    def make(
        cls,
        field: str,
        attribute: str | None = None,
        context: RuleContext | None = None,
    ) -> "RuleBuilder":
        """Create a builder and select its first field."""
        return cls(context=context).add(field, attribute)

    def add(self, field: str, attribute: str | None = None) -> "RuleBuilder":
        """
        Select the field subsequent directives apply to.

        Re-adding a field starts its rule list over. The display label is
        only recorded when one is given.

        Args:
            field: Field name
            attribute: Optional human-readable label for the field

        Returns:
            self, for chaining
        """
        self.current_target = field
        self.current_rule_name = None
        self.context.rules[field] = []

        if attribute is not None:
            self.context.attributes[field] = attribute

        return self

    def message(self, text: str) -> "RuleBuilder":
        """Attach a message to the most recent directive on the current field."""
        if self.current_target is not None and self.current_rule_name is not None:
            self.context.messages[f"{self.current_target}.{self.current_rule_name}"] = text
        return self

    def get(self) -> dict[str, list[str]]:
        """Return the accumulated rules and clear them."""
        return self.context.drain_rules()

    build = get

    def get_messages(self) -> dict[str, str]:
        """Return the accumulated messages and clear them."""
        return self.context.drain_messages()

    def get_attributes(self) -> dict[str, str]:
        """Return the accumulated display labels and clear them."""
        return self.context.drain_attributes()

    def get_schema(self) -> RuleSchema:
        """Drain rules, messages and attributes into a single RuleSchema."""
        return RuleSchema(
            rules=self.get(),
            messages=self.get_messages(),
            attributes=self.get_attributes(),
        )

    def _add_rule(self, rule: str) -> "RuleBuilder":
        if self.current_target is None:
            logger.warning(
                f"Dropping rule '{rule}': no field selected, call add() first",
                extra={"rule": rule},
            )
            return self

        self.context.rules.setdefault(self.current_target, []).append(rule)
        self.current_rule_name = rule_name(rule)
        return self

    # ------------------------------------------------------------------
    # Extension points
    # ------------------------------------------------------------------

    def custom(self, name: str, *args: Any) -> "RuleBuilder":
        """
        Add a rule the builder has no dedicated method for.

        The name is snake-cased and arguments are comma-joined, so
        ``custom("requiredUnless", "role", "admin")`` adds
        ``required_unless:role,admin``.
        """
        return self._add_rule(format_rule(snake_case(name), *args))

    def apply(self, name: str, *args: Any) -> "RuleBuilder":
        """
        Add a rule by name, using the built-in directive when there is one.

        Unknown names are handled by custom().
        """
        method_name = BUILTIN_RULES.get(resolve_rule_name(name))
        if method_name is None:
            return self.custom(name, *args)
        return getattr(self, method_name)(*args)

    # ------------------------------------------------------------------
    # Validation rules
    # ------------------------------------------------------------------

    def accepted(self) -> "RuleBuilder":
        """The field must be yes, on, 1 or true."""
        return self._add_rule("accepted")

    def active_url(self) -> "RuleBuilder":
        """The field must be a URL with a resolvable host."""
        return self._add_rule("active_url")

    def after(self, date: Any) -> "RuleBuilder":
        """The field must be a date after the given one."""
        return self._add_rule(format_rule("after", date))

    def alpha(self) -> "RuleBuilder":
        return self._add_rule("alpha")

    def alpha_dash(self) -> "RuleBuilder":
        return self._add_rule("alpha_dash")

    def alpha_num(self) -> "RuleBuilder":
        return self._add_rule("alpha_num")

    def is_array(self) -> "RuleBuilder":
        """The field must be an array; emits the ``array`` rule."""
        return self._add_rule("array")

    def before(self, date: Any) -> "RuleBuilder":
        """The field must be a date before the given one."""
        return self._add_rule(format_rule("before", date))

    def between(self, min: Any, max: Any) -> "RuleBuilder":
        """The field's size must be between min and max, inclusive."""
        return self._add_rule(format_rule("between", min, max))

    def boolean(self) -> "RuleBuilder":
        return self._add_rule("boolean")

    def confirmed(self) -> "RuleBuilder":
        """A matching ``<field>_confirmation`` must be present."""
        return self._add_rule("confirmed")

    def date(self) -> "RuleBuilder":
        return self._add_rule("date")

    def date_format(self, format: str) -> "RuleBuilder":
        return self._add_rule(format_rule("date_format", format))

    def different(self, field: str) -> "RuleBuilder":
        return self._add_rule(format_rule("different", field))

    def digits(self, value: Any) -> "RuleBuilder":
        """The field must be numeric with exactly ``value`` digits."""
        return self._add_rule(format_rule("digits", value))

    def digits_between(self, min: Any, max: Any) -> "RuleBuilder":
        return self._add_rule(format_rule("digits_between", min, max))

    def email(self) -> "RuleBuilder":
        return self._add_rule("email")

    def exists(self, table: str, column: str | None = None, *extra: Any) -> "RuleBuilder":
        """
        The field must exist in a database table.

        Args:
            table: Table name
            column: Column to look in; the segment is dropped when None
            *extra: Further where-clause arguments, appended in order

        Examples:
            exists("users")                  -> exists:users
            exists("users", "name", "id", 10) -> exists:users,name,id,10
        """
        args = [table]
        if column is not None:
            args.append(column)
        args.extend(extra)
        return self._add_rule(format_rule("exists", *args))

    def image(self) -> "RuleBuilder":
        return self._add_rule("image")

    def in_(self, *values: Any) -> "RuleBuilder":
        """The field must be one of the given values (list or varargs)."""
        return self._add_rule(format_rule("in", *flatten_values(values)))

    def integer(self) -> "RuleBuilder":
        return self._add_rule("integer")

    def ip(self) -> "RuleBuilder":
        return self._add_rule("ip")

    def max(self, value: Any) -> "RuleBuilder":
        return self._add_rule(format_rule("max", value))

    def mimes(self, *extensions: Any) -> "RuleBuilder":
        """The file's MIME type must match one of the listed extensions."""
        return self._add_rule(format_rule("mimes", *flatten_values(extensions)))

    def min(self, value: Any) -> "RuleBuilder":
        return self._add_rule(format_rule("min", value))

    def not_in(self, *values: Any) -> "RuleBuilder":
        return self._add_rule(format_rule("not_in", *flatten_values(values)))

    def numeric(self) -> "RuleBuilder":
        return self._add_rule("numeric")

    def regex(self, pattern: str) -> "RuleBuilder":
        """The field must match the pattern, which is passed through verbatim."""
        return self._add_rule(f"regex:{format_argument(pattern)}")

    def required(self) -> "RuleBuilder":
        return self._add_rule("required")

    def required_if(self, field: str, value: Any) -> "RuleBuilder":
        """Required when ``field`` equals ``value``."""
        return self._add_rule(format_rule("required_if", field, value))

    def required_with(self, *fields: str) -> "RuleBuilder":
        """Required when any of the given fields is present."""
        return self._add_rule(format_rule("required_with", *flatten_values(fields)))

    def required_with_all(self, *fields: str) -> "RuleBuilder":
        """Required when all of the given fields are present."""
        return self._add_rule(format_rule("required_with_all", *flatten_values(fields)))

    def required_without(self, *fields: str) -> "RuleBuilder":
        """Required when any of the given fields is absent."""
        return self._add_rule(format_rule("required_without", *flatten_values(fields)))

    def required_without_all(self, *fields: str) -> "RuleBuilder":
        """Required when all of the given fields are absent."""
        return self._add_rule(format_rule("required_without_all", *flatten_values(fields)))

    def same(self, field: str) -> "RuleBuilder":
        return self._add_rule(format_rule("same", field))

    def size(self, value: Any) -> "RuleBuilder":
        return self._add_rule(format_rule("size", value))

    def sometimes(self) -> "RuleBuilder":
        """Only validate the field when it is present in the input."""
        return self._add_rule("sometimes")

    def string(self) -> "RuleBuilder":
        return self._add_rule("string")

    def timezone(self) -> "RuleBuilder":
        return self._add_rule("timezone")

    def unique(
        self,
        table: str,
        column: str | None = None,
        id: Any = _UNSET,
        *extra: Any,
    ) -> "RuleBuilder":
        """
        The field must be unique in a database table.

        Args:
            table: Table name
            column: Column to check; the segment is dropped when None
            id: Row id to ignore. Leave it out to drop the segment; an
                explicit None is kept as the ``NULL`` token so later
                positional arguments still line up.
            *extra: Further arguments (id column, where clauses)

        Examples:
            unique("users")                   -> unique:users
            unique("users", "email", None)    -> unique:users,email,NULL
            unique("users", "email", 10, "id") -> unique:users,email,10,id
        """
        args = [table]
        if column is not None:
            args.append(column)
        if id is not _UNSET:
            args.append(format_argument(id))
        args.extend(extra)
        return self._add_rule(format_rule("unique", *args))

    def url(self) -> "RuleBuilder":
        return self._add_rule("url")

    def __repr__(self) -> str:
        return f"RuleBuilder(target={self.current_target!r}, context={self.context!r})"

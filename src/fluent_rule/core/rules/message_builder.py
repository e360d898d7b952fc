"""
Message-only fluent builder.

For declaring messages apart from the rules they belong to:

    messages = (
        MessageBuilder.make("email")
        .required("Email is required")
        .email("Email is invalid")
        .build()
    )
    # {"email.required": "Email is required", "email.email": "Email is invalid"}
"""

from fluent_rule.observability.logger import get_logger

from .context import RuleContext
from .rule_builder import resolve_rule_name

logger = get_logger(__name__)


class MessageBuilder:
    """
    Maps (field, rule) pairs to message text.

    Keys use the bare rule name, so ``between("...")`` stores under
    ``<field>.between`` whatever arguments the rule itself carries.
    """

    def __init__(self, context: RuleContext | None = None):
        self.context = context if context is not None else RuleContext()
        self.current_target: str | None = None

    @classmethod
    def make(cls, field: str, context: RuleContext | None = None) -> "MessageBuilder":
        return cls(context=context).to(field)

    def to(self, field: str) -> "MessageBuilder":
        """Select the field subsequent messages belong to."""
        self.current_target = field
        return self

    def on(self, rule: str, text: str) -> "MessageBuilder":
        """Set the message for any rule name, including custom ones."""
        if self.current_target is None:
            logger.warning(
                f"Dropping message for '{rule}': no field selected, call to() first",
                extra={"rule": rule},
            )
            return self

        self.context.messages[f"{self.current_target}.{resolve_rule_name(rule)}"] = text
        return self

    def build(self) -> dict[str, str]:
        """Return the accumulated messages and clear them."""
        return self.context.drain_messages()

    # ------------------------------------------------------------------
    # Validation rules
    # ------------------------------------------------------------------

    def accepted(self, text: str) -> "MessageBuilder":
        return self.on("accepted", text)

    def active_url(self, text: str) -> "MessageBuilder":
        return self.on("active_url", text)

    def after(self, text: str) -> "MessageBuilder":
        return self.on("after", text)

    def alpha(self, text: str) -> "MessageBuilder":
        return self.on("alpha", text)

    def alpha_dash(self, text: str) -> "MessageBuilder":
        return self.on("alpha_dash", text)

    def alpha_num(self, text: str) -> "MessageBuilder":
        return self.on("alpha_num", text)

    def is_array(self, text: str) -> "MessageBuilder":
        return self.on("array", text)

    def before(self, text: str) -> "MessageBuilder":
        return self.on("before", text)

    def between(self, text: str) -> "MessageBuilder":
        return self.on("between", text)

    def boolean(self, text: str) -> "MessageBuilder":
        return self.on("boolean", text)

    def confirmed(self, text: str) -> "MessageBuilder":
        return self.on("confirmed", text)

    def date(self, text: str) -> "MessageBuilder":
        return self.on("date", text)

    def date_format(self, text: str) -> "MessageBuilder":
        return self.on("date_format", text)

    def different(self, text: str) -> "MessageBuilder":
        return self.on("different", text)

    def digits(self, text: str) -> "MessageBuilder":
        return self.on("digits", text)

    def digits_between(self, text: str) -> "MessageBuilder":
        return self.on("digits_between", text)

    def email(self, text: str) -> "MessageBuilder":
        return self.on("email", text)

    def exists(self, text: str) -> "MessageBuilder":
        return self.on("exists", text)

    def image(self, text: str) -> "MessageBuilder":
        return self.on("image", text)

    def in_(self, text: str) -> "MessageBuilder":
        return self.on("in", text)

    def integer(self, text: str) -> "MessageBuilder":
        return self.on("integer", text)

    def ip(self, text: str) -> "MessageBuilder":
        return self.on("ip", text)

    def max(self, text: str) -> "MessageBuilder":
        return self.on("max", text)

    def mimes(self, text: str) -> "MessageBuilder":
        return self.on("mimes", text)

    def min(self, text: str) -> "MessageBuilder":
        return self.on("min", text)

    def not_in(self, text: str) -> "MessageBuilder":
        return self.on("not_in", text)

    def numeric(self, text: str) -> "MessageBuilder":
        return self.on("numeric", text)

    def regex(self, text: str) -> "MessageBuilder":
        return self.on("regex", text)

    def required(self, text: str) -> "MessageBuilder":
        return self.on("required", text)

    def required_if(self, text: str) -> "MessageBuilder":
        return self.on("required_if", text)

    def required_with(self, text: str) -> "MessageBuilder":
        return self.on("required_with", text)

    def required_with_all(self, text: str) -> "MessageBuilder":
        return self.on("required_with_all", text)

    def required_without(self, text: str) -> "MessageBuilder":
        return self.on("required_without", text)

    def required_without_all(self, text: str) -> "MessageBuilder":
        return self.on("required_without_all", text)

    def same(self, text: str) -> "MessageBuilder":
        return self.on("same", text)

    def size(self, text: str) -> "MessageBuilder":
        return self.on("size", text)

    def sometimes(self, text: str) -> "MessageBuilder":
        return self.on("sometimes", text)

    def string(self, text: str) -> "MessageBuilder":
        return self.on("string", text)

    def timezone(self, text: str) -> "MessageBuilder":
        return self.on("timezone", text)

    def unique(self, text: str) -> "MessageBuilder":
        return self.on("unique", text)

    def url(self, text: str) -> "MessageBuilder":
        return self.on("url", text)

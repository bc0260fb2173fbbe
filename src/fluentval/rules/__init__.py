"""Rule chains and the algorithms behind the built-in rules."""

from .builder import RuleBuilder
from .password import PasswordMessages
from .shapes import ValueKind, classify

__all__ = [
    "RuleBuilder",
    "PasswordMessages",
    "ValueKind",
    "classify",
]

"""Exception hierarchy for fluentval.

Data-driven validation failures are never raised: they are collected into a
ValidationResult. Exceptions here cover wiring mistakes made while building a
validator, plus the opt-in aggregated error raised by
``Validator.validate_or_raise``.
"""

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .validation.result import ValidationResult


class FluentValError(Exception):
    """Base class for all fluentval errors."""


class RuleConfigurationError(FluentValError, ValueError):
    """Raised when a rule chain is wired incorrectly at build time."""

    def __init__(self, message: str, property_name: str | None = None):
        self.property_name = property_name
        if property_name:
            message = f"{message} (property '{property_name}')"
        super().__init__(message)


class FluentValidationError(FluentValError):
    """Raised on request when a target fails validation."""

    def __init__(self, result: "ValidationResult", entity_name: str):
        self.result = result
        self.entity_name = entity_name
        super().__init__(self._build_message(result, entity_name))

    @property
    def errors(self):
        return self.result.errors

    @staticmethod
    def _build_message(result: "ValidationResult", entity_name: str) -> str:
        lines = [f"Validation failed for {entity_name}"]
        for error in result.errors:
            lines.append(f" - {error.property}: {error.message}")
        return "\n".join(lines)

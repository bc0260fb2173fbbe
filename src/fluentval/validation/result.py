"""Ordered collection of field errors produced by a validation run."""

from dataclasses import dataclass, field


@dataclass(frozen=True)
class FieldError:
    """A single failed check: the property it belongs to and its message."""
    property: str
    message: str

    def __str__(self) -> str:
        return f"{self.property}: {self.message}"


@dataclass
class ValidationResult:
    """Append-only, ordered list of field errors.

    Insertion order is evaluation order across all chains and steps.
    """
    _errors: list[FieldError] = field(default_factory=list)

    def add_error(self, property: str, message: str) -> None:
        """Record a failure for a property."""
        self._errors.append(FieldError(property, message))

    def is_valid(self) -> bool:
        return not self._errors

    def is_not_valid(self) -> bool:
        return not self.is_valid()

    @property
    def errors(self) -> tuple[FieldError, ...]:
        """Read-only view of the recorded errors."""
        return tuple(self._errors)

    @property
    def error_count(self) -> int:
        return len(self._errors)

    def errors_for(self, property: str) -> list[FieldError]:
        """Errors recorded for one property, in evaluation order."""
        return [error for error in self._errors if error.property == property]

    def to_dict(self) -> dict:
        """Convert to dictionary for JSON output."""
        return {
            "valid": self.is_valid(),
            "errors": [
                {"property": error.property, "message": error.message}
                for error in self._errors
            ],
        }

    def __str__(self) -> str:
        if self.is_valid():
            return "ValidationResult: valid"
        lines = ["ValidationResult: invalid"]
        lines.extend(f" - {error.property}: {error.message}" for error in self._errors)
        return "\n".join(lines)

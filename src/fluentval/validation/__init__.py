"""Rule-chain evaluation: results and steps.

The Validator entry point lives in ``fluentval.validation.validator`` and is
re-exported from the top-level package.
"""

from .result import FieldError, ValidationResult
from .step import Guard, ValidationStep

__all__ = [
    "FieldError",
    "ValidationResult",
    "Guard",
    "ValidationStep",
]

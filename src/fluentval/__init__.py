"""fluentval - Fluent, declarative rule validation for Python objects.

Declare ordered per-property rule chains on a Validator and get back a
complete, ordered list of field errors for any target object.
"""

__version__ = "0.1.0"
__author__ = "fluentval contributors"
__description__ = "Fluent, declarative rule validation for Python objects"

from fluentval.config import FluentValConfig
from fluentval.enums import CascadeMode
from fluentval.exceptions import FluentValError, FluentValidationError, RuleConfigurationError
from fluentval.rules import PasswordMessages, RuleBuilder
from fluentval.validation import FieldError, ValidationResult
from fluentval.validation.validator import Validator

__all__ = [
    "__version__",
    "__author__",
    "__description__",
    "FluentValConfig",
    "CascadeMode",
    "FluentValError",
    "FluentValidationError",
    "RuleConfigurationError",
    "PasswordMessages",
    "RuleBuilder",
    "FieldError",
    "ValidationResult",
    "Validator",
]

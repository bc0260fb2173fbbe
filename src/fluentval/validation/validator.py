"""Validator: an ordered collection of rule chains for one kind of object.

Subclass Validator and declare chains in ``__init__``::

    class UserValidator(Validator):
        def __init__(self):
            super().__init__()
            self.rule_for("name").not_blank().max_length(50)
            self.rule_for("email", lambda user: user.email).email()

    result = UserValidator().validate(user)
"""

import logging
import operator
from collections.abc import Callable
from typing import Any

from ..config import FluentValConfig, create_default_config
from ..exceptions import FluentValidationError
from ..rules.builder import RuleBuilder
from .result import ValidationResult

logger = logging.getLogger(__name__)


class Validator:
    """Registers rule chains and evaluates them against a target."""

    def __init__(self, config: FluentValConfig | None = None):
        self.config = config or create_default_config()
        self._chains: list[RuleBuilder] = []

    @property
    def chains(self) -> tuple[RuleBuilder, ...]:
        return tuple(self._chains)

    def rule_for(self, property_name: str,
                 accessor: Callable[[Any], Any] | None = None) -> RuleBuilder:
        """Create and register a rule chain for one property.

        Args:
            property_name: Name reported in every error of this chain
            accessor: Callable extracting the value from the target. Defaults to
                reading the (possibly dotted) attribute path ``property_name``.

        Returns:
            The new RuleBuilder, for fluent configuration
        """
        if accessor is None and isinstance(property_name, str) and property_name:
            accessor = operator.attrgetter(property_name)

        settings = self.config.validation
        chain = RuleBuilder(
            property_name,
            accessor,
            cascade_mode=settings.default_cascade,
            max_url_length=settings.max_url_length,
        )
        self._chains.append(chain)
        return chain

    def skip(self, target: Any) -> bool:
        """Override to bypass validation of a whole target."""
        return False

    def validate(self, target: Any) -> ValidationResult:
        """Run every chain in registration order against one shared result."""
        result = ValidationResult()

        if self.skip(target):
            logger.debug(f"Skipping validation of {type(target).__name__}")
            return result

        for chain in self._chains:
            chain.validate(target, result)

        logger.debug(
            f"Validated {type(target).__name__}: {len(self._chains)} chains, "
            f"{result.error_count} errors"
        )
        return result

    def validate_or_raise(self, target: Any, entity_name: str | None = None) -> ValidationResult:
        """Validate and raise FluentValidationError when the target is invalid.

        Args:
            target: Object to validate
            entity_name: Name used in the error message (default: lowercased type name)

        Returns:
            The valid ValidationResult

        Raises:
            FluentValidationError: If any rule failed
        """
        result = self.validate(target)
        if result.is_not_valid():
            raise FluentValidationError(result, entity_name or type(target).__name__.lower())
        return result

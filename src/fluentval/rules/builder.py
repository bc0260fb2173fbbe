"""Rule chains: the ordered checks declared for one property.

A RuleBuilder is configured fluently at validator construction time::

    self.rule_for("age", lambda user: user.age) \\
        .when(lambda user: user.is_active) \\
        .greater_than_or_equal_to(18)

Every convenience rule reduces to ``must(predicate, message)``. Predicates
are defensive: a value whose shape a rule cannot interpret fails the rule
instead of raising.
"""

import logging
import operator
import re
from collections.abc import Callable
from datetime import date, datetime, time
from decimal import Decimal
from enum import Enum
from typing import Any

from fluentval.enums import CascadeMode, GuardPolarity, StepOutcome
from fluentval.exceptions import RuleConfigurationError
from fluentval.rules import checksums, formats
from fluentval.rules.password import PasswordMessages
from fluentval.rules.shapes import (
    ITERABLE_KINDS,
    SIZED_KINDS,
    ValueKind,
    as_date,
    as_int,
    as_text,
    classify,
    has_duplicates,
    is_number,
    size_of,
)
from fluentval.validation.result import ValidationResult
from fluentval.validation.step import Guard, ValidationStep

logger = logging.getLogger(__name__)

Predicate = Callable[[Any], bool]

KB = 1024
MB = 1024 * KB
GB = 1024 * MB


def format_bytes(size: int) -> str:
    """Human readable size using the largest whole unit."""
    if size < KB:
        return f"{size} bytes"
    if size < MB:
        return f"{size // KB} KB"
    if size < GB:
        return f"{size // MB} MB"
    return f"{size // GB} GB"


def _or_default(message: str | None, default: str) -> str:
    return default if message is None else message


def _years_between(start: date, end: date) -> int:
    years = end.year - start.year
    if (end.month, end.day) < (start.month, start.day):
        years -= 1
    return years


def _align(value: date, moment: date) -> date:
    """Bring ``value`` to the granularity of ``moment`` (date or datetime)."""
    if isinstance(moment, datetime):
        if isinstance(value, datetime):
            return value
        return datetime.combine(value, time.min, tzinfo=moment.tzinfo)
    return as_date(value)


def _now_like(value: date) -> date:
    """Current date or datetime comparable with ``value``."""
    if isinstance(value, datetime):
        return datetime.now(value.tzinfo)
    return date.today()


class RuleBuilder:
    """Ordered steps for one property, with a cascade mode and a guard stack."""

    def __init__(self, property_name: str, accessor: Callable[[Any], Any],
                 cascade_mode: CascadeMode = CascadeMode.CONTINUE,
                 max_url_length: int = formats.DEFAULT_MAX_URL_LENGTH):
        if not isinstance(property_name, str) or not property_name:
            raise RuleConfigurationError("property name must be a non-empty string")
        if not callable(accessor):
            raise RuleConfigurationError("accessor must be callable", property_name)

        self._property_name = property_name
        self._accessor = accessor
        self._steps: list[ValidationStep] = []
        self._guards: tuple[Guard, ...] = ()
        self._cascade_mode = cascade_mode
        self._last_step: ValidationStep | None = None
        self._max_url_length = max_url_length

    # ------------------------------------------------------------------
    # Chain structure
    # ------------------------------------------------------------------

    @property
    def property_name(self) -> str:
        return self._property_name

    @property
    def cascade_mode(self) -> CascadeMode:
        return self._cascade_mode

    @property
    def steps(self) -> tuple[ValidationStep, ...]:
        return tuple(self._steps)

    @property
    def active_guards(self) -> tuple[Guard, ...]:
        return self._guards

    @property
    def last_step(self) -> ValidationStep | None:
        return self._last_step

    def cascade(self, mode: CascadeMode | str) -> "RuleBuilder":
        """Set whether the chain stops at its first failure."""
        try:
            self._cascade_mode = CascadeMode(mode)
        except ValueError:
            raise RuleConfigurationError(
                f"unknown cascade mode {mode!r}", self._property_name
            ) from None
        return self

    def when(self, condition: Predicate) -> "RuleBuilder":
        """Run the steps added after this call only when ``condition(target)`` holds."""
        return self._push_guard(condition, GuardPolarity.WHEN)

    def unless(self, condition: Predicate) -> "RuleBuilder":
        """Run the steps added after this call only when ``condition(target)`` does not hold."""
        return self._push_guard(condition, GuardPolarity.UNLESS)

    def _push_guard(self, condition: Predicate, polarity: GuardPolarity) -> "RuleBuilder":
        if not callable(condition):
            raise RuleConfigurationError(f"{polarity.value}() condition must be callable",
                                         self._property_name)
        self._guards = self._guards + (Guard(condition, polarity),)
        return self

    def add_step(self, predicate: Predicate, message: str) -> ValidationStep:
        """Append a step guarded by the current guard stack and return it."""
        if not callable(predicate):
            raise RuleConfigurationError("predicate must be callable", self._property_name)
        step = ValidationStep(predicate, message, self._guards)
        self._steps.append(step)
        self._last_step = step
        return step

    def must(self, predicate: Predicate, message: str = "is invalid") -> "RuleBuilder":
        """Add a custom check on the property value."""
        self.add_step(predicate, message)
        return self

    def with_message(self, message: str) -> "RuleBuilder":
        """Override the message of the most recently added rule."""
        if self._last_step is None:
            raise RuleConfigurationError(
                "with_message() must be called after a validation rule", self._property_name
            )
        self._last_step.with_message(message)
        return self

    def validate(self, target: Any, result: ValidationResult) -> None:
        """Evaluate every step against ``target`` and record failures in ``result``."""
        value = self._accessor(target)
        for step in self._steps:
            outcome = step.evaluate(target, value)
            if outcome != StepOutcome.FAILED:
                continue
            result.add_error(self._property_name, step.message)
            if self._cascade_mode == CascadeMode.STOP:
                logger.debug(f"Cascade stop on '{self._property_name}' after: {step.message}")
                return

    def __repr__(self) -> str:
        return (f"RuleBuilder(property_name={self._property_name!r}, steps={len(self._steps)}, "
                f"cascade_mode={self._cascade_mode.value})")

    # ------------------------------------------------------------------
    # Helpers for building predicates
    # ------------------------------------------------------------------

    def _text_rule(self, check: Callable[[str], bool], message: str) -> "RuleBuilder":
        return self.must(lambda v: v is not None and check(as_text(v)), message)

    def _number_rule(self, check: Callable[[Any], bool], message: str) -> "RuleBuilder":
        def predicate(v):
            if not is_number(v):
                return False
            try:
                return bool(check(v))
            except (TypeError, ArithmeticError):
                # complex numbers and signalling Decimal NaN do not order
                return False
        return self.must(predicate, message)

    def _integer_rule(self, check: Callable[[int], bool], message: str) -> "RuleBuilder":
        def predicate(v):
            number = as_int(v)
            return number is not None and check(number)
        return self.must(predicate, message)

    def _date_rule(self, check: Callable[[date], bool], message: str) -> "RuleBuilder":
        def predicate(v):
            day = as_date(v)
            return day is not None and check(day)
        return self.must(predicate, message)

    def _moment_rule(self, comparisons: tuple[tuple[Callable[[date, date], bool], date], ...],
                     message: str) -> "RuleBuilder":
        """Compare a date/datetime value against each bound at that bound's granularity."""
        def predicate(v):
            if not isinstance(v, date):
                return False
            try:
                return all(compare(_align(v, bound), bound) for compare, bound in comparisons)
            except TypeError:
                # naive and aware datetimes do not compare
                return False
        return self.must(predicate, message)

    def _compile(self, regex: str | re.Pattern) -> re.Pattern:
        if isinstance(regex, re.Pattern):
            return regex
        try:
            return re.compile(regex)
        except re.error as e:
            raise RuleConfigurationError(f"invalid regular expression {regex!r}: {e}",
                                         self._property_name) from e

    def _require_non_negative(self, name: str, bound: int) -> None:
        if bound < 0:
            raise RuleConfigurationError(f"{name} must be >= 0, got {bound}", self._property_name)

    # ------------------------------------------------------------------
    # Basic rules
    # ------------------------------------------------------------------

    def not_null(self, message: str = "must not be null") -> "RuleBuilder":
        return self.must(lambda v: v is not None, message)

    def is_null(self, message: str = "must be null") -> "RuleBuilder":
        return self.must(lambda v: v is None, message)

    def not_empty(self, message: str = "must not be empty") -> "RuleBuilder":
        def predicate(v):
            kind = classify(v)
            if kind == ValueKind.NONE:
                return False
            if kind in SIZED_KINDS or kind == ValueKind.TEXT:
                return len(v) > 0
            return as_text(v) != ""
        return self.must(predicate, message)

    def is_empty(self, message: str = "must be empty") -> "RuleBuilder":
        def predicate(v):
            kind = classify(v)
            if kind == ValueKind.NONE:
                return True
            if kind in SIZED_KINDS or kind == ValueKind.TEXT:
                return len(v) == 0
            return as_text(v) == ""
        return self.must(predicate, message)

    def not_blank(self, message: str = "must not be blank") -> "RuleBuilder":
        return self.must(lambda v: v is not None and as_text(v).strip() != "", message)

    # ------------------------------------------------------------------
    # Equality
    # ------------------------------------------------------------------

    def equal_to(self, other: Any, message: str | None = None) -> "RuleBuilder":
        return self.must(lambda v: v is not None and v == other,
                         _or_default(message, f"must be equal to {other}"))

    def not_equal_to(self, other: Any, message: str | None = None) -> "RuleBuilder":
        return self.must(lambda v: v is None or v != other,
                         _or_default(message, f"must not be equal to {other}"))

    # ------------------------------------------------------------------
    # Numeric comparison (exact: no coercion to float)
    # ------------------------------------------------------------------

    def greater_than(self, minimum: Any, message: str | None = None) -> "RuleBuilder":
        return self._number_rule(lambda v: v > minimum,
                                 _or_default(message, f"must be greater than {minimum}"))

    def greater_than_or_equal_to(self, minimum: Any, message: str | None = None) -> "RuleBuilder":
        return self._number_rule(lambda v: v >= minimum,
                                 _or_default(message, f"must be greater than or equal to {minimum}"))

    def less_than(self, maximum: Any, message: str | None = None) -> "RuleBuilder":
        return self._number_rule(lambda v: v < maximum,
                                 _or_default(message, f"must be less than {maximum}"))

    def less_than_or_equal_to(self, maximum: Any, message: str | None = None) -> "RuleBuilder":
        return self._number_rule(lambda v: v <= maximum,
                                 _or_default(message, f"must be less than or equal to {maximum}"))

    def inclusive_between(self, minimum: Any, maximum: Any,
                          message: str | None = None) -> "RuleBuilder":
        return self._number_rule(lambda v: minimum <= v <= maximum,
                                 _or_default(message, f"must be between {minimum} and {maximum} (inclusive)"))

    def exclusive_between(self, minimum: Any, maximum: Any,
                          message: str | None = None) -> "RuleBuilder":
        return self._number_rule(lambda v: minimum < v < maximum,
                                 _or_default(message, f"must be between {minimum} and {maximum} (exclusive)"))

    def is_positive(self, message: str = "must be positive") -> "RuleBuilder":
        return self._number_rule(lambda v: v > 0, message)

    def is_negative(self, message: str = "must be negative") -> "RuleBuilder":
        return self._number_rule(lambda v: v < 0, message)

    def is_positive_or_zero(self, message: str = "must be positive or zero") -> "RuleBuilder":
        return self._number_rule(lambda v: v >= 0, message)

    def is_negative_or_zero(self, message: str = "must be negative or zero") -> "RuleBuilder":
        return self._number_rule(lambda v: v <= 0, message)

    def is_zero(self, message: str = "must be zero") -> "RuleBuilder":
        return self._number_rule(lambda v: v == 0, message)

    def is_not_zero(self, message: str = "must not be zero") -> "RuleBuilder":
        return self._number_rule(lambda v: v != 0, message)

    def precision_scale(self, precision: int, scale: int,
                        message: str | None = None) -> "RuleBuilder":
        """Decimal values with at most ``precision`` digits, ``scale`` of them fractional."""
        def predicate(v):
            if not isinstance(v, Decimal) or not v.is_finite():
                return False
            digits, exponent = v.as_tuple()[1:]
            return len(digits) <= precision and -exponent <= scale
        return self.must(
            predicate,
            _or_default(message, f"must have at most {precision} digits with {scale} decimal places"),
        )

    def is_latitude(self, message: str = "must be a valid latitude (-90 to 90)") -> "RuleBuilder":
        return self._number_rule(lambda v: -90 <= v <= 90, message)

    def is_longitude(self, message: str = "must be a valid longitude (-180 to 180)") -> "RuleBuilder":
        return self._number_rule(lambda v: -180 <= v <= 180, message)

    def is_percentage(self, message: str = "must be a valid percentage (0-100)") -> "RuleBuilder":
        return self._number_rule(lambda v: 0 <= v <= 100, message)

    def is_port(self, message: str = "must be a valid port number (0-65535)") -> "RuleBuilder":
        return self._integer_rule(lambda port: 0 <= port <= 65535, message)

    def is_divisible_by(self, divisor: Any, message: str | None = None) -> "RuleBuilder":
        whole_divisor = as_int(divisor)
        if not whole_divisor:
            raise RuleConfigurationError(f"divisor must be a non-zero number, got {divisor!r}",
                                         self._property_name)
        return self._integer_rule(lambda v: v % whole_divisor == 0,
                                  _or_default(message, f"must be divisible by {divisor}"))

    def is_even(self, message: str = "must be an even number") -> "RuleBuilder":
        return self._integer_rule(lambda v: v % 2 == 0, message)

    def is_odd(self, message: str = "must be an odd number") -> "RuleBuilder":
        return self._integer_rule(lambda v: v % 2 != 0, message)

    def max_size_in_bytes(self, max_bytes: int, message: str | None = None) -> "RuleBuilder":
        return self._integer_rule(lambda v: v <= max_bytes,
                                  _or_default(message, f"must be at most {format_bytes(max_bytes)}"))

    def max_size_in_kb(self, max_kb: int, message: str | None = None) -> "RuleBuilder":
        return self.max_size_in_bytes(max_kb * KB, _or_default(message, f"must be at most {max_kb} KB"))

    def max_size_in_mb(self, max_mb: int, message: str | None = None) -> "RuleBuilder":
        return self.max_size_in_bytes(max_mb * MB, _or_default(message, f"must be at most {max_mb} MB"))

    def max_size_in_gb(self, max_gb: int, message: str | None = None) -> "RuleBuilder":
        return self.max_size_in_bytes(max_gb * GB, _or_default(message, f"must be at most {max_gb} GB"))

    # ------------------------------------------------------------------
    # Length
    # ------------------------------------------------------------------

    def length(self, minimum: int, maximum: int | None = None,
               message: str | None = None) -> "RuleBuilder":
        """Exact length with one bound, inclusive range with two."""
        if maximum is None:
            self._require_non_negative("length", minimum)
            return self._text_rule(lambda s: len(s) == minimum,
                                   _or_default(message, f"must be exactly {minimum} characters long"))
        self._require_non_negative("minimum length", minimum)
        if minimum > maximum:
            raise RuleConfigurationError(
                f"minimum length {minimum} is greater than maximum length {maximum}",
                self._property_name,
            )
        return self._text_rule(lambda s: minimum <= len(s) <= maximum,
                               _or_default(message, f"must be between {minimum} and {maximum} characters long"))

    def min_length(self, minimum: int, message: str | None = None) -> "RuleBuilder":
        self._require_non_negative("min_length", minimum)
        return self._text_rule(lambda s: len(s) >= minimum,
                               _or_default(message, f"must be at least {minimum} characters long"))

    def max_length(self, maximum: int, message: str | None = None) -> "RuleBuilder":
        self._require_non_negative("max_length", maximum)
        return self._text_rule(lambda s: len(s) <= maximum,
                               _or_default(message, f"must be at most {maximum} characters long"))

    # ------------------------------------------------------------------
    # Collections
    # ------------------------------------------------------------------

    def has_min_count(self, minimum: int, message: str | None = None) -> "RuleBuilder":
        self._require_non_negative("has_min_count", minimum)

        def predicate(v):
            size = size_of(v)
            return size is not None and size >= minimum
        return self.must(predicate, _or_default(message, f"must have at least {minimum} items"))

    def has_max_count(self, maximum: int, message: str | None = None) -> "RuleBuilder":
        self._require_non_negative("has_max_count", maximum)

        def predicate(v):
            size = size_of(v)
            return size is not None and size <= maximum
        return self.must(predicate, _or_default(message, f"must have at most {maximum} items"))

    def has_exact_count(self, count: int, message: str | None = None) -> "RuleBuilder":
        self._require_non_negative("has_exact_count", count)
        return self.must(lambda v: size_of(v) == count,
                         _or_default(message, f"must have exactly {count} items"))

    def has_unique_items(self, message: str = "must not contain duplicate items") -> "RuleBuilder":
        return self.must(lambda v: classify(v) in ITERABLE_KINDS and not has_duplicates(v), message)

    def contains(self, item: Any, message: str | None = None) -> "RuleBuilder":
        def predicate(v):
            kind = classify(v)
            if kind in ITERABLE_KINDS:
                try:
                    return item in v
                except TypeError:
                    return False
            if kind == ValueKind.TEXT:
                return str(item) in v
            return False
        return self.must(predicate, _or_default(message, f"must contain {item}"))

    def does_not_contain(self, item: Any, message: str | None = None) -> "RuleBuilder":
        def predicate(v):
            kind = classify(v)
            if kind in ITERABLE_KINDS:
                try:
                    return item not in v
                except TypeError:
                    # an item of an incompatible type cannot be a member
                    return True
            if kind == ValueKind.TEXT:
                return str(item) not in v
            return True
        return self.must(predicate, _or_default(message, f"must not contain {item}"))

    def all_match(self, item_predicate: Predicate,
                  message: str = "all items must match the condition") -> "RuleBuilder":
        return self.must(lambda v: classify(v) in ITERABLE_KINDS and all(item_predicate(i) for i in v),
                         message)

    def any_match(self, item_predicate: Predicate,
                  message: str = "at least one item must match the condition") -> "RuleBuilder":
        return self.must(lambda v: classify(v) in ITERABLE_KINDS and any(item_predicate(i) for i in v),
                         message)

    def none_match(self, item_predicate: Predicate,
                   message: str = "no items must match the condition") -> "RuleBuilder":
        return self.must(
            lambda v: classify(v) in ITERABLE_KINDS and not any(item_predicate(i) for i in v),
            message,
        )

    # ------------------------------------------------------------------
    # Enums
    # ------------------------------------------------------------------

    def is_in_enum(self, enum_class: type[Enum], message: str | None = None) -> "RuleBuilder":
        """A member of ``enum_class`` or the name of one."""
        def predicate(v):
            if v is None:
                return False
            if isinstance(v, enum_class):
                return True
            return as_text(v) in enum_class.__members__
        return self.must(predicate, _or_default(message, f"must be a valid {enum_class.__name__} value"))

    # ------------------------------------------------------------------
    # Text formats
    # ------------------------------------------------------------------

    def email(self, message: str = "must be a valid email address") -> "RuleBuilder":
        return self._text_rule(formats.is_email, message)

    def url(self, message: str = "must be a valid URL") -> "RuleBuilder":
        max_length = self._max_url_length
        return self._text_rule(lambda s: formats.is_url(s, max_length), message)

    def is_alpha(self, message: str = "must contain only letters") -> "RuleBuilder":
        return self._text_rule(formats.ALPHA_PATTERN.fullmatch, message)

    def is_numeric(self, message: str = "must contain only digits") -> "RuleBuilder":
        return self._text_rule(formats.NUMERIC_PATTERN.fullmatch, message)

    def is_alphanumeric(self, message: str = "must contain only letters and digits") -> "RuleBuilder":
        return self._text_rule(formats.ALPHANUMERIC_PATTERN.fullmatch, message)

    def is_upper_case(self, message: str = "must be in uppercase") -> "RuleBuilder":
        return self._text_rule(lambda s: s == s.upper(), message)

    def is_lower_case(self, message: str = "must be in lowercase") -> "RuleBuilder":
        return self._text_rule(lambda s: s == s.lower(), message)

    def is_hexadecimal(self, message: str = "must be a valid hexadecimal value") -> "RuleBuilder":
        return self._text_rule(formats.HEX_PATTERN.fullmatch, message)

    def is_base64(self, message: str = "must be a valid Base64 encoded string") -> "RuleBuilder":
        return self._text_rule(formats.is_base64, message)

    def is_uuid(self, message: str = "must be a valid UUID") -> "RuleBuilder":
        return self._text_rule(formats.UUID_PATTERN.fullmatch, message)

    def contains_no_whitespace(self, message: str = "must not contain whitespace") -> "RuleBuilder":
        return self._text_rule(formats.NO_WHITESPACE_PATTERN.fullmatch, message)

    def starts_with(self, prefix: str, message: str | None = None) -> "RuleBuilder":
        return self._text_rule(lambda s: s.startswith(prefix),
                               _or_default(message, f"must start with '{prefix}'"))

    def ends_with(self, suffix: str, message: str | None = None) -> "RuleBuilder":
        return self._text_rule(lambda s: s.endswith(suffix),
                               _or_default(message, f"must end with '{suffix}'"))

    def is_ascii(self, message: str = "must contain only ASCII characters") -> "RuleBuilder":
        return self._text_rule(formats.ASCII_PATTERN.fullmatch, message)

    def is_hex_color(self, message: str = "must be a valid hex color code") -> "RuleBuilder":
        return self._text_rule(formats.HEX_COLOR_PATTERN.fullmatch, message)

    def is_camel_case(self, message: str = "must be in camelCase format") -> "RuleBuilder":
        return self._text_rule(formats.CAMEL_CASE_PATTERN.fullmatch, message)

    def is_pascal_case(self, message: str = "must be in PascalCase format") -> "RuleBuilder":
        return self._text_rule(formats.PASCAL_CASE_PATTERN.fullmatch, message)

    def is_snake_case(self, message: str = "must be in snake_case format") -> "RuleBuilder":
        return self._text_rule(formats.SNAKE_CASE_PATTERN.fullmatch, message)

    def is_kebab_case(self, message: str = "must be in kebab-case format") -> "RuleBuilder":
        return self._text_rule(formats.KEBAB_CASE_PATTERN.fullmatch, message)

    def contains_only(self, allowed_chars: str, message: str | None = None) -> "RuleBuilder":
        allowed = set(allowed_chars)
        return self._text_rule(lambda s: all(char in allowed for char in s),
                               _or_default(message, f"must contain only these characters: {allowed_chars}"))

    def does_not_contain_any(self, forbidden_chars: str, message: str | None = None) -> "RuleBuilder":
        forbidden = set(forbidden_chars)
        return self._text_rule(
            lambda s: not any(char in forbidden for char in s),
            _or_default(message, f"must not contain any of these characters: {forbidden_chars}"),
        )

    def has_min_words(self, minimum: int, message: str | None = None) -> "RuleBuilder":
        return self._text_rule(lambda s: len(s.split()) >= minimum,
                               _or_default(message, f"must contain at least {minimum} words"))

    def has_max_words(self, maximum: int, message: str | None = None) -> "RuleBuilder":
        return self._text_rule(lambda s: len(s.split()) <= maximum,
                               _or_default(message, f"must contain at most {maximum} words"))

    def matches(self, regex: str | re.Pattern, message: str | None = None) -> "RuleBuilder":
        """Whole-value match against ``regex``."""
        pattern = self._compile(regex)
        return self._text_rule(lambda s: pattern.fullmatch(s) is not None,
                               _or_default(message, f"must match pattern: {pattern.pattern}"))

    def contains_pattern(self, regex: str | re.Pattern, message: str | None = None) -> "RuleBuilder":
        pattern = self._compile(regex)
        return self._text_rule(lambda s: pattern.search(s) is not None,
                               _or_default(message, f"must contain pattern: {pattern.pattern}"))

    def does_not_match_pattern(self, regex: str | re.Pattern,
                               message: str | None = None) -> "RuleBuilder":
        pattern = self._compile(regex)
        return self.must(lambda v: v is None or pattern.fullmatch(as_text(v)) is None,
                         _or_default(message, f"must not match pattern: {pattern.pattern}"))

    # ------------------------------------------------------------------
    # International identifiers
    # ------------------------------------------------------------------

    def is_iban(self, message: str = "must be a valid IBAN") -> "RuleBuilder":
        return self._text_rule(checksums.is_valid_iban, message)

    def is_bic(self, message: str = "must be a valid BIC/SWIFT code") -> "RuleBuilder":
        return self._text_rule(formats.BIC_PATTERN.fullmatch, message)

    def is_isbn(self, message: str = "must be a valid ISBN") -> "RuleBuilder":
        return self._text_rule(checksums.is_valid_isbn, message)

    def is_isbn10(self, message: str = "must be a valid ISBN-10") -> "RuleBuilder":
        return self._text_rule(checksums.is_valid_isbn10, message)

    def is_isbn13(self, message: str = "must be a valid ISBN-13") -> "RuleBuilder":
        return self._text_rule(checksums.is_valid_isbn13, message)

    def is_issn(self, message: str = "must be a valid ISSN") -> "RuleBuilder":
        return self._text_rule(formats.ISSN_PATTERN.fullmatch, message)

    def credit_card(self, message: str = "must be a valid credit card number") -> "RuleBuilder":
        return self._text_rule(checksums.is_valid_luhn, message)

    # ------------------------------------------------------------------
    # Phone and network
    # ------------------------------------------------------------------

    def is_phone_number(self, message: str = "must be a valid phone number") -> "RuleBuilder":
        return self._text_rule(formats.is_phone_number, message)

    def is_ip_address(self, message: str = "must be a valid IP address") -> "RuleBuilder":
        return self._text_rule(formats.is_ip_address, message)

    def is_ipv4(self, message: str = "must be a valid IPv4 address") -> "RuleBuilder":
        return self._text_rule(formats.is_ipv4, message)

    def is_ipv6(self, message: str = "must be a valid IPv6 address") -> "RuleBuilder":
        return self._text_rule(formats.is_ipv6, message)

    def is_mac_address(self, message: str = "must be a valid MAC address") -> "RuleBuilder":
        return self._text_rule(formats.MAC_ADDRESS_PATTERN.fullmatch, message)

    # ------------------------------------------------------------------
    # Dates
    # ------------------------------------------------------------------

    def is_in_past(self, message: str = "must be in the past") -> "RuleBuilder":
        return self.must(lambda v: isinstance(v, date) and v < _now_like(v), message)

    def is_in_future(self, message: str = "must be in the future") -> "RuleBuilder":
        return self.must(lambda v: isinstance(v, date) and v > _now_like(v), message)

    def is_today(self, message: str = "must be today") -> "RuleBuilder":
        return self._date_rule(lambda day: day == date.today(), message)

    def min_age(self, years: int, message: str | None = None) -> "RuleBuilder":
        return self._date_rule(lambda born: _years_between(born, date.today()) >= years,
                               _or_default(message, f"must be at least {years} years old"))

    def max_age(self, years: int, message: str | None = None) -> "RuleBuilder":
        return self._date_rule(lambda born: _years_between(born, date.today()) <= years,
                               _or_default(message, f"must be at most {years} years old"))

    def is_after(self, moment: date, message: str | None = None) -> "RuleBuilder":
        return self._moment_rule(((operator.gt, moment),),
                                 _or_default(message, f"must be after {moment}"))

    def is_before(self, moment: date, message: str | None = None) -> "RuleBuilder":
        return self._moment_rule(((operator.lt, moment),),
                                 _or_default(message, f"must be before {moment}"))

    def is_between_dates(self, start: date, end: date, message: str | None = None) -> "RuleBuilder":
        """Inclusive on both ends."""
        return self._moment_rule(((operator.ge, start), (operator.le, end)),
                                 _or_default(message, f"must be between {start} and {end}"))

    def is_weekday(self, message: str = "must be a weekday (Monday-Friday)") -> "RuleBuilder":
        return self._date_rule(lambda day: day.isoweekday() <= 5, message)

    def is_weekend(self, message: str = "must be a weekend (Saturday or Sunday)") -> "RuleBuilder":
        return self._date_rule(lambda day: day.isoweekday() >= 6, message)

    # ------------------------------------------------------------------
    # Booleans
    # ------------------------------------------------------------------

    def is_true(self, message: str = "must be true") -> "RuleBuilder":
        return self.must(lambda v: v is True, message)

    def is_false(self, message: str = "must be false") -> "RuleBuilder":
        return self.must(lambda v: v is False, message)

    # ------------------------------------------------------------------
    # Passwords
    # ------------------------------------------------------------------

    def contains_uppercase(self, message: str = "must contain at least one uppercase letter") -> "RuleBuilder":
        return self._text_rule(lambda s: any(char.isupper() for char in s), message)

    def contains_lowercase(self, message: str = "must contain at least one lowercase letter") -> "RuleBuilder":
        return self._text_rule(lambda s: any(char.islower() for char in s), message)

    def contains_digit(self, message: str = "must contain at least one digit") -> "RuleBuilder":
        return self._text_rule(lambda s: any(char.isdigit() for char in s), message)

    def contains_special_char(self, message: str = "must contain at least one special character") -> "RuleBuilder":
        return self._text_rule(lambda s: any(not char.isalnum() for char in s), message)

    def strong_password(self, min_length: int, max_length: int,
                        messages: PasswordMessages | None = None) -> "RuleBuilder":
        """Length bounds plus one each of upper, lower, digit and special character."""
        messages = messages or PasswordMessages.defaults()
        return (
            self.min_length(min_length, messages.min_length_message(min_length))
            .max_length(max_length, messages.max_length_message(max_length))
            .contains_uppercase(messages.uppercase)
            .contains_lowercase(messages.lowercase)
            .contains_digit(messages.digit)
            .contains_special_char(messages.special_char)
        )

    # ------------------------------------------------------------------
    # Injection screens (None passes)
    # ------------------------------------------------------------------

    def contains_no_sql_injection(self, message: str = "must not contain SQL injection patterns") -> "RuleBuilder":
        return self.must(
            lambda v: v is None
            or not formats.contains_marker(as_text(v).lower(), formats.SQL_INJECTION_MARKERS),
            message,
        )

    def contains_no_xss(self, message: str = "must not contain XSS attack patterns") -> "RuleBuilder":
        return self.must(
            lambda v: v is None or not formats.contains_marker(as_text(v).lower(), formats.XSS_MARKERS),
            message,
        )

    def contains_no_command_injection(
        self, message: str = "must not contain command injection patterns"
    ) -> "RuleBuilder":
        return self.must(
            lambda v: v is None
            or not formats.contains_marker(as_text(v), formats.COMMAND_INJECTION_MARKERS),
            message,
        )

    def contains_no_ldap_injection(self, message: str = "must not contain LDAP injection patterns") -> "RuleBuilder":
        return self.must(
            lambda v: v is None
            or not formats.contains_marker(as_text(v), formats.LDAP_INJECTION_MARKERS),
            message,
        )

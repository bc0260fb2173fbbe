"""Runtime shape classification for property values.

Rules inspect a value's kind once through ``classify`` instead of probing
types inside every predicate. Anything a rule cannot interpret falls into a
kind the rule rejects, so predicates fail closed rather than raising.
"""

import math
from collections.abc import Collection, Mapping
from datetime import date, datetime
from decimal import Decimal
from enum import Enum
from fractions import Fraction
from numbers import Number
from typing import Any


class ValueKind(str, Enum):
    """Closed set of value shapes understood by the built-in rules."""
    NONE = "none"
    BOOLEAN = "boolean"
    NUMBER = "number"
    TEXT = "text"
    MAPPING = "mapping"
    ARRAY = "array"
    COLLECTION = "collection"
    OTHER = "other"


SIZED_KINDS = frozenset({ValueKind.COLLECTION, ValueKind.MAPPING, ValueKind.ARRAY})
ITERABLE_KINDS = frozenset({ValueKind.COLLECTION, ValueKind.ARRAY})


def classify(value: Any) -> ValueKind:
    """Return the kind of ``value``."""
    if value is None:
        return ValueKind.NONE
    # bool subclasses int but is not treated as a number
    if isinstance(value, bool):
        return ValueKind.BOOLEAN
    if isinstance(value, Number):
        return ValueKind.NUMBER
    if isinstance(value, str):
        return ValueKind.TEXT
    if isinstance(value, Mapping):
        return ValueKind.MAPPING
    if isinstance(value, (tuple, bytes, bytearray)):
        return ValueKind.ARRAY
    if isinstance(value, Collection):
        return ValueKind.COLLECTION
    return ValueKind.OTHER


def is_number(value: Any) -> bool:
    return classify(value) == ValueKind.NUMBER


def is_finite_number(value: Any) -> bool:
    if not is_number(value):
        return False
    if isinstance(value, (int, Fraction)):
        return True
    if isinstance(value, Decimal):
        return value.is_finite()
    try:
        return math.isfinite(value)
    except (TypeError, ValueError):
        return False


def as_int(value: Any) -> int | None:
    """Truncate a finite number toward zero, or None when that is not possible."""
    if not is_finite_number(value):
        return None
    try:
        return int(value)
    except (TypeError, ValueError):
        return None


def as_text(value: Any) -> str | None:
    """Text form of a value; None stays None."""
    if value is None:
        return None
    return value if isinstance(value, str) else str(value)


def size_of(value: Any) -> int | None:
    """Element count for collections, mappings and arrays, else None."""
    if classify(value) in SIZED_KINDS:
        return len(value)
    return None


def as_date(value: Any) -> date | None:
    """Calendar date of a date or datetime value, else None."""
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    return None


def has_duplicates(items: Any) -> bool:
    """Whether an iterable holds equal elements; works for unhashable items."""
    items = list(items)
    try:
        return len(set(items)) != len(items)
    except TypeError:
        seen: list = []
        for item in items:
            if item in seen:
                return True
            seen.append(item)
        return False

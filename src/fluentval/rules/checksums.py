"""Check-digit algorithms used by the identifier rules.

All functions are pure and return False for malformed input instead of raising.
"""

import re

_WHITESPACE = re.compile(r"\s+")
_IBAN_SHAPE = re.compile(r"[A-Z]{2}\d{2}[A-Z0-9]+")

IBAN_MIN_LENGTH = 15
IBAN_MAX_LENGTH = 34


def _ascii_digits(text: str) -> bool:
    # str.isdigit() accepts non-ASCII digits such as superscripts
    return bool(text) and text.isascii() and text.isdigit()


def is_valid_luhn(number: str) -> bool:
    """Luhn mod-10 check, ignoring whitespace."""
    cleaned = _WHITESPACE.sub("", number)
    if not _ascii_digits(cleaned):
        return False

    total = 0
    for position, char in enumerate(reversed(cleaned)):
        digit = int(char)
        if position % 2 == 1:
            digit *= 2
            if digit > 9:
                digit -= 9
        total += digit
    return total % 10 == 0


def is_valid_iban(iban: str) -> bool:
    """ISO 13616 mod-97 check, ignoring whitespace and letter case."""
    cleaned = _WHITESPACE.sub("", iban).upper()
    if not IBAN_MIN_LENGTH <= len(cleaned) <= IBAN_MAX_LENGTH:
        return False
    if not _IBAN_SHAPE.fullmatch(cleaned) or not cleaned.isascii():
        return False

    rearranged = cleaned[4:] + cleaned[:4]
    numeric = "".join(
        str(ord(char) - ord("A") + 10) if char.isalpha() else char
        for char in rearranged
    )
    return int(numeric) % 97 == 1


def is_valid_isbn10(isbn: str) -> bool:
    """ISBN-10 mod-11 check; hyphens are ignored and a final 'X' counts as 10."""
    cleaned = isbn.replace("-", "")
    if len(cleaned) != 10 or not _ascii_digits(cleaned[:9]):
        return False

    total = sum(int(char) * (10 - i) for i, char in enumerate(cleaned[:9]))
    last = cleaned[9]
    if last == "X":
        total += 10
    elif _ascii_digits(last):
        total += int(last)
    else:
        return False
    return total % 11 == 0


def is_valid_isbn13(isbn: str) -> bool:
    """ISBN-13 (EAN-13) weighted mod-10 check; hyphens are ignored."""
    cleaned = isbn.replace("-", "")
    if len(cleaned) != 13 or not _ascii_digits(cleaned):
        return False

    total = sum(int(char) * (1 if i % 2 == 0 else 3) for i, char in enumerate(cleaned[:12]))
    check_digit = (10 - total % 10) % 10
    return check_digit == int(cleaned[12])


def is_valid_isbn(isbn: str) -> bool:
    """Either an ISBN-10 or an ISBN-13."""
    return is_valid_isbn10(isbn) or is_valid_isbn13(isbn)

"""Format predicates for text values.

Each ``is_*`` function takes text and returns a bool. Regular grammars are
compiled once at import time and matched against the whole input.
"""

import base64
import binascii
import ipaddress
import re

EMAIL_PATTERN = re.compile(r"[A-Za-z0-9+_.-]+@([A-Za-z0-9][-A-Za-z0-9]*\.)+[A-Za-z]{2,}", re.ASCII)
ALPHA_PATTERN = re.compile(r"[a-zA-Z]+", re.ASCII)
NUMERIC_PATTERN = re.compile(r"[0-9]+", re.ASCII)
ALPHANUMERIC_PATTERN = re.compile(r"[a-zA-Z0-9]+", re.ASCII)
HEX_PATTERN = re.compile(r"#?[a-fA-F0-9]+", re.ASCII)
UUID_PATTERN = re.compile(
    r"[0-9a-fA-F]{8}-[0-9a-fA-F]{4}-[0-9a-fA-F]{4}-[0-9a-fA-F]{4}-[0-9a-fA-F]{12}"
    r"|[0-9a-fA-F]{32}",
    re.ASCII,
)
NO_WHITESPACE_PATTERN = re.compile(r"\S*")  # any Unicode whitespace counts
BIC_PATTERN = re.compile(r"[A-Z]{6}[A-Z0-9]{2}([A-Z0-9]{3})?", re.ASCII)
ISSN_PATTERN = re.compile(r"\d{4}-\d{3}[\dX]", re.ASCII)
MAC_ADDRESS_PATTERN = re.compile(
    r"([0-9A-Fa-f]{2}[:-]){5}[0-9A-Fa-f]{2}"
    r"|([0-9A-Fa-f]{4}\.){2}[0-9A-Fa-f]{4}"
    r"|[0-9A-Fa-f]{12}",
    re.ASCII,
)
CAMEL_CASE_PATTERN = re.compile(r"[a-z][a-zA-Z0-9]*", re.ASCII)
PASCAL_CASE_PATTERN = re.compile(r"[A-Z][a-zA-Z0-9]*", re.ASCII)
SNAKE_CASE_PATTERN = re.compile(r"[a-z][a-z0-9]*(_[a-z0-9]+)*|[A-Z][A-Z0-9]*(_[A-Z0-9]+)*", re.ASCII)
KEBAB_CASE_PATTERN = re.compile(r"[a-z][a-z0-9]*(-[a-z0-9]+)*", re.ASCII)
ASCII_PATTERN = re.compile(r"[\x00-\x7F]*", re.ASCII)
HEX_COLOR_PATTERN = re.compile(r"#?([a-fA-F0-9]{6}|[a-fA-F0-9]{3})", re.ASCII)

_SEP = r"[\s\-.]?"
PHONE_NUMBER_PATTERN = re.compile(
    r"(?:\+\d{1,4}" + _SEP + r")?"                      # international code
    r"(?:\(?\d{1,5}\)?" + _SEP + r")?"                  # area code
    r"(?:"
    r"\d{3}" + _SEP + r"\d{3}" + _SEP + r"\d{4}"        # 555-123-4567
    r"|\d{3}" + _SEP + r"\d{4}"                         # 555-1234
    r"|\d{4}" + _SEP + r"\d{3}" + _SEP + r"\d{4}"       # 0555 123 4567
    r"|\d{2,3}" + _SEP + r"\d{3,4}" + _SEP + r"\d{3,4}"  # 20 7946 0958
    r"|\d{1,2}(?:[\s\-.]\d{2}){3,4}"                    # 1 23 45 67 89
    r"|\d{6,}"
    r")"
    r"(?:\s?(?:ext|x|ext\.)\s?\d{1,5})?",               # extension
    re.ASCII,
)
PHONE_MIN_DIGITS = 6
PHONE_MAX_DIGITS = 20

URL_PATTERN = re.compile(
    r"(https?|ftp)://"
    r"(?:"
    r"(?:\d{1,3}\.){3}\d{1,3}"
    r"|\[[0-9a-fA-F:]+\]"
    r"|(?:[a-zA-Z0-9](?:[a-zA-Z0-9-]*[a-zA-Z0-9])?\.)+[a-zA-Z]{2,}"
    r"|localhost"
    r")"
    r"(?::\d{1,5})?"
    r"(?:/[^?#]*)?"
    r"(?:\?[^#]*)?"
    r"(?:#.*)?",
    re.IGNORECASE | re.ASCII,
)
DEFAULT_MAX_URL_LENGTH = 2048

SQL_INJECTION_MARKERS = (
    "select ", "insert ", "update ", "delete ", "drop ",
    "create ", "alter ", "exec ", "execute ", "union ",
    "' or ", '" or ', "1=1", "1 = 1", "or 1=1",
    "--", "/*", "*/", "xp_", "sp_", "0x",
)
XSS_MARKERS = (
    "<script", "javascript:", "onerror=", "onload=",
    "onclick=", "onmouseover=", "<iframe", "eval(",
    "expression(", "vbscript:", "data:text/html",
)
COMMAND_INJECTION_MARKERS = (";", "&", "|", "`", "$", "(", ")", "<", ">", "\n", "\r")
LDAP_INJECTION_MARKERS = ("*", "(", ")", "\\", "/", "NUL")


def _full(pattern: re.Pattern, text: str) -> bool:
    return pattern.fullmatch(text) is not None


def is_email(text: str) -> bool:
    return _full(EMAIL_PATTERN, text)


def is_url(text: str, max_length: int = DEFAULT_MAX_URL_LENGTH) -> bool:
    url = text.strip()
    if not url or len(url) > max_length:
        return False
    return _full(URL_PATTERN, url)


def is_phone_number(text: str) -> bool:
    """Loose international phone grammar with a 6-20 digit count."""
    trimmed = text.strip()
    if not trimmed:
        return False
    digit_count = sum(1 for char in trimmed if char.isascii() and char.isdigit())
    if not PHONE_MIN_DIGITS <= digit_count <= PHONE_MAX_DIGITS:
        return False
    return _full(PHONE_NUMBER_PATTERN, trimmed)


def is_ipv4(text: str) -> bool:
    try:
        ipaddress.IPv4Address(text)
    except ValueError:
        return False
    return True


def is_ipv6(text: str) -> bool:
    try:
        ipaddress.IPv6Address(text)
    except ValueError:
        return False
    return True


def is_ip_address(text: str) -> bool:
    return is_ipv4(text) or is_ipv6(text)


def is_base64(text: str) -> bool:
    """Standard-alphabet Base64, padding optional; data URLs are unwrapped."""
    payload = text.strip()
    if payload.startswith("data:") and ";base64," in payload:
        payload = payload[payload.index(",") + 1:]
    if "=" in payload:
        if len(payload) % 4 != 0:
            return False
    elif len(payload) % 4 == 1:
        return False
    else:
        payload += "=" * (-len(payload) % 4)
    try:
        base64.b64decode(payload, validate=True)
    except (binascii.Error, ValueError):
        return False
    return True


def contains_marker(text: str, markers: tuple[str, ...]) -> bool:
    return any(marker in text for marker in markers)

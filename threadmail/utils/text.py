"""Text helpers: folder-name canonicalization and sender display strings."""

import re
from urllib.parse import unquote

_WORD = re.compile(r"\S+")
_BAD_ESCAPE = re.compile(r"%(?![0-9A-Fa-f]{2})")


def to_title_case(text: str) -> str:
    """Capitalize the first letter of each whitespace-separated word and lowercase the rest.

    Unlike str.title(), apostrophes and hyphens do not start a new word, and
    the original whitespace is kept as-is.
    """
    return _WORD.sub(lambda m: m.group(0)[:1].upper() + m.group(0)[1:].lower(), text)


def canonical_folder_name(raw: str) -> str:
    """Percent-decode a routed folder name and title-case it ("inbox" -> "Inbox").

    Raises ValueError for a non-string value or a malformed percent escape
    ("%ZZ", a trailing "%", "%2", or bytes that are not UTF-8).
    """
    if not isinstance(raw, str):
        raise ValueError(f"Folder name must be a string, got {type(raw).__name__}")
    if _BAD_ESCAPE.search(raw):
        raise ValueError(f"Malformed percent-encoding in folder name: {raw!r}")
    try:
        decoded = unquote(raw, errors="strict")
    except UnicodeDecodeError as e:
        raise ValueError(f"Malformed percent-encoding in folder name: {raw!r}") from e
    return to_title_case(decoded)


def require_id(value: object, field: str = "id") -> str:
    """Return the identifier unchanged; raise ValueError if it is not a string, blank, or padded with whitespace."""
    if not isinstance(value, str):
        raise ValueError(f"{field} must be a string, got {type(value).__name__}")
    if not value.strip():
        raise ValueError(f"{field} is required and must be non-empty")
    if value != value.strip():
        raise ValueError(f"{field} must not have leading or trailing whitespace: {value!r}")
    return value


def format_email_string(first_name: str | None, last_name: str | None, email: str | None) -> str:
    """Return 'First Last <email>', or just the address when no name parts are set."""
    name = " ".join(p.strip() for p in (first_name, last_name) if p and p.strip())
    address = (email or "").strip()
    if name and address:
        return f"{name} <{address}>"
    return name or address

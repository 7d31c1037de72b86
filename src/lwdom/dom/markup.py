"""XML name validation and character escaping.

Both helpers operate on Python strings, which are sequences of code points, so
characters outside the Basic Multilingual Plane are checked and escaped as
single characters.
"""

from typing import Any

import regex

# A name starts with a letter, '_' or ':' and continues with letters, digits,
# Alphabetic code points (including combining vowel signs), ideographs, or
# one of '.', '-', '_', ':'.
_NAME_PATTERN = regex.compile(
    r"[\p{L}_:][\p{L}\p{Nd}\p{Alphabetic}\p{Ideographic}.\-_:]*"
)

# Order matters: '&' must be replaced before any entity is introduced.
_ESCAPES = (
    ("&", "&amp;"),
    ('"', "&quot;"),
    ("'", "&apos;"),
    ("<", "&lt;"),
    (">", "&gt;"),
)


def is_valid_identifier(name: Any) -> bool:
    """Check whether ``name`` may be used as an element or attribute name.

    A valid name starts with a letter, ``_`` or ``:`` and continues with
    letters, digits, Unicode Alphabetic or Ideographic characters, ``.``,
    ``-``, ``_`` or ``:``.

    Args:
        name: Candidate name; anything other than a non-empty string is invalid

    Returns:
        True if the name is valid, False otherwise

    Examples:
        >>> is_valid_identifier("a.b-c:d_e")
        True
        >>> is_valid_identifier("1abc")
        False
    """
    if not isinstance(name, str) or not name:
        return False

    return _NAME_PATTERN.fullmatch(name) is not None


def escape_text(text: str) -> str:
    """Escape the five reserved XML characters.

    The result can be placed in element content or in a double-quoted
    attribute value, and an XML parser turns it back into ``text``.

    Examples:
        >>> escape_text("Hi! I'm <b>")
        'Hi! I&apos;m &lt;b&gt;'
    """
    if not isinstance(text, str):
        raise TypeError(f"Expected str, got: {type(text).__name__}")

    for char, entity in _ESCAPES:
        text = text.replace(char, entity)
    return text

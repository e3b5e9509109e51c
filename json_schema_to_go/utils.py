"""
Utility functions for JSON Schema to Go generator.
"""

import re

# Anything that is not an ASCII letter or digit is a word boundary
_SEPARATOR_PATTERN = re.compile(r"[^0-9A-Za-z]+")

# Exported Go identifier, optionally behind a pointer marker
_NAMED_TYPE_PATTERN = re.compile(r"\*?[A-Z][0-9A-Za-z_]*")

_ACRONYM_SUFFIXES = ("Id", "Url", "Json", "Xml")
_ACRONYM_PREFIXES = ("Url", "Json", "Xml")


def _split_into_words(text: str) -> list[str]:
    """Split text on every non-alphanumeric character."""
    return [word for word in _SEPARATOR_PATTERN.split(text) if word]


def _capitalize_and_join(words: list[str]) -> str:
    """Upper-case the first letter of each word, keeping the rest as is."""
    return "".join(word[0].upper() + word[1:] for word in words)


def camel_case(text: str) -> str:
    """Convert a schema title or property key to an exported Go identifier.

    Examples:
        "user_id" -> "UserID"
        "image_url" -> "ImageURL"
        "json-payload" -> "JSONPayload"
        "firstName" -> "FirstName"
        "first 3 rows" -> "First3Rows"

    Args:
        text: The text to convert

    Returns:
        The canonical identifier, or "" for empty input
    """
    if not text:
        return ""
    name = _capitalize_and_join(_split_into_words(text))

    for suffix in _ACRONYM_SUFFIXES:
        if name.endswith(suffix):
            return name[: -len(suffix)] + suffix.upper()

    for prefix in _ACRONYM_PREFIXES:
        if name.startswith(prefix):
            return prefix.upper() + name[len(prefix) :]

    return name


def is_named_type(type_ref: str) -> bool:
    """Whether a type reference denotes a declared type rather than an inline one.

    "*Tag" and "Tags" are named; "string", "[]*Tag" and "map[string]int" are not.
    """
    return _NAMED_TYPE_PATTERN.fullmatch(type_ref) is not None


def pluralize(type_name: str) -> str:
    """Naive plural used for sequences of a named type."""
    if type_name.endswith("s"):
        return f"{type_name}es"
    return f"{type_name}s"

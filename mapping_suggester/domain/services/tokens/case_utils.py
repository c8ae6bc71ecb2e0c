"""Case conversion and name cleanup helpers shared by every token builder."""

from __future__ import annotations

import re
from typing import TYPE_CHECKING

from ....constants import Patterns

if TYPE_CHECKING:
    from collections.abc import Iterable

_UPPERCASE_RE = re.compile("([A-Z])")
_NON_ALNUM_RE = re.compile(Patterns.NON_ALPHANUMERIC_RUN)
_NON_ALNUM_THEN_CHAR_RE = re.compile(Patterns.NON_ALPHANUMERIC_RUN + "(.)")
_REPEATED_UNDERSCORE_RE = re.compile("_+")
_CAMEL_WORD_RE = re.compile(Patterns.CAMEL_CASE_WORD)
_PREFIX_RE = re.compile(Patterns.NAME_PREFIX, re.IGNORECASE)
_SUFFIX_RE = re.compile(Patterns.NAME_SUFFIX, re.IGNORECASE)


def to_snake_case(text: str) -> str:
    """Convert ``text`` to snake_case.

    >>> to_snake_case("First Name")
    'first_name'
    >>> to_snake_case("createdAt")
    'created_at'
    """
    snake = _UPPERCASE_RE.sub(r"_\1", text).lower()
    snake = _NON_ALNUM_RE.sub("_", snake)
    snake = _REPEATED_UNDERSCORE_RE.sub("_", snake)
    return snake.strip("_")


def to_camel_case(text: str) -> str:
    """Convert ``text`` to camelCase, leaving existing camelCase untouched.

    >>> to_camel_case("first_name")
    'firstName'
    >>> to_camel_case("userId")
    'userId'
    """
    if _CAMEL_WORD_RE.match(text):
        return text
    camel = _NON_ALNUM_THEN_CHAR_RE.sub(
        lambda match: match.group(1).upper(), text.lower()
    )
    if camel[:1].isupper():
        camel = camel[0].lower() + camel[1:]
    return camel


def generate_case_variations(text: str) -> set[str]:
    variations = {text.lower(), to_snake_case(text), to_camel_case(text)}
    variations.discard("")
    return variations


def clean_field_name(text: str) -> str:
    # Strips "field_", "column_", "col_" prefixes and the matching suffixes.
    return _SUFFIX_RE.sub("", _PREFIX_RE.sub("", text))


def contains_keywords(text: str, keywords: Iterable[str]) -> bool:
    lowered = text.lower()
    return any(keyword.lower() in lowered for keyword in keywords)

"""Naming context and token result entities.

A naming context describes either a target field (with a declared type) or a
raw source column (no type). Token builders turn a context into a set of
normalized name variations that the mapping engine compares by equality.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from .target_field import FieldType


def _empty_str_list() -> list[str]:
    return []


@dataclass(frozen=True, slots=True)
class NamingContext:
    """Naming information for one token lookup.

    Attributes:
        field_name: Display name of the field or the raw column name
        field_id: Identifier of the field (equal to the name for columns)
        field_type: Declared field type, absent for source columns
        is_source: True for imported source columns, False for target fields
    """

    field_name: str
    field_id: str
    field_type: FieldType | None = None
    is_source: bool = False

    @classmethod
    def for_field(
        cls, field_name: str, field_id: str, field_type: FieldType | None = None
    ) -> NamingContext:
        return cls(
            field_name=field_name,
            field_id=field_id,
            field_type=field_type,
            is_source=False,
        )

    @classmethod
    def for_column(cls, column_name: str) -> NamingContext:
        return cls(field_name=column_name, field_id=column_name, is_source=True)


@dataclass(slots=True)
class TokenMetadata:
    """Advisory metadata describing where tokens came from.

    Lists are concatenated across builders and may contain duplicates;
    only ``TokenResult.tokens`` is deduplicated.
    """

    primary_tokens: list[str] = field(default_factory=_empty_str_list)
    abbreviations: list[str] = field(default_factory=_empty_str_list)
    synonyms: list[str] = field(default_factory=_empty_str_list)
    case_variations: list[str] = field(default_factory=_empty_str_list)

    def extend(self, other: TokenMetadata) -> None:
        self.primary_tokens.extend(other.primary_tokens)
        self.abbreviations.extend(other.abbreviations)
        self.synonyms.extend(other.synonyms)
        self.case_variations.extend(other.case_variations)


@dataclass(slots=True)
class TokenResult:
    tokens: set[str] = field(default_factory=set)
    metadata: TokenMetadata = field(default_factory=TokenMetadata)

    def add(self, token: str) -> None:
        if token:
            self.tokens.add(token)

    def update(self, tokens: set[str] | list[str]) -> None:
        for token in tokens:
            self.add(token)

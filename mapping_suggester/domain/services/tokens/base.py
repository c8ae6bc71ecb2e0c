"""Base interface for token builders.

This module defines the protocol every token builder implements, plus the
generic fallback builder that applies to any field or column.

Example:
    Implementing a custom builder:

    >>> from mapping_suggester.domain.entities import NamingContext, TokenResult
    >>> from mapping_suggester.domain.services.tokens import contains_keywords
    >>>
    >>> class SkuTokenBuilder:
    ...     priority = 85
    ...     supported_types = frozenset()
    ...
    ...     def can_handle(self, context: NamingContext) -> bool:
    ...         return contains_keywords(context.field_name, ["sku"])
    ...
    ...     def generate_tokens(self, context: NamingContext) -> TokenResult:
    ...         result = TokenResult()
    ...         result.update({"sku", "stock_keeping_unit", "item_code"})
    ...         return result
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

from ....constants import BuilderPriority
from ...entities.naming import TokenMetadata, TokenResult
from .case_utils import clean_field_name, generate_case_variations

if TYPE_CHECKING:
    from ...entities.naming import NamingContext
    from ...entities.target_field import FieldType


@runtime_checkable
class TokenBuilder(Protocol):
    """Protocol defining the interface for token builders.

    Builders are selected by the registry through ``can_handle`` and ordered by
    ``priority`` (higher runs first). Every applicable builder contributes its
    tokens; a builder never needs to know about the others.

    Attributes:
        priority: Ordering key, higher values are more specific
        supported_types: Field types the builder targets (empty means all)
    """

    priority: int
    supported_types: frozenset[FieldType]

    def can_handle(self, context: NamingContext) -> bool:
        """Check if this builder applies to the given naming context."""
        ...

    def generate_tokens(self, context: NamingContext) -> TokenResult:
        """Produce the token variations for the given naming context."""
        ...


def supports_type(builder: TokenBuilder, context: NamingContext) -> bool:
    """Default type check shared by the field-specific builders.

    A builder with no declared types applies everywhere. Source columns carry
    no type, so type-driven builders only pick them up through keywords.
    """
    if not builder.supported_types:
        return True
    if context.field_type is None:
        return False
    return context.field_type in builder.supported_types


def is_token_builder(obj: object) -> bool:
    """Check if an object implements the TokenBuilder protocol."""
    can_handle = getattr(obj, "can_handle", None)
    generate_tokens = getattr(obj, "generate_tokens", None)
    return (
        callable(can_handle)
        and callable(generate_tokens)
        and isinstance(getattr(obj, "priority", None), int)
    )


class GenericTokenBuilder:
    """Fallback builder producing case variations of the raw names.

    Runs last and always applies, so every field and column gets at least its
    lowercase, snake_case and camelCase forms, plus those of the name with any
    ``field_``/``col_``/``column_`` prefix or suffix removed.
    """

    priority: int = BuilderPriority.GENERIC
    supported_types: frozenset[FieldType] = frozenset()

    def can_handle(self, context: NamingContext) -> bool:
        return True

    def generate_tokens(self, context: NamingContext) -> TokenResult:
        result = TokenResult()
        field_name = context.field_name
        field_id = context.field_id

        result.add(field_name.lower())
        result.add(field_id.lower())
        result.update(generate_case_variations(field_name))
        result.update(generate_case_variations(field_id))

        for raw in (field_name, field_id):
            cleaned = clean_field_name(raw)
            if cleaned and cleaned != raw:
                result.update(generate_case_variations(cleaned))

        result.metadata = TokenMetadata(
            case_variations=sorted(generate_case_variations(field_name))
        )
        return result

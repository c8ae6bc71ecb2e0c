"""Token builder registry.

The registry holds builders ordered by descending priority and runs every
applicable builder for a naming context, unioning their tokens. Registries are
plain values: build one with ``create_default_registry()`` and hand it to the
mapping engine, or assemble a custom one for tests and special schemas.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from ...entities.naming import NamingContext, TokenMetadata, TokenResult
from .base import GenericTokenBuilder, is_token_builder
from .builders import (
    AddressTokenBuilder,
    DateTimeTokenBuilder,
    EmailTokenBuilder,
    IdTokenBuilder,
    NameTokenBuilder,
    NumericTokenBuilder,
    PhoneTokenBuilder,
    UrlTokenBuilder,
)

if TYPE_CHECKING:
    from collections.abc import Iterable, Iterator

    from ...entities.target_field import FieldType
    from .base import TokenBuilder


class TokenBuilderRegistry:
    """Ordered collection of token builders.

    Example:
        >>> registry = TokenBuilderRegistry([GenericTokenBuilder(), EmailTokenBuilder()])
        >>> [type(builder).__name__ for builder in registry]
        ['EmailTokenBuilder', 'GenericTokenBuilder']
        >>> "email_address" in registry.column_variations("E-Mail")
        True
    """

    def __init__(self, builders: Iterable[TokenBuilder] | None = None) -> None:
        super().__init__()
        self._builders: list[TokenBuilder] = []
        for builder in builders or ():
            self.register(builder)

    def register(self, builder: TokenBuilder) -> TokenBuilderRegistry:
        """Add a builder and re-sort by priority.

        ``sorted`` is stable, so builders with equal priority keep their
        registration order.

        Raises:
            TypeError: If ``builder`` does not implement the TokenBuilder protocol
        """
        if not is_token_builder(builder):
            raise TypeError(
                f"{type(builder).__name__} does not implement the TokenBuilder protocol"
            )
        self._builders.append(builder)
        self._builders = sorted(
            self._builders, key=lambda item: item.priority, reverse=True
        )
        return self

    def generate_tokens(self, context: NamingContext) -> TokenResult:
        """Union the tokens of every builder that can handle ``context``."""
        combined = TokenResult(metadata=TokenMetadata())
        for builder in self._builders:
            if not builder.can_handle(context):
                continue
            result = builder.generate_tokens(context)
            combined.update(result.tokens)
            combined.metadata.extend(result.metadata)
        return combined

    def field_variations(
        self, field_name: str, field_id: str, field_type: FieldType | None = None
    ) -> set[str]:
        return self.generate_tokens(
            NamingContext.for_field(field_name, field_id, field_type)
        ).tokens

    def field_variations_with_metadata(
        self, field_name: str, field_id: str, field_type: FieldType | None = None
    ) -> TokenResult:
        return self.generate_tokens(
            NamingContext.for_field(field_name, field_id, field_type)
        )

    def column_variations(self, column_name: str) -> set[str]:
        return self.generate_tokens(NamingContext.for_column(column_name)).tokens

    def get_builders(self) -> list[TokenBuilder]:
        return list(self._builders)

    def clear(self) -> None:
        self._builders = []

    def __len__(self) -> int:
        return len(self._builders)

    def __iter__(self) -> Iterator[TokenBuilder]:
        return iter(list(self._builders))


def default_builders() -> list[TokenBuilder]:
    """Built-in builders in registration order, generic fallback last."""
    return [
        EmailTokenBuilder(),
        PhoneTokenBuilder(),
        UrlTokenBuilder(),
        IdTokenBuilder(),
        NameTokenBuilder(),
        AddressTokenBuilder(),
        DateTimeTokenBuilder(),
        NumericTokenBuilder(),
        GenericTokenBuilder(),
    ]


def create_default_registry() -> TokenBuilderRegistry:
    return TokenBuilderRegistry(default_builders())

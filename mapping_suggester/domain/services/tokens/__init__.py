"""Token builder system.

Generates normalized name variations ("tokens") for target fields and source
columns. New field categories plug in by implementing the ``TokenBuilder``
protocol and registering an instance on a ``TokenBuilderRegistry``.
"""

from .base import GenericTokenBuilder, TokenBuilder, is_token_builder, supports_type
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
from .case_utils import (
    clean_field_name,
    contains_keywords,
    generate_case_variations,
    to_camel_case,
    to_snake_case,
)
from .registry import TokenBuilderRegistry, create_default_registry, default_builders

__all__ = [
    # Protocol and fallback
    "TokenBuilder",
    "GenericTokenBuilder",
    "is_token_builder",
    "supports_type",
    # Field-specific builders
    "AddressTokenBuilder",
    "DateTimeTokenBuilder",
    "EmailTokenBuilder",
    "IdTokenBuilder",
    "NameTokenBuilder",
    "NumericTokenBuilder",
    "PhoneTokenBuilder",
    "UrlTokenBuilder",
    # Registry
    "TokenBuilderRegistry",
    "create_default_registry",
    "default_builders",
    # Case utilities
    "clean_field_name",
    "contains_keywords",
    "generate_case_variations",
    "to_camel_case",
    "to_snake_case",
]

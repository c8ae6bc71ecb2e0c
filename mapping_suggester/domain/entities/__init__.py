"""Domain entities.

Core domain objects like TargetField, NamingContext, MappingSuggestion, etc.
"""

from .mapping import MappingReport, MappingSuggestion, MatchType
from .naming import NamingContext, TokenMetadata, TokenResult
from .target_field import FieldType, TargetField, TargetShape

__all__ = [
    # Target schema entities
    "FieldType",
    "TargetField",
    "TargetShape",
    # Token entities
    "NamingContext",
    "TokenMetadata",
    "TokenResult",
    # Mapping entities
    "MatchType",
    "MappingSuggestion",
    "MappingReport",
]

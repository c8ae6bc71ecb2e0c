"""Domain services.

Business logic services that operate on domain entities.
"""

from .mapping import (
    MappingSuggestionEngine,
    generate_mapping_suggestions,
    get_detailed_mapping_suggestions,
    levenshtein_distance,
    similarity,
)
from .tokens import TokenBuilderRegistry, create_default_registry

__all__ = [
    "MappingSuggestionEngine",
    "TokenBuilderRegistry",
    "create_default_registry",
    "generate_mapping_suggestions",
    "get_detailed_mapping_suggestions",
    "levenshtein_distance",
    "similarity",
]

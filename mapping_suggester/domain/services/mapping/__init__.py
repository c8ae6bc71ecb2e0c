"""Column mapping services."""

from .engine import (
    MappingSuggestionEngine,
    generate_mapping_suggestions,
    get_detailed_mapping_suggestions,
)
from .levenshtein import levenshtein_distance, similarity

__all__ = [
    "MappingSuggestionEngine",
    "generate_mapping_suggestions",
    "get_detailed_mapping_suggestions",
    "levenshtein_distance",
    "similarity",
]

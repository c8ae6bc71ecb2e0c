"""Mapping suggester package.

Suggests which imported source column should feed each field of a target
schema, using a registry of field-type aware token builders and a tiered
exact, case-convention and fuzzy matching strategy.

Features:
- Pluggable token builders keyed by field type and naming keywords
- Required-first greedy assignment with column exclusivity
- Confidence scores and match types for every suggestion
- A click CLI reading target shapes from JSON and columns from CSV headers
"""

from importlib.metadata import PackageNotFoundError, version

try:  # pragma: no cover
    __version__ = version("mapping-suggester")
except PackageNotFoundError:  # pragma: no cover
    __version__ = "0.0.0"

# Core exports
from mapping_suggester.config import ConfigLoader, MatcherConfig
from mapping_suggester.domain.entities import (
    FieldType,
    MappingReport,
    MappingSuggestion,
    MatchType,
    NamingContext,
    TargetField,
    TargetShape,
    TokenResult,
)
from mapping_suggester.domain.services.mapping import (
    MappingSuggestionEngine,
    generate_mapping_suggestions,
    get_detailed_mapping_suggestions,
)
from mapping_suggester.domain.services.tokens import (
    GenericTokenBuilder,
    TokenBuilder,
    TokenBuilderRegistry,
    create_default_registry,
)

__all__ = [
    "__version__",
    # Matching
    "MappingSuggestionEngine",
    "generate_mapping_suggestions",
    "get_detailed_mapping_suggestions",
    # Tokens
    "GenericTokenBuilder",
    "TokenBuilder",
    "TokenBuilderRegistry",
    "create_default_registry",
    # Entities
    "FieldType",
    "MappingReport",
    "MappingSuggestion",
    "MatchType",
    "NamingContext",
    "TargetField",
    "TargetShape",
    "TokenResult",
    # Configuration
    "ConfigLoader",
    "MatcherConfig",
]

"""Mapping suggestion engine.

This module provides the MappingSuggestionEngine class which proposes a
mapping from target schema fields to imported source columns using a tiered
strategy:

1. Exact match on any shared token
2. Case-convention match (snake_case, then camelCase)
3. Fuzzy match on Levenshtein similarity

Fields are processed required-first and each column is assigned to at most
one field. The assignment is greedy: once a field claims a column no later
field can take it back, even with a better match.
"""

from __future__ import annotations

import re
from typing import TYPE_CHECKING

from ....config import MatcherConfig
from ....constants import Confidence, Patterns
from ...entities.mapping import MappingReport, MappingSuggestion, MatchType
from ..tokens.registry import create_default_registry
from .levenshtein import similarity

if TYPE_CHECKING:
    from collections.abc import Sequence

    from ....application.ports.services import LoggerPort
    from ...entities.target_field import TargetField
    from ..tokens.registry import TokenBuilderRegistry

_CAMEL_BOUNDARY_RE = re.compile(Patterns.CAMEL_CASE_BOUNDARY)


class MappingSuggestionEngine:
    """Engine for suggesting source columns for target fields.

    Example:
        >>> from mapping_suggester.domain.entities import TargetField
        >>> engine = MappingSuggestionEngine()
        >>> fields = [TargetField(id="firstName", name="First Name", required=True)]
        >>> engine.generate_mapping_suggestions(["first_name", "age"], fields)
        {'firstName': 'first_name'}
    """

    def __init__(
        self,
        registry: TokenBuilderRegistry | None = None,
        *,
        config: MatcherConfig | None = None,
        logger: LoggerPort | None = None,
    ) -> None:
        """Initialize the mapping engine.

        Args:
            registry: Token builder registry, defaults to the built-in builders
            config: Tier thresholds and confidence scaling
            logger: Optional logger receiving per-field outcomes
        """
        super().__init__()
        self.registry = registry if registry is not None else create_default_registry()
        self.config = config or MatcherConfig()
        self._logger = logger

    def field_variations(self, target_field: TargetField) -> set[str]:
        return self.registry.field_variations(
            target_field.name, target_field.id, target_field.type
        )

    def column_variations(self, column: str) -> set[str]:
        return self.registry.column_variations(column)

    def find_best_match(
        self,
        target_field: TargetField,
        import_columns: Sequence[str],
        used_columns: set[str],
    ) -> MappingSuggestion | None:
        """Find the best unused column for one target field.

        Tiers are tried in order and the first one that produces a match wins.
        Within the exact and case-convention tiers the first qualifying column
        in ``import_columns`` order is returned.

        Args:
            target_field: Field to find a column for
            import_columns: Source column names in their original order
            used_columns: Columns already assigned to other fields

        Returns:
            The suggestion, or None when no tier produces a match
        """
        field_tokens = self.field_variations(target_field)
        candidates = [
            (column, self.column_variations(column))
            for column in import_columns
            if column not in used_columns
        ]

        for column, column_tokens in candidates:
            if field_tokens & column_tokens:
                return MappingSuggestion(
                    target_field_id=target_field.id,
                    source_column=column,
                    confidence=Confidence.EXACT,
                    match_type=MatchType.EXACT,
                )

        literal = {target_field.name.lower(), target_field.id.lower()}
        for column, column_tokens in candidates:
            if (field_tokens & column_tokens) - literal:
                match_type, confidence = self._classify_case_match(column)
                return MappingSuggestion(
                    target_field_id=target_field.id,
                    source_column=column,
                    confidence=confidence,
                    match_type=match_type,
                )

        return self._best_fuzzy_match(target_field, field_tokens, candidates)

    def generate_mapping_suggestions(
        self, import_columns: Sequence[str], target_fields: Sequence[TargetField]
    ) -> dict[str, str]:
        """Map target field ids to source columns.

        Fields without an acceptable match are left out of the result.
        """
        return {
            suggestion.target_field_id: suggestion.source_column
            for suggestion in self._assign(import_columns, target_fields)
        }

    def get_detailed_mapping_suggestions(
        self, import_columns: Sequence[str], target_fields: Sequence[TargetField]
    ) -> list[MappingSuggestion]:
        """Suggestions with confidence and match type, highest confidence first.

        Suggestions with equal confidence keep their assignment order.
        """
        suggestions = self._assign(import_columns, target_fields)
        return sorted(suggestions, key=lambda item: item.confidence, reverse=True)

    def build_report(
        self, import_columns: Sequence[str], target_fields: Sequence[TargetField]
    ) -> MappingReport:
        suggestions = self.get_detailed_mapping_suggestions(
            import_columns, target_fields
        )
        mapped_fields = {s.target_field_id for s in suggestions}
        mapped_columns = {s.source_column for s in suggestions}
        report = MappingReport(
            suggestions=suggestions,
            unmapped_fields=[f.id for f in target_fields if f.id not in mapped_fields],
            unmapped_required_fields=[
                f.id for f in target_fields if f.required and f.id not in mapped_fields
            ],
            unused_columns=[c for c in import_columns if c not in mapped_columns],
        )
        if self._logger is not None:
            self._logger.log_mapping_summary(report)
        return report

    def _assign(
        self, import_columns: Sequence[str], target_fields: Sequence[TargetField]
    ) -> list[MappingSuggestion]:
        # Stable sort: required fields first, original order within each group
        ordered = sorted(target_fields, key=lambda target: not target.required)
        used_columns: set[str] = set()
        suggestions: list[MappingSuggestion] = []

        if self._logger is not None:
            self._logger.log_mapping_start(len(ordered), len(import_columns))

        for target_field in ordered:
            match = self.find_best_match(target_field, import_columns, used_columns)
            if match is None:
                if self._logger is not None:
                    self._logger.log_field_unmatched(
                        target_field.id, required=target_field.required
                    )
                continue
            used_columns.add(match.source_column)
            suggestions.append(match)
            if self._logger is not None:
                self._logger.log_field_matched(match)

        return suggestions

    def _classify_case_match(self, column: str) -> tuple[MatchType, float]:
        if "_" in column:
            return MatchType.SNAKE_CASE, self.config.snake_case_confidence
        if _CAMEL_BOUNDARY_RE.search(column):
            return MatchType.CAMEL_CASE, self.config.camel_case_confidence
        return MatchType.SNAKE_CASE, self.config.snake_case_confidence

    def _best_fuzzy_match(
        self,
        target_field: TargetField,
        field_tokens: set[str],
        candidates: list[tuple[str, set[str]]],
    ) -> MappingSuggestion | None:
        best: MappingSuggestion | None = None
        for column, column_tokens in candidates:
            score = max(
                (
                    similarity(field_token, column_token)
                    for field_token in field_tokens
                    for column_token in column_tokens
                ),
                default=0.0,
            )
            if score < self.config.fuzzy_threshold:
                continue
            confidence = score * self.config.fuzzy_scale
            if best is None or confidence > best.confidence:
                best = MappingSuggestion(
                    target_field_id=target_field.id,
                    source_column=column,
                    confidence=confidence,
                    match_type=MatchType.FUZZY,
                )
        return best


def generate_mapping_suggestions(
    import_columns: Sequence[str],
    target_fields: Sequence[TargetField],
    *,
    registry: TokenBuilderRegistry | None = None,
    config: MatcherConfig | None = None,
) -> dict[str, str]:
    engine = MappingSuggestionEngine(registry, config=config)
    return engine.generate_mapping_suggestions(import_columns, target_fields)


def get_detailed_mapping_suggestions(
    import_columns: Sequence[str],
    target_fields: Sequence[TargetField],
    *,
    registry: TokenBuilderRegistry | None = None,
    config: MatcherConfig | None = None,
) -> list[MappingSuggestion]:
    engine = MappingSuggestionEngine(registry, config=config)
    return engine.get_detailed_mapping_suggestions(import_columns, target_fields)

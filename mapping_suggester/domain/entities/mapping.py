from __future__ import annotations

from dataclasses import dataclass, field
from enum import StrEnum

from pydantic import BaseModel, ConfigDict, Field


class MatchType(StrEnum):
    EXACT = "exact"
    SNAKE_CASE = "snake_case"
    CAMEL_CASE = "camel_case"
    FUZZY = "fuzzy"

    @property
    def label(self) -> str:
        return self.value.replace("_", " ").title()


class MappingSuggestion(BaseModel):
    model_config = ConfigDict(frozen=True)

    target_field_id: str
    source_column: str
    confidence: float = Field(ge=0.0, le=1.0)
    match_type: MatchType

    @property
    def confidence_percent(self) -> int:
        return round(self.confidence * 100)


def _empty_suggestions() -> list[MappingSuggestion]:
    return []


def _empty_str_list() -> list[str]:
    return []


@dataclass(slots=True)
class MappingReport:
    suggestions: list[MappingSuggestion] = field(default_factory=_empty_suggestions)
    unmapped_fields: list[str] = field(default_factory=_empty_str_list)
    unmapped_required_fields: list[str] = field(default_factory=_empty_str_list)
    unused_columns: list[str] = field(default_factory=_empty_str_list)

    @property
    def mapping(self) -> dict[str, str]:
        return {s.target_field_id: s.source_column for s in self.suggestions}

    @property
    def can_apply(self) -> bool:
        return not self.unmapped_required_fields

    def to_dict(self) -> dict[str, object]:
        return {
            "mapping": self.mapping,
            "suggestions": [s.model_dump(mode="json") for s in self.suggestions],
            "unmapped_fields": list(self.unmapped_fields),
            "unmapped_required_fields": list(self.unmapped_required_fields),
            "unused_columns": list(self.unused_columns),
            "can_apply": self.can_apply,
        }

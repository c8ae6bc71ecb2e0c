from __future__ import annotations

from enum import StrEnum

from pydantic import BaseModel, ConfigDict, Field, model_validator


class FieldType(StrEnum):
    STRING = "string"
    NUMBER = "number"
    INTEGER = "integer"
    DECIMAL = "decimal"
    BOOLEAN = "boolean"
    DATE = "date"
    DATETIME = "datetime"
    EMAIL = "email"
    PHONE = "phone"
    URL = "url"
    CURRENCY = "currency"
    PERCENTAGE = "percentage"
    ENUM = "enum"
    ARRAY = "array"
    OBJECT = "object"
    LOOKUP = "lookup"


class TargetField(BaseModel):
    model_config = ConfigDict(extra="ignore", frozen=True)

    id: str
    name: str
    type: FieldType = FieldType.STRING
    required: bool = False
    description: str | None = None


class TargetShape(BaseModel):
    model_config = ConfigDict(extra="ignore")

    id: str
    name: str
    version: str = "1.0.0"
    description: str | None = None
    fields: list[TargetField] = Field(default_factory=list)

    @model_validator(mode="after")
    def _check_unique_field_ids(self) -> TargetShape:
        seen: set[str] = set()
        duplicates: list[str] = []
        for target in self.fields:
            if target.id in seen:
                duplicates.append(target.id)
            seen.add(target.id)
        if duplicates:
            raise ValueError(
                f"Duplicate field ids in target shape {self.id}: {sorted(set(duplicates))}"
            )
        return self

    @property
    def required_fields(self) -> list[TargetField]:
        return [target for target in self.fields if target.required]

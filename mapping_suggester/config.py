from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
import os
from pathlib import Path
import tomllib
from typing import cast
import warnings

from .constants import Confidence, Defaults


@dataclass(frozen=True, slots=True)
class MatcherConfig:
    fuzzy_threshold: float = Defaults.FUZZY_THRESHOLD
    fuzzy_scale: float = Defaults.FUZZY_SCALE
    snake_case_confidence: float = Confidence.SNAKE_CASE
    camel_case_confidence: float = Confidence.CAMEL_CASE

    def __post_init__(self) -> None:
        for key in (
            "fuzzy_threshold",
            "fuzzy_scale",
            "snake_case_confidence",
            "camel_case_confidence",
        ):
            value = getattr(self, key)
            if not 0.0 <= value <= 1.0:
                raise ValueError(f"{key} must be between 0.0 and 1.0, got {value}")

    @classmethod
    def from_env(cls) -> MatcherConfig:
        return cls(
            fuzzy_threshold=float(
                os.getenv("FUZZY_THRESHOLD", str(Defaults.FUZZY_THRESHOLD))
            ),
            fuzzy_scale=float(os.getenv("FUZZY_SCALE", str(Defaults.FUZZY_SCALE))),
        )


class ConfigLoader:
    pass

    @staticmethod
    def load(config_file: Path | None = None) -> MatcherConfig:
        config = MatcherConfig.from_env()
        if config_file is None:
            config_file = Path(Defaults.CONFIG_FILE)
        if config_file.exists():
            try:
                config = ConfigLoader._load_from_toml(config_file, config)
            except Exception as e:
                warnings.warn(
                    f"Failed to load config from {config_file}: {e}", stacklevel=2
                )
        return config

    @staticmethod
    def _load_from_toml(config_file: Path, base_config: MatcherConfig) -> MatcherConfig:
        with config_file.open("rb") as handle:
            data = tomllib.load(handle)
        matching = _get_table(data, "matching")
        fuzzy_threshold = base_config.fuzzy_threshold
        if (value := matching.get("fuzzy_threshold")) is not None:
            fuzzy_threshold = _coerce_float(value, key="matching.fuzzy_threshold")
        fuzzy_scale = base_config.fuzzy_scale
        if (value := matching.get("fuzzy_scale")) is not None:
            fuzzy_scale = _coerce_float(value, key="matching.fuzzy_scale")
        snake_case_confidence = base_config.snake_case_confidence
        if (value := matching.get("snake_case_confidence")) is not None:
            snake_case_confidence = _coerce_float(
                value, key="matching.snake_case_confidence"
            )
        camel_case_confidence = base_config.camel_case_confidence
        if (value := matching.get("camel_case_confidence")) is not None:
            camel_case_confidence = _coerce_float(
                value, key="matching.camel_case_confidence"
            )
        return MatcherConfig(
            fuzzy_threshold=fuzzy_threshold,
            fuzzy_scale=fuzzy_scale,
            snake_case_confidence=snake_case_confidence,
            camel_case_confidence=camel_case_confidence,
        )


def _get_table(data: Mapping[str, object], key: str) -> Mapping[str, object]:
    value = data.get(key)
    if isinstance(value, Mapping):
        return cast("Mapping[str, object]", value)
    return {}


def _coerce_float(value: object, *, key: str) -> float:
    if isinstance(value, bool):
        raise ValueError(f"{key} must be numeric or string, got bool")
    if isinstance(value, (int, float)):
        return float(value)
    if isinstance(value, str):
        return float(value)
    raise ValueError(f"{key} must be numeric or string, got {type(value).__name__}")

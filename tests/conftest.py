import pytest

from mapping_suggester.domain.entities import FieldType, TargetField
from mapping_suggester.domain.services.tokens import (
    GenericTokenBuilder,
    TokenBuilderRegistry,
)


@pytest.fixture(autouse=True)
def _clear_matcher_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep matcher settings from the developer's shell out of the tests."""
    monkeypatch.delenv("FUZZY_THRESHOLD", raising=False)
    monkeypatch.delenv("FUZZY_SCALE", raising=False)


@pytest.fixture
def generic_registry() -> TokenBuilderRegistry:
    """Registry with only the case-variation fallback builder."""
    return TokenBuilderRegistry([GenericTokenBuilder()])


@pytest.fixture
def contact_fields() -> list[TargetField]:
    return [
        TargetField(id="firstName", name="First Name", required=True),
        TargetField(id="lastName", name="Last Name", required=True),
        TargetField(id="email", name="Email", type=FieldType.EMAIL),
    ]

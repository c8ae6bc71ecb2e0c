"""Application layer: ports and use cases wiring the domain to the outside."""

from .models import SuggestMappingRequest, SuggestMappingResponse
from .suggest_mapping_use_case import SuggestMappingDependencies, SuggestMappingUseCase

__all__ = [
    "SuggestMappingDependencies",
    "SuggestMappingRequest",
    "SuggestMappingResponse",
    "SuggestMappingUseCase",
]

"""Domain models and errors for componentcraft."""

from .models import (
    ComponentCraftError,
    ComponentExistsError,
    GeneratedFile,
    GenerationRequest,
    GenerationResult,
    MissingArgumentError,
    OutputKind,
    RenderedFile,
)

__all__ = [
    "ComponentCraftError",
    "ComponentExistsError",
    "MissingArgumentError",
    "OutputKind",
    "GenerationRequest",
    "RenderedFile",
    "GeneratedFile",
    "GenerationResult",
]

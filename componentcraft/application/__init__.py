from .generate_component_usecase import GenerateComponentUseCase

__all__ = ["GenerateComponentUseCase"]

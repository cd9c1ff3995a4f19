from .base import (Modifying, Transformation, TransformationError,
                   TransformationType)
from .registry import PlaceholderResolver, TransformationRegistry

__all__ = [
    "Modifying",
    "PlaceholderResolver",
    "Transformation",
    "TransformationError",
    "TransformationRegistry",
    "TransformationType",
]

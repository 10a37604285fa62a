"""Generic fixed-width vector value types with validated element conversion."""

from .constants import ElementType
from .core import (
    Float32,
    Float64,
    Int32,
    PrecisionLossWarning,
    UInt32,
    Vector2,
    Vector3,
    Vector4,
)

__all__ = [
    "ElementType",
    "Float32",
    "Float64",
    "Int32",
    "PrecisionLossWarning",
    "UInt32",
    "Vector2",
    "Vector3",
    "Vector4",
]

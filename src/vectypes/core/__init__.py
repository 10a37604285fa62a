"""Generic two-, three- and four-component vector models."""

from .element_types import (
    ELEMENT_TYPES,
    Float32,
    Float64,
    Int32,
    PrecisionLossWarning,
    UInt32,
    element_type_name,
    format_spec_for,
)
from .vector_2d import Vector2
from .vector_3d import Vector3
from .vector_4d import Vector4
from .vector_base import VectorBase

__all__ = [
    "ELEMENT_TYPES",
    "Float32",
    "Float64",
    "Int32",
    "PrecisionLossWarning",
    "UInt32",
    "Vector2",
    "Vector3",
    "Vector4",
    "VectorBase",
    "element_type_name",
    "format_spec_for",
]

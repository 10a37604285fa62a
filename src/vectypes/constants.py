"""Shared constants for vector element types and serialization."""

import os
from enum import StrEnum

SKIP_VALIDATION = os.getenv("SKIP_VALIDATION", "0") == "1"


class ElementType(StrEnum):
    INT32 = "int32"
    UINT32 = "uint32"
    FLOAT32 = "float32"
    FLOAT64 = "float64"

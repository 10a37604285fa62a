"""Fixed-width element types for the vector models.

Each element type is an ``Annotated`` alias that pydantic validates with the
usual lax coercion rules, plus a wrap validator that enforces the width of the
target type:

* values the target cannot hold at all (wrong type, out of range) raise a
  ``ValueError``, which pydantic reports as a ``ValidationError``;
* values the target can hold only approximately are narrowed and reported with
  a ``PrecisionLossWarning``.

The same validators run on construction, on field assignment and on
conversion from another vector, so every path applies identical rules.
"""

import logging
import math
import numbers
import sys
import warnings
from dataclasses import dataclass
from typing import Annotated, Any, TypeVar, get_args, get_origin

import numpy as np
from pydantic import ValidatorFunctionWrapHandler, WrapValidator

from ..constants import ElementType

logger = logging.getLogger(__name__)

INT32_MIN = -(2**31)
INT32_MAX = 2**31 - 1
UINT32_MAX = 2**32 - 1
FLOAT32_MAX = float(np.finfo(np.float32).max)

# Frames skipped when attributing a PrecisionLossWarning
_INTERNAL_PACKAGES = ("pydantic", "pydantic_core", "vectypes")

# Used when the element type carries no format of its own
DEFAULT_FORMAT = "%d"


class PrecisionLossWarning(UserWarning):
    """A value was narrowed while converting it to a vector element type."""


@dataclass(frozen=True)
class ElementFormat:
    """printf-style format attached to an element type."""

    kind: ElementType
    spec: str


def _lost_precision(original: Any, converted: float) -> bool:
    if isinstance(original, bool):
        return False
    if isinstance(original, int):
        return not math.isfinite(converted) or int(converted) != original
    if isinstance(original, float):
        return not math.isnan(original) and converted != original
    return False


def _is_internal_frame(module: str) -> bool:
    return any(module == pkg or module.startswith(f"{pkg}.") for pkg in _INTERNAL_PACKAGES)


def _warn_precision_loss(message: str) -> None:
    """Warn at the first frame outside pydantic and this package, i.e. the
    caller's line that wrote the component."""
    stacklevel = 1
    frame = sys._getframe(0)
    while frame is not None and _is_internal_frame(frame.f_globals.get("__name__", "")):
        frame = frame.f_back
        stacklevel += 1
    warnings.warn(PrecisionLossWarning(message), stacklevel=stacklevel)


def _check_int_range(low: int, high: int, name: str) -> Any:
    def validate(value: Any, handler: ValidatorFunctionWrapHandler) -> int:
        result: int = handler(value)
        if not (low <= result <= high):
            raise ValueError(f"{result} is out of range for {name} [{low}, {high}]")
        return result

    return validate


def _narrow_float32(value: Any, handler: ValidatorFunctionWrapHandler) -> float:
    wide: float = handler(value)
    if math.isfinite(wide) and abs(wide) > FLOAT32_MAX:
        raise ValueError(f"{wide!r} is out of range for float32")
    narrow = float(np.float32(wide))
    # Compare ints exactly; anything else against its float64 reading
    reference = value if isinstance(value, int) else wide
    if _lost_precision(reference, narrow):
        _warn_precision_loss(f"{value!r} narrowed to float32 value {narrow!r}")
    return narrow


def _check_float64(value: Any, handler: ValidatorFunctionWrapHandler) -> float:
    result: float = handler(value)
    if _lost_precision(value, result):
        _warn_precision_loss(f"{value!r} narrowed to float64 value {result!r}")
    return result


Int32 = Annotated[
    int,
    WrapValidator(_check_int_range(INT32_MIN, INT32_MAX, "int32")),
    ElementFormat(ElementType.INT32, "%d"),
]
UInt32 = Annotated[
    int,
    WrapValidator(_check_int_range(0, UINT32_MAX, "uint32")),
    ElementFormat(ElementType.UINT32, "%u"),
]
Float32 = Annotated[
    float,
    WrapValidator(_narrow_float32),
    ElementFormat(ElementType.FLOAT32, "%f"),
]
Float64 = Annotated[
    float,
    WrapValidator(_check_float64),
    ElementFormat(ElementType.FLOAT64, "%lf"),
]

ELEMENT_TYPES: dict[ElementType, Any] = {
    ElementType.INT32: Int32,
    ElementType.UINT32: UInt32,
    ElementType.FLOAT32: Float32,
    ElementType.FLOAT64: Float64,
}

# Plain Python types: int is rendered signed, float is a C double
_BUILTIN_FORMATS: dict[type, str] = {
    int: "%d",
    float: "%lf",
}


def format_spec_for(element_type: Any) -> str:
    """Return the printf-style format used to render one component.

    Args:
        element_type: The vector's type parameter, or None when unparametrized.

    Returns:
        The format from the type's ``ElementFormat`` marker, the builtin format
        for ``int``/``float``, or ``DEFAULT_FORMAT``. Non-numeric classes
        cannot be rendered with ``%d`` and use ``%s`` instead.
    """
    if get_origin(element_type) is Annotated:
        for meta in element_type.__metadata__:
            if isinstance(meta, ElementFormat):
                return meta.spec
        element_type = get_args(element_type)[0]

    if element_type is None or element_type is Any or isinstance(element_type, TypeVar):
        return DEFAULT_FORMAT

    if element_type in _BUILTIN_FORMATS:
        return _BUILTIN_FORMATS[element_type]

    if isinstance(element_type, type) and not issubclass(element_type, numbers.Real):
        logger.debug(f"{element_type!r} is not numeric, rendering components with %s")
        return "%s"

    logger.debug(f"No format for element type {element_type!r}, using {DEFAULT_FORMAT}")
    return DEFAULT_FORMAT


def element_type_name(element_type: Any) -> str:
    """Short name of an element type, e.g. ``float32`` for ``Float32``."""
    if get_origin(element_type) is Annotated:
        for meta in element_type.__metadata__:
            if isinstance(meta, ElementFormat):
                return meta.kind.value
        element_type = get_args(element_type)[0]
    return getattr(element_type, "__name__", None) or repr(element_type)

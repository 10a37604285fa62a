from typing import ClassVar, Generic

from .vector_base import T, VectorBase


class Vector3(VectorBase, Generic[T]):
    COMPONENTS: ClassVar[tuple[str, ...]] = ("x", "y", "z")

    x: T = None  # type: ignore[assignment]
    y: T = None  # type: ignore[assignment]
    z: T = None  # type: ignore[assignment]

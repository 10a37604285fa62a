from typing import ClassVar, Generic

from .vector_base import T, VectorBase


class Vector2(VectorBase, Generic[T]):
    COMPONENTS: ClassVar[tuple[str, ...]] = ("x", "y")

    x: T = None  # type: ignore[assignment]
    y: T = None  # type: ignore[assignment]

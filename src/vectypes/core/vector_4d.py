from typing import ClassVar, Generic

from .vector_base import T, VectorBase


class Vector4(VectorBase, Generic[T]):
    """Four components of element type ``T`` (coordinates, RGBA, quaternions).

    ``Vector4[T]()`` leaves every component unset: nothing is zero-filled and
    ``model_fields_set`` stays empty until a component is written.

        >>> Vector4[Int32](1, 2, 3, 4).to_string()
        'Vector4(1,2,3,4)'
        >>> Vector4[Float32](Vector2[Float32](1.5, 2.5))[2]
        0.0

    Building from a ``Vector4`` of another element type, or assigning one with
    ``assign``, converts element by element with the rules of ``T``: values
    ``T`` cannot hold raise ``ValidationError`` and values it holds only
    approximately emit ``PrecisionLossWarning``.
    """

    COMPONENTS: ClassVar[tuple[str, ...]] = ("x", "y", "z", "w")

    x: T = None  # type: ignore[assignment]
    y: T = None  # type: ignore[assignment]
    z: T = None  # type: ignore[assignment]
    w: T = None  # type: ignore[assignment]

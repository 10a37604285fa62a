"""Behavior shared by the fixed-arity vector models."""

import operator
from typing import Any, ClassVar, Self, TypeVar, cast

import msgpack
from pydantic import BaseModel, ConfigDict

from ..constants import SKIP_VALIDATION
from .element_types import element_type_name, format_spec_for

T = TypeVar("T")


class VectorBase(BaseModel):
    """A vector whose components are ordinary model fields.

    Subclasses declare one field per component and list the field names, in
    order, in ``COMPONENTS``. Field assignment is validated, and every other
    way of writing a component (positional construction, widening, ``assign``,
    indexing) goes through that same assignment path.
    """

    model_config = ConfigDict(validate_assignment=True)

    COMPONENTS: ClassVar[tuple[str, ...]] = ()

    def __init__(self, *args: Any, **data: Any) -> None:
        if args:
            if data:
                raise TypeError(
                    f"{type(self).type_name()} takes positional components or keyword fields, "
                    "not both"
                )
            data = type(self)._components_from(args)
        super().__init__(**data)

    @classmethod
    def type_name(cls) -> str:
        """Class name without type parameters, e.g. ``Vector4`` for ``Vector4[int]``."""
        return (cls.__pydantic_generic_metadata__["origin"] or cls).__name__

    @classmethod
    def element_type(cls) -> Any:
        """Type parameter the vector was specialized with, or None."""
        for klass in cls.__mro__:
            metadata = getattr(klass, "__pydantic_generic_metadata__", None)
            if metadata and metadata["args"]:
                return metadata["args"][0]
        return None

    def __repr_name__(self) -> str:
        element = self.element_type()
        if element is None:
            return self.type_name()
        return f"{self.type_name()}[{element_type_name(element)}]"

    @classmethod
    def _components_from(cls, args: tuple[Any, ...]) -> dict[str, Any]:
        if len(args) == 1 and isinstance(args[0], VectorBase):
            return cls._widen(args[0])
        if len(args) != len(cls.COMPONENTS):
            raise TypeError(
                f"{cls.type_name()} expects {len(cls.COMPONENTS)} components or a single "
                f"vector, got {len(args)} arguments"
            )
        return dict(zip(cls.COMPONENTS, args))

    @classmethod
    def _widen(cls, source: "VectorBase") -> dict[str, Any]:
        if len(source.COMPONENTS) > len(cls.COMPONENTS):
            raise TypeError(
                f"Cannot convert {source.type_name()} to {cls.type_name()}: "
                f"{len(source.COMPONENTS)} components do not fit in {len(cls.COMPONENTS)}"
            )
        data: dict[str, Any] = {}
        for name in cls.COMPONENTS:
            if name not in source.COMPONENTS:
                # Missing trailing components take the zero value of the element type
                data[name] = 0
            elif source.has_value(name):
                data[name] = getattr(source, name)
        return data

    def has_value(self, name: str) -> bool:
        """Whether component ``name`` has been written since construction.

        Components of a default-constructed vector stay unset until assigned;
        copies leave them unset instead of validating the placeholder.
        """
        return name in self.model_fields_set or getattr(self, name) is not None

    def assign(self, source: "VectorBase") -> Self:
        """Copy the components of ``source`` into this vector.

        Components are written one at a time through field assignment, so a
        value rejected part-way leaves the earlier components updated.
        Components that are unset in ``source`` are skipped.

        Returns:
            This vector, so assignments can be chained.
        """
        if not isinstance(source, VectorBase):
            raise TypeError(
                f"{self.type_name()}.assign expects a vector, got {type(source).__name__}"
            )
        for name, value in self._widen(source).items():
            setattr(self, name, value)
        return self

    def _component_name(self, index: int) -> str:
        index = operator.index(index)
        if not 0 <= index < len(self.COMPONENTS):
            raise IndexError(
                f"{self.type_name()} index out of range: {index} "
                f"(valid: 0..{len(self.COMPONENTS) - 1})"
            )
        return self.COMPONENTS[index]

    def __getitem__(self, index: int) -> Any:
        return getattr(self, self._component_name(index))

    def __setitem__(self, index: int, value: Any) -> None:
        setattr(self, self._component_name(index), value)

    def to_string(self) -> str:
        spec = format_spec_for(self.element_type())
        template = f"{self.type_name()}({','.join([spec] * len(self.COMPONENTS))})"
        return template % tuple(getattr(self, name) for name in self.COMPONENTS)

    def __str__(self) -> str:
        return self.to_string()

    def to_bytes(self) -> bytes:
        return cast(bytes, msgpack.packb(self.model_dump()))

    @classmethod
    def from_bytes(cls, data: bytes) -> Self:
        if SKIP_VALIDATION:
            return cls.model_construct(**msgpack.unpackb(data))
        return cls.model_validate(msgpack.unpackb(data))

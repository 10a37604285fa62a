"""Tests for element type validation, precision diagnostics and format lookup."""

import math
import warnings
from fractions import Fraction
from typing import Annotated, Any, TypeVar

import numpy as np
import pytest
from pydantic import TypeAdapter, ValidationError

from vectypes.constants import ElementType
from vectypes.core.element_types import (
    DEFAULT_FORMAT,
    ELEMENT_TYPES,
    INT32_MAX,
    INT32_MIN,
    UINT32_MAX,
    Float32,
    Float64,
    Int32,
    PrecisionLossWarning,
    UInt32,
    element_type_name,
    format_spec_for,
)


class TestInt32:
    adapter: TypeAdapter[int] = TypeAdapter(Int32)

    def test_bounds_accepted(self) -> None:
        assert self.adapter.validate_python(INT32_MIN) == INT32_MIN
        assert self.adapter.validate_python(INT32_MAX) == INT32_MAX

    def test_above_max_raises(self) -> None:
        with pytest.raises(ValidationError, match="out of range for int32"):
            self.adapter.validate_python(INT32_MAX + 1)

    def test_below_min_raises(self) -> None:
        with pytest.raises(ValidationError, match="out of range for int32"):
            self.adapter.validate_python(INT32_MIN - 1)

    def test_fractional_float_raises(self) -> None:
        with pytest.raises(ValidationError):
            self.adapter.validate_python(2.5)

    def test_numeric_string_coerced(self) -> None:
        assert self.adapter.validate_python("42") == 42


class TestUInt32:
    adapter: TypeAdapter[int] = TypeAdapter(UInt32)

    def test_bounds_accepted(self) -> None:
        assert self.adapter.validate_python(0) == 0
        assert self.adapter.validate_python(UINT32_MAX) == UINT32_MAX

    def test_negative_raises(self) -> None:
        with pytest.raises(ValidationError, match="out of range for uint32"):
            self.adapter.validate_python(-1)

    def test_above_max_raises(self) -> None:
        with pytest.raises(ValidationError):
            self.adapter.validate_python(UINT32_MAX + 1)


class TestFloat32:
    adapter: TypeAdapter[float] = TypeAdapter(Float32)

    def test_exact_values_pass_silently(self) -> None:
        with warnings.catch_warnings():
            warnings.simplefilter("error", PrecisionLossWarning)
            assert self.adapter.validate_python(1.5) == 1.5
            assert self.adapter.validate_python(-3) == -3.0

    def test_inexact_value_warns_and_narrows(self) -> None:
        with pytest.warns(PrecisionLossWarning, match="narrowed to float32"):
            result = self.adapter.validate_python(0.1)
        assert result == float(np.float32(0.1))

    def test_inexact_string_warns(self) -> None:
        with pytest.warns(PrecisionLossWarning):
            self.adapter.validate_python("0.1")

    def test_large_int_warns(self) -> None:
        with pytest.warns(PrecisionLossWarning):
            result = self.adapter.validate_python(2**24 + 1)
        assert result == float(2**24)

    def test_out_of_range_raises(self) -> None:
        with pytest.raises(ValidationError, match="out of range for float32"):
            self.adapter.validate_python(1e39)

    def test_infinity_passes(self) -> None:
        assert self.adapter.validate_python(float("inf")) == math.inf

    def test_nan_passes(self) -> None:
        assert math.isnan(self.adapter.validate_python(float("nan")))


class TestFloat64:
    adapter: TypeAdapter[float] = TypeAdapter(Float64)

    def test_int_converted(self) -> None:
        result = self.adapter.validate_python(3)
        assert result == 3.0
        assert isinstance(result, float)

    def test_large_int_warns(self) -> None:
        with pytest.warns(PrecisionLossWarning, match="narrowed to float64"):
            result = self.adapter.validate_python(2**53 + 1)
        assert result == float(2**53)

    def test_invalid_string_raises(self) -> None:
        with pytest.raises(ValidationError):
            self.adapter.validate_python("not_a_float")


class TestFormatSpecFor:
    def test_fixed_width_formats(self) -> None:
        assert format_spec_for(Int32) == "%d"
        assert format_spec_for(UInt32) == "%u"
        assert format_spec_for(Float32) == "%f"
        assert format_spec_for(Float64) == "%lf"

    def test_builtin_types(self) -> None:
        assert format_spec_for(int) == "%d"
        assert format_spec_for(float) == "%lf"

    def test_unparametrized_falls_back(self) -> None:
        assert format_spec_for(None) == DEFAULT_FORMAT
        assert format_spec_for(Any) == DEFAULT_FORMAT
        assert format_spec_for(TypeVar("T")) == DEFAULT_FORMAT

    def test_other_numeric_types_fall_back_to_signed(self) -> None:
        assert format_spec_for(bool) == "%d"
        assert format_spec_for(Fraction) == "%d"

    def test_non_numeric_uses_str(self) -> None:
        assert format_spec_for(str) == "%s"

    def test_annotated_without_format_uses_base_type(self) -> None:
        assert format_spec_for(Annotated[float, "metres"]) == "%lf"

    def test_every_element_type_has_a_format(self) -> None:
        for kind, element in ELEMENT_TYPES.items():
            assert format_spec_for(element) in {"%d", "%u", "%f", "%lf"}, kind
        assert set(ELEMENT_TYPES) == set(ElementType)


class TestElementTypeName:
    def test_fixed_width_kinds(self) -> None:
        assert element_type_name(Int32) == "int32"
        assert element_type_name(UInt32) == "uint32"
        assert element_type_name(Float32) == "float32"
        assert element_type_name(Float64) == "float64"

    def test_plain_types(self) -> None:
        assert element_type_name(int) == "int"
        assert element_type_name(Annotated[float, "metres"]) == "float"

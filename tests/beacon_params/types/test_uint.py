"""Unsigned Integer Type Tests."""

from decimal import Decimal
from typing import Any

import pytest
from pydantic import ValidationError, create_model

from beacon_params.types import Uint64


def test_accepts_full_range() -> None:
    """Both ends of the 64-bit range are valid."""
    assert Uint64(0) == 0
    assert Uint64(2**64 - 1) == 2**64 - 1


@pytest.mark.parametrize("value", [-1, 2**64])
def test_rejects_out_of_range(value: int) -> None:
    """Values outside [0, 2**64 - 1] raise OverflowError."""
    with pytest.raises(OverflowError, match="out of range for Uint64"):
        Uint64(value)


@pytest.mark.parametrize("value", [True, 1.5])
def test_rejects_bool_and_float(value: Any) -> None:
    """Booleans and floats are not silently truncated to integers."""
    with pytest.raises(TypeError):
        Uint64(value)


def test_is_a_plain_int() -> None:
    """Uint64 values mix freely with int arithmetic."""
    value = Uint64(8)
    assert isinstance(value, int)
    assert value * 64 == 512
    assert repr(value) == "Uint64(8)"


class TestPydanticIntegration:
    """Tests for use as a pydantic field type."""

    def test_validation_wraps_value(self) -> None:
        """A plain int is converted to Uint64 on validation."""
        model = create_model("Model", value=(Uint64, ...))
        instance: Any = model(value=10)
        assert isinstance(instance.value, Uint64)
        assert instance.value == 10

    def test_validation_rejects_negative(self) -> None:
        """Out-of-range values surface as a ValidationError."""
        model = create_model("Model", value=(Uint64, ...))
        with pytest.raises(ValidationError):
            model(value=-1)

    def test_serializes_as_int(self) -> None:
        """JSON output holds a bare integer."""
        model = create_model("Model", value=(Uint64, ...))
        assert model(value=42).model_dump_json() == '{"value":42}'

    def test_json_schema_is_bounded_integer(self) -> None:
        """The JSON schema advertises the uint64 range."""
        model = create_model("Model", value=(Uint64, ...))
        schema = model.model_json_schema()["properties"]["value"]
        assert schema["type"] == "integer"
        assert schema["maximum"] == 2**64 - 1
        assert schema["format"] == "uint64"


class TestPydanticStrictness:
    """Tests that pydantic validation never coerces non-integers."""

    @pytest.mark.parametrize("value", ["10", " 10 ", Decimal("8.9"), Decimal("8"), 8.0, True])
    def test_python_input_must_be_int(self, value: Any) -> None:
        """Strings, decimals, floats and bools raise instead of converting."""
        model = create_model("Model", value=(Uint64, ...))
        with pytest.raises(ValidationError, match="requires an integer"):
            model(value=value)

    @pytest.mark.parametrize("raw", ['{"value":"10"}', '{"value":8.5}', '{"value":true}'])
    def test_json_input_must_be_int(self, raw: str) -> None:
        """JSON strings, floats and booleans are rejected."""
        model = create_model("Model", value=(Uint64, ...))
        with pytest.raises(ValidationError):
            model.model_validate_json(raw)

    def test_json_input_is_wrapped(self) -> None:
        """A JSON integer becomes a Uint64."""
        model = create_model("Model", value=(Uint64, ...))
        instance: Any = model.model_validate_json('{"value":10}')
        assert isinstance(instance.value, Uint64)

    def test_json_input_out_of_range(self) -> None:
        """JSON integers beyond 64 bits are rejected."""
        model = create_model("Model", value=(Uint64, ...))
        with pytest.raises(ValidationError):
            model.model_validate_json(f'{{"value":{2**64}}}')

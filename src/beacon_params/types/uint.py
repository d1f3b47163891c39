"""Unsigned 64-bit integer type used for slot and time parameters."""

from __future__ import annotations

from typing import Any, ClassVar, SupportsInt

from pydantic import GetCoreSchemaHandler, GetJsonSchemaHandler
from pydantic.json_schema import JsonSchemaValue
from pydantic_core import core_schema
from typing_extensions import Self


class BaseUint(int):
    """A range-checked unsigned integer that is still a plain `int`."""

    BITS: ClassVar[int]
    """The number of bits in the integer (overridden by subclasses)."""

    def __new__(cls, value: SupportsInt) -> Self:
        """
        Create and validate a new unsigned integer.

        Raises:
            TypeError: If `value` is a bool or a float.
            OverflowError: If `value` is outside [0, 2**BITS - 1].
        """
        if isinstance(value, (bool, float)):
            raise TypeError(f"{cls.__name__} requires an integer, got {type(value).__name__}")
        int_value = int(value)
        if not (0 <= int_value < (2**cls.BITS)):
            raise OverflowError(f"{int_value} is out of range for {cls.__name__}")
        return super().__new__(cls, int_value)

    @classmethod
    def __get_pydantic_core_schema__(
        cls, source_type: Any, handler: GetCoreSchemaHandler
    ) -> core_schema.CoreSchema:
        """Hook into Pydantic's validation system."""

        def validate(value: Any) -> BaseUint:
            # Only real integers: no strings, decimals or other SupportsInt objects.
            try:
                if not isinstance(value, int) or isinstance(value, bool):
                    raise TypeError(
                        f"{cls.__name__} requires an integer, got {type(value).__name__}"
                    )
                return cls(value)
            except (OverflowError, TypeError) as e:
                raise ValueError(str(e)) from e

        return core_schema.json_or_python_schema(
            json_schema=core_schema.no_info_after_validator_function(
                cls, core_schema.int_schema(ge=0, lt=2**cls.BITS, strict=True)
            ),
            python_schema=core_schema.no_info_plain_validator_function(validate),
            serialization=core_schema.plain_serializer_function_ser_schema(
                lambda instance: int(instance)
            ),
        )

    @classmethod
    def __get_pydantic_json_schema__(
        cls, schema: core_schema.CoreSchema, handler: GetJsonSchemaHandler
    ) -> JsonSchemaValue:
        """Describe the type as a bounded integer in JSON Schema."""
        return {
            "type": "integer",
            "minimum": 0,
            "maximum": 2**cls.BITS - 1,
            "format": f"uint{cls.BITS}",
        }

    def __repr__(self) -> str:
        return f"{type(self).__name__}({int(self)})"


class Uint64(BaseUint):
    """A 64-bit unsigned integer."""

    BITS = 64

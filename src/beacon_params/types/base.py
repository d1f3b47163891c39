"""Strict, immutable base models shared by every parameter container."""

from typing import Any, Self

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class StrictBaseModel(BaseModel):
    """
    A strict, frozen pydantic base model.

    Field names are exposed in camel case when dumped by alias, so a field
    named `shard_count` appears as `shardCount` in JSON output. Construction
    by the Python field name stays possible.
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        validate_default=True,
        arbitrary_types_allowed=True,
        extra="forbid",
        frozen=True,
        strict=True,
    )

    def with_updates(self: Self, **changes: Any) -> Self:
        """
        Build a new, fully validated instance with some fields replaced.

        Unlike `model_copy(update=...)`, the result goes through validation,
        so an override cannot produce an instance that breaks an invariant.
        """
        return self.__class__(**(self.model_dump() | changes))

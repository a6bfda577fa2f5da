"""Base pydantic schemas for Lantern.

Every external-facing model serializes with camelCase aliases while the
Python attributes stay snake_case.
"""

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class BaseSchema(BaseModel):
    """Base schema with common configuration."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        str_strip_whitespace=True,
    )

    def to_json_dict(self) -> dict:
        """Dump to the external JSON shape (camelCase keys, enum values)."""
        return self.model_dump(mode="json", by_alias=True)


class FrozenSchema(BaseSchema):
    """Immutable schema; updates go through ``model_copy(update=...)``."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        str_strip_whitespace=True,
        frozen=True,
    )


__all__ = ["BaseSchema", "FrozenSchema"]

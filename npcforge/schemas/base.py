"""Shared pydantic configuration for persisted records."""

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class RecordModel(BaseModel):
    """Base for models that persist to save payloads.

    Python code uses snake_case attributes; payloads use camelCase keys.
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
    )

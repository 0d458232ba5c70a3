"""Shared base model for profile and result contracts."""

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """Accepts both snake_case field names and the platform's camelCase keys."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

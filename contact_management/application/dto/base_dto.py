"""
Base DTO
========

Shared pydantic configuration: snake_case in Python, camelCase on the wire.
"""
from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """Base model serialized with camelCase aliases."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class DeleteResponse(CamelModel):
    """DTO returned after a successful delete."""
    id: int
    deleted: bool = True

"""Shared Pydantic configuration for result schemas."""

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class ResultModel(BaseModel):
    """Base for every result model.

    Fields are snake_case in Python and camelCase on the wire:
    ``summary.model_dump(by_alias=True)`` yields ``overallMaturityScore`` etc.
    """

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

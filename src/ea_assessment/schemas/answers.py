"""Pydantic schema for a persisted answer set."""

from datetime import datetime

from pydantic import Field

from ea_assessment.schemas.base import ResultModel


class SavedAnswers(ResultModel):
    """Envelope written by answer stores.

    Attributes:
        saved_date: UTC timestamp of the save.
        answers: Question id -> selected answer label.
    """

    saved_date: datetime
    answers: dict[str, str] = Field(default_factory=dict)

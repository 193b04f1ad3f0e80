"""Pydantic models for the /feedback endpoint and the backing file."""

from __future__ import annotations

from typing import Union

from pydantic import AliasChoices, BaseModel, ConfigDict, Field

UNKNOWN_CLIENT = "Unknown"


class FeedbackDraft(BaseModel):
    """A validated submission that has not been given an id yet."""

    rating: Union[int, float]
    comment: str = Field(..., min_length=1)
    timestamp: str
    client_info: str = UNKNOWN_CLIENT


class FeedbackRecord(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    id: int = Field(..., ge=1)
    rating: Union[int, float]
    comment: str
    timestamp: str
    # Older files were written with `userAgent`.
    client_info: str = Field(
        default=UNKNOWN_CLIENT,
        validation_alias=AliasChoices("clientInfo", "userAgent"),
        serialization_alias="clientInfo",
    )

    def to_json(self) -> dict:
        return self.model_dump(by_alias=True)


class MessageResponse(BaseModel):
    message: str


class FeedbackResponse(MessageResponse):
    feedback: FeedbackRecord


class FeedbackListResponse(MessageResponse):
    count: int
    feedback: list[FeedbackRecord] = Field(default_factory=list)


class DeletedFeedbackResponse(MessageResponse):
    deletedFeedback: FeedbackRecord

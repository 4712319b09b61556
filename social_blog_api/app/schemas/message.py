"""
Pydantic models for message data.
"""

from pydantic import BaseModel, Field

from social_blog_api.app.core.db import SQLITE_INTEGER_MAX, SQLITE_INTEGER_MIN


class MessageCreate(BaseModel):
    """Body of ``POST /messages``.

    ``time_posted_epoch`` is supplied by the client and stored as is.
    """

    posted_by: int = Field(..., ge=SQLITE_INTEGER_MIN, le=SQLITE_INTEGER_MAX, examples=[1])
    message_text: str = Field(..., examples=["hello world"])
    time_posted_epoch: int = Field(
        ..., ge=SQLITE_INTEGER_MIN, le=SQLITE_INTEGER_MAX, examples=[1669947792]
    )


class MessageTextUpdate(BaseModel):
    """Body of ``PATCH /messages/{message_id}``."""

    message_text: str


class MessageRead(MessageCreate):
    """Schema for reading a message from the API."""

    message_id: int

    model_config = {
        "from_attributes": True,
    }

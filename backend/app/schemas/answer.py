"""
QnA Backend — Answer Request/Response Schemas
===============================================

What:  Pydantic models for the answer wire format.
"""

from pydantic import BaseModel, Field


class Answer(BaseModel):
    """Body of POST /answer."""
    question_uuid: str = Field(description="Identifier of the question being answered")
    content: str = Field(description="Answer text")


class AnswerDetail(BaseModel):
    """A stored answer as returned by the API."""
    answer_uuid: str = Field(description="Answer identifier (UUID)")
    question_uuid: str = Field(description="Identifier of the answered question")
    content: str = Field(description="Answer text")
    created_at: str = Field(description="Creation timestamp (ISO 8601, UTC)")


class AnswerId(BaseModel):
    """Body of DELETE /answer."""
    answer_uuid: str = Field(description="Answer identifier (UUID)")

"""
QnA Backend — Question Request/Response Schemas
=================================================

What:  Pydantic models for the question wire format.
How:   FastAPI validates request bodies against these and serializes
       responses through them.

Identifiers are plain strings on the wire. UUID syntax is checked by the
storage layer so that malformed identifiers come back as 400, not 422.
"""

from pydantic import BaseModel, Field


class Question(BaseModel):
    """Body of POST /question."""
    title: str = Field(description="Question title")
    description: str = Field(description="Question body text")


class QuestionDetail(BaseModel):
    """A stored question as returned by the API."""
    question_uuid: str = Field(description="Question identifier (UUID)")
    title: str = Field(description="Question title")
    description: str = Field(description="Question body text")
    created_at: str = Field(description="Creation timestamp (ISO 8601, UTC)")


class QuestionId(BaseModel):
    """Body of DELETE /question and GET /answers."""
    question_uuid: str = Field(description="Question identifier (UUID)")

"""Pydantic request/response models for feedback endpoints."""

from __future__ import annotations

from datetime import datetime
from typing import Any, ClassVar, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field

FeedbackTypeLiteral = Literal["general", "complaint", "suggestion"]
FeedbackStatusLiteral = Literal["pending", "reviewed", "resolved"]


class FeedbackModel(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: str
    user_id: str
    user_name: str
    container_id: Optional[str] = None
    message: str
    type: FeedbackTypeLiteral
    status: FeedbackStatusLiteral
    created_at: datetime
    response: Optional[str] = None
    responded_by: Optional[str] = None
    responded_at: Optional[datetime] = None


class FeedbackCreate(BaseModel):
    message: str = Field(..., min_length=1)
    type: FeedbackTypeLiteral = "general"
    container_id: Optional[str] = Field(default=None, description="Related container, if any.")
    user_id: Optional[str] = Field(default=None, description="Defaults to the logged-in user.")
    user_name: Optional[str] = Field(default=None, description="Defaults to the logged-in user.")


class FeedbackUpdate(BaseModel):
    message: Optional[str] = Field(default=None, min_length=1)
    type: Optional[FeedbackTypeLiteral] = None
    container_id: Optional[str] = None
    status: Optional[FeedbackStatusLiteral] = None
    response: Optional[str] = Field(default=None, description="Kept only when resolving.")

    NULLABLE_FIELDS: ClassVar[frozenset[str]] = frozenset({"container_id"})

    def to_patch(self) -> dict[str, Any]:
        """Fields sent by the client. An explicit null only clears a nullable field."""
        return {
            key: value
            for key, value in self.model_dump(exclude_unset=True).items()
            if value is not None or key in self.NULLABLE_FIELDS
        }


class FeedbackReply(BaseModel):
    response: str = Field(..., min_length=1)

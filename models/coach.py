"""
Request/response models for the coach chat.

Chat messages are sanitized before they reach the LLM prompt.
"""

from typing import Any, List, Literal

from pydantic import BaseModel, Field, field_validator

from core.constants import MAX_CHAT_HISTORY
from core.sanitization import sanitize_user_input


class ChatMessage(BaseModel):
    """A single turn in the coach conversation."""

    role: Literal["user", "assistant"]
    content: str

    @field_validator("content")
    @classmethod
    def clean_content(cls, v: str) -> str:
        return sanitize_user_input(v)


class ChatRequest(BaseModel):
    """Request model for a coach chat turn."""

    message: str = Field(min_length=1)
    history: List[ChatMessage] = Field(default_factory=list)

    @field_validator("message")
    @classmethod
    def clean_message(cls, v: str) -> str:
        cleaned = sanitize_user_input(v)
        if not cleaned:
            raise ValueError("Message must not be blank")
        return cleaned

    @field_validator("history", mode="before")
    @classmethod
    def trim_history(cls, v: Any) -> Any:
        """Keep only the most recent turns."""
        if isinstance(v, list):
            return v[-MAX_CHAT_HISTORY:]
        return v


class ChatResponse(BaseModel):
    """Coach reply."""

    reply: str
    source: Literal["llm", "rules"]


class PerformanceSummary(BaseModel):
    """Summary of a finished workout used for insights."""

    exercises: List[str] = Field(default_factory=list)
    duration: float = Field(ge=0, description="Minutes")
    intensity: float = Field(ge=0, le=10)
    completion_rate: float = Field(ge=0, le=1)


class InsightsResponse(BaseModel):
    """Insights for a finished workout."""

    insights: List[str]

from datetime import datetime
from pydantic import Field, field_validator
from smart_feedback.domain.entities.sentiment import Sentiment, render_sentiment
from smart_feedback.schemas._base import CamelModel, require_text

class FeedbackIn(CamelModel):
    faculty_name: str
    student_name: str
    teaching_quality: int = Field(..., ge=1, le=5)
    communication_skill: int = Field(..., ge=1, le=5)
    comment: str | None = None

    @field_validator("faculty_name")
    @classmethod
    def _faculty_required(cls, v: str) -> str:
        return require_text(v, "Faculty name is required")

    @field_validator("student_name")
    @classmethod
    def _student_required(cls, v: str) -> str:
        return require_text(v, "Student name is required")

class FeedbackOut(CamelModel):
    id: int
    faculty_name: str
    student_name: str
    teaching_quality: int
    communication_skill: int
    comment: str | None = None
    sentiment: str
    created_at: datetime

    @field_validator("sentiment", mode="before")
    @classmethod
    def _render(cls, v):
        return render_sentiment(v) if isinstance(v, Sentiment) else v

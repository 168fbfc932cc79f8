from datetime import datetime
from pydantic import field_validator
from smart_feedback.schemas._base import CamelModel, require_text

class ReportGenerateIn(CamelModel):
    faculty_name: str

    @field_validator("faculty_name")
    @classmethod
    def _faculty_required(cls, v: str) -> str:
        return require_text(v, "Faculty name is required")

class ReportOut(CamelModel):
    id: int
    faculty_name: str
    avg_teaching_quality: float
    avg_communication_skill: float
    sentiment_summary: str | None = None
    total_feedback_count: int
    positive_count: int
    negative_count: int
    neutral_count: int
    created_at: datetime

class ReportGenerateOut(CamelModel):
    report: ReportOut

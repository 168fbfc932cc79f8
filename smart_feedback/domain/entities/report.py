from sqlalchemy import String, Integer, Float, Text, DateTime
from sqlalchemy.orm import Mapped, mapped_column
from datetime import datetime
from smart_feedback.infrastructure.db.base import Base, utcnow

class Report(Base):
    """Frozen snapshot of one faculty member's feedback statistics."""

    __tablename__ = "reports"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    faculty_name: Mapped[str] = mapped_column(String(255), index=True)
    avg_teaching_quality: Mapped[float] = mapped_column(Float)
    avg_communication_skill: Mapped[float] = mapped_column(Float)
    sentiment_summary: Mapped[str | None] = mapped_column(Text, nullable=True)
    total_feedback_count: Mapped[int] = mapped_column(Integer)
    positive_count: Mapped[int] = mapped_column(Integer, default=0)
    negative_count: Mapped[int] = mapped_column(Integer, default=0)
    neutral_count: Mapped[int] = mapped_column(Integer, default=0)
    created_at: Mapped[datetime] = mapped_column(DateTime, default=utcnow, index=True)

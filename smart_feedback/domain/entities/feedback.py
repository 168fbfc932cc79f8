from sqlalchemy import String, Integer, Text, DateTime, Enum, CheckConstraint
from sqlalchemy.orm import Mapped, mapped_column
from datetime import datetime
from smart_feedback.domain.entities.sentiment import Sentiment
from smart_feedback.infrastructure.db.base import Base, utcnow

class Feedback(Base):
    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    faculty_name: Mapped[str] = mapped_column(String(255), index=True)
    student_name: Mapped[str] = mapped_column(String(255))
    teaching_quality: Mapped[int] = mapped_column(Integer)  # 1..5
    communication_skill: Mapped[int] = mapped_column(Integer)  # 1..5
    comment: Mapped[str | None] = mapped_column(Text, nullable=True)
    sentiment: Mapped[Sentiment] = mapped_column(
        Enum(Sentiment, name="sentiment", native_enum=False, length=16),
        default=Sentiment.NEUTRAL,
    )
    created_at: Mapped[datetime] = mapped_column(DateTime, default=utcnow)

    __table_args__ = (
        CheckConstraint("teaching_quality BETWEEN 1 AND 5", name="ck_feedback_teaching_quality"),
        CheckConstraint("communication_skill BETWEEN 1 AND 5", name="ck_feedback_communication_skill"),
    )

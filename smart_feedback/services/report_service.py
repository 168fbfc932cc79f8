from __future__ import annotations

from decimal import Decimal, ROUND_HALF_UP
from typing import Sequence

import structlog

from smart_feedback.domain.entities.report import Report
from smart_feedback.domain.entities.sentiment import Sentiment
from smart_feedback.domain.errors import NotFound
from smart_feedback.domain.interfaces.feedback_repo import FeedbackRepository
from smart_feedback.domain.interfaces.report_repo import ReportRepository

logger = structlog.get_logger("reports")

NO_FEEDBACK_MESSAGE = "No feedback found for this faculty"


def _fixed(value: float, places: int) -> str:
    # half-up on the shortest decimal repr, so 6.25 -> "6.3" rather than "6.2"
    quantum = Decimal(1).scaleb(-places)
    return str(Decimal(repr(value)).quantize(quantum, rounding=ROUND_HALF_UP))


def build_sentiment_summary(
    *,
    total: int,
    positive: int,
    negative: int,
    neutral: int,
    avg_teaching_quality: float,
    avg_communication_skill: float,
) -> str:
    pos = _fixed(positive * 100.0 / total, 1)
    neg = _fixed(negative * 100.0 / total, 1)
    neu = _fixed(neutral * 100.0 / total, 1)
    return (
        f"Based on {total} feedback submissions: {pos}% Positive, {neg}% Negative, {neu}% Neutral. "
        f"Overall teaching quality: {_fixed(avg_teaching_quality, 2)}/5, "
        f"Communication skill: {_fixed(avg_communication_skill, 2)}/5."
    )


class ReportService:
    def __init__(self, feedback_repo: FeedbackRepository, report_repo: ReportRepository):
        self.feedback_repo = feedback_repo
        self.report_repo = report_repo

    async def generate(self, faculty_name: str) -> Report:
        logger.info("Generating report", faculty_name=faculty_name)

        stats = await self.feedback_repo.faculty_stats(faculty_name)
        if stats.total == 0:
            raise NotFound(NO_FEEDBACK_MESSAGE)

        counts = await self.feedback_repo.sentiment_counts(faculty_name)
        positive = counts.get(Sentiment.POSITIVE, 0)
        negative = counts.get(Sentiment.NEGATIVE, 0)
        neutral = counts.get(Sentiment.NEUTRAL, 0)

        summary = build_sentiment_summary(
            total=stats.total,
            positive=positive,
            negative=negative,
            neutral=neutral,
            avg_teaching_quality=stats.avg_teaching_quality,
            avg_communication_skill=stats.avg_communication_skill,
        )
        report = await self.report_repo.create(
            faculty_name=faculty_name,
            avg_teaching_quality=stats.avg_teaching_quality,
            avg_communication_skill=stats.avg_communication_skill,
            sentiment_summary=summary,
            total_feedback_count=stats.total,
            positive_count=positive,
            negative_count=negative,
            neutral_count=neutral,
        )
        logger.info("Report generated", report_id=report.id, faculty_name=faculty_name)
        return report

    async def list_all(self) -> Sequence[Report]:
        return await self.report_repo.list()

    async def by_faculty(self, faculty_name: str) -> Sequence[Report]:
        return await self.report_repo.list_by_faculty(faculty_name)

"""Tests for report aggregation."""

from types import SimpleNamespace
from unittest.mock import AsyncMock

import pytest

from smart_feedback.domain.entities.sentiment import Sentiment
from smart_feedback.domain.errors import NotFound
from smart_feedback.domain.interfaces.feedback_repo import FacultyStats
from smart_feedback.services.report_service import ReportService, build_sentiment_summary


def test_summary_format():
    summary = build_sentiment_summary(
        total=10, positive=6, negative=3, neutral=1,
        avg_teaching_quality=4.2, avg_communication_skill=3.85,
    )
    assert summary == (
        "Based on 10 feedback submissions: 60.0% Positive, 30.0% Negative, 10.0% Neutral. "
        "Overall teaching quality: 4.20/5, Communication skill: 3.85/5."
    )


def test_summary_rounding():
    summary = build_sentiment_summary(
        total=3, positive=1, negative=1, neutral=1,
        avg_teaching_quality=13 / 3, avg_communication_skill=5.0,
    )
    assert "33.3% Positive, 33.3% Negative, 33.3% Neutral" in summary
    assert "teaching quality: 4.33/5" in summary
    assert "Communication skill: 5.00/5." in summary


def test_summary_rounds_half_up():
    # 1/16 = 6.25%
    summary = build_sentiment_summary(
        total=16, positive=1, negative=0, neutral=15,
        avg_teaching_quality=1.125, avg_communication_skill=2.0,
    )
    assert "6.3% Positive" in summary
    assert "93.8% Neutral" in summary
    assert "teaching quality: 1.13/5" in summary


def _repos(total, counts, avg_tq=4.0, avg_cs=3.0):
    feedback_repo = AsyncMock()
    feedback_repo.faculty_stats.return_value = FacultyStats(total, avg_tq, avg_cs)
    feedback_repo.sentiment_counts.return_value = counts
    report_repo = AsyncMock()
    report_repo.create.side_effect = lambda **kw: SimpleNamespace(id=1, **kw)
    return feedback_repo, report_repo


@pytest.mark.asyncio
async def test_generate_persists_snapshot():
    counts = {Sentiment.POSITIVE: 6, Sentiment.NEGATIVE: 3, Sentiment.NEUTRAL: 1}
    feedback_repo, report_repo = _repos(10, counts)

    report = await ReportService(feedback_repo, report_repo).generate("Dr. Smith")

    report_repo.create.assert_awaited_once()
    assert report.faculty_name == "Dr. Smith"
    assert report.total_feedback_count == 10
    assert (report.positive_count, report.negative_count, report.neutral_count) == (6, 3, 1)
    assert report.avg_teaching_quality == 4.0
    assert "60.0% Positive, 30.0% Negative, 10.0% Neutral" in report.sentiment_summary


@pytest.mark.asyncio
async def test_generate_without_feedback_raises_not_found():
    feedback_repo, report_repo = _repos(0, {})

    with pytest.raises(NotFound):
        await ReportService(feedback_repo, report_repo).generate("Nobody")
    report_repo.create.assert_not_awaited()


@pytest.mark.asyncio
async def test_missing_sentiment_buckets_count_as_zero():
    feedback_repo, report_repo = _repos(2, {Sentiment.POSITIVE: 2})

    report = await ReportService(feedback_repo, report_repo).generate("Dr. Smith")

    assert (report.positive_count, report.negative_count, report.neutral_count) == (2, 0, 0)
    assert "100.0% Positive, 0.0% Negative, 0.0% Neutral" in report.sentiment_summary

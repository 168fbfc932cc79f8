from fastapi import Depends, Request
from sqlalchemy.ext.asyncio import AsyncSession
from smart_feedback.core.config import Settings
from smart_feedback.infrastructure.db.session import get_session
from smart_feedback.infrastructure.repositories.feedback_repo_sql import SQLFeedbackRepository
from smart_feedback.infrastructure.repositories.report_repo_sql import SQLReportRepository
from smart_feedback.infrastructure.external.ai_gateway_http import AIGatewayHTTPClient
from smart_feedback.services.feedback_service import FeedbackService
from smart_feedback.services.report_service import ReportService
from smart_feedback.services.sentiment_service import SentimentService

def app_settings(request: Request) -> Settings:
    return request.app.state.settings

def sentiment_service(cfg: Settings = Depends(app_settings)) -> SentimentService:
    return SentimentService(AIGatewayHTTPClient(cfg), cfg)

def feedback_service(session: AsyncSession = Depends(get_session), classifier: SentimentService = Depends(sentiment_service)) -> FeedbackService:
    return FeedbackService(SQLFeedbackRepository(session), classifier)

def report_service(session: AsyncSession = Depends(get_session)) -> ReportService:
    return ReportService(SQLFeedbackRepository(session), SQLReportRepository(session))

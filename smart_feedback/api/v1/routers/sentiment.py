# api/v1/routers/sentiment.py
from fastapi import APIRouter, Depends, HTTPException
from fastapi.responses import PlainTextResponse
import structlog

from smart_feedback.api.v1.dependencies import sentiment_service
from smart_feedback.domain.entities.sentiment import render_sentiment
from smart_feedback.domain.errors import PaymentRequired, RateLimited
from smart_feedback.services.sentiment_service import SentimentService
from smart_feedback.schemas.sentiment import SentimentAnalyzeIn, SentimentAnalyzeOut

router = APIRouter(prefix="/api/sentiment", tags=["sentiment"])

logger = structlog.get_logger("sentiment-api")

@router.post("/analyze", response_model=SentimentAnalyzeOut)
async def analyze(payload: SentimentAnalyzeIn, svc: SentimentService = Depends(sentiment_service)):
    try:
        sentiment = await svc.classify(payload.comment)
    except RateLimited as e:
        logger.warning("AI gateway rate limited")
        raise HTTPException(status_code=429, detail=str(e))
    except PaymentRequired as e:
        logger.warning("AI gateway payment required")
        raise HTTPException(status_code=402, detail=str(e))
    except Exception as e:
        logger.exception("Error in sentiment analysis")
        raise HTTPException(status_code=500, detail=f"Error analyzing sentiment: {e}")
    return SentimentAnalyzeOut(sentiment=render_sentiment(sentiment))

@router.get("/health", response_class=PlainTextResponse)
async def health():
    return "Sentiment Analysis Service is running"

from __future__ import annotations

import json
from typing import Any

import structlog

from smart_feedback.core.config import Settings
from smart_feedback.domain.entities.sentiment import Sentiment
from smart_feedback.domain.interfaces.sentiment_client import SentimentClient
from smart_feedback.services.keyword_sentiment import keyword_sentiment

logger = structlog.get_logger("sentiment")

SYSTEM_PROMPT = (
    "You are a sentiment analysis expert. Analyze the given feedback comment and classify it "
    'as exactly one of: "Positive", "Negative", or "Neutral". '
    "Respond with ONLY the sentiment classification word, nothing else."
)


def build_messages(comment: str) -> list[dict[str, str]]:
    return [
        {"role": "system", "content": SYSTEM_PROMPT},
        {
            "role": "user",
            "content": (
                "Analyze this feedback comment and respond with only one word - "
                f'Positive, Negative, or Neutral:\n\n"{comment}"'
            ),
        },
    ]


def extract_sentiment(body: str) -> Sentiment:
    """Read ``choices[0].message.content`` and match it against the labels.

    Anything unreadable resolves to Neutral instead of raising.
    """
    try:
        data: Any = json.loads(body)
        answer = data["choices"][0]["message"]["content"]
    except (ValueError, KeyError, IndexError, TypeError):
        logger.warning("Unparsable AI gateway response, defaulting to Neutral")
        return Sentiment.NEUTRAL

    sentiment = Sentiment.from_label(answer.strip() if isinstance(answer, str) else None)
    if sentiment is None:
        logger.warning("AI gateway answered with an unknown label", answer=answer)
        return Sentiment.NEUTRAL
    return sentiment


class SentimentService:
    def __init__(self, client: SentimentClient, app_settings: Settings):
        self.client = client
        self.settings = app_settings

    async def classify(self, comment: str | None) -> Sentiment:
        if comment is None or not comment.strip():
            return Sentiment.NEUTRAL

        if not self.settings.ai_gateway_configured:
            logger.warning("AI gateway key not configured, using keyword sentiment")
            return keyword_sentiment(comment)

        # RateLimited / PaymentRequired / ClassificationFailed propagate
        body = await self.client.chat_completion(messages=build_messages(comment))
        sentiment = extract_sentiment(body)
        logger.info("Sentiment analysis result", sentiment=sentiment.value)
        return sentiment

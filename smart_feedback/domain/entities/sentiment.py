from __future__ import annotations

import enum


class Sentiment(enum.Enum):
    """Valence of a feedback comment. Stored by member name."""

    POSITIVE = "Positive"
    NEGATIVE = "Negative"
    NEUTRAL = "Neutral"

    @classmethod
    def from_label(cls, label: str | None) -> Sentiment | None:
        # exact match only: "positive" or " Positive" are not labels
        for member in cls:
            if member.value == label:
                return member
        return None


def render_sentiment(sentiment: Sentiment) -> str:
    """Public label for a sentiment, e.g. ``Sentiment.POSITIVE -> "Positive"``."""
    return sentiment.value

# services/keyword_sentiment.py
from smart_feedback.domain.entities.sentiment import Sentiment

POSITIVE_KEYWORDS = ("excellent", "great", "amazing", "wonderful", "good", "helpful", "love", "best")
NEGATIVE_KEYWORDS = ("terrible", "awful", "bad", "hate", "worst", "horrible", "disappointed")

def keyword_sentiment(comment: str) -> Sentiment:
    t = (comment or "").lower()

    # positive wins when both sets match
    if any(k in t for k in POSITIVE_KEYWORDS):
        return Sentiment.POSITIVE
    if any(k in t for k in NEGATIVE_KEYWORDS):
        return Sentiment.NEGATIVE
    return Sentiment.NEUTRAL

from smart_feedback.domain.entities.sentiment import Sentiment, render_sentiment


def test_render_is_title_case():
    assert render_sentiment(Sentiment.POSITIVE) == "Positive"
    assert render_sentiment(Sentiment.NEGATIVE) == "Negative"
    assert render_sentiment(Sentiment.NEUTRAL) == "Neutral"


def test_from_label_is_case_sensitive():
    assert Sentiment.from_label("Negative") is Sentiment.NEGATIVE
    assert Sentiment.from_label("negative") is None
    assert Sentiment.from_label("POSITIVE") is None
    assert Sentiment.from_label(None) is None

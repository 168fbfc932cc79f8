"""Tests for SentimentService: remote call vs keyword fallback."""

import json
from unittest.mock import AsyncMock

import pytest

from conftest import completion_body, gateway_transport, make_settings
from smart_feedback.domain.entities.sentiment import Sentiment
from smart_feedback.domain.errors import ClassificationFailed, PaymentRequired, RateLimited
from smart_feedback.infrastructure.external.ai_gateway_http import AIGatewayHTTPClient
from smart_feedback.services.sentiment_service import SentimentService, extract_sentiment


def configured():
    return make_settings(ai_gateway_api_key="live-key")


class TestClassify:
    @pytest.mark.asyncio
    @pytest.mark.parametrize("comment", [None, "", "   "])
    async def test_empty_comment_is_neutral_without_remote_call(self, comment):
        client = AsyncMock()
        svc = SentimentService(client, configured())

        assert await svc.classify(comment) is Sentiment.NEUTRAL
        client.chat_completion.assert_not_awaited()

    @pytest.mark.asyncio
    @pytest.mark.parametrize("key", ["", "  ", "demo_key_for_testing"])
    async def test_unconfigured_key_uses_keywords(self, key):
        client = AsyncMock()
        svc = SentimentService(client, make_settings(ai_gateway_api_key=key))

        assert await svc.classify("This was the worst experience") is Sentiment.NEGATIVE
        client.chat_completion.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_remote_label_is_used(self):
        client = AsyncMock()
        client.chat_completion.return_value = completion_body("Negative")
        svc = SentimentService(client, configured())

        # keywords would say Positive; the remote answer wins
        assert await svc.classify("great, I guess") is Sentiment.NEGATIVE
        client.chat_completion.assert_awaited_once()
        messages = client.chat_completion.await_args.kwargs["messages"]
        assert messages[0]["role"] == "system"
        assert '"great, I guess"' in messages[1]["content"]

    @pytest.mark.asyncio
    @pytest.mark.parametrize("error", [RateLimited("slow down"), PaymentRequired("pay"), ClassificationFailed("boom")])
    async def test_remote_errors_propagate(self, error):
        client = AsyncMock()
        client.chat_completion.side_effect = error
        svc = SentimentService(client, configured())

        with pytest.raises(type(error)):
            await svc.classify("fine")

    @pytest.mark.asyncio
    async def test_end_to_end_with_http_client(self):
        calls = []
        cfg = configured()
        http = AIGatewayHTTPClient(cfg, transport=gateway_transport(content="Positive", calls=calls))
        svc = SentimentService(http, cfg)

        assert await svc.classify("meh") is Sentiment.POSITIVE
        assert len(calls) == 1
        body = json.loads(calls[0].content)
        assert body["model"] == cfg.ai_gateway_model
        assert calls[0].headers["Authorization"] == "Bearer live-key"


class TestExtractSentiment:
    def test_exact_label(self):
        assert extract_sentiment(completion_body("Positive")) is Sentiment.POSITIVE

    def test_whitespace_is_stripped(self):
        assert extract_sentiment(completion_body("  Neutral\n")) is Sentiment.NEUTRAL

    @pytest.mark.parametrize(
        "body",
        [
            completion_body("positive"),
            completion_body("Positive."),
            completion_body("The sentiment is Positive"),
            completion_body(None),
            json.dumps({"choices": []}),
            json.dumps({"unexpected": True}),
            "not json at all",
        ],
    )
    def test_unusable_answers_resolve_to_neutral(self, body):
        assert extract_sentiment(body) is Sentiment.NEUTRAL

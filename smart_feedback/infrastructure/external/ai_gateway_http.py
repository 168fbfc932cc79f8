import httpx
from typing import Mapping
from smart_feedback.core.config import Settings, settings as default_settings
from smart_feedback.domain.errors import ClassificationFailed, PaymentRequired, RateLimited

class AIGatewayHTTPClient:
    """Chat-completion client for the AI gateway. One request per call, no retries."""

    def __init__(self, app_settings:Settings|None=None, transport:httpx.AsyncBaseTransport|None=None):
        cfg = app_settings or default_settings
        self.url = cfg.ai_gateway_url
        self.model = cfg.ai_gateway_model
        self.temperature = cfg.ai_gateway_temperature
        self.max_tokens = cfg.ai_gateway_max_tokens
        self.timeout = cfg.ai_gateway_timeout
        self.headers = {
            "Authorization": f"Bearer {cfg.ai_gateway_api_key}",
            "Content-Type": "application/json",
        }
        self.transport = transport

    async def chat_completion(self, *, messages:list[Mapping[str, str]]) -> str:
        payload = {
            "model": self.model,
            "temperature": self.temperature,
            "max_tokens": self.max_tokens,
            "messages": list(messages),
        }
        try:
            async with httpx.AsyncClient(headers=self.headers, timeout=self.timeout, transport=self.transport) as client:
                r = await client.post(self.url, json=payload)
        except httpx.HTTPError as e:
            raise ClassificationFailed(f"AI Gateway request failed: {e.__class__.__name__}") from e

        if r.status_code == 429:
            raise RateLimited("Rate limit exceeded. Please try again later.")
        if r.status_code == 402:
            raise PaymentRequired("Payment required. Please add credits to your AI gateway workspace.")
        if r.status_code >= 400:
            raise ClassificationFailed(f"AI Gateway error: {r.status_code}")
        return r.text

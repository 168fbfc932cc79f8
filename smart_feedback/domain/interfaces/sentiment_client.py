from typing import Protocol, Mapping

class SentimentClient(Protocol):
    async def chat_completion(self, *, messages:list[Mapping[str, str]]) -> str:
        """Return the raw response body of a successful completion call."""
        ...

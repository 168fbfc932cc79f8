from pydantic import field_validator
from smart_feedback.schemas._base import CamelModel, require_text

class SentimentAnalyzeIn(CamelModel):
    comment: str

    @field_validator("comment")
    @classmethod
    def _comment_required(cls, v: str) -> str:
        return require_text(v, "Comment is required")

class SentimentAnalyzeOut(CamelModel):
    sentiment: str

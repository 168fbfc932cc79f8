from dataclasses import dataclass
from typing import Protocol, Sequence, Mapping
from smart_feedback.domain.entities.feedback import Feedback
from smart_feedback.domain.entities.sentiment import Sentiment

@dataclass(frozen=True)
class FacultyStats:
    total: int
    avg_teaching_quality: float
    avg_communication_skill: float

class FeedbackRepository(Protocol):
    async def create(self, *, faculty_name:str, student_name:str, teaching_quality:int, communication_skill:int, comment:str|None, sentiment:Sentiment) -> Feedback: ...
    async def list(self) -> Sequence[Feedback]: ...
    async def list_by_student(self, student_name:str) -> Sequence[Feedback]: ...
    async def list_by_faculty(self, faculty_name:str) -> Sequence[Feedback]: ...
    async def faculty_stats(self, faculty_name:str) -> FacultyStats: ...
    async def sentiment_counts(self, faculty_name:str) -> Mapping[Sentiment, int]: ...

from typing import Protocol, Sequence
from smart_feedback.domain.entities.report import Report

class ReportRepository(Protocol):
    async def create(self, *, faculty_name:str, avg_teaching_quality:float, avg_communication_skill:float, sentiment_summary:str, total_feedback_count:int, positive_count:int, negative_count:int, neutral_count:int) -> Report: ...
    async def list(self) -> Sequence[Report]: ...
    async def list_by_faculty(self, faculty_name:str) -> Sequence[Report]: ...

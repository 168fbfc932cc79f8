from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession
from typing import Sequence
from smart_feedback.domain.entities.report import Report

class SQLReportRepository:
    def __init__(self, session: AsyncSession):
        self.session = session

    async def create(self, *, faculty_name:str, avg_teaching_quality:float, avg_communication_skill:float, sentiment_summary:str, total_feedback_count:int, positive_count:int, negative_count:int, neutral_count:int) -> Report:
        obj = Report(
            faculty_name=faculty_name,
            avg_teaching_quality=avg_teaching_quality,
            avg_communication_skill=avg_communication_skill,
            sentiment_summary=sentiment_summary,
            total_feedback_count=total_feedback_count,
            positive_count=positive_count,
            negative_count=negative_count,
            neutral_count=neutral_count,
        )
        self.session.add(obj)
        await self.session.commit()
        await self.session.refresh(obj)
        return obj

    async def list(self) -> Sequence[Report]:
        res = await self.session.execute(select(Report).order_by(Report.id))
        return list(res.scalars().all())

    async def list_by_faculty(self, faculty_name:str) -> Sequence[Report]:
        stmt = select(Report).where(Report.faculty_name==faculty_name).order_by(Report.created_at.desc(), Report.id.desc())
        res = await self.session.execute(stmt)
        return list(res.scalars().all())

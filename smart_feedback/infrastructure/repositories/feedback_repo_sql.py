from sqlalchemy import select, func
from sqlalchemy.ext.asyncio import AsyncSession
from typing import Sequence, Mapping
from smart_feedback.domain.entities.feedback import Feedback
from smart_feedback.domain.entities.sentiment import Sentiment
from smart_feedback.domain.interfaces.feedback_repo import FacultyStats

class SQLFeedbackRepository:
    def __init__(self, session: AsyncSession):
        self.session = session

    async def create(self, *, faculty_name:str, student_name:str, teaching_quality:int, communication_skill:int, comment:str|None, sentiment:Sentiment) -> Feedback:
        obj = Feedback(faculty_name=faculty_name, student_name=student_name, teaching_quality=teaching_quality, communication_skill=communication_skill, comment=comment, sentiment=sentiment)
        self.session.add(obj)
        await self.session.commit()
        await self.session.refresh(obj)
        return obj

    async def list(self) -> Sequence[Feedback]:
        res = await self.session.execute(select(Feedback).order_by(Feedback.id))
        return list(res.scalars().all())

    async def list_by_student(self, student_name:str) -> Sequence[Feedback]:
        # SQL LOWER() only folds ASCII on SQLite, so compare in Python
        wanted = student_name.casefold()
        res = await self.session.execute(select(Feedback).order_by(Feedback.id))
        return [f for f in res.scalars().all() if f.student_name.casefold()==wanted]

    async def list_by_faculty(self, faculty_name:str) -> Sequence[Feedback]:
        res = await self.session.execute(select(Feedback).where(Feedback.faculty_name==faculty_name).order_by(Feedback.id))
        return list(res.scalars().all())

    async def faculty_stats(self, faculty_name:str) -> FacultyStats:
        stmt = select(
            func.count(Feedback.id),
            func.avg(Feedback.teaching_quality),
            func.avg(Feedback.communication_skill),
        ).where(Feedback.faculty_name==faculty_name)
        total, avg_tq, avg_cs = (await self.session.execute(stmt)).one()
        # AVG is NULL over zero rows and a Decimal on some backends
        return FacultyStats(
            total=int(total or 0),
            avg_teaching_quality=float(avg_tq or 0.0),
            avg_communication_skill=float(avg_cs or 0.0),
        )

    async def sentiment_counts(self, faculty_name:str) -> Mapping[Sentiment, int]:
        stmt = (
            select(Feedback.sentiment, func.count(Feedback.id))
            .where(Feedback.faculty_name==faculty_name)
            .group_by(Feedback.sentiment)
        )
        res = await self.session.execute(stmt)
        counts = {s: 0 for s in Sentiment}
        for sentiment, n in res.all():
            counts[sentiment] = int(n)
        return counts

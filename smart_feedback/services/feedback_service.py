from typing import Sequence
import structlog
from smart_feedback.domain.interfaces.feedback_repo import FeedbackRepository
from smart_feedback.domain.entities.feedback import Feedback
from smart_feedback.domain.entities.sentiment import Sentiment
from smart_feedback.services.sentiment_service import SentimentService

logger = structlog.get_logger("feedback")

class FeedbackService:
    def __init__(self, repo: FeedbackRepository, classifier: SentimentService):
        self.repo = repo
        self.classifier = classifier

    async def submit(self, *, faculty_name:str, student_name:str, teaching_quality:int, communication_skill:int, comment:str|None) -> Feedback:
        logger.info("Received feedback submission", faculty_name=faculty_name)
        sentiment = await self.classifier.classify(comment)
        if not isinstance(sentiment, Sentiment):
            logger.warning("Invalid sentiment value, defaulting to Neutral", sentiment=repr(sentiment))
            sentiment = Sentiment.NEUTRAL

        obj = await self.repo.create(
            faculty_name=faculty_name,
            student_name=student_name,
            teaching_quality=teaching_quality,
            communication_skill=communication_skill,
            comment=comment,
            sentiment=sentiment,
        )
        logger.info("Feedback saved", feedback_id=obj.id, sentiment=sentiment.value)
        return obj

    async def list_all(self) -> Sequence[Feedback]:
        return await self.repo.list()

    async def by_student(self, student_name:str) -> Sequence[Feedback]:
        return await self.repo.list_by_student(student_name)

    async def by_faculty(self, faculty_name:str) -> Sequence[Feedback]:
        return await self.repo.list_by_faculty(faculty_name)

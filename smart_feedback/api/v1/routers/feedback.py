# api/v1/routers/feedback.py
from fastapi import APIRouter, Depends, HTTPException
import structlog

from smart_feedback.api.v1.dependencies import feedback_service
from smart_feedback.services.feedback_service import FeedbackService
from smart_feedback.schemas.feedback import FeedbackIn, FeedbackOut

router = APIRouter(prefix="/api/feedback", tags=["feedback"])

logger = structlog.get_logger("feedback-api")

@router.post("", response_model=FeedbackOut, status_code=201)
async def submit_feedback(payload: FeedbackIn, svc: FeedbackService = Depends(feedback_service)):
    try:
        obj = await svc.submit(
            faculty_name=payload.faculty_name,
            student_name=payload.student_name,
            teaching_quality=payload.teaching_quality,
            communication_skill=payload.communication_skill,
            comment=payload.comment,
        )
    except Exception as e:
        logger.exception("Error submitting feedback", faculty_name=payload.faculty_name)
        raise HTTPException(status_code=500, detail=f"Error submitting feedback: {e}")
    return FeedbackOut.model_validate(obj)

@router.get("", response_model=list[FeedbackOut])
async def list_feedback(svc: FeedbackService = Depends(feedback_service)):
    items = await svc.list_all()
    return [FeedbackOut.model_validate(i) for i in items]

@router.get("/student/{student_name}", response_model=list[FeedbackOut])
async def feedback_by_student(student_name: str, svc: FeedbackService = Depends(feedback_service)):
    items = await svc.by_student(student_name)
    return [FeedbackOut.model_validate(i) for i in items]

@router.get("/faculty/{faculty_name}", response_model=list[FeedbackOut])
async def feedback_by_faculty(faculty_name: str, svc: FeedbackService = Depends(feedback_service)):
    items = await svc.by_faculty(faculty_name)
    return [FeedbackOut.model_validate(i) for i in items]

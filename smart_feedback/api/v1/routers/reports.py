# api/v1/routers/reports.py
from fastapi import APIRouter, Depends, HTTPException
from fastapi.responses import PlainTextResponse
import structlog

from smart_feedback.api.v1.dependencies import report_service
from smart_feedback.domain.errors import NotFound
from smart_feedback.services.report_service import ReportService
from smart_feedback.schemas.report import ReportGenerateIn, ReportGenerateOut, ReportOut

router = APIRouter(prefix="/api/reports", tags=["reports"])

logger = structlog.get_logger("reports-api")

@router.post("/generate", response_model=ReportGenerateOut)
async def generate_report(payload: ReportGenerateIn, svc: ReportService = Depends(report_service)):
    try:
        report = await svc.generate(payload.faculty_name)
    except NotFound as e:
        logger.warning("No feedback for report", faculty_name=payload.faculty_name)
        raise HTTPException(status_code=404, detail=str(e))
    except Exception as e:
        logger.exception("Error in report generation", faculty_name=payload.faculty_name)
        raise HTTPException(status_code=500, detail=f"Error generating report: {e}")
    return ReportGenerateOut(report=ReportOut.model_validate(report))

@router.get("/health", response_class=PlainTextResponse)
async def health():
    return "Report Generation Service is running"

@router.get("", response_model=list[ReportOut])
async def list_reports(svc: ReportService = Depends(report_service)):
    items = await svc.list_all()
    return [ReportOut.model_validate(i) for i in items]

@router.get("/faculty/{faculty_name}", response_model=list[ReportOut])
async def reports_by_faculty(faculty_name: str, svc: ReportService = Depends(report_service)):
    items = await svc.by_faculty(faculty_name)
    return [ReportOut.model_validate(i) for i in items]

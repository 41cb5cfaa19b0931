"""
API router for AI report generation.
"""
from fastapi import APIRouter, HTTPException, Request

from app.api.dependencies import ReportServiceDep
from app.api.v1.models.requests import ReportRequest
from app.api.v1.models.responses import ReportResponse
from app.config import settings
from app.middleware.rate_limit import limiter
from app.services.application.report_service import ReportInProgressError


router = APIRouter(
    prefix="/reports",
    tags=["reports"],
)


@router.post(
    "",
    response_model=ReportResponse,
    summary="Generate an analytical report",
    description="""
    Send the full current data set and an optional question to the
    generative-text service and return its answer.

    Failures of the service (missing API key, network or service errors)
    are not HTTP errors: the report field then holds a readable message.
    """,
    responses={
        200: {
            "description": "Report text or a fallback message",
            "content": {
                "application/json": {
                    "example": {"report": "## Purchasing overview\n- Area VN-DL-001 ..."}
                }
            }
        },
        409: {
            "description": "Another report is still being generated",
        },
        429: {
            "description": "Rate limit exceeded",
        },
    }
)
@limiter.limit(settings.report_rate_limit)
async def create_report(
    request: Request,
    payload: ReportRequest,
    report_service: ReportServiceDep,
) -> ReportResponse:
    try:
        report = await report_service.generate(payload.query)
    except ReportInProgressError as e:
        raise HTTPException(status_code=409, detail=str(e))
    return ReportResponse(report=report)

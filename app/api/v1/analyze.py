import logging

from fastapi import APIRouter, HTTPException, Request, status

from app.core.rate_limit import rate_limit
from app.features import build_text_metrics
from app.schemas.analysis import AnalyzeRequest, TextMetricsRequest
from app.services.analysis_service import AnalysisError, AnalysisInputError, analyze_resume

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post("/analyze", summary="Score a resume against a job description")
@rate_limit()
async def analyze(request: Request, payload: AnalyzeRequest):
    _ = request
    try:
        report = await analyze_resume(
            payload.resume_text,
            payload.job_description,
            payload.file_name or "Resume",
        )
    except AnalysisInputError as exc:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc)) from exc
    except AnalysisError as exc:
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Analysis failed. Please try again later.",
        ) from exc
    return report.to_dict()


@router.post("/text-metrics", summary="Auxiliary readability and impact signals")
@rate_limit()
async def text_metrics(request: Request, payload: TextMetricsRequest):
    _ = request
    return build_text_metrics(payload.text).model_dump()

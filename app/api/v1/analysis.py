import logging

from fastapi import APIRouter, Depends, HTTPException, Request, status

from app.core.rate_limit import rate_limit
from app.core.security import require_api_key
from app.schemas.analysis import AnalysisRequest, AnalysisResult
from app.services.analysis_service import AnalysisInputError, analyze_resume
from app.taxonomy import get_default_taxonomy

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post("/analysis", response_model=AnalysisResult)
@rate_limit()
async def analyze(
    request: Request,
    payload: AnalysisRequest,
    _: None = Depends(require_api_key),
):
    catalog = getattr(request.app.state, "catalog", None) or get_default_taxonomy()
    provider = getattr(request.app.state, "enrichment_provider", None)
    try:
        return await analyze_resume(payload, catalog=catalog, provider=provider)
    except AnalysisInputError as exc:
        raise HTTPException(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            detail={"message": str(exc), "field": exc.field},
        ) from exc
    except Exception as exc:
        logger.exception("resume_analysis_failed resume_chars=%s", len(payload.resume_text))
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail={"message": "Resume analysis failed.", "error_type": "internal_error"},
        ) from exc

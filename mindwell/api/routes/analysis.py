from fastapi import APIRouter, HTTPException, status
import logging

from mindwell.schemas.analysis import (
    AnalysisRequest,
    AnalysisResponse,
    ShortTermResponse,
    SymptomAnalysis,
    ValidationRequest,
    ValidationResponse,
)
from mindwell.services.analysis_service import analyze_short_term, analyze_user_input
from mindwell.utils.input_validator import InvalidInputError, validate_user_input
from mindwell.utils.symptom_matcher import analyze_symptoms

router = APIRouter()
logger = logging.getLogger(__name__)


def _reject(exc: InvalidInputError) -> HTTPException:
    logger.info("[analysis] input rejected: %s", exc.reason)
    return HTTPException(status_code=status.HTTP_422_UNPROCESSABLE_ENTITY, detail=exc.reason)


@router.post("/validate", response_model=ValidationResponse)
def validate(payload: ValidationRequest):
    result = validate_user_input(payload.text)
    return ValidationResponse(is_valid=result.is_valid, reason=result.reason)


@router.post("/analyze", response_model=AnalysisResponse)
async def analyze(payload: AnalysisRequest):
    try:
        return await analyze_user_input(payload)
    except InvalidInputError as exc:
        raise _reject(exc) from exc


@router.post("/short-term/remedies", response_model=ShortTermResponse)
async def short_term_remedies(payload: AnalysisRequest):
    try:
        return await analyze_short_term(payload)
    except InvalidInputError as exc:
        raise _reject(exc) from exc


@router.post("/debug/symptoms", response_model=SymptomAnalysis)
def debug_symptoms(payload: ValidationRequest):
    """Raw keyword analysis without validation or delay."""
    analysis = analyze_symptoms(payload.text)
    return SymptomAnalysis(
        symptoms=analysis.symptoms,
        severity=analysis.severity,
        emotional_state=analysis.emotional_state,
        triggers=analysis.triggers,
        physical_symptoms=analysis.physical_symptoms,
        confidence=analysis.confidence,
    )

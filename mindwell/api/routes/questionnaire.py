from fastapi import APIRouter, HTTPException, status

from mindwell.schemas.questionnaire import (
    ClassificationAnswers,
    ClassificationOutcome,
    LongTermAssessment,
    LongTermAssessmentRequest,
    UnsureAnswers,
    UnsureOutcome,
)
from mindwell.services.assessment_service import AssessmentService
from mindwell.utils.input_validator import InvalidInputError

router = APIRouter()


@router.post("/classify/answers", response_model=ClassificationOutcome)
def classify_answers(payload: ClassificationAnswers):
    return AssessmentService.classify_answers(payload)


@router.post("/classify/unsure", response_model=UnsureOutcome)
def classify_unsure(payload: UnsureAnswers):
    return AssessmentService.classify_unsure(payload)


@router.post("/long-term/assessment", response_model=LongTermAssessment)
def long_term_assessment(payload: LongTermAssessmentRequest):
    try:
        return AssessmentService.analyze_assessment(payload.model_dump())
    except InvalidInputError as exc:
        raise HTTPException(status_code=status.HTTP_422_UNPROCESSABLE_ENTITY, detail=exc.reason) from exc

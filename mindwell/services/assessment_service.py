from __future__ import annotations

import logging
from typing import List, Mapping, Optional

from mindwell.models.classification import AssessmentUrgency
from mindwell.schemas.catalog import PlanItem, Resource
from mindwell.schemas.questionnaire import (
    ClassificationAnswers,
    ClassificationOutcome,
    LongTermAssessment,
    UnsureAnswers,
    UnsureOutcome,
)
from mindwell.services.recommendation_service import RecommendationService
from mindwell.utils.answer_scorer import (
    analyze_unsure_answers,
    assessment_urgency,
    score_answers,
    score_unsure_answers,
)
from mindwell.utils.input_validator import InvalidInputError

logger = logging.getLogger(__name__)

REQUIRED_ASSESSMENT_FIELDS: List[str] = [
    "primary_concern",
    "duration",
    "severity",
    "previous_treatment",
    "support_system",
]


class AssessmentService:
    @classmethod
    def classify_answers(cls, answers: ClassificationAnswers) -> ClassificationOutcome:
        scores = score_answers(answers.model_dump())
        return ClassificationOutcome(
            type=scores.issue_type,
            short_term_score=scores.short_term,
            long_term_score=scores.long_term,
        )

    @classmethod
    def classify_unsure(cls, answers: UnsureAnswers) -> UnsureOutcome:
        payload = answers.model_dump()
        return UnsureOutcome(
            type=analyze_unsure_answers(payload),
            long_term_score=score_unsure_answers(payload),
        )

    @classmethod
    def analyze_assessment(cls, answers: Mapping[str, Optional[str]]) -> LongTermAssessment:
        missing = [name for name in REQUIRED_ASSESSMENT_FIELDS if not answers.get(name)]
        if missing:
            raise InvalidInputError(f"Please answer all required questions: {', '.join(missing)}")

        urgency = assessment_urgency(answers)
        concern = answers.get("primary_concern")
        resources = RecommendationService.get_recommended_resources(urgency, answers.get("previous_treatment"))
        plan = RecommendationService.get_iks_plan(concern)

        if urgency is AssessmentUrgency.CRISIS:
            logger.warning("[assessment] crisis severity reported; crisis resources prioritised")

        return LongTermAssessment(
            urgency=urgency,
            primary_concern=concern or "",
            severity=answers.get("severity") or "",
            duration=answers.get("duration") or "",
            recommended_resources=[Resource.model_validate(r) for r in resources],
            iks_recommendations=[PlanItem.model_validate(item) for item in plan],
            needs_immediate=urgency is AssessmentUrgency.CRISIS,
        )

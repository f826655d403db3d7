"""
Analysis service: the request/response layer around the classification engine.

Validates the user's text, waits the configured processing delay, then
wraps the classification with a cultural message, next steps, a time-to-relief
estimate and a follow-up flag.
"""

from __future__ import annotations

import asyncio
import logging
from typing import List, Optional

from mindwell.core.config import settings
from mindwell.models.catalog import Difficulty
from mindwell.models.classification import AnalysisContext, ClassificationResult, IssueType, Urgency
from mindwell.schemas.analysis import (
    AnalysisRequest,
    AnalysisResponse,
    Classification,
    ShortTermResponse,
    UserProfile,
)
from mindwell.schemas.catalog import CulturalPractice, Practice, Remedy
from mindwell.services.classification_service import get_classification_engine
from mindwell.services.recommendation_service import RecommendationService
from mindwell.utils.display_names import symptom_labels
from mindwell.utils.input_validator import InputValidator

logger = logging.getLogger(__name__)

FOLLOW_UP_CONFIDENCE_THRESHOLD = 70


def default_short_term_profile() -> UserProfile:
    """Profile assumed by the short-term flow when the client sends none."""
    return UserProfile(name="User", age=25, gender="not-specified", experience=Difficulty.BEGINNER)


def generate_next_steps(classification: ClassificationResult) -> List[str]:
    if classification.urgency is Urgency.CRISIS:
        return [
            f"Contact crisis helpline immediately: {settings.CRISIS_HELPLINE}",
            "Reach out to a trusted friend or family member",
            "Consider visiting nearest emergency room if in immediate danger",
        ]

    steps: List[str] = []
    if classification.professional_help_needed:
        steps.append("Schedule appointment with mental health professional")
        steps.append("Consider counseling or therapy services")

    if classification.type is IssueType.SHORT_TERM:
        steps += [
            "Try the recommended breathing exercises immediately",
            "Practice for 10-15 minutes, 2-3 times today",
            "Monitor how you feel after each practice",
            "Return if symptoms persist beyond 48 hours",
        ]
    else:
        steps += [
            "Begin with beginner-level practices",
            "Establish a daily routine incorporating these techniques",
            "Consider consulting an Ayurvedic practitioner",
            "Track your progress over the next 2-4 weeks",
        ]
    return steps


def estimate_time_to_relief(classification: ClassificationResult) -> str:
    if classification.urgency is Urgency.CRISIS:
        return "Immediate professional intervention needed"

    if classification.type is IssueType.SHORT_TERM:
        if classification.urgency is Urgency.LOW:
            return "15-30 minutes with breathing exercises"
        return "1-3 hours with combined practices"

    if classification.urgency is Urgency.HIGH:
        return "1-2 weeks with consistent practice + professional help"
    return "2-4 weeks with regular practice"


def should_recommend_follow_up(classification: ClassificationResult) -> bool:
    return (
        classification.urgency in (Urgency.CRISIS, Urgency.HIGH)
        or classification.type is IssueType.LONG_TERM
        or classification.confidence < FOLLOW_UP_CONFIDENCE_THRESHOLD
    )


def build_response(
    classification: ClassificationResult,
    user_profile: Optional[UserProfile] = None,
) -> AnalysisResponse:
    engine = get_classification_engine()
    formatted = RecommendationService.format_with_culture(classification.recommendations, user_profile)
    return AnalysisResponse(
        classification=Classification(
            type=classification.type,
            urgency=classification.urgency,
            primary_concerns=classification.primary_concerns,
            primary_concern_labels=symptom_labels(classification.primary_concerns),
            recommendations=[Practice.model_validate(p) for p in classification.recommendations],
            professional_help_needed=classification.professional_help_needed,
            confidence=classification.confidence,
        ),
        cultural_message=engine.generate_culturally_aware_message(classification),
        next_steps=generate_next_steps(classification),
        estimated_time_to_relief=estimate_time_to_relief(classification),
        follow_up_recommended=should_recommend_follow_up(classification),
        formatted_recommendations=[
            CulturalPractice(
                practice=Practice.model_validate(item["practice"]),
                cultural_context=item["cultural_context"],
                adapted_instructions=item["adapted_instructions"],
            )
            for item in formatted
        ],
    )


def _classify(request: AnalysisRequest) -> ClassificationResult:
    InputValidator().ensure_valid(request.text)
    return get_classification_engine().classify_and_recommend(
        request.text,
        request.duration,
        request.user_profile,
    )


async def analyze_user_input(request: AnalysisRequest) -> AnalysisResponse:
    """Validate, classify and assemble the full analysis response.

    Raises:
        InvalidInputError: if the text fails validation (before any delay).
    """
    classification = _classify(request)
    await asyncio.sleep(settings.ANALYSIS_DELAY_SECONDS)

    if classification.urgency is Urgency.CRISIS:
        logger.warning(
            "[analysis] crisis urgency (context=%s); surfacing helpline %s",
            request.context.value if request.context else AnalysisContext.INITIAL.value,
            settings.CRISIS_HELPLINE,
        )

    return build_response(classification, request.user_profile)


async def analyze_short_term(request: AnalysisRequest) -> ShortTermResponse:
    """Short-term flow: analysis plus the quick-relief remedies it maps to."""
    if request.user_profile is None:
        request = request.model_copy(update={"user_profile": default_short_term_profile()})

    classification = _classify(request)
    await asyncio.sleep(settings.ANALYSIS_DELAY_SECONDS)

    remedies = RecommendationService.map_short_term_remedies(classification)
    return ShortTermResponse(
        analysis=build_response(classification, request.user_profile),
        remedies=[Remedy.model_validate(r) for r in remedies],
    )

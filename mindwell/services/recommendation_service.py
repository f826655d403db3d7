from __future__ import annotations

import logging
from typing import Dict, Iterable, List, Optional, Sequence

from mindwell.models.catalog import (
    Difficulty,
    PlanItem,
    Practice,
    PracticeCategory,
    Remedy,
    Resource,
    ResourceCost,
    ResourceType,
)
from mindwell.models.classification import AssessmentUrgency, ClassificationResult, Severity
from mindwell.schemas.analysis import UserProfile
from mindwell.services.catalog_service import (
    GENERAL_PLAN_ITEM,
    IKS_PLANS,
    SHORT_TERM_REMEDIES,
    PracticeNotFoundError,
    RemedyNotFoundError,
    get_cultural_context,
    get_practice,
    get_remedy,
    list_resources,
)

logger = logging.getLogger(__name__)

MAX_RECOMMENDATIONS = 5
MAX_BEGINNER_RECOMMENDATIONS = 4
MIN_SHORT_TERM_REMEDIES = 3
MAX_SHORT_TERM_REMEDIES = 4
MAX_RESOURCES = 8

# Practice category -> quick-relief remedy shown by the short-term flow
REMEDY_FOR_CATEGORY: Dict[PracticeCategory, str] = {
    PracticeCategory.PRANAYAMA: "box-breathing",
    PracticeCategory.YOGA: "child-pose",
    PracticeCategory.MEDITATION: "body-scan",
}
ANXIETY_REMEDY = "grounding-54321"

ELEVATED_SEVERITIES = {Severity.MODERATE, Severity.SEVERE}


def _dedupe_by_id(items: Iterable) -> list:
    seen = set()
    unique = []
    for item in items:
        if item.id in seen:
            continue
        seen.add(item.id)
        unique.append(item)
    return unique


class RecommendationService:
    @classmethod
    def recommend_iks_practices(
        cls,
        symptoms: Sequence[str],
        severity: Severity,
        experience: Optional[str] = None,
    ) -> List[Practice]:
        """Pick catalog practices for the matched symptom categories.

        Beginners get only beginner-difficulty entries capped at four, in
        place of the deduplicate-and-cap-at-five step used for everyone else.
        """
        practice_ids: List[str] = []

        if "anxiety" in symptoms or "stress" in symptoms:
            practice_ids += ["nadi-shodhana", "bhramari"]

        if "physical" in symptoms or "stress" in symptoms:
            practice_ids += ["child-pose", "legs-up-wall"]

        if "depression" in symptoms or "cognitive" in symptoms:
            practice_ids += ["yoga-nidra", "trataka"]

        if "sleep" in symptoms:
            practice_ids += ["yoga-nidra", "legs-up-wall"]

        if severity in ELEVATED_SEVERITIES:
            if "anxiety" in symptoms or "stress" in symptoms:
                practice_ids.append("ashwagandha")
            if "cognitive" in symptoms or "depression" in symptoms:
                practice_ids.append("brahmi")
            practice_ids.append("dinacharya")

        recommendations = cls._resolve_practices(practice_ids)

        if experience == Difficulty.BEGINNER.value:
            beginner = [p for p in recommendations if p.difficulty is Difficulty.BEGINNER]
            return beginner[:MAX_BEGINNER_RECOMMENDATIONS]

        return _dedupe_by_id(recommendations)[:MAX_RECOMMENDATIONS]

    @classmethod
    def _resolve_practices(cls, practice_ids: Iterable[str]) -> List[Practice]:
        resolved: List[Practice] = []
        for practice_id in practice_ids:
            try:
                resolved.append(get_practice(practice_id))
            except PracticeNotFoundError as exc:
                logger.warning("[recommendations] skipping unmapped practice: %s", exc)
        return resolved

    @classmethod
    def map_short_term_remedies(cls, classification: ClassificationResult) -> List[Remedy]:
        remedy_ids: List[str] = []
        for practice in classification.recommendations:
            remedy_id = REMEDY_FOR_CATEGORY.get(practice.category)
            if remedy_id:
                remedy_ids.append(remedy_id)

        if "anxiety" in classification.primary_concerns:
            remedy_ids.append(ANXIETY_REMEDY)

        mapped = _dedupe_by_id(cls._resolve_remedies(remedy_ids))

        if len(mapped) < MIN_SHORT_TERM_REMEDIES:
            remaining = [r for r in SHORT_TERM_REMEDIES if r not in mapped]
            mapped += remaining[: MIN_SHORT_TERM_REMEDIES - len(mapped)]

        return mapped[:MAX_SHORT_TERM_REMEDIES]

    @classmethod
    def _resolve_remedies(cls, remedy_ids: Iterable[str]) -> List[Remedy]:
        resolved: List[Remedy] = []
        for remedy_id in remedy_ids:
            try:
                resolved.append(get_remedy(remedy_id))
            except RemedyNotFoundError as exc:
                logger.warning("[recommendations] skipping unmapped remedy: %s", exc)
        return resolved

    @classmethod
    def get_recommended_resources(
        cls,
        urgency: AssessmentUrgency,
        treatment: Optional[str],
    ) -> List[Resource]:
        recommended: List[Resource] = []

        # Crisis lines always come first
        if urgency is AssessmentUrgency.CRISIS:
            recommended += list_resources(ResourceType.CRISIS)

        ngos = list_resources(ResourceType.NGO)
        recommended += [r for r in ngos if r.cost is ResourceCost.FREE]

        if urgency in (AssessmentUrgency.HIGH, AssessmentUrgency.CRISIS):
            recommended += list_resources(ResourceType.PROFESSIONAL)

        recommended += [r for r in ngos if r.cost is not ResourceCost.FREE]

        if treatment in ("traditional", "never"):
            recommended += list_resources(ResourceType.IKS)

        return _dedupe_by_id(recommended)[:MAX_RESOURCES]

    @classmethod
    def get_iks_plan(cls, concern: Optional[str]) -> List[PlanItem]:
        plan = list(IKS_PLANS.get(concern or "", []))
        plan.append(GENERAL_PLAN_ITEM)
        return plan

    @classmethod
    def format_with_culture(
        cls,
        practices: Sequence[Practice],
        profile: Optional[UserProfile] = None,
    ) -> List[dict]:
        formatted = []
        for practice in practices:
            formatted.append(
                {
                    "practice": practice,
                    "cultural_context": get_cultural_context(practice.category.value),
                    "adapted_instructions": cls.adapt_instructions(practice.instructions, profile),
                }
            )
        return formatted

    @staticmethod
    def adapt_instructions(instructions: Sequence[str], profile: Optional[UserProfile] = None) -> List[str]:
        if not profile:
            return list(instructions)

        # Age adaptation takes precedence over the beginner note
        if profile.age is not None and profile.age > 60:
            return [
                step.replace("Hold for", "Hold gently for").replace("Deep breath", "Comfortable breath")
                for step in instructions
            ]

        if profile.experience == Difficulty.BEGINNER.value:
            return [step + " (Take your time, no rush)" for step in instructions]

        return list(instructions)

"""
Classification engine combining symptom matching, issue-type detection,
urgency assessment and practice selection into one result.
"""

from __future__ import annotations

import logging
from typing import Optional

from mindwell.models.classification import ClassificationResult, IssueType, Urgency
from mindwell.schemas.analysis import UserProfile
from mindwell.services.recommendation_service import RecommendationService
from mindwell.utils.symptom_matcher import SymptomMatcher, get_symptom_matcher

logger = logging.getLogger(__name__)

CRISIS_MESSAGE = (
    "आपकी स्थिति को देखते हुए, तुरंत सहायता लेना आवश्यक है। कृपया हेल्पलाइन पर संपर्क करें। / "
    "Given your situation, immediate support is essential. Please contact the helpline."
)
LONG_TERM_MESSAGE = (
    "दीर्घकालिक कल्याण के लिए पारंपरिक और आधुनिक दोनों दृष्टिकोणों का संयोजन सबसे प्रभावी है। / "
    "For long-term wellness, combining traditional and modern approaches is most effective."
)
SHORT_TERM_MESSAGE = (
    "तत्काल राहत के लिए ये प्राचीन भारतीय प्रथाएं सहायक हो सकती हैं। / "
    "These ancient Indian practices can be helpful for immediate relief."
)


class ClassificationEngine:
    def __init__(self, matcher: Optional[SymptomMatcher] = None):
        self.matcher = matcher or get_symptom_matcher()

    def classify_and_recommend(
        self,
        text: str,
        duration: Optional[str] = None,
        user_profile: Optional[UserProfile] = None,
    ) -> ClassificationResult:
        analysis = self.matcher.analyze(text)
        issue_type = self.matcher.classify_issue_type(text, duration)
        urgency = self.matcher.assess_urgency(analysis)

        experience = user_profile.experience if user_profile else None
        recommendations = RecommendationService.recommend_iks_practices(
            analysis.symptoms,
            analysis.severity,
            experience.value if experience else None,
        )

        professional_help_needed = urgency in (Urgency.CRISIS, Urgency.HIGH) or (
            urgency is Urgency.MEDIUM and issue_type is IssueType.LONG_TERM
        )

        logger.info(
            "[classifier] type=%s urgency=%s concerns=%s recommendations=%d",
            issue_type.value,
            urgency.value,
            analysis.symptoms,
            len(recommendations),
        )

        return ClassificationResult(
            type=issue_type,
            urgency=urgency,
            primary_concerns=analysis.symptoms,
            recommendations=recommendations,
            professional_help_needed=professional_help_needed,
            confidence=analysis.confidence,
        )

    @staticmethod
    def generate_culturally_aware_message(result: ClassificationResult) -> str:
        if result.urgency is Urgency.CRISIS:
            return CRISIS_MESSAGE
        if result.type is IssueType.LONG_TERM:
            return LONG_TERM_MESSAGE
        return SHORT_TERM_MESSAGE


_engine: Optional[ClassificationEngine] = None


def get_classification_engine() -> ClassificationEngine:
    """Get or create the classification engine singleton."""
    global _engine
    if _engine is None:
        _engine = ClassificationEngine()
    return _engine

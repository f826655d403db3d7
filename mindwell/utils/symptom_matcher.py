"""
Free-Text Symptom Matcher for MindWell
=======================================

Keyword containment analysis of a user's own description of how they feel.

Pipeline:
1. Lower-case the text (no tokenization, no stemming)
2. Category matching against the seven symptom keyword lists
3. Crisis keyword scan (forces crisis severity)
4. Severity indicator scan, last matching tier wins
5. Trigger extraction and confidence heuristic

Issue-type classification and urgency derivation live here too since they
only read the same keyword tables and the analysis produced above.
"""

from __future__ import annotations

import logging
from typing import List, Optional

from mindwell.models.classification import IssueType, Severity, SymptomAnalysis, Urgency
from mindwell.utils.text_cleaning import normalize_for_matching
from mindwell.utils.wellness_lexicon import (
    COMMON_TRIGGERS,
    CRISIS_KEYWORDS,
    DURATION_INDICATORS,
    EMOTIONAL_CATEGORIES,
    SEVERITY_INDICATORS,
    SYMPTOM_KEYWORDS,
    contains_any,
    find_matches,
    total_keyword_count,
)

logger = logging.getLogger(__name__)

MAX_CONFIDENCE = 95.0


class SymptomMatcher:
    """Substring matcher over the fixed wellness lexicon."""

    def __init__(self):
        self._total_keywords = total_keyword_count()

    def analyze(self, text: str) -> SymptomAnalysis:
        lower_text = normalize_for_matching(text)

        symptoms: List[str] = []
        emotional_state: List[str] = []
        physical_symptoms: List[str] = []

        has_crisis_keywords = contains_any(lower_text, CRISIS_KEYWORDS)

        for category, keywords in SYMPTOM_KEYWORDS.items():
            matches = find_matches(lower_text, keywords)
            if not matches:
                continue
            symptoms.append(category)
            if category in EMOTIONAL_CATEGORIES:
                emotional_state.append(category)
            if category == "physical":
                physical_symptoms.extend(matches)

        severity = Severity.MILD
        if has_crisis_keywords:
            severity = Severity.CRISIS
        else:
            # Every matching tier overwrites the previous one
            for level, indicators in SEVERITY_INDICATORS.items():
                if contains_any(lower_text, indicators):
                    severity = Severity(level)

        triggers = find_matches(lower_text, COMMON_TRIGGERS)

        confidence = min(len(symptoms) / self._total_keywords * 100, MAX_CONFIDENCE)

        if severity is Severity.CRISIS:
            logger.warning(
                "[symptom-matcher] crisis severity detected (crisis_keywords=%s, categories=%s)",
                has_crisis_keywords,
                symptoms,
            )

        return SymptomAnalysis(
            symptoms=symptoms,
            severity=severity,
            emotional_state=emotional_state,
            triggers=triggers,
            physical_symptoms=physical_symptoms,
            confidence=confidence,
        )

    def classify_issue_type(self, text: str, duration: Optional[str] = None) -> IssueType:
        lower_text = normalize_for_matching(text)

        has_short_term = contains_any(lower_text, DURATION_INDICATORS["short_term"])
        has_long_term = contains_any(lower_text, DURATION_INDICATORS["long_term"])

        # An explicit duration answer outranks the wording of the text
        if duration:
            if "recent" in duration or "weeks" in duration:
                return IssueType.SHORT_TERM
            if "months" in duration or "years" in duration:
                return IssueType.LONG_TERM

        if has_long_term and not has_short_term:
            return IssueType.LONG_TERM
        return IssueType.SHORT_TERM

    @staticmethod
    def assess_urgency(analysis: SymptomAnalysis) -> Urgency:
        if analysis.severity is Severity.CRISIS:
            return Urgency.CRISIS
        if analysis.severity is Severity.SEVERE:
            return Urgency.HIGH
        if analysis.severity is Severity.MODERATE and (
            "anxiety" in analysis.symptoms or "depression" in analysis.symptoms
        ):
            return Urgency.MEDIUM
        return Urgency.LOW


# =============================================================================
# SINGLETON INSTANCE
# =============================================================================

_matcher: Optional[SymptomMatcher] = None


def get_symptom_matcher() -> SymptomMatcher:
    """Get or create the symptom matcher singleton."""
    global _matcher
    if _matcher is None:
        _matcher = SymptomMatcher()
    return _matcher


def analyze_symptoms(text: str) -> SymptomAnalysis:
    return get_symptom_matcher().analyze(text)


def classify_issue_type(text: str, duration: Optional[str] = None) -> IssueType:
    return get_symptom_matcher().classify_issue_type(text, duration)


def assess_urgency(analysis: SymptomAnalysis) -> Urgency:
    return SymptomMatcher.assess_urgency(analysis)

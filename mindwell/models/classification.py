from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum as PyEnum
from typing import List

from mindwell.models.catalog import Practice


class IssueType(str, PyEnum):
    SHORT_TERM = "short-term"
    LONG_TERM = "long-term"


class Severity(str, PyEnum):
    MILD = "mild"
    MODERATE = "moderate"
    SEVERE = "severe"
    CRISIS = "crisis"


class Urgency(str, PyEnum):
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"
    CRISIS = "crisis"


class AssessmentUrgency(str, PyEnum):
    """Urgency scale used by the long-term assessment flow."""
    STANDARD = "standard"
    MODERATE = "moderate"
    HIGH = "high"
    CRISIS = "crisis"


class AnalysisContext(str, PyEnum):
    INITIAL = "initial"
    FOLLOW_UP = "follow-up"
    CRISIS = "crisis"


@dataclass(frozen=True, slots=True)
class SymptomAnalysis:
    """Keyword-level reading of a free-text description."""
    symptoms: List[str]  # matched category labels, declaration order
    severity: Severity
    emotional_state: List[str] = field(default_factory=list)
    triggers: List[str] = field(default_factory=list)
    physical_symptoms: List[str] = field(default_factory=list)  # literal matched keywords
    confidence: float = 0.0  # 0-95, opaque heuristic


@dataclass(frozen=True, slots=True)
class ClassificationResult:
    type: IssueType
    urgency: Urgency
    primary_concerns: List[str]
    recommendations: List[Practice]
    professional_help_needed: bool
    confidence: float


@dataclass(frozen=True, slots=True)
class AnswerScores:
    short_term: int
    long_term: int

    @property
    def issue_type(self) -> IssueType:
        # Ties resolve to long-term
        if self.short_term > self.long_term:
            return IssueType.SHORT_TERM
        return IssueType.LONG_TERM

from __future__ import annotations

from typing import List, Literal, Optional

from pydantic import BaseModel, Field

from mindwell.models.classification import AssessmentUrgency, IssueType
from mindwell.schemas.catalog import PlanItem, Resource


class ClassificationAnswers(BaseModel):
    duration: Optional[Literal["recent", "weeks", "months", "ongoing"]] = None
    impact: Optional[Literal["minimal", "some", "significant", "severe"]] = None
    episodes: Optional[Literal["never", "rarely", "sometimes", "frequently"]] = None
    severity: Optional[Literal["mild", "moderate", "high", "crisis"]] = None
    support: Optional[Literal["strong", "some", "limited", "none"]] = None


class ClassificationOutcome(BaseModel):
    type: IssueType
    short_term_score: int
    long_term_score: int


class UnsureAnswers(BaseModel):
    duration: List[Literal["yes", "no"]] = Field(default_factory=list)
    pattern: List[Literal["constant", "comeandgo"]] = Field(default_factory=list)
    first_time: List[Literal["yes", "no"]] = Field(default_factory=list)


class UnsureOutcome(BaseModel):
    type: IssueType
    long_term_score: int


class LongTermAssessmentRequest(BaseModel):
    primary_concern: Literal["depression", "anxiety", "stress", "trauma", "sleep", "relationships", "other"]
    duration: Literal["1-3months", "3-6months", "6-12months", "1-2years", "2+years"]
    severity: Literal["mild", "moderate", "severe", "crisis"]
    previous_treatment: Literal["never", "counseling", "medication", "both", "traditional"]
    support_system: str = Field(min_length=1)
    cultural_preferences: Optional[str] = None


class LongTermAssessment(BaseModel):
    urgency: AssessmentUrgency
    primary_concern: str
    severity: str
    duration: str
    recommended_resources: List[Resource]
    iks_recommendations: List[PlanItem]
    needs_immediate: bool

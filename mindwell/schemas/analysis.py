from __future__ import annotations

from typing import List, Optional

from pydantic import BaseModel, Field

from mindwell.models.catalog import Difficulty
from mindwell.models.classification import AnalysisContext, IssueType, Severity, Urgency
from mindwell.schemas.catalog import CulturalPractice, Practice, Remedy


class UserProfile(BaseModel):
    name: str = "User"
    age: Optional[int] = Field(default=None, ge=0, le=130)
    gender: str = "not-specified"
    experience: Optional[Difficulty] = None
    cultural_preferences: List[str] = Field(default_factory=list)
    previous_treatment: Optional[str] = None


class AnalysisRequest(BaseModel):
    text: str
    duration: Optional[str] = None
    user_profile: Optional[UserProfile] = None
    context: Optional[AnalysisContext] = None


class ValidationRequest(BaseModel):
    text: str


class ValidationResponse(BaseModel):
    is_valid: bool
    reason: Optional[str] = None


class SymptomAnalysis(BaseModel):
    symptoms: List[str]
    severity: Severity
    emotional_state: List[str] = Field(default_factory=list)
    triggers: List[str] = Field(default_factory=list)
    physical_symptoms: List[str] = Field(default_factory=list)
    confidence: float


class Classification(BaseModel):
    type: IssueType
    urgency: Urgency
    primary_concerns: List[str]
    primary_concern_labels: List[str] = Field(default_factory=list)
    recommendations: List[Practice]
    professional_help_needed: bool
    confidence: float


class AnalysisResponse(BaseModel):
    classification: Classification
    cultural_message: str
    next_steps: List[str]
    estimated_time_to_relief: str
    follow_up_recommended: bool
    formatted_recommendations: List[CulturalPractice] = Field(default_factory=list)


class ShortTermResponse(BaseModel):
    analysis: AnalysisResponse
    remedies: List[Remedy]

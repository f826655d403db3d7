from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum as PyEnum
from typing import List, Optional


class PracticeCategory(str, PyEnum):
    PRANAYAMA = "pranayama"
    YOGA = "yoga"
    AYURVEDA = "ayurveda"
    MEDITATION = "meditation"
    LIFESTYLE = "lifestyle"


class Difficulty(str, PyEnum):
    BEGINNER = "beginner"
    INTERMEDIATE = "intermediate"
    ADVANCED = "advanced"


class RemedyCategory(str, PyEnum):
    BREATHING = "breathing"
    MEDITATION = "meditation"
    YOGA = "yoga"
    HERBAL = "herbal"
    MINDFULNESS = "mindfulness"


class ResourceType(str, PyEnum):
    CRISIS = "crisis"
    PROFESSIONAL = "professional"
    NGO = "ngo"
    IKS = "iks"
    COMMUNITY = "community"


class ResourceCost(str, PyEnum):
    FREE = "free"
    LOW_COST = "low-cost"
    VARIES = "varies"


@dataclass(frozen=True, slots=True)
class Practice:
    """Hand-authored IKS practice record."""
    id: str
    title: str
    category: PracticeCategory
    description: str
    instructions: List[str]
    benefits: List[str]
    duration: str
    difficulty: Difficulty
    contraindications: Optional[List[str]] = None


@dataclass(frozen=True, slots=True)
class Remedy:
    """Quick-relief card offered by the short-term flow."""
    id: str
    title: str
    category: RemedyCategory
    duration: str
    description: str
    instructions: List[str] = field(default_factory=list)
    benefits: List[str] = field(default_factory=list)


@dataclass(frozen=True, slots=True)
class Resource:
    """Helpline or service directory entry."""
    id: str
    title: str
    type: ResourceType
    description: str
    cost: ResourceCost
    availability: str
    contact: Optional[str] = None
    website: Optional[str] = None


@dataclass(frozen=True, slots=True)
class PlanItem:
    practice: str
    description: str
    frequency: str

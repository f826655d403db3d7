from __future__ import annotations

from typing import List, Optional

from pydantic import BaseModel, ConfigDict

from mindwell.models.catalog import (
    Difficulty,
    PracticeCategory,
    RemedyCategory,
    ResourceCost,
    ResourceType,
)


class Practice(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: str
    title: str
    category: PracticeCategory
    description: str
    instructions: List[str]
    benefits: List[str]
    duration: str
    difficulty: Difficulty
    contraindications: Optional[List[str]] = None


class CulturalPractice(BaseModel):
    practice: Practice
    cultural_context: str
    adapted_instructions: List[str]


class Remedy(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: str
    title: str
    category: RemedyCategory
    duration: str
    description: str
    instructions: List[str]
    benefits: List[str]


class Resource(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: str
    title: str
    type: ResourceType
    description: str
    cost: ResourceCost
    availability: str
    contact: Optional[str] = None
    website: Optional[str] = None


class PlanItem(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    practice: str
    description: str
    frequency: str

from typing import List, Optional

from fastapi import APIRouter, HTTPException, Query, status

from mindwell.models.catalog import PracticeCategory, ResourceType
from mindwell.schemas.catalog import Practice, Resource
from mindwell.services.catalog_service import (
    PracticeNotFoundError,
    get_practice,
    list_practices,
    list_resources,
)

router = APIRouter()


@router.get("/practices", response_model=List[Practice])
def practices(category: Optional[PracticeCategory] = Query(None)):
    return [Practice.model_validate(p) for p in list_practices(category)]


@router.get("/practices/{practice_id}", response_model=Practice)
def practice_detail(practice_id: str):
    try:
        return Practice.model_validate(get_practice(practice_id))
    except PracticeNotFoundError as exc:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(exc)) from exc


@router.get("/resources", response_model=List[Resource])
def resources(type: Optional[ResourceType] = Query(None)):
    return [Resource.model_validate(r) for r in list_resources(type)]

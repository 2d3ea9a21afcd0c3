from typing import List

from fastapi import APIRouter

from models.survey import ProjectTime, SkillLevel
from services.static_data import get_skills, get_time_per_project

router = APIRouter(prefix="/api", tags=["reference"])


@router.get("/skills", response_model=List[SkillLevel])
async def skills():
    """Fixed skill levels."""
    return get_skills()


@router.get("/time", response_model=List[ProjectTime])
async def time_per_project():
    """Fixed hours spent per project."""
    return get_time_per_project()

# moroccan_kitchen/api/routes_profile.py
# Health profile for the current session (save replaces the whole profile)

from __future__ import annotations

from typing import Optional

from fastapi import APIRouter, Depends

from moroccan_kitchen.core.deps import get_or_set_anon_id, profile_snapshot, store_dep
from moroccan_kitchen.db.store import SessionStore
from moroccan_kitchen.models.health import HealthProfile
from moroccan_kitchen.models.schemas import CaloriesOut, ProfileResponse
from moroccan_kitchen.services.health import daily_calories, meal_target
from moroccan_kitchen.services.matcher import round_half_up
from moroccan_kitchen.services.nutrition import age_group

router = APIRouter(prefix="/profile", tags=["profile"])

@router.get("", response_model=ProfileResponse)
async def get_profile(
    anon_id: str = Depends(get_or_set_anon_id),
    profile: Optional[HealthProfile] = Depends(profile_snapshot),
):
    return ProfileResponse(anonId=anon_id, profile=profile)

@router.put("", response_model=ProfileResponse)
async def save_profile(
    payload: HealthProfile,
    anon_id: str = Depends(get_or_set_anon_id),
    store: SessionStore = Depends(store_dep),
):
    """Validation happens on the payload; an invalid profile is never stored."""
    saved = store.save_profile(anon_id, payload)
    return ProfileResponse(anonId=anon_id, profile=saved)

@router.delete("", response_model=ProfileResponse)
async def clear_profile(
    anon_id: str = Depends(get_or_set_anon_id),
    store: SessionStore = Depends(store_dep),
):
    store.clear_profile(anon_id)
    return ProfileResponse(anonId=anon_id, profile=None)

@router.get("/calories", response_model=CaloriesOut)
async def get_calories(profile: Optional[HealthProfile] = Depends(profile_snapshot)):
    return CaloriesOut(
        hasProfile=profile is not None,
        dailyCalories=daily_calories(profile),
        mealCalories=round_half_up(meal_target(profile)),
        ageGroup=age_group(profile),
    )

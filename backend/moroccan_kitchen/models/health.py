# Health profile / warning models
# HealthProfile is passed into the engine as an immutable snapshot (frozen)
from __future__ import annotations

from enum import Enum
from typing import List, Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator

class Gender(str, Enum):
    male = "male"
    female = "female"

class ActivityLevel(str, Enum):
    sedentary = "sedentary"
    light = "light"
    moderate = "moderate"
    active = "active"
    very_active = "very_active"

class Goal(str, Enum):
    lose = "lose"
    maintain = "maintain"
    gain = "gain"

class ConditionKey(str, Enum):
    diabetes = "diabetes"
    hypertension = "hypertension"
    cholesterol = "cholesterol"
    heart_disease = "heart_disease"
    kidney = "kidney"
    gout = "gout"
    celiac = "celiac"
    lactose = "lactose"
    obesity = "obesity"
    anemia = "anemia"

class AllergyKey(str, Enum):
    # collected by the profile form, not used for scoring
    nuts = "nuts"
    seafood = "seafood"
    eggs = "eggs"
    milk = "milk"
    wheat = "wheat"
    soy = "soy"
    honey = "honey"
    spicy = "spicy"

class HealthProfile(BaseModel):
    """Complete health profile. Either the whole record exists or there is none."""

    model_config = ConfigDict(frozen=True)

    age: int = Field(..., gt=0)
    gender: Gender
    weight: float = Field(..., gt=0)      # kg
    height: float = Field(..., gt=0)      # cm
    conditions: List[ConditionKey] = Field(default_factory=list)
    allergies: List[AllergyKey] = Field(default_factory=list)
    activityLevel: ActivityLevel = ActivityLevel.moderate
    goal: Goal = Goal.maintain

    @field_validator("conditions", "allergies")
    @classmethod
    def _v_unique(cls, v: list) -> list:
        # drop repeats, keep order
        return list(dict.fromkeys(v))

class HealthCondition(BaseModel):
    model_config = ConfigDict(frozen=True)

    label: str
    badIngredients: List[str] = Field(default_factory=list)
    warnings: List[str]

WarningType = Literal["danger", "warning", "success", "info"]

class HealthWarning(BaseModel):
    model_config = ConfigDict(frozen=True)

    type: WarningType
    icon: str
    title: str
    message: str

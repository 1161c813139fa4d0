# moroccan_kitchen/services/health.py
# Daily calorie target / per-recipe warnings / health score
# All functions take the profile snapshot as an argument (None = no profile)

from __future__ import annotations

from typing import Dict, List, Optional

from moroccan_kitchen.models.conditions import find_bad_ingredients, get_condition
from moroccan_kitchen.models.health import ActivityLevel, Gender, Goal, HealthProfile, HealthWarning
from moroccan_kitchen.services.matcher import round_half_up

DEFAULT_DAILY_CALORIES = 2000
MEALS_PER_DAY = 3

ACTIVITY_FACTORS: Dict[ActivityLevel, float] = {
    ActivityLevel.sedentary: 1.2,
    ActivityLevel.light: 1.375,
    ActivityLevel.moderate: 1.55,
    ActivityLevel.active: 1.725,
    ActivityLevel.very_active: 1.9,
}
GOAL_OFFSETS: Dict[Goal, int] = {
    Goal.lose: -500,
    Goal.maintain: 0,
    Goal.gain: 400,
}

# ------------------------------
# Calorie model
# ------------------------------

def bmr(profile: HealthProfile) -> float:
    """Mifflin-St Jeor basal metabolic rate."""
    base = 10 * profile.weight + 6.25 * profile.height - 5 * profile.age
    return base + 5 if profile.gender == Gender.male else base - 161

def daily_calories(profile: Optional[HealthProfile]) -> int:
    """BMR -> x activity -> + goal -> x age bracket -> round."""
    if profile is None:
        return DEFAULT_DAILY_CALORIES

    tdee = bmr(profile) * ACTIVITY_FACTORS.get(profile.activityLevel, ACTIVITY_FACTORS[ActivityLevel.moderate])
    tdee += GOAL_OFFSETS.get(profile.goal, 0)

    if profile.age < 18:
        tdee *= 1.1     # growth
    elif profile.age > 60:
        tdee *= 0.9

    return round_half_up(tdee)

def meal_target(profile: Optional[HealthProfile]) -> float:
    return daily_calories(profile) / MEALS_PER_DAY

# ------------------------------
# Warnings
# ------------------------------

def _calorie_warning(profile: HealthProfile, calories: int, daily: int, meal: float) -> Optional[HealthWarning]:
    if calories > meal * 1.5:
        return HealthWarning(
            type="warning",
            icon="⚠️",
            title="سعرات عالية",
            message=(
                f"هذه الوصفة تحتوي على {calories} سعرة وهي أكثر من {round_half_up(meal)} "
                f"سعرة الموصى بها لوجبة واحدة لشخص بعمر {profile.age} سنة"
            ),
        )
    if calories <= meal:
        return HealthWarning(
            type="success",
            icon="✅",
            title="سعرات مناسبة",
            message=f"هذه الوصفة مناسبة لاحتياجاتك اليومية ({daily} سعرة/يوم، ~{round_half_up(meal)} لكل وجبة)",
        )
    # meal < calories <= 1.5 * meal: nothing to say
    return None

def _age_warning(age: int) -> Optional[HealthWarning]:
    if age < 12:
        return HealthWarning(
            type="info",
            icon="👶",
            title="نصيحة للأطفال",
            message="قلل حجم الحصة للنصف. تجنب التوابل الحارة والفلفل. أضف المزيد من الخضروات.",
        )
    if age < 18:
        return HealthWarning(
            type="info",
            icon="🧑",
            title="نصيحة للمراهقين",
            message="جسمك في مرحلة نمو ويحتاج بروتين وكالسيوم إضافي. أضف الحليب أو اللبن كمشروب جانبي.",
        )
    if age > 60:
        return HealthWarning(
            type="info",
            icon="👴",
            title="نصيحة لكبار السن",
            message="اطبخ الطعام لفترة أطول ليصبح أسهل في الهضم. قلل الملح والدهون. أضف المزيد من الخضروات المسلوقة.",
        )
    return None

def _goal_warning(goal: Goal, calories: int) -> Optional[HealthWarning]:
    if goal == Goal.lose and calories > 400:
        return HealthWarning(
            type="warning",
            icon="🏋️",
            title="هدف إنقاص الوزن",
            message="لإنقاص الوزن، حاول اختيار وصفات أقل من 400 سعرة. يمكنك تقليل الحصة أو إزالة الزيت/الزبدة.",
        )
    if goal == Goal.gain and calories < 300:
        return HealthWarning(
            type="info",
            icon="💪",
            title="هدف زيادة الوزن",
            message="لزيادة الوزن، أضف المزيد من البروتين والكربوهيدرات. يمكنك إضافة أرز أو خبز كطبق جانبي.",
        )
    return None

def health_warnings(
    profile: Optional[HealthProfile],
    recipe_calories: int,
    ingredients: List[str],
) -> List[HealthWarning]:
    """Ordered: calorie tier, age bracket, one per condition (profile order), goal."""
    if profile is None:
        return []

    daily = daily_calories(profile)
    meal = daily / MEALS_PER_DAY
    warnings: List[HealthWarning] = []

    w = _calorie_warning(profile, recipe_calories, daily, meal)
    if w is not None:
        warnings.append(w)

    w = _age_warning(profile.age)
    if w is not None:
        warnings.append(w)

    for key in profile.conditions:
        cond = get_condition(key)
        found = find_bad_ingredients(key, ingredients)
        if found:
            warnings.append(HealthWarning(
                type="danger",
                icon="🚫",
                title=f"تحذير - {cond.label}",
                message=f"تحتوي على مكونات غير مناسبة: {'، '.join(found)}. {cond.warnings[0]}",
            ))
        else:
            warnings.append(HealthWarning(
                type="success",
                icon="💚",
                title=f"مناسبة - {cond.label}",
                message="هذه الوصفة لا تحتوي على مكونات ضارة لحالتك الصحية",
            ))

    w = _goal_warning(profile.goal, recipe_calories)
    if w is not None:
        warnings.append(w)

    return warnings

# ------------------------------
# Score
# ------------------------------

def health_score(
    profile: Optional[HealthProfile],
    recipe_calories: int,
    ingredients: List[str],
) -> int:
    """0-100; 100 means no penalty (always the case without a profile)."""
    if profile is None:
        return 100

    meal = meal_target(profile)
    score = 100
    if recipe_calories > meal * 2:
        score -= 30
    elif recipe_calories > meal * 1.5:
        score -= 15

    for key in profile.conditions:
        score -= 10 * len(find_bad_ingredients(key, ingredients))

    return max(0, min(100, score))

SCORE_VERDICTS = (
    (80, "suitable", "مناسبة لصحتك"),
    (50, "caution", "مقبولة بحذر"),
    (0, "unsuitable", "غير مناسبة لصحتك"),
)

def score_verdict(score: int) -> Dict[str, str]:
    for floor, key, label in SCORE_VERDICTS:
        if score >= floor:
            return {"key": key, "label": label}
    return {"key": "unsuitable", "label": SCORE_VERDICTS[-1][2]}

# moroccan_kitchen/services/nutrition.py
# Heuristic recipe facts for the detail view (not measured values)

from __future__ import annotations

from typing import Dict, Optional

from moroccan_kitchen.models.health import HealthProfile
from moroccan_kitchen.services.health import daily_calories, meal_target
from moroccan_kitchen.services.matcher import round_half_up

# share of calories / kcal per gram
MACRO_SPLIT = {
    "protein": (0.30, 4),
    "carbs": (0.45, 4),
    "fat": (0.25, 9),
}

def estimate_macros(calories: int) -> Dict[str, int]:
    """Grams per serving from a fixed 30/45/25 energy split."""
    return {name: round_half_up(calories * share / kcal) for name, (share, kcal) in MACRO_SPLIT.items()}

def calorie_label(calories: int) -> Dict[str, str]:
    if calories < 250:
        return {"key": "light", "label": "خفيف"}
    if calories < 400:
        return {"key": "moderate", "label": "معتدل"}
    if calories < 600:
        return {"key": "medium", "label": "متوسط"}
    return {"key": "rich", "label": "غني"}

def daily_share(profile: Optional[HealthProfile], calories: int) -> int:
    """Recipe calories as a percentage of the daily target."""
    return round_half_up(calories / daily_calories(profile) * 100)

def meal_budget(profile: Optional[HealthProfile], calories: int) -> Dict[str, int]:
    meal = round_half_up(meal_target(profile))
    return {
        "mealCalories": meal,
        "difference": calories - meal,   # > 0: over the per-meal target
    }

def age_group(profile: Optional[HealthProfile]) -> str:
    if profile is None:
        return ""
    age = profile.age
    if age < 12:
        return "طفل"
    if age < 18:
        return "مراهق"
    if age < 30:
        return "شاب"
    if age < 50:
        return "بالغ"
    if age < 65:
        return "كبير"
    return "مسن"

def age_explanation(profile: Optional[HealthProfile], calories: int) -> str:
    if profile is None:
        return ""
    age = profile.age
    daily = daily_calories(profile)
    pct = daily_share(profile, calories)

    if age < 12:
        return (
            f"الأطفال بعمر {age} سنوات يحتاجون حوالي {daily} سعرة يومياً للنمو السليم. "
            f"هذه الوصفة تمثل {pct}% من احتياجاتك اليومية. "
            "الأطفال يحتاجون بروتين وكالسيوم أكثر لبناء العظام والعضلات."
        )
    if age < 18:
        return (
            f"في سن المراهقة ({age} سنة)، جسمك ينمو بسرعة ويحتاج حوالي {daily} سعرة يومياً. "
            f"هذه الوصفة تمثل {pct}%. ركز على البروتين والحديد والكالسيوم."
        )
    if age < 30:
        return (
            f"في عمر {age} سنة، جسمك يحتاج حوالي {daily} سعرة يومياً. هذه الوصفة تمثل {pct}%. "
            "في هذا العمر الأيض نشيط ويمكنك الاستمتاع بالطعام مع الحفاظ على النشاط البدني."
        )
    if age < 50:
        return (
            f"في عمر {age} سنة، يبدأ الأيض بالتباطؤ تدريجياً. تحتاج حوالي {daily} سعرة يومياً. "
            f"هذه الوصفة تمثل {pct}%. انتبه لكمية الدهون والسكر."
        )
    if age < 65:
        return (
            f"في عمر {age} سنة، الجسم يحتاج سعرات أقل (حوالي {daily}/يوم) لكن تغذية أفضل. "
            f"هذه الوصفة تمثل {pct}%. ركز على الألياف والكالسيوم وفيتامين د."
        )
    return (
        f"في عمر {age} سنة، الجسم يحتاج حوالي {daily} سعرة يومياً. هذه الوصفة تمثل {pct}%. "
        "اطبخ الطعام جيداً وقلل من الملح والدهون. الخضروات المسلوقة والشوربات مثالية."
    )

# moroccan_kitchen/models/conditions.py
# === Condition catalog ========================================================
# condition key -> label / contraindicated ingredient substrings / advice
# warnings[0] is the primary text shown in a danger warning

from __future__ import annotations

from typing import Dict, List

from moroccan_kitchen.models.health import ConditionKey, HealthCondition

HEALTH_CONDITIONS: Dict[ConditionKey, HealthCondition] = {
    ConditionKey.diabetes: HealthCondition(
        label="السكري",
        badIngredients=["سكر", "عسل", "تمر", "زبيب", "مشمش مجفف", "برقوق", "قرفة سكر", "شباكية", "حلوى"],
        warnings=["تجنب الوصفات العالية بالسكر", "راقب كمية الكربوهيدرات"],
    ),
    ConditionKey.hypertension: HealthCondition(
        label="ضغط الدم المرتفع",
        badIngredients=["ملح", "زيتون مملح", "حامض مصير", "مخلل", "صويا"],
        warnings=["قلل من الملح", "تجنب الأطعمة المملحة"],
    ),
    ConditionKey.cholesterol: HealthCondition(
        label="الكولسترول",
        badIngredients=["زبدة", "سمن", "لحم دهني", "جلد الدجاج", "كريمة", "جبن"],
        warnings=["تجنب الدهون المشبعة", "اختر اللحوم الخالية من الدهون"],
    ),
    ConditionKey.heart_disease: HealthCondition(
        label="أمراض القلب",
        badIngredients=["ملح", "زبدة", "سمن", "لحم أحمر", "مقلي", "زيت كثير"],
        warnings=["قلل من الدهون المشبعة والملح", "اختر الأسماك والخضروات"],
    ),
    ConditionKey.kidney: HealthCondition(
        label="أمراض الكلى",
        badIngredients=["ملح", "بروتين كثير", "لحم أحمر", "طماطم", "بطاطس", "موز", "برتقال"],
        warnings=["قلل من البروتين والبوتاسيوم", "راقب كمية السوائل"],
    ),
    ConditionKey.gout: HealthCondition(
        label="النقرس",
        badIngredients=["لحم أحمر", "كبد", "سردين", "عدس", "فول", "حمص", "فاصوليا"],
        warnings=["تجنب اللحوم الحمراء والبقوليات", "أكثر من شرب الماء"],
    ),
    ConditionKey.celiac: HealthCondition(
        label="حساسية الغلوتين",
        badIngredients=[
            "دقيق", "خبز", "كسكس", "شعرية", "معجنات", "بسطيلة",
            "ورقة بسطيلة", "بغرير", "مسمن", "حرشة", "فريك",
        ],
        warnings=["تجنب جميع منتجات القمح", "استبدل بالأرز أو دقيق الذرة"],
    ),
    ConditionKey.lactose: HealthCondition(
        label="حساسية اللاكتوز",
        badIngredients=["حليب", "لبن", "جبن", "زبدة", "كريمة", "ياغورت"],
        warnings=["تجنب منتجات الألبان", "استبدل بحليب نباتي"],
    ),
    ConditionKey.obesity: HealthCondition(
        label="السمنة",
        badIngredients=["سكر", "زبدة", "سمن", "مقلي", "عسل", "لوز محمص"],
        warnings=["اختر وصفات أقل من 400 سعرة", "تجنب المقليات والحلويات"],
    ),
    ConditionKey.anemia: HealthCondition(
        label="فقر الدم",
        badIngredients=[],
        warnings=["تناول الأطعمة الغنية بالحديد", "اللحوم الحمراء والسبانخ مفيدة لك"],
    ),
}

def get_condition(key: ConditionKey) -> HealthCondition:
    """Every ConditionKey has an entry; a KeyError here means the table is out of date."""
    return HEALTH_CONDITIONS[ConditionKey(key)]

def find_bad_ingredients(key: ConditionKey, ingredients: List[str]) -> List[str]:
    """Contraindicated substrings found in the joined ingredient text (table order)."""
    text = " ".join(ingredients).lower()
    return [bad for bad in get_condition(key).badIngredients if bad.lower() in text]

"""
BMI and estimated daily calorie calculation.

The BMR estimate uses the Mifflin-St Jeor equation with a fixed age and the
male constant (+5). That is a demo simplification; see DESIGN.md.
"""

from decimal import Decimal, InvalidOperation
from typing import Any, Dict, Optional

from healthsync.config import settings
from healthsync.core.validation import positive_float, round_half_up, to_decimal

MISSING_INPUT_ERROR = "Enter height and weight."
OUT_OF_RANGE_ERROR = "Height or weight is out of range."


def calculate_bmi(height_cm: float, weight_kg: float) -> float:
    """BMI = kg / m², rounded half-up to one decimal."""
    height_m = to_decimal(height_cm) / Decimal(100)
    bmi = to_decimal(weight_kg) / (height_m * height_m)
    return float(round_half_up(bmi, 1))


def bmi_category(bmi: float) -> str:
    if bmi < 18.5:
        return "Underweight"
    if bmi < 25:
        return "Normal"
    if bmi < 30:
        return "Overweight"
    return "Obese"


def estimate_bmr(height_cm: float, weight_kg: float, age: Optional[int] = None) -> Decimal:
    """Mifflin-St Jeor: 10*w + 6.25*h - 5*age + 5."""
    if age is None:
        age = settings.BMR_ASSUMED_AGE
    return (
        Decimal(10) * to_decimal(weight_kg)
        + Decimal("6.25") * to_decimal(height_cm)
        - Decimal(5) * to_decimal(age)
        + Decimal(5)
    )


def activity_multiplier(value: Any) -> float:
    """Activity factor, falling back to the sedentary default when unusable."""
    parsed = positive_float(value)
    return parsed if parsed is not None else settings.DEFAULT_ACTIVITY_MULTIPLIER


def estimate_daily_calories(bmr: Any, activity: Any = None) -> int:
    return int(round_half_up(to_decimal(bmr) * to_decimal(activity_multiplier(activity))))


def calculate_body_metrics(
    height_cm: Any,
    weight_kg: Any,
    activity: Any = None,
    age: Optional[int] = None,
) -> Dict[str, Any]:
    """
    Compute BMI, its category and estimated daily calories.

    Args:
        height_cm: Height in centimetres (must be > 0).
        weight_kg: Weight in kilograms (must be > 0).
        activity: Activity multiplier; defaults to 1.2 if missing or invalid.
        age: Age used in the BMR estimate; defaults to settings.BMR_ASSUMED_AGE.

    Returns:
        A dict with bmi, category, bmr, calories and the inputs used, or
        {"error": ...} when height or weight is missing, not positive, or too
        large or small to compute.
    """
    height = positive_float(height_cm)
    weight = positive_float(weight_kg)
    if height is None or weight is None:
        return {"error": MISSING_INPUT_ERROR}

    multiplier = activity_multiplier(activity)
    if age is None:
        age = settings.BMR_ASSUMED_AGE
    try:
        bmi = calculate_bmi(height, weight)
        bmr = estimate_bmr(height, weight, age)
        calories = estimate_daily_calories(bmr, multiplier)
    except InvalidOperation:
        # Magnitudes beyond Decimal precision are not real body measurements
        return {"error": OUT_OF_RANGE_ERROR}

    return {
        "height_cm": height,
        "weight_kg": weight,
        "activity": multiplier,
        "age": age,
        "bmi": bmi,
        "category": bmi_category(bmi),
        "bmr": float(bmr),
        "calories": calories,
    }


def describe(result: Dict[str, Any]) -> str:
    """Human-readable one-liner for a calculate_body_metrics() result."""
    if "error" in result:
        return result["error"]
    return (
        f"BMI: {result['bmi']} — {result['category']}. "
        f"Estimated daily calories: {result['calories']} kcal (approx)."
    )

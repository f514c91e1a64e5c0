import numpy as np
import pandas as pd

# Mock values shown on the home dashboard
DAILY_SUMMARY = {
    "calories_kcal": 1883,
    "calorie_target_kcal": 2500,
    "distance_km": 7.5,
    "steps": 9832,
    "step_target": 10000,
}

EXERCISE_CARDS = [
    {"icon": "🏋️", "title": "Dumbbell", "value": 70, "unit": "lbs"},
    {"icon": "🚶", "title": "Treadmill", "value": 235, "unit": "Kcal"},
    {"icon": "🪢", "title": "Rope", "value": 432, "unit": "Kcal"},
]

WORKOUT_PLAN = {
    "month": "December, 2024",
    "week": "WEEK 1",
    "program": "Body Weight",
    "workout_index": 1,
    "workout_count": 5,
    "next_exercise": "Lower Strength",
}


def progress_ratio(value: float, target: float) -> float:
    """Fraction of target reached, clipped to [0, 1]; 0 for a non-positive target."""
    if target is None or target <= 0 or value is None or pd.isna(value):
        return 0.0
    return float(np.clip(value / target, 0.0, 1.0))


def build_summary_metrics(summary: dict | None = None) -> pd.DataFrame:
    """
    One row per headline metric with its target and progress.
    Metrics without a target get progress NaN.
    """
    s = summary or DAILY_SUMMARY
    rows = [
        {
            "metric": "Total Kilocalories",
            "value": s.get("calories_kcal"),
            "target": s.get("calorie_target_kcal"),
            "unit": "Kcal",
        },
        {
            "metric": "Distance",
            "value": s.get("distance_km"),
            "target": None,
            "unit": "km",
        },
        {
            "metric": "Steps",
            "value": s.get("steps"),
            "target": s.get("step_target"),
            "unit": "",
        },
    ]
    df = pd.DataFrame(rows)
    df["progress"] = [
        progress_ratio(v, t) if t is not None and not pd.isna(t) else np.nan
        for v, t in zip(df["value"], df["target"])
    ]
    return df


def build_exercise_cards(cards: list[dict] | None = None) -> pd.DataFrame:
    df = pd.DataFrame(cards if cards is not None else EXERCISE_CARDS, columns=["icon", "title", "value", "unit"])
    df["label"] = df["value"].map("{:,.0f}".format) + " " + df["unit"]
    return df


def format_metric(value: float, target: float | None = None, unit: str = "") -> str:
    if value is None or pd.isna(value):
        return "-"
    text = f"{value:,.0f}" if float(value).is_integer() else f"{value:,.1f}"
    if target is not None and not pd.isna(target):
        text += f" / {target:,.0f}"
    if unit:
        text += f" {unit}"
    return text


def plan_progress_label(plan: dict | None = None) -> str:
    p = plan or WORKOUT_PLAN
    return f"Workout {p['workout_index']} of {p['workout_count']}"

from typing import Dict, Sequence

MOOD_LABELS = ("Very Sad", "Sad", "Okay", "Good", "Very Good", "Excellent")

RECENT_WINDOW = 7
MIN_ENTRIES = 3
LOW_INTENSITY = 3
HIGH_INTENSITY = 7


def mood_label(intensity: int) -> str:
    if 1 <= intensity <= len(MOOD_LABELS):
        return MOOD_LABELS[intensity - 1]
    return "Neutral"


def _mean(values: Sequence[float]) -> float:
    return sum(values) / len(values)


def detect_pattern(intensities: Sequence[int]) -> str:
    low = sum(1 for i in intensities if i <= LOW_INTENSITY)
    high = sum(1 for i in intensities if i >= HIGH_INTENSITY)

    if low > high * 2:
        return "consistently_low"
    if high > low * 2:
        return "consistently_high"
    return "fluctuating"


def recommendation(trend: str, average: float) -> str:
    if average <= LOW_INTENSITY and trend == "declining":
        return "Consider reaching out to campus support services for additional help."
    if average >= HIGH_INTENSITY and trend == "improving":
        return "Great progress! Continue with your current coping strategies."
    return "Regular mood tracking is helping you stay aware. Keep it up!"


def analyze_mood_pattern(intensities: Sequence[int]) -> Dict[str, object]:
    """
    Summarise the most recent mood intensities (oldest first).

    The trend compares the two halves of the last seven entries; a shift of
    more than one point either way counts as improving or declining.
    """
    if len(intensities) < MIN_ENTRIES:
        return {"pattern": "insufficient_data", "trend": "neutral"}

    recent = list(intensities)[-RECENT_WINDOW:]
    average = _mean(recent)

    half = len(recent) // 2
    first_avg = _mean(recent[:half])
    second_avg = _mean(recent[half:])

    trend = "stable"
    if second_avg > first_avg + 1:
        trend = "improving"
    elif second_avg < first_avg - 1:
        trend = "declining"

    return {
        "pattern": detect_pattern(recent),
        "trend": trend,
        "averageIntensity": round(average, 2),
        "recommendation": recommendation(trend, average),
    }

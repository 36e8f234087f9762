import random
from dataclasses import dataclass
from typing import Iterable, Optional

CRISIS_PHRASES = (
    "suicide",
    "kill myself",
    "end it all",
    "want to die",
    "end my life",
    "harm myself",
    "hurt myself",
    "better off dead",
    "no reason to live",
)

POSITIVE_WORDS = ("happy", "good", "great", "better", "well", "okay", "fine")
NEGATIVE_WORDS = (
    "sad",
    "bad",
    "terrible",
    "awful",
    "depressed",
    "anxious",
    "stressed",
    "lonely",
)

DEFAULT_CONFIDENCE = 0.8
JITTER_RANGE = (0.7, 1.0)


@dataclass
class AnalysisResult:
    sentiment: str
    crisis_detected: bool
    emotional_intensity: int
    confidence: float
    risk_level: str = "low"
    positive_count: int = 0
    negative_count: int = 0

    def to_json(self) -> dict:
        """camelCase view used on the wire."""
        return {
            "sentiment": self.sentiment,
            "crisisDetected": self.crisis_detected,
            "emotionalIntensity": self.emotional_intensity,
            "confidence": self.confidence,
            "riskLevel": self.risk_level,
        }


class MessageAnalyzer:
    """
    Keyword-based sentiment and crisis detector.

    Matching is plain substring containment on the lower-cased text, so a
    keyword embedded in a longer word still counts ("well" in "farewell").
    Every keyword contributes at most once to its tally.
    """

    def __init__(
        self,
        crisis_phrases: Iterable[str] = CRISIS_PHRASES,
        positive_words: Iterable[str] = POSITIVE_WORDS,
        negative_words: Iterable[str] = NEGATIVE_WORDS,
        jitter: bool = False,
        rng: Optional[random.Random] = None,
    ):
        self.crisis_phrases = tuple(p.lower() for p in crisis_phrases)
        self.positive_words = tuple(dict.fromkeys(w.lower() for w in positive_words))
        self.negative_words = tuple(dict.fromkeys(w.lower() for w in negative_words))
        self.jitter = jitter
        self.rng = rng or random.Random()

    def analyze(self, text: str) -> AnalysisResult:
        text = (text or "").lower()

        crisis_detected = any(p in text for p in self.crisis_phrases)

        # tallies are computed even when crisis wins
        positive = sum(1 for w in self.positive_words if w in text)
        negative = sum(1 for w in self.negative_words if w in text)

        if crisis_detected:
            sentiment = "crisis"
        elif positive > negative:
            sentiment = "positive"
        elif negative > positive:
            sentiment = "negative"
        else:
            sentiment = "neutral"

        return AnalysisResult(
            sentiment = sentiment,
            crisis_detected = crisis_detected,
            emotional_intensity = max(positive, negative),
            confidence = self._confidence(),
            risk_level = "high" if crisis_detected else "low",
            positive_count = positive,
            negative_count = negative,
        )

    def _confidence(self) -> float:
        if not self.jitter:
            return DEFAULT_CONFIDENCE
        low, high = JITTER_RANGE
        return self.rng.uniform(low, high)


_default_analyzer = MessageAnalyzer()


def analyze(text: str) -> AnalysisResult:
    return _default_analyzer.analyze(text)

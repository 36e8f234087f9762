import random
from dataclasses import dataclass
from enum import Enum
from typing import Dict, List, Optional, Tuple

from campuscare.services.analyzer import AnalysisResult


class Priority(str, Enum):
    EMERGENCY = "emergency"
    HIGH = "high"
    MEDIUM = "medium"
    NORMAL = "normal"
    LOW = "low"


FOLLOW_UP = "How are you feeling after sharing that?"

CRISIS_RESOURCES = [
    "Emergency: 911",
    "Crisis Lifeline: 988",
    "Crisis Text Line: Text HOME to 741741",
]


@dataclass
class ResponseRecord:
    message: str
    resources: List[str]
    priority: Priority
    follow_up: Optional[str] = None

    def to_json(self) -> dict:
        data = {
            "message": self.message,
            "resources": list(self.resources),
            "priority": self.priority.value,
        }
        if self.follow_up is not None:
            data["followUp"] = self.follow_up
        return data


@dataclass(frozen=True)
class ResponseRule:
    messages: Tuple[str, ...]
    resources: Tuple[str, ...]
    priority: Priority
    follow_up: Optional[str] = FOLLOW_UP


CRISIS_RULE = ResponseRule(
    messages = (
        "I'm deeply concerned about your safety. Please call or text the "
        "Suicide & Crisis Lifeline at 988, or text HOME to 741741 to reach "
        "the Crisis Text Line. If you are in immediate danger, call 911 now. "
        "You are not alone in this.",
        "Your safety is the most important thing right now. Please contact "
        "the crisis lifeline at 988 or text HOME to 741741, and call 911 if "
        "you are in danger. You don't have to go through this alone.",
    ),
    resources = tuple(CRISIS_RESOURCES),
    priority = Priority.EMERGENCY,
)

RULES: Dict[str, ResponseRule] = {
    "positive": ResponseRule(
        messages = (
            "It's wonderful to hear you're feeling positive! What's helping "
            "create these good feelings?",
            "I'm glad to hear you're feeling positive! What's helping you "
            "maintain this good mood?",
            "Great to hear! Remembering these positive moments can be "
            "helpful during tougher times. What made today feel good?",
        ),
        resources = (
            "Gratitude journaling",
            "Share your positive energy",
            "Continue self-care practices",
        ),
        priority = Priority.LOW,
    ),
    "negative": ResponseRule(
        messages = (
            "I hear that you're going through a tough time. Thank you for "
            "sharing this with me. Would you like to talk more about what's "
            "coming up for you?",
            "It sounds like things are really challenging right now. These "
            "feelings are valid. Would you like to tell me more?",
            "Thank you for trusting me with this. What's been weighing on "
            "you the most?",
        ),
        resources = (
            "Deep breathing exercise",
            "Talk to a trusted friend",
            "Practice mindfulness",
        ),
        priority = Priority.MEDIUM,
    ),
    "neutral": ResponseRule(
        messages = (
            "Thanks for sharing. I'm here to listen and support you. How are "
            "you really feeling beneath the surface?",
            "I'm here to listen. Is there anything specific on your mind "
            "today?",
            "Thanks for checking in. How has your day been overall?",
        ),
        resources = (
            "Mindfulness practice",
            "Self-reflection",
            "Emotional awareness",
        ),
        priority = Priority.LOW,
    ),
}


class ResponseGenerator:
    """
    Maps an analysis onto a canned supportive reply.

    The lookup is a static table. Only the wording is drawn at random; the
    resources and priority of a row never change.
    """

    def __init__(self, rng: Optional[random.Random] = None):
        self.rng = rng or random.Random()

    def rule_for(self, analysis: AnalysisResult) -> ResponseRule:
        # crisis flag overrides whatever sentiment says
        if analysis.crisis_detected:
            return CRISIS_RULE
        return RULES.get(analysis.sentiment, RULES["neutral"])

    def respond(self, analysis: AnalysisResult) -> ResponseRecord:
        rule = self.rule_for(analysis)
        return ResponseRecord(
            message = self.rng.choice(rule.messages),
            resources = list(rule.resources),
            priority = rule.priority,
            follow_up = rule.follow_up,
        )


_default_generator = ResponseGenerator()


def respond(analysis: AnalysisResult) -> ResponseRecord:
    return _default_generator.respond(analysis)

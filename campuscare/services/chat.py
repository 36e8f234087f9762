import logging
from datetime import datetime, timezone
from typing import List, Optional

from campuscare.db.models import ChatMessage
from campuscare.db.repository import ChatHistoryRepository
from campuscare.services.analyzer import MessageAnalyzer
from campuscare.services.responder import ResponseGenerator

logger = logging.getLogger(__name__)

FALLBACK_MESSAGE = (
    "I'm having trouble processing your message right now. "
    "Please try again in a moment."
)


class ChatService:
    """
    analyze -> respond -> persist

    The analyzer and generator are pure; storing the exchange is the only
    side effect and lives here.
    """

    def __init__(
        self,
        history: ChatHistoryRepository,
        analyzer: MessageAnalyzer,
        generator: ResponseGenerator,
        max_message_length: int = 500,
    ):
        self.history = history
        self.analyzer = analyzer
        self.generator = generator
        self.max_message_length = max_message_length

    def handle(self, message: str, user_id: Optional[str] = None) -> dict:
        # the full text is analyzed; only the stored copy is capped
        analysis = self.analyzer.analyze(message)
        response = self.generator.respond(analysis)

        if analysis.crisis_detected:
            logger.warning("crisis indicators detected (user_id=%s)", user_id)

        self.history.create(
            user_id = user_id,
            user_message = message[: self.max_message_length],
            bot_message = response.message,
            resources = list(response.resources),
            priority = response.priority.value,
            sentiment = analysis.sentiment,
            crisis_detected = analysis.crisis_detected,
        )

        return {
            "response": response.to_json(),
            "sentiment": analysis.sentiment,
            "crisisAlert": analysis.crisis_detected,
            "analysis": analysis.to_json(),
            "timestamp": datetime.now(timezone.utc).isoformat(),
        }

    def history_for(self, user_id: str) -> List[ChatMessage]:
        return self.history.list_for_user(user_id)

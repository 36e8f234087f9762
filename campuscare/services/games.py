import logging
import math
from typing import List, Literal

from campuscare.db.repository import GameScoreRepository, UserRepository

logger = logging.getLogger(__name__)

GameType = Literal["bubble_pop", "mindful_garden"]


def credits_for(score: int, duration: int) -> int:
    """Wellness credits: one per 100 points, scaled up for sessions over a minute."""
    return math.floor((score / 100) * max(1, duration / 60))


class GameService:
    def __init__(self, scores: GameScoreRepository, users: UserRepository):
        self.scores = scores
        self.users = users

    def record_score(self, user_id: str, game_type: str, score: int, duration: int) -> int:
        credits = credits_for(score, duration)
        self.scores.create(
            user_id = user_id,
            game_type = game_type,
            score = score,
            duration = duration,
            credits_earned = credits,
        )
        if self.users.add_credits(user_id, credits) is None:
            logger.debug("score for unregistered user %s; credits not banked", user_id)
        return credits

    def leaderboard(self, limit: int = 10) -> List[dict]:
        return [
            {
                "userId": user_id,
                "totalCredits": int(total or 0),
                "gamesPlayed": int(played),
            }
            for user_id, total, played in self.scores.totals_by_user(limit=limit)
        ]

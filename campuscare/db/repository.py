"""
Repository classes over the ORM models.

Each repository wraps one model and owns the session calls for it, so the
services never query SQLAlchemy directly.
"""

from typing import Generic, List, Optional, Type, TypeVar

from sqlalchemy import func
from sqlalchemy.orm import Session

from campuscare.db.models import ChatMessage, GameScore, MoodEntry, User

ModelT = TypeVar("ModelT")


class Repository(Generic[ModelT]):
    model: Type[ModelT]

    def __init__(self, db: Session):
        self.db = db

    def add(self, obj: ModelT) -> ModelT:
        self.db.add(obj)
        self.db.commit()
        self.db.refresh(obj)
        return obj

    def create(self, **fields) -> ModelT:
        return self.add(self.model(**fields))

    def get(self, obj_id: str) -> Optional[ModelT]:
        return self.db.get(self.model, obj_id)

    def update(self, obj: ModelT, **fields) -> ModelT:
        for key, value in fields.items():
            setattr(obj, key, value)
        return self.add(obj)

    def delete(self, obj_id: str) -> bool:
        obj = self.get(obj_id)
        if obj is None:
            return False
        self.db.delete(obj)
        self.db.commit()
        return True


class UserRepository(Repository[User]):
    model = User

    def get_by_username(self, username: str) -> Optional[User]:
        return self.db.query(User).filter(User.username == username).first()

    def add_credits(self, user_id: str, credits: int) -> Optional[User]:
        user = self.get(user_id)
        if user is None:
            return None
        return self.update(user, credits=(user.credits or 0) + credits)


class UserOwnedRepository(Repository[ModelT]):
    """Rows keyed by a free-form user_id, listed oldest first."""

    def list_for_user(self, user_id: str) -> List[ModelT]:
        return (
            self.db.query(self.model)
            .filter(self.model.user_id == user_id)
            .order_by(self.model.created_at.asc())
            .all()
        )


class ChatHistoryRepository(UserOwnedRepository[ChatMessage]):
    model = ChatMessage


class MoodRepository(UserOwnedRepository[MoodEntry]):
    model = MoodEntry


class GameScoreRepository(UserOwnedRepository[GameScore]):
    model = GameScore

    def totals_by_user(self, limit: int = 10):
        """(user_id, total_credits, games_played), most credits first."""
        total = func.sum(GameScore.credits_earned).label("total_credits")
        played = func.count(GameScore.id).label("games_played")
        return (
            self.db.query(GameScore.user_id, total, played)
            .group_by(GameScore.user_id)
            .order_by(total.desc(), GameScore.user_id.asc())
            .limit(limit)
            .all()
        )

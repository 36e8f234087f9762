from datetime import datetime, timezone
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from campuscare.services.games import GameType


class CamelModel(BaseModel):
    model_config = ConfigDict(populate_by_name=True, from_attributes=True)


class StoredItem(CamelModel):
    created_at: Optional[datetime] = Field(None, serialization_alias="timestamp")

    @field_validator("created_at")
    @classmethod
    def assume_utc(cls, value: Optional[datetime]) -> Optional[datetime]:
        # sqlite hands back naive datetimes; rows are always written in UTC
        if value is not None and value.tzinfo is None:
            return value.replace(tzinfo=timezone.utc)
        return value


# ============ chat ============
class ChatRequest(CamelModel):
    message: str = Field(..., min_length=1)
    user_id: Optional[str] = Field(None, alias="userId")


class ChatHistoryItem(StoredItem):
    id: str
    user_id: Optional[str] = Field(None, serialization_alias="userId")
    user_message: str = Field(serialization_alias="userMessage")
    bot_message: str = Field(serialization_alias="botMessage")
    resources: List[str]
    priority: str
    sentiment: str
    crisis_detected: bool = Field(serialization_alias="crisisDetected")


# ============ mood ============
class MoodRequest(CamelModel):
    user_id: str = Field(..., alias="userId", min_length=1)
    intensity: int = Field(..., ge=1, le=10)
    mood: Optional[str] = None
    notes: Optional[str] = Field(None, max_length=1000)


class MoodItem(StoredItem):
    id: str
    user_id: str = Field(serialization_alias="userId")
    mood: str
    intensity: int
    notes: Optional[str] = None


# ============ games ============
class GameScoreRequest(CamelModel):
    user_id: str = Field(..., alias="userId", min_length=1)
    game_type: GameType = Field(..., alias="gameType")
    score: int = Field(..., ge=0)
    duration: int = Field(..., ge=0)

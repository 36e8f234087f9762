import uuid
from datetime import datetime, timezone

from sqlalchemy import Boolean, Column, DateTime, Integer, JSON, String, Text

from campuscare.db.base import Base


def gen_uuid():
    return str(uuid.uuid4())


def utcnow():
    return datetime.now(timezone.utc)


class User(Base):
    __tablename__ = "users"

    id = Column(String, primary_key=True, default=gen_uuid)
    username = Column(String, unique=True, index=True, nullable=False)
    email = Column(String, nullable=True)
    password_hash = Column(String, nullable=False)
    credits = Column(Integer, nullable=False, default=0)
    created_at = Column(DateTime(timezone=True), default=utcnow)


# user_id on the tables below is free-form: anonymous chat and mood
# clients send their own identifiers, so there is no foreign key.

class ChatMessage(Base):
    __tablename__ = "chat_history"

    id = Column(String, primary_key=True, default=gen_uuid)
    user_id = Column(String, index=True, nullable=True)
    user_message = Column(Text, nullable=False)
    bot_message = Column(Text, nullable=False)
    resources = Column(JSON, nullable=False, default=list)
    priority = Column(String, nullable=False)
    sentiment = Column(String, nullable=False)
    crisis_detected = Column(Boolean, nullable=False, default=False)
    created_at = Column(DateTime(timezone=True), default=utcnow)


class MoodEntry(Base):
    __tablename__ = "mood_entries"

    id = Column(String, primary_key=True, default=gen_uuid)
    user_id = Column(String, index=True, nullable=False)
    mood = Column(String, nullable=False)
    intensity = Column(Integer, nullable=False)
    notes = Column(Text, nullable=True)
    created_at = Column(DateTime(timezone=True), default=utcnow)


class GameScore(Base):
    __tablename__ = "game_scores"

    id = Column(String, primary_key=True, default=gen_uuid)
    user_id = Column(String, index=True, nullable=False)
    game_type = Column(String, nullable=False)
    score = Column(Integer, nullable=False)
    duration = Column(Integer, nullable=False)
    credits_earned = Column(Integer, nullable=False, default=0)
    created_at = Column(DateTime(timezone=True), default=utcnow)

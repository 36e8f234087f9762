import json
import logging
import uuid
from contextlib import asynccontextmanager
from datetime import datetime, timezone
from typing import List, Optional

from fastapi import Depends, FastAPI, HTTPException, Query, WebSocket
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from sqlalchemy.orm import Session
from starlette.concurrency import run_in_threadpool
from starlette.websockets import WebSocketDisconnect

from campuscare.app.schemas import (
    ChatHistoryItem,
    ChatRequest,
    GameScoreRequest,
    MoodItem,
    MoodRequest,
)
from campuscare.auth.auth import decode_user_id, get_db
from campuscare.auth.router import router as auth_router
from campuscare.core.config import settings
from campuscare.core.logging import setup_logging
from campuscare.db.base import Base, SessionLocal, engine
from campuscare.db.repository import (
    ChatHistoryRepository,
    GameScoreRepository,
    MoodRepository,
    UserRepository,
)
from campuscare.services.analyzer import MessageAnalyzer
from campuscare.services.chat import FALLBACK_MESSAGE, ChatService
from campuscare.services.games import GameService
from campuscare.services.mood import analyze_mood_pattern, mood_label
from campuscare.services.responder import ResponseGenerator
from campuscare.services.safe_spaces import SafeSpace, get_safe_space, list_safe_spaces

logger = logging.getLogger(__name__)


# ============ DB ============
Base.metadata.create_all(bind=engine)


# ============ global services ============
analyzer = MessageAnalyzer(jitter=settings.confidence_jitter)
generator = ResponseGenerator()


def get_chat_service(db: Session = Depends(get_db)) -> ChatService:
    return ChatService(
        history = ChatHistoryRepository(db),
        analyzer = analyzer,
        generator = generator,
        max_message_length = settings.max_message_length,
    )


def get_game_service(db: Session = Depends(get_db)) -> GameService:
    return GameService(scores=GameScoreRepository(db), users=UserRepository(db))


# ============ app lifecycle ============
@asynccontextmanager
async def lifespan(app: FastAPI):
    setup_logging(settings.log_level)
    logger.info("%s starting (db=%s)", settings.app_name, engine.url.drivername)
    yield
    logger.info("%s stopped", settings.app_name)


app = FastAPI(
    title = settings.app_name,
    debug = settings.debug,
    lifespan = lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins = settings.cors_origins,
    allow_credentials = True,
    allow_methods = ["*"],
    allow_headers = ["*"],
)

# ============ Router ============
app.include_router(auth_router)


# ============ basic endpoints ============
@app.get("/health")
def health():
    return {"status": "OK", "timestamp": datetime.now(timezone.utc).isoformat()}


# ============ chat ============
@app.post("/api/chat")
def chat(req: ChatRequest, service: ChatService = Depends(get_chat_service)):
    try:
        return service.handle(req.message, user_id=req.user_id)
    except Exception:
        logger.exception("chat pipeline failed")
        return JSONResponse(
            status_code = 500,
            content = {"error": "Chat service unavailable", "message": FALLBACK_MESSAGE},
        )


@app.get("/api/chat/{user_id}", response_model=List[ChatHistoryItem])
def chat_history(user_id: str, service: ChatService = Depends(get_chat_service)):
    return service.history_for(user_id)


# ============ mood ============
@app.post("/api/mood")
def record_mood(req: MoodRequest, db: Session = Depends(get_db)):
    MoodRepository(db).create(
        user_id = req.user_id,
        mood = req.mood or mood_label(req.intensity),
        intensity = req.intensity,
        notes = req.notes,
    )
    return {"success": True, "message": "Mood recorded successfully"}


@app.get("/api/mood/{user_id}", response_model=List[MoodItem])
def mood_history(user_id: str, db: Session = Depends(get_db)):
    return MoodRepository(db).list_for_user(user_id)


@app.get("/api/mood/{user_id}/insights")
def mood_insights(user_id: str, db: Session = Depends(get_db)):
    entries = MoodRepository(db).list_for_user(user_id)
    return analyze_mood_pattern([e.intensity for e in entries])


# ============ games ============
@app.post("/api/game/score")
def save_score(req: GameScoreRequest, games: GameService = Depends(get_game_service)):
    credits = games.record_score(req.user_id, req.game_type, req.score, req.duration)
    return {"success": True, "credits": credits, "message": "Score saved successfully"}


@app.get("/api/game/leaderboard")
def leaderboard(games: GameService = Depends(get_game_service)):
    return games.leaderboard(limit=10)


# ============ safe spaces ============
@app.get("/api/safe-spaces", response_model=List[SafeSpace])
def safe_spaces(
    type: Optional[str] = Query(None),
    accessibility: Optional[str] = Query(None),
):
    return list_safe_spaces(space_type=type, accessibility=accessibility)


@app.get("/api/safe-spaces/{space_id}", response_model=SafeSpace)
def safe_space(space_id: int):
    space = get_safe_space(space_id)
    if space is None:
        raise HTTPException(status_code=404, detail="Safe space not found")
    return space


# ============ WebSocket ============
@app.websocket("/ws/chat")
async def websocket_chat(ws: WebSocket, token: str = Query(...)):
    await ws.accept()

    user_id = decode_user_id(token)
    if not user_id:
        logger.info("WS: rejected connection with invalid token")
        await ws.close(code=1008)
        return

    session_id = str(uuid.uuid4())
    db = SessionLocal()
    service = ChatService(
        history = ChatHistoryRepository(db),
        analyzer = analyzer,
        generator = generator,
        max_message_length = settings.max_message_length,
    )

    try:
        while True:
            try:
                data = await ws.receive_text()
            except WebSocketDisconnect:
                logger.debug("WS: client disconnected")
                return

            try:
                message = json.loads(data).get("message", "")
            except (ValueError, AttributeError):
                message = ""

            if not isinstance(message, str) or not message:
                await ws.send_json({"type": "error", "message": "Message is required"})
                continue

            job_id = str(uuid.uuid4())
            await ws.send_json({"type": "ack", "job_id": job_id, "session_id": session_id})

            try:
                result = await run_in_threadpool(service.handle, message, user_id=user_id)
            except Exception:
                logger.exception("WS: chat pipeline failed")
                db.rollback()
                await ws.send_json({
                    "type": "error",
                    "job_id": job_id,
                    "message": FALLBACK_MESSAGE,
                })
                continue

            await ws.send_json({
                "type": "reply",
                "job_id": job_id,
                "session_id": session_id,
                **result,
            })
    finally:
        db.close()

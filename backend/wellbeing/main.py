from dotenv import load_dotenv
load_dotenv()

import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from wellbeing.config import CORS_ORIGINS, LOG_LEVEL
from wellbeing.database import Base, SessionLocal, engine
from wellbeing.models import *  # 모든 모델 import 후 테이블 생성
from wellbeing.routers import ai, auth, chat, dashboard, users, wellbeing
from wellbeing.services.data_source import DB_ERRORS
from wellbeing.services.seed_service import seed_database

logging.basicConfig(
    level=LOG_LEVEL,
    format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
)
logger = logging.getLogger(__name__)


# FastAPI APP
app = FastAPI(
    title="Employee Wellbeing API",
    description="Mood tracking, personalised recommendations and a wellbeing assistant",
    version="1.0.0"
)


# CORS 설정
app.add_middleware(
    CORSMiddleware,
    allow_origins=CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


# DB 초기화
async def init_db():
    if engine is None:
        logger.warning("DATABASE_URL is empty, serving static data")
        return

    try:
        logger.info("Creating DB tables...")
        async with engine.begin() as conn:
            await conn.run_sync(Base.metadata.create_all)
        logger.info("DB table creation completed.")
    except DB_ERRORS as e:
        logger.warning(f"Database unavailable at startup, serving static data: {e!r}")
        return

    async with SessionLocal() as db:
        await seed_database(db)


@app.on_event("startup")
async def on_startup():
    app.state.ai_status = None
    await init_db()


# Router 등록
# (endpoint prefix: /api)
app.include_router(auth.router, prefix="/api/auth", tags=["Auth"])
app.include_router(users.router, prefix="/api/users", tags=["Users"])
app.include_router(wellbeing.router, prefix="/api/wellbeing", tags=["Wellbeing"])
app.include_router(ai.router, prefix="/api/ai", tags=["AI"])
app.include_router(chat.router, prefix="/api/chat", tags=["Chat"])
app.include_router(dashboard.router, prefix="/api/dashboard", tags=["Dashboard"])


# 기본 헬스체크용 엔드포인트
@app.get("/")
def root():
    return {"status": "ok", "message": "Backend is running."}

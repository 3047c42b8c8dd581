# wellbeing/config.py

import os
from dotenv import load_dotenv

load_dotenv()


def _get_bool(name: str, default: str) -> bool:
    return os.getenv(name, default).strip().lower() in ("1", "true", "yes", "on")


# DB 접속 정보
# 빈 문자열이면 DB 없이 static 데이터로 동작
DATABASE_URL = os.getenv("DATABASE_URL", "sqlite+aiosqlite:///./wellbeing.db")
DB_TIMEOUT_SECONDS = float(os.getenv("DB_TIMEOUT_SECONDS", "3"))

# 외부 AI (chat-completion) 설정
AI_ENABLED = _get_bool("AI_ENABLED", "true")
AI_API_URL = os.getenv("AI_API_URL", "")
AI_API_KEY = os.getenv("AI_API_KEY", "")
AI_MODEL = os.getenv("AI_MODEL", "gpt-4o")
AI_TIMEOUT_SECONDS = float(os.getenv("AI_TIMEOUT_SECONDS", "5"))
AI_STATUS_TTL_SECONDS = float(os.getenv("AI_STATUS_TTL_SECONDS", "30"))

# JWT
JWT_SECRET_KEY = os.getenv("JWT_SECRET_KEY", "CHANGE_ME_SECRET_KEY")
JWT_EXPIRE_MINUTES = int(os.getenv("JWT_EXPIRE_MINUTES", str(60 * 24 * 7)))  # 7일

# 데모용 기본 사용자
DEFAULT_USER_ID = int(os.getenv("DEFAULT_USER_ID", "1"))

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()
CORS_ORIGINS = [o.strip() for o in os.getenv("CORS_ORIGINS", "*").split(",") if o.strip()]

import base64
import hashlib
import hmac

from fastapi import Depends, HTTPException
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.ext.asyncio import AsyncSession

from wellbeing.database import get_db
from wellbeing.utils.jwt import decode_access_token

security = HTTPBearer()


def hash_password(password: str) -> str:
    digest = hashlib.sha256(password.encode("utf-8")).digest()
    return base64.b64encode(digest).decode()


def verify_password(password: str, password_hash: str) -> bool:
    if not password_hash:
        return False
    return hmac.compare_digest(hash_password(password), password_hash)


async def get_current_user(
    creds: HTTPAuthorizationCredentials = Depends(security),
    db: AsyncSession = Depends(get_db)
):
    # Deferred import to avoid circular import (user_service → security)
    from wellbeing.services.user_service import UserService

    try:
        payload = decode_access_token(creds.credentials)
        user_id = int(payload.get("sub"))
    except (ValueError, TypeError):
        raise HTTPException(status_code=401, detail="Invalid or expired token")

    user = await UserService(db).get_by_id(user_id)

    if not user:
        raise HTTPException(status_code=404, detail="User not found")

    return user

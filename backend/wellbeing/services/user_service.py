# wellbeing/services/user_service.py

import logging
from datetime import datetime, timedelta
from typing import List, Optional, Tuple

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from wellbeing.models.users import User
from wellbeing.schemas.users import UserCreateRequest, UserUpdateRequest
from wellbeing.services.data_source import FallbackRepository
from wellbeing.utils.constants import SEED_PASSWORD, SEED_USERS
from wellbeing.utils.security import hash_password, verify_password

logger = logging.getLogger(__name__)

ROLE_ADMIN = "Administrator"
ROLE_EMPLOYEE = "Employee"

DEFAULT_NAME = "New User"
DEFAULT_DEPARTMENT = "General"
DEFAULT_PASSWORD = "Password123"
DEFAULT_EMAIL_DOMAIN = "company.com"


class DuplicateUsernameError(ValueError):
    def __init__(self, username: str):
        super().__init__("Username already exists")
        self.username = username


def static_users(now: Optional[datetime] = None) -> List[User]:
    # 매 호출마다 새 객체를 만들어 seed 가 변경되지 않도록 함
    now = now or datetime.now()
    password_hash = hash_password(SEED_PASSWORD)
    return [
        User(
            id=user_id,
            name=name,
            email=email,
            username=username,
            password_hash=password_hash,
            department=department,
            is_admin=is_admin,
            role=role,
            join_date=now - timedelta(days=joined),
            last_login_at=now - timedelta(days=last_login),
        )
        for (user_id, name, email, username, department, is_admin, role, joined, last_login) in SEED_USERS
    ]


def role_for(is_admin: bool) -> str:
    return ROLE_ADMIN if is_admin else ROLE_EMPLOYEE


def fill_create_defaults(payload: UserCreateRequest) -> UserCreateRequest:
    # 필수 값이 비어 있으면 기본값으로 채움
    name = (payload.name or "").strip() or DEFAULT_NAME
    username = (payload.username or "").strip() or name.lower().replace(" ", ".")
    email = (payload.email or "").strip() or f"{username}@{DEFAULT_EMAIL_DOMAIN}"
    department = (payload.department or "").strip() or DEFAULT_DEPARTMENT
    password = payload.password if payload.password and payload.password.strip() else DEFAULT_PASSWORD

    return UserCreateRequest(
        name=name,
        email=email,
        username=username,
        password=password,
        department=department,
        is_admin=payload.is_admin,
    )


class UserService(FallbackRepository):

    async def list_users(self) -> Tuple[List[User], str]:
        async def query(db: AsyncSession):
            result = await db.execute(select(User).order_by(User.id.asc()))
            return list(result.scalars().all())

        users = await self._with_fallback("Loading users", query, static_users)
        return users, self.data_source

    async def get_by_id(self, user_id: int) -> Optional[User]:
        async def query(db: AsyncSession):
            return await db.get(User, user_id)

        def fallback():
            return next((u for u in static_users() if u.id == user_id), None)

        return await self._with_fallback(f"Loading user {user_id}", query, fallback)

    async def get_by_username(self, username: str) -> Optional[User]:
        async def query(db: AsyncSession):
            result = await db.execute(select(User).where(User.username == username))
            return result.scalars().first()

        def fallback():
            return next((u for u in static_users() if u.username == username), None)

        return await self._with_fallback(f"Loading user {username!r}", query, fallback)

    async def count(self) -> int:
        async def query(db: AsyncSession):
            result = await db.execute(select(func.count()).select_from(User))
            return int(result.scalar_one())

        return await self._with_fallback("Counting users", query, lambda: len(SEED_USERS))

    async def create(self, payload: UserCreateRequest) -> User:
        payload = fill_create_defaults(payload)

        if await self.get_by_username(payload.username):
            logger.warning(f"Username {payload.username} already exists")
            raise DuplicateUsernameError(payload.username)

        now = datetime.now()
        user = User(
            name=payload.name,
            email=payload.email,
            username=payload.username,
            password_hash=hash_password(payload.password),
            department=payload.department,
            is_admin=payload.is_admin,
            role=role_for(payload.is_admin),
            join_date=now,
            last_login_at=now,
        )
        logger.info(f"Creating user {user.username} ({user.department})")

        async def query(db: AsyncSession):
            db.add(user)
            await db.commit()
            await db.refresh(user)
            return user

        def fallback():
            # static 모드: 저장하지 않고 다음 id 만 부여해서 돌려줌
            user.id = max(u.id for u in static_users()) + 1
            return user

        return await self._with_fallback("Creating user", query, fallback)

    async def update(self, user: User, payload: UserUpdateRequest) -> User:
        if payload.name is not None:
            user.name = payload.name
        if payload.email is not None:
            user.email = payload.email
        if payload.department is not None:
            user.department = payload.department
        # 비밀번호는 입력된 경우에만 변경
        if payload.password:
            user.password_hash = hash_password(payload.password)
        if payload.is_admin is not None:
            user.is_admin = payload.is_admin
            user.role = role_for(payload.is_admin)

        return await self._save(user, f"Updating user {user.id}")

    async def delete(self, user_id: int) -> bool:
        async def query(db: AsyncSession):
            user = await db.get(User, user_id)
            if user is None:
                return False
            await db.delete(user)
            await db.commit()
            return True

        def fallback():
            return any(u.id == user_id for u in static_users())

        return await self._with_fallback(f"Deleting user {user_id}", query, fallback)

    async def authenticate(self, username: str, password: str) -> Optional[User]:
        user = await self.get_by_username(username)

        if user is None or not verify_password(password, user.password_hash):
            return None

        user.last_login_at = datetime.now()
        return await self._save(user, f"Updating last login for {username}")

    async def _save(self, user: User, action: str) -> User:
        async def query(db: AsyncSession):
            merged = await db.merge(user)
            await db.commit()
            return merged

        return await self._with_fallback(action, query, lambda: user)

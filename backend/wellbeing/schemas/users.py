from pydantic import BaseModel, ConfigDict
from typing import List, Optional
from datetime import datetime


class UserResponse(BaseModel):
    # password_hash 는 응답에 포함하지 않음
    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
    email: Optional[str] = None
    username: str
    department: Optional[str] = None
    team_id: Optional[int] = None
    is_admin: bool = False
    role: str = "Employee"
    join_date: Optional[datetime] = None
    last_login_at: Optional[datetime] = None


class UserCreateRequest(BaseModel):
    name: Optional[str] = None
    email: Optional[str] = None
    username: Optional[str] = None
    password: Optional[str] = None
    department: Optional[str] = None
    is_admin: bool = False


class UserUpdateRequest(BaseModel):
    name: Optional[str] = None
    email: Optional[str] = None
    password: Optional[str] = None
    department: Optional[str] = None
    is_admin: Optional[bool] = None


class UserListResponse(BaseModel):
    users: List[UserResponse]
    data_source: str


class UserCountResponse(BaseModel):
    count: int

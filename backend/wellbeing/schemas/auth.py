from pydantic import BaseModel
from typing import Optional
from datetime import datetime


class LoginRequest(BaseModel):
    username: str
    password: str


class RegisterRequest(BaseModel):
    name: str
    email: Optional[str] = None
    username: str
    password: str
    department: Optional[str] = None


class LoginResponse(BaseModel):
    id: int
    username: str
    name: str
    email: Optional[str]
    role: str
    is_admin: bool
    department: Optional[str]
    last_login_at: Optional[datetime]

    access_token: str
    token_type: str = "bearer"

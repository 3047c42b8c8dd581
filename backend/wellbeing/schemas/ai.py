from pydantic import BaseModel
from typing import Optional
from datetime import datetime


class AIStatus(BaseModel):
    status: str  # online | offline | disabled
    message: str
    is_available: bool
    checked_at: datetime
    cached: bool = False
    response_code: Optional[int] = None
    error: Optional[str] = None

from pydantic import BaseModel
from typing import List, Optional


class ChatMessage(BaseModel):
    role: str = ""
    content: str = ""


class ChatRequest(BaseModel):
    message: str = ""
    history: Optional[List[ChatMessage]] = None


class ChatResponse(BaseModel):
    message: str


class ChatStatusResponse(BaseModel):
    status: str

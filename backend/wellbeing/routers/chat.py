from typing import Optional

from fastapi import APIRouter, Depends

from wellbeing.schemas.chat import ChatRequest, ChatResponse, ChatStatusResponse
from wellbeing.services.ai_client import TextGenerator, get_text_generator
from wellbeing.services.chat_responder import ChatResponder

router = APIRouter()


@router.post("/message", response_model=ChatResponse)
async def message(
    payload: ChatRequest,
    generator: Optional[TextGenerator] = Depends(get_text_generator),
):
    reply = await ChatResponder(generator).respond(payload.message, payload.history)
    return ChatResponse(message=reply)


@router.get("/status", response_model=ChatStatusResponse)
async def status():
    available = ChatResponder().is_available()
    return ChatStatusResponse(status="online" if available else "offline")

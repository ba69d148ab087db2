from fastapi import APIRouter, Depends

from fittrack.core.dependencies import get_ai_service
from fittrack.schemas.assistant import ChatRequest, ChatResponse
from fittrack.services.ai_service import AIService

router = APIRouter()


@router.post("/chat", response_model=ChatResponse)
async def chat(request: ChatRequest, ai: AIService = Depends(get_ai_service)):
    reply = await ai.chat(request.message)
    return ChatResponse(reply=reply)

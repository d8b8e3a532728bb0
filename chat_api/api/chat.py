# Role: Thin HTTP adapter for the chat endpoint. Takes one optional query parameter, forwards it unchanged
# to the injected chat client, and wraps the returned text in a one-field response.

import logging

from fastapi import APIRouter, Depends
from pydantic import BaseModel

from chat_api.api.deps import get_chat_client
from chat_api.llm.gemini_client import ChatClient

logger = logging.getLogger(__name__)

DEFAULT_MESSAGE = "TOP 5 AI initiative in india"

router = APIRouter(tags=["chat"])


class ChatResponse(BaseModel):
    generation: str


@router.get("/chat", response_model=ChatResponse)
def chat(
    message: str = DEFAULT_MESSAGE,
    chat_client: ChatClient = Depends(get_chat_client),
) -> ChatResponse:
    # No validation: empty and arbitrary strings go to the model as-is.
    logger.debug("GET /chat prompt_chars=%d", len(message))
    return ChatResponse(generation=chat_client.complete(message))

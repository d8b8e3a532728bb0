# Role: Request-scoped access to the single chat client created at bootstrap.

from fastapi import Request

from chat_api.llm.gemini_client import ChatClient


def get_chat_client(request: Request) -> ChatClient:
    return request.app.state.chat_client

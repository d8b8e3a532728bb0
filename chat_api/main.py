# Role: FastAPI app bootstrap. Loads environment config, builds the one chat client (or takes an injected one),
# registers routers, and exposes health/docs endpoints.
# Run with: uvicorn chat_api.main:create_app --factory  (or python cli.py)

from __future__ import annotations

from typing import Optional

from fastapi import FastAPI

import chat_api.config as config
from chat_api.api.chat import router as chat_router
from chat_api.llm.gemini_client import ChatClient, GeminiClient


def create_app(chat_client: Optional[ChatClient] = None) -> FastAPI:
    config.load_env()
    config.configure_logging()

    # Key line: the client is injectable for testing; otherwise built from env (raises if misconfigured).
    if chat_client is None:
        chat_client = GeminiClient()

    app = FastAPI(title="Generation Chat API", version="0.1.0")
    app.state.chat_client = chat_client
    app.include_router(chat_router)

    @app.get("/")
    def root() -> dict:
        # Role: quick discoverability for clients (where are docs/health).
        return {
            "message": "Generation Chat API is running",
            "docs": "/docs",
            "health": "/health",
        }

    @app.get("/health")
    def health() -> dict:
        return {"status": "ok"}

    return app

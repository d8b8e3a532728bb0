# Role: Central configuration module. Loads .env into environment variables and computes runtime flags
# (DEBUG, HOST, PORT). Importers read chat_api.config.<FLAG> instead of threading values through every call.

from __future__ import annotations

import logging
import os

from dotenv import load_dotenv

DEBUG: bool = False
HOST: str = "127.0.0.1"
PORT: int = 8000


def load_env() -> None:
    """
    Load .env into os.environ, then recompute the runtime flags.
    This keeps them correct even if load_env() is called after import.
    """
    global DEBUG, HOST, PORT
    load_dotenv()
    # Key line: accept common truthy values.
    DEBUG = os.getenv("DEBUG", "0").lower() in {"1", "true", "yes"}
    HOST = os.getenv("HOST", "127.0.0.1")
    PORT = int(os.getenv("PORT", "8000"))


def configure_logging() -> None:
    level = logging.DEBUG if DEBUG else logging.INFO
    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    logging.getLogger().setLevel(level)

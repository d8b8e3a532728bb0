# Role: Process entry point. Builds the app (which constructs the chat client) and serves it with uvicorn.
# A misconfigured chat client stops the process here, before any port is bound.

from __future__ import annotations

import argparse
import sys
from typing import Optional, Sequence

import uvicorn

import chat_api.config as config
from chat_api.main import create_app


def _parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Generation Chat API server")
    parser.add_argument("--host", default=config.HOST, help="bind address (env HOST)")
    parser.add_argument("--port", type=int, default=config.PORT, help="listen port (env PORT)")
    return parser.parse_args(argv)


def main(argv: Optional[Sequence[str]] = None) -> int:
    # 1) Load env so HOST/PORT defaults reflect .env
    # 2) Build the app; client construction errors are fatal
    # 3) Serve until interrupted
    config.load_env()
    args = _parse_args(argv)

    try:
        app = create_app()
    except RuntimeError as e:
        print(f"Startup failed: {e}", file=sys.stderr)
        return 1

    uvicorn.run(app, host=args.host, port=args.port)
    return 0


if __name__ == "__main__":
    sys.exit(main())

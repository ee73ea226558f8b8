"""
Command-line entry point: bind the port and serve the game.

    gameserver                              # port 3000, ./frontend
    gameserver --port 8080 --static-dir dist
    python -m gameserver --entry-path /game-app/main.html

Flags override the matching environment variables (PORT, HOST, STATIC_DIR,
ENTRY_PATH, LOG_LEVEL), which override the built-in defaults.

The listening socket is bound before uvicorn starts so that "Listening on
port N" is only logged once the port is actually ours. If the bind fails
(port in use, permission denied) uvicorn logs the error and the process
exits with status 1.
"""

import argparse
import logging
from typing import List, Optional

import uvicorn
from pydantic import ValidationError

from gameserver.config import Settings, _build_settings
from gameserver.main import create_app

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="gameserver", description="Gopher Arcade static file server")
    parser.add_argument("--host", default=None, help="Interface to bind (default 0.0.0.0)")
    parser.add_argument("--port", type=int, default=None, help="TCP port, 0 for any free port (default 3000)")
    parser.add_argument("--static-dir", default=None, help="Directory to serve (default ./frontend)")
    parser.add_argument("--entry-path", default=None, help="Path '/' redirects to (default /game/main.html)")
    parser.add_argument("--log-level", default=None, help="critical, error, warning, info, debug or trace")
    return parser


def load_settings(args: argparse.Namespace) -> Settings:
    return _build_settings(
        HOST=args.host,
        PORT=args.port,
        STATIC_DIR=args.static_dir,
        ENTRY_PATH=args.entry_path,
        LOG_LEVEL=args.log_level,
    )


def _configure_logging(level: str) -> None:
    # "trace" is uvicorn-only; the stdlib has nothing below DEBUG
    std_level = "DEBUG" if level == "trace" else level.upper()
    logging.basicConfig(level=std_level, format="%(asctime)s %(levelname)s %(name)s: %(message)s")


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    try:
        settings = load_settings(args)
    except ValidationError as e:
        logging.basicConfig(level="INFO")
        logger.error(f"Invalid configuration: {e}")
        return 1

    _configure_logging(settings.LOG_LEVEL)

    try:
        app = create_app(settings)
    except RuntimeError as e:
        logger.error(f"Cannot serve static files: {e}")
        return 1

    config = uvicorn.Config(app, host=settings.HOST, port=settings.PORT, log_level=settings.LOG_LEVEL)
    server = uvicorn.Server(config)

    try:
        sock = config.bind_socket()
    except SystemExit:
        # uvicorn has already logged the OSError; its exit code varies by release
        return 1
    logger.info(f"Listening on port {sock.getsockname()[1]}")

    server.run(sockets=[sock])
    return 0 if server.started else 1

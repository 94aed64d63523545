"""
Messaging demo backend.

Builds a seeded in-memory store, wraps it in the FastAPI app and serves it
with uvicorn. Nothing is persisted: a restart brings back the seed data.

Usage
-----
    python -m messaging_demo.main

Configure through environment variables:

    MESSAGING_PORT=9000 LOG_LEVEL=DEBUG python -m messaging_demo.main
    MESSAGING_ALLOWED_ORIGIN=http://localhost:3000 python -m messaging_demo.main
"""

import sys

import uvicorn
from fastapi import FastAPI
from loguru import logger

from messaging_toolkit.api.config import ServerSettings
from messaging_toolkit.api.server import create_app
from messaging_toolkit.message_database.controller import MessagingController
from messaging_toolkit.message_database.in_memory.message import create_seeded_message_database


def configure_logging(level: str) -> None:
    logger.remove()
    logger.add(sys.stderr, level=level)


def build_app(settings: ServerSettings) -> FastAPI:
    controller = MessagingController(create_seeded_message_database())
    return create_app(controller, settings)


def main() -> None:
    settings = ServerSettings.from_env()
    configure_logging(settings.log_level)
    app = build_app(settings)
    logger.info(f"Serving messaging demo on http://{settings.host}:{settings.port}")
    uvicorn.run(app, host=settings.host, port=settings.port, log_level=settings.log_level.lower())


if __name__ == "__main__":
    main()

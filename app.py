#!/usr/bin/env python3
"""
Main entry point for the link shortener service.

All mappings live in process memory and are lost on restart. With WORKERS > 1
every worker process holds its own, independent registry.

Usage:
    python app.py

Environment variables:
    BASE_URL - Base URL for short links
    PATH_PREFIX - Optional path prefix for short links
    HOST / PORT - Address to listen on
    WORKERS - Number of uvicorn worker processes (default 1)
    SHORT_CODE_LENGTH / SHORT_CODE_ALPHABET - Code shape (default 6 hex chars)
    MAX_COLLISION_RETRIES - Attempts per creation before giving up
    LOG_LEVEL / LOG_FILE / LOG_JSON - Logging
"""

import signal
import sys
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI

from config import Config, load_config
from shortener.registry import ShortenerRegistry
from shortener.service import URLShortenerService
from shortener.shortcode import ShortCodeGenerator
from shortener.common.logging_config import setup_logging
from web_app import create_app


def build_service(config: Config, logger) -> URLShortenerService:
    """Build the registry and the service around it from configuration."""
    generator = ShortCodeGenerator(
        default_length=config.short_code_length,
        alphabet=config.short_code_alphabet,
    )
    logger.info(
        f"Short codes: {config.short_code_length} {config.short_code_alphabet} characters "
        f"({generator.code_space_size()} possible codes)"
    )
    registry = ShortenerRegistry(
        generator=generator,
        max_attempts=config.max_collision_retries,
        logger=logger,
    )
    return URLShortenerService(registry=registry, logger=logger)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Lifespan context manager for startup and shutdown."""
    logger = app.state.logger

    logger.info("Starting link shortener service...")
    yield
    logger.info(
        f"Shutting down link shortener service "
        f"({app.state.service.registry.count()} URLs discarded)"
    )


def main():
    """Main entry point."""
    config = load_config()

    logger = setup_logging(
        level=config.log_level,
        log_file=config.log_file,
        json_format=config.log_json,
    )

    logger.info("Link Shortener Service")
    logger.info(f"Configuration: {config.model_dump()}")

    if config.workers > 1:
        logger.warning(
            f"WORKERS={config.workers}: each worker keeps its own in-memory registry, "
            "so codes created in one worker will not resolve in another"
        )

    app = create_app(
        service_instance=build_service(config, logger),
        config=config,
        lifespan=lifespan,
    )
    app.state.logger = logger

    uvicorn_config = uvicorn.Config(
        app,
        host=config.host,
        port=config.port,
        workers=config.workers,
        log_level=config.log_level.lower(),
        access_log=True,
    )

    server = uvicorn.Server(uvicorn_config)

    def handle_signal(signum, frame):
        logger.info(f"Received signal {signum}, initiating graceful shutdown...")
        server.should_exit = True

    signal.signal(signal.SIGINT, handle_signal)
    signal.signal(signal.SIGTERM, handle_signal)

    try:
        logger.info(f"Starting server on {config.host}:{config.port}")
        server.run()
    except Exception as e:
        logger.error(f"Server error: {e}")
        sys.exit(1)


if __name__ == "__main__":
    main()

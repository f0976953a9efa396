"""Pytest configuration and fixtures."""

import pytest
from httpx import AsyncClient, ASGITransport

from config import Config
from shortener.registry import ShortenerRegistry
from shortener.service import URLShortenerService
from shortener.shortcode import ShortCodeGenerator
from shortener.common.logging_config import setup_logging
from web_app import create_app


class ScriptedGenerator(ShortCodeGenerator):
    """Generator that hands out a fixed sequence of codes, then repeats the last."""

    def __init__(self, codes):
        super().__init__(default_length=6)
        self.codes = list(codes)
        self.calls = 0

    def generate_random(self, length=None):
        code = self.codes[min(self.calls, len(self.codes) - 1)]
        self.calls += 1
        return code


@pytest.fixture
def logger():
    """Create test logger."""
    return setup_logging(level="DEBUG")


@pytest.fixture
def short_code_generator():
    """Create short code generator."""
    return ShortCodeGenerator(default_length=6)


@pytest.fixture
def registry(short_code_generator, logger) -> ShortenerRegistry:
    """Create an empty registry."""
    return ShortenerRegistry(generator=short_code_generator, logger=logger)


@pytest.fixture
def service(registry, logger) -> URLShortenerService:
    """Create service instance."""
    return URLShortenerService(registry=registry, logger=logger)


@pytest.fixture
def config():
    """Test configuration."""
    return Config(base_url="http://testserver")


@pytest.fixture
def app(service, config):
    """Create test FastAPI app."""
    return create_app(service_instance=service, config=config)


@pytest.fixture
async def client(app):
    """Create test client."""
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://testserver") as ac:
        yield ac


@pytest.fixture
def sample_urls():
    """Sample URLs for testing."""
    return [
        "https://example.com/test",
        "https://github.com/user/repo",
        "https://stackoverflow.com/questions/123456",
    ]


@pytest.fixture
def scripted_registry(logger):
    """Factory for registries whose generator returns the given codes in order."""
    def _make(codes, max_attempts=1000):
        return ShortenerRegistry(
            generator=ScriptedGenerator(codes),
            max_attempts=max_attempts,
            logger=logger,
        )
    return _make

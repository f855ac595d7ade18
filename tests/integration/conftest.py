"""Fixtures for integration tests."""

from collections.abc import AsyncGenerator, Generator

import pytest
from aioresponses import aioresponses as aioresponses_cls
from pydantic import SecretStr

from checksum_test_action.client import RunClient
from checksum_test_action.config import RunConfig
from checksum_test_action.transport import AiohttpTransport

API_BASE_URL = "http://checksum.test"


@pytest.fixture
def aioresponses() -> Generator[aioresponses_cls, None, None]:
    """Intercept aiohttp requests."""
    with aioresponses_cls() as mocked:
        yield mocked


@pytest.fixture
def config() -> RunConfig:
    """Create test configuration."""
    return RunConfig(
        api_key=SecretStr("test-api-key"),
        suite_ids=["suite-a", "suite-b"],
        base_url=API_BASE_URL,
        poll_interval_seconds=10,
        timeout_seconds=30,
    )


@pytest.fixture
async def transport(
    aioresponses: aioresponses_cls,
) -> AsyncGenerator[AiohttpTransport, None]:
    """Create transport with managed session."""
    async with AiohttpTransport.open() as impl:
        yield impl


@pytest.fixture
def client(config: RunConfig, transport: AiohttpTransport) -> RunClient:
    """Create client backed by the aiohttp transport."""
    return RunClient(config=config, transport=transport)

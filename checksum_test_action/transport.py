"""HTTP transport used by the run client."""

import json
import logging
from collections.abc import AsyncGenerator, Mapping
from contextlib import asynccontextmanager
from dataclasses import dataclass, field
from typing import Any, Literal, Protocol

import aiohttp

log = logging.getLogger(__name__)

type HttpMethod = Literal["GET", "POST"]


@dataclass(frozen=True, kw_only=True)
class TransportResponse:
    """Status and raw body of a single HTTP exchange."""

    status: int
    text: str

    @property
    def ok(self) -> bool:
        return 200 <= self.status < 300

    def json(self) -> Any:
        """Parse the body as JSON; raises ValueError when it is not."""
        return json.loads(self.text)


class Transport(Protocol):
    """Performs one HTTP request and returns its response."""

    async def request(
        self,
        method: HttpMethod,
        url: str,
        *,
        headers: Mapping[str, str],
        payload: Any | None = None,
    ) -> TransportResponse: ...


@dataclass(frozen=True, kw_only=True)
class AiohttpTransport:
    """Transport backed by an aiohttp client session."""

    session: aiohttp.ClientSession = field(repr=False)

    @classmethod
    @asynccontextmanager
    async def open(cls) -> AsyncGenerator["AiohttpTransport", None]:
        """Create transport with managed session lifecycle.

        Individual requests carry no timeout; only the polling budget bounds
        the overall run.
        """
        async with aiohttp.ClientSession(
            timeout=aiohttp.ClientTimeout(total=None),
        ) as session:
            yield cls(session=session)

    async def request(
        self,
        method: HttpMethod,
        url: str,
        *,
        headers: Mapping[str, str],
        payload: Any | None = None,
    ) -> TransportResponse:
        log.debug("%s %s", method, url)
        async with self.session.request(
            method, url, headers=dict(headers), json=payload
        ) as response:
            text = await response.text()
        return TransportResponse(status=response.status, text=text)

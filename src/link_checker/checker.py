"""Concurrent HTTP status probes for extracted links."""
from __future__ import annotations

import asyncio
import logging
from typing import Awaitable, Callable, List, Optional, Sequence

import httpx

from .config import Settings
from .models import LinkRecord, ProbeOutcome

logger = logging.getLogger(__name__)

Requester = Callable[[httpx.AsyncClient, str], Awaitable[int]]


class StatusChecker:
    """Requests every link target at once and records the status codes.

    A probe that fails at the network level (DNS, refused connection,
    timeout, unparseable URL) yields a failed outcome instead of raising, so
    one bad link never disturbs the others.
    """

    def __init__(
        self,
        settings: Settings | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
        requester: Requester | None = None,
        max_concurrency: Optional[int] = None,
    ):
        self.settings = settings or Settings()
        self.transport = transport
        self.requester = requester or self._default_requester
        self.max_concurrency = (
            max_concurrency if max_concurrency is not None else self.settings.max_concurrency
        )

    async def check(self, links: Sequence[LinkRecord]) -> List[ProbeOutcome]:
        """Return one outcome per link, in the order the links were given."""
        if not links:
            return []

        semaphore = asyncio.Semaphore(self.max_concurrency) if self.max_concurrency else None

        async with self._client() as client:

            async def bounded(target: str) -> ProbeOutcome:
                if semaphore is None:
                    return await self._probe(client, target)
                async with semaphore:
                    return await self._probe(client, target)

            targets = [link.target for link in links]
            settled = await asyncio.gather(
                *(bounded(target) for target in targets), return_exceptions=True
            )

        outcomes: List[ProbeOutcome] = []
        for target, result in zip(targets, settled):
            if isinstance(result, BaseException):
                outcomes.append(ProbeOutcome.failure(target, result))
            else:
                outcomes.append(result)
        return outcomes

    async def _probe(self, client: httpx.AsyncClient, target: str) -> ProbeOutcome:
        logger.debug("Requesting %s", target)
        try:
            status = await self.requester(client, target)
        except Exception as exc:
            logger.info("Request to %s failed: %s", target, exc)
            return ProbeOutcome.failure(target, exc)
        logger.debug("%s answered %s", target, status)
        return ProbeOutcome(target=target, status_code=status)

    def _client(self) -> httpx.AsyncClient:
        return httpx.AsyncClient(
            transport=self.transport,
            timeout=self.settings.timeout,
            follow_redirects=self.settings.follow_redirects,
            headers={"User-Agent": self.settings.user_agent},
        )

    @staticmethod
    async def _default_requester(client: httpx.AsyncClient, target: str) -> int:
        # Only the status line matters; the body is never read.
        async with client.stream("GET", target) as response:
            return response.status_code


def check_links(
    links: Sequence[LinkRecord],
    settings: Settings | None = None,
    transport: httpx.AsyncBaseTransport | None = None,
    max_concurrency: Optional[int] = None,
) -> List[ProbeOutcome]:
    """Blocking wrapper around :meth:`StatusChecker.check`."""
    checker = StatusChecker(
        settings=settings, transport=transport, max_concurrency=max_concurrency
    )
    return asyncio.run(checker.check(links))

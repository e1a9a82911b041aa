"""Concurrency gate bounding the number of active traversal units."""

import asyncio
from typing import Optional


class ConcurrencyGate:
    """Bounded permit counter shared by an entire walk.

    A limit of zero or less means unlimited; a limit of one makes the gate
    behave like a mutex. Acquiring may block, releasing never does.
    """

    def __init__(self, limit: int = 0):
        """Initialize gate.

        Args:
            limit: Maximum number of simultaneous permit holders
        """
        self.limit = limit
        self._semaphore: Optional[asyncio.Semaphore] = (
            asyncio.Semaphore(limit) if limit > 0 else None
        )
        self.active = 0
        self.peak = 0

    @property
    def unlimited(self) -> bool:
        return self._semaphore is None

    async def acquire(self) -> None:
        if self._semaphore is not None:
            await self._semaphore.acquire()
        self.active += 1
        if self.active > self.peak:
            self.peak = self.active

    def release(self) -> None:
        self.active -= 1
        if self._semaphore is not None:
            self._semaphore.release()

    async def __aenter__(self):
        await self.acquire()
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        self.release()

    def __repr__(self) -> str:
        limit = "unlimited" if self.unlimited else self.limit
        return f"ConcurrencyGate(limit={limit}, active={self.active})"

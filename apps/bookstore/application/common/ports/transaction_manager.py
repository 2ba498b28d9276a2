"""Transaction manager port."""

from __future__ import annotations

from typing import Protocol


class TransactionManager(Protocol):
    """Groups the writes of one use case into a single unit."""

    async def commit(self) -> None:
        ...

    async def rollback(self) -> None:
        ...

from __future__ import annotations

from typing import Optional, Protocol, Sequence

from .model import LedgerRecord


class LedgerRepository(Protocol):
    """Durable home of the chain. Always read and written as one unit."""

    def load(self) -> Optional[list[LedgerRecord]]:
        """Return the stored chain, None when nothing is stored.

        Raises LedgerCorruptError when something is stored but unreadable.
        """

        raise NotImplementedError

    def save(self, records: Sequence[LedgerRecord]) -> None:
        raise NotImplementedError

    def clear(self) -> None:
        raise NotImplementedError

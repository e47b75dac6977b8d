from __future__ import annotations

from typing import Optional, Sequence

from .codec import dumps_chain, loads_chain
from .model import LedgerRecord
from .repository import LedgerRepository


class InMemoryLedgerRepository(LedgerRepository):
    """Keeps the serialized chain in memory, exactly as a durable backend would."""

    def __init__(self, text: Optional[str] = None):
        self.text = text
        self.writes = 0

    def load(self) -> Optional[list[LedgerRecord]]:
        if self.text is None:
            return None
        return loads_chain(self.text)

    def save(self, records: Sequence[LedgerRecord]) -> None:
        self.text = dumps_chain(records)
        self.writes += 1

    def clear(self) -> None:
        self.text = None

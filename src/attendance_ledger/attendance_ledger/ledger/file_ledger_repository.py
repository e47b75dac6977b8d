from __future__ import annotations

import logging
import os
import tempfile
from pathlib import Path
from typing import Optional, Sequence

from ..core.exceptions import LedgerCorruptError
from .codec import dumps_chain, loads_chain
from .model import LedgerRecord
from .repository import LedgerRepository

logger = logging.getLogger(__name__)


class JsonFileLedgerRepository(LedgerRepository):
    def __init__(self, path: str | Path):
        self._path = Path(path)

    @property
    def path(self) -> Path:
        return self._path

    def load(self) -> Optional[list[LedgerRecord]]:
        if not self._path.exists():
            return None
        try:
            text = self._path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            raise LedgerCorruptError(f"cannot read {self._path}: {e}") from e
        return loads_chain(text)

    def save(self, records: Sequence[LedgerRecord]) -> None:
        self._path.parent.mkdir(parents=True, exist_ok=True)
        data = dumps_chain(records)

        # Write beside the target then swap, so a crash never leaves half a chain.
        fd, tmp_name = tempfile.mkstemp(prefix=self._path.name, suffix=".tmp", dir=self._path.parent)
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                f.write(data)
            os.replace(tmp_name, self._path)
        except Exception:
            Path(tmp_name).unlink(missing_ok=True)
            raise
        logger.debug("Saved %d ledger records to %s", len(records), self._path)

    def clear(self) -> None:
        self._path.unlink(missing_ok=True)

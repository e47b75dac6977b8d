from __future__ import annotations

from typing import Optional, Sequence

from ..core.constants import DEFAULT_STORAGE_KEY
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor
from .codec import dumps_chain, loads_chain
from .model import LedgerRecord
from .repository import LedgerRepository


class MySQLLedgerRepository(LedgerRepository):
    """Stores the serialized chain as one row of the `ledger_store` table."""

    def __init__(self, conn_factory: DatabaseConnection, *, storage_key: str = DEFAULT_STORAGE_KEY):
        self._conn_factory = conn_factory
        self._key = storage_key

    def load(self) -> Optional[list[LedgerRecord]]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                "SELECT chain_json FROM ledger_store WHERE storage_key=%s",
                (self._key,),
            )
            r = cur.fetchone()
        if not r:
            return None
        return loads_chain(r["chain_json"])

    def save(self, records: Sequence[LedgerRecord]) -> None:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                INSERT INTO ledger_store(storage_key, chain_json)
                VALUES(%s,%s)
                ON DUPLICATE KEY UPDATE chain_json=VALUES(chain_json)
                """,
                (self._key, dumps_chain(records)),
            )

    def clear(self) -> None:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("DELETE FROM ledger_store WHERE storage_key=%s", (self._key,))

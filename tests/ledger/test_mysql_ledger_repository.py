from __future__ import annotations

import pytest

from src.attendance_ledger.attendance_ledger.core.exceptions import LedgerCorruptError
from src.attendance_ledger.attendance_ledger.ledger.codec import dumps_chain
from src.attendance_ledger.attendance_ledger.ledger.model import GENESIS_PAYLOAD, LedgerRecord
from src.attendance_ledger.attendance_ledger.ledger.mysql_ledger_repository import MySQLLedgerRepository


class FakeCursor:
    def __init__(self, store: dict):
        self._store = store
        self._result = None

    def execute(self, sql, params=()):
        stmt = " ".join(sql.split())
        if stmt.startswith("SELECT"):
            key = params[0]
            self._result = {"chain_json": self._store[key]} if key in self._store else None
        elif stmt.startswith("INSERT"):
            self._store[params[0]] = params[1]
        elif stmt.startswith("DELETE"):
            self._store.pop(params[0], None)
        else:
            raise AssertionError(stmt)

    def fetchone(self):
        return self._result

    def close(self):
        pass


class FakeConnection:
    def __init__(self, store: dict):
        self._store = store
        self.committed = 0

    def cursor(self, dictionary=False):
        return FakeCursor(self._store)

    def commit(self):
        self.committed += 1

    def rollback(self):
        pass

    def close(self):
        pass


class FakeConnFactory:
    def __init__(self):
        self.store: dict[str, str] = {}

    def connect(self):
        return FakeConnection(self.store)


GENESIS = LedgerRecord(index=0, created_at=1, payload=GENESIS_PAYLOAD, previous_fingerprint="0", fingerprint="g")


def test_save_and_load_by_storage_key():
    factory = FakeConnFactory()
    repo = MySQLLedgerRepository(factory, storage_key="k1")

    assert repo.load() is None
    repo.save([GENESIS])

    assert factory.store == {"k1": dumps_chain([GENESIS])}
    assert repo.load() == [GENESIS]
    assert MySQLLedgerRepository(factory, storage_key="k2").load() is None


def test_clear_deletes_row():
    factory = FakeConnFactory()
    repo = MySQLLedgerRepository(factory)
    repo.save([GENESIS])

    repo.clear()

    assert repo.load() is None


def test_corrupt_row_raises():
    factory = FakeConnFactory()
    factory.store["attendance_ledger"] = "{"

    with pytest.raises(LedgerCorruptError):
        MySQLLedgerRepository(factory).load()

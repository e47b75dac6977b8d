from __future__ import annotations

import itertools

from src.attendance_ledger.attendance_ledger.core.enums import PresenceStatus
from src.attendance_ledger.attendance_ledger.ledger.chain import AttendanceChain
from src.attendance_ledger.attendance_ledger.ledger.file_ledger_repository import JsonFileLedgerRepository
from src.attendance_ledger.attendance_ledger.ledger.fingerprint.sha256_fingerprint import Sha256Fingerprint
from src.attendance_ledger.attendance_ledger.ledger.model import AttendancePayload


def test_missing_file_loads_as_nothing(tmp_path):
    assert JsonFileLedgerRepository(tmp_path / "ledger.json").load() is None


def test_chain_survives_restart(tmp_path):
    path = tmp_path / "nested" / "ledger.json"
    clock = itertools.count(1000).__next__

    chain = AttendanceChain.initialize(JsonFileLedgerRepository(path), Sha256Fingerprint(), clock=clock)
    chain.append(AttendancePayload("S1", PresenceStatus.PRESENT, "2024-01-01"))

    reloaded = AttendanceChain.initialize(JsonFileLedgerRepository(path), Sha256Fingerprint(), clock=clock)

    assert reloaded.records == chain.records
    assert reloaded.is_valid()
    assert list(path.parent.iterdir()) == [path]


def test_hand_edited_file_fails_validation(tmp_path):
    path = tmp_path / "ledger.json"
    clock = itertools.count(1000).__next__

    chain = AttendanceChain.initialize(JsonFileLedgerRepository(path), Sha256Fingerprint(), clock=clock)
    chain.append(AttendancePayload("S1", PresenceStatus.ABSENT, "2024-01-01"))
    chain.append(AttendancePayload("S2", PresenceStatus.ABSENT, "2024-01-01"))

    text = path.read_text(encoding="utf-8")
    path.write_text(text.replace('"absent"', '"present"', 1), encoding="utf-8")

    reloaded = AttendanceChain.initialize(JsonFileLedgerRepository(path), Sha256Fingerprint(), clock=clock)
    report = reloaded.validate()

    assert not report.valid
    assert report.first_invalid_index == 1


def test_unreadable_file_is_replaced(tmp_path):
    path = tmp_path / "ledger.json"
    path.write_text("garbage", encoding="utf-8")

    chain = AttendanceChain.initialize(JsonFileLedgerRepository(path), Sha256Fingerprint())

    assert len(chain) == 1
    assert JsonFileLedgerRepository(path).load() == list(chain.records)


def test_clear_removes_file(tmp_path):
    path = tmp_path / "ledger.json"
    repo = JsonFileLedgerRepository(path)
    AttendanceChain.initialize(repo, Sha256Fingerprint())

    repo.clear()
    repo.clear()

    assert not path.exists()

from __future__ import annotations

import dataclasses
import itertools

import pytest

from src.attendance_ledger.attendance_ledger.core.enums import IntegrityFault, PresenceStatus
from src.attendance_ledger.attendance_ledger.core.exceptions import LedgerCorruptError
from src.attendance_ledger.attendance_ledger.ledger.chain import AttendanceChain
from src.attendance_ledger.attendance_ledger.ledger.codec import dumps_chain
from src.attendance_ledger.attendance_ledger.ledger.fingerprint.demo_fingerprint import DemoFingerprint
from src.attendance_ledger.attendance_ledger.ledger.memory_ledger_repository import InMemoryLedgerRepository
from src.attendance_ledger.attendance_ledger.ledger.model import GENESIS_PAYLOAD, AttendancePayload


def make_clock(start: int = 1_700_000_000_000):
    counter = itertools.count(start, 1000)
    return lambda: next(counter)


def new_chain(repo=None, **kwargs):
    return AttendanceChain.initialize(repo or InMemoryLedgerRepository(), DemoFingerprint(), clock=make_clock(), **kwargs)


def payload(subject="S1", status=PresenceStatus.PRESENT, day="2024-01-01"):
    return AttendancePayload(subject_id=subject, status=status, calendar_date=day)


def test_initialize_builds_and_persists_genesis():
    repo = InMemoryLedgerRepository()
    chain = new_chain(repo)

    assert len(chain) == 1
    genesis = chain.latest()
    assert genesis.index == 0
    assert genesis.previous_fingerprint == "0"
    assert genesis.payload == GENESIS_PAYLOAD
    assert repo.writes == 1


def test_append_links_to_previous_record():
    chain = new_chain()

    for i in range(3):
        before = chain.latest()
        rec = chain.append(payload(day=f"2024-01-0{i + 1}"))
        assert rec.index == before.index + 1
        assert rec.previous_fingerprint == before.fingerprint
        assert chain.latest() == rec

    assert chain.is_valid()


def test_every_append_persists_whole_chain():
    repo = InMemoryLedgerRepository()
    chain = new_chain(repo)
    chain.append(payload())
    chain.append(payload(subject="S2"))

    assert repo.writes == 3
    assert repo.text == dumps_chain(chain.records)


def test_initialize_loads_stored_chain_verbatim():
    repo = InMemoryLedgerRepository()
    chain = new_chain(repo)
    chain.append(payload())
    chain.append(payload(status=PresenceStatus.ABSENT, day="2024-01-02"))

    reloaded = new_chain(repo)

    assert reloaded.records == chain.records


def test_tampered_payload_reports_that_record_only():
    repo = InMemoryLedgerRepository()
    chain = new_chain(repo)
    for day in ("2024-01-01", "2024-01-02", "2024-01-03"):
        chain.append(payload(day=day))

    records = list(chain.records)
    forged = dataclasses.replace(records[2].payload, status=PresenceStatus.ABSENT)
    records[2] = dataclasses.replace(records[2], payload=forged)
    repo.text = dumps_chain(records)

    reloaded = new_chain(repo)
    report = reloaded.validate()

    assert report.valid is False
    assert report.first_invalid_index == 2
    assert report.reason == IntegrityFault.FINGERPRINT_MISMATCH
    assert reloaded.tampered_indexes() == [2]


def test_rewritten_fingerprint_breaks_the_next_link():
    chain = new_chain()
    chain.append(payload(day="2024-01-01"))
    chain.append(payload(day="2024-01-02"))

    records = list(chain.records)
    fp = DemoFingerprint()
    forged = dataclasses.replace(records[1], payload=payload(status=PresenceStatus.ABSENT, day="2024-01-01"))
    forged = dataclasses.replace(forged, fingerprint=fp.of_record(forged))
    records[1] = forged

    forged_chain = AttendanceChain(records, repository=InMemoryLedgerRepository(), fingerprint=fp)
    report = forged_chain.validate()

    assert report.first_invalid_index == 2
    assert report.reason == IntegrityFault.BROKEN_LINK


def test_validate_does_not_repair():
    repo = InMemoryLedgerRepository()
    chain = new_chain(repo)
    chain.append(payload())
    records = list(chain.records)
    records[1] = dataclasses.replace(records[1], fingerprint="0" * 64)
    repo.text = dumps_chain(records)

    reloaded = new_chain(repo)
    assert not reloaded.is_valid()
    assert not reloaded.is_valid()
    assert reloaded.records[1].fingerprint == "0" * 64


def test_reset_leaves_fresh_genesis_chain():
    repo = InMemoryLedgerRepository()
    chain = new_chain(repo)
    chain.append(payload())
    chain.append(payload(subject="S2"))

    genesis = chain.reset()

    assert len(chain) == 1
    assert chain.latest() == genesis
    assert genesis.index == 0 and genesis.previous_fingerprint == "0"
    assert new_chain(repo).records == chain.records

    rec = chain.append(payload())
    assert rec.index == 1
    assert rec.previous_fingerprint == genesis.fingerprint


def test_corrupt_store_is_replaced_by_default():
    repo = InMemoryLedgerRepository("{not json")

    chain = new_chain(repo)

    assert len(chain) == 1
    assert repo.text == dumps_chain(chain.records)


def test_corrupt_store_raises_in_strict_mode():
    repo = InMemoryLedgerRepository('[{"index": 0}]')

    with pytest.raises(LedgerCorruptError):
        new_chain(repo, strict_load=True)

    assert repo.text == '[{"index": 0}]'


def test_records_snapshot_is_read_only():
    chain = new_chain()
    snapshot = chain.records
    chain.append(payload())

    assert len(snapshot) == 1
    assert isinstance(snapshot, tuple)


class FlakyRepository(InMemoryLedgerRepository):
    def __init__(self):
        super().__init__()
        self.fail = False

    def save(self, records):
        if self.fail:
            raise OSError("disk full")
        super().save(records)


def test_failed_append_leaves_chain_and_store_untouched():
    repo = FlakyRepository()
    chain = new_chain(repo)
    chain.append(payload())
    before = chain.records
    stored = repo.text

    repo.fail = True
    with pytest.raises(OSError):
        chain.append(payload(subject="S2"))

    assert chain.records == before
    assert repo.text == stored

    repo.fail = False
    rec = chain.append(payload(subject="S2"))
    assert rec.index == 2


def test_failed_reset_keeps_existing_records():
    repo = FlakyRepository()
    chain = new_chain(repo)
    chain.append(payload())
    before = chain.records

    repo.fail = True
    with pytest.raises(OSError):
        chain.reset()

    assert chain.records == before
    assert new_chain(repo).records == before

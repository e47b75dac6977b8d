"""JSON codec for the persisted chain.

The whole chain is one JSON array, records in append order. Fingerprints are
read back verbatim; recomputing them here would hide edits made in storage.
"""
from __future__ import annotations

import json
from typing import Any, Sequence

from ..core.constants import GENESIS_STATUS
from ..core.enums import PresenceStatus
from ..core.exceptions import LedgerCorruptError
from .model import AttendancePayload, LedgerRecord


def record_to_dict(record: LedgerRecord) -> dict:
    return {
        "index": record.index,
        "createdAt": record.created_at,
        "payload": record.payload.as_dict(),
        "previousFingerprint": record.previous_fingerprint,
        "fingerprint": record.fingerprint,
    }


def dumps_chain(records: Sequence[LedgerRecord]) -> str:
    return json.dumps([record_to_dict(r) for r in records], ensure_ascii=False)


def _require(data: dict, key: str, kind: type, where: str) -> Any:
    if key not in data:
        raise LedgerCorruptError(f"{where}: missing field {key!r}")
    value = data[key]
    # bool is an int subclass; never a valid index or timestamp.
    if not isinstance(value, kind) or isinstance(value, bool):
        raise LedgerCorruptError(f"{where}: field {key!r} has type {type(value).__name__}")
    return value


def _payload_from_dict(raw: Any, *, index: int, where: str) -> AttendancePayload:
    if not isinstance(raw, dict):
        raise LedgerCorruptError(f"{where}: payload is not an object")

    status_raw = _require(raw, "presenceStatus", str, where)
    if index == 0 and status_raw == GENESIS_STATUS:
        status = status_raw
    else:
        try:
            status = PresenceStatus(status_raw)
        except ValueError:
            raise LedgerCorruptError(f"{where}: unknown status {status_raw!r}") from None

    return AttendancePayload(
        subject_id=_require(raw, "subjectId", str, where),
        status=status,
        calendar_date=_require(raw, "calendarDate", str, where),
    )


def record_from_dict(data: Any, position: int) -> LedgerRecord:
    where = f"record #{position}"
    if not isinstance(data, dict):
        raise LedgerCorruptError(f"{where}: not an object")

    index = _require(data, "index", int, where)
    return LedgerRecord(
        index=index,
        created_at=_require(data, "createdAt", int, where),
        payload=_payload_from_dict(data.get("payload"), index=index, where=where),
        previous_fingerprint=_require(data, "previousFingerprint", str, where),
        fingerprint=_require(data, "fingerprint", str, where),
    )


def loads_chain(text: str) -> list[LedgerRecord]:
    try:
        raw = json.loads(text)
    except (TypeError, ValueError) as e:
        raise LedgerCorruptError(f"stored chain is not valid JSON: {e}") from e

    if not isinstance(raw, list):
        raise LedgerCorruptError("stored chain is not a JSON array")
    if not raw:
        raise LedgerCorruptError("stored chain is empty")

    return [record_from_dict(item, pos) for pos, item in enumerate(raw)]

from __future__ import annotations

import logging
from typing import Callable, Iterator, Optional

from ..common.datetime_utils import now_millis
from ..core.constants import GENESIS_INDEX, GENESIS_PREVIOUS_FINGERPRINT
from ..core.enums import IntegrityFault
from ..core.exceptions import LedgerCorruptError
from .fingerprint.base import FingerprintFunction
from .model import GENESIS_PAYLOAD, AttendancePayload, LedgerRecord, ValidationReport
from .repository import LedgerRepository

logger = logging.getLogger(__name__)

Clock = Callable[[], int]


class AttendanceChain:
    """Append-only, hash-linked sequence of attendance records.

    The chain is never empty: index 0 is always a genesis record. Every
    mutation (append, reset) writes the whole chain through the repository.
    Callers get read-only snapshots; records are never edited in place.
    """

    def __init__(
        self,
        records: list[LedgerRecord],
        *,
        repository: LedgerRepository,
        fingerprint: FingerprintFunction,
        clock: Clock = now_millis,
    ):
        if not records:
            raise ValueError("chain needs at least the genesis record")
        self._records = list(records)
        self._repository = repository
        self._fingerprint = fingerprint
        self._clock = clock

    @classmethod
    def initialize(
        cls,
        repository: LedgerRepository,
        fingerprint: FingerprintFunction,
        *,
        clock: Clock = now_millis,
        strict_load: bool = False,
    ) -> "AttendanceChain":
        """Load the stored chain, or start (and persist) a fresh genesis chain.

        An unreadable store is replaced by a new chain unless strict_load is
        set, in which case LedgerCorruptError propagates.
        """

        try:
            stored = repository.load()
        except LedgerCorruptError as e:
            if strict_load:
                raise
            logger.warning("Stored ledger is unreadable, starting a new chain: %s", e)
            stored = None

        if stored:
            logger.info("Loaded ledger with %d records", len(stored))
            return cls(stored, repository=repository, fingerprint=fingerprint, clock=clock)

        chain = cls(
            [cls._build_genesis(fingerprint, clock)],
            repository=repository,
            fingerprint=fingerprint,
            clock=clock,
        )
        chain._commit(chain._records)
        logger.info("Initialized new ledger")
        return chain

    @staticmethod
    def _build_genesis(fingerprint: FingerprintFunction, clock: Clock) -> LedgerRecord:
        created_at = clock()
        return LedgerRecord(
            index=GENESIS_INDEX,
            created_at=created_at,
            payload=GENESIS_PAYLOAD,
            previous_fingerprint=GENESIS_PREVIOUS_FINGERPRINT,
            fingerprint=fingerprint.compute(GENESIS_INDEX, GENESIS_PREVIOUS_FINGERPRINT, created_at, GENESIS_PAYLOAD),
        )

    @property
    def records(self) -> tuple[LedgerRecord, ...]:
        return tuple(self._records)

    @property
    def fingerprint_function(self) -> FingerprintFunction:
        return self._fingerprint

    def __len__(self) -> int:
        return len(self._records)

    def __iter__(self) -> Iterator[LedgerRecord]:
        return iter(tuple(self._records))

    def latest(self) -> LedgerRecord:
        return self._records[-1]

    def append(self, payload: AttendancePayload) -> LedgerRecord:
        prev = self.latest()
        index = prev.index + 1
        created_at = self._clock()
        record = LedgerRecord(
            index=index,
            created_at=created_at,
            payload=payload,
            previous_fingerprint=prev.fingerprint,
            fingerprint=self._fingerprint.compute(index, prev.fingerprint, created_at, payload),
        )
        self._commit([*self._records, record])
        logger.info("Appended record #%d for subject %s on %s", index, payload.subject_id, payload.calendar_date)
        return record

    def is_tampered(self, record: LedgerRecord) -> bool:
        return record.fingerprint != self._fingerprint.of_record(record)

    def validate(self) -> ValidationReport:
        """Recompute fingerprints and links from index 1 on; stop at the first fault."""

        checked = 0
        for i in range(1, len(self._records)):
            current = self._records[i]
            previous = self._records[i - 1]
            checked += 1

            fault: Optional[IntegrityFault] = None
            if self.is_tampered(current):
                fault = IntegrityFault.FINGERPRINT_MISMATCH
            elif current.previous_fingerprint != previous.fingerprint:
                fault = IntegrityFault.BROKEN_LINK

            if fault:
                logger.warning("Ledger integrity violation at record #%d: %s", current.index, fault.value)
                return ValidationReport(valid=False, checked=checked, first_invalid_index=i, reason=fault)

        return ValidationReport(valid=True, checked=checked)

    def is_valid(self) -> bool:
        return self.validate().valid

    def tampered_indexes(self) -> list[int]:
        return [i for i, r in enumerate(self._records) if i > 0 and self.is_tampered(r)]

    def reset(self) -> LedgerRecord:
        self._commit([self._build_genesis(self._fingerprint, self._clock)])
        logger.info("Ledger reset to a new genesis record")
        return self._records[0]

    def _commit(self, records: list[LedgerRecord]) -> None:
        # Memory only changes once storage has accepted the whole chain.
        self._repository.save(records)
        self._records = records

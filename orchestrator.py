"""
Orchestrator  (Generate, Review, Accept)
------------------------------------------
1. Runs one Gemini generation at a time (a second request while one is in
   flight is rejected, not queued).
2. Holds each result as a pending batch until the user accepts or discards it.
3. Accepted batches are prepended to the TestLibrary.

A batch whose requester went away simply stays pending until it is pushed
out by newer ones.
"""

import logging
import threading
import uuid
from collections import OrderedDict
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Iterable, List, Optional

import config
from agents.errors import GenerationInProgressError, UnknownBatchError
from agents.test_case_generator import TestCaseGeneratorAgent
from models.seed_data import seed_cases
from models.test_case_model import TestCase
from models.test_library import TestLibrary

logger = logging.getLogger(__name__)


@dataclass
class PendingBatch:
    batch_id: str
    requirement: str
    test_cases: List[TestCase]
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    def to_dict(self) -> dict:
        return {
            "batchId": self.batch_id,
            "requirement": self.requirement,
            "createdAt": self.created_at.isoformat(),
            "testCases": [tc.to_dict() for tc in self.test_cases],
        }


class Orchestrator:
    def __init__(
        self,
        generator: Optional[TestCaseGeneratorAgent] = None,
        library: Optional[TestLibrary] = None,
        max_pending: int = config.MAX_PENDING_BATCHES,
    ):
        self.generator = generator or TestCaseGeneratorAgent()
        self.library = library if library is not None else TestLibrary(seed_cases())
        self._max_pending = max_pending
        self._pending: "OrderedDict[str, PendingBatch]" = OrderedDict()
        self._pending_lock = threading.Lock()
        self._in_flight = threading.Lock()

    @property
    def busy(self) -> bool:
        return self._in_flight.locked()

    # ── Generation ─────────────────────────────────────────────────────────

    def generate(
        self,
        requirement: str,
        standards: Iterable = (),
        traceability_id: Optional[str] = None,
    ) -> PendingBatch:
        if not self._in_flight.acquire(blocking=False):
            raise GenerationInProgressError("A generation request is already running.")
        try:
            cases = self.generator.generate(requirement, standards, traceability_id=traceability_id)
        finally:
            self._in_flight.release()

        batch = PendingBatch(batch_id=uuid.uuid4().hex, requirement=requirement.strip(), test_cases=cases)
        with self._pending_lock:
            self._pending[batch.batch_id] = batch
            while len(self._pending) > self._max_pending:
                dropped, _ = self._pending.popitem(last=False)
                logger.info("Dropping stale pending batch %s", dropped)
        return batch

    # ── Review ─────────────────────────────────────────────────────────────

    def pending(self, batch_id: str) -> PendingBatch:
        with self._pending_lock:
            try:
                return self._pending[batch_id]
            except KeyError:
                raise UnknownBatchError(f"No pending batch {batch_id}.") from None

    def accept(self, batch_id: str) -> List[TestCase]:
        with self._pending_lock:
            batch = self._pending.pop(batch_id, None)
        if batch is None:
            raise UnknownBatchError(f"No pending batch {batch_id}.")
        try:
            self.library.accept(batch.test_cases)
        except Exception:
            # put it back so the user can retry or discard
            with self._pending_lock:
                self._pending[batch_id] = batch
            raise
        return batch.test_cases

    def discard(self, batch_id: str) -> None:
        with self._pending_lock:
            self._pending.pop(batch_id, None)

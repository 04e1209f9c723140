"""In-memory record store used by the API layer.

Process-local and non-durable; it implements the repository contract
(save / find_by_id / find_all / delete) the routes depend on.
"""

import itertools
import logging
import math
import threading
from typing import Generic, TypeVar

from models.records import StoredRecord
from models.responses import Page
from services.exceptions import NotFoundError

logger = logging.getLogger(__name__)

RecordT = TypeVar("RecordT", bound=StoredRecord)


class Repository(Generic[RecordT]):
    """Thread-safe id -> record map with sequential ids starting at 1."""

    def __init__(self, entity_name: str) -> None:
        self.entity_name = entity_name
        self._records: dict[int, RecordT] = {}
        self._ids = itertools.count(1)
        self._lock = threading.Lock()

    def save(self, record: RecordT) -> int:
        with self._lock:
            record_id = next(self._ids)
            self._records[record_id] = record.model_copy(update={"id": record_id})
        logger.debug("Saved %s %d", self.entity_name, record_id)
        return record_id

    def find_by_id(self, record_id: int) -> RecordT:
        with self._lock:
            record = self._records.get(record_id)
        if record is None:
            raise NotFoundError(f"{self.entity_name} not found with id: {record_id}")
        return record

    def find_all(self, page: int, size: int) -> Page[RecordT]:
        """One page of records, newest first."""
        with self._lock:
            records = list(self._records.values())
        records.sort(key=lambda r: (r.created_at, r.id), reverse=True)

        total = len(records)
        start = page * size
        return Page(
            items=records[start:start + size],
            page=page,
            size=size,
            total_elements=total,
            total_pages=math.ceil(total / size) if size else 0,
        )

    def delete(self, record_id: int) -> None:
        with self._lock:
            if record_id not in self._records:
                raise NotFoundError(f"{self.entity_name} not found with id: {record_id}")
            del self._records[record_id]
        logger.debug("Deleted %s %d", self.entity_name, record_id)

    def clear(self) -> None:
        """Drop all records and restart ids. Useful for testing."""
        with self._lock:
            self._records.clear()
            self._ids = itertools.count(1)

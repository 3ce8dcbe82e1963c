import logging
import threading
from datetime import datetime, timezone
from typing import Dict, List, Optional

from string_analyzer.errors import ConflictError, InvalidInputError, NotFoundError
from string_analyzer.models.string import Entry
from string_analyzer.services.analyzer import analyze, compute_sha256, is_encodable
from string_analyzer.services.filters import StringFilters, apply_filters

logger = logging.getLogger(__name__)


class StringStore:
    """
    In-memory, content-addressed store of analyzed strings.

    Entries are keyed by the SHA-256 of their (trimmed) value. A single lock
    guards every read and write, so two concurrent creates of the same
    content can never both succeed. Nothing is persisted. Reads hand out
    copies, so callers can never change what is stored.
    """

    def __init__(self):
        self._entries: Dict[str, Entry] = {}
        self._lock = threading.Lock()

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)

    def __contains__(self, value: str) -> bool:
        key = self._key_for(value)
        with self._lock:
            return key is not None and key in self._entries

    @staticmethod
    def _key_for(value: str) -> Optional[str]:
        trimmed = value.strip()
        if not trimmed or not is_encodable(trimmed):
            return None
        return compute_sha256(trimmed)

    def create(self, value: str) -> Entry:
        """Analyze and store a string. Existing content is never overwritten."""
        trimmed = value.strip()
        if not trimmed:
            raise InvalidInputError("Missing or empty 'value' field")
        if not is_encodable(trimmed):
            raise InvalidInputError("'value' must be valid Unicode text")

        properties = analyze(trimmed)
        string_id = properties.content_hash

        with self._lock:
            if string_id in self._entries:
                logger.warning(f"Rejected duplicate string {string_id}")
                raise ConflictError()

            entry = Entry(
                id=string_id,
                value=trimmed,
                properties=properties,
                created_at=datetime.now(timezone.utc),
            )
            self._entries[string_id] = entry

        logger.info(f"Stored string {string_id} (length={properties.length})")
        return entry.model_copy(deep=True)

    def get_by_value(self, value: str) -> Entry:
        key = self._key_for(value)
        with self._lock:
            entry = self._entries.get(key) if key else None
        if entry is None:
            raise NotFoundError()
        return entry.model_copy(deep=True)

    def list_all(self, filters: Optional[StringFilters] = None) -> List[Entry]:
        """Snapshot of all entries in insertion order, narrowed by filters"""
        with self._lock:
            snapshot = list(self._entries.values())
        return [entry.model_copy(deep=True) for entry in apply_filters(snapshot, filters)]

    def delete_by_value(self, value: str) -> Entry:
        key = self._key_for(value)
        with self._lock:
            entry = self._entries.pop(key, None) if key else None
        if entry is None:
            raise NotFoundError()

        logger.info(f"Deleted string {entry.id}")
        return entry

    def clear(self):
        with self._lock:
            self._entries.clear()


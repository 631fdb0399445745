"""Persist and load site records (JSON): events, songs, members, quotations, donations."""
import json
import logging
import os
import tempfile
import threading
import uuid
from dataclasses import fields
from datetime import date, datetime, timezone
from pathlib import Path
from typing import Any, Dict, List, Optional

from acappella.config import RECORDS_PATH
from acappella.models.record import Donation, Event, Member, QuotationRequest, Song

logger = logging.getLogger(__name__)

# Assigned on create; never taken from the caller
_SERVER_FIELDS = ("id", "created_at")


class StoreError(Exception):
    """Records could not be read or written. Nothing was persisted."""


def _camel(name: str) -> str:
    head, *rest = name.split("_")
    return head + "".join(part.title() for part in rest)


def _snake(name: str) -> str:
    return "".join("_" + c.lower() if c.isupper() else c for c in name)


def record_to_dict(record) -> Dict[str, Any]:
    """Wire/storage shape of a record: camelCase keys, optional fields left out when unset."""
    out = {}
    for f in fields(record):
        value = getattr(record, f.name)
        if value is None:
            continue
        out[_camel(f.name)] = value
    return out


def record_from_dict(model, item: Dict[str, Any]):
    """Build a record from its stored shape. Raises KeyError/TypeError on malformed items."""
    names = {f.name for f in fields(model)}
    kwargs = {}
    for key, value in item.items():
        name = _snake(key)
        if name not in names:
            raise KeyError(key)
        kwargs[name] = value
    return model(**kwargs)


def _now() -> str:
    return datetime.now(timezone.utc).isoformat()


class _Collection:
    """One record kind inside the store document."""

    key: str = ""
    model: type = object
    # Field values forced on create (e.g. status for pending requests)
    defaults: Dict[str, Any] = {}

    def __init__(self, store: "RecordStore") -> None:
        self._store = store

    def list(self) -> List[Any]:
        """All records in storage (creation) order."""
        return self._store.load(self.key, self.model)

    def create(self, values: Dict[str, Any]) -> str:
        """Insert a record; assigns id, creation time and defaults. Returns the new id."""
        kwargs = {_snake(k): v for k, v in values.items()}
        for name in _SERVER_FIELDS + tuple(self.defaults):
            kwargs.pop(name, None)
        kwargs.update(self.defaults)
        try:
            record = self.model(id=str(uuid.uuid4()), created_at=_now(), **kwargs)
        except TypeError as e:
            raise ValueError(f"Invalid {self.key} fields: {e}") from e
        self._store.append(self.key, record)
        logger.info("Created %s %s", self.key, record.id)
        return record.id


def _event_date_key(event: Event):
    try:
        return (0, date.fromisoformat(event.date[:10]))
    except (TypeError, ValueError):
        return (1, date.max)


class EventCollection(_Collection):
    key = "events"
    model = Event

    def list(self) -> List[Event]:
        """Events by date ascending, whatever the storage order.

        Only ISO dates (YYYY-MM-DD, optionally with a time part) are ordered;
        anything else, e.g. "March 17, 2024", goes last.
        """
        # Newest-created first among events on the same day
        events = list(reversed(super().list()))
        return sorted(events, key=_event_date_key)


class SongCollection(_Collection):
    key = "songs"
    model = Song

    def by_category(self, category: str) -> List[Song]:
        """Songs whose category matches exactly."""
        return [s for s in self.list() if s.category == category]


class MemberCollection(_Collection):
    key = "members"
    model = Member


class QuotationCollection(_Collection):
    key = "quotations"
    model = QuotationRequest
    defaults = {"status": "pending"}

    def list(self) -> List[QuotationRequest]:
        """Most recent request first."""
        return list(reversed(super().list()))


class DonationCollection(_Collection):
    key = "donations"
    model = Donation
    defaults = {"status": "pending", "transaction_id": None}


class RecordStore:
    """JSON document holding every collection; writes are serialised and atomic."""

    def __init__(self, path: Optional[Path] = None) -> None:
        self._path = Path(path) if path is not None else RECORDS_PATH
        self._lock = threading.Lock()
        self.events = EventCollection(self)
        self.songs = SongCollection(self)
        self.members = MemberCollection(self)
        self.quotations = QuotationCollection(self)
        self.donations = DonationCollection(self)

    @property
    def path(self) -> Path:
        return self._path

    def _read(self) -> Dict[str, List[Dict[str, Any]]]:
        if not self._path.exists():
            return {}
        try:
            data = json.loads(self._path.read_text())
        except (json.JSONDecodeError, OSError) as e:
            raise StoreError(f"Cannot read {self._path}: {e}") from e
        if not isinstance(data, dict):
            raise StoreError(f"Unexpected document in {self._path}")
        return data

    def _write(self, data: Dict[str, List[Dict[str, Any]]]) -> None:
        try:
            # NaN/Infinity are not valid JSON
            text = json.dumps(data, indent=2, allow_nan=False)
        except (TypeError, ValueError) as e:
            raise StoreError(f"Cannot encode records for {self._path}: {e}") from e
        tmp = None
        try:
            self._path.parent.mkdir(parents=True, exist_ok=True)
            with tempfile.NamedTemporaryFile(
                "w", dir=self._path.parent, prefix=self._path.name + ".", suffix=".tmp", delete=False
            ) as tmp:
                tmp.write(text)
            os.replace(tmp.name, self._path)
        except OSError as e:
            if tmp is not None and os.path.exists(tmp.name):
                os.unlink(tmp.name)
            raise StoreError(f"Cannot write {self._path}: {e}") from e

    def load(self, key: str, model) -> List[Any]:
        """Load all records of one kind. Malformed items are skipped."""
        out = []
        for item in self._read().get(key, []):
            try:
                out.append(record_from_dict(model, item))
            except (KeyError, TypeError, AttributeError):
                logger.warning("Skipping malformed %s item: %r", key, item)
                continue
        return out

    def append(self, key: str, record) -> None:
        """Add one record to its collection and save the document."""
        with self._lock:
            data = self._read()
            items = list(data.get(key, []))
            items.append(record_to_dict(record))
            data[key] = items
            self._write(data)

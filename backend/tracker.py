"""
Request entry tracker.

Loads the per-session RequestEntryCollection out of the session store,
lets a handler count the current path, and writes it back. The collection
is stored as a tagged JSON record:

  {"type":"RequestEntryCollection","version":1,"entries":[{"path":"/","count":2}]}

Missing or unreadable data never reaches the caller as an error; it just
means the session has no history yet.
"""

import logging
from typing import Optional

import config
from models.request_entry import RequestEntryCollection
from routes.deps import SessionContext

logger = logging.getLogger(__name__)


def serialize(collection: RequestEntryCollection) -> bytes:
    return collection.model_dump_json().encode("utf-8")


def deserialize(blob: bytes) -> RequestEntryCollection:
    """Strict inverse of serialize(). Raises ValueError on bad data."""
    return RequestEntryCollection.model_validate_json(blob)


def get_or_create(blob: Optional[bytes]) -> RequestEntryCollection:
    if blob is None:
        return RequestEntryCollection()
    try:
        return deserialize(blob)
    except ValueError as exc:
        logger.warning("Discarding unreadable request entries (%d bytes): %s", len(blob), exc)
        return RequestEntryCollection()


def add(collection: RequestEntryCollection, path: str) -> None:
    collection.add(path)


def total_count(collection: RequestEntryCollection) -> int:
    return collection.total_count()


# ---------- Session glue ----------

# The context is bound to one session id, and writing through it issues the
# session cookie when the session is new.

def load_entries(session: SessionContext) -> RequestEntryCollection:
    return get_or_create(session.get(config.REQUEST_ENTRIES_KEY))


def save_entries(session: SessionContext, collection: RequestEntryCollection) -> None:
    session.set(config.REQUEST_ENTRIES_KEY, serialize(collection))

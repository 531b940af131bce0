"""
Document store backed by SQLite.

Person records are schemaless JSON documents grouped into named
collections.  The store offers the two operations the service layer
needs, ``insert`` and ``find_all``; documents are returned in
insertion order with their store-assigned ``_id``.

A single connection is opened by ``DocumentStore.connect`` when the
process boots and shared for the lifetime of the application.  Calls
are serialized with a lock because ``sqlite3`` connections must not be
used from several threads at once.  There are no indexes beyond the
identity key and no statement spans more than one document.
"""

import json
import logging
import secrets
import sqlite3
import threading
from typing import Any, Dict, List, Optional

from .errors import StartupError, StorageError

logger = logging.getLogger(__name__)

# Name of the collection holding person documents.
PERSON_COLLECTION = "PERSON"

_SCHEMA = """
CREATE TABLE IF NOT EXISTS documents (
    seq INTEGER PRIMARY KEY AUTOINCREMENT,
    id TEXT NOT NULL UNIQUE,
    collection TEXT NOT NULL,
    body TEXT NOT NULL
)
"""


def resolve_database_path(url: str) -> str:
    """Turn a connection string into a path ``sqlite3.connect`` accepts."""
    if url.startswith("sqlite:///"):
        return url[len("sqlite:///"):] or ":memory:"
    return url


def new_identity() -> str:
    """Return a fresh opaque identity (24 hex characters)."""
    return secrets.token_hex(12)


class DocumentStore:
    """Persistence gateway over a single SQLite connection."""

    def __init__(self, conn: sqlite3.Connection) -> None:
        self._conn = conn
        self._lock = threading.Lock()

    @classmethod
    def connect(cls, url: Optional[str]) -> "DocumentStore":
        """Open the store and make sure it answers.

        Raises ``StartupError`` if ``url`` is empty or the database
        cannot be opened; callers are expected to terminate the process.
        """
        if not url:
            raise StartupError("Missing DATABASE_URL environment variable")
        path = resolve_database_path(url)
        try:
            conn = sqlite3.connect(path, check_same_thread=False)
            conn.execute(_SCHEMA)
            conn.execute("SELECT 1").fetchone()
            conn.commit()
        except sqlite3.Error as exc:
            logger.error("Document store connection error: %s", exc)
            raise StartupError(f"Could not connect to document store: {exc}") from exc
        logger.info("Connected to document store at %s", path)
        return cls(conn)

    def insert(self, collection: str, doc: Dict[str, Any]) -> str:
        """Store a copy of ``doc`` in ``collection`` and return its identity."""
        identity = new_identity()
        body = {key: value for key, value in doc.items() if key != "_id"}
        try:
            with self._lock:
                self._conn.execute(
                    "INSERT INTO documents (id, collection, body) VALUES (?, ?, ?)",
                    (identity, collection, json.dumps(body)),
                )
                self._conn.commit()
        except sqlite3.Error as exc:
            raise StorageError(f"Insert into {collection} failed: {exc}") from exc
        logger.debug("Inserted document %s into %s", identity, collection)
        return identity

    def find_all(self, collection: str) -> List[Dict[str, Any]]:
        """Return every document of ``collection`` in insertion order."""
        try:
            with self._lock:
                rows = self._conn.execute(
                    "SELECT id, body FROM documents WHERE collection = ? ORDER BY seq ASC",
                    (collection,),
                ).fetchall()
        except sqlite3.Error as exc:
            raise StorageError(f"Reading {collection} failed: {exc}") from exc
        documents = []
        for identity, body in rows:
            doc = {"_id": identity}
            doc.update(json.loads(body))
            documents.append(doc)
        return documents

    def close(self) -> None:
        with self._lock:
            self._conn.close()

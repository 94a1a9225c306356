"""MongoDB access with an in-memory fallback for local development and tests.

When MONGO_DISABLED=1 or MONGO_URI is unset, repositories keep their documents
in module-level dictionaries instead of talking to a server.
"""
from __future__ import annotations

import logging
import os
from typing import Any

from bson import ObjectId
from bson.errors import InvalidId
from pymongo import MongoClient
from pymongo.database import Database

from src.domain.errors import NotFoundError

logger = logging.getLogger(__name__)

# module-level in-memory collections for disabled mode
_MEM_COLLECTIONS: dict[str, dict[str, dict[str, Any]]] = {}


def mongo_enabled() -> bool:
    disabled = os.getenv("MONGO_DISABLED", "0") == "1"
    return not disabled and bool(os.getenv("MONGO_URI"))


def memory_collection(name: str) -> dict[str, dict[str, Any]]:
    return _MEM_COLLECTIONS.setdefault(name, {})


def clear_memory_collections() -> None:
    for collection in _MEM_COLLECTIONS.values():
        collection.clear()


def new_id() -> str:
    return str(ObjectId())


def memory_key(value: str | ObjectId) -> str:
    """Canonical lower-case hex, so memory lookups match ObjectId equality."""
    return str(ObjectId(value))


def to_object_id(value: str, what: str = "Resource", *, status_code: int | None = None) -> ObjectId:
    """Parse an identifier taken from a URL or token.

    Raises:
        NotFoundError: with reason ``malformed_id`` when ``value`` is not an
            ObjectId. Callers raise their own ``absent`` variant after lookup.
    """
    try:
        return ObjectId(value)
    except (InvalidId, TypeError) as exc:
        raise NotFoundError(
            f"{what} not found",
            reason=NotFoundError.MALFORMED_ID,
            status_code=status_code,
        ) from exc


# Simple reusable singleton getter for repositories
_DATABASE_SINGLETON: Database | None = None
_CLIENT_SINGLETON: Any = None


def get_mongo_database() -> Database | None:
    global _DATABASE_SINGLETON, _CLIENT_SINGLETON
    if not mongo_enabled():
        return None
    if _DATABASE_SINGLETON is None:
        _CLIENT_SINGLETON = MongoClient(
            os.getenv("MONGO_URI"),
            tz_aware=True,
            serverSelectionTimeoutMS=int(os.getenv("MONGO_TIMEOUT_MS", "5000")),
        )
        _DATABASE_SINGLETON = _CLIENT_SINGLETON[os.getenv("MONGO_DB", "devconnector")]
        _create_indexes(_DATABASE_SINGLETON)
        logger.info("Connected to MongoDB database %s", _DATABASE_SINGLETON.name)
    return _DATABASE_SINGLETON


def _create_indexes(db: Database) -> None:
    db["users"].create_index("email", unique=True)
    db["profiles"].create_index("user", unique=True)
    db["posts"].create_index([("date", -1)])
    db["posts"].create_index("user")


def close_mongo_client() -> None:
    global _DATABASE_SINGLETON, _CLIENT_SINGLETON
    if _CLIENT_SINGLETON is not None:
        _CLIENT_SINGLETON.close()
    _CLIENT_SINGLETON = None
    _DATABASE_SINGLETON = None

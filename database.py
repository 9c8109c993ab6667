from typing import Any, Dict, List, Optional
from motor.motor_asyncio import AsyncIOMotorClient, AsyncIOMotorCollection
from schemas import ScanRecord, ScanRecordCreate
from settings import get_settings
import datetime
import itertools
import logging
import threading
import time
import uuid

logger = logging.getLogger(__name__)


def _new_record(candidate: ScanRecordCreate) -> ScanRecord:
    now = datetime.datetime.now(datetime.timezone.utc)
    # MongoDB keeps milliseconds only
    now = now.replace(microsecond=now.microsecond // 1000 * 1000)
    return ScanRecord(**candidate.model_dump(), id=str(uuid.uuid4()), scannedAt=now)


class MemoryHistoryStore:
    """Scan log kept in process memory; lost on restart."""

    def __init__(self) -> None:
        self._records: Dict[str, ScanRecord] = {}
        self._lock = threading.Lock()

    async def append(self, candidate: ScanRecordCreate) -> ScanRecord:
        record = _new_record(candidate)
        with self._lock:
            self._records[record.id] = record
        logger.debug("Added scan %s for barcode %s", record.id, record.barcode)
        return record

    async def list(self) -> List[ScanRecord]:
        with self._lock:
            # newest insertion first so equal timestamps keep that order after the stable sort
            records = list(reversed(self._records.values()))
        return sorted(records, key=lambda r: r.scannedAt, reverse=True)


class MongoHistoryStore:
    """Same contract as MemoryHistoryStore, backed by a MongoDB collection."""

    def __init__(self, database_url: str, database_name: str, collection: str) -> None:
        self.database_url = database_url
        self.database_name = database_name
        self.collection_name = collection
        self._client: Optional[AsyncIOMotorClient] = None
        self._collection: Optional[AsyncIOMotorCollection] = None
        # orders appends that share a millisecond
        self._seq = itertools.count(time.time_ns())

    async def get_collection(self) -> AsyncIOMotorCollection:
        if self._collection is None:
            self._client = AsyncIOMotorClient(self.database_url, tz_aware=True)
            self._collection = self._client[self.database_name][self.collection_name]
        return self._collection

    async def append(self, candidate: ScanRecordCreate) -> ScanRecord:
        collection = await self.get_collection()
        record = _new_record(candidate)
        payload = record.model_dump()
        payload["_id"] = payload.pop("id")
        payload["_seq"] = next(self._seq)
        await collection.insert_one(payload)
        logger.debug("Added scan %s for barcode %s", record.id, record.barcode)
        return record

    async def list(self) -> List[ScanRecord]:
        collection = await self.get_collection()
        cursor = collection.find({}).sort([("scannedAt", -1), ("_seq", -1)])
        records = []
        async for doc in cursor:
            records.append(_from_document(doc))
        return records

    def close(self) -> None:
        if self._client is not None:
            self._client.close()
            self._client = None
            self._collection = None


def _from_document(doc: Dict[str, Any]) -> ScanRecord:
    doc = dict(doc)
    doc["id"] = str(doc.pop("_id"))
    doc.pop("_seq", None)
    return ScanRecord(**doc)


_store = None


def get_history_store():
    global _store
    if _store is None:
        settings = get_settings()
        if settings.history_backend == "mongo":
            _store = MongoHistoryStore(settings.database_url, settings.database_name, settings.history_collection)
        else:
            _store = MemoryHistoryStore()
    return _store

# database.py
import os
import logging
from typing import Any, Dict, List, Mapping, Optional, Protocol, Sequence
from bson import ObjectId
from dotenv import load_dotenv
from motor.motor_asyncio import AsyncIOMotorClient, AsyncIOMotorCollection, AsyncIOMotorDatabase

load_dotenv()

MONGODB_URI = os.getenv("MONGODB_URI", "mongodb://localhost:27017")
MONGODB_DB = os.getenv("MONGODB_DB", "student_records")
STUDENTS_COLLECTION = os.getenv("STUDENTS_COLLECTION", "students")
CLASSES_COLLECTION = os.getenv("CLASSES_COLLECTION", "classes")

logger = logging.getLogger(__name__)


class DocumentStore(Protocol):
    """What the repositories need from a collection."""

    async def create(self, docs: Sequence[Mapping[str, Any]]) -> List[Dict[str, Any]]:
        ...

    async def find(self, filter: Mapping[str, Any]) -> List[Dict[str, Any]]:
        ...

    async def find_by_id(self, id: ObjectId) -> Optional[Dict[str, Any]]:
        ...


class MotorCollectionStore:
    """DocumentStore over a single motor collection.

    Driver errors (``pymongo.errors.PyMongoError`` and subclasses) are not
    caught here; they reach the caller as raised.
    """

    def __init__(self, collection: AsyncIOMotorCollection):
        self.collection = collection

    async def create(self, docs: Sequence[Mapping[str, Any]]) -> List[Dict[str, Any]]:
        created = [dict(doc) for doc in docs]
        result = await self.collection.insert_many(created)
        for doc, inserted_id in zip(created, result.inserted_ids):
            doc["_id"] = inserted_id
        return created

    async def find(self, filter: Mapping[str, Any]) -> List[Dict[str, Any]]:
        return await self.collection.find(dict(filter)).to_list(None)

    async def find_by_id(self, id: ObjectId) -> Optional[Dict[str, Any]]:
        return await self.collection.find_one({"_id": id})


client: Optional[AsyncIOMotorClient] = None


def get_db() -> AsyncIOMotorDatabase:
    global client
    if client is None:
        logger.info(f"Connecting to MongoDB database {MONGODB_DB}")
        client = AsyncIOMotorClient(MONGODB_URI)
    return client[MONGODB_DB]


def get_student_store(db: AsyncIOMotorDatabase) -> MotorCollectionStore:
    return MotorCollectionStore(db[STUDENTS_COLLECTION])


def get_class_store(db: AsyncIOMotorDatabase) -> MotorCollectionStore:
    return MotorCollectionStore(db[CLASSES_COLLECTION])


async def init_db(db: AsyncIOMotorDatabase) -> None:
    await db[STUDENTS_COLLECTION].create_index([("lastName", 1), ("firstName", 1)])

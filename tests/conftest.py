"""Shared fixtures: in-memory document stores standing in for MongoDB collections."""
import copy
import re
from typing import Any, Dict, List, Mapping, Optional, Sequence

import pytest
from bson import ObjectId
from pymongo.errors import DuplicateKeyError

from queries.student import StudentRepository


def _matches_condition(value: Any, condition: Any) -> bool:
    if isinstance(condition, dict) and "$in" in condition:
        return value in condition["$in"]
    if isinstance(condition, dict) and "$regex" in condition:
        flags = re.IGNORECASE if "i" in condition.get("$options", "") else 0
        return isinstance(value, str) and re.search(condition["$regex"], value, flags) is not None
    return value == condition


def matches(doc: Mapping[str, Any], filter: Mapping[str, Any]) -> bool:
    """Evaluate the subset of MongoDB filter syntax the queries module emits."""
    for key, condition in filter.items():
        if key == "$and":
            if not all(matches(doc, sub) for sub in condition):
                return False
        elif key == "$or":
            if not any(matches(doc, sub) for sub in condition):
                return False
        elif not _matches_condition(doc.get(key), condition):
            return False
    return True


class InMemoryStore:
    """DocumentStore kept in a list, enforcing unique ``_id`` like a collection."""

    def __init__(self, docs: Sequence[Mapping[str, Any]] = ()):
        self.docs: List[Dict[str, Any]] = [copy.deepcopy(dict(d)) for d in docs]
        self.create_calls: List[List[Dict[str, Any]]] = []
        self.find_calls: List[Dict[str, Any]] = []
        self.find_by_id_calls: List[ObjectId] = []

    async def create(self, docs: Sequence[Mapping[str, Any]]) -> List[Dict[str, Any]]:
        created = [copy.deepcopy(dict(d)) for d in docs]
        self.create_calls.append(created)
        existing = {d["_id"] for d in self.docs}
        for doc in created:
            if doc["_id"] in existing:
                raise DuplicateKeyError(f"E11000 duplicate key error dup key: {{ _id: {doc['_id']} }}", 11000)
            existing.add(doc["_id"])
        self.docs.extend(copy.deepcopy(created))
        return created

    async def find(self, filter: Mapping[str, Any]) -> List[Dict[str, Any]]:
        self.find_calls.append(dict(filter))
        return [copy.deepcopy(d) for d in self.docs if matches(d, filter)]

    async def find_by_id(self, id: ObjectId) -> Optional[Dict[str, Any]]:
        self.find_by_id_calls.append(id)
        for doc in self.docs:
            if doc["_id"] == id:
                return copy.deepcopy(doc)
        return None


@pytest.fixture
def student_store() -> InMemoryStore:
    return InMemoryStore()


@pytest.fixture
def class_store() -> InMemoryStore:
    return InMemoryStore()


@pytest.fixture
def repo(student_store, class_store) -> StudentRepository:
    return StudentRepository(student_store, class_store)


@pytest.fixture
def make_student_doc():
    """Build a stored student document with a fresh id."""

    def _make(first: str, last: str, **extra) -> Dict[str, Any]:
        return {"_id": ObjectId(), "firstName": first, "lastName": last, "dob": None, "classEnrolled": [], **extra}

    return _make

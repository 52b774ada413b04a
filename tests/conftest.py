"""
Shared fixtures: an in-memory stand-in for Motor collections and sample data.

FakeCollection implements only the collection calls the repositories make.
Documents are deep-copied on the way in and out, as a real driver would.
"""
import copy
from types import SimpleNamespace
from typing import Any, Dict, List, Optional

import pytest
from bson import ObjectId
from pymongo import ReturnDocument
from pymongo.errors import DuplicateKeyError

from hrportal.core.permissions import Session, UserRole


def _matches(document: Dict[str, Any], query: Dict[str, Any]) -> bool:
    for key, condition in query.items():
        value = document.get(key)
        if isinstance(condition, dict) and condition and all(op.startswith("$") for op in condition):
            for op, argument in condition.items():
                if op == "$in":
                    if value not in argument:
                        return False
                elif op == "$ne":
                    if value == argument:
                        return False
                else:
                    raise NotImplementedError(op)
        elif value != condition:
            return False
    return True


def _apply_update(document: Dict[str, Any], update: Dict[str, Any], inserting: bool = False) -> None:
    for op, fields in update.items():
        if op == "$set":
            document.update(copy.deepcopy(fields))
        elif op == "$inc":
            for key, amount in fields.items():
                document[key] = document.get(key, 0) + amount
        elif op == "$setOnInsert":
            if inserting:
                document.update(copy.deepcopy(fields))
        else:
            raise NotImplementedError(op)


def _evaluate(document: Dict[str, Any], expression: Any) -> Any:
    if isinstance(expression, str) and expression.startswith("$"):
        return document.get(expression[1:])
    if isinstance(expression, dict) and "$ifNull" in expression:
        field, default = expression["$ifNull"]
        value = _evaluate(document, field)
        return default if value is None else value
    return expression


def _group(documents: List[Dict[str, Any]], fields: Dict[str, Any]) -> List[Dict[str, Any]]:
    if fields["_id"] is not None:
        raise NotImplementedError("grouping by key")
    if not documents:
        return []

    group: Dict[str, Any] = {"_id": None}
    for name, accumulator in fields.items():
        if name == "_id":
            continue
        (op, expression), = accumulator.items()
        values = [_evaluate(document, expression) for document in documents]
        if op == "$sum":
            group[name] = sum(values)
        elif op == "$avg":
            numbers = [value for value in values if value is not None]
            group[name] = sum(numbers) / len(numbers) if numbers else None
        else:
            raise NotImplementedError(op)
    return [group]


class FakeCursor:

    def __init__(self, documents: List[Dict[str, Any]]):
        self._documents = documents
        self._skip = 0
        self._limit = 0

    def sort(self, key: str, direction: int = 1) -> "FakeCursor":
        self._documents = sorted(
            self._documents,
            key=lambda doc: (doc.get(key) is None, doc.get(key)),
            reverse=direction < 0,
        )
        return self

    def skip(self, count: int) -> "FakeCursor":
        self._skip = count
        return self

    def limit(self, count: int) -> "FakeCursor":
        self._limit = count
        return self

    async def to_list(self, length: Optional[int] = None) -> List[Dict[str, Any]]:
        documents = self._documents[self._skip:]
        if self._limit:
            documents = documents[:self._limit]
        if length:
            documents = documents[:length]
        return copy.deepcopy(documents)


class FakeCollection:

    def __init__(self, name: str):
        self.name = name
        self.documents: List[Dict[str, Any]] = []
        self.unique_keys: List[tuple] = []

    async def create_index(self, keys, unique: bool = False, **kwargs) -> str:
        fields = tuple(field for field, _ in keys)
        if unique and fields not in self.unique_keys:
            self.unique_keys.append(fields)
        return "_".join(fields)

    def _check_unique(self, document: Dict[str, Any]) -> None:
        for existing in self.documents:
            if existing["_id"] == document["_id"]:
                raise DuplicateKeyError(f"duplicate _id {document['_id']}", code=11000)
            for fields in self.unique_keys:
                if all(existing.get(field) == document.get(field) for field in fields):
                    raise DuplicateKeyError(f"duplicate key {fields}", code=11000)

    async def insert_one(self, document: Dict[str, Any]):
        if "_id" not in document:
            document["_id"] = ObjectId()
        stored = copy.deepcopy(document)
        self._check_unique(stored)
        self.documents.append(stored)
        return SimpleNamespace(inserted_id=document["_id"])

    async def find_one(self, query: Dict[str, Any]) -> Optional[Dict[str, Any]]:
        for document in self.documents:
            if _matches(document, query):
                return copy.deepcopy(document)
        return None

    def find(self, query: Optional[Dict[str, Any]] = None) -> FakeCursor:
        query = query or {}
        return FakeCursor([document for document in self.documents if _matches(document, query)])

    async def count_documents(self, query: Dict[str, Any]) -> int:
        return sum(1 for document in self.documents if _matches(document, query))

    def aggregate(self, pipeline: List[Dict[str, Any]]) -> FakeCursor:
        documents = self.documents
        for stage in pipeline:
            (op, argument), = stage.items()
            if op == "$match":
                documents = [document for document in documents if _matches(document, argument)]
            elif op == "$group":
                documents = _group(documents, argument)
            else:
                raise NotImplementedError(op)
        return FakeCursor(documents)

    async def update_one(self, query: Dict[str, Any], update: Dict[str, Any], upsert: bool = False):
        for document in self.documents:
            if _matches(document, query):
                _apply_update(document, update)
                return SimpleNamespace(matched_count=1, modified_count=1, upserted_id=None)

        if upsert:
            document = {key: value for key, value in query.items() if not isinstance(value, dict)}
            document.setdefault("_id", ObjectId())
            _apply_update(document, update, inserting=True)
            self.documents.append(document)
            return SimpleNamespace(matched_count=0, modified_count=0, upserted_id=document["_id"])
        return SimpleNamespace(matched_count=0, modified_count=0, upserted_id=None)

    async def find_one_and_update(self, query: Dict[str, Any], update: Dict[str, Any],
                                  upsert: bool = False, return_document=ReturnDocument.BEFORE):
        for document in self.documents:
            if _matches(document, query):
                before = copy.deepcopy(document)
                _apply_update(document, update)
                return copy.deepcopy(document) if return_document == ReturnDocument.AFTER else before

        if not upsert:
            return None

        document = {key: value for key, value in query.items() if not isinstance(value, dict)}
        _apply_update(document, update, inserting=True)
        self.documents.append(document)
        return copy.deepcopy(document) if return_document == ReturnDocument.AFTER else None

    async def delete_one(self, query: Dict[str, Any]):
        for index, document in enumerate(self.documents):
            if _matches(document, query):
                del self.documents[index]
                return SimpleNamespace(deleted_count=1)
        return SimpleNamespace(deleted_count=0)

    async def delete_many(self, query: Dict[str, Any]):
        kept = [document for document in self.documents if not _matches(document, query)]
        deleted = len(self.documents) - len(kept)
        self.documents = kept
        return SimpleNamespace(deleted_count=deleted)


class FakeDatabase:

    def __init__(self):
        self.collections: Dict[str, FakeCollection] = {}

    def __getitem__(self, name: str) -> FakeCollection:
        if name not in self.collections:
            self.collections[name] = FakeCollection(name)
        return self.collections[name]


@pytest.fixture
def db():
    return FakeDatabase()


@pytest.fixture
def valid_details() -> Dict[str, Any]:
    return {
        "firstName": "Amira",
        "lastName": "Haddad",
        "email": "amira.haddad@example.com",
        "phoneNumber": "+1 555 0100",
        "currentAddress": "12 Harbour Road",
        "position": "Data Analyst",
        "department": "Finance",
        "startDate": "2024-03-01",
        "emergencyContactName": "Karim Haddad",
        "emergencyContactPhone": "+1 555 0199",
        "privacyPolicyAgreed": True,
        "termsAndConditionsAgreed": True,
        "backgroundCheckConsent": True,
    }


def make_session(role: UserRole = UserRole.HR_ADMIN, user_id: str = "u-1", **fields) -> Session:
    fields.setdefault("first_name", "Dana")
    fields.setdefault("last_name", "Lee")
    return Session(user_id=user_id, role=role, **fields)


@pytest.fixture
def hr_session() -> Session:
    return make_session(UserRole.HR_ADMIN)


@pytest.fixture
def employee_session() -> Session:
    return make_session(UserRole.EMPLOYEE, user_id="u-emp", first_name="Sam", last_name="Ortiz")

import pytest
from bson import ObjectId
from fastapi import HTTPException

from hrportal.db.base_repository import BaseRepository
from hrportal.domains.users.repository import UserRepository
from hrportal.utils.id_handler import IdHandler


@pytest.fixture
def repo(db):
    return BaseRepository(db["things"], db["counters"])


@pytest.mark.asyncio
async def test_next_id_counts_per_collection(db, repo):
    other = BaseRepository(db["others"], db["counters"])

    assert [await repo.next_id(), await repo.next_id()] == [1, 2]
    assert await other.next_id() == 1


@pytest.mark.asyncio
async def test_create_assigns_sequence_id_and_timestamps(repo):
    created = await repo.create({"name": "first"})

    assert created["_id"] == 1
    assert created["created_at"] is not None
    assert await repo.find_by_id("1") == created


@pytest.mark.asyncio
async def test_duplicate_key_is_conflict(repo):
    await repo.create({"_id": 5, "name": "taken"})

    with pytest.raises(HTTPException) as exc_info:
        await repo.create({"_id": 5, "name": "again"})

    assert exc_info.value.status_code == 409


@pytest.mark.asyncio
async def test_insert_if_absent(repo):
    first, inserted = await repo.insert_if_absent({"name": "chair"}, {"name": "chair", "quantity": 3})
    again, inserted_again = await repo.insert_if_absent({"name": "chair"}, {"name": "chair", "quantity": 9})

    assert inserted and not inserted_again
    assert again["_id"] == first["_id"]
    assert again["quantity"] == 3
    assert await repo.count() == 1


@pytest.mark.asyncio
async def test_find_many_sorts_before_paging(repo):
    for name in ["c", "a", "d", "b"]:
        await repo.create({"name": name})

    page = await repo.find_many({}, skip=1, limit=2, sort_by="name")

    assert [doc["name"] for doc in page] == ["b", "c"]


@pytest.mark.asyncio
async def test_update_and_delete(repo):
    created = await repo.create({"name": "desk", "_id": 3})

    updated = await repo.update(created["_id"], {"name": "standing desk", "_id": 99})
    assert updated["_id"] == 3
    assert updated["name"] == "standing desk"

    assert await repo.delete(3)
    assert not await repo.delete(3)
    assert await repo.update(3, {"name": "gone"}) is None


@pytest.mark.asyncio
async def test_object_id_documents_are_formatted(db):
    users = UserRepository(db["users"])

    created = await users.create({"email": "dana@example.com", "role": "hr_admin"})

    assert isinstance(created["_id"], str) and ObjectId.is_valid(created["_id"])
    assert db["counters"].documents == []
    assert (await users.find_by_email("DANA@example.com"))["_id"] == created["_id"]
    assert await users.find_by_id(created["_id"]) == created


def test_lookup_candidates():
    oid = ObjectId("65f1c2a4b3e2d1f0a9b8c7d6")

    assert IdHandler.lookup_candidates(7) == [7]
    assert IdHandler.lookup_candidates("7") == [7, "7"]
    assert IdHandler.lookup_candidates(str(oid)) == [oid, str(oid)]
    assert IdHandler.lookup_candidates(None) == []

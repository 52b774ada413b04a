import pytest

from hrportal.db.indexes import INDEXES, ensure_indexes
from hrportal.domains.logistics.repository import LogisticsItemRepository, LogisticsRequestRepository
from hrportal.domains.psychometrics.repository import PsychometricQuestionRepository, PsychometricTestRepository
from hrportal.scripts.seed_logistics_data import (
    LOGISTICS_ITEMS,
    LOGISTICS_REQUESTS,
    build_request,
    seed_logistics_data,
)
from hrportal.scripts.seed_psychometric_data import BIG_FIVE_QUESTIONS, seed_psychometric_data


def test_build_request_fills_approval_fields():
    completed = next(r for r in LOGISTICS_REQUESTS if r["status"] == "completed")
    pending = next(r for r in LOGISTICS_REQUESTS if r["status"] == "pending")

    built = build_request(completed, "u-admin")
    assert built["approved_by"] == "u-admin"
    assert built["purchase_date"] < built["approved_at"]

    built = build_request(pending, "u-admin")
    assert "approved_by" not in built
    assert "purchase_date" not in built


@pytest.mark.asyncio
async def test_logistics_seed_is_idempotent(db):
    await ensure_indexes(db)
    items = LogisticsItemRepository(db["logistics_items"], db["counters"])
    requests = LogisticsRequestRepository(db["logistics_requests"], db["counters"])

    first = await seed_logistics_data(items, requests, "u-admin")
    second = await seed_logistics_data(items, requests, "u-admin")

    assert first == {
        "items_created": len(LOGISTICS_ITEMS), "items_skipped": 0,
        "requests_created": len(LOGISTICS_REQUESTS), "requests_skipped": 0,
    }
    assert second == {
        "items_created": 0, "items_skipped": len(LOGISTICS_ITEMS),
        "requests_created": 0, "requests_skipped": len(LOGISTICS_REQUESTS),
    }
    assert len(db["logistics_items"].documents) == len(LOGISTICS_ITEMS)
    assert len(db["logistics_requests"].documents) == len(LOGISTICS_REQUESTS)


@pytest.mark.asyncio
async def test_logistics_seed_for_another_requester_adds_requests_only(db):
    items = LogisticsItemRepository(db["logistics_items"], db["counters"])
    requests = LogisticsRequestRepository(db["logistics_requests"], db["counters"])

    await seed_logistics_data(items, requests, "u-admin")
    counts = await seed_logistics_data(items, requests, "u-other")

    assert counts["items_created"] == 0
    assert counts["requests_created"] == len(LOGISTICS_REQUESTS)


@pytest.mark.asyncio
async def test_psychometric_seed_is_idempotent(db):
    await ensure_indexes(db)
    tests = PsychometricTestRepository(db["psychometric_tests"], db["counters"])
    questions = PsychometricQuestionRepository(db["psychometric_questions"], db["counters"])

    first = await seed_psychometric_data(tests, questions)
    second = await seed_psychometric_data(tests, questions)

    assert first["questions_created"] == len(BIG_FIVE_QUESTIONS)
    assert second == {"test_id": first["test_id"], "questions_created": 0,
                      "questions_skipped": len(BIG_FIVE_QUESTIONS)}
    assert len(db["psychometric_tests"].documents) == 1
    assert len(db["psychometric_questions"].documents) == len(BIG_FIVE_QUESTIONS)

    test = await tests.find_by_id(first["test_id"])
    assert test["total_questions"] == len(BIG_FIVE_QUESTIONS)


@pytest.mark.asyncio
async def test_psychometric_seed_fills_in_missing_questions(db):
    tests = PsychometricTestRepository(db["psychometric_tests"], db["counters"])
    questions = PsychometricQuestionRepository(db["psychometric_questions"], db["counters"])

    first = await seed_psychometric_data(tests, questions)
    db["psychometric_questions"].documents = [
        q for q in db["psychometric_questions"].documents if q["order"] != 3
    ]

    second = await seed_psychometric_data(tests, questions)

    assert second["questions_created"] == 1
    assert second["test_id"] == first["test_id"]
    orders = sorted(q["order"] for q in db["psychometric_questions"].documents)
    assert orders == list(range(1, len(BIG_FIVE_QUESTIONS) + 1))


@pytest.mark.asyncio
async def test_ensure_indexes_declares_unique_natural_keys(db):
    await ensure_indexes(db)

    assert set(db.collections) == set(INDEXES)
    assert ("name",) in db["logistics_items"].unique_keys
    assert ("test_name",) in db["psychometric_tests"].unique_keys
    assert ("test_id", "order") in db["psychometric_questions"].unique_keys

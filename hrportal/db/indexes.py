"""
Index definitions, applied at startup and before seeding.
"""
import logging

from pymongo import ASCENDING, DESCENDING

from hrportal.db.mongodb import get_database

logger = logging.getLogger(__name__)

# collection -> list of (keys, options)
INDEXES = {
    "users": [
        ([("email", ASCENDING)], {"unique": True}),
        ([("role", ASCENDING)], {}),
    ],
    "employees": [
        ([("employee_id", ASCENDING)], {"unique": True}),
        ([("user_id", ASCENDING)], {"unique": True}),
    ],
    "employee_submissions": [
        ([("status", ASCENDING), ("submitted_at", DESCENDING)], {}),
    ],
    "logistics_items": [
        ([("name", ASCENDING)], {"unique": True}),
    ],
    "logistics_requests": [
        ([("status", ASCENDING), ("created_at", DESCENDING)], {}),
        ([("requester_id", ASCENDING), ("item_name", ASCENDING)], {}),
    ],
    "psychometric_tests": [
        ([("test_name", ASCENDING)], {"unique": True}),
    ],
    "psychometric_questions": [
        ([("test_id", ASCENDING), ("order", ASCENDING)], {"unique": True}),
    ],
    "psychometric_test_attempts": [
        ([("test_id", ASCENDING), ("started_at", DESCENDING)], {}),
        ([("candidate_email", ASCENDING)], {}),
    ],
}


async def ensure_indexes(database=None):
    """
    Create every index in INDEXES; existing indexes are left as they are.

    Args:
        database: Database to index, defaults to the configured one
    """
    database = database if database is not None else get_database()

    for collection_name, indexes in INDEXES.items():
        for keys, options in indexes:
            await database[collection_name].create_index(keys, **options)

    logger.info(f"Ensured indexes on {len(INDEXES)} collections")

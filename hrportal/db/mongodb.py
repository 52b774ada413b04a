"""
MongoDB connection management.
"""
import logging
from motor.motor_asyncio import AsyncIOMotorClient, AsyncIOMotorDatabase

from hrportal.core.config import settings

logger = logging.getLogger(__name__)


class MongoDB:
    """
    MongoDB connection manager.
    Provides access to database and collections with connection management.
    """

    client: AsyncIOMotorClient = None
    db: AsyncIOMotorDatabase = None

    @classmethod
    def connect_to_mongodb(cls):
        """
        Connect to MongoDB if not already connected.
        The Motor client connects lazily, so this is safe at import time.
        """
        if cls.client is None:
            logger.info(f"Connecting to MongoDB at {settings.MONGODB_URL} (database: {settings.MONGODB_DB})")

            cls.client = AsyncIOMotorClient(settings.MONGODB_URL)
            cls.db = cls.client[settings.MONGODB_DB]

    @classmethod
    async def close_mongodb_connection(cls):
        """
        Close MongoDB connection if open.
        """
        if cls.client is not None:
            cls.client.close()
            cls.client = None
            cls.db = None
            logger.info("Closed MongoDB connection")

    @classmethod
    def get_database(cls) -> AsyncIOMotorDatabase:
        """
        Get database instance.

        Returns:
            AsyncIOMotorDatabase instance
        """
        if cls.db is None:
            cls.connect_to_mongodb()
        return cls.db

    @classmethod
    def get_collection(cls, collection_name: str):
        """
        Get collection by name.

        Args:
            collection_name: Name of collection

        Returns:
            AsyncIOMotorCollection instance
        """
        return cls.get_database()[collection_name]


mongodb = MongoDB()


# Helper functions to get collections
def get_collection(name: str):
    return mongodb.get_collection(name)


def get_database():
    return mongodb.get_database()


# Collection getters for specific collections
def get_users_collection():
    return get_collection("users")

def get_employees_collection():
    return get_collection("employees")

def get_tasks_collection():
    return get_collection("tasks")

def get_announcements_collection():
    return get_collection("announcements")

def get_employee_submissions_collection():
    return get_collection("employee_submissions")

def get_logistics_items_collection():
    return get_collection("logistics_items")

def get_logistics_requests_collection():
    return get_collection("logistics_requests")

def get_psychometric_tests_collection():
    return get_collection("psychometric_tests")

def get_psychometric_questions_collection():
    return get_collection("psychometric_questions")

def get_psychometric_attempts_collection():
    return get_collection("psychometric_test_attempts")

def get_counters_collection():
    return get_collection("counters")

"""
Base repository pattern implementation for MongoDB collections.
"""
import logging
from typing import Any, Dict, List, Optional, Tuple

from fastapi import HTTPException, status
from pymongo import ReturnDocument
from pymongo.errors import DuplicateKeyError

from hrportal.db.mongodb import get_counters_collection
from hrportal.utils.id_handler import IdHandler
from hrportal.utils.datetime_handler import DateTimeHandler

logger = logging.getLogger(__name__)


class BaseRepository:
    """
    Base repository class that implements standard CRUD operations for MongoDB collections.
    Handles ID conversions, serial id allocation, formatting, and standard error patterns.
    """

    # Collections whose documents use integer ids drawn from the counters collection.
    # Subclasses storing ObjectId documents set this to False.
    sequence_ids: bool = True

    def __init__(self, collection, counters=None):
        """
        Initialize repository with MongoDB collection.

        Args:
            collection: Motor AsyncIOMotorCollection instance
            counters: Collection holding id sequences, defaults to the shared one
        """
        self.collection = collection
        self._counters = counters

    @property
    def counters(self):
        if self._counters is None:
            self._counters = get_counters_collection()
        return self._counters

    async def next_id(self) -> int:
        """
        Allocate the next integer id for this collection.

        Returns:
            Next id in the sequence, starting at 1
        """
        counter = await self.counters.find_one_and_update(
            {"_id": self.collection.name},
            {"$inc": {"seq": 1}},
            upsert=True,
            return_document=ReturnDocument.AFTER
        )
        return counter["seq"]

    async def find_by_id(self, id_value: Any) -> Optional[Dict[str, Any]]:
        """
        Find a document by ID with consistent ID handling.

        Args:
            id_value: ID to look for (int, string or ObjectId)

        Returns:
            Document dict with formatted IDs or None if not found
        """
        document, _ = await IdHandler.find_document_by_id(self.collection, id_value)
        if document:
            return IdHandler.format_object_ids(document)
        return None

    async def find_many(self,
                        query: Dict[str, Any] = None,
                        skip: int = 0,
                        limit: Optional[int] = 100,
                        sort_by: str = None,
                        sort_desc: bool = False) -> List[Dict[str, Any]]:
        """
        Find documents matching query with pagination.

        Args:
            query: MongoDB query dictionary
            skip: Number of documents to skip
            limit: Maximum number of documents to return, None for all
            sort_by: Field to sort by
            sort_desc: If True, sort in descending order

        Returns:
            List of documents with formatted IDs
        """
        if query is None:
            query = {}

        cursor = self.collection.find(query)

        # Sort before paging so skip/limit apply to the ordered result
        if sort_by:
            direction = -1 if sort_desc else 1
            cursor = cursor.sort(sort_by, direction)

        cursor = cursor.skip(skip)
        if limit:
            cursor = cursor.limit(limit)

        documents = await cursor.to_list(length=limit or None)
        return IdHandler.format_object_ids(documents)

    async def count(self, query: Dict[str, Any] = None) -> int:
        if query is None:
            query = {}
        return await self.collection.count_documents(query)

    async def create(self, data: Dict[str, Any]) -> Dict[str, Any]:
        """
        Create a new document.

        Args:
            data: Document data

        Returns:
            Created document with formatted IDs

        Raises:
            HTTPException: If creation fails
        """
        if self.sequence_ids and "_id" not in data:
            data["_id"] = await self.next_id()

        if "created_at" not in data:
            data["created_at"] = DateTimeHandler.get_current_datetime()
        if "updated_at" not in data:
            data["updated_at"] = DateTimeHandler.get_current_datetime()

        try:
            result = await self.collection.insert_one(data)
        except DuplicateKeyError:
            raise HTTPException(
                status_code=status.HTTP_409_CONFLICT,
                detail="A document with this key already exists"
            )

        created_doc = await self.find_by_id(result.inserted_id)
        if not created_doc:
            raise HTTPException(
                status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
                detail="Document was created but could not be retrieved"
            )

        return created_doc

    async def insert_if_absent(self, key_query: Dict[str, Any],
                               data: Dict[str, Any]) -> Tuple[Dict[str, Any], bool]:
        """
        Insert a document unless one matching its natural key already exists.

        Args:
            key_query: Query identifying the document by its natural key
            data: Document data to insert when absent

        Returns:
            Tuple of (document, inserted)
        """
        existing = await self.find_one(key_query)
        if existing:
            return existing, False

        try:
            created = await self.create(dict(data))
        except HTTPException as e:
            # Lost a race with a concurrent insert of the same key
            if e.status_code != status.HTTP_409_CONFLICT:
                raise
            logger.debug(f"Document matching {key_query} inserted concurrently")
            return await self.find_one(key_query), False

        return created, True

    async def update(self, id_value: Any, data: Dict[str, Any]) -> Optional[Dict[str, Any]]:
        """
        Update a document by ID.

        Args:
            id_value: ID of document to update
            data: New field values

        Returns:
            Updated document with formatted IDs or None if not found
        """
        document, doc_id = await IdHandler.find_document_by_id(self.collection, id_value)
        if not document:
            return None

        update_data = {k: v for k, v in data.items() if k != "_id"}
        update_data["updated_at"] = DateTimeHandler.get_current_datetime()

        await self.collection.update_one(
            {"_id": doc_id},
            {"$set": update_data}
        )

        return await self.find_by_id(doc_id)

    async def delete(self, id_value: Any) -> bool:
        """
        Delete a document by ID.

        Returns:
            True if document was deleted, False if not found
        """
        document, doc_id = await IdHandler.find_document_by_id(self.collection, id_value)
        if not document:
            return False

        result = await self.collection.delete_one({"_id": doc_id})
        return result.deleted_count > 0

    async def find_one(self, query: Dict[str, Any]) -> Optional[Dict[str, Any]]:
        document = await self.collection.find_one(query)
        if document:
            return IdHandler.format_object_ids(document)
        return None

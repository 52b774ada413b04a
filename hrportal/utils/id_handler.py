"""
ID Handler module for consistent document id handling throughout the application.

Serial entities (submissions, logistics rows, psychometric tests) use integer
ids drawn from the counters collection; users keep Mongo ObjectIds.
"""
from typing import Any, Dict, List, Optional, Union, Tuple
from bson import ObjectId
from fastapi import HTTPException, status


class IdHandler:
    """
    Centralized service for handling document ids consistently throughout the application.
    Provides methods for conversion, validation, and standardized document lookup.
    """

    @staticmethod
    def ensure_object_id(id_value: Any) -> Optional[ObjectId]:
        """
        Safely convert a string or ObjectId to an ObjectId.
        Returns None if conversion is not possible.
        """
        if id_value is None:
            return None

        if isinstance(id_value, ObjectId):
            return id_value

        if isinstance(id_value, str) and ObjectId.is_valid(id_value):
            return ObjectId(id_value)

        return None

    @staticmethod
    def lookup_candidates(id_value: Any) -> List[Any]:
        """
        List the key values a document id may be stored under, most specific first.

        Args:
            id_value: Id as received from a path parameter or another document

        Returns:
            Candidate _id values to query
        """
        if id_value is None:
            return []

        if isinstance(id_value, bool):
            return [id_value]

        if isinstance(id_value, (int, ObjectId)):
            return [id_value]

        candidates: List[Any] = []
        if isinstance(id_value, str):
            if id_value.isdigit():
                candidates.append(int(id_value))
            obj_id = IdHandler.ensure_object_id(id_value)
            if obj_id:
                candidates.append(obj_id)
        candidates.append(id_value)
        return candidates

    @staticmethod
    def format_object_ids(data: Union[Dict[str, Any], List[Dict[str, Any]], None]) -> Union[
        Dict[str, Any], List[Dict[str, Any]], None]:
        """
        Convert ObjectId to strings in a document or list of documents.
        Works recursively for nested dictionaries and lists.

        Args:
            data: MongoDB document or list of documents

        Returns:
            Document(s) with ObjectIds converted to strings
        """
        if data is None:
            return None

        if isinstance(data, list):
            return [IdHandler.format_object_ids(item) for item in data]
        elif isinstance(data, dict):
            result = {}
            for key, value in data.items():
                if isinstance(value, ObjectId):
                    result[key] = str(value)
                elif isinstance(value, (dict, list)):
                    result[key] = IdHandler.format_object_ids(value)
                else:
                    result[key] = value
            return result
        else:
            return data

    @staticmethod
    async def find_document_by_id(collection, doc_id: Any) -> Tuple[Any, Any]:
        """
        Standard method to find a document by ID using a consistent lookup strategy.
        Returns a tuple of (document, id_used_for_lookup) if found, or (None, None) if not found.

        Args:
            collection: MongoDB collection to query
            doc_id: ID to look for

        Returns:
            Tuple of (document, id_used_for_lookup)
        """
        for candidate in IdHandler.lookup_candidates(doc_id):
            document = await collection.find_one({"_id": candidate})
            if document:
                return document, candidate

        return None, None

    @staticmethod
    def raise_if_not_found(document: Any, message: str, status_code: int = status.HTTP_404_NOT_FOUND):
        """
        Helper method to raise HTTPException if document is not found

        Returns:
            The document if found

        Raises:
            HTTPException if document is None
        """
        if not document:
            raise HTTPException(
                status_code=status_code,
                detail=message
            )
        return document

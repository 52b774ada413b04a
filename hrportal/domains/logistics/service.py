"""
Logistics service for inventory items and the purchase request lifecycle.

A request starts pending. Pending requests are approved or rejected,
approved ones are purchased, and approved or purchased ones are completed.
"""
import logging
from datetime import datetime
from typing import Any, Dict, List, Optional

from fastapi import HTTPException, status

from hrportal.domains.logistics.repository import LogisticsItemRepository, LogisticsRequestRepository
from hrportal.models.logistics import LogisticsRequestStatus
from hrportal.utils.datetime_handler import DateTimeHandler
from hrportal.utils.id_handler import IdHandler

logger = logging.getLogger(__name__)

REQUEST_TRANSITIONS = {
    LogisticsRequestStatus.PENDING: {LogisticsRequestStatus.APPROVED, LogisticsRequestStatus.REJECTED},
    LogisticsRequestStatus.APPROVED: {LogisticsRequestStatus.PURCHASED, LogisticsRequestStatus.COMPLETED},
    LogisticsRequestStatus.PURCHASED: {LogisticsRequestStatus.COMPLETED},
    LogisticsRequestStatus.REJECTED: set(),
    LogisticsRequestStatus.COMPLETED: set(),
}


def can_transition(current: str, target: str) -> bool:
    return LogisticsRequestStatus(target) in REQUEST_TRANSITIONS[LogisticsRequestStatus(current)]


def with_stock_flag(item: Dict[str, Any]) -> Dict[str, Any]:
    item = dict(item)
    item["is_low_stock"] = item.get("quantity", 0) < item.get("min_quantity", 0)
    return item


class LogisticsService:
    """
    Service for logistics-related business logic.
    """

    def __init__(self,
                 item_repo: Optional[LogisticsItemRepository] = None,
                 request_repo: Optional[LogisticsRequestRepository] = None):
        """
        Initialize with logistics repositories.

        Args:
            item_repo: Optional item repository instance
            request_repo: Optional request repository instance
        """
        self.item_repo = item_repo or LogisticsItemRepository()
        self.request_repo = request_repo or LogisticsRequestRepository()

    # Items

    async def get_items(self,
                        category: Optional[str] = None,
                        low_stock_only: bool = False,
                        skip: int = 0,
                        limit: int = 100) -> List[Dict[str, Any]]:
        """
        Get stocked items with their low-stock flag.

        Args:
            category: Only items in this category
            low_stock_only: Only items below their minimum quantity

        Returns:
            List of item documents
        """
        items = [with_stock_flag(item) for item in await self.item_repo.find_items(category, skip, limit)]
        if low_stock_only:
            items = [item for item in items if item["is_low_stock"]]
        return items

    async def get_item(self, item_id: Any) -> Dict[str, Any]:
        item = await self.item_repo.find_by_id(item_id)
        return with_stock_flag(IdHandler.raise_if_not_found(item, "Item not found"))

    async def create_item(self, item_data: Dict[str, Any]) -> Dict[str, Any]:
        """
        Create an item.

        Raises:
            HTTPException: If an item with the same name exists
        """
        if await self.item_repo.find_by_name(item_data["name"]):
            raise HTTPException(
                status_code=status.HTTP_409_CONFLICT,
                detail=f"Item '{item_data['name']}' already exists"
            )

        item_data["last_updated"] = DateTimeHandler.get_current_datetime()
        return with_stock_flag(await self.item_repo.create(item_data))

    async def adjust_stock(self, item_id: Any, delta: int) -> Dict[str, Any]:
        """
        Change an item's quantity by delta.

        Raises:
            HTTPException: If the item is missing or the quantity would drop below zero
        """
        item = await self.get_item(item_id)
        quantity = item.get("quantity", 0) + delta
        if quantity < 0:
            raise HTTPException(
                status_code=status.HTTP_400_BAD_REQUEST,
                detail=f"Only {item.get('quantity', 0)} of '{item['name']}' in stock"
            )

        updated = await self.item_repo.update(item["_id"], {
            "quantity": quantity,
            "last_updated": DateTimeHandler.get_current_datetime()
        })
        if updated["quantity"] < updated.get("min_quantity", 0):
            logger.warning(f"Item '{updated['name']}' is low on stock ({updated['quantity']} left)")
        return with_stock_flag(updated)

    # Requests

    async def get_requests(self,
                           status_filter: Optional[str] = None,
                           priority: Optional[str] = None,
                           requester_id: Optional[str] = None,
                           skip: int = 0,
                           limit: int = 100) -> List[Dict[str, Any]]:
        return await self.request_repo.find_requests(status_filter, priority, requester_id, skip, limit)

    async def get_request(self, request_id: Any) -> Dict[str, Any]:
        request = await self.request_repo.find_by_id(request_id)
        return IdHandler.raise_if_not_found(request, "Logistics request not found")

    async def create_request(self, request_data: Dict[str, Any], requester_id: str) -> Dict[str, Any]:
        """
        Raise a new request.

        Args:
            request_data: Item reference or name, quantity and reason
            requester_id: User raising the request

        Returns:
            Created request document

        Raises:
            HTTPException: If neither an item nor an item name is given, or the item is unknown
        """
        if request_data.get("item_id") is not None:
            item = await self.get_item(request_data["item_id"])
            request_data["item_id"] = item["_id"]
            request_data.setdefault("item_name", item["name"])
        elif not request_data.get("item_name"):
            raise HTTPException(
                status_code=status.HTTP_400_BAD_REQUEST,
                detail="Either item_id or item_name is required"
            )

        request_data["requester_id"] = requester_id
        request_data["status"] = LogisticsRequestStatus.PENDING.value
        return await self.request_repo.create(request_data)

    async def approve_request(self, request_id: Any, approver_id: str,
                              notes: Optional[str] = None) -> Dict[str, Any]:
        changes = {
            "approved_by": approver_id,
            "approved_at": DateTimeHandler.get_current_datetime(),
        }
        if notes:
            changes["notes"] = notes
        return await self._move(request_id, LogisticsRequestStatus.APPROVED, changes)

    async def reject_request(self, request_id: Any, approver_id: str, reason: str) -> Dict[str, Any]:
        return await self._move(request_id, LogisticsRequestStatus.REJECTED, {
            "approved_by": approver_id,
            "approved_at": DateTimeHandler.get_current_datetime(),
            "rejection_reason": reason,
        })

    async def mark_purchased(self,
                             request_id: Any,
                             vendor: Optional[str] = None,
                             actual_cost: Optional[float] = None,
                             purchase_date: Optional[datetime] = None,
                             receipt_url: Optional[str] = None) -> Dict[str, Any]:
        """
        Record the purchase for an approved request.

        Args:
            request_id: Request ID
            vendor: Supplier the item was bought from
            actual_cost: Amount paid
            purchase_date: When it was bought; defaults to now
            receipt_url: Link to the stored receipt

        Returns:
            Updated request document
        """
        changes: Dict[str, Any] = {
            "purchase_date": purchase_date or DateTimeHandler.get_current_datetime()
        }
        if vendor is not None:
            changes["vendor"] = vendor
        if actual_cost is not None:
            changes["actual_cost"] = actual_cost
        if receipt_url is not None:
            changes["receipt_url"] = receipt_url
        return await self._move(request_id, LogisticsRequestStatus.PURCHASED, changes)

    async def complete_request(self, request_id: Any, notes: Optional[str] = None) -> Dict[str, Any]:
        changes = {"notes": notes} if notes else {}
        return await self._move(request_id, LogisticsRequestStatus.COMPLETED, changes)

    async def count_pending(self) -> int:
        return await self.request_repo.count_by_status(LogisticsRequestStatus.PENDING.value)

    async def _move(self, request_id: Any, target: LogisticsRequestStatus,
                    changes: Dict[str, Any]) -> Dict[str, Any]:
        request = await self.get_request(request_id)

        if not can_transition(request["status"], target):
            raise HTTPException(
                status_code=status.HTTP_400_BAD_REQUEST,
                detail=f"Cannot mark a {request['status']} request as {target.value}"
            )

        updated = await self.request_repo.update(request["_id"], {**changes, "status": target.value})
        logger.info(f"Logistics request {request['_id']} moved from {request['status']} to {target.value}")
        return updated


# Create global instance
logistics_service = LogisticsService()

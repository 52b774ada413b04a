"""
Logistics API routes for inventory items and purchase requests.
"""
from typing import List, Optional
from fastapi import APIRouter, Depends, HTTPException, status

from hrportal.core.permissions import LOGISTICS_ROLES, Session, get_current_session, requires_role
from hrportal.domains.logistics.service import logistics_service
from hrportal.schemas.logistics import (
    LogisticsItemCreate,
    LogisticsItemResponse,
    LogisticsRequestApprove,
    LogisticsRequestComplete,
    LogisticsRequestCreate,
    LogisticsRequestPurchase,
    LogisticsRequestReject,
    LogisticsRequestResponse,
    StockAdjustment,
)

router = APIRouter()


@router.get("/items", response_model=List[LogisticsItemResponse])
async def get_items(
        category: Optional[str] = None,
        low_stock_only: bool = False,
        skip: int = 0,
        limit: int = 100,
        session: Session = Depends(get_current_session)
):
    """
    Get stocked items.

    Args:
        category: Filter by category
        low_stock_only: Only items below their minimum quantity
        skip: Number of records to skip
        limit: Maximum number of records to return
        session: Caller's session

    Returns:
        List of items with their low-stock flag
    """
    try:
        return await logistics_service.get_items(category, low_stock_only, skip, limit)
    except Exception as e:
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=f"Error fetching logistics items: {str(e)}"
        )


@router.post("/items", response_model=LogisticsItemResponse, status_code=status.HTTP_201_CREATED)
async def create_item(
        item_in: LogisticsItemCreate,
        session: Session = Depends(requires_role(*LOGISTICS_ROLES))
):
    try:
        return await logistics_service.create_item(item_in.model_dump())
    except HTTPException:
        raise
    except Exception as e:
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=f"Error creating logistics item: {str(e)}"
        )


@router.post("/items/{item_id}/adjust", response_model=LogisticsItemResponse)
async def adjust_stock(
        item_id: int,
        adjustment: StockAdjustment,
        session: Session = Depends(requires_role(*LOGISTICS_ROLES))
):
    try:
        return await logistics_service.adjust_stock(item_id, adjustment.delta)
    except HTTPException:
        raise
    except Exception as e:
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=f"Error adjusting stock: {str(e)}"
        )


@router.get("/requests", response_model=List[LogisticsRequestResponse])
async def get_requests(
        status_filter: Optional[str] = None,
        priority: Optional[str] = None,
        skip: int = 0,
        limit: int = 100,
        session: Session = Depends(get_current_session)
):
    """
    Get logistics requests.

    Logistics staff see every request; everyone else sees their own.

    Args:
        status_filter: Status or comma-separated statuses
        priority: Filter by priority
        skip: Number of records to skip
        limit: Maximum number of records to return
        session: Caller's session

    Returns:
        List of requests, newest first
    """
    try:
        requester_id = None if session.role in LOGISTICS_ROLES else session.user_id
        return await logistics_service.get_requests(status_filter, priority, requester_id, skip, limit)
    except Exception as e:
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=f"Error fetching logistics requests: {str(e)}"
        )


@router.get("/requests/{request_id}", response_model=LogisticsRequestResponse)
async def get_request(request_id: int, session: Session = Depends(get_current_session)):
    try:
        request = await logistics_service.get_request(request_id)
        if session.role not in LOGISTICS_ROLES and request["requester_id"] != session.user_id:
            raise HTTPException(
                status_code=status.HTTP_403_FORBIDDEN,
                detail="Not enough permissions"
            )
        return request
    except HTTPException:
        raise
    except Exception as e:
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=f"Error fetching logistics request: {str(e)}"
        )


@router.post("/requests", response_model=LogisticsRequestResponse, status_code=status.HTTP_201_CREATED)
async def create_request(request_in: LogisticsRequestCreate, session: Session = Depends(get_current_session)):
    try:
        return await logistics_service.create_request(request_in.model_dump(), session.user_id)
    except HTTPException:
        raise
    except Exception as e:
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=f"Error creating logistics request: {str(e)}"
        )


@router.post("/requests/{request_id}/approve", response_model=LogisticsRequestResponse)
async def approve_request(
        request_id: int,
        approval: LogisticsRequestApprove,
        session: Session = Depends(requires_role(*LOGISTICS_ROLES))
):
    try:
        return await logistics_service.approve_request(request_id, session.user_id, approval.notes)
    except HTTPException:
        raise
    except Exception as e:
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=f"Error approving logistics request: {str(e)}"
        )


@router.post("/requests/{request_id}/reject", response_model=LogisticsRequestResponse)
async def reject_request(
        request_id: int,
        rejection: LogisticsRequestReject,
        session: Session = Depends(requires_role(*LOGISTICS_ROLES))
):
    try:
        return await logistics_service.reject_request(request_id, session.user_id, rejection.reason)
    except HTTPException:
        raise
    except Exception as e:
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=f"Error rejecting logistics request: {str(e)}"
        )


@router.post("/requests/{request_id}/purchase", response_model=LogisticsRequestResponse)
async def mark_purchased(
        request_id: int,
        purchase: LogisticsRequestPurchase,
        session: Session = Depends(requires_role(*LOGISTICS_ROLES))
):
    try:
        return await logistics_service.mark_purchased(
            request_id,
            purchase.vendor,
            purchase.actual_cost,
            purchase.purchase_date,
            purchase.receipt_url
        )
    except HTTPException:
        raise
    except Exception as e:
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=f"Error recording purchase: {str(e)}"
        )


@router.post("/requests/{request_id}/complete", response_model=LogisticsRequestResponse)
async def complete_request(
        request_id: int,
        completion: LogisticsRequestComplete,
        session: Session = Depends(requires_role(*LOGISTICS_ROLES))
):
    try:
        return await logistics_service.complete_request(request_id, completion.notes)
    except HTTPException:
        raise
    except Exception as e:
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=f"Error completing logistics request: {str(e)}"
        )

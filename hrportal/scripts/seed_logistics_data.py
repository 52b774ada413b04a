#!/usr/bin/env python3
# hrportal/scripts/seed_logistics_data.py
"""
Seed sample logistics items and requests.

Safe to run repeatedly: an item is skipped when one with the same name
exists, a request when the same requester already asked for the same item.
"""
import asyncio
import logging
import sys
from datetime import timedelta
from typing import Dict, Optional

from hrportal.core.config import settings
from hrportal.db.indexes import ensure_indexes
from hrportal.domains.logistics.repository import LogisticsItemRepository, LogisticsRequestRepository
from hrportal.domains.users.repository import UserRepository
from hrportal.utils.datetime_handler import DateTimeHandler

logger = logging.getLogger(__name__)

SYSTEM_REQUESTER = "system"

LOGISTICS_ITEMS = [
    {"name": "Dell OptiPlex Desktop", "description": "Business desktop computer with Windows 11 Pro",
     "category": "IT Equipment", "quantity": 15, "min_quantity": 5, "location": "IT Storage Room A"},
    {"name": "Office Chairs (Ergonomic)", "description": "Adjustable ergonomic office chairs with lumbar support",
     "category": "Office Furniture", "quantity": 3, "min_quantity": 10, "location": "Warehouse Section B"},
    {"name": "Wireless Keyboards", "description": "Logitech wireless keyboards with number pad",
     "category": "IT Equipment", "quantity": 25, "min_quantity": 8, "location": "IT Storage Room A"},
    {"name": "Standing Desks", "description": "Height-adjustable standing desks",
     "category": "Office Furniture", "quantity": 2, "min_quantity": 5, "location": "Warehouse Section B"},
    {"name": "Laptop Docking Stations", "description": "USB-C docking stations for laptops",
     "category": "IT Equipment", "quantity": 12, "min_quantity": 6, "location": "IT Storage Room A"},
    {"name": "Printer Paper (A4)", "description": "500-sheet reams of white A4 printer paper",
     "category": "Office Supplies", "quantity": 50, "min_quantity": 20, "location": "Supply Closet Main"},
    {"name": "Network Cables (Cat6)", "description": "6ft Cat6 Ethernet cables",
     "category": "IT Equipment", "quantity": 8, "min_quantity": 15, "location": "IT Storage Room A"},
    {"name": "Conference Room Cameras", "description": "4K webcams for video conferencing",
     "category": "IT Equipment", "quantity": 4, "min_quantity": 2, "location": "IT Storage Room B"},
    {"name": "Whiteboard Markers", "description": "Dry-erase markers (assorted colors)",
     "category": "Office Supplies", "quantity": 1, "min_quantity": 10, "location": "Supply Closet Main"},
    {"name": "Employee Badges", "description": "ID badges with lanyards",
     "category": "Security", "quantity": 30, "min_quantity": 10, "location": "HR Storage"},
]

LOGISTICS_REQUESTS = [
    {"item_name": "Ergonomic Office Chairs", "description": "Need 5 ergonomic chairs for new hires",
     "quantity": 5, "reason": "New employee onboarding - expanding team",
     "status": "pending", "priority": "high", "estimated_cost": 750.00},
    {"item_name": "MacBook Pro 14-inch", "description": "Development laptop for software engineer",
     "quantity": 2, "reason": "IT equipment for new developers",
     "status": "approved", "priority": "urgent", "estimated_cost": 4000.00,
     "actual_cost": 3800.00, "vendor": "Apple Store Business"},
    {"item_name": "Monitor Arms (Dual)", "description": "Adjustable dual monitor arms",
     "quantity": 10, "reason": "Ergonomic workspace improvements",
     "status": "completed", "priority": "medium", "estimated_cost": 1200.00,
     "actual_cost": 1150.00, "vendor": "Office Depot",
     "notes": "Successfully installed for all workstations"},
    {"item_name": "Coffee Machine", "description": "Commercial-grade coffee machine for break room",
     "quantity": 1, "reason": "Employee wellness and satisfaction",
     "status": "rejected", "priority": "low", "estimated_cost": 2500.00,
     "rejection_reason": "Budget constraints this quarter"},
    {"item_name": "Video Conference Equipment", "description": "Complete setup for large conference room",
     "quantity": 1, "reason": "Client meetings and remote collaboration",
     "status": "approved", "priority": "high", "estimated_cost": 5000.00,
     "vendor": "TechPro Solutions"},
    {"item_name": "Desk Organizers", "description": "Desktop organizers with multiple compartments",
     "quantity": 20, "reason": "Office organization initiative",
     "status": "pending", "priority": "low", "estimated_cost": 300.00},
    {"item_name": "UPS Battery Backup", "description": "Uninterruptible power supply for servers",
     "quantity": 3, "reason": "Critical infrastructure protection",
     "status": "approved", "priority": "urgent", "estimated_cost": 1800.00},
]


def build_request(template: Dict, requester_id: str) -> Dict:
    """Fill in requester and approval/purchase fields implied by the sample status."""
    now = DateTimeHandler.get_current_datetime()
    request = {**template, "requester_id": requester_id}

    if template["status"] in ("approved", "completed"):
        request["approved_by"] = requester_id
        request["approved_at"] = now
    if template["status"] == "completed":
        request["purchase_date"] = now - timedelta(days=7)

    return request


async def seed_logistics_data(item_repo: LogisticsItemRepository,
                              request_repo: LogisticsRequestRepository,
                              requester_id: str) -> Dict[str, int]:
    """
    Insert the sample items and requests that are not present yet.

    Args:
        item_repo: Repository for logistics items
        request_repo: Repository for logistics requests
        requester_id: User recorded as requester and approver

    Returns:
        Counts of inserted and skipped rows
    """
    counts = {"items_created": 0, "items_skipped": 0, "requests_created": 0, "requests_skipped": 0}

    for item in LOGISTICS_ITEMS:
        data = {**item, "last_updated": DateTimeHandler.get_current_datetime()}
        _, inserted = await item_repo.insert_if_absent({"name": item["name"]}, data)
        counts["items_created" if inserted else "items_skipped"] += 1

    for template in LOGISTICS_REQUESTS:
        key = {"requester_id": requester_id, "item_name": template["item_name"]}
        _, inserted = await request_repo.insert_if_absent(key, build_request(template, requester_id))
        counts["requests_created" if inserted else "requests_skipped"] += 1

    return counts


async def resolve_requester(user_repo: UserRepository) -> str:
    admin = await user_repo.find_by_email(settings.ADMIN_EMAIL)
    if admin:
        return admin["_id"]
    logger.warning(f"{settings.ADMIN_EMAIL} not found; requests will be recorded for '{SYSTEM_REQUESTER}'")
    return SYSTEM_REQUESTER


async def main(requester_id: Optional[str] = None) -> int:
    """Seed logistics data; returns the process exit code."""
    try:
        logger.info("Seeding logistics data...")
        await ensure_indexes()

        requester_id = requester_id or await resolve_requester(UserRepository())
        counts = await seed_logistics_data(LogisticsItemRepository(), LogisticsRequestRepository(), requester_id)

        logger.info("Logistics data seeded successfully")
        logger.info(f"  - Items created: {counts['items_created']} (skipped {counts['items_skipped']})")
        logger.info(f"  - Requests created: {counts['requests_created']} (skipped {counts['requests_skipped']})")
        return 0
    except Exception as e:
        logger.error(f"Error seeding logistics data: {str(e)}", exc_info=True)
        return 1


def run():
    logging.basicConfig(
        level=getattr(logging, settings.LOG_LEVEL.upper(), logging.INFO),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )
    sys.exit(asyncio.run(main(sys.argv[1] if len(sys.argv) > 1 else None)))


if __name__ == "__main__":
    run()

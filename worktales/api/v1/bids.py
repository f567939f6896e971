# worktales/api/v1/bids.py
import logging
from typing import Any, Dict, List, Optional

from fastapi import APIRouter, Body, Depends, Query

from worktales.api.deps import OwnerPolicy
from worktales.db.mongo import MongoStore, get_store
from worktales.models.bid import BidSortField, BidStatusUpdate, SortOrder
from worktales.models.results import InsertResult, UpdateResult
from worktales.repositories import bids as bids_repo

logger = logging.getLogger(__name__)

router = APIRouter(tags=["bids"])

# bidder first, then employer
bid_party = OwnerPolicy("userEmail", "employerEmail")


@router.get("/bids")
async def list_bids(
    userEmail: Optional[str] = Query(None),
    employerEmail: Optional[str] = Query(None),
    sortField: Optional[BidSortField] = Query(None),
    sortOrder: Optional[SortOrder] = Query(None),
    owner: str = Depends(bid_party),
    store: MongoStore = Depends(get_store),
) -> List[Dict[str, Any]]:
    """
    Bids placed by ``userEmail`` or received by ``employerEmail``.

    Sorting needs both ``sortField`` and ``sortOrder``; one without the other is ignored.
    """
    if userEmail:
        query = {"userEmail": owner}
    else:
        query = {"employerEmail": owner}
    sort = None
    if sortField and sortOrder:
        sort = (sortField.value, sortOrder.direction)
    return await bids_repo.list_bids(store, query, sort)


@router.post("/bids", response_model=InsertResult)
async def create_bid(bid: Dict[str, Any] = Body(...), store: MongoStore = Depends(get_store)):
    return await bids_repo.insert_bid(store, bid)


@router.patch("/bids/{bid_id}", response_model=UpdateResult)
async def update_bid_status(bid_id: str, payload: BidStatusUpdate, store: MongoStore = Depends(get_store)):
    if not payload.is_conventional():
        logger.warning("Bid %s set to unconventional status %r", bid_id, payload.status)
    return await bids_repo.set_bid_status(store, bid_id, payload.status)

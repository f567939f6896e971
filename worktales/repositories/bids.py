# worktales/repositories/bids.py
from typing import Any, Dict, List, Optional, Tuple

from bson import ObjectId

from worktales.db.mongo import MongoStore
from worktales.models.results import InsertResult, UpdateResult, serialize_document


async def insert_bid(store: MongoStore, bid: Dict[str, Any]) -> InsertResult:
    doc = dict(bid)
    doc.pop("_id", None)
    res = await store.bids.insert_one(doc)
    return InsertResult.from_driver(res)


async def list_bids(
    store: MongoStore,
    query: Optional[Dict[str, Any]] = None,
    sort: Optional[Tuple[str, int]] = None,
) -> List[Dict[str, Any]]:
    cur = store.bids.find(query or {}, sort=[sort] if sort else None)
    out = []
    async for d in cur:
        out.append(serialize_document(d))
    return out


async def set_bid_status(store: MongoStore, bid_id: str, status: Optional[str]) -> UpdateResult:
    res = await store.bids.update_one({"_id": ObjectId(bid_id)}, {"$set": {"status": status}})
    return UpdateResult.from_driver(res)

# worktales/repositories/jobs.py
from typing import Any, Dict, List, Optional

from bson import ObjectId

from worktales.db.mongo import MongoStore
from worktales.models.results import DeleteResult, InsertResult, UpdateResult, serialize_document


def _by_id(job_id: str) -> Dict[str, Any]:
    # ObjectId() raises bson.errors.InvalidId on malformed input; callers let it propagate
    return {"_id": ObjectId(job_id)}


async def insert_job(store: MongoStore, job: Dict[str, Any]) -> InsertResult:
    doc = dict(job)
    doc.pop("_id", None)
    res = await store.jobs.insert_one(doc)
    return InsertResult.from_driver(res)


async def list_jobs(store: MongoStore, query: Optional[Dict[str, Any]] = None) -> List[Dict[str, Any]]:
    cur = store.jobs.find(query or {})
    out = []
    async for d in cur:
        out.append(serialize_document(d))
    return out


async def get_job(store: MongoStore, job_id: str) -> Optional[Dict[str, Any]]:
    doc = await store.jobs.find_one(_by_id(job_id))
    return serialize_document(doc)


async def upsert_job(store: MongoStore, job_id: str, fields: Dict[str, Any]) -> UpdateResult:
    res = await store.jobs.update_one(_by_id(job_id), {"$set": fields}, upsert=True)
    return UpdateResult.from_driver(res)


async def delete_job(store: MongoStore, job_id: str) -> DeleteResult:
    res = await store.jobs.delete_one(_by_id(job_id))
    return DeleteResult.from_driver(res)

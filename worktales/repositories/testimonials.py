# worktales/repositories/testimonials.py
from typing import Any, Dict, List

from worktales.db.mongo import MongoStore
from worktales.models.results import serialize_document


async def list_testimonials(store: MongoStore) -> List[Dict[str, Any]]:
    out = []
    async for d in store.testimonials.find({}):
        out.append(serialize_document(d))
    return out

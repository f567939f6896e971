# worktales/api/v1/testimonials.py
from typing import Any, Dict, List

from fastapi import APIRouter, Depends

from worktales.db.mongo import MongoStore, get_store
from worktales.repositories.testimonials import list_testimonials

router = APIRouter(tags=["testimonials"])


@router.get("/testimonials")
async def get_testimonials(store: MongoStore = Depends(get_store)) -> List[Dict[str, Any]]:
    return await list_testimonials(store)

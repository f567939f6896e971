# worktales/api/v1/jobs.py
from typing import Any, Dict, List, Optional

from fastapi import APIRouter, Body, Depends, Query

from worktales.api.deps import OwnerPolicy, get_current_claims
from worktales.db.mongo import MongoStore, get_store
from worktales.models.job import JobUpdate
from worktales.models.results import DeleteResult, InsertResult, UpdateResult
from worktales.repositories import jobs as jobs_repo

router = APIRouter(tags=["jobs"])

employer_owns_listing = OwnerPolicy("employer_email")


@router.post("/jobs", response_model=InsertResult, dependencies=[Depends(get_current_claims)])
async def create_job(job: Dict[str, Any] = Body(...), store: MongoStore = Depends(get_store)):
    return await jobs_repo.insert_job(store, job)


@router.get("/jobs")
async def list_jobs(
    category: Optional[str] = Query(None),
    store: MongoStore = Depends(get_store),
) -> List[Dict[str, Any]]:
    query = {"category": category} if category else {}
    return await jobs_repo.list_jobs(store, query)


@router.get("/postedJobs")
async def list_posted_jobs(
    employer_email: str = Depends(employer_owns_listing),
    store: MongoStore = Depends(get_store),
) -> List[Dict[str, Any]]:
    return await jobs_repo.list_jobs(store, {"employer_email": employer_email})


@router.get("/jobs/{job_id}", dependencies=[Depends(get_current_claims)])
async def get_job(job_id: str, store: MongoStore = Depends(get_store)) -> Optional[Dict[str, Any]]:
    return await jobs_repo.get_job(store, job_id)


@router.put("/jobs/{job_id}", response_model=UpdateResult)
async def update_job(job_id: str, job: JobUpdate, store: MongoStore = Depends(get_store)):
    """Overwrite the editable fields, inserting the job when the id is unknown."""
    return await jobs_repo.upsert_job(store, job_id, job.to_set())


@router.delete("/jobs/{job_id}", response_model=DeleteResult)
async def delete_job(job_id: str, store: MongoStore = Depends(get_store)):
    return await jobs_repo.delete_job(store, job_id)

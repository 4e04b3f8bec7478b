import logging
from typing import Annotated
from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from jobly.core.database import get_db
from jobly.core.deps import ensure_admin
from jobly.crud import job as job_crud
from jobly.schemas.job import (
    JobCreateRequest,
    JobDeleteResponse,
    JobDetailResponse,
    JobListResponse,
    JobResponse,
    JobSearchQuery,
    JobUpdateRequest,
)

router = APIRouter(prefix="/jobs", tags=["Jobs"])
logger = logging.getLogger(__name__)


@router.post("/", status_code=201, response_model=JobResponse)
def create_job(
    request: JobCreateRequest,
    db: Session = Depends(get_db),
    admin: dict = Depends(ensure_admin)
):
    """
    Create a new job posting for an existing company.

    Authorization required: admin
    """
    job = job_crud.create(db, request.model_dump())
    logger.info(f"Created job {job['id']}: {job['title']} ({job['companyHandle']})")
    return {"job": job}


@router.get("/", response_model=JobListResponse)
def list_jobs(
    filters: Annotated[JobSearchQuery, Query()],
    db: Session = Depends(get_db)
):
    """
    List jobs with their company name.

    Query filters (all optional):
    - title: case-insensitive substring of the job title
    - minSalary: minimum salary (inclusive)
    - hasEquity: if true, only jobs with non-zero equity
    """
    jobs = job_crud.find_all(
        db,
        title=filters.title,
        min_salary=filters.minSalary,
        has_equity=filters.hasEquity
    )
    return {"jobs": jobs}


@router.get("/{job_id}", response_model=JobDetailResponse)
def get_job(job_id: int, db: Session = Depends(get_db)):
    """
    Retrieve a job by ID, including its company.
    """
    job = job_crud.get(db, job_id)
    return {"job": job}


@router.patch("/{job_id}", response_model=JobResponse)
def update_job(
    job_id: int,
    request: JobUpdateRequest,
    db: Session = Depends(get_db),
    admin: dict = Depends(ensure_admin)
):
    """
    Partially update a job.

    Fields can be: { title, salary, equity }

    Authorization required: admin
    """
    job = job_crud.update(db, job_id, request.model_dump(exclude_unset=True))
    logger.info(f"Updated job {job_id}")
    return {"job": job}


@router.delete("/{job_id}", response_model=JobDeleteResponse)
def delete_job(
    job_id: int,
    db: Session = Depends(get_db),
    admin: dict = Depends(ensure_admin)
):
    """
    Delete a job by ID.

    Authorization required: admin
    """
    job_crud.remove(db, job_id)
    logger.info(f"Deleted job {job_id}")
    return {"deleted": job_id}

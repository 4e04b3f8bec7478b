import logging
from typing import Annotated
from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from jobly.core.database import get_db
from jobly.core.deps import ensure_admin
from jobly.crud import company as company_crud
from jobly.schemas.company import (
    CompanyCreateRequest,
    CompanyDeleteResponse,
    CompanyDetailResponse,
    CompanyListResponse,
    CompanyResponse,
    CompanySearchQuery,
    CompanyUpdateRequest,
)

router = APIRouter(prefix="/companies", tags=["Companies"])
logger = logging.getLogger(__name__)


@router.post("/", status_code=201, response_model=CompanyResponse)
def create_company(
    request: CompanyCreateRequest,
    db: Session = Depends(get_db),
    admin: dict = Depends(ensure_admin)
):
    """
    Create a new company.

    Authorization required: admin
    """
    company = company_crud.create(db, request.model_dump())
    logger.info(f"Created company {company['handle']}")
    return {"company": company}


@router.get("/", response_model=CompanyListResponse)
def list_companies(
    filters: Annotated[CompanySearchQuery, Query()],
    db: Session = Depends(get_db)
):
    """
    List companies, optionally filtered.

    Query filters (all optional):
    - nameLike: case-insensitive substring of the company name
    - minEmployees: minimum number of employees (inclusive)
    - maxEmployees: maximum number of employees (inclusive)

    Returns 400 if minEmployees is greater than maxEmployees.
    """
    companies = company_crud.find_all(db, filters.model_dump(exclude_none=True))
    return {"companies": companies}


@router.get("/{handle}", response_model=CompanyDetailResponse)
def get_company(handle: str, db: Session = Depends(get_db)):
    """
    Retrieve a company by handle, including its jobs.
    """
    company = company_crud.get(db, handle)
    return {"company": company}


@router.patch("/{handle}", response_model=CompanyResponse)
def update_company(
    handle: str,
    request: CompanyUpdateRequest,
    db: Session = Depends(get_db),
    admin: dict = Depends(ensure_admin)
):
    """
    Partially update a company.

    Fields can be: { name, description, numEmployees, logoUrl }

    Authorization required: admin
    """
    company = company_crud.update(db, handle, request.model_dump(exclude_unset=True))
    logger.info(f"Updated company {handle}")
    return {"company": company}


@router.delete("/{handle}", response_model=CompanyDeleteResponse)
def delete_company(
    handle: str,
    db: Session = Depends(get_db),
    admin: dict = Depends(ensure_admin)
):
    """
    Delete a company by handle.

    Authorization required: admin
    """
    company_crud.remove(db, handle)
    logger.info(f"Deleted company {handle}")
    return {"deleted": handle}

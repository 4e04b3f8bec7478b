from pydantic import BaseModel, ConfigDict, Field
from typing import List, Optional


class CompanyCreateRequest(BaseModel):
    """Schema for creating a new company"""
    model_config = ConfigDict(extra="forbid", strict=True)

    handle: str = Field(..., min_length=1, max_length=25)
    name: str = Field(..., min_length=1)
    description: str
    numEmployees: Optional[int] = Field(None, ge=0)
    logoUrl: Optional[str] = None


class CompanyUpdateRequest(BaseModel):
    """
    Schema for partially updating a company.

    Only fields sent by the client are applied; the handle cannot change.
    """
    model_config = ConfigDict(extra="forbid", strict=True)

    name: str = Field(None, min_length=1)
    description: str = None
    numEmployees: Optional[int] = Field(None, ge=0)
    logoUrl: Optional[str] = None


class CompanySearchQuery(BaseModel):
    """Query string filters for listing companies"""
    model_config = ConfigDict(extra="forbid")

    nameLike: Optional[str] = None
    minEmployees: Optional[int] = Field(None, ge=0)
    maxEmployees: Optional[int] = Field(None, ge=0)


class CompanyOut(BaseModel):
    handle: str
    name: str
    description: str
    numEmployees: Optional[int] = None
    logoUrl: Optional[str] = None


class CompanyJobOut(BaseModel):
    """A job as listed under its company"""
    id: int
    title: str
    salary: Optional[int] = None
    equity: Optional[float] = None


class CompanyDetailOut(CompanyOut):
    jobs: List[CompanyJobOut] = []


class CompanyResponse(BaseModel):
    company: CompanyOut


class CompanyDetailResponse(BaseModel):
    company: CompanyDetailOut


class CompanyListResponse(BaseModel):
    companies: List[CompanyOut]


class CompanyDeleteResponse(BaseModel):
    deleted: str

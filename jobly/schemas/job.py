from pydantic import BaseModel, ConfigDict, Field
from typing import List, Optional

from jobly.schemas.company import CompanyOut


class JobCreateRequest(BaseModel):
    """Schema for creating a new job"""
    model_config = ConfigDict(extra="forbid", strict=True)

    title: str = Field(..., min_length=1)
    salary: Optional[int] = Field(None, ge=0)
    equity: Optional[float] = Field(None, ge=0, le=1.0)
    companyHandle: str = Field(..., min_length=1, max_length=25)


class JobUpdateRequest(BaseModel):
    """
    Schema for partially updating a job.

    The id and company of a job are fixed once created.
    """
    model_config = ConfigDict(extra="forbid", strict=True)

    title: str = Field(None, min_length=1)
    salary: Optional[int] = Field(None, ge=0)
    equity: Optional[float] = Field(None, ge=0, le=1.0)


class JobSearchQuery(BaseModel):
    """Query string filters for listing jobs"""
    model_config = ConfigDict(extra="forbid")

    title: Optional[str] = None
    minSalary: Optional[int] = Field(None, ge=0)
    hasEquity: Optional[bool] = None


class JobOut(BaseModel):
    id: int
    title: str
    salary: Optional[int] = None
    equity: Optional[float] = None
    companyHandle: str


class JobListItemOut(JobOut):
    companyName: Optional[str] = None


class JobDetailOut(JobOut):
    company: Optional[CompanyOut] = None


class JobResponse(BaseModel):
    job: JobOut


class JobDetailResponse(BaseModel):
    job: JobDetailOut


class JobListResponse(BaseModel):
    jobs: List[JobListItemOut]


class JobDeleteResponse(BaseModel):
    deleted: int

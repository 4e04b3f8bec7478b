"""
CRUD operations for jobs.

Every job belongs to a company; reads join the parent company so listings
carry the company name and detail views carry the full company record.
"""

from typing import Any, Dict, List, Mapping, Optional
from sqlalchemy.orm import Session

from jobly.core.database import execute
from jobly.core.errors import BadRequestError, NotFoundError
from jobly.crud.company import COMPANY_COLUMNS
from jobly.helpers.sql import sql_for_partial_update

JOB_COLUMNS = 'id, title, salary, equity, company_handle AS "companyHandle"'


def create(db: Session, data: Mapping[str, Any]) -> Dict[str, Any]:
    """
    Create a job.

    Args:
        db: Database session
        data: { title, salary, equity, companyHandle }

    Returns:
        { id, title, salary, equity, companyHandle }

    Raises:
        BadRequestError: If the company does not exist
    """
    company = execute(
        db,
        "SELECT handle FROM companies WHERE handle = $1",
        [data["companyHandle"]],
    )
    if not company:
        raise BadRequestError(f"No company: {data['companyHandle']}")

    rows = execute(
        db,
        f"""INSERT INTO jobs
            (title, salary, equity, company_handle)
            VALUES ($1, $2, $3, $4)
            RETURNING {JOB_COLUMNS}""",
        [data["title"], data.get("salary"), data.get("equity"), data["companyHandle"]],
    )
    db.commit()

    return rows[0]


def find_all(
    db: Session,
    title: Optional[str] = None,
    min_salary: Optional[int] = None,
    has_equity: Optional[bool] = None
) -> List[Dict[str, Any]]:
    """
    Find all jobs, optionally filtered.

    Args:
        db: Database session
        title: Case-insensitive substring of the job title
        min_salary: Minimum salary (inclusive)
        has_equity: If True, only jobs with non-zero equity; False/None means no filter

    Returns:
        [{ id, title, salary, equity, companyHandle, companyName }, ...] ordered by title
    """
    query = """SELECT j.id,
                      j.title,
                      j.salary,
                      j.equity,
                      j.company_handle AS "companyHandle",
                      c.name AS "companyName"
               FROM jobs AS j
               LEFT JOIN companies AS c ON c.handle = j.company_handle"""
    where_expressions = []
    values = []

    if title is not None:
        values.append(title)
        where_expressions.append(f"j.title ILIKE '%' || ${len(values)} || '%'")

    if min_salary is not None:
        values.append(min_salary)
        where_expressions.append(f"j.salary >= ${len(values)}")

    if has_equity is True:
        where_expressions.append("j.equity != 0")

    if where_expressions:
        query += " WHERE " + " AND ".join(where_expressions)

    query += " ORDER BY j.title"
    return execute(db, query, values)


def get(db: Session, job_id: int) -> Dict[str, Any]:
    """
    Get a job with its company.

    Returns:
        { id, title, salary, equity, companyHandle, company }
        where company is { handle, name, description, numEmployees, logoUrl }

    Raises:
        NotFoundError: If no such job
    """
    rows = execute(
        db,
        f"""SELECT {JOB_COLUMNS}
            FROM jobs
            WHERE id = $1""",
        [job_id],
    )
    if not rows:
        raise NotFoundError(f"No job: {job_id}")

    job = rows[0]
    companies = execute(
        db,
        f"""SELECT {COMPANY_COLUMNS}
            FROM companies
            WHERE handle = $1""",
        [job["companyHandle"]],
    )
    job["company"] = companies[0] if companies else None

    return job


def update(db: Session, job_id: int, data: Mapping[str, Any]) -> Dict[str, Any]:
    """
    Partially update a job; only the fields present in data change.

    Args:
        db: Database session
        job_id: Job ID
        data: Any of { title, salary, equity }

    Returns:
        { id, title, salary, equity, companyHandle }

    Raises:
        EmptyUpdateError: If data is empty
        NotFoundError: If no such job
    """
    set_cols, values = sql_for_partial_update(data, {})
    id_idx = f"${len(values) + 1}"

    rows = execute(
        db,
        f"""UPDATE jobs
            SET {set_cols}
            WHERE id = {id_idx}
            RETURNING {JOB_COLUMNS}""",
        [*values, job_id],
    )
    if not rows:
        db.rollback()
        raise NotFoundError(f"No job: {job_id}")

    db.commit()
    return rows[0]


def remove(db: Session, job_id: int) -> None:
    """
    Delete a job.

    Raises:
        NotFoundError: If no such job
    """
    rows = execute(
        db,
        """DELETE FROM jobs
           WHERE id = $1
           RETURNING id""",
        [job_id],
    )
    if not rows:
        db.rollback()
        raise NotFoundError(f"No job: {job_id}")

    db.commit()

"""
CRUD operations for companies.

Queries are written as parameterized SQL with positional placeholders and run
through jobly.core.database.execute; filtering and partial updates are built
with the helpers in jobly.helpers.sql.
"""

from typing import Any, Dict, List, Mapping, Optional
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from jobly.core.database import execute
from jobly.core.errors import BadRequestError, NotFoundError
from jobly.helpers.sql import sql_for_partial_update, sql_for_search

# Request field name -> column name, for fields where they differ
COLUMN_MAP = {
    "numEmployees": "num_employees",
    "logoUrl": "logo_url",
}

COMPANY_COLUMNS = (
    'handle, name, description, '
    'num_employees AS "numEmployees", logo_url AS "logoUrl"'
)


def create(db: Session, data: Mapping[str, Any]) -> Dict[str, Any]:
    """
    Create a company.

    Args:
        db: Database session
        data: { handle, name, description, numEmployees, logoUrl }

    Returns:
        { handle, name, description, numEmployees, logoUrl }

    Raises:
        BadRequestError: If a company with the same handle or name already exists
    """
    duplicate = execute(
        db,
        "SELECT handle FROM companies WHERE handle = $1",
        [data["handle"]],
    )
    if duplicate:
        raise BadRequestError(f"Duplicate company: {data['handle']}")

    try:
        rows = execute(
            db,
            f"""INSERT INTO companies
                (handle, name, description, num_employees, logo_url)
                VALUES ($1, $2, $3, $4, $5)
                RETURNING {COMPANY_COLUMNS}""",
            [
                data["handle"],
                data["name"],
                data["description"],
                data.get("numEmployees"),
                data.get("logoUrl"),
            ],
        )
    except IntegrityError as e:
        db.rollback()
        raise BadRequestError(f"Duplicate company: {data['handle']}") from e
    db.commit()

    return rows[0]


def find_all(db: Session, filters: Optional[Mapping[str, Any]] = None) -> List[Dict[str, Any]]:
    """
    Find all companies, optionally filtered.

    Args:
        db: Database session
        filters: Any of nameLike, minEmployees, maxEmployees

    Returns:
        [{ handle, name, description, numEmployees, logoUrl }, ...] ordered by name

    Raises:
        InvalidRangeError: If minEmployees > maxEmployees
        UnknownFilterError: If an unrecognized filter is given
    """
    where_clause, values = sql_for_search(filters or {})

    return execute(
        db,
        f"""SELECT {COMPANY_COLUMNS}
            FROM companies
            {where_clause}
            ORDER BY name""",
        values,
    )


def get(db: Session, handle: str) -> Dict[str, Any]:
    """
    Get a company and its jobs.

    Returns:
        { handle, name, description, numEmployees, logoUrl, jobs }
        where jobs is [{ id, title, salary, equity }, ...]

    Raises:
        NotFoundError: If no such company
    """
    rows = execute(
        db,
        f"""SELECT {COMPANY_COLUMNS}
            FROM companies
            WHERE handle = $1""",
        [handle],
    )
    if not rows:
        raise NotFoundError(f"No company: {handle}")

    company = rows[0]
    company["jobs"] = execute(
        db,
        """SELECT id, title, salary, equity
           FROM jobs
           WHERE company_handle = $1
           ORDER BY id""",
        [handle],
    )

    return company


def update(db: Session, handle: str, data: Mapping[str, Any]) -> Dict[str, Any]:
    """
    Partially update a company; only the fields present in data change.

    Args:
        db: Database session
        handle: Company handle
        data: Any of { name, description, numEmployees, logoUrl }

    Returns:
        { handle, name, description, numEmployees, logoUrl }

    Raises:
        EmptyUpdateError: If data is empty
        BadRequestError: If the new name belongs to another company
        NotFoundError: If no such company
    """
    set_cols, values = sql_for_partial_update(data, COLUMN_MAP)
    handle_idx = f"${len(values) + 1}"

    try:
        rows = execute(
            db,
            f"""UPDATE companies
                SET {set_cols}
                WHERE handle = {handle_idx}
                RETURNING {COMPANY_COLUMNS}""",
            [*values, handle],
        )
    except IntegrityError as e:
        db.rollback()
        raise BadRequestError(f"Duplicate company name: {data.get('name')}") from e
    if not rows:
        db.rollback()
        raise NotFoundError(f"No company: {handle}")

    db.commit()
    return rows[0]


def remove(db: Session, handle: str) -> None:
    """
    Delete a company (its jobs are removed by the foreign key cascade).

    Raises:
        NotFoundError: If no such company
    """
    rows = execute(
        db,
        """DELETE FROM companies
           WHERE handle = $1
           RETURNING handle""",
        [handle],
    )
    if not rows:
        db.rollback()
        raise NotFoundError(f"No company: {handle}")

    db.commit()

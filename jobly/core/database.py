import re
from typing import Any, Dict, List, Sequence

from sqlalchemy import create_engine, text
from sqlalchemy.orm import Session, declarative_base, sessionmaker
from sqlalchemy.pool import StaticPool
from jobly.core.config import settings

# Positional placeholders ($1, $2, ...) as produced by jobly.helpers.sql
_PLACEHOLDER_RE = re.compile(r"\$(\d+)")


def _engine_options(url: str) -> Dict[str, Any]:
    if url.startswith("sqlite"):
        # Single shared connection so in-memory databases survive across sessions
        return {"connect_args": {"check_same_thread": False}, "poolclass": StaticPool}
    return {
        "pool_pre_ping": True,  # Verify connections before using them
        "pool_size": 10,  # Connection pool size
        "max_overflow": 20,  # Allow up to 20 connections beyond pool_size
    }


# Create SQLAlchemy engine
engine = create_engine(settings.DATABASE_URL, **_engine_options(settings.DATABASE_URL))

# Create SessionLocal class
SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

# Create Base class for models
Base = declarative_base()


def get_db():
    """
    Dependency function to get database session.
    Used in FastAPI endpoints with Depends(get_db)
    """
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


def init_db(bind=None):
    """
    Initialize database.

    Imports the models so they register on Base.metadata, then creates any
    missing tables.
    """
    from jobly.models import company, job  # noqa: F401  Import models to register them
    Base.metadata.create_all(bind=bind or engine)


def to_bind_params(sql: str, params: Sequence[Any] = ()) -> tuple[str, Dict[str, Any]]:
    """
    Rewrite ``$n`` placeholders into SQLAlchemy named binds.

    ``$1`` becomes ``:p1`` and binds to ``params[0]``, so the positional
    contract of the SQL builders carries over unchanged.
    """
    statement = _PLACEHOLDER_RE.sub(lambda m: f":p{m.group(1)}", sql)
    bind_params = {f"p{idx}": value for idx, value in enumerate(params, start=1)}
    return statement, bind_params


def execute(db: Session, sql: str, params: Sequence[Any] = ()) -> List[Dict[str, Any]]:
    """
    Execute a parameterized statement and return its rows as dicts.

    Args:
        db: Database session
        sql: SQL using PostgreSQL-style positional placeholders ($1, $2, ...)
        params: Values bound to the placeholders, in order

    Returns:
        List of row mappings (empty when the statement returns no rows)
    """
    statement, bind_params = to_bind_params(sql, params)

    if db.get_bind().dialect.name == "sqlite":
        # SQLite has no ILIKE; its LIKE is already case-insensitive for ASCII
        statement = statement.replace(" ILIKE ", " LIKE ")

    result = db.execute(text(statement), bind_params)
    if not result.returns_rows:
        return []
    return [dict(row) for row in result.mappings()]

"""
FastAPI dependencies for authorization.

Reads are open to anonymous callers; writes require a token whose
``isAdmin`` claim is true.
"""

import logging
from fastapi import Depends
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials
from jose import JWTError
from typing import Optional

from jobly.core.errors import UnauthorizedError
from jobly.core.security import decode_token

logger = logging.getLogger(__name__)

# HTTP Bearer token scheme (Authorization: Bearer <token>); missing header is not an error here
security = HTTPBearer(auto_error=False)


def get_token_claims(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(security),
) -> Optional[dict]:
    """
    Return the decoded JWT claims, or None for anonymous callers.

    Raises:
        UnauthorizedError: If a token is present but invalid or expired
    """
    if not credentials:
        return None

    try:
        return decode_token(credentials.credentials)
    except JWTError:
        logger.warning("Rejected invalid bearer token")
        raise UnauthorizedError("Could not validate credentials")


def ensure_admin(claims: Optional[dict] = Depends(get_token_claims)) -> dict:
    """
    Require an admin caller.

    Raises:
        UnauthorizedError: If anonymous or not an admin
    """
    if not claims or claims.get("isAdmin") is not True:
        raise UnauthorizedError("Admin privileges required")

    return claims

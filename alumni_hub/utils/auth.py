"""
Acting-user resolution for FastAPI.

Requests identify their user with the ``X-User-Id`` header. There are no
tokens: the id is looked up in the record store and unknown ids are rejected.
"""
from fastapi import Depends, Header, HTTPException, status
from typing import Optional

from alumni_hub.schemas.person import Person, UserRole
from alumni_hub.services.database import DatabaseService, get_db
from alumni_hub.utils.logger import get_logger

logger = get_logger(__name__)


def get_current_user(
    x_user_id: Optional[str] = Header(None),
    db: DatabaseService = Depends(get_db),
) -> Person:
    """
    Resolve the acting user.

    Raises:
        HTTPException: 401 if the header is missing or names no user

    Example:
        >>> @router.get("/some-endpoint")
        >>> def endpoint(user: Person = Depends(get_current_user)):
        >>>     ...
    """
    if not x_user_id:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED, detail="X-User-Id header is required"
        )

    user = db.get_user(x_user_id)
    if user is None:
        logger.warning("Unknown acting user", user_id=x_user_id)
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Unknown user")

    return user


def require_admin(current_user: Person = Depends(get_current_user)) -> Person:
    """
    Resolve the acting user and require the admin role.

    Raises:
        HTTPException: 403 if the acting user is not an admin
    """
    if current_user.role != UserRole.ADMIN:
        logger.warning("Admin action refused", user_id=current_user.id)
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN, detail="Only admins can do this"
        )

    return current_user

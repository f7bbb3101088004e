"""Bearer token authentication for API callers."""
import logging

from fastapi import Depends, HTTPException, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlmodel import Session, select

from app.core.database import get_session
from app.models import User

logger = logging.getLogger(__name__)

_bearer_scheme = HTTPBearer(auto_error=False)


def _unauthorized(detail: str) -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail=detail,
        headers={"WWW-Authenticate": "Bearer"},
    )


def get_current_user(
    credentials: HTTPAuthorizationCredentials | None = Depends(_bearer_scheme),
    session: Session = Depends(get_session),
) -> User:
    """Resolve the calling user from the Authorization header."""
    if credentials is None or not credentials.credentials.strip():
        raise _unauthorized("Unauthorized")

    user = session.exec(
        select(User).where(User.api_token == credentials.credentials.strip())
    ).first()
    if user is None:
        logger.warning("Rejected request with unknown API token")
        raise _unauthorized("Unauthorized")
    return user

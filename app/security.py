from typing import Optional

from fastapi import Depends, Header, HTTPException, Security
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from starlette.status import HTTP_403_FORBIDDEN

from app.settings import Settings, settings

STAFF_USER_HEADER = "X-Staff-User"
bearer_scheme = HTTPBearer(auto_error=False)


def get_settings() -> Settings:
    """Small wrapper to allow dependency overrides in tests."""
    return settings


def get_staff_token(
    credentials: Optional[HTTPAuthorizationCredentials] = Security(bearer_scheme),
    current_settings: Settings = Depends(get_settings),
) -> str:
    expected = current_settings.BLOG_STAFF_TOKEN
    if credentials and expected and credentials.credentials == expected:
        return credentials.credentials
    raise HTTPException(
        status_code=HTTP_403_FORBIDDEN,
        detail="Could not validate credentials",
    )


def get_staff_user(
    _token: str = Depends(get_staff_token),
    staff_user: Optional[str] = Header(default=None, alias=STAFF_USER_HEADER),
) -> Optional[str]:
    """Identity used only to attribute writes (created_by, changed_by, ...)."""
    return staff_user or None

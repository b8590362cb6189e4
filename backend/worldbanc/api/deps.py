"""FastAPI dependency injection — auth gate & dispatcher."""

from __future__ import annotations

import hmac
from functools import lru_cache
from typing import Optional

from fastapi import Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from worldbanc.config import settings
from worldbanc.services.dispatcher import RequestDispatcher
from worldbanc.services.platform import get_platform

bearer_scheme = HTTPBearer(auto_error=False)


def token_matches(candidate: Optional[str]) -> bool:
    if candidate is None:
        return False
    return hmac.compare_digest(candidate.encode("utf-8"), settings.token.encode("utf-8"))


async def is_authenticated(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(bearer_scheme),
) -> bool:
    """True when the request carries ``Authorization: Bearer <token>``."""
    if credentials is None:
        return False
    return token_matches(credentials.credentials)


@lru_cache(maxsize=1)
def get_dispatcher() -> RequestDispatcher:
    """One dispatcher per process, bound to the configured platform."""
    return RequestDispatcher(
        platform=get_platform(settings.platform),
        host_name=settings.host_name,
    )

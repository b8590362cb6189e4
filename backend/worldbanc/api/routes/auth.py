"""Login route for the shared token."""

import logging

from fastapi import APIRouter

from worldbanc.api.deps import token_matches
from worldbanc.config import settings
from worldbanc.schemas.auth import LoginRequest, TokenResponse
from worldbanc.schemas.files import ErrorResponse

logger = logging.getLogger(__name__)
router = APIRouter()


@router.post("/login", response_model=TokenResponse | ErrorResponse)
async def login(body: LoginRequest):
    """
    Check the submitted token.

    The landing page stores the returned token and sends it as a bearer
    credential on every later request.
    """
    if not token_matches(body.token):
        logger.info("[/login] Invalid Token : [%s]", body.token)
        return ErrorResponse(error="Invalid Token")
    logger.info("[/login] Succeeded")
    return TokenResponse(token=settings.token)

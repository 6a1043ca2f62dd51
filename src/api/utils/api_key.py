"""
API Key Authentication

Optional shared-secret guard for write endpoints.
"""

import hmac

from fastapi import Header, status
from src.libs.result import Error
from src.api.error import ClientError
from config import ApplicationConfig


async def verify_api_key(x_api_key: str = Header(None)):
    """
    Verify the API key from the X-API-Key header.

    Protection is off when ApplicationConfig.API_KEY is empty; every
    request passes in that case.

    Raises:
        ClientError: 401 if key is missing or invalid

    Returns:
        True if valid or protection is disabled
    """
    valid_api_key = getattr(ApplicationConfig, "API_KEY", "")
    if not valid_api_key:
        return True

    if not x_api_key:
        raise ClientError(
            Error("UNAUTHORIZED", "API key required"),
            status_code=status.HTTP_401_UNAUTHORIZED,
        )

    if not hmac.compare_digest(x_api_key.encode("utf-8"), str(valid_api_key).encode("utf-8")):
        raise ClientError(
            Error("INVALID_API_KEY", "Invalid API key"),
            status_code=status.HTTP_401_UNAUTHORIZED,
        )

    return True

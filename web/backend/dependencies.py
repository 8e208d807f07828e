#!/usr/bin/env python3
"""
Request-scoped dependencies for the rewards routers.
"""

from functools import lru_cache
from typing import Optional

from fastapi import Header

from .config import get_config
from .exceptions import MissingTokenException
from .services.rewards_service import RewardsApiService


@lru_cache()
def get_rewards_service() -> RewardsApiService:
    """Process-wide RewardsApiService; tests swap it via app.dependency_overrides."""
    return RewardsApiService(get_config())


def get_bearer_token(authorization: Optional[str] = Header(None)) -> str:
    """
    Token from `Authorization: Bearer <token>`, forwarded to the profile backend.

    Raises:
        MissingTokenException: Header absent or not a bearer token.
    """
    if not authorization:
        raise MissingTokenException("Authorization header is required")

    scheme, _, token = authorization.partition(' ')
    if scheme.lower() != 'bearer' or not token.strip():
        raise MissingTokenException("Authorization header must be 'Bearer <token>'")

    return token.strip()

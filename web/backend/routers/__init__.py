"""API route handlers."""

from .rewards import router as rewards_router

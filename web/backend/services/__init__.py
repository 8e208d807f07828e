"""Business logic services."""

from .rewards_service import RewardsApiService

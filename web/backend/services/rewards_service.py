#!/usr/bin/env python3
"""
Rewards service - fetch a profile snapshot, then evaluate it.

Fetching (I/O) and evaluation (pure) stay separate: the engine only ever
sees the dict the client returned.
"""

import logging
from typing import Any, Dict, Optional

from rewards.engine import Audience, RewardsService, RewardsSummary
from rewards.engine.redemption import RedemptionQuote, quote_redemption
from rewards.profile_client import ProfileClient
from rewards.config_loader import AppConfig

logger = logging.getLogger(__name__)


class RewardsApiService:
    """Wires the profile client to the rewards engine for the HTTP layer."""

    def __init__(self, config: AppConfig, client: Optional[ProfileClient] = None):
        self.config = config
        self.engine = RewardsService(config)
        self.client = client if client is not None else ProfileClient.from_config(config.backend)

    def evaluate(self, audience: Audience, profile: Optional[Dict[str, Any]]) -> RewardsSummary:
        return self.engine.evaluate(audience, profile)

    def fetch_and_evaluate(self, audience: Audience, token: str) -> RewardsSummary:
        """
        Fetch the caller's profile and evaluate it.

        Raises:
            ProfileClientError: If the backend fetch fails.
        """
        if audience == Audience.EMPLOYER:
            profile = self.client.fetch_employer_profile(token)
        else:
            profile = self.client.fetch_jobseeker_profile(token)

        summary = self.engine.evaluate(audience, profile)
        logger.info(
            f"Evaluated {audience.value} rewards: {summary.points} points, tier={summary.tier.value}"
        )
        return summary

    def quote(self, subtotal: float, points: int, available_points: int) -> RedemptionQuote:
        return quote_redemption(subtotal, points, available_points, self.config.redemption)

    def close(self):
        self.client.close()

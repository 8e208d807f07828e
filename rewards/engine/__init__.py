#!/usr/bin/env python3
"""
Rewards Engine - Profile completeness, reward points and membership tiers.

Public API:
- RewardsService: Orchestrates completeness -> points -> tier for one profile
- RewardsSummary: Result of an evaluation

Modules:

- models.py: Data structures (Tier, PointsSource, RewardsSummary, ...)
- checklist.py: Checklist definitions and field lookup
- completeness.py: Checklist completeness scoring
- points.py: Job-seeker and employer point totals
- tiers.py: Tier decision tables and next-tier progress
- redemption.py: Spending points at checkout
- service.py: RewardsService orchestrator
"""

from rewards.engine.models import (
    Audience,
    Tier,
    RewardsSummary,
    PointsSource,
    AuthoritativePoints,
    ComputedPoints,
)
from rewards.engine.service import RewardsService

__all__ = [
    'RewardsService',
    'RewardsSummary',
    'Audience',
    'Tier',
    'PointsSource',
    'AuthoritativePoints',
    'ComputedPoints',
]

#!/usr/bin/env python3
"""
Rewards Models - Data structures for completeness, points and tier results.
"""

from typing import List, Dict, Any, Optional, Tuple
from dataclasses import dataclass, field
from enum import Enum


class Audience(str, Enum):
    JOBSEEKER = "jobseeker"
    EMPLOYER = "employer"


class Tier(str, Enum):
    """Membership tier, ordered lowest to highest."""
    BLUE = "Blue"
    SILVER = "Silver"
    GOLD = "Gold"
    PLATINUM = "Platinum"

    @property
    def rank(self) -> int:
        return TIER_ORDER.index(self)

    def next(self) -> Optional['Tier']:
        if self.rank + 1 < len(TIER_ORDER):
            return TIER_ORDER[self.rank + 1]
        return None

    def __lt__(self, other):
        if not isinstance(other, Tier):
            return NotImplemented
        return self.rank < other.rank

    def __le__(self, other):
        if not isinstance(other, Tier):
            return NotImplemented
        return self.rank <= other.rank

    def __gt__(self, other):
        if not isinstance(other, Tier):
            return NotImplemented
        return self.rank > other.rank

    def __ge__(self, other):
        if not isinstance(other, Tier):
            return NotImplemented
        return self.rank >= other.rank


TIER_ORDER: Tuple[Tier, ...] = (Tier.BLUE, Tier.SILVER, Tier.GOLD, Tier.PLATINUM)


@dataclass(frozen=True)
class TierDefinition:
    """Display metadata and progress threshold for one tier."""
    tier: Tier
    label: str
    min_points: int
    description: str = ""
    perks: Tuple[str, ...] = ()


@dataclass
class CompletenessResult:
    """Checklist completeness for one profile."""
    completed_count: int = 0
    total_fields: int = 0
    percentage: int = 0
    checklist: str = ""
    groups: Dict[str, Tuple[int, int]] = field(default_factory=dict)
    missing_fields: List[str] = field(default_factory=list)


@dataclass(frozen=True)
class PointsBreakdown:
    """Named components of a locally computed point total."""
    base: int = 0
    profile: int = 0
    activity: int = 0
    referral: int = 0
    deducted: int = 0
    raw_total: int = 0


@dataclass(frozen=True)
class PointsSource:
    """Point total tagged with the path that produced it."""
    value: int

    @property
    def is_authoritative(self) -> bool:
        return False

    @property
    def kind(self) -> str:
        return "authoritative" if self.is_authoritative else "computed"


@dataclass(frozen=True)
class AuthoritativePoints(PointsSource):
    """Total supplied by the backend."""

    @property
    def is_authoritative(self) -> bool:
        return True


@dataclass(frozen=True)
class ComputedPoints(PointsSource):
    """Total recomputed locally from profile counters."""
    breakdown: PointsBreakdown = field(default_factory=PointsBreakdown)


@dataclass(frozen=True)
class TierProgress:
    current: Tier
    next_tier: Optional[Tier]
    progress_percent: int
    points_to_next_tier: int


@dataclass
class RewardsSummary:
    """Complete rewards evaluation for one profile snapshot."""
    audience: Audience
    completeness: CompletenessResult
    points_source: PointsSource
    tier: Tier
    progress: TierProgress
    referral_points: int = 0
    activity_points: int = 0

    @property
    def points(self) -> int:
        return self.points_source.value

    @property
    def next_tier(self) -> Optional[Tier]:
        return self.progress.next_tier

    def to_dict(self) -> Dict[str, Any]:
        return {
            'audience': self.audience.value,
            'completedCount': self.completeness.completed_count,
            'totalFields': self.completeness.total_fields,
            'percentage': self.completeness.percentage,
            'points': self.points,
            'pointsSource': self.points_source.kind,
            'tier': self.tier.value,
            'nextTier': self.next_tier.value if self.next_tier else None,
            'progressToNextTierPercent': self.progress.progress_percent,
            'pointsToNextTier': self.progress.points_to_next_tier,
            'referralPoints': self.referral_points,
            'activityPoints': self.activity_points,
        }

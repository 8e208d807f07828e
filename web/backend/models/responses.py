#!/usr/bin/env python3
"""
Response models for API endpoints.
"""

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel
from typing import List, Optional

from rewards.engine.models import RewardsSummary, TierDefinition
from rewards.engine.redemption import RedemptionQuote


class _CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class RewardsSummaryModel(_CamelModel):
    """Completeness, points and tier for one profile."""
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        json_schema_extra={
            "example": {
                "audience": "jobseeker",
                "completedCount": 12,
                "totalFields": 24,
                "percentage": 50,
                "points": 430,
                "pointsSource": "computed",
                "tier": "Blue",
                "nextTier": "Silver",
                "progressToNextTierPercent": 100,
                "pointsToNextTier": 0,
                "referralPoints": 0,
                "activityPoints": 430,
                "missingFields": ["emirateId", "passportNumber"]
            }
        }
    )

    audience: str
    completed_count: int = Field(ge=0)
    total_fields: int = Field(ge=0)
    percentage: int = Field(ge=0, le=100)
    points: int = Field(ge=0)
    points_source: str
    tier: str
    next_tier: Optional[str] = None
    progress_to_next_tier_percent: int = Field(ge=0, le=100)
    points_to_next_tier: int = Field(ge=0)
    referral_points: int = Field(ge=0)
    activity_points: int = Field(ge=0)
    missing_fields: List[str] = Field(default_factory=list)

    @classmethod
    def from_summary(cls, summary: RewardsSummary) -> "RewardsSummaryModel":
        return cls(
            audience=summary.audience.value,
            completed_count=summary.completeness.completed_count,
            total_fields=summary.completeness.total_fields,
            percentage=summary.completeness.percentage,
            points=summary.points,
            points_source=summary.points_source.kind,
            tier=summary.tier.value,
            next_tier=summary.next_tier.value if summary.next_tier else None,
            progress_to_next_tier_percent=summary.progress.progress_percent,
            points_to_next_tier=summary.progress.points_to_next_tier,
            referral_points=summary.referral_points,
            activity_points=summary.activity_points,
            missing_fields=list(summary.completeness.missing_fields),
        )


class RewardsResponse(BaseModel):
    """Response containing a rewards evaluation."""
    success: bool
    data: RewardsSummaryModel


class TierModel(_CamelModel):
    tier: str
    label: str
    min_points: int
    description: str = ""
    perks: List[str] = Field(default_factory=list)

    @classmethod
    def from_definition(cls, definition: TierDefinition) -> "TierModel":
        return cls(
            tier=definition.tier.value,
            label=definition.label,
            min_points=definition.min_points,
            description=definition.description,
            perks=list(definition.perks),
        )


class TierCatalogResponse(BaseModel):
    """Response containing the tier catalog for an audience."""
    success: bool
    audience: str
    tiers: List[TierModel]


class RedemptionQuoteModel(_CamelModel):
    subtotal: float
    points_used: int
    discount: float
    total: float
    remaining_points: int
    currency: str

    @classmethod
    def from_quote(cls, quote: RedemptionQuote) -> "RedemptionQuoteModel":
        return cls(
            subtotal=quote.subtotal,
            points_used=quote.points_used,
            discount=quote.discount,
            total=quote.total,
            remaining_points=quote.remaining_points,
            currency=quote.currency,
        )


class RedemptionQuoteResponse(BaseModel):
    """Response containing a redemption quote."""
    success: bool
    quote: RedemptionQuoteModel

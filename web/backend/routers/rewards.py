#!/usr/bin/env python3
"""
Rewards endpoints - profile completeness, points and membership tiers.
"""

from typing import Any, Dict

from fastapi import APIRouter, Body, Depends

from rewards.engine import Audience
from ..dependencies import get_bearer_token, get_rewards_service
from ..exceptions import UnknownAudienceException
from ..models.requests import RedemptionQuoteRequest
from ..models.responses import (
    RedemptionQuoteModel,
    RedemptionQuoteResponse,
    RewardsResponse,
    RewardsSummaryModel,
    TierCatalogResponse,
    TierModel,
)
from ..services.rewards_service import RewardsApiService

router = APIRouter(prefix="/api/rewards", tags=["rewards"])


def _audience(value: str) -> Audience:
    try:
        return Audience(value.lower())
    except ValueError:
        raise UnknownAudienceException(f"Unknown audience '{value}', expected jobseeker or employer")


@router.post("/jobseeker/evaluate", response_model=RewardsResponse)
def evaluate_jobseeker(
    profile: Dict[str, Any] = Body(...),
    service: RewardsApiService = Depends(get_rewards_service)
):
    """
    Evaluate a job-seeker profile snapshot.

    The body is the raw profile object as returned by the profile backend.
    An authoritative `points` value in the profile takes precedence over
    the locally computed total.
    """
    summary = service.evaluate(Audience.JOBSEEKER, profile)
    return RewardsResponse(success=True, data=RewardsSummaryModel.from_summary(summary))


@router.post("/employer/evaluate", response_model=RewardsResponse)
def evaluate_employer(
    profile: Dict[str, Any] = Body(...),
    service: RewardsApiService = Depends(get_rewards_service)
):
    """Evaluate an employer (company) profile snapshot."""
    summary = service.evaluate(Audience.EMPLOYER, profile)
    return RewardsResponse(success=True, data=RewardsSummaryModel.from_summary(summary))


@router.get("/jobseeker", response_model=RewardsResponse)
def get_jobseeker_rewards(
    token: str = Depends(get_bearer_token),
    service: RewardsApiService = Depends(get_rewards_service)
):
    """Fetch the caller's job-seeker profile from the backend and evaluate it."""
    summary = service.fetch_and_evaluate(Audience.JOBSEEKER, token)
    return RewardsResponse(success=True, data=RewardsSummaryModel.from_summary(summary))


@router.get("/employer", response_model=RewardsResponse)
def get_employer_rewards(
    token: str = Depends(get_bearer_token),
    service: RewardsApiService = Depends(get_rewards_service)
):
    """Fetch the caller's employer profile from the backend and evaluate it."""
    summary = service.fetch_and_evaluate(Audience.EMPLOYER, token)
    return RewardsResponse(success=True, data=RewardsSummaryModel.from_summary(summary))


@router.get("/tiers/{audience}", response_model=TierCatalogResponse)
def get_tier_catalog(
    audience: str,
    service: RewardsApiService = Depends(get_rewards_service)
):
    """
    Get the membership tier catalog.

    - jobseeker: Blue / Silver / Gold / Platinum with experience descriptions
    - employer: Starter / Growing / Advanced / Elite with perks
    """
    resolved = _audience(audience)
    return TierCatalogResponse(
        success=True,
        audience=resolved.value,
        tiers=[TierModel.from_definition(d) for d in service.engine.tier_catalog(resolved)]
    )


@router.post("/redemption/quote", response_model=RedemptionQuoteResponse)
def quote_redemption(
    request: RedemptionQuoteRequest,
    service: RewardsApiService = Depends(get_rewards_service)
):
    """
    Price an order after redeeming points (1 point = 1 currency unit by default).

    Requesting more points than available returns 400.
    """
    quote = service.quote(request.subtotal, request.points, request.available_points)
    return RedemptionQuoteResponse(success=True, quote=RedemptionQuoteModel.from_quote(quote))

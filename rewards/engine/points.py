#!/usr/bin/env python3
"""
Points Aggregation - Reward point totals for job-seekers and employers.

The backend may supply an authoritative total; when it does, that value is
used as-is and the local formula is only a fallback. Results are tagged
(AuthoritativePoints / ComputedPoints) so callers can tell which path ran.

Missing or malformed counters count as zero. Totals are never negative.
"""

from typing import Any, Dict, Optional, Tuple
import logging
import math

from rewards.config_loader import JobSeekerRewardsConfig, EmployerRewardsConfig
from rewards.engine.checklist import get_value
from rewards.engine.models import (
    AuthoritativePoints,
    CompletenessResult,
    ComputedPoints,
    PointsBreakdown,
    PointsSource,
)

logger = logging.getLogger(__name__)

JOBSEEKER_ACTIVITY_COUNTERS = ("applyForJobs", "rmService", "socialMediaBonus")


def parse_number(value: Any) -> Optional[float]:
    """Parse an int/float/numeric string; anything else (incl. bools, NaN) is None."""
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, (int, float)):
        number = float(value)
    elif isinstance(value, str):
        try:
            number = float(value.strip())
        except ValueError:
            return None
    else:
        return None
    if not math.isfinite(number):
        return None
    return number


def coerce_count(value: Any) -> int:
    """Coerce a counter to a non-negative int. Lists count their length."""
    if isinstance(value, (list, tuple)):
        return len(value)
    number = parse_number(value)
    if number is None or number < 0:
        return 0
    return int(number)


def authoritative_points(record: Dict[str, Any]) -> Optional[int]:
    """Backend-supplied total: ``points``, else ``rewards.totalPoints``."""
    for path in ("points", "rewards.totalPoints"):
        number = parse_number(get_value(record, path))
        if number is not None:
            return int(number)
    return None


def referral_points(record: Dict[str, Any]) -> int:
    """Referral bonus: ``referralRewardPoints``, else ``rewards.referFriend``."""
    value = get_value(record, "referralRewardPoints")
    if value is None:
        value = get_value(record, "rewards.referFriend")
    return coerce_count(value)


def split_points(points: int, referral: int) -> Tuple[int, int]:
    """
    Split a total into the referral and activity figures shown on the rewards page.

    Returns: (referral_points, activity_points)
    """
    return referral, max(0, points - referral)


def calculate_jobseeker_breakdown(
    record: Dict[str, Any],
    percentage: int,
    config: JobSeekerRewardsConfig
) -> PointsBreakdown:
    """
    Calculate the local job-seeker point components.

    Formula:
    - base = base_points + percentage * points_per_percent
    - activity = rewards.applyForJobs + rewards.rmService + rewards.socialMediaBonus
    - referral = referralRewardPoints (or rewards.referFriend)
    - raw_total = base + activity + referral
    """
    percentage = max(0, min(100, percentage))
    profile_points = percentage * config.points_per_percent
    activity = sum(
        coerce_count(get_value(record, f"rewards.{counter}"))
        for counter in JOBSEEKER_ACTIVITY_COUNTERS
    )
    referral = referral_points(record)
    deducted = coerce_count(get_value(record, "deductedPoints"))

    raw_total = config.base_points + profile_points + activity + referral

    return PointsBreakdown(
        base=config.base_points,
        profile=profile_points,
        activity=activity,
        referral=referral,
        deducted=deducted,
        raw_total=raw_total,
    )


def compute_jobseeker_points(
    profile: Optional[Dict[str, Any]],
    completeness: CompletenessResult,
    config: Optional[JobSeekerRewardsConfig] = None
) -> PointsSource:
    """
    Compute available points for a job-seeker.

    Args:
        profile: Raw job-seeker profile dict
        completeness: Completeness result for the same profile
        config: Job-seeker rewards config (defaults if omitted)

    Returns:
        AuthoritativePoints when the backend supplied a total, else ComputedPoints
    """
    cfg = config or JobSeekerRewardsConfig()
    record = profile if isinstance(profile, dict) else {}

    authoritative = authoritative_points(record)
    if authoritative is not None:
        if cfg.subtract_deductions_from_authoritative:
            authoritative -= coerce_count(get_value(record, "deductedPoints"))
        logger.debug(f"Using authoritative job-seeker points: {authoritative}")
        return AuthoritativePoints(value=max(0, authoritative))

    breakdown = calculate_jobseeker_breakdown(record, completeness.percentage, cfg)
    available = max(0, breakdown.raw_total - breakdown.deducted)

    logger.debug(
        f"Computed job-seeker points: raw={breakdown.raw_total}, "
        f"deducted={breakdown.deducted}, available={available}"
    )
    return ComputedPoints(value=available, breakdown=breakdown)


def employer_counter(record: Dict[str, Any], name: str) -> int:
    """Employer activity counter: ``<name>Count`` if present, else the length of ``<name>``."""
    explicit = get_value(record, f"{name}Count")
    if explicit is not None:
        return coerce_count(explicit)
    return coerce_count(get_value(record, name))


def calculate_employer_breakdown(
    record: Dict[str, Any],
    completed_fields: int,
    config: EmployerRewardsConfig
) -> PointsBreakdown:
    """
    Calculate the local employer point components.

    Formula:
    - base = base_points
    - profile = points_per_field * completed company fields
    - activity = per-job * postedJobs + per-hire * hires + per-service * premiumServices
    - referral = per-referral * referrals
    """
    profile_points = max(0, completed_fields) * config.points_per_field
    activity = (
        employer_counter(record, "postedJobs") * config.points_per_job +
        employer_counter(record, "hires") * config.points_per_hire +
        employer_counter(record, "premiumServices") * config.points_per_premium_service
    )
    referral = employer_counter(record, "referrals") * config.points_per_referral

    return PointsBreakdown(
        base=config.base_points,
        profile=profile_points,
        activity=activity,
        referral=referral,
        deducted=0,
        raw_total=config.base_points + profile_points + activity + referral,
    )


def compute_employer_points(
    profile: Optional[Dict[str, Any]],
    completeness: CompletenessResult,
    config: Optional[EmployerRewardsConfig] = None
) -> PointsSource:
    """
    Compute points for an employer.

    An authoritative ``points`` value overrides the computed total entirely.
    """
    cfg = config or EmployerRewardsConfig()
    record = profile if isinstance(profile, dict) else {}

    number = parse_number(get_value(record, "points"))
    if number is not None:
        logger.debug(f"Using authoritative employer points: {int(number)}")
        return AuthoritativePoints(value=max(0, int(number)))

    breakdown = calculate_employer_breakdown(record, completeness.completed_count, cfg)
    logger.debug(f"Computed employer points: {breakdown.raw_total}")
    return ComputedPoints(value=max(0, breakdown.raw_total), breakdown=breakdown)

#!/usr/bin/env python3
"""
Rewards Service - Completeness -> Points -> Tier pipeline.

Runs the three pure stages over one profile snapshot:
- Completeness: checklist fields filled in
- Points: authoritative backend total, or the local formula
- Tier: decision table over points and profile attributes, plus progress

No I/O and no caching; every call recomputes from its input.
"""

from typing import Any, Dict, Optional
import logging

from rewards.config_loader import AppConfig
from rewards.engine.checklist import get_checklist, EMPLOYER_CHECKLIST
from rewards.engine.completeness import score_profile
from rewards.engine.models import Audience, RewardsSummary
from rewards.engine import points as points_calculations
from rewards.engine import tiers

logger = logging.getLogger(__name__)


class RewardsService:
    """
    Evaluates job-seeker and employer profiles into a RewardsSummary.
    """

    def __init__(self, config: Optional[AppConfig] = None):
        self.config = config or AppConfig()
        self.jobseeker_checklist = get_checklist(self.config.jobseeker.checklist)
        self.jobseeker_tiers = tiers.jobseeker_tiers(self.config.jobseeker.tier_thresholds)
        self.employer_tiers = tiers.employer_tiers(self.config.employer.tier_thresholds)

    def evaluate_jobseeker(self, profile: Optional[Dict[str, Any]]) -> RewardsSummary:
        """Evaluate a job-seeker profile snapshot."""
        cfg = self.config.jobseeker

        completeness = score_profile(profile, self.jobseeker_checklist)
        source = points_calculations.compute_jobseeker_points(profile, completeness, cfg)
        tier = tiers.classify_jobseeker(profile, source.value, cfg)
        progress = tiers.tier_progress(
            tier, source.value, self.jobseeker_tiers, platinum_gate=cfg.platinum_points
        )

        record = profile if isinstance(profile, dict) else {}
        referral, activity = points_calculations.split_points(
            source.value, points_calculations.referral_points(record)
        )

        logger.debug(
            f"Job-seeker: {completeness.percentage}% complete, "
            f"{source.value} points ({source.kind}), tier={tier.value}"
        )

        return RewardsSummary(
            audience=Audience.JOBSEEKER,
            completeness=completeness,
            points_source=source,
            tier=tier,
            progress=progress,
            referral_points=referral,
            activity_points=activity,
        )

    def evaluate_employer(self, profile: Optional[Dict[str, Any]]) -> RewardsSummary:
        """Evaluate an employer (company) profile snapshot."""
        cfg = self.config.employer

        completeness = score_profile(profile, EMPLOYER_CHECKLIST)
        source = points_calculations.compute_employer_points(profile, completeness, cfg)
        tier = tiers.classify_employer(profile, source.value, cfg)
        record = profile if isinstance(profile, dict) else {}
        progress = tiers.tier_progress(
            tier, source.value, self.employer_tiers,
            platinum_gate=tiers.employer_platinum_gate(record, cfg)
        )

        referral, activity = points_calculations.split_points(
            source.value,
            points_calculations.employer_counter(record, "referrals") * cfg.points_per_referral
        )

        logger.debug(
            f"Employer: {completeness.completed_count}/{completeness.total_fields} fields, "
            f"{source.value} points ({source.kind}), tier={tier.value} (rule={cfg.tier_rule})"
        )

        return RewardsSummary(
            audience=Audience.EMPLOYER,
            completeness=completeness,
            points_source=source,
            tier=tier,
            progress=progress,
            referral_points=referral,
            activity_points=activity,
        )

    def evaluate(self, audience: Audience, profile: Optional[Dict[str, Any]]) -> RewardsSummary:
        if Audience(audience) == Audience.EMPLOYER:
            return self.evaluate_employer(profile)
        return self.evaluate_jobseeker(profile)

    def tier_catalog(self, audience: Audience):
        if Audience(audience) == Audience.EMPLOYER:
            return self.employer_tiers
        return self.jobseeker_tiers

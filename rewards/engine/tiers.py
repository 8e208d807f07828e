#!/usr/bin/env python3
"""
Tier Classification - Map point totals and profile attributes to tiers.

Job-seeker rule (first match wins):
1. points >= platinum_points                        -> Platinum
2. local national OR years >= gold_min_years        -> Gold
3. years >= silver_min_years AND national ID present -> Silver
4. years <= blue_max_years                          -> Blue
5. otherwise                                        -> Silver

Employer rules are two separate decision tables, selected by
EmployerRewardsConfig.tier_rule ("team_size" or "points"). They are never
combined.
"""

from typing import Any, Dict, Optional, Tuple
import logging
import re

from rewards.config_loader import (
    JobSeekerRewardsConfig,
    EmployerRewardsConfig,
    TierThresholds,
)
from rewards.engine.checklist import get_value, is_filled
from rewards.engine.completeness import round_half_up
from rewards.engine.models import Tier, TierDefinition, TierProgress
from rewards.engine.points import parse_number

logger = logging.getLogger(__name__)

_LEADING_NUMBER = re.compile(r'\d+(?:\.\d+)?')


def jobseeker_tiers(thresholds: Optional[TierThresholds] = None) -> Tuple[TierDefinition, ...]:
    t = thresholds or TierThresholds()
    return (
        TierDefinition(Tier.BLUE, "Blue", t.blue, "0-4 Years Experience"),
        TierDefinition(Tier.SILVER, "Silver", t.silver, ">=5 Years Experience + Emirates ID"),
        TierDefinition(Tier.GOLD, "Gold", t.gold, "Emirati National or >=10 Years Experience"),
        TierDefinition(Tier.PLATINUM, "Platinum", t.platinum,
                       "Actively uses platform or purchases Premium Services"),
    )


def employer_tiers(thresholds: Optional[TierThresholds] = None) -> Tuple[TierDefinition, ...]:
    t = thresholds or TierThresholds()
    return (
        TierDefinition(Tier.BLUE, "Starter Tier", t.blue, "Employees: 0 - 100", (
            "Basic support",
            "Access to hiring dashboard",
            "Tier-based points",
        )),
        TierDefinition(Tier.SILVER, "Growing Tier", t.silver, "Employees: 101 - 500", (
            "Earn points faster",
            "Small discount on RM services",
        )),
        TierDefinition(Tier.GOLD, "Advanced Tier", t.gold, "Employees: 501 - 1000", (
            "10% discount on premium HR services",
            "Priority support",
        )),
        TierDefinition(Tier.PLATINUM, "Elite Tier", t.platinum, "Employees: 1000+", (
            "20% discount on all premium HR services",
            "Dedicated RM",
            "Early access to features",
        )),
    )


JOBSEEKER_TIERS = jobseeker_tiers()
EMPLOYER_TIERS = employer_tiers()


def _leading_number(value: Any) -> Optional[float]:
    number = parse_number(value)
    if number is not None:
        return number
    if isinstance(value, str):
        match = _LEADING_NUMBER.search(value.replace(',', ''))
        if match:
            return float(match.group(0))
    return None


def years_of_experience(record: Dict[str, Any]) -> float:
    """Years from the first experience record; '5+', '3.5 years' parse to their leading number."""
    number = _leading_number(get_value(record, "professionalExperience.0.yearsOfExperience"))
    if number is None or number < 0:
        return 0.0
    return number


def team_size(record: Dict[str, Any]) -> int:
    """Lower bound of the team size band: '101-500' -> 101, '1000+' -> 1000."""
    number = _leading_number(get_value(record, "teamSize"))
    if number is None or number < 0:
        return 0
    return int(number)


def is_local_national(record: Dict[str, Any], local_nationalities) -> bool:
    nationality = get_value(record, "nationality")
    if not isinstance(nationality, str):
        return False
    nationality = nationality.lower()
    return any(n.lower() in nationality for n in local_nationalities if n)


def is_top_company(record: Dict[str, Any], top_companies) -> bool:
    name = get_value(record, "companyName")
    if not isinstance(name, str) or not name.strip():
        return False
    name = name.strip().lower()
    return any(name == c.strip().lower() for c in top_companies)


def classify_jobseeker(
    profile: Optional[Dict[str, Any]],
    points: int,
    config: Optional[JobSeekerRewardsConfig] = None
) -> Tier:
    """Classify a job-seeker into a tier. Total over all inputs."""
    cfg = config or JobSeekerRewardsConfig()
    record = profile if isinstance(profile, dict) else {}
    years = years_of_experience(record)

    if points >= cfg.platinum_points:
        return Tier.PLATINUM
    if is_local_national(record, cfg.local_nationalities) or years >= cfg.gold_min_years:
        return Tier.GOLD
    if years >= cfg.silver_min_years and is_filled(get_value(record, "emirateId")):
        return Tier.SILVER
    if years <= cfg.blue_max_years:
        return Tier.BLUE
    return Tier.SILVER


def classify_employer_by_team_size(
    record: Dict[str, Any],
    points: int,
    config: EmployerRewardsConfig
) -> Tier:
    """
    Team-size table.

    | points >= platinum_points                    | Platinum |
    | size <= 100                                  | Blue     |
    | 101 <= size <= 500                           | Silver   |
    | 501 <= size <= 1000, or a top company        | Gold     |
    | size > 1000, points >= large-company points  | Platinum |
    | size > 1000                                  | Gold     |
    """
    size = team_size(record)

    if points >= config.platinum_points:
        return Tier.PLATINUM
    if size <= 100:
        return Tier.BLUE
    if size <= 500:
        return Tier.SILVER
    if size <= 1000 or is_top_company(record, config.top_companies):
        return Tier.GOLD
    if points >= config.large_company_platinum_points:
        return Tier.PLATINUM
    return Tier.GOLD


def classify_employer_by_points(
    record: Dict[str, Any],
    points: int,
    config: EmployerRewardsConfig
) -> Tier:
    """Points table with team-size shortcuts for Gold and Silver."""
    size = team_size(record)

    if points >= config.points_platinum:
        return Tier.PLATINUM
    if points >= config.points_gold or size >= config.gold_team_size:
        return Tier.GOLD
    if points >= config.points_silver or size >= config.silver_team_size:
        return Tier.SILVER
    return Tier.BLUE


def classify_employer(
    profile: Optional[Dict[str, Any]],
    points: int,
    config: Optional[EmployerRewardsConfig] = None
) -> Tier:
    """Classify an employer with the configured decision table."""
    cfg = config or EmployerRewardsConfig()
    record = profile if isinstance(profile, dict) else {}

    if cfg.tier_rule == "points":
        return classify_employer_by_points(record, points, cfg)
    if cfg.tier_rule != "team_size":
        logger.warning(f"Unknown employer tier_rule '{cfg.tier_rule}', defaulting to 'team_size'")
    return classify_employer_by_team_size(record, points, cfg)


def employer_platinum_gate(record: Dict[str, Any], config: EmployerRewardsConfig) -> int:
    """Points the configured employer table needs before it returns Platinum."""
    if config.tier_rule == "points":
        return config.points_platinum
    if team_size(record) > 1000 and not is_top_company(record, config.top_companies):
        return min(config.platinum_points, config.large_company_platinum_points)
    return config.platinum_points


def tier_progress(
    tier: Tier,
    points: int,
    definitions: Tuple[TierDefinition, ...] = JOBSEEKER_TIERS,
    platinum_gate: Optional[int] = None
) -> TierProgress:
    """
    Progress from the current tier's minimum toward the next tier's minimum.

    Formula: clamp(0, 100, (points - current.min) / (next.min - current.min) * 100)
    At the top tier progress is 100 and there is no next tier.

    platinum_gate is the classifier's Platinum threshold. When the next tier
    is Platinum, points_to_next_tier counts toward the higher of it and the
    catalog minimum; progress_percent stays on the catalog thresholds.
    """
    by_tier = {d.tier: d for d in definitions}
    current = by_tier[tier]
    next_tier = tier.next()

    if next_tier is None:
        return TierProgress(current=tier, next_tier=None, progress_percent=100, points_to_next_tier=0)

    upcoming = by_tier[next_tier]
    span = upcoming.min_points - current.min_points

    if span <= 0 or points >= upcoming.min_points:
        progress = 100
    elif points <= current.min_points:
        progress = 0
    else:
        progress = round_half_up((points - current.min_points) * 100, span)

    target = upcoming.min_points
    if next_tier == Tier.PLATINUM and platinum_gate is not None:
        target = max(target, platinum_gate)

    return TierProgress(
        current=tier,
        next_tier=next_tier,
        progress_percent=progress,
        points_to_next_tier=max(0, target - points),
    )

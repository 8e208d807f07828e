import yaml
import os
import logging
from typing import List, Literal
from pydantic import BaseModel, Field

logger = logging.getLogger(__name__)


class BackendConfig(BaseModel):
    """Profile backend the HTTP layer fetches snapshots from."""
    base_url: str = "http://localhost:4000"
    jobseeker_profile_path: str = "/api/v1/profile/details"
    employer_profile_path: str = "/api/v1/employer/profile"
    request_timeout_seconds: int = 15
    retry_attempts: int = 3


class WebConfig(BaseModel):
    host: str = "0.0.0.0"
    port: int = 8080


class TierThresholds(BaseModel):
    """Minimum points per tier, used for next-tier progress only."""
    blue: int = 0
    silver: int = 150
    gold: int = 250
    platinum: int = 350


class JobSeekerRewardsConfig(BaseModel):
    """
    Points and tier rules for job-seekers.

    points = base_points + percentage * points_per_percent + activity + referral - deductions
    """
    checklist: Literal["jobseeker", "jobseeker_extended"] = "jobseeker"
    base_points: int = 50
    points_per_percent: int = 2  # 100% complete = 200 points on top of base

    # Authoritative backend totals are assumed to be already net of deductions
    subtract_deductions_from_authoritative: bool = False

    # Tier rules (evaluated in order, first match wins)
    platinum_points: int = 500
    gold_min_years: float = 10
    silver_min_years: float = 5
    blue_max_years: float = 4
    local_nationalities: List[str] = Field(default_factory=lambda: ["emirati"])

    tier_thresholds: TierThresholds = Field(default_factory=TierThresholds)


DEFAULT_TOP_COMPANIES = [
    "Tech Solutions LLC",
    "Emirates Group",
    "Dubai Holdings",
    "Emaar Properties",
    "Majid Al Futtaim",
    "Etisalat",
    "DP World",
    "Mashreq Bank",
    "Al-Futtaim Group",
    "Jumeirah Group",
]


class EmployerRewardsConfig(BaseModel):
    """
    Points and tier rules for employers.

    Two tier tables exist; tier_rule picks exactly one of them:
    - team_size: team-size bands, points only gate Platinum
    - points: points thresholds with team-size shortcuts
    """
    base_points: int = 50
    points_per_field: int = 25
    points_per_job: int = 30
    points_per_hire: int = 50
    points_per_referral: int = 50
    points_per_premium_service: int = 20

    tier_rule: Literal["team_size", "points"] = "team_size"

    # team_size rule
    platinum_points: int = 500
    large_company_platinum_points: int = 350  # team size above 1000
    top_companies: List[str] = Field(default_factory=lambda: list(DEFAULT_TOP_COMPANIES))

    # points rule
    points_platinum: int = 350
    points_gold: int = 250
    points_silver: int = 150
    gold_team_size: int = 500
    silver_team_size: int = 100

    tier_thresholds: TierThresholds = Field(default_factory=TierThresholds)


class RedemptionConfig(BaseModel):
    point_value: float = 1.0  # currency units per point
    currency: str = "AED"


class AppConfig(BaseModel):
    backend: BackendConfig = Field(default_factory=BackendConfig)
    web: WebConfig = Field(default_factory=WebConfig)
    jobseeker: JobSeekerRewardsConfig = Field(default_factory=JobSeekerRewardsConfig)
    employer: EmployerRewardsConfig = Field(default_factory=EmployerRewardsConfig)
    redemption: RedemptionConfig = Field(default_factory=RedemptionConfig)


def load_config(config_path: str = "config.yaml") -> AppConfig:
    # If not found at relative path (e.g. running from a subdirectory), try the project root
    if not os.path.exists(config_path):
        base_dir = os.path.dirname(os.path.abspath(__file__))
        config_path = os.path.join(base_dir, "..", "config.yaml")

    data = {}
    if os.path.exists(config_path):
        with open(config_path, "r") as f:
            data = yaml.safe_load(f) or {}
    else:
        logger.warning(f"No config file found at {config_path}, using defaults")

    # Allow env var override for the profile backend URL
    env_backend_url = os.environ.get("REWARDS_BACKEND_URL")
    if env_backend_url:
        if data.get('backend') is None:
            data['backend'] = {}
        data['backend']['base_url'] = env_backend_url

    # Allow env var override for the employer tier table
    env_tier_rule = os.environ.get("REWARDS_EMPLOYER_TIER_RULE")
    if env_tier_rule:
        if data.get('employer') is None:
            data['employer'] = {}
        data['employer']['tier_rule'] = env_tier_rule

    # Web server overrides
    if 'WEB_HOST' in os.environ:
        if data.get('web') is None:
            data['web'] = {}
        data['web']['host'] = os.environ['WEB_HOST']

    if 'WEB_PORT' in os.environ:
        if data.get('web') is None:
            data['web'] = {}
        data['web']['port'] = int(os.environ['WEB_PORT'])

    return AppConfig(**data)

#!/usr/bin/env python3
"""
Unit tests for reward point aggregation.
"""

import unittest

from rewards.config_loader import EmployerRewardsConfig, JobSeekerRewardsConfig
from rewards.engine.checklist import EMPLOYER_CHECKLIST
from rewards.engine.completeness import score_profile
from rewards.engine.models import AuthoritativePoints, ComputedPoints
from rewards.engine import points
from tests.fixtures.profile_fixtures import (
    FULL_JOBSEEKER_PROFILE,
    HALF_JOBSEEKER_PROFILE,
    employer_profile,
    jobseeker_profile,
)


def _jobseeker_points(profile, config=None):
    return points.compute_jobseeker_points(profile, score_profile(profile), config)


def _employer_points(profile, config=None):
    return points.compute_employer_points(profile, score_profile(profile, EMPLOYER_CHECKLIST), config)


class TestCounterCoercion(unittest.TestCase):
    """Malformed counters degrade to zero."""

    def test_coerce_count(self):
        self.assertEqual(points.coerce_count(None), 0)
        self.assertEqual(points.coerce_count(12), 12)
        self.assertEqual(points.coerce_count(12.9), 12)
        self.assertEqual(points.coerce_count("30"), 30)
        self.assertEqual(points.coerce_count(" 7 "), 7)
        self.assertEqual(points.coerce_count("abc"), 0)
        self.assertEqual(points.coerce_count(-5), 0)
        self.assertEqual(points.coerce_count(True), 0)
        self.assertEqual(points.coerce_count(float("nan")), 0)
        self.assertEqual(points.coerce_count([1, 2, 3]), 3)
        self.assertEqual(points.coerce_count({"a": 1}), 0)

    def test_split_points(self):
        self.assertEqual(points.split_points(300, 50), (50, 250))
        self.assertEqual(points.split_points(30, 50), (50, 0))


class TestJobSeekerPoints(unittest.TestCase):
    """Job-seeker formula and authoritative override."""

    def test_01_empty_profile(self):
        """Empty profile earns the 50 point base."""
        print("\n📊 UNIT Test 1: Empty Profile Points")

        result = _jobseeker_points({})

        self.assertIsInstance(result, ComputedPoints)
        self.assertFalse(result.is_authoritative)
        self.assertEqual(result.value, 50)

        print(f"  ✓ Points: {result.value} ({result.kind})")

    def test_02_full_profile(self):
        """100% completeness earns 50 + 100 * 2."""
        print("\n📊 UNIT Test 2: Full Profile Points")

        result = _jobseeker_points(FULL_JOBSEEKER_PROFILE)

        self.assertEqual(result.value, 250)
        self.assertEqual(result.breakdown.profile, 200)

        print(f"  ✓ Points: {result.value}")

    def test_03_activity_and_deductions(self):
        """50% profile + 300 application points - 20 deducted."""
        profile = jobseeker_profile(
            HALF_JOBSEEKER_PROFILE,
            rewards={"applyForJobs": 300},
            deductedPoints=20,
        )

        result = _jobseeker_points(profile)

        self.assertEqual(result.breakdown.base + result.breakdown.profile, 150)
        self.assertEqual(result.breakdown.raw_total, 450)
        self.assertEqual(result.value, 430)

    def test_all_activity_counters_are_additive(self):
        profile = {"rewards": {"applyForJobs": 20, "rmService": 100, "socialMediaBonus": 15}}
        result = _jobseeker_points(profile)
        self.assertEqual(result.breakdown.activity, 135)
        self.assertEqual(result.value, 185)

    def test_deductions_never_go_negative(self):
        result = _jobseeker_points({"deductedPoints": 10000})
        self.assertEqual(result.value, 0)

    def test_negative_deduction_is_ignored(self):
        result = _jobseeker_points({"deductedPoints": -100})
        self.assertEqual(result.value, 50)

    def test_referral_points_prefer_top_level_field(self):
        profile = {"referralRewardPoints": 50, "rewards": {"referFriend": 20}}
        self.assertEqual(_jobseeker_points(profile).breakdown.referral, 50)

        profile = {"rewards": {"referFriend": 20}}
        self.assertEqual(_jobseeker_points(profile).breakdown.referral, 20)

    def test_authoritative_points_override(self):
        """Backend total wins even when counters compute to something else."""
        profile = jobseeker_profile(points=999, rewards={"applyForJobs": 0}, deductedPoints=0)
        result = _jobseeker_points(profile)

        self.assertIsInstance(result, AuthoritativePoints)
        self.assertTrue(result.is_authoritative)
        self.assertEqual(result.value, 999)

        self.assertEqual(_jobseeker_points({"points": 999}).value, 999)

    def test_rewards_total_points_is_authoritative(self):
        result = _jobseeker_points({"rewards": {"totalPoints": "420", "applyForJobs": 500}})
        self.assertTrue(result.is_authoritative)
        self.assertEqual(result.value, 420)

    def test_authoritative_deductions_only_when_configured(self):
        profile = {"points": 300, "deductedPoints": 100}
        self.assertEqual(_jobseeker_points(profile).value, 300)

        config = JobSeekerRewardsConfig(subtract_deductions_from_authoritative=True)
        self.assertEqual(_jobseeker_points(profile, config).value, 200)

    def test_non_numeric_authoritative_value_falls_back(self):
        result = _jobseeker_points({"points": "n/a"})
        self.assertFalse(result.is_authoritative)
        self.assertEqual(result.value, 50)

    def test_configurable_weights(self):
        config = JobSeekerRewardsConfig(base_points=10, points_per_percent=1)
        self.assertEqual(_jobseeker_points(FULL_JOBSEEKER_PROFILE, config).value, 110)

    def test_monotonic_in_completeness(self):
        base = _jobseeker_points(HALF_JOBSEEKER_PROFILE).value
        more = _jobseeker_points(jobseeker_profile(HALF_JOBSEEKER_PROFILE, emirateId="784")).value
        self.assertGreaterEqual(more, base)


class TestEmployerPoints(unittest.TestCase):
    """Employer formula and authoritative override."""

    def test_01_full_company_with_posted_jobs(self):
        """8 company fields + 2 posted jobs = 50 + 200 + 60."""
        print("\n📊 UNIT Test 1: Employer Points")

        result = _employer_points(employer_profile(postedJobsCount=2))

        self.assertEqual(result.value, 310)
        self.assertEqual(result.breakdown.profile, 200)
        self.assertEqual(result.breakdown.activity, 60)

        print(f"  ✓ Points: {result.value}")

    def test_empty_employer(self):
        self.assertEqual(_employer_points({}).value, 50)
        self.assertEqual(_employer_points(None).value, 50)

    def test_counters_from_lists(self):
        profile = {
            "postedJobs": [{}, {}, {}],
            "hires": [{}],
            "referrals": [{}, {}],
            "premiumServices": [{}],
        }
        result = _employer_points(profile)
        self.assertEqual(result.value, 50 + 90 + 50 + 100 + 20)
        self.assertEqual(result.breakdown.referral, 100)

    def test_explicit_count_wins_over_list(self):
        profile = {"hiresCount": 4, "hires": [{}]}
        self.assertEqual(points.employer_counter(profile, "hires"), 4)

    def test_authoritative_overrides_entirely(self):
        result = _employer_points(employer_profile(points=75, postedJobsCount=10))
        self.assertTrue(result.is_authoritative)
        self.assertEqual(result.value, 75)

    def test_configurable_weights(self):
        config = EmployerRewardsConfig(base_points=0, points_per_field=10, points_per_job=1)
        result = _employer_points(employer_profile(postedJobsCount=5), config)
        self.assertEqual(result.value, 85)


if __name__ == '__main__':
    unittest.main()

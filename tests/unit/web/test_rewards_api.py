#!/usr/bin/env python3
"""
Unit tests for the rewards API endpoints.
Tests /api/rewards/* with the profile backend replaced by a mock.
"""

import unittest
from unittest.mock import MagicMock, patch

from rewards.config_loader import AppConfig
from rewards.profile_client import ProfileFetchError, ProfileUnauthorizedError
from tests.fixtures.profile_fixtures import (
    FULL_JOBSEEKER_PROFILE,
    employer_profile,
)


class RewardsApiTestCase(unittest.TestCase):
    """Builds an app whose rewards service uses a mocked profile client."""

    def setUp(self):
        from fastapi.testclient import TestClient
        from web.backend.app import create_app
        from web.backend.dependencies import get_rewards_service
        from web.backend.services.rewards_service import RewardsApiService

        self.profile_client = MagicMock()
        self.service = RewardsApiService(AppConfig(), client=self.profile_client)

        self.app = create_app()
        self.app.dependency_overrides[get_rewards_service] = lambda: self.service
        self.client = TestClient(self.app, raise_server_exceptions=False)


class TestEvaluateEndpoints(RewardsApiTestCase):

    def test_evaluate_jobseeker(self):
        print("\n🌐 UNIT Test: POST /api/rewards/jobseeker/evaluate")

        response = self.client.post("/api/rewards/jobseeker/evaluate", json=FULL_JOBSEEKER_PROFILE)

        self.assertEqual(response.status_code, 200)
        body = response.json()
        self.assertTrue(body['success'])
        data = body['data']
        self.assertEqual(data['percentage'], 100)
        self.assertEqual(data['points'], 250)
        self.assertEqual(data['tier'], "Blue")
        self.assertEqual(data['nextTier'], "Silver")
        self.assertEqual(data['pointsSource'], "computed")
        self.assertEqual(data['missingFields'], [])

        print(f"  ✓ {data['points']} points, tier={data['tier']}")

    def test_evaluate_empty_jobseeker(self):
        response = self.client.post("/api/rewards/jobseeker/evaluate", json={})

        self.assertEqual(response.status_code, 200)
        data = response.json()['data']
        self.assertEqual(data['points'], 50)
        self.assertEqual(data['completedCount'], 0)
        self.assertEqual(data['totalFields'], 24)
        self.assertEqual(data['progressToNextTierPercent'], 33)

    def test_evaluate_authoritative_points(self):
        response = self.client.post("/api/rewards/jobseeker/evaluate", json={"points": 520})

        data = response.json()['data']
        self.assertEqual(data['tier'], "Platinum")
        self.assertIsNone(data['nextTier'])
        self.assertEqual(data['pointsSource'], "authoritative")

    def test_evaluate_employer(self):
        response = self.client.post(
            "/api/rewards/employer/evaluate",
            json=employer_profile(postedJobsCount=2)
        )

        self.assertEqual(response.status_code, 200)
        data = response.json()['data']
        self.assertEqual(data['audience'], "employer")
        self.assertEqual(data['points'], 310)
        self.assertEqual(data['tier'], "Blue")

    def test_evaluate_requires_object_body(self):
        response = self.client.post("/api/rewards/jobseeker/evaluate", json=["not", "an", "object"])
        self.assertEqual(response.status_code, 422)


class TestFetchEndpoints(RewardsApiTestCase):

    def test_fetch_jobseeker_forwards_token(self):
        self.profile_client.fetch_jobseeker_profile.return_value = {"points": 300}

        response = self.client.get(
            "/api/rewards/jobseeker",
            headers={"Authorization": "Bearer tok-abc"}
        )

        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.json()['data']['points'], 300)
        self.profile_client.fetch_jobseeker_profile.assert_called_once_with("tok-abc")

    def test_fetch_employer(self):
        self.profile_client.fetch_employer_profile.return_value = employer_profile(teamSize="750")

        response = self.client.get("/api/rewards/employer", headers={"Authorization": "Bearer t"})

        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.json()['data']['tier'], "Gold")

    def test_missing_token(self):
        response = self.client.get("/api/rewards/jobseeker")

        self.assertEqual(response.status_code, 401)
        self.assertFalse(response.json()['success'])
        self.profile_client.fetch_jobseeker_profile.assert_not_called()

    def test_malformed_authorization_header(self):
        response = self.client.get("/api/rewards/jobseeker", headers={"Authorization": "Basic abc"})
        self.assertEqual(response.status_code, 401)

    def test_backend_rejects_token(self):
        self.profile_client.fetch_jobseeker_profile.side_effect = ProfileUnauthorizedError("no")

        response = self.client.get("/api/rewards/jobseeker", headers={"Authorization": "Bearer t"})

        self.assertEqual(response.status_code, 401)
        self.assertEqual(response.json()['type'], "ProfileUnauthorizedError")

    def test_backend_unavailable(self):
        self.profile_client.fetch_employer_profile.side_effect = ProfileFetchError("down")

        response = self.client.get("/api/rewards/employer", headers={"Authorization": "Bearer t"})

        self.assertEqual(response.status_code, 502)


class TestTierCatalogEndpoint(RewardsApiTestCase):

    def test_jobseeker_catalog(self):
        response = self.client.get("/api/rewards/tiers/jobseeker")

        self.assertEqual(response.status_code, 200)
        tiers = response.json()['tiers']
        self.assertEqual([t['tier'] for t in tiers], ["Blue", "Silver", "Gold", "Platinum"])
        self.assertEqual([t['minPoints'] for t in tiers], [0, 150, 250, 350])

    def test_employer_catalog(self):
        response = self.client.get("/api/rewards/tiers/employer")

        tiers = response.json()['tiers']
        self.assertEqual(tiers[0]['label'], "Starter Tier")
        self.assertIn("Dedicated RM", tiers[3]['perks'])

    def test_unknown_audience(self):
        response = self.client.get("/api/rewards/tiers/recruiter")
        self.assertEqual(response.status_code, 404)
        self.assertEqual(response.json()['type'], "UnknownAudienceException")


class TestRedemptionEndpoint(RewardsApiTestCase):

    def test_quote(self):
        response = self.client.post(
            "/api/rewards/redemption/quote",
            json={"subtotal": 499, "points": 100, "availablePoints": 250}
        )

        self.assertEqual(response.status_code, 200)
        quote = response.json()['quote']
        self.assertEqual(quote['total'], 399.0)
        self.assertEqual(quote['pointsUsed'], 100)
        self.assertEqual(quote['remainingPoints'], 150)
        self.assertEqual(quote['currency'], "AED")

    def test_insufficient_points(self):
        response = self.client.post(
            "/api/rewards/redemption/quote",
            json={"subtotal": 100, "points": 300, "availablePoints": 250}
        )

        self.assertEqual(response.status_code, 400)
        self.assertEqual(response.json()['type'], "InsufficientPointsError")

    def test_negative_points_rejected(self):
        response = self.client.post(
            "/api/rewards/redemption/quote",
            json={"subtotal": 100, "points": -5, "availablePoints": 250}
        )
        self.assertEqual(response.status_code, 422)


class TestServiceLifecycle(unittest.TestCase):
    """Profile client is built with the service and closed on app shutdown."""

    def setUp(self):
        from web.backend.dependencies import get_rewards_service

        self.get_rewards_service = get_rewards_service
        self.get_rewards_service.cache_clear()
        self.addCleanup(self.get_rewards_service.cache_clear)

        self.client_cls = patch('web.backend.services.rewards_service.ProfileClient').start()
        patch('web.backend.dependencies.get_config', return_value=AppConfig()).start()
        self.addCleanup(patch.stopall)

    def test_client_built_in_constructor(self):
        from web.backend.services.rewards_service import RewardsApiService

        config = AppConfig()
        service = RewardsApiService(config)

        self.client_cls.from_config.assert_called_once_with(config.backend)
        self.assertIs(service.client, self.client_cls.from_config.return_value)

    def test_injected_client_is_used(self):
        from web.backend.services.rewards_service import RewardsApiService

        injected = MagicMock()
        service = RewardsApiService(AppConfig(), client=injected)

        self.assertIs(service.client, injected)
        self.client_cls.from_config.assert_not_called()

    def test_shutdown_closes_profile_client(self):
        from fastapi.testclient import TestClient
        from web.backend.app import create_app

        with TestClient(create_app()) as client:
            self.assertEqual(client.get("/api/rewards/tiers/jobseeker").status_code, 200)
            profile_client = self.get_rewards_service().client

        profile_client.close.assert_called_once()
        self.assertEqual(self.get_rewards_service.cache_info().currsize, 0)

    def test_shutdown_without_requests_builds_nothing(self):
        from web.backend.app import shutdown_rewards_service

        shutdown_rewards_service()

        self.client_cls.from_config.assert_not_called()


class TestHealth(RewardsApiTestCase):

    def test_health(self):
        response = self.client.get("/health")
        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.json()['status'], "healthy")


if __name__ == '__main__':
    unittest.main()

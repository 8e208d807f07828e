"""HTTP client for the job-board profile backend."""

import logging
from typing import Any, Dict, Optional

import requests
from tenacity import (
    Retrying,
    before_sleep_log,
    retry_if_exception,
    stop_after_attempt,
    wait_fixed,
)

from rewards.config_loader import BackendConfig

logger = logging.getLogger(__name__)


class ProfileClientError(Exception):
    """Base exception for profile backend failures."""
    pass


class ProfileUnauthorizedError(ProfileClientError):
    """The backend rejected the forwarded token (401/403)."""
    pass


class ProfileNotFoundError(ProfileClientError):
    """The backend has no profile for this token (404)."""
    pass


class ProfileFetchError(ProfileClientError):
    """Transport failure, unexpected status, or a malformed envelope."""
    pass


def _is_retryable_error(exc: BaseException) -> bool:
    """Timeouts, dropped connections and 5xx are transient; everything else is final."""
    if isinstance(exc, (requests.Timeout, requests.ConnectionError)):
        return True
    if isinstance(exc, requests.HTTPError):
        status = exc.response.status_code if exc.response is not None else None
        return status is None or status >= 500
    return False


class ProfileClient:
    """
    Fetches profile snapshots on behalf of the signed-in user.

    The caller's bearer token is forwarded as-is. Responses arrive as
    {"success": ..., "data": {...}} and only the data object is returned.
    One requests.Session is reused across calls.
    """

    def __init__(
        self,
        base_url: Optional[str] = None,
        request_timeout_seconds: int = 15,
        retry_attempts: int = 3,
        retry_wait_seconds: float = 1,
        jobseeker_profile_path: str = "/api/v1/profile/details",
        employer_profile_path: str = "/api/v1/employer/profile"
    ):
        """
        Args:
            base_url: Profile backend root, e.g. http://localhost:4000
            request_timeout_seconds: Per-request timeout
            retry_attempts: Total attempts for transient failures (min 1)
            retry_wait_seconds: Pause between attempts
            jobseeker_profile_path: Job-seeker profile endpoint
            employer_profile_path: Employer profile endpoint
        """
        self.base_url = (base_url or "http://localhost:4000").rstrip('/')
        self.request_timeout_seconds = request_timeout_seconds
        self.retry_attempts = max(1, retry_attempts)
        self.retry_wait_seconds = retry_wait_seconds
        self.jobseeker_profile_path = jobseeker_profile_path
        self.employer_profile_path = employer_profile_path
        self.session = requests.Session()

        logger.info(
            f"ProfileClient ready: {self.base_url} "
            f"(timeout={request_timeout_seconds}s, attempts={self.retry_attempts})"
        )

    @classmethod
    def from_config(cls, config: BackendConfig) -> "ProfileClient":
        return cls(
            base_url=config.base_url,
            request_timeout_seconds=config.request_timeout_seconds,
            retry_attempts=config.retry_attempts,
            jobseeker_profile_path=config.jobseeker_profile_path,
            employer_profile_path=config.employer_profile_path,
        )

    def _get(self, path: str, token: str) -> requests.Response:
        response = self.session.get(
            f"{self.base_url}{path}",
            headers={'Authorization': f"Bearer {token}", 'Accept': 'application/json'},
            timeout=self.request_timeout_seconds
        )
        # 5xx raises so the retryer sees it; 4xx is inspected by the caller
        if response.status_code >= 500:
            response.raise_for_status()
        return response

    def fetch_profile(self, path: str, token: str) -> Dict[str, Any]:
        """
        GET one profile snapshot and unwrap its data object.

        Raises:
            ProfileUnauthorizedError: 401/403
            ProfileNotFoundError: 404
            ProfileFetchError: retries exhausted, other non-2xx, or bad envelope
        """
        retryer = Retrying(
            stop=stop_after_attempt(self.retry_attempts),
            wait=wait_fixed(self.retry_wait_seconds),
            retry=retry_if_exception(_is_retryable_error),
            before_sleep=before_sleep_log(logger, logging.WARNING),
            reraise=True
        )

        try:
            response = retryer(self._get, path, token)
        except requests.RequestException as e:
            logger.error(f"Profile fetch {path} failed after {self.retry_attempts} attempt(s): {e}")
            raise ProfileFetchError(f"Profile backend unavailable: {e}") from e

        status = response.status_code
        if status in (401, 403):
            raise ProfileUnauthorizedError(f"Backend rejected credentials ({status})")
        if status == 404:
            raise ProfileNotFoundError(f"No profile found at {path}")
        if not response.ok:
            raise ProfileFetchError(f"Unexpected HTTP {status} from {path}")

        try:
            payload = response.json()
        except ValueError as e:
            raise ProfileFetchError(f"Non-JSON response from {path}") from e

        data = payload.get('data') if isinstance(payload, dict) else None
        if not isinstance(data, dict):
            raise ProfileFetchError(f"Response from {path} has no 'data' object")

        logger.debug(f"Fetched profile from {path} ({len(data)} keys)")
        return data

    def fetch_jobseeker_profile(self, token: str) -> Dict[str, Any]:
        return self.fetch_profile(self.jobseeker_profile_path, token)

    def fetch_employer_profile(self, token: str) -> Dict[str, Any]:
        return self.fetch_profile(self.employer_profile_path, token)

    def close(self):
        self.session.close()
        logger.info("ProfileClient session closed")

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.close()
        return False

#!/usr/bin/env python3
"""
Test suite for the rewards engine and API.

All tests are pure unit tests (no backend or network required):

    # Run all tests
    uv run python -m pytest tests/ -v

The profile backend is always replaced by a mock; see
tests/unit/rewards/test_profile_client.py and tests/unit/web/.
"""

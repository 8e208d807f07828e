"""Findr rewards: profile completeness, reward points and membership tiers."""

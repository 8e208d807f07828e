#!/usr/bin/env python3
"""
Cached application config for the web layer.

Reads REWARDS_CONFIG when set, otherwise <project root>/config.yaml, via
rewards.config_loader.load_config (which applies env overrides).
"""

import os
from pathlib import Path
from functools import lru_cache

from rewards.config_loader import AppConfig, load_config

PROJECT_ROOT = Path(__file__).resolve().parents[2]


@lru_cache()
def get_config() -> AppConfig:
    config_path = os.environ.get("REWARDS_CONFIG") or str(PROJECT_ROOT / "config.yaml")
    return load_config(config_path)

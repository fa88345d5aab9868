#!/usr/bin/env python3
"""
Configuration management for the NicheScout web application.
"""

import os
from pathlib import Path
from functools import lru_cache

from core.config_loader import AppConfig, load_config


@lru_cache()
def get_config() -> AppConfig:
    """
    Get application configuration with caching.

    Reads the file named by NICHESCOUT_CONFIG (default: config.yaml at the
    project root) and applies environment variable overrides.
    """
    default_path = str(get_project_root() / 'config.yaml')
    return load_config(os.environ.get('NICHESCOUT_CONFIG', default_path))


def get_project_root() -> Path:
    """Get the project root directory."""
    return Path(__file__).parent.parent.parent

#!/usr/bin/env python3
"""
Configuration access for the HireAI web application.
"""

import os
from pathlib import Path
from functools import lru_cache

from core.config_loader import AppConfig, load_config

# Path to the config file used by the web app; `main.py --config ... serve` sets it
CONFIG_PATH_ENV = "HIREAI_CONFIG"


@lru_cache()
def get_config() -> AppConfig:
    """
    Get application configuration with caching.

    Loads the file named by HIREAI_CONFIG, else config.yaml from the
    project root (if present), and applies environment variable
    overrides. Result is cached for performance.

    Returns:
        AppConfig: The application configuration.
    """
    path = os.environ.get(CONFIG_PATH_ENV) or str(get_project_root() / 'config.yaml')
    return load_config(path)


def get_project_root() -> Path:
    """Get the project root directory."""
    return Path(__file__).parent.parent.parent

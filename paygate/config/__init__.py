# Configuration package
"""
Configuration package for paygate
Exports settings from settings.py for easy import
"""
from .load_env import load_project_env

load_project_env()

from .settings import Settings, settings  # noqa: E402

__all__ = ["Settings", "settings"]

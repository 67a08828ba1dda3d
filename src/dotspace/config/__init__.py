"""
Configuration module for dotspace.

Uses pydantic-settings for environment variable loading.
"""

from dotspace.config.settings import Settings
from dotspace.config.sources import ConfigFileError, YamlLayersSettingsSource

__all__ = ["ConfigFileError", "Settings", "YamlLayersSettingsSource"]

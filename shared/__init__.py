"""
HillForge Shared Module
=======================

Common utilities, models, and configuration management shared across
all HillForge components.
"""

from shared.config import ForgeConfig, get_config

__all__ = ["ForgeConfig", "get_config"]

"""
Utility modules.

Common helpers for clipboard access, logging, and configuration loading.
"""

from affiliate_converter.utils.clipboard import copy_to_clipboard
from affiliate_converter.utils.config_loader import (
    AppConfig,
    get_affiliate_tag,
    load_config,
    load_env,
)
from affiliate_converter.utils.logging_config import setup_logging

__all__ = [
    "AppConfig",
    "copy_to_clipboard",
    "get_affiliate_tag",
    "load_config",
    "load_env",
    "setup_logging",
]

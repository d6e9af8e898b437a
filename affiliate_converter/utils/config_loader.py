"""
Configuration loader module.

Loads application configuration from YAML files and environment variables.
"""

import logging
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import yaml
from dotenv import load_dotenv

from affiliate_converter.converter.link_builder import AFFILIATE_TAG

logger = logging.getLogger(__name__)

AFFILIATE_TAG_ENV = "AMAZON_AFFILIATE_TAG"


@dataclass
class AffiliateConfig:
    """Affiliate program configuration."""

    tag: str = AFFILIATE_TAG


@dataclass
class LoggingConfig:
    """Logging configuration."""

    level: str = "INFO"
    format: str = "text"  # "text" or "json"
    file: str | None = None


@dataclass
class WebConfig:
    """Web API configuration."""

    host: str = "127.0.0.1"
    port: int = 8000


@dataclass
class AppConfig:
    """
    Main application configuration.

    Aggregates all configuration sections into a single object.
    """

    affiliate: AffiliateConfig = field(default_factory=AffiliateConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)
    web: WebConfig = field(default_factory=WebConfig)


def load_env(env_file: Path = Path(".env")) -> None:
    """
    Load environment variables from .env file.

    Args:
        env_file: Path to .env file.
    """
    if env_file.exists():
        load_dotenv(env_file)
        logger.debug(f"Loaded environment from: {env_file}")
    else:
        logger.debug(f"No .env file found at: {env_file}")


def load_config(config_file: Path = Path("config/config.yaml")) -> AppConfig:
    """
    Load application configuration from YAML file.

    Args:
        config_file: Path to configuration YAML file.

    Returns:
        AppConfig: Loaded configuration object, or defaults if the file
        is missing or empty.

    Raises:
        yaml.YAMLError: If config file is invalid.
    """
    if not config_file.exists():
        logger.warning(f"Config file not found: {config_file}. Using defaults.")
        return AppConfig()

    with open(config_file, encoding="utf-8") as f:
        raw_config = yaml.safe_load(f)

    if raw_config is None:
        return AppConfig()

    config = _parse_config(raw_config)
    logger.info(f"Loaded configuration from: {config_file}")
    return config


def _parse_config(raw: dict[str, Any]) -> AppConfig:
    """
    Parse raw YAML dict into AppConfig dataclass.

    Args:
        raw: Raw dictionary from YAML file.

    Returns:
        AppConfig: Parsed configuration object.
    """
    affiliate_raw = raw.get("affiliate") or {}
    affiliate = AffiliateConfig(
        tag=_parse_tag(affiliate_raw.get("tag")),
    )

    logging_raw = raw.get("logging") or {}
    logging_config = LoggingConfig(
        level=logging_raw.get("level", "INFO"),
        format=logging_raw.get("format", "text"),
        file=logging_raw.get("file"),
    )

    web_raw = raw.get("web") or {}
    web = WebConfig(
        host=web_raw.get("host", "127.0.0.1"),
        port=int(web_raw.get("port", 8000)),
    )

    return AppConfig(affiliate=affiliate, logging=logging_config, web=web)


def _parse_tag(value: Any) -> str:
    """Coerce a configured tag to text; null or blank means the built-in tag."""
    if value is None:
        return AFFILIATE_TAG
    return str(value).strip() or AFFILIATE_TAG


def get_env_var(key: str, default: str | None = None) -> str | None:
    """
    Get an environment variable with optional default.

    Args:
        key: Environment variable name.
        default: Default value if not set.

    Returns:
        Environment variable value or default.
    """
    return os.environ.get(key, default)


def get_affiliate_tag(config: AppConfig | None = None) -> str:
    """
    Get the affiliate tag to use for generated links.

    The AMAZON_AFFILIATE_TAG environment variable takes precedence over the
    config file.
    """
    env_tag = (get_env_var(AFFILIATE_TAG_ENV) or "").strip()
    if env_tag:
        return env_tag
    if config is None:
        return AFFILIATE_TAG
    return _parse_tag(config.affiliate.tag)

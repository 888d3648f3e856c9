"""
Configuration module for the SMS sender.

Every setting can come from a command-line flag or from an environment
variable; a non-empty flag wins. A .env file in the working directory is
loaded with python-dotenv first, without overriding the real environment.
"""

import math
import os
from pathlib import Path
from typing import Mapping, Optional

from dotenv import load_dotenv
from loguru import logger

from sendsms.domain.interfaces import ConfigurationError
from sendsms.domain.models import DEFAULT_API_URL, SHORTENER_PLACEHOLDER, SMSConfig


# =============================================================================
# Setting names
# =============================================================================

ENV_VARS = {
    "from_address": "SMS_FROM",
    "to_address": "SMS_TO",
    "account_sid": "SMS_ACCOUNTSID",
    "auth_token": "SMS_AUTHTOKEN",
    "shortener_template": "SMS_SHORTENER",
    "long_url": "SMS_URL",
    "api_url": "SMS_API_URL",
    "timeout": "SMS_TIMEOUT",
}
"""Config field -> environment variable fallback."""

FLAGS = {
    "from_address": "-from",
    "to_address": "-to",
    "account_sid": "-sid",
    "auth_token": "-token",
    "shortener_template": "-shortener",
    "long_url": "-url",
    "api_url": "-api-url",
    "timeout": "-timeout",
}
"""Config field -> command-line flag."""

REQUIRED_FIELDS = ("from_address", "to_address", "account_sid", "auth_token")


def load_env_file(env_file: Optional[Path] = None) -> bool:
    """
    Load a .env file into os.environ if it exists.

    Args:
        env_file: Path to the file (default: .env in the working directory)

    Returns:
        True if a file was loaded
    """
    env_file = env_file or Path.cwd() / ".env"
    if not env_file.exists():
        return False
    logger.debug(f"Loading environment from {env_file}")
    return load_dotenv(env_file, override=False)


def get_setting(
    field: str,
    values: Mapping[str, Optional[str]],
    environ: Mapping[str, str],
) -> Optional[str]:
    """
    Resolve one setting from flags, then environment.

    Empty strings from either source count as unset.

    Args:
        field: Config field name
        values: Parsed flag values keyed by field name
        environ: Environment mapping

    Returns:
        Setting value or None
    """
    value = values.get(field)
    if value:
        return value
    return environ.get(ENV_VARS[field]) or None


def missing_message(field: str) -> str:
    """Error text for a required setting that was not supplied."""
    return f"{FLAGS[field]} flag or {ENV_VARS[field]} environment variable must be supplied"


def _parse_timeout(raw: Optional[str]) -> Optional[float]:
    if raw is None:
        return None
    try:
        timeout = float(raw)
    except ValueError as e:
        raise ConfigurationError(f"Invalid timeout: {raw!r} is not a number") from e
    if not math.isfinite(timeout):
        raise ConfigurationError(f"Invalid timeout: {raw!r} must be a finite number")
    if timeout <= 0:
        raise ConfigurationError(f"Invalid timeout: {raw!r} must be positive")
    return timeout


def resolve_config(
    values: Mapping[str, Optional[str]],
    environ: Optional[Mapping[str, str]] = None,
) -> SMSConfig:
    """
    Build and validate the configuration.

    Args:
        values: Parsed flag values keyed by config field name
        environ: Environment mapping (default: os.environ)

    Returns:
        Validated SMSConfig

    Raises:
        ConfigurationError: If a required setting is missing or invalid
    """
    if environ is None:
        environ = os.environ

    settings = {field: get_setting(field, values, environ) for field in ENV_VARS}

    for field in REQUIRED_FIELDS:
        if not settings[field]:
            raise ConfigurationError(missing_message(field))

    if settings["long_url"]:
        template = settings["shortener_template"]
        if not template:
            raise ConfigurationError(
                "If -url (SMS_URL) is given, -shortener (SMS_SHORTENER) must also be given"
            )
        if template.count(SHORTENER_PLACEHOLDER) != 1:
            raise ConfigurationError(
                f"-shortener (SMS_SHORTENER) must contain '{SHORTENER_PLACEHOLDER}' exactly once"
            )

    api_url = settings["api_url"] or DEFAULT_API_URL
    if "{account_sid}" not in api_url:
        raise ConfigurationError("-api-url (SMS_API_URL) must contain '{account_sid}'")

    return SMSConfig(
        from_address=settings["from_address"],
        to_address=settings["to_address"],
        account_sid=settings["account_sid"],
        auth_token=settings["auth_token"],
        shortener_template=settings["shortener_template"],
        long_url=settings["long_url"],
        api_url=api_url,
        timeout=_parse_timeout(settings["timeout"]),
    )

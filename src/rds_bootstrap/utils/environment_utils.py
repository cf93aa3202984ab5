"""
Environment utility functions for configuration and environment detection.
"""

import os
from typing import Optional, Dict, Iterable

from rds_bootstrap.config.db_config import APP_DEFAULTS, PRODUCTION_ENV

TRUE_VALUES = ("1", "true", "on", "yes")

SNAPSHOT_PREFIXES = ("RDS_", "DB_", "APP_", "SNS_", "AWS_")
SENSITIVE_VARS = [
    "RDS_DB_PASSWORD",
    "DB_PASS",
    "AWS_SECRET_ACCESS_KEY",
    "AWS_SESSION_TOKEN",
]


def get_env(name: str) -> Optional[str]:
    """Get an environment variable, treating empty values as unset."""
    value = os.getenv(name)
    if value is None or value == "":
        return None
    return value


def get_env_chain(names: Iterable[str], default: Optional[str] = None) -> Optional[str]:
    """Return the first non-empty value from a chain of environment variables."""
    for name in names:
        value = get_env(name)
        if value is not None:
            return value
    return default


def parse_bool(value: Optional[str], default: bool = False) -> bool:
    """
    Parse a flag-like string.

    Accepts 1/true/on/yes (case-insensitive) as true; anything else set is
    false. Unset or empty values return the default.
    """
    if value is None or value == "":
        return default
    return value.strip().lower() in TRUE_VALUES


def get_env_bool(name: str, default: bool = False) -> bool:
    """Get a boolean environment variable."""
    return parse_bool(get_env(name), default)


def get_app_environment() -> str:
    """Get current application environment (production/staging/development...)."""
    return get_env_chain(["APP_ENV"], APP_DEFAULTS["app_env"])


def is_production() -> bool:
    """Check if running in production environment."""
    return get_app_environment() == PRODUCTION_ENV


def is_aws_elastic_beanstalk() -> bool:
    """Check if running on AWS Elastic Beanstalk."""
    return bool(get_env("ELASTICBEANSTALK_ENVIRONMENT_NAME"))


def is_docker() -> bool:
    """Check if running inside a Docker container."""
    return bool(get_env("DOCKER"))


def get_platform_info() -> Dict[str, str]:
    """Get deployment platform information."""
    return {
        "environment": get_app_environment(),
        "eb_environment": get_env("ELASTICBEANSTALK_ENVIRONMENT_NAME") or "none",
        "is_aws_eb": str(is_aws_elastic_beanstalk()),
        "is_docker": str(is_docker()),
    }


def mask_sensitive_value(value: str, mask_char: str = "*") -> str:
    """Mask sensitive values for logging."""
    if not value or len(value) <= 4:
        return mask_char * len(value) if value else ""
    return value[:2] + mask_char * (len(value) - 4) + value[-2:]


def log_environment_variables(logger, sensitive_vars: Optional[list] = None) -> None:
    """Log bootstrap-related environment variables for debugging."""
    if sensitive_vars is None:
        sensitive_vars = SENSITIVE_VARS

    for var in sorted(os.environ):
        if var.startswith(SNAPSHOT_PREFIXES):
            value = os.environ[var]
            if var in sensitive_vars:
                logger.debug(f"Environment variable {var}: {mask_sensitive_value(value)}")
            else:
                logger.debug(f"Environment variable {var}: {value}")

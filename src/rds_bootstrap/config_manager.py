"""
Centralized Configuration Management

Resolves database and application settings from the environment once per
process, using the chains and defaults in rds_bootstrap.config.db_config.
"""

import os
from dataclasses import dataclass, field
from typing import Dict, List, Optional, Tuple, Any

from dotenv import load_dotenv

from rds_bootstrap.config.db_config import (
    APP_DEFAULTS,
    DB_DEFAULTS,
    DB_ENV_CHAINS,
    PRODUCTION_ENV,
)
from rds_bootstrap.utils.environment_utils import (
    get_env,
    get_env_bool,
    get_env_chain,
    is_aws_elastic_beanstalk,
    is_docker,
    mask_sensitive_value,
)

# Global logger for config manager
_config_logger = None

# Messages logged before a config logger exists, replayed once one is set
_pending_messages: List[Tuple[str, str]] = []


def set_config_logger(logger):
    """Set the logger for config manager and replay held messages."""
    global _config_logger
    _config_logger = logger
    if logger is None:
        _pending_messages.clear()
        return
    while _pending_messages:
        level, message = _pending_messages.pop(0)
        _emit(logger, message, level)


def config_log(message: str, level: str = "INFO"):
    """Log message using config logger if available, otherwise hold it until one is set."""
    if _config_logger is None:
        _pending_messages.append((level, message))
        return
    _emit(_config_logger, message, level)


def _emit(logger, message: str, level: str):
    if level == "INFO":
        logger.info(message)
    elif level == "WARNING":
        logger.warning(message)
    elif level == "ERROR":
        logger.error(message)
    elif level == "DEBUG":
        logger.debug(message)


# Project root (parent of src/)
PROJECT_ROOT = os.path.dirname(
    os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
)

SSL_MODES = ("disable", "allow", "prefer", "require", "verify-ca", "verify-full")


class ConfigurationError(Exception):
    """Configuration error exception"""

    pass


@dataclass(frozen=True)
class DatabaseConfig:
    """Database connection configuration"""

    host: str
    port: int
    database: str
    user: str
    password: str = field(default="", repr=False)
    sslmode: str = "prefer"

    def to_dict(self, masked: bool = False) -> Dict[str, Any]:
        """Convert to dictionary, optionally masking the password for logs"""
        return {
            "host": self.host,
            "port": self.port,
            "database": self.database,
            "user": self.user,
            "password": mask_sensitive_value(self.password) if masked else self.password,
            "sslmode": self.sslmode,
        }

    def dsn_summary(self) -> str:
        """Short host/database label for log lines"""
        return f"{self.host}/{self.database}"

    def validate(self) -> bool:
        """Validate configuration"""
        if not self.host.strip():
            raise ConfigurationError("Database host is empty")
        if not self.database.strip():
            raise ConfigurationError("Database name is empty")
        if not 0 < self.port < 65536:
            raise ConfigurationError(f"Database port out of range: {self.port}")
        if self.sslmode not in SSL_MODES:
            raise ConfigurationError(
                f"Unknown sslmode '{self.sslmode}', expected one of {', '.join(SSL_MODES)}"
            )
        if not self.password:
            config_log("WARNING: Database password is empty", "WARNING")
        return True


@dataclass(frozen=True)
class AppConfig:
    """Application-level settings"""

    app_debug: bool = False
    log_level: str = "info"
    app_env: str = "production"
    enable_cloudwatch: bool = True
    sns_topic_arn: Optional[str] = None
    aws_region: str = "us-east-1"
    is_aws_eb: bool = False
    is_docker: bool = False

    @property
    def is_production(self) -> bool:
        return self.app_env == PRODUCTION_ENV


class ConfigManager:
    """Centralized configuration management"""

    def __init__(self, env_file: Optional[str] = None):
        self.env_file = env_file or os.path.join(PROJECT_ROOT, ".env")
        self._db_config = None
        self._app_config = None
        self._configs_loaded = False

    def _ensure_configs_loaded(self):
        """Ensure configurations are loaded."""
        if not self._configs_loaded:
            self._load_configs()
            self.validate_all()
            self._configs_loaded = True

    def _load_env_file(self):
        """Load a .env file if present; real environment variables win."""
        if os.path.exists(self.env_file):
            load_dotenv(self.env_file, override=False)
            config_log(f"Loaded environment from: {self.env_file}")
        else:
            config_log(f"No .env file found at: {self.env_file}", "DEBUG")

    def _load_configs(self):
        """Load all configurations"""
        self._load_env_file()
        self._load_database_config()
        self._load_app_config()
        config_log("All configurations loaded successfully", "DEBUG")

    def _load_database_config(self):
        """Load database configuration from the RDS/generic variable chains"""
        values = {
            key: get_env_chain(names, DB_DEFAULTS[key])
            for key, names in DB_ENV_CHAINS.items()
        }

        try:
            port = int(values["port"])
        except ValueError:
            raise ConfigurationError(f"Database port is not an integer: {values['port']}")

        self._db_config = DatabaseConfig(
            host=values["host"],
            port=port,
            database=values["database"],
            user=values["user"],
            password=values["password"],
            sslmode=values["sslmode"].lower(),
        )

    def _load_app_config(self):
        """Load application configuration"""
        self._app_config = AppConfig(
            app_debug=get_env_bool("APP_DEBUG", APP_DEFAULTS["app_debug"]),
            log_level=get_env_chain(["LOG_LEVEL"], APP_DEFAULTS["log_level"]).lower(),
            app_env=get_env_chain(["APP_ENV"], APP_DEFAULTS["app_env"]),
            enable_cloudwatch=get_env_bool(
                "ENABLE_CLOUDWATCH", APP_DEFAULTS["enable_cloudwatch"]
            ),
            sns_topic_arn=get_env("SNS_TOPIC_ARN"),
            aws_region=get_env_chain(
                ["AWS_REGION", "AWS_DEFAULT_REGION"], APP_DEFAULTS["aws_region"]
            ),
            is_aws_eb=is_aws_elastic_beanstalk(),
            is_docker=is_docker(),
        )

    @property
    def database(self) -> DatabaseConfig:
        self._ensure_configs_loaded()
        return self._db_config

    @property
    def app(self) -> AppConfig:
        self._ensure_configs_loaded()
        return self._app_config

    def validate_all(self) -> bool:
        """Validate all configurations"""
        try:
            self._db_config.validate()
        except ConfigurationError as e:
            config_log(f"Configuration validation failed: {e}", "ERROR")
            raise
        return True


# Global configuration instance
_config_manager = None


def get_config() -> ConfigManager:
    """Get global configuration manager instance"""
    global _config_manager
    if _config_manager is None:
        _config_manager = ConfigManager()
    return _config_manager


def reload_config(env_file: Optional[str] = None) -> ConfigManager:
    """Reload configuration"""
    global _config_manager
    _config_manager = ConfigManager(env_file)
    return _config_manager


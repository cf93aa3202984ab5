"""
Logging service for centralized log management.
"""

import logging
import os
import sys
from datetime import datetime
from pathlib import Path
from typing import Optional

from rds_bootstrap.config_manager import AppConfig
from rds_bootstrap.utils.environment_utils import (
    get_platform_info,
    log_environment_variables,
)

LOG_LEVELS = {
    "debug": logging.DEBUG,
    "info": logging.INFO,
    "notice": logging.INFO,
    "warning": logging.WARNING,
    "warn": logging.WARNING,
    "error": logging.ERROR,
    "critical": logging.CRITICAL,
}


def resolve_log_level(log_level: str, debug: bool = False) -> int:
    """Map a LOG_LEVEL name to a logging level; debug mode always wins."""
    if debug:
        return logging.DEBUG
    return LOG_LEVELS.get((log_level or "").lower(), logging.INFO)


class LoggingService:
    """Centralized logging service for the bootstrap."""

    def __init__(
        self,
        app_config: AppConfig,
        service_name: str = "RDSBootstrap",
        log_directory: str = "logs",
    ):
        self.app_config = app_config
        self.service_name = service_name
        self.log_directory = log_directory
        self.log_file: Optional[Path] = None
        self.level = resolve_log_level(app_config.log_level, app_config.app_debug)
        self.logger = self._setup_logger()

        if (app_config.log_level or "").lower() not in LOG_LEVELS:
            self.logger.warning(
                f"Unknown LOG_LEVEL '{app_config.log_level}', using info"
            )

        if app_config.enable_cloudwatch:
            self._remove_file_handlers()
        else:
            self.create_file_logger()

    def _setup_logger(self) -> logging.Logger:
        """Setup logging on stderr, which Elastic Beanstalk ships to CloudWatch."""
        logger = logging.getLogger(self.service_name)
        logger.setLevel(self.level)
        logger.propagate = False

        console_formatter = logging.Formatter(
            f"%(asctime)s - ENV:{self.app_config.app_env} - %(levelname)s - %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        )

        # The logger outlives this service; later bootstraps must see their own level
        console_handlers = [
            h for h in logger.handlers if not isinstance(h, logging.FileHandler)
        ]
        if not console_handlers:
            console_handler = logging.StreamHandler(sys.stderr)
            logger.addHandler(console_handler)
            console_handlers = [console_handler]

        for handler in logger.handlers:
            handler.setLevel(self.level)
        for handler in console_handlers:
            handler.setFormatter(console_formatter)

        return logger

    def _remove_file_handlers(self) -> None:
        """Drop local file handlers left by an earlier bootstrap."""
        for handler in list(self.logger.handlers):
            if isinstance(handler, logging.FileHandler):
                handler.close()
                self.logger.removeHandler(handler)

    def create_file_logger(self) -> None:
        """Add a daily local log file when CloudWatch shipping is disabled."""
        today = datetime.now().strftime("%Y%m%d")
        log_dir = Path(self.log_directory) / today

        try:
            log_dir.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            self.logger.warning(f"Could not create log directory {log_dir}: {e}")
            return

        self.log_file = log_dir / "db_bootstrap.log"
        log_path = os.path.abspath(str(self.log_file))
        for handler in self.logger.handlers:
            if isinstance(handler, logging.FileHandler) and handler.baseFilename == log_path:
                return

        file_handler = logging.FileHandler(
            filename=str(self.log_file), mode="a", encoding="utf-8"
        )
        file_handler.setLevel(self.level)
        file_handler.setFormatter(
            logging.Formatter(
                "%(asctime)s - %(levelname)s - %(message)s",
                datefmt="%Y-%m-%d %H:%M:%S",
            )
        )
        self.logger.addHandler(file_handler)
        self.logger.debug(f"Local log file: {self.log_file}")

    def log_startup_info(self) -> None:
        """Log startup information."""
        platform = get_platform_info()
        self.logger.info("=== DATABASE BOOTSTRAP STARTING ===")
        self.logger.info(f"APP_ENV: {self.app_config.app_env}")
        self.logger.debug(
            f"Elastic Beanstalk: {self.app_config.is_aws_eb} ({platform['eb_environment']})"
        )
        self.logger.debug(f"Docker: {self.app_config.is_docker}")
        if self.app_config.app_debug:
            log_environment_variables(self)

    def info(self, message: str) -> None:
        """Log info message."""
        self.logger.info(message)

    def error(self, message: str) -> None:
        """Log error message."""
        self.logger.error(message)

    def warning(self, message: str) -> None:
        """Log warning message."""
        self.logger.warning(message)

    def debug(self, message: str) -> None:
        """Log debug message."""
        self.logger.debug(message)

    def flush(self) -> None:
        """Force flush all log handlers."""
        for handler in self.logger.handlers:
            handler.flush()

    def close(self) -> None:
        """Detach and close handlers so repeated bootstraps start clean."""
        for handler in list(self.logger.handlers):
            handler.flush()
            handler.close()
            self.logger.removeHandler(handler)

"""
Bootstrap service that coordinates configuration, logging, connection and alerting.
"""

import sys
import time
from typing import Optional

from rds_bootstrap.config_manager import ConfigManager, get_config, set_config_logger
from rds_bootstrap.database_service import DatabaseConnectionError, DatabaseService
from rds_bootstrap.models.connection_result import ConnectionResult
from rds_bootstrap.services.logging_service import LoggingService
from rds_bootstrap.services.notification_service import NotificationService

PRODUCTION_DISPLAY_MESSAGE = (
    "Unable to connect to database. Please contact administrator."
)
NOTIFICATION_SUBJECT = "Database Connection Failed"


def build_error_message(error: Exception) -> str:
    """Full error text, always logged locally."""
    return f"Database Connection Error: {error}"


def build_display_message(error_message: str, production: bool) -> str:
    """User-facing text; database details are hidden in production."""
    if production:
        return PRODUCTION_DISPLAY_MESSAGE
    return error_message


class DatabaseBootstrap:
    """Resolves configuration and opens the application's database connection."""

    def __init__(
        self,
        config: Optional[ConfigManager] = None,
        logger: Optional[LoggingService] = None,
        notification_service: Optional[NotificationService] = None,
    ):
        self.config = config or get_config()
        self.app_config = self.config.app
        self.db_config = self.config.database

        self.logger = logger or LoggingService(self.app_config)
        set_config_logger(self.logger)

        self.database_service = DatabaseService(
            self.db_config, self.app_config, self.logger
        )
        self.notification_service = notification_service or NotificationService(
            self.app_config.sns_topic_arn, self.app_config.aws_region, self.logger
        )

    def try_connect(self) -> ConnectionResult:
        """Attempt one connection and report failures without exiting."""
        self.logger.log_startup_info()
        self.logger.debug(f"Database settings: {self.db_config.to_dict(masked=True)}")
        started = time.monotonic()

        try:
            conn = self.database_service.get_connection()
        except DatabaseConnectionError as e:
            return self._handle_failure(e, time.monotonic() - started)

        return ConnectionResult(
            success=True,
            database=self.db_config.dsn_summary(),
            connection=conn,
            elapsed=time.monotonic() - started,
        )

    def _handle_failure(
        self, error: DatabaseConnectionError, elapsed: float
    ) -> ConnectionResult:
        """Log, redact and alert on a connection failure."""
        error_message = build_error_message(error)
        self.logger.error(error_message)
        if error.original is not None:
            self.logger.debug(f"Driver error type: {type(error.original).__name__}")

        display_message = build_display_message(
            error_message, self.app_config.is_production
        )

        notified = self.notification_service.send_notification(
            NOTIFICATION_SUBJECT, error_message
        )

        return ConnectionResult(
            success=False,
            database=self.db_config.dsn_summary(),
            error_message=error_message,
            display_message=display_message,
            notified=notified,
            elapsed=elapsed,
        )

    def connect(self):
        """Return a live connection or terminate the process."""
        result = self.try_connect()
        if not result.success:
            self.logger.flush()
            sys.exit(result.exit_message)
        return result.connection


def connect_or_exit():
    """Open the application's database connection using the process configuration."""
    return DatabaseBootstrap().connect()

"""
Database Service using psycopg2
Builds connection options from resolved configuration and opens a single connection
"""

from typing import Any, Dict, Optional

import psycopg2
from psycopg2.extras import RealDictCursor

from rds_bootstrap.config.db_config import EB_SSLMODE
from rds_bootstrap.config_manager import AppConfig, DatabaseConfig


class DatabaseConnectionError(Exception):
    """Raised when the database connection cannot be established"""

    def __init__(self, message: str, original: Optional[BaseException] = None):
        super().__init__(message)
        self.original = original


class DatabaseService:
    """
    Database service using psycopg2 for a single bootstrap connection
    """

    def __init__(self, db_config: DatabaseConfig, app_config: AppConfig, logger):
        self.db_config = db_config
        self.app_config = app_config
        self.logger = logger

    def build_connection_options(self) -> Dict[str, Any]:
        """Build keyword arguments for psycopg2.connect"""
        options = {
            "host": self.db_config.host,
            "port": self.db_config.port,
            "dbname": self.db_config.database,
            "user": self.db_config.user,
            "password": self.db_config.password,
            "client_encoding": "utf8",
            "cursor_factory": RealDictCursor,
            "sslmode": self.db_config.sslmode,
        }

        # SSL options for RDS
        if self.app_config.is_aws_eb:
            options["sslmode"] = EB_SSLMODE

        return options

    def get_connection(self):
        """Open one psycopg2 connection or raise DatabaseConnectionError"""
        options = self.build_connection_options()
        self.logger.debug(
            f"Connecting to {self.db_config.dsn_summary()} as {self.db_config.user} "
            f"(sslmode={options['sslmode']})"
        )

        try:
            conn = psycopg2.connect(**options)
        except psycopg2.Error as e:
            raise DatabaseConnectionError(str(e).strip(), original=e) from e

        self.logger.info("Database connection established successfully")
        return conn

    def check_version(self, conn) -> bool:
        """Run a version query on an open connection, then close it"""
        try:
            with conn.cursor() as cursor:
                cursor.execute("SELECT version() AS version")
                row = cursor.fetchone()
            self.logger.info(f"PostgreSQL version: {row['version']}")
            return True
        except psycopg2.Error as e:
            self.logger.error(f"Version query failed: {str(e).strip()}")
            return False
        finally:
            conn.close()

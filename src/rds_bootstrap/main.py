"""
RDS Database Bootstrap

Resolves database settings from the environment and opens the application's
connection. Exits with status 1 when the database is unreachable.

Usage:
    rds-bootstrap            # Connect once, report and close
    rds-bootstrap --check    # Connect and run a version query
"""

import argparse
import sys

from rds_bootstrap.config_manager import ConfigurationError
from rds_bootstrap.services.bootstrap_service import DatabaseBootstrap


def parse_args(argv=None):
    parser = argparse.ArgumentParser(
        prog="rds-bootstrap",
        description="Open the application database connection from environment settings.",
    )
    parser.add_argument(
        "--check",
        action="store_true",
        help="run SELECT version() against the database after connecting",
    )
    return parser.parse_args(argv)


def main(argv=None):
    """
    Main entry point.

    Returns a process exit code; a failed connection exits through
    DatabaseBootstrap.connect().
    """
    args = parse_args(argv)

    try:
        bootstrap = DatabaseBootstrap()

        if args.check:
            result = bootstrap.try_connect()
            if not result.success:
                bootstrap.logger.flush()
                print(result.exit_message, file=sys.stderr)
                return 1
            return 0 if bootstrap.database_service.check_version(result.connection) else 1

        conn = bootstrap.connect()
        conn.close()
        bootstrap.logger.info("=== DATABASE BOOTSTRAP END - SUCCESS ===")
        return 0

    except ConfigurationError as e:
        print(f"Configuration error: {e}", file=sys.stderr)
        return 1

    except KeyboardInterrupt:
        print("\nBootstrap stopped by user", file=sys.stderr)
        return 0


if __name__ == "__main__":
    sys.exit(main())

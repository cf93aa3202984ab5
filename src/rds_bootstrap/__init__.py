"""
Database connection bootstrap for AWS RDS and local development.
"""

from rds_bootstrap.services.bootstrap_service import DatabaseBootstrap, connect_or_exit

__all__ = ["DatabaseBootstrap", "connect_or_exit"]
__version__ = "1.0.0"

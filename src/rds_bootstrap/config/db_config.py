"""
Database connection configuration (environment-driven)
=====================================================

This module defines where every bootstrap setting is read from and the
defaults used when nothing is set. It intentionally contains no secrets
and is safe to commit.

ENVIRONMENT VARIABLES:
---------------------
Connection (RDS-specific name first, generic name second):
- RDS_DB_HOST / DB_HOST: Database server hostname (default: localhost)
- RDS_DB_USER / DB_USER: Database username (default: root)
- RDS_DB_PASSWORD / DB_PASS: Database password (default: empty)
- RDS_DB_NAME / DB_NAME: Database name (default: library)
- RDS_DB_PORT / DB_PORT: Database server port (default: 5432)
- DB_SSLMODE: SSL mode for connection (default: prefer)
  Options: disable, allow, prefer, require, verify-ca, verify-full

Application:
- APP_DEBUG: Enable debug logging (default: false)
- LOG_LEVEL: Log level name (default: info)
- APP_ENV: Environment name; "production" redacts error details
- ENABLE_CLOUDWATCH: Logs go to the console for CloudWatch (default: true)
- SNS_TOPIC_ARN: Topic for connection failure alerts (optional)
- AWS_REGION / AWS_DEFAULT_REGION: Region for the SNS client (default: us-east-1)

Platform detection:
- ELASTICBEANSTALK_ENVIRONMENT_NAME: Set on AWS Elastic Beanstalk
- DOCKER: Set inside Docker containers

An empty variable counts as unset and falls through to the next name.

EXAMPLE ENVIRONMENT SETUP:
-------------------------
export RDS_DB_HOST=mydb.abc123.us-east-1.rds.amazonaws.com
export RDS_DB_USER=app
export RDS_DB_PASSWORD=secret
export RDS_DB_NAME=library
export APP_ENV=staging
export SNS_TOPIC_ARN=arn:aws:sns:us-east-1:123456789012:db-alerts
"""

DB_ENV_CHAINS = {
    "host": ["RDS_DB_HOST", "DB_HOST"],
    "user": ["RDS_DB_USER", "DB_USER"],
    "password": ["RDS_DB_PASSWORD", "DB_PASS"],
    "database": ["RDS_DB_NAME", "DB_NAME"],
    "port": ["RDS_DB_PORT", "DB_PORT"],
    "sslmode": ["DB_SSLMODE"],
}

DB_DEFAULTS = {
    "host": "localhost",
    "user": "root",
    "password": "",
    "database": "library",
    "port": "5432",
    "sslmode": "prefer",
}

# APP_ENV value that redacts error details
PRODUCTION_ENV = "production"

APP_DEFAULTS = {
    "app_debug": False,
    "log_level": "info",
    "app_env": PRODUCTION_ENV,
    "enable_cloudwatch": True,
    "aws_region": "us-east-1",
}

# Elastic Beanstalk connects to RDS over TLS without verifying the server certificate
EB_SSLMODE = "require"

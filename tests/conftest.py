import pytest

from rds_bootstrap.config_manager import ConfigManager, set_config_logger

BOOTSTRAP_ENV_VARS = [
    "RDS_DB_HOST",
    "DB_HOST",
    "RDS_DB_USER",
    "DB_USER",
    "RDS_DB_PASSWORD",
    "DB_PASS",
    "RDS_DB_NAME",
    "DB_NAME",
    "RDS_DB_PORT",
    "DB_PORT",
    "DB_SSLMODE",
    "APP_DEBUG",
    "LOG_LEVEL",
    "APP_ENV",
    "ENABLE_CLOUDWATCH",
    "SNS_TOPIC_ARN",
    "AWS_REGION",
    "AWS_DEFAULT_REGION",
    "ELASTICBEANSTALK_ENVIRONMENT_NAME",
    "DOCKER",
]


class RecordingLogger:
    """Collects log calls made through the LoggingService interface."""

    def __init__(self):
        self.records = []

    def _record(self, level, message):
        self.records.append((level, message))

    def info(self, message):
        self._record("INFO", message)

    def error(self, message):
        self._record("ERROR", message)

    def warning(self, message):
        self._record("WARNING", message)

    def debug(self, message):
        self._record("DEBUG", message)

    def log_startup_info(self):
        self._record("INFO", "startup")

    def flush(self):
        pass

    def messages(self, level=None):
        return [m for lvl, m in self.records if level is None or lvl == level]


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for name in BOOTSTRAP_ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    yield
    set_config_logger(None)


@pytest.fixture
def config(tmp_path):
    """ConfigManager that never picks up a developer's .env file."""

    def _make():
        return ConfigManager(env_file=str(tmp_path / "missing.env"))

    return _make


@pytest.fixture
def recording_logger():
    return RecordingLogger()

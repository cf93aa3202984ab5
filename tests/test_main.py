import logging

import psycopg2
import pytest

from rds_bootstrap import main as main_module
from rds_bootstrap.config_manager import ConfigManager


@pytest.fixture(autouse=True)
def isolated_config(monkeypatch, tmp_path):
    monkeypatch.setattr(
        "rds_bootstrap.services.bootstrap_service.get_config",
        lambda: ConfigManager(env_file=str(tmp_path / "missing.env")),
    )
    yield
    logger = logging.getLogger("RDSBootstrap")
    for handler in list(logger.handlers):
        handler.close()
        logger.removeHandler(handler)


class FakeConnection:
    def __init__(self):
        self.closed = False

    def close(self):
        self.closed = True


def test_main_success(monkeypatch):
    conn = FakeConnection()
    monkeypatch.setattr(psycopg2, "connect", lambda **kwargs: conn)

    assert main_module.main([]) == 0
    assert conn.closed is True


def test_main_exits_on_connection_failure(monkeypatch):
    def fake_connect(**kwargs):
        raise psycopg2.OperationalError("refused")

    monkeypatch.setattr(psycopg2, "connect", fake_connect)
    monkeypatch.setenv("APP_ENV", "development")

    with pytest.raises(SystemExit) as excinfo:
        main_module.main([])

    assert excinfo.value.code == "Error: Database Connection Error: refused"


def test_main_reports_configuration_error(monkeypatch, capsys):
    monkeypatch.setenv("DB_PORT", "abc")

    assert main_module.main([]) == 1
    assert "Configuration error" in capsys.readouterr().err


def test_main_check_failure_returns_one(monkeypatch):
    def fake_connect(**kwargs):
        raise psycopg2.OperationalError("refused")

    monkeypatch.setattr(psycopg2, "connect", fake_connect)

    assert main_module.main(["--check"]) == 1


def test_connect_or_exit_returns_connection(monkeypatch):
    from rds_bootstrap import connect_or_exit

    conn = FakeConnection()
    monkeypatch.setattr(psycopg2, "connect", lambda **kwargs: conn)

    assert connect_or_exit() is conn


class FakeSNSClient:
    def __init__(self):
        self.published = []

    def publish(self, **kwargs):
        self.published.append(kwargs)
        return {"MessageId": "1"}


def test_main_check_failure_reports_and_alerts(monkeypatch, capsys):
    def fake_connect(**kwargs):
        raise psycopg2.OperationalError("refused")

    client = FakeSNSClient()
    monkeypatch.setattr(psycopg2, "connect", fake_connect)
    monkeypatch.setattr(
        "rds_bootstrap.services.notification_service.boto3.client",
        lambda *args, **kwargs: client,
    )
    monkeypatch.setenv("SNS_TOPIC_ARN", "arn:aws:sns:us-east-1:123456789012:db-alerts")

    assert main_module.main(["--check"]) == 1

    assert client.published == [
        {
            "TopicArn": "arn:aws:sns:us-east-1:123456789012:db-alerts",
            "Subject": "Database Connection Failed",
            "Message": "Database Connection Error: refused",
        }
    ]
    err = capsys.readouterr().err
    assert "Error: Unable to connect to database. Please contact administrator." in err


def test_main_check_runs_version_query(monkeypatch):
    class Cursor:
        def __enter__(self):
            return self

        def __exit__(self, *exc):
            return False

        def execute(self, sql):
            pass

        def fetchone(self):
            return {"version": "PostgreSQL 15.4"}

    class Connection(FakeConnection):
        def cursor(self):
            return Cursor()

    conn = Connection()
    monkeypatch.setattr(psycopg2, "connect", lambda **kwargs: conn)

    assert main_module.main(["--check"]) == 0
    assert conn.closed is True

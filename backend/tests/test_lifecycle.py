import logging

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine, inspect, text
from sqlalchemy.exc import OperationalError

import chatserver.core.database as database
import chatserver.main as main
from chatserver.core.logging_config import FILE_HANDLER_NAME, STREAM_HANDLER_NAME, setup_logging
from chatserver.models import Base


@pytest.fixture()
def restore_logging():
    root = logging.getLogger()
    root_level = root.level
    chatserver_level = logging.getLogger("chatserver").level
    yield
    for handler in root.handlers[:]:
        if handler.get_name() in (STREAM_HANDLER_NAME, FILE_HANDLER_NAME):
            root.removeHandler(handler)
            handler.close()
    root.setLevel(root_level)
    logging.getLogger("chatserver").setLevel(chatserver_level)


def test_startup_creates_tables_and_shutdown_disposes_pool(monkeypatch, restore_logging):
    Base.metadata.drop_all(bind=database.engine)
    disposed = []
    monkeypatch.setattr(main, "dispose_db", lambda: disposed.append(True))

    with TestClient(main.app) as client:
        tables = inspect(database.engine).get_table_names()
        assert {"users", "chats", "messages"} <= set(tables)
        assert client.post("/api/register", json={"username": "alice", "password": "pw"}).status_code == 200
        assert disposed == []

    assert disposed == [True]


def test_startup_creates_tables_even_if_connection_check_fails(monkeypatch, restore_logging):
    calls = []
    monkeypatch.setattr(main, "check_connection", lambda: False)
    monkeypatch.setattr(main, "init_db", lambda: calls.append("init_db"))
    monkeypatch.setattr(main, "dispose_db", lambda: None)

    with TestClient(main.app):
        pass

    assert calls == ["init_db"]


def test_startup_survives_table_creation_failure(monkeypatch, restore_logging):
    def failing_init_db():
        raise OperationalError("CREATE TABLE", {}, Exception("connection refused"))

    monkeypatch.setattr(main, "check_connection", lambda: False)
    monkeypatch.setattr(main, "init_db", failing_init_db)
    monkeypatch.setattr(main, "dispose_db", lambda: None)

    with TestClient(main.app) as client:
        assert client.get("/").status_code == 200


def test_check_connection_succeeds_against_live_store():
    assert database.check_connection() is True


def test_check_connection_reports_unreachable_store(monkeypatch):
    unreachable = create_engine("sqlite:////nonexistent-dir/for-chatserver/chat.db")
    monkeypatch.setattr(database, "engine", unreachable)

    assert database.check_connection() is False


def test_dispose_db_releases_pooled_connections(monkeypatch, tmp_path):
    engine = create_engine(f"sqlite:///{tmp_path / 'chat.db'}")
    monkeypatch.setattr(database, "engine", engine)
    with engine.connect() as conn:
        conn.execute(text("SELECT 1"))
    assert engine.pool.checkedin() == 1

    database.dispose_db()

    assert engine.pool.checkedin() == 0


def test_setup_logging_sets_package_level(restore_logging):
    setup_logging("DEBUG")

    assert logging.getLogger("chatserver").level == logging.DEBUG
    assert logging.getLogger().level == logging.WARNING


def test_setup_logging_twice_does_not_duplicate_handlers(restore_logging, tmp_path):
    log_file = tmp_path / "logs" / "chat.log"

    setup_logging("INFO", str(log_file))
    setup_logging("INFO", str(log_file))

    names = [h.get_name() for h in logging.getLogger().handlers]
    assert names.count(STREAM_HANDLER_NAME) == 1
    assert names.count(FILE_HANDLER_NAME) == 1
    assert log_file.exists()

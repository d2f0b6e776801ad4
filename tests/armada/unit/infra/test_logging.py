import json
import logging

import pytest

from armada.game.infra.logging import (
    JsonFormatter,
    LoggingConfig,
    build_logging_config,
    configure_logging,
    resolve_logs_dir,
    shutdown_logging,
)


@pytest.fixture
def restore_root_logging():
    root = logging.getLogger()
    original_handlers = list(root.handlers)
    original_level = root.level
    yield root
    configure_logging(LoggingConfig())
    root.handlers.clear()
    root.handlers.extend(original_handlers)
    root.setLevel(original_level)


def test_json_formatter_includes_fields_and_message() -> None:
    logger = logging.getLogger("test.json.formatter")
    record = logger.makeRecord(
        name=logger.name,
        level=logging.INFO,
        fn=__file__,
        lno=1,
        msg="hello %s",
        args=("world",),
        exc_info=None,
        extra={"custom": 1},
    )
    payload = json.loads(JsonFormatter().format(record))
    assert payload["msg"] == "hello world"
    assert payload["level"] == "INFO"
    assert payload["fields"] == {"custom": 1}


def test_build_logging_config_reads_env(monkeypatch, tmp_path) -> None:
    monkeypatch.setenv("ARMADA_LOG_DIR", str(tmp_path / "logs"))
    monkeypatch.setenv("ARMADA_LOG_LEVEL", "debug")
    monkeypatch.setenv("LOG_FORMAT", "JSON")
    config = build_logging_config()
    assert config.level_name == "DEBUG"
    assert config.console_format == "json"
    assert config.file_path is not None
    assert config.file_path.startswith(str(tmp_path / "logs"))


def test_configure_logging_console_only(restore_root_logging) -> None:
    configure_logging(LoggingConfig(level_name="WARNING", console_format="text"))
    root = restore_root_logging
    assert root.level == logging.WARNING
    assert len(root.handlers) == 1
    assert isinstance(root.handlers[0], logging.StreamHandler)


def test_configure_logging_writes_json_lines_file(restore_root_logging, tmp_path) -> None:
    log_file = tmp_path / "logs" / "armada_run_test.jsonl"
    configure_logging(LoggingConfig(level_name="DEBUG", console_format="json", file_path=str(log_file)))
    logging.getLogger("test.logging.file").info("fleet_built ships=%d", 3)
    shutdown_logging()

    lines = log_file.read_text(encoding="utf-8").splitlines()
    assert any(json.loads(line)["msg"] == "fleet_built ships=3" for line in lines)


def test_shutdown_logging_without_listener_is_noop(restore_root_logging) -> None:
    configure_logging(LoggingConfig())
    shutdown_logging()
    shutdown_logging()
    assert len(restore_root_logging.handlers) == 1


def test_resolve_logs_dir_defaults_to_package_appdata(monkeypatch) -> None:
    monkeypatch.delenv("ARMADA_APP_DATA_DIR", raising=False)
    monkeypatch.delenv("ARMADA_LOG_DIR", raising=False)
    logs = resolve_logs_dir()
    assert logs.name == "logs"
    assert logs.parent.name == "appdata"
    assert logs.parent.parent.name == "armada"


def test_resolve_logs_dir_honors_app_data_and_log_dir(monkeypatch, tmp_path) -> None:
    monkeypatch.setenv("ARMADA_APP_DATA_DIR", str(tmp_path / "data"))
    monkeypatch.delenv("ARMADA_LOG_DIR", raising=False)
    assert resolve_logs_dir() == tmp_path / "data" / "logs"

    monkeypatch.setenv("ARMADA_LOG_DIR", "run_logs")
    assert resolve_logs_dir() == tmp_path / "data" / "run_logs"

    monkeypatch.setenv("ARMADA_LOG_DIR", str(tmp_path / "elsewhere"))
    assert resolve_logs_dir() == tmp_path / "elsewhere"

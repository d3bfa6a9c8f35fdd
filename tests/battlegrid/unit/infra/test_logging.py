import logging

import orjson

from battlegrid.core.board import Board
from battlegrid.infra.logging import (
    JsonFormatter,
    LoggingConfig,
    build_logging_config,
    configure_logging,
    shutdown_logging,
)


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
    payload = orjson.loads(JsonFormatter().format(record))
    assert payload["msg"] == "hello world"
    assert payload["level"] == "INFO"
    assert payload["logger"] == "test.json.formatter"
    assert payload["fields"] == {"custom": 1}


def test_build_logging_config_reads_env(monkeypatch, tmp_path) -> None:
    monkeypatch.setenv("BATTLEGRID_LOG_LEVEL", "debug")
    monkeypatch.setenv("LOG_FORMAT", "JSON")
    monkeypatch.setenv("BATTLEGRID_LOG_DIR", str(tmp_path))
    config = build_logging_config()
    assert config.level_name == "DEBUG"
    assert config.json_console is True
    assert config.file_path is not None
    assert config.file_path.startswith(str(tmp_path))
    assert config.file_path.endswith(".jsonl")


def test_build_logging_config_without_log_dir(monkeypatch) -> None:
    monkeypatch.delenv("BATTLEGRID_LOG_LEVEL", raising=False)
    monkeypatch.delenv("BATTLEGRID_LOG_DIR", raising=False)
    monkeypatch.setenv("LOG_LEVEL", "warning")
    config = build_logging_config()
    assert config.level_name == "WARNING"
    assert config.file_path is None


def test_configure_logging_text_console(restore_root_logging) -> None:
    configure_logging(LoggingConfig(level_name="DEBUG"))
    root = restore_root_logging
    assert root.level == logging.DEBUG
    assert len(root.handlers) == 1
    assert not isinstance(root.handlers[0].formatter, JsonFormatter)


def test_configure_logging_writes_json_file(restore_root_logging, tmp_path) -> None:
    log_file = tmp_path / "logs" / "run.jsonl"
    configure_logging(LoggingConfig(level_name="DEBUG", file_path=str(log_file)))

    board = Board(2)
    board.add_ship(0, 0, 0, 1)
    board.attack(0, 0)
    shutdown_logging()

    lines = [orjson.loads(line) for line in log_file.read_text(encoding="utf-8").splitlines()]
    messages = [line["msg"] for line in lines if line["logger"] == "battlegrid.core.board"]
    assert "ship_added ship_id=1 start=(0, 0) end=(0, 1) cells=(0, 0),(0, 1)" in messages
    assert "attack target=(0, 0) result=HIT ship_id=1" in messages
    assert "board_lost ships=1" in messages


def test_board_logs_rejected_placement(caplog) -> None:
    caplog.set_level(logging.DEBUG, logger="battlegrid.core.board")
    board = Board(3)
    board.add_ship(0, 0, 0, 2)
    try:
        board.add_ship(2, 1, 0, 1)
    except ValueError:
        pass
    assert "ship_rejected reason=occupied start=(2, 1) end=(0, 1)" in caplog.messages


def test_configure_logging_json_console(restore_root_logging) -> None:
    configure_logging(LoggingConfig(level_name="INFO", json_console=True))
    root = restore_root_logging
    assert root.level == logging.INFO
    assert isinstance(root.handlers[0].formatter, JsonFormatter)

"""Logging setup for battlegrid hosts."""

from __future__ import annotations

import logging
import os
import queue
from dataclasses import dataclass
from datetime import UTC, datetime
from logging.handlers import QueueHandler, QueueListener
from pathlib import Path

from battlegrid.infra.json_codec import dumps_text

_QUEUE_LISTENER: QueueListener | None = None

_STANDARD_RECORD_FIELDS = frozenset(
    {
        "name",
        "msg",
        "args",
        "levelname",
        "levelno",
        "pathname",
        "filename",
        "module",
        "exc_info",
        "exc_text",
        "stack_info",
        "lineno",
        "funcName",
        "created",
        "msecs",
        "relativeCreated",
        "thread",
        "threadName",
        "processName",
        "process",
        "taskName",
        "message",
    }
)


@dataclass(frozen=True, slots=True)
class LoggingConfig:
    """Logging pipeline configuration."""

    level_name: str = "INFO"
    json_console: bool = False
    file_path: str | None = None  # always JSON lines


class JsonFormatter(logging.Formatter):
    """JSON formatter with extra-field preservation."""

    def format(self, record: logging.LogRecord) -> str:
        payload: dict[str, object] = {
            "ts": datetime.now(UTC).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "msg": record.getMessage(),
        }
        extras = {k: v for k, v in record.__dict__.items() if k not in _STANDARD_RECORD_FIELDS}
        if extras:
            payload["fields"] = extras
        if record.exc_info:
            payload["exc_info"] = self.formatException(record.exc_info)
        return dumps_text(payload)


def configure_logging(config: LoggingConfig) -> None:
    """Configure root logging; file output goes through a queue listener."""
    global _QUEUE_LISTENER

    shutdown_logging()
    root = logging.getLogger()
    root.handlers.clear()
    root.setLevel(getattr(logging, config.level_name.upper(), logging.INFO))

    console_handler = logging.StreamHandler()
    console_handler.setFormatter(JsonFormatter() if config.json_console else _text_formatter())
    if not config.file_path:
        root.addHandler(console_handler)
        return

    file_path = Path(config.file_path)
    file_path.parent.mkdir(parents=True, exist_ok=True)
    file_handler = logging.FileHandler(file_path, mode="a", encoding="utf-8", delay=True)
    file_handler.setFormatter(JsonFormatter())

    log_queue: queue.SimpleQueue[logging.LogRecord] = queue.SimpleQueue()
    root.addHandler(QueueHandler(log_queue))
    _QUEUE_LISTENER = QueueListener(log_queue, console_handler, file_handler)
    _QUEUE_LISTENER.start()


def shutdown_logging() -> None:
    """Flush and stop the queued file pipeline, if any."""
    global _QUEUE_LISTENER

    if _QUEUE_LISTENER is None:
        return
    _QUEUE_LISTENER.stop()
    for handler in _QUEUE_LISTENER.handlers:
        handler.close()
    _QUEUE_LISTENER = None


def build_logging_config() -> LoggingConfig:
    """Build logging configuration from env vars."""
    level_name = os.getenv("BATTLEGRID_LOG_LEVEL", os.getenv("LOG_LEVEL", "INFO")).strip().upper()
    return LoggingConfig(
        level_name=level_name,
        json_console=os.getenv("LOG_FORMAT", "text").strip().lower() == "json",
        file_path=_resolve_run_log_file_path(),
    )


def setup_logging() -> None:
    """Configure application logging from env vars."""
    config = build_logging_config()
    configure_logging(config)
    if config.file_path:
        logging.getLogger(__name__).info("logging_file=%s", config.file_path)


def _resolve_run_log_file_path() -> str | None:
    configured = os.getenv("BATTLEGRID_LOG_DIR", "").strip()
    if not configured:
        return None
    stamp = datetime.now(UTC).strftime("%Y%m%dT%H%M%S")
    return str(Path(configured) / f"battlegrid_run_{stamp}.jsonl")


def _text_formatter() -> logging.Formatter:
    return logging.Formatter("%(asctime)s %(levelname)s %(name)s: %(message)s")


__all__ = [
    "JsonFormatter",
    "LoggingConfig",
    "build_logging_config",
    "configure_logging",
    "setup_logging",
    "shutdown_logging",
]

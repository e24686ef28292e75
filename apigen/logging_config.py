"""
Logging Configuration

Provides:
- CustomJsonFormatter: one JSON object per log record
- setup_logging: dictConfig from YAML with environment variable substitution
"""

import json
import logging
import logging.config
import os
import string
from datetime import datetime, timezone

import yaml

# Attributes present on every LogRecord; anything else is an `extra` field.
STANDARD_ATTRS = {
    "args",
    "asctime",
    "created",
    "exc_info",
    "exc_text",
    "filename",
    "funcName",
    "levelname",
    "levelno",
    "lineno",
    "module",
    "msecs",
    "message",
    "msg",
    "name",
    "pathname",
    "process",
    "processName",
    "relativeCreated",
    "stack_info",
    "taskName",
    "thread",
    "threadName",
}


class CustomJsonFormatter(logging.Formatter):
    """
    JSON formatter for compiler logs.

    Fields:
      - _time: ISO8601 timestamp (millisecond precision)
      - level: Log level
      - logger: Logger name (e.g. apigen.core.compiler)
      - message: Log message
    """

    def format(self, record: logging.LogRecord) -> str:
        log_data = {
            "_time": datetime.fromtimestamp(record.created, tz=timezone.utc).isoformat(
                timespec="milliseconds"
            ),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }

        for key, value in record.__dict__.items():
            if key not in STANDARD_ATTRS and not key.startswith("_"):
                log_data[key] = value

        if record.exc_info:
            log_data["exception"] = self.formatException(record.exc_info)

        return json.dumps(log_data, ensure_ascii=False, default=str)


def setup_logging(
    config_path: str = "logging.yml", level: str | None = None, log_format: str | None = None
):
    """
    Load the YAML config, substitute environment variables, and initialize logging.
    """
    if not os.path.exists(config_path):
        logging.basicConfig(level=level or logging.INFO)
        return

    with open(config_path, "r", encoding="utf-8") as f:
        # Supports ${LOG_LEVEL} and ${LOG_FORMAT} format.
        template = string.Template(f.read())

    mapping = os.environ.copy()
    if level:
        mapping["LOG_LEVEL"] = level
    elif "LOG_LEVEL" not in mapping:
        mapping["LOG_LEVEL"] = "INFO"

    if log_format:
        mapping["LOG_FORMAT"] = log_format
    elif "LOG_FORMAT" not in mapping:
        mapping["LOG_FORMAT"] = "json"

    content = template.safe_substitute(mapping)
    logging.config.dictConfig(yaml.safe_load(content))

"""Structured JSON logging for the Lambda handlers

Each lambda package calls `initialize_logging()` from its `__init__.py`, so the
root logger is configured before the handler module logs anything.

One JSON object is written per line to stdout (picked up by CloudWatch):
{
    "timestamp": "2025-10-15T12:00:00.000Z",
    "level": "INFO",
    "logger": "seoredirects.lambdas.create_redirect.app",
    "message": "Redirect saved. Responding with 200.",
    "event": "REDIRECT_SAVED",
    "slug": "hello-world"
}

Anything passed through `extra=` ends up as a top-level key.
"""

import os
import json
import logging
import logging.config
from datetime import datetime, UTC

from seoredirects.constants import ENV


# Attributes every LogRecord carries; anything else came from `extra=`
_RECORD_ATTRS = frozenset(vars(logging.LogRecord('', logging.NOTSET, '', 0, '', (), None))) | {'message', 'asctime', 'taskName'}


def _timestamp(created: float) -> str:
    return datetime.fromtimestamp(created, tz=UTC).isoformat(timespec='milliseconds').replace('+00:00', 'Z')


class JsonFormatter(logging.Formatter):
    """Render a LogRecord (and its `extra` fields) as a single JSON line"""

    def format(self, record: logging.LogRecord) -> str:
        entry = {
            'timestamp': _timestamp(record.created),
            'level': record.levelname,
            'logger': record.name,
            'message': record.getMessage(),
        }
        entry.update((key, value) for key, value in vars(record).items() if key not in _RECORD_ATTRS)

        if record.exc_info:
            entry['exception'] = self.formatException(record.exc_info)
        if record.stack_info:
            entry['stack'] = self.formatStack(record.stack_info)

        return json.dumps(entry, default=str, ensure_ascii=False)


def initialize_logging() -> None:
    """Route all records through a JSON stdout handler at `LOG_LEVEL` (default INFO)"""
    logging.config.dictConfig(
        {
            'version': 1,
            'disable_existing_loggers': False,
            'formatters': {'json': {'()': JsonFormatter}},
            'handlers': {
                'stdout': {
                    'class': 'logging.StreamHandler',
                    'formatter': 'json',
                    'stream': 'ext://sys.stdout',
                },
            },
            'root': {
                'level': os.getenv(ENV.App.LOG_LEVEL, 'INFO').upper(),
                'handlers': ['stdout'],
            },
        }
    )

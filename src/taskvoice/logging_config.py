"""
Structured Logging Configuration for taskvoice

Single-line JSON logs for production, colourised one-liners for development.
Pipeline stages attach their context through `extra={...}`; the formatters
pick those fields up so logs stay greppable with jq.
"""
import json
import logging
import os
import sys
import uuid
from datetime import datetime, timezone
from typing import Any, Dict, Optional

# Attributes every LogRecord carries; anything else came in through extra={}
_STANDARD_ATTRS = {
    'name', 'msg', 'args', 'created', 'filename', 'funcName',
    'levelname', 'levelno', 'lineno', 'module', 'msecs',
    'message', 'pathname', 'process', 'processName', 'relativeCreated',
    'thread', 'threadName', 'exc_info', 'exc_text', 'stack_info',
    'taskName', 'getMessage',
}

# Context fields shown inline by the pretty formatter, in this order
_PRETTY_FIELDS = ('request_id', 'stage', 'rule', 'command', 'duration_ms', 'budget_ms')


def _context_fields(record: logging.LogRecord) -> Dict[str, Any]:
    """Collect JSON-friendly fields passed via extra={}."""
    fields: Dict[str, Any] = {}
    for attr_name, attr_value in record.__dict__.items():
        if attr_name in _STANDARD_ATTRS or attr_name.startswith('_'):
            continue
        if isinstance(attr_value, (str, int, float, bool, type(None), dict, list)):
            fields[attr_name] = attr_value
    return fields


class JSONFormatter(logging.Formatter):
    """
    JSON formatter for structured logging.

    One JSON object per line: timestamp, level, logger, message, then any
    context fields (stage, input, output, duration_ms, ...).
    """

    def format(self, record: logging.LogRecord) -> str:
        """Format log record as JSON."""
        log_data: Dict[str, Any] = {
            'timestamp': datetime.now(timezone.utc).isoformat().replace('+00:00', 'Z'),
            'level': record.levelname,
            'logger': record.name,
            'message': record.getMessage(),
        }

        for key, value in _context_fields(record).items():
            log_data.setdefault(key, value)

        if record.exc_info:
            log_data['exception'] = self.formatException(record.exc_info)

        return json.dumps(log_data, ensure_ascii=False, default=str)


class PrettyJSONFormatter(logging.Formatter):
    """
    Readable formatter for development.

    Same fields as JSONFormatter, rendered as a coloured one-liner.
    """

    # ANSI color codes
    COLORS = {
        'DEBUG': '\033[36m',      # Cyan
        'INFO': '\033[32m',       # Green
        'WARNING': '\033[33m',    # Yellow
        'ERROR': '\033[31m',      # Red
        'CRITICAL': '\033[35m',   # Magenta
        'RESET': '\033[0m',
    }

    def format(self, record: logging.LogRecord) -> str:
        """Format log record as a coloured line."""
        color = self.COLORS.get(record.levelname, self.COLORS['RESET'])
        reset = self.COLORS['RESET']
        timestamp = datetime.now(timezone.utc).strftime('%H:%M:%S.%f')[:-3]

        parts = [
            f"{color}[{record.levelname}]{reset}",
            timestamp,
            f"{record.name}:",
            record.getMessage(),
        ]

        context = _context_fields(record)
        extra_parts = []
        for key in _PRETTY_FIELDS:
            if context.get(key) is None:
                continue
            if key == 'duration_ms':
                extra_parts.append(f"duration={context[key]}ms")
            elif key == 'request_id':
                extra_parts.append(f"req_id={context[key]}")
            else:
                extra_parts.append(f"{key}={context[key]}")
        if extra_parts:
            parts.append(f"({', '.join(extra_parts)})")

        result = ' '.join(parts)
        if record.exc_info:
            result += '\n' + self.formatException(record.exc_info)
        return result


def setup_logging(
    app_name: str = 'taskvoice',
    log_level: str = 'INFO',
    log_format: str = 'json',
    log_file: Optional[str] = None
) -> logging.Logger:
    """
    Configure structured logging for the application.

    Module loggers are created with logging.getLogger(__name__), so
    configuring the 'taskvoice' logger covers the whole package.

    Args:
        app_name: Name of the logger to configure
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        log_format: Format type ('json' or 'pretty')
        log_file: Optional file path; file logs are always JSON

    Returns:
        Configured logger instance

    Example:
        >>> logger = setup_logging('taskvoice', 'DEBUG', 'pretty')
        >>> logger.info('REPL started', extra={'stage': 'startup'})
    """
    numeric_level = getattr(logging, log_level.upper(), logging.INFO)

    logger = logging.getLogger(app_name)
    logger.setLevel(numeric_level)
    logger.handlers = []  # Clear any existing handlers

    if log_format == 'pretty':
        formatter: logging.Formatter = PrettyJSONFormatter()
    else:
        formatter = JSONFormatter()

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(numeric_level)
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)

    if log_file:
        try:
            directory = os.path.dirname(log_file)
            if directory:
                os.makedirs(directory, exist_ok=True)
            file_handler = logging.FileHandler(log_file)
            file_handler.setLevel(numeric_level)
            file_handler.setFormatter(JSONFormatter())
            logger.addHandler(file_handler)
        except OSError as e:
            logger.warning(f"Failed to setup file logging: {e}")

    # Don't propagate to root logger
    logger.propagate = False

    return logger


def generate_request_id() -> str:
    """
    Generate a short request ID for tracing one utterance through the stages.

    Returns:
        8-character unique identifier
    """
    return str(uuid.uuid4())[:8]


def log_with_context(
    logger: logging.Logger,
    level: int,
    message: str,
    request_id: Optional[str] = None,
    **kwargs
):
    """
    Log with additional context fields.

    Example:
        >>> log_with_context(
        ...     logger, logging.INFO, "Classified utterance",
        ...     request_id="abc123", command="delete", rule="delete"
        ... )
    """
    extra: Dict[str, Any] = {}
    if request_id:
        extra['request_id'] = request_id
    extra.update(kwargs)
    logger.log(level, message, extra=extra)

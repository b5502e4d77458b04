"""
Error Logging Service

Logging for exceptions that the services translate into failure results
and for anything the API middleware catches:
- Writes to rotating log files when a log directory is configured
- Tags every logged error with an id that can be handed to clients
- Captures context (user, request, traceback)
- Sanitizes sensitive data

Usage:
    from podcast_api.services.error_logging import error_logger

    try:
        # some code
    except Exception as e:
        error_logger.log_error(e, context={"podcast_id": podcast_id})
"""

import json
import logging
import os
import traceback
from datetime import datetime, timezone
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Any, Dict, Optional
from uuid import UUID, uuid4


logger = logging.getLogger("error_logging")
logger.setLevel(logging.DEBUG)


# Sensitive fields to sanitize
SENSITIVE_FIELDS = {'password', 'token', 'authorization', 'secret', 'credential'}


def sanitize_data(data: Any, depth: int = 0) -> Any:
    """
    Sanitize sensitive data from dictionaries and strings.
    Replaces sensitive field values with '[REDACTED]'.
    """
    if depth > 10:
        return "[MAX_DEPTH]"

    if isinstance(data, dict):
        sanitized = {}
        for key, value in data.items():
            key_lower = str(key).lower()
            if any(sensitive in key_lower for sensitive in SENSITIVE_FIELDS):
                sanitized[key] = "[REDACTED]"
            else:
                sanitized[key] = sanitize_data(value, depth + 1)
        return sanitized
    elif isinstance(data, list):
        return [sanitize_data(item, depth + 1) for item in data]
    elif isinstance(data, str):
        if len(data) > 20 and data.startswith("eyJ"):  # JWT token pattern
            return "[REDACTED_TOKEN]"
        return data
    else:
        return data


def truncate_string(s: str, max_length: int = 10000) -> str:
    """Truncate string to max length."""
    if len(s) > max_length:
        return s[:max_length] + f"... [TRUNCATED, total {len(s)} chars]"
    return s


class ErrorLogger:
    """
    Error logging service writing through the standard logging tree.
    """

    def log_error(
        self,
        error: Exception,
        request: Optional[Any] = None,
        user: Optional[Any] = None,
        severity: str = "error",
        context: Optional[Dict] = None,
    ) -> UUID:
        """
        Log an error with full context.

        Args:
            error: The exception that occurred
            request: FastAPI Request object (optional)
            user: Current user object (optional)
            severity: debug, info, warning, error, critical
            context: Additional context data

        Returns:
            Id of the logged error
        """
        error_id = uuid4()
        timestamp = datetime.now(timezone.utc)
        error_type = type(error).__name__
        error_message = str(error)

        buffer_parts = [
            f"=== ERROR {error_id} ===",
            f"Timestamp: {timestamp.isoformat()}",
            f"Type: {error_type}",
            f"Message: {error_message}",
            f"Severity: {severity}",
        ]

        request_path = None
        if request is not None:
            request_path = str(request.url.path)
            buffer_parts.extend([
                "\n=== REQUEST ===",
                f"Method: {request.method}",
                f"Path: {request_path}",
                f"Client IP: {request.client.host if request.client else None}",
            ])

        user_email = getattr(user, "email", None)
        if user is not None:
            buffer_parts.extend([
                "\n=== USER ===",
                f"ID: {getattr(user, 'id', None)}",
                f"Email: {user_email}",
            ])

        if context:
            buffer_parts.extend([
                "\n=== CONTEXT ===",
                json.dumps(sanitize_data(context), indent=2, default=str),
            ])

        stack_trace = "".join(
            traceback.format_exception(type(error), error, error.__traceback__)
        )
        buffer_parts.extend(["\n=== STACK TRACE ===", stack_trace])
        error_buffer = truncate_string("\n".join(buffer_parts), 50000)

        log_message = (
            f"[{error_id}] {error_type}: {error_message} | "
            f"User: {user_email or 'anonymous'} | Path: {request_path or 'N/A'}"
        )
        level = logging.getLevelName(severity.upper())
        if not isinstance(level, int):
            level = logging.ERROR
        logger.log(level, log_message)
        logger.debug(error_buffer)

        return error_id


# Singleton instance
error_logger = ErrorLogger()


def configure_error_logging(log_dir: str = "", level: str = "INFO") -> bool:
    """
    Configure root logging. Call this during app startup.

    Console logging is always on. When log_dir is set and writable, two
    rotating files are added: errors.log (ERROR and above) and
    app_detailed.log (everything).

    Returns:
        True if file logging is enabled
    """
    root_logger = logging.getLogger()
    root_logger.setLevel(level.upper())
    if not root_logger.handlers:
        console = logging.StreamHandler()
        console.setFormatter(logging.Formatter(
            '%(asctime)s | %(levelname)s | %(name)s | %(message)s',
            datefmt='%Y-%m-%d %H:%M:%S'
        ))
        root_logger.addHandler(console)

    if not log_dir:
        return False

    logs_path = Path(log_dir)
    try:
        logs_path.mkdir(parents=True, exist_ok=True)
        test_file = logs_path / ".write_test"
        test_file.touch()
        test_file.unlink()
    except OSError as e:
        logger.warning(f"Cannot write to logs directory {logs_path}: {e}; using console only")
        return False

    # Startup can run more than once per process (reload, test clients)
    attached = {
        handler.baseFilename
        for handler in root_logger.handlers
        if isinstance(handler, RotatingFileHandler)
    }
    if os.path.abspath(logs_path / "errors.log") in attached:
        return True

    file_handler = RotatingFileHandler(
        logs_path / "errors.log",
        maxBytes=10 * 1024 * 1024,  # 10 MB
        backupCount=10,
        encoding='utf-8'
    )
    file_handler.setLevel(logging.ERROR)
    file_handler.setFormatter(logging.Formatter(
        '%(asctime)s | %(levelname)s | %(name)s | %(message)s',
        datefmt='%Y-%m-%d %H:%M:%S'
    ))

    detailed_handler = RotatingFileHandler(
        logs_path / "app_detailed.log",
        maxBytes=10 * 1024 * 1024,  # 10 MB
        backupCount=5,
        encoding='utf-8'
    )
    detailed_handler.setLevel(logging.DEBUG)
    detailed_handler.setFormatter(logging.Formatter(
        '%(asctime)s | %(levelname)s | %(name)s | %(funcName)s:%(lineno)d | %(message)s',
        datefmt='%Y-%m-%d %H:%M:%S'
    ))

    root_logger.addHandler(file_handler)
    root_logger.addHandler(detailed_handler)
    logger.info(f"File logging enabled in {logs_path}")
    return True

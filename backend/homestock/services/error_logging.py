"""
Error Logging Service

Every reported error goes to the "error_logging" logger (and from there to
the rotating files when LOG_DIR is set) and, once a session factory has been
configured at startup, to the error_logs table that admins can query.

Usage:
    from homestock.services.error_logging import error_logger

    error_id = error_logger.log_error(exc, request=request, user=current_user)
"""

import json
import logging
import sys
import traceback
from datetime import datetime, timezone
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Any, Dict, List, Optional, Tuple
from uuid import UUID

from homestock.models.error_log import ErrorLog


logger = logging.getLogger("error_logging")


# Substrings of keys whose values are never stored
SENSITIVE_FIELDS = ("password", "token", "authorization", "api_key", "secret", "credential")

SEVERITY_LEVELS = {
    "critical": logging.CRITICAL,
    "error": logging.ERROR,
    "warning": logging.WARNING,
    "info": logging.INFO,
}

MAX_SANITIZE_DEPTH = 10
MAX_REPORT_LENGTH = 50000


def _is_sensitive(key: Any) -> bool:
    name = str(key).lower()
    return any(field in name for field in SENSITIVE_FIELDS)


def _looks_like_jwt(value: str) -> bool:
    return value.startswith("eyJ") and len(value) > 20


def sanitize_data(data: Any, depth: int = 0) -> Any:
    """
    Copy of data with secrets masked.

    Values under sensitive keys become "[REDACTED]" and strings that look
    like a JWT become "[REDACTED_TOKEN]". Nesting deeper than
    MAX_SANITIZE_DEPTH is cut off.
    """
    if depth > MAX_SANITIZE_DEPTH:
        return "[MAX_DEPTH]"
    if isinstance(data, dict):
        return {
            key: "[REDACTED]" if _is_sensitive(key) else sanitize_data(value, depth + 1)
            for key, value in data.items()
        }
    if isinstance(data, list):
        return [sanitize_data(item, depth + 1) for item in data]
    if isinstance(data, str) and _looks_like_jwt(data):
        return "[REDACTED_TOKEN]"
    return data


def truncate_string(s: str, max_length: int = 10000) -> str:
    if len(s) <= max_length:
        return s
    return f"{s[:max_length]}... [TRUNCATED, total {len(s)} chars]"


def setup_file_logging(log_dir: str) -> bool:
    """
    Attach rotating file handlers to the root logger.

    errors.log receives ERROR and above, app.log everything from INFO.

    Returns:
        True if the directory is writable and handlers were added
    """
    path = Path(log_dir)
    try:
        path.mkdir(parents=True, exist_ok=True)
    except OSError as e:
        logger.warning(f"Cannot write to logs directory {path}: {e}. File logging disabled.")
        return False

    error_handler = RotatingFileHandler(
        path / "errors.log",
        maxBytes=10 * 1024 * 1024,  # 10 MB
        backupCount=10,
        encoding='utf-8'
    )
    error_handler.setLevel(logging.ERROR)
    error_handler.setFormatter(logging.Formatter(
        '%(asctime)s | %(levelname)s | %(name)s | %(message)s',
        datefmt='%Y-%m-%d %H:%M:%S'
    ))

    app_handler = RotatingFileHandler(
        path / "app.log",
        maxBytes=10 * 1024 * 1024,
        backupCount=5,
        encoding='utf-8'
    )
    app_handler.setLevel(logging.INFO)
    app_handler.setFormatter(logging.Formatter(
        '%(asctime)s | %(levelname)s | %(name)s | %(funcName)s:%(lineno)d | %(message)s',
        datefmt='%Y-%m-%d %H:%M:%S'
    ))

    root_logger = logging.getLogger()
    root_logger.addHandler(error_handler)
    root_logger.addHandler(app_handler)
    if root_logger.level > logging.INFO or root_logger.level == logging.NOTSET:
        root_logger.setLevel(logging.INFO)
    return True



def _error_origin(error: Exception) -> Tuple[str, Dict[str, Optional[str]]]:
    """Formatted traceback plus the file, function and line of the innermost frame."""
    exc_type, exc_value, tb = sys.exc_info()
    if exc_value is not error:
        exc_type, exc_value, tb = type(error), error, error.__traceback__

    stack_trace = "".join(traceback.format_exception(exc_type, exc_value, tb))
    origin = {"module": None, "function": None, "line_number": None}
    frames = traceback.extract_tb(tb) if tb else []
    if frames:
        frame = frames[-1]
        origin = {"module": frame.filename, "function": frame.name, "line_number": str(frame.lineno)}
    return stack_trace, origin


def _request_fields(request: Optional[Any]) -> Dict[str, Optional[str]]:
    if request is None:
        return {}
    user_agent = request.headers.get("user-agent")
    return {
        "request_method": request.method,
        "request_path": request.url.path,
        "request_query": request.url.query or None,
        "client_ip": request.client.host if request.client else None,
        "user_agent": truncate_string(user_agent, 500) if user_agent else None,
    }


def _section(title: str, lines: List[str]) -> str:
    return "\n".join([f"=== {title} ===", *lines])


class ErrorLogger:
    """Writes error reports to the log and, when configured, to error_logs."""

    def __init__(self):
        self.db_session_factory = None

    def set_db_session_factory(self, factory):
        self.db_session_factory = factory

    def log_error(
        self,
        error: Exception,
        request: Optional[Any] = None,
        user: Optional[Any] = None,
        severity: str = "error",
        context: Optional[Dict] = None,
        save_to_db: bool = True
    ) -> Optional[UUID]:
        """
        Report an error.

        Args:
            error: The exception to report
            request: Request being served, if any
            user: Authenticated user, if any
            severity: info, warning, error or critical
            context: Extra data, sanitized before it is stored
            save_to_db: Also insert an ErrorLog row

        Returns:
            Id of the stored ErrorLog row, or None when nothing was stored
        """
        timestamp = datetime.now(timezone.utc)
        message = str(error)
        stack_trace, origin = _error_origin(error)
        request_info = _request_fields(request)
        user_id = getattr(user, "id", None)
        user_email = getattr(user, "email", None)
        sanitized_context = sanitize_data(context) if context else None

        sections = [_section("ERROR", [
            f"Timestamp: {timestamp.isoformat()}",
            f"Type: {type(error).__name__}",
            f"Message: {message}",
            f"Severity: {severity}",
        ])]
        if request_info:
            sections.append(_section("REQUEST", [
                f"{name.replace('_', ' ').title()}: {value}" for name, value in request_info.items()
            ]))
        if user is not None:
            sections.append(_section("USER", [f"ID: {user_id}", f"Email: {user_email}"]))
        if sanitized_context:
            sections.append(_section("CONTEXT", [json.dumps(sanitized_context, indent=2, default=str)]))
        sections.append(_section("STACK TRACE", [stack_trace]))

        logger.log(
            SEVERITY_LEVELS.get(severity, logging.INFO),
            f"{type(error).__name__}: {message} | User: {user_email or 'anonymous'} "
            f"| Path: {request_info.get('request_path') or 'N/A'}"
        )

        if not (save_to_db and self.db_session_factory):
            return None

        record = ErrorLog(
            timestamp=timestamp,
            error_type=type(error).__name__,
            error_code=str(getattr(error, "status_code", "")) or None,
            severity=severity,
            user_id=user_id,
            user_email=user_email,
            message=truncate_string(message, 1000),
            error_buffer=truncate_string("\n\n".join(sections), MAX_REPORT_LENGTH),
            stack_trace=truncate_string(stack_trace, 20000),
            context_data=sanitized_context,
            **origin,
            **request_info,
        )
        return self._store(record)

    def _store(self, record: ErrorLog) -> Optional[UUID]:
        db = self.db_session_factory()
        try:
            db.add(record)
            db.commit()
            db.refresh(record)
            return record.id
        except Exception as e:
            # The report is already in the log
            logger.error(f"Failed to save error to database: {e}")
            return None
        finally:
            db.close()


error_logger = ErrorLogger()


def configure_error_logging(db_session_factory, log_dir: str = "") -> None:
    """Wire the database session factory (and file handlers) in at startup."""
    error_logger.set_db_session_factory(db_session_factory)
    if log_dir:
        setup_file_logging(log_dir)
    logger.info("Error logging system configured")

"""
Error Log Model
Stores application errors for debugging and monitoring.

Captures the error, the request that caused it, the user (if any)
and the sanitized context passed by the caller.
"""

from sqlalchemy import Column, String, Text, JSON, DateTime, Uuid

from homestock.models.base import BaseModel, utcnow


class ErrorLog(BaseModel):
    __tablename__ = "error_logs"

    timestamp = Column(DateTime(timezone=True), default=utcnow, nullable=False, index=True)

    # Error classification
    error_type = Column(String(255), nullable=False, index=True)  # e.g. "ValueError"
    error_code = Column(String(50), nullable=True)  # HTTP status code when available
    severity = Column(String(20), default="error", nullable=False)  # info, warning, error, critical

    # Location info
    module = Column(String(255), nullable=True)
    function = Column(String(255), nullable=True)
    line_number = Column(String(20), nullable=True)

    # User context (null for unauthenticated requests)
    user_id = Column(Uuid(as_uuid=True), nullable=True, index=True)
    user_email = Column(String(255), nullable=True)

    # Request context
    request_method = Column(String(10), nullable=True)
    request_path = Column(String(500), nullable=True)
    request_query = Column(Text, nullable=True)
    client_ip = Column(String(50), nullable=True)
    user_agent = Column(String(500), nullable=True)

    # Error details
    message = Column(Text, nullable=False)
    error_buffer = Column(Text, nullable=True)  # Full formatted report
    stack_trace = Column(Text, nullable=True)
    context_data = Column(JSON, nullable=True)

    def __repr__(self):
        return f"<ErrorLog(id={self.id}, type={self.error_type}, message={self.message[:50]}...)>"

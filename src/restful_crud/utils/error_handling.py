"""
Structured error logging for HTTP exchanges with the objects API
Transport and parse failures are logged as one JSON entry carrying a trace ID,
the request line and a truncated response body.
"""

import json
import logging
import uuid
from contextvars import ContextVar
from datetime import datetime, timezone
from typing import Dict, Optional

import httpx

# Context variable for step tracing
step_context_var: ContextVar[str] = ContextVar('step_context', default='')

logger = logging.getLogger(__name__)


class StructuredLogger:
    """Structured logging with consistent format and context"""

    MAX_BODY_LOG_SIZE = 5000

    @classmethod
    def truncate(cls, text: str) -> str:
        if len(text) > cls.MAX_BODY_LOG_SIZE:
            return text[:cls.MAX_BODY_LOG_SIZE] + "...[TRUNCATED]"
        return text

    @classmethod
    def log_error(
        cls,
        error_type: str,
        message: str,
        request: Optional[httpx.Request] = None,
        response: Optional[httpx.Response] = None,
        exception: Optional[Exception] = None,
        extra_context: Optional[Dict] = None,
    ) -> str:
        """Log structured error with full context, returning its trace ID"""

        trace_id = str(uuid.uuid4())[:8]

        log_entry = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "trace_id": trace_id,
            "error_type": error_type,
            "message": message,
            "level": "ERROR"
        }

        if request is not None:
            log_entry["request"] = {
                "method": request.method,
                "url": str(request.url),
            }

        if response is not None:
            log_entry["response"] = {
                "status_code": response.status_code,
                "body": cls.truncate(response.text),
            }

        if exception is not None:
            log_entry["exception"] = {
                "type": type(exception).__name__,
                "details": str(exception),
                "module": getattr(exception, '__module__', 'unknown')
            }

        if extra_context:
            log_entry["context"] = extra_context

        step_context = step_context_var.get('')
        if step_context:
            log_entry["step_context"] = step_context

        logger.error(json.dumps(log_entry, indent=2, default=str))

        return trace_id


def set_step_context(context: str):
    """Set context for the current step (call at start of a scenario step)"""
    step_context_var.set(context)

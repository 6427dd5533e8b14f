"""
CloudWatch logging utilities for org-users-service
"""
import json
import sys
import traceback
from datetime import datetime, timezone
from .config import config
from .exceptions import ServiceError

# Invocation fields stamped on every line, shared by all component loggers.
# Set by log_lambda_start, cleared by log_lambda_end.
_invocation = {}


class ServiceLogger:
    """
    Structured logger for org-users-service with CloudWatch optimization

    Every line carries the current invocation's function name and request
    id, so store, service and queue lines can be correlated in CloudWatch.
    """

    def __init__(self, service_name: str = "org-users-service"):
        self.service_name = service_name
        self.environment = config.environment
        self.debug_enabled = config.enable_debug_logging

    def _log(self, level: str, message: str, **kwargs):
        """Internal log method with structured format"""
        log_entry = {
            'timestamp': datetime.now(timezone.utc).isoformat(),
            'level': level.upper(),
            'service': self.service_name,
            'environment': self.environment,
            **_invocation,
            'message': message
        }

        if kwargs:
            log_entry.update(kwargs)

        # CloudWatch captures stdout
        print(json.dumps(log_entry, default=str))

    def debug(self, message: str, **kwargs):
        """Log debug message (only if debug enabled)"""
        if self.debug_enabled:
            self._log('debug', message, **kwargs)

    def info(self, message: str, **kwargs):
        """Log info message"""
        self._log('info', message, **kwargs)

    def warning(self, message: str, **kwargs):
        """Log warning message"""
        self._log('warning', message, **kwargs)

    def error(self, message: str, error: Exception = None, **kwargs):
        """
        Log error message with optional exception details

        Service errors add their error code and HTTP status; a traceback is
        attached only while an exception is being handled.
        """
        log_data = kwargs.copy()

        if error:
            log_data['error_type'] = type(error).__name__
            log_data['error_message'] = str(error)
            if isinstance(error, ServiceError):
                log_data.setdefault('error_code', error.error_code)
                log_data.setdefault('status_code', error.status_code)
                if error.details:
                    log_data.setdefault('error_details', error.details)
            if sys.exc_info()[1] is not None:
                log_data['traceback'] = traceback.format_exc()

        self._log('error', message, **log_data)

    def log_lambda_start(self, function_name: str, event: dict, context=None):
        """Log Lambda function start and bind the invocation fields"""
        _invocation.clear()
        _invocation.update(
            function_name=function_name,
            request_id=getattr(context, 'aws_request_id', 'unknown') if context else 'unknown'
        )

        log_data = {
            'event_keys': list(event.keys()) if isinstance(event, dict) else 'non-dict',
        }

        if isinstance(event, dict):
            if 'httpMethod' in event:
                log_data['http_method'] = event.get('httpMethod')
                log_data['path'] = event.get('path')
            if 'Records' in event:
                log_data['record_count'] = len(event.get('Records') or [])

        self._log('info', f"Lambda function {function_name} started", **log_data)

    def log_lambda_end(self, function_name: str, success: bool = True, duration_ms: float = None, **kwargs):
        """Log Lambda function completion and release the invocation fields"""
        log_data = {
            'function_name': function_name,
            'success': success,
        }

        if duration_ms is not None:
            log_data['duration_ms'] = round(duration_ms, 2)

        log_data.update(kwargs)

        level = 'info' if success else 'error'
        message = f"Lambda function {function_name} {'completed' if success else 'failed'}"

        self._log(level, message, **log_data)
        _invocation.clear()

    def log_service_operation(self, operation: str, entity_type: str = None, entity_id: str = None, **kwargs):
        """Log service operation"""
        log_data = {
            'operation': operation
        }

        if entity_type:
            log_data['entity_type'] = entity_type

        if entity_id:
            log_data['entity_id'] = entity_id

        log_data.update(kwargs)

        self._log('info', f"Service operation: {operation}", **log_data)

    def log_database_operation(self, table_name: str, operation: str, success: bool = True, **kwargs):
        """Log database operation"""
        log_data = {
            'table_name': table_name,
            'operation': operation,
            'success': success
        }

        log_data.update(kwargs)

        level = 'info' if success else 'error'
        message = f"Database {operation} on {table_name} {'succeeded' if success else 'failed'}"

        self._log(level, message, **log_data)

    def log_queue_message(self, message_id: str, event_type: str, success: bool = True, **kwargs):
        """Log processing of a single queue message"""
        log_data = {
            'message_id': message_id,
            'event_type': event_type,
            'success': success
        }

        log_data.update(kwargs)

        level = 'info' if success else 'error'
        message = f"Queue message {message_id} {'processed' if success else 'failed'}"

        self._log(level, message, **log_data)


# Global logger instances
logger = ServiceLogger("org-users-service")
organization_logger = ServiceLogger("organization-service")
user_logger = ServiceLogger("user-service")
store_logger = ServiceLogger("store")
queue_logger = ServiceLogger("queue-processor")

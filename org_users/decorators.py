"""
Lambda handler decorators for org-users-service
"""
import time
from functools import wraps
from typing import Callable
from .constants import HTTPConstants
from .utils import create_error_response, parse_json_body
from .logger import logger


def api_gateway_handler(log_requests: bool = True):
    """
    Decorator for API Gateway proxy handlers

    Parses the JSON body into event['parsed_body'] and path parameters into
    event['path_params'] before calling the handler. Malformed bodies become
    400 responses; anything the handler lets escape becomes a 500.

    Args:
        log_requests: Whether to log request start/end
    """
    def decorator(func: Callable) -> Callable:
        @wraps(func)
        def wrapper(event, context):
            start_time = time.time()
            function_name = getattr(func, '__name__', 'unknown')

            if log_requests:
                logger.log_lambda_start(function_name, event, context)

            try:
                try:
                    body = parse_json_body(event.get('body'))
                except ValueError as e:
                    if log_requests:
                        duration_ms = (time.time() - start_time) * 1000
                        logger.log_lambda_end(function_name, False, duration_ms, error=str(e))
                    return create_error_response(HTTPConstants.BAD_REQUEST, str(e))

                event['parsed_body'] = body
                event['path_params'] = event.get('pathParameters') or {}

                result = func(event, context)

                if log_requests:
                    duration_ms = (time.time() - start_time) * 1000
                    logger.log_lambda_end(
                        function_name,
                        result.get('statusCode', HTTPConstants.OK) < HTTPConstants.BAD_REQUEST,
                        duration_ms,
                        status_code=result.get('statusCode')
                    )

                return result

            except Exception as e:
                if log_requests:
                    duration_ms = (time.time() - start_time) * 1000
                    logger.log_lambda_end(function_name, False, duration_ms, error=str(e))

                logger.error(f"Unexpected error in {function_name}", error=e)

                return create_error_response(HTTPConstants.INTERNAL_SERVER_ERROR, str(e))

        return wrapper
    return decorator


def queue_handler(log_requests: bool = True):
    """
    Decorator for SQS batch handlers

    Logs start/end of the invocation and re-raises any failure so the
    host's retry and redrive policy applies to the whole batch.

    Args:
        log_requests: Whether to log request start/end
    """
    def decorator(func: Callable) -> Callable:
        @wraps(func)
        def wrapper(event, context):
            start_time = time.time()
            function_name = getattr(func, '__name__', 'unknown')

            if log_requests:
                logger.log_lambda_start(function_name, event, context)

            try:
                result = func(event, context)
            except Exception as e:
                if log_requests:
                    duration_ms = (time.time() - start_time) * 1000
                    logger.log_lambda_end(function_name, False, duration_ms, error=str(e))
                raise

            if log_requests:
                duration_ms = (time.time() - start_time) * 1000
                logger.log_lambda_end(function_name, True, duration_ms)

            return result

        return wrapper
    return decorator

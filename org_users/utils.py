"""
Lambda response and identifier utilities for org-users-service
"""
import json
import uuid
from typing import Dict, Any, Optional
from .constants import HTTPConstants, ErrorConstants


def generate_id() -> str:
    """
    Generate a new opaque record identifier

    Returns:
        Random UUID4 string
    """
    return str(uuid.uuid4())


def create_response(status_code: int, body: Any, headers: Optional[dict] = None) -> Dict[str, Any]:
    """
    Create standardized Lambda proxy response

    Args:
        status_code: HTTP status code
        body: Response payload, serialized to JSON
        headers: Additional headers

    Returns:
        Lambda proxy integration response
    """
    default_headers = {
        HTTPConstants.CONTENT_TYPE: HTTPConstants.JSON,
        HTTPConstants.ACCESS_CONTROL_ALLOW_ORIGIN: '*',
        HTTPConstants.ACCESS_CONTROL_ALLOW_HEADERS: 'Content-Type,X-Amz-Date,Authorization,X-Api-Key,X-Amz-Security-Token',
        HTTPConstants.ACCESS_CONTROL_ALLOW_METHODS: 'POST,PUT,OPTIONS'
    }

    if headers:
        default_headers.update(headers)

    return {
        'statusCode': status_code,
        'headers': default_headers,
        'body': json.dumps(body)
    }


def create_error_response(status_code: int, message: str) -> Dict[str, Any]:
    """
    Create standardized error response

    Args:
        status_code: HTTP status code
        message: Error message

    Returns:
        Lambda proxy integration error response with a {"message": ...} body
    """
    return create_response(status_code, {'message': message})


def parse_json_body(raw_body: Any) -> Dict[str, Any]:
    """
    Decode an event body into a dict

    Args:
        raw_body: JSON string, already-decoded dict, or None

    Returns:
        Decoded body ({} when empty)

    Raises:
        ValueError: If the body is not valid JSON or not a JSON object
    """
    if raw_body is None or raw_body == '':
        return {}

    if isinstance(raw_body, str):
        try:
            body = json.loads(raw_body)
        except json.JSONDecodeError:
            raise ValueError(ErrorConstants.INVALID_JSON)
    else:
        body = raw_body

    if not isinstance(body, dict):
        raise ValueError(ErrorConstants.BODY_NOT_OBJECT)

    return body

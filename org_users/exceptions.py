"""
Org-Users Service Exceptions
Typed request errors; each carries the HTTP status it maps to
"""
from .constants import HTTPConstants


class ServiceError(Exception):
    """Base exception for all org-users service errors"""

    status_code = HTTPConstants.INTERNAL_SERVER_ERROR
    error_code = 'SERVICE_ERROR'

    def __init__(self, message: str, status_code: int = None, details: dict = None):
        self.message = message
        if status_code is not None:
            self.status_code = status_code
        self.details = details or {}
        super().__init__(message)

    def to_dict(self) -> dict:
        """Convert exception to the public error body"""
        return {'message': self.message}


class ValidationError(ServiceError):
    """Raised when input validation fails"""

    status_code = HTTPConstants.BAD_REQUEST
    error_code = 'VALIDATION_ERROR'

    def __init__(self, message: str, errors: list = None):
        self.errors = errors or [message]
        super().__init__(message, details={'errors': self.errors})


class ConflictError(ServiceError):
    """Raised when a unique attribute is already taken"""

    status_code = HTTPConstants.BAD_REQUEST
    error_code = 'CONFLICT'

    def __init__(self, message: str, entity_type: str = None, field: str = None, value: str = None):
        self.entity_type = entity_type
        self.field = field
        self.value = value

        details = {}
        if entity_type:
            details['entity_type'] = entity_type
        if field:
            details['field'] = field
        if value:
            details['value'] = value

        super().__init__(message, details=details)


class NotFoundError(ServiceError):
    """
    Raised when a referenced entity is absent

    Status is 404 when the entity is the target of the operation and 400
    when it is only referenced by the payload.
    """

    status_code = HTTPConstants.NOT_FOUND
    error_code = 'NOT_FOUND'

    def __init__(self, message: str, entity_type: str = None, entity_id: str = None, status_code: int = None):
        self.entity_type = entity_type
        self.entity_id = entity_id

        details = {}
        if entity_type:
            details['entity_type'] = entity_type
        if entity_id:
            details['entity_id'] = entity_id

        super().__init__(message, status_code=status_code, details=details)


class ForbiddenError(ServiceError):
    """Raised when a caller addresses a record it does not own"""

    status_code = HTTPConstants.FORBIDDEN
    error_code = 'FORBIDDEN'


class UnexpectedError(ServiceError):
    """Raised for anything that is not a business-rule failure"""

    status_code = HTTPConstants.INTERNAL_SERVER_ERROR
    error_code = 'INTERNAL_ERROR'


class DynamoDBError(UnexpectedError):
    """Raised when DynamoDB operations fail"""

    error_code = 'DYNAMODB_ERROR'

    def __init__(self, message: str, operation: str = None, table: str = None,
                 original_error: str = None, status_code: int = None):
        self.operation = operation
        self.table = table
        self.original_error = original_error

        details = {}
        if operation:
            details['operation'] = operation
        if table:
            details['table'] = table
        if original_error:
            details['original_error'] = original_error

        super().__init__(message, status_code=status_code, details=details)


class BatchProcessingError(Exception):
    """Raised by the queue adapter to fail the whole batch invocation"""

    def __init__(self, message_id: str, event_type: str, error: ServiceError):
        self.message_id = message_id
        self.event_type = event_type
        self.error = error
        super().__init__(
            f"Message {message_id} ({event_type}) failed with "
            f"{error.status_code}: {error.message}"
        )

"""
Org-Users Service Constants
"""


class HTTPConstants:
    """HTTP status codes and headers"""

    # Status codes
    OK = 200
    CREATED = 201
    BAD_REQUEST = 400
    FORBIDDEN = 403
    NOT_FOUND = 404
    INTERNAL_SERVER_ERROR = 500

    # Headers
    CONTENT_TYPE = 'Content-Type'
    ACCESS_CONTROL_ALLOW_ORIGIN = 'Access-Control-Allow-Origin'
    ACCESS_CONTROL_ALLOW_HEADERS = 'Access-Control-Allow-Headers'
    ACCESS_CONTROL_ALLOW_METHODS = 'Access-Control-Allow-Methods'

    # MIME types
    JSON = 'application/json'


class EntityConstants:
    """Entity types and record attribute names"""

    ORGANIZATION = 'organization'
    USER = 'user'

    ORGANIZATION_ID = 'organizationId'
    USER_ID = 'userId'
    NAME = 'name'
    DESCRIPTION = 'description'
    EMAIL = 'email'

    # Fields an update may change
    ORGANIZATION_MUTABLE_FIELDS = [NAME, DESCRIPTION]
    USER_MUTABLE_FIELDS = [NAME, EMAIL]


class DatabaseConstants:
    """Database-related constants"""

    BILLING_MODE = 'PAY_PER_REQUEST'

    # GSI names
    ORGANIZATION_NAME_INDEX = 'name-index'
    USER_EMAIL_INDEX = 'email-index'


class ValidationConstants:
    """Validation rules and patterns"""

    # Loose RFC 5322 shape: one @, no whitespace, dotted domain
    EMAIL_PATTERN = r'^[^@\s]+@[^@\s]+\.[^@\s]+$'

    # Separator used when joining all field violations into one message
    ERROR_SEPARATOR = ' '


class QueueConstants:
    """Queue message constants"""

    EVENT_TYPE_FIELD = 'eventType'
    PROCESSED_MESSAGE = 'Processed'


class ErrorConstants:
    """Error message constants"""

    INVALID_JSON = 'Invalid JSON in request body'
    BODY_NOT_OBJECT = 'Request body must be a JSON object'
    ORGANIZATION_NOT_FOUND = "Organization with id '{organization_id}' not found!"
    ORGANIZATION_NAME_TAKEN = "Organization with name '{name}' already exists!"
    USER_NOT_FOUND = "User with id '{user_id}' not found!"
    USER_EMAIL_TAKEN = "User with email '{email}' already exists!"
    USER_ORGANIZATION_MISMATCH = 'User does not belong to the specified organization'
    ORGANIZATION_NO_UPDATES = 'At least one of name or description must be provided'
    USER_NO_UPDATES = 'At least one of name or email must be provided'
    DYNAMODB_ERROR = 'Database operation failed'

"""
AWS error handling utilities for org-users-service
"""
from botocore.exceptions import ClientError
from .constants import ErrorConstants
from .exceptions import DynamoDBError
from .logger import store_logger as logger


RETRYABLE_ERROR_CODES = ('ThrottlingException', 'ProvisionedThroughputExceededException')


class AWSErrorHandler:
    """
    Centralized AWS error handling for org-users-service
    """

    @staticmethod
    def handle_dynamodb_error(error: Exception, operation: str, table_name: str = None) -> str:
        """
        Log a DynamoDB failure and extract the message to surface

        PynamoDB wraps botocore errors; when the cause is a ClientError its
        message is the one reported.

        Args:
            error: The exception that occurred
            operation: The operation being performed
            table_name: Optional table name for context

        Returns:
            Original error message
        """
        error_context = {
            'operation': operation,
            'table_name': table_name or 'unknown',
        }

        cause = getattr(error, 'cause', None)
        if isinstance(cause, ClientError):
            error = cause

        if isinstance(error, ClientError):
            error_code = error.response.get('Error', {}).get('Code', 'Unknown')
            error_context['aws_error_code'] = error_code
            error_context['retryable'] = error_code in RETRYABLE_ERROR_CODES

        logger.error(ErrorConstants.DYNAMODB_ERROR, error=error, **error_context)

        return str(error) or ErrorConstants.DYNAMODB_ERROR

    def raise_dynamodb_error(self, error: Exception, operation: str, table_name: str = None):
        """
        Raise a store failure as DynamoDBError (500) keeping its message

        Raises:
            DynamoDBError: always
        """
        message = self.handle_dynamodb_error(error, operation, table_name)
        raise DynamoDBError(
            message,
            operation=operation,
            table=table_name,
            original_error=type(error).__name__
        ) from error


# Global error handler instance
error_handler = AWSErrorHandler()

"""
Operation boundary
Maps each event type to its service call and turns raised errors into an
OperationResult that both transports format the same way.
"""
from enum import Enum
from typing import Any, Dict, Optional
from .constants import HTTPConstants
from .exceptions import ServiceError, UnexpectedError
from .logger import logger
from .results import OperationResult
from .services.service_container import get_service


class EventType(str, Enum):
    """Closed set of operations both transports can request"""

    CREATE_ORGANIZATION = 'createOrganization'
    CREATE_USER = 'createUser'
    UPDATE_ORGANIZATION = 'updateOrganization'
    UPDATE_USER = 'updateUser'

    @classmethod
    def parse(cls, value: Any) -> Optional['EventType']:
        """Return the matching member, or None for an unrecognized tag"""
        try:
            return cls(value)
        except ValueError:
            return None


# event type -> (service name, method name, success status)
OPERATIONS = {
    EventType.CREATE_ORGANIZATION: ('organization_service', 'create_organization', HTTPConstants.CREATED),
    EventType.CREATE_USER: ('user_service', 'create_user', HTTPConstants.CREATED),
    EventType.UPDATE_ORGANIZATION: ('organization_service', 'update_organization', HTTPConstants.OK),
    EventType.UPDATE_USER: ('user_service', 'update_user', HTTPConstants.OK),
}


def run_operation(event_type: EventType, payload: Dict[str, Any]) -> OperationResult:
    """
    Run one mutation operation to completion

    Args:
        event_type: Operation to run
        payload: Raw payload for the operation

    Returns:
        OperationResult with the record on success, or the typed error
    """
    service_name, method_name, success_status = OPERATIONS[event_type]
    logger.debug(f"Running operation {event_type.value}", service=service_name, method=method_name)

    try:
        operation = getattr(get_service(service_name), method_name)
        record = operation(payload)
        return OperationResult.ok(record, success_status)

    except ServiceError as e:
        if e.status_code >= HTTPConstants.INTERNAL_SERVER_ERROR:
            logger.error(f"Operation {event_type.value} failed", error=e, status_code=e.status_code)
        else:
            logger.warning(
                f"Operation {event_type.value} rejected",
                error_code=e.error_code,
                status_code=e.status_code,
                error_message=e.message
            )
        return OperationResult.failure(e)

    except Exception as e:
        logger.error(f"Unexpected error in {event_type.value}", error=e)
        return OperationResult.failure(UnexpectedError(str(e)))

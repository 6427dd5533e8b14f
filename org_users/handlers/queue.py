"""
SQS adapter
Processes a batch of operation messages one at a time. The first failing
message aborts the batch by raising, so the host redrives it.
"""
import json
from typing import Dict, Any
from ..constants import HTTPConstants, QueueConstants
from ..decorators import queue_handler
from ..exceptions import BatchProcessingError
from ..logger import queue_logger as logger
from ..operations import EventType, run_operation


def process_record(record: Dict[str, Any]):
    """
    Run the operation carried by one SQS record

    Raises:
        json.JSONDecodeError: If the body is not JSON
        BatchProcessingError: If the operation fails
    """
    message_id = record.get('messageId', 'unknown')
    message = json.loads(record.get('body') or '{}')
    if not isinstance(message, dict):
        message = {}

    raw_event_type = message.pop(QueueConstants.EVENT_TYPE_FIELD, None)
    event_type = EventType.parse(raw_event_type)

    if event_type is None:
        logger.warning(
            "Unknown eventType, skipping message",
            message_id=message_id,
            event_type=raw_event_type
        )
        return

    result = run_operation(event_type, message)

    if not result.success:
        logger.log_queue_message(
            message_id,
            event_type.value,
            success=False,
            status_code=result.status_code,
            error_message=result.error.message
        )
        raise BatchProcessingError(message_id, event_type.value, result.error)

    logger.log_queue_message(message_id, event_type.value, status_code=result.status_code)


@queue_handler()
def sqs_handler(event, context):
    """
    Process an SQS batch

    Each record body is JSON:
    {
        "eventType": "createOrganization",   # or createUser, updateOrganization, updateUser
        ...operation payload fields...
    }
    """
    records = event.get('Records', [])
    for record in records:
        process_record(record)

    logger.info("Batch processed", record_count=len(records))

    return {
        'statusCode': HTTPConstants.OK,
        'body': json.dumps({'message': QueueConstants.PROCESSED_MESSAGE})
    }

"""
Unit tests for structured logging
"""
import json

from org_users.exceptions import NotFoundError
from org_users.logger import ServiceLogger


def _lines(capsys):
    return [json.loads(line) for line in capsys.readouterr().out.splitlines()]


class TestServiceLogger:
    """Test cases for the JSON line logger"""

    def test_invocation_fields_on_every_component_line(self, capsys, lambda_context):
        """Lines from other component loggers carry the request id until the invocation ends"""
        handler_logger = ServiceLogger('org-users-service')
        store_logger = ServiceLogger('store')

        handler_logger.log_lambda_start('create_organization', {'httpMethod': 'POST'}, lambda_context)
        store_logger.log_database_operation('Organizations', 'put_organization')
        handler_logger.log_lambda_end('create_organization', True, 1.0)
        store_logger.info('after')

        start, store_line, end, after = _lines(capsys)
        assert start['request_id'] == 'test-request-id'
        assert store_line['request_id'] == 'test-request-id'
        assert store_line['function_name'] == 'create_organization'
        assert store_line['service'] == 'store'
        assert end['request_id'] == 'test-request-id'
        assert 'request_id' not in after

    def test_service_error_fields(self, capsys):
        error = NotFoundError("User with id 'u9' not found!", entity_type='user', entity_id='u9')

        ServiceLogger().error('Operation failed', error=error)

        (line,) = _lines(capsys)
        assert line['level'] == 'ERROR'
        assert line['error_code'] == 'NOT_FOUND'
        assert line['status_code'] == 404
        assert line['error_details'] == {'entity_type': 'user', 'entity_id': 'u9'}
        assert 'traceback' not in line

    def test_traceback_while_handling(self, capsys):
        try:
            raise RuntimeError('kaboom')
        except RuntimeError as e:
            ServiceLogger().error('Unexpected', error=e)

        (line,) = _lines(capsys)
        assert line['error_message'] == 'kaboom'
        assert 'RuntimeError: kaboom' in line['traceback']

"""
Pytest configuration and fixtures for org-users-service tests
Runs the PynamoDB models against moto's in-memory DynamoDB
"""
import json
import os
import pytest
from unittest.mock import MagicMock
from moto import mock_aws


# Must be set before org_users is imported: models read table names at import
os.environ.update({
    'AWS_DEFAULT_REGION': 'us-east-1',
    'AWS_REGION': 'us-east-1',
    'AWS_ACCESS_KEY_ID': 'testing',
    'AWS_SECRET_ACCESS_KEY': 'testing',
    'AWS_SECURITY_TOKEN': 'testing',
    'AWS_SESSION_TOKEN': 'testing',
    'ENVIRONMENT': 'test',
    'PARAMETER_STORE_ENABLED': 'false',
    'ORGANIZATIONS_TABLE_NAME': 'Organizations-test',
    'USERS_TABLE_NAME': 'Users-test',
})

from org_users.models import Organization, User  # noqa: E402
from org_users.services import (  # noqa: E402
    ConstraintChecker, DynamoDBStore, OrganizationService, UserService
)
from org_users.services.service_container import clear_services  # noqa: E402


@pytest.fixture
def dynamodb_tables():
    """Create both tables (with their GSIs) in mocked DynamoDB"""
    with mock_aws():
        Organization.create_table(wait=True)
        User.create_table(wait=True)
        clear_services()
        yield
        clear_services()


@pytest.fixture
def store(dynamodb_tables):
    return DynamoDBStore()


@pytest.fixture
def constraints(store):
    return ConstraintChecker(store)


@pytest.fixture
def organization_service(store, constraints):
    return OrganizationService(store, constraints)


@pytest.fixture
def user_service(store, constraints):
    return UserService(store, constraints)


@pytest.fixture
def acme(store):
    """Stored organization 'Acme'"""
    return store.put_organization({
        'organizationId': 'org-acme',
        'name': 'Acme',
        'description': 'Anvils and rockets'
    })


@pytest.fixture
def globex(store):
    """Stored organization 'Globex'"""
    return store.put_organization({
        'organizationId': 'org-globex',
        'name': 'Globex',
        'description': 'Global exports'
    })


@pytest.fixture
def alice(store, acme):
    """Stored user of Acme"""
    return store.put_user({
        'userId': 'u1',
        'organizationId': 'org-acme',
        'name': 'Alice',
        'email': 'a@x.com'
    })


@pytest.fixture
def mock_store():
    """Store double; every lookup finds nothing unless a test says otherwise"""
    store = MagicMock(spec=DynamoDBStore)
    store.get_organization.return_value = None
    store.get_user.return_value = None
    store.query_organizations_by_name.return_value = []
    store.query_users_by_email.return_value = []
    return store


@pytest.fixture
def lambda_context():
    """Mock Lambda context"""
    context = MagicMock()
    context.function_name = 'test-function'
    context.function_version = '$LATEST'
    context.invoked_function_arn = 'arn:aws:lambda:us-east-1:123456789012:function:test-function'
    context.memory_limit_in_mb = 128
    context.aws_request_id = 'test-request-id'
    return context


@pytest.fixture
def api_gateway_event():
    """Factory for API Gateway proxy events"""
    def make_event(method='POST', path='/organizations', body=None, path_params=None, raw_body=None):
        return {
            'httpMethod': method,
            'path': path,
            'resource': path,
            'pathParameters': path_params,
            'queryStringParameters': None,
            'headers': {'Content-Type': 'application/json'},
            'requestContext': {
                'requestId': 'test-request-id',
                'stage': 'test',
                'identity': {'sourceIp': '127.0.0.1'}
            },
            'body': raw_body if raw_body is not None else (json.dumps(body) if body is not None else None),
            'isBase64Encoded': False
        }
    return make_event


@pytest.fixture
def sqs_event():
    """Factory for SQS batch events; each message is a dict or a raw string body"""
    def make_event(*messages):
        records = []
        for index, message in enumerate(messages):
            records.append({
                'messageId': f'msg-{index}',
                'receiptHandle': f'handle-{index}',
                'body': message if isinstance(message, str) else json.dumps(message),
                'attributes': {'ApproximateReceiveCount': '1'},
                'eventSource': 'aws:sqs',
                'eventSourceARN': 'arn:aws:sqs:us-east-1:123456789012:org-users-operations-test',
                'awsRegion': 'us-east-1'
            })
        return {'Records': records}
    return make_event

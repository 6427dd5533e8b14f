"""
Unit tests for the operation boundary
"""
import pytest
from unittest.mock import MagicMock

from org_users.exceptions import ForbiddenError, ValidationError
from org_users.operations import OPERATIONS, EventType, run_operation
from org_users.services.service_container import clear_services, register_service


@pytest.fixture
def fake_services():
    """Register service doubles in the global container"""
    organization_service = MagicMock()
    user_service = MagicMock()
    register_service('organization_service', organization_service)
    register_service('user_service', user_service)
    yield organization_service, user_service
    clear_services()


class TestEventType:
    """Test cases for event type parsing"""

    @pytest.mark.parametrize('tag, expected', [
        ('createOrganization', EventType.CREATE_ORGANIZATION),
        ('createUser', EventType.CREATE_USER),
        ('updateOrganization', EventType.UPDATE_ORGANIZATION),
        ('updateUser', EventType.UPDATE_USER),
    ])
    def test_known_tags(self, tag, expected):
        assert EventType.parse(tag) is expected

    @pytest.mark.parametrize('tag', ['deleteUser', 'CreateUser', '', None, 42])
    def test_unknown_tags(self, tag):
        assert EventType.parse(tag) is None

    def test_every_event_type_has_an_operation(self):
        """The dispatch table covers the whole closed set"""
        assert set(OPERATIONS) == set(EventType)


class TestRunOperation:
    """Test cases for running operations"""

    def test_create_returns_201(self, fake_services):
        organization_service, _ = fake_services
        organization_service.create_organization.return_value = {'organizationId': 'o1'}

        result = run_operation(EventType.CREATE_ORGANIZATION, {'name': 'Acme'})

        assert result.success
        assert result.status_code == 201
        assert result.body == {'organizationId': 'o1'}
        organization_service.create_organization.assert_called_once_with({'name': 'Acme'})

    def test_update_returns_200(self, fake_services):
        _, user_service = fake_services
        user_service.update_user.return_value = {'userId': 'u1'}

        result = run_operation(EventType.UPDATE_USER, {'userId': 'u1'})

        assert result.status_code == 200
        assert result.body == {'userId': 'u1'}

    def test_service_error_becomes_failure(self, fake_services):
        _, user_service = fake_services
        user_service.update_user.side_effect = ForbiddenError('nope')

        result = run_operation(EventType.UPDATE_USER, {})

        assert not result.success
        assert result.status_code == 403
        assert result.body == {'message': 'nope'}

    def test_validation_error_is_400(self, fake_services):
        _, user_service = fake_services
        user_service.create_user.side_effect = ValidationError('User name is required field!')

        result = run_operation(EventType.CREATE_USER, {})

        assert result.status_code == 400
        assert result.body == {'message': 'User name is required field!'}

    def test_unexpected_exception_is_500(self, fake_services):
        """Errors outside the service hierarchy keep their message"""
        organization_service, _ = fake_services
        organization_service.update_organization.side_effect = RuntimeError('socket closed')

        result = run_operation(EventType.UPDATE_ORGANIZATION, {})

        assert result.status_code == 500
        assert result.body == {'message': 'socket closed'}

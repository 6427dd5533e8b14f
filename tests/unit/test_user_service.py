"""
Unit tests for UserService
"""
import uuid
import pytest

from org_users.exceptions import (
    ConflictError, ForbiddenError, NotFoundError, ValidationError
)
from org_users.models import Organization, User
from org_users.services import ConstraintChecker, UserService


class TestCreateUser:
    """Test cases for user creation"""

    def test_create_user_success(self, user_service, store, acme):
        result = user_service.create_user({
            'organizationId': 'org-acme',
            'name': 'Bob',
            'email': 'bob@x.com'
        })

        uuid.UUID(result['userId'])
        assert result['organizationId'] == 'org-acme'
        assert result['email'] == 'bob@x.com'
        assert store.get_user(result['userId']).name == 'Bob'

    def test_unknown_organization_is_400(self, user_service):
        """A referenced organization that does not exist is a bad request"""
        with pytest.raises(NotFoundError) as exc_info:
            user_service.create_user({
                'organizationId': 'org-nope',
                'name': 'Bob',
                'email': 'bob@x.com'
            })

        assert exc_info.value.status_code == 400
        assert 'org-nope' in exc_info.value.message

    def test_unknown_organization_never_reaches_email_check(self, mock_store):
        service = UserService(mock_store, ConstraintChecker(mock_store))

        with pytest.raises(NotFoundError):
            service.create_user({'organizationId': 'org-1', 'name': 'Bob', 'email': 'bob@x.com'})

        mock_store.query_users_by_email.assert_not_called()
        mock_store.put_user.assert_not_called()

    def test_email_unique_across_organizations(self, user_service, alice, globex):
        """An email held in one organization cannot be reused in another"""
        with pytest.raises(ConflictError) as exc_info:
            user_service.create_user({
                'organizationId': 'org-globex',
                'name': 'Other Alice',
                'email': 'a@x.com'
            })

        assert exc_info.value.message == "User with email 'a@x.com' already exists!"

    def test_invalid_email_rejected(self, user_service, acme):
        with pytest.raises(ValidationError) as exc_info:
            user_service.create_user({'organizationId': 'org-acme', 'name': 'Bob', 'email': 'bob'})

        assert exc_info.value.message == 'User email is invalid!'


class TestUpdateUser:
    """Test cases for user updates"""

    def test_update_name(self, user_service, alice):
        result = user_service.update_user({
            'userId': 'u1',
            'organizationId': 'org-acme',
            'name': 'Alice Liddell'
        })

        assert result == {
            'userId': 'u1',
            'organizationId': 'org-acme',
            'name': 'Alice Liddell',
            'email': 'a@x.com'
        }

    def test_keeping_own_email_allowed(self, user_service, alice):
        """A user's current email does not conflict with itself"""
        result = user_service.update_user({
            'userId': 'u1',
            'organizationId': 'org-acme',
            'email': 'a@x.com'
        })

        assert result['email'] == 'a@x.com'

    def test_email_taken_by_other_user(self, user_service, store, alice):
        store.put_user({'userId': 'u2', 'organizationId': 'org-acme', 'name': 'Bob', 'email': 'b@x.com'})

        with pytest.raises(ConflictError):
            user_service.update_user({
                'userId': 'u2',
                'organizationId': 'org-acme',
                'email': 'a@x.com'
            })

    def test_unknown_organization_is_400(self, user_service, alice):
        with pytest.raises(NotFoundError) as exc_info:
            user_service.update_user({'userId': 'u1', 'organizationId': 'org-nope', 'name': 'X'})

        assert exc_info.value.status_code == 400
        assert exc_info.value.message == "Organization with id 'org-nope' not found!"

    def test_unknown_user_is_404(self, user_service, acme):
        with pytest.raises(NotFoundError) as exc_info:
            user_service.update_user({'userId': 'u9', 'organizationId': 'org-acme', 'name': 'X'})

        assert exc_info.value.status_code == 404
        assert exc_info.value.message == "User with id 'u9' not found!"

    def test_other_organization_is_403(self, user_service, alice, globex):
        """Users cannot be addressed through an organization they do not belong to"""
        with pytest.raises(ForbiddenError) as exc_info:
            user_service.update_user({'userId': 'u1', 'organizationId': 'org-globex', 'name': 'X'})

        assert exc_info.value.status_code == 403
        assert exc_info.value.message == 'User does not belong to the specified organization'

    def test_mismatch_never_reaches_email_check(self, mock_store):
        """Ownership is decided before uniqueness"""
        mock_store.get_organization.return_value = Organization('org-2', name='Globex', description='d')
        mock_store.get_user.return_value = User('u1', organization_id='org-1', name='Alice', email='a@x.com')
        service = UserService(mock_store, ConstraintChecker(mock_store))

        with pytest.raises(ForbiddenError):
            service.update_user({'userId': 'u1', 'organizationId': 'org-2', 'email': 'new@x.com'})

        mock_store.query_users_by_email.assert_not_called()
        mock_store.update_user.assert_not_called()

    def test_no_updates_rejected(self, user_service, alice):
        with pytest.raises(ValidationError) as exc_info:
            user_service.update_user({'userId': 'u1', 'organizationId': 'org-acme'})

        assert exc_info.value.message == 'At least one of name or email must be provided'

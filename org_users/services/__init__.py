from .constraints import ConstraintChecker
from .organization_service import OrganizationService
from .store import DynamoDBStore
from .user_service import UserService

__all__ = ['ConstraintChecker', 'DynamoDBStore', 'OrganizationService', 'UserService']

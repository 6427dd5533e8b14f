from .organization import Organization, OrganizationNameIndex
from .user import User, UserEmailIndex

__all__ = ['Organization', 'OrganizationNameIndex', 'User', 'UserEmailIndex']

"""
Referential and uniqueness checks

Each check is one read against the store and decides from its result.
Nothing here locks: a concurrent request can create a conflicting record
between a check and the write that follows it.
"""
from typing import Optional


class ConstraintChecker:
    """
    Read-only existence checks used before every write
    """

    def __init__(self, store):
        self.store = store

    def organization_exists_by_id(self, organization_id: str) -> bool:
        """Point lookup of an organization by primary key"""
        return self.store.get_organization(organization_id) is not None

    def organization_exists_by_name(self, name: str, exclude_organization_id: Optional[str] = None) -> bool:
        """
        Check whether an organization holds this exact name

        Args:
            name: Organization name (case-sensitive)
            exclude_organization_id: Organization that may hold the name
                without counting as a conflict (the one being renamed)
        """
        return any(
            organization.organization_id != exclude_organization_id
            for organization in self.store.query_organizations_by_name(name)
        )

    def user_exists_by_email(self, email: str, exclude_user_id: Optional[str] = None) -> bool:
        """
        Check whether another user already holds this email

        Args:
            email: Email address (case-sensitive)
            exclude_user_id: User that may hold the email without counting
                as a conflict (the one being updated)
        """
        return any(
            user.user_id != exclude_user_id
            for user in self.store.query_users_by_email(email)
        )

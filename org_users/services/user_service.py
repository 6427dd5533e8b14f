"""
User Service
Business logic for creating and updating users inside organizations
"""
from typing import Dict, Any
from ..constants import EntityConstants, ErrorConstants, HTTPConstants
from ..exceptions import ConflictError, ForbiddenError, NotFoundError, ValidationError
from ..logger import user_logger as logger
from ..utils import generate_id
from ..validators.schemas import CREATE_USER_SCHEMA, UPDATE_USER_SCHEMA, validate


class UserService:
    """
    Service for managing user entities
    """

    def __init__(self, store, constraints):
        self.store = store
        self.constraints = constraints

    def create_user(self, payload: Dict[str, Any]) -> Dict[str, Any]:
        """
        Create a new user under an existing organization

        Args:
            payload: Raw payload with organizationId, name and email

        Returns:
            Created user record

        Raises:
            ValidationError: If the payload is malformed
            NotFoundError: If the organization does not exist (400)
            ConflictError: If the email is already used by any user
        """
        user = validate(payload, CREATE_USER_SCHEMA)
        organization_id = user[EntityConstants.ORGANIZATION_ID]

        self._require_organization(organization_id)

        email = user[EntityConstants.EMAIL]
        if self.constraints.user_exists_by_email(email):
            raise ConflictError(
                ErrorConstants.USER_EMAIL_TAKEN.format(email=email),
                entity_type=EntityConstants.USER,
                field=EntityConstants.EMAIL,
                value=email
            )

        item = {
            EntityConstants.USER_ID: generate_id(),
            **user
        }

        created = self.store.put_user(item)

        logger.log_service_operation(
            'create_user',
            entity_type=EntityConstants.USER,
            entity_id=item[EntityConstants.USER_ID],
            organization_id=organization_id
        )

        return created.to_dict()

    def update_user(self, payload: Dict[str, Any]) -> Dict[str, Any]:
        """
        Update name and/or email of a user

        The caller must name the organization the user already belongs to;
        users never move between organizations.

        Args:
            payload: Raw payload with userId, organizationId and optional
                name/email

        Returns:
            User record as stored after the update

        Raises:
            ValidationError: If the payload is malformed or carries no updates
            NotFoundError: If the organization (400) or user (404) is absent
            ForbiddenError: If the user belongs to another organization
            ConflictError: If another user already has the new email
        """
        user = validate(payload, UPDATE_USER_SCHEMA)
        organization_id = user[EntityConstants.ORGANIZATION_ID]
        user_id = user[EntityConstants.USER_ID]

        self._require_organization(organization_id)

        existing = self.store.get_user(user_id)
        if existing is None:
            raise NotFoundError(
                ErrorConstants.USER_NOT_FOUND.format(user_id=user_id),
                entity_type=EntityConstants.USER,
                entity_id=user_id,
                status_code=HTTPConstants.NOT_FOUND
            )

        if existing.organization_id != organization_id:
            logger.warning(
                "User organization mismatch",
                user_id=user_id,
                organization_id=organization_id
            )
            raise ForbiddenError(ErrorConstants.USER_ORGANIZATION_MISMATCH)

        updates = {
            field: user[field]
            for field in EntityConstants.USER_MUTABLE_FIELDS
            if field in user
        }

        if not updates:
            raise ValidationError(ErrorConstants.USER_NO_UPDATES)

        email = updates.get(EntityConstants.EMAIL)
        if email is not None and self.constraints.user_exists_by_email(email, exclude_user_id=user_id):
            raise ConflictError(
                ErrorConstants.USER_EMAIL_TAKEN.format(email=email),
                entity_type=EntityConstants.USER,
                field=EntityConstants.EMAIL,
                value=email
            )

        updated = self.store.update_user(user_id, updates)

        logger.log_service_operation(
            'update_user',
            entity_type=EntityConstants.USER,
            entity_id=user_id,
            updated_fields=list(updates.keys())
        )

        return updated.to_dict()

    def _require_organization(self, organization_id: str):
        """Fail with a 400 when the referenced organization is absent"""
        if not self.constraints.organization_exists_by_id(organization_id):
            raise NotFoundError(
                ErrorConstants.ORGANIZATION_NOT_FOUND.format(organization_id=organization_id),
                entity_type=EntityConstants.ORGANIZATION,
                entity_id=organization_id,
                status_code=HTTPConstants.BAD_REQUEST
            )

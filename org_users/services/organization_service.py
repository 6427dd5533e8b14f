"""
Organization Service
Business logic for creating and updating organizations
"""
from typing import Dict, Any
from ..constants import EntityConstants, ErrorConstants, HTTPConstants
from ..exceptions import ConflictError, NotFoundError, ValidationError
from ..logger import organization_logger as logger
from ..utils import generate_id
from ..validators.schemas import (
    CREATE_ORGANIZATION_SCHEMA, UPDATE_ORGANIZATION_SCHEMA, validate
)


class OrganizationService:
    """
    Service for managing organization entities
    """

    def __init__(self, store, constraints):
        """
        Args:
            store: External-store client (see DynamoDBStore)
            constraints: ConstraintChecker bound to the same store
        """
        self.store = store
        self.constraints = constraints

    def create_organization(self, payload: Dict[str, Any]) -> Dict[str, Any]:
        """
        Create a new organization

        Args:
            payload: Raw request payload with name and description

        Returns:
            Created organization record

        Raises:
            ValidationError: If the payload is malformed
            ConflictError: If the name is already taken
        """
        organization = validate(payload, CREATE_ORGANIZATION_SCHEMA)
        name = organization[EntityConstants.NAME]

        if self.constraints.organization_exists_by_name(name):
            raise ConflictError(
                ErrorConstants.ORGANIZATION_NAME_TAKEN.format(name=name),
                entity_type=EntityConstants.ORGANIZATION,
                field=EntityConstants.NAME,
                value=name
            )

        item = {
            EntityConstants.ORGANIZATION_ID: generate_id(),
            **organization
        }

        created = self.store.put_organization(item)

        logger.log_service_operation(
            'create_organization',
            entity_type=EntityConstants.ORGANIZATION,
            entity_id=item[EntityConstants.ORGANIZATION_ID]
        )

        return created.to_dict()

    def update_organization(self, payload: Dict[str, Any]) -> Dict[str, Any]:
        """
        Update name and/or description of an existing organization

        Args:
            payload: Raw request payload with organizationId and optional
                name/description

        Returns:
            Organization record as stored after the update

        Raises:
            ValidationError: If the payload is malformed or carries no updates
            NotFoundError: If the organization does not exist (404)
            ConflictError: If another organization already has the new name
        """
        organization = validate(payload, UPDATE_ORGANIZATION_SCHEMA)
        organization_id = organization[EntityConstants.ORGANIZATION_ID]

        if not self.constraints.organization_exists_by_id(organization_id):
            raise NotFoundError(
                ErrorConstants.ORGANIZATION_NOT_FOUND.format(organization_id=organization_id),
                entity_type=EntityConstants.ORGANIZATION,
                entity_id=organization_id,
                status_code=HTTPConstants.NOT_FOUND
            )

        updates = {
            field: organization[field]
            for field in EntityConstants.ORGANIZATION_MUTABLE_FIELDS
            if field in organization
        }

        if not updates:
            raise ValidationError(ErrorConstants.ORGANIZATION_NO_UPDATES)

        name = updates.get(EntityConstants.NAME)
        if name is not None and self.constraints.organization_exists_by_name(
                name, exclude_organization_id=organization_id):
            raise ConflictError(
                ErrorConstants.ORGANIZATION_NAME_TAKEN.format(name=name),
                entity_type=EntityConstants.ORGANIZATION,
                field=EntityConstants.NAME,
                value=name
            )

        updated = self.store.update_organization(organization_id, updates)

        logger.log_service_operation(
            'update_organization',
            entity_type=EntityConstants.ORGANIZATION,
            entity_id=organization_id,
            updated_fields=list(updates.keys())
        )

        return updated.to_dict()

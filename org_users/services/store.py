"""
DynamoDB store client
Every read and write against the Organizations and Users tables goes
through this class so services can be given a test double instead.
"""
from typing import Dict, List, Optional, Any, Type
from botocore.exceptions import BotoCoreError
from pynamodb.exceptions import DoesNotExist, PynamoDBException
from pynamodb.models import Model
from ..models.organization import Organization
from ..models.user import User
from ..error_handler import error_handler
from ..logger import store_logger as logger


def build_update_actions(model_class: Type[Model], updates: Dict[str, Any]) -> list:
    """
    Translate an update set into PynamoDB SET actions

    Only the supplied attributes are addressed. PynamoDB aliases attribute
    names and values in the rendered UpdateExpression, so reserved words
    such as ``name`` are safe.
    """
    return [getattr(model_class, field).set(value) for field, value in updates.items()]


class DynamoDBStore:
    """
    External-store client for organizations and users
    """

    def __init__(self, organization_model: Type[Organization] = Organization,
                 user_model: Type[User] = User):
        self.organization_model = organization_model
        self.user_model = user_model

    @property
    def organizations_table(self) -> str:
        return self.organization_model.Meta.table_name

    @property
    def users_table(self) -> str:
        return self.user_model.Meta.table_name

    # Organizations

    def get_organization(self, organization_id: str) -> Optional[Organization]:
        """
        Point lookup by primary key

        Returns:
            Organization or None if not found
        """
        return self._get(self.organization_model, self.organizations_table,
                         organization_id, 'get_organization')

    def query_organizations_by_name(self, name: str) -> List[Organization]:
        """Query name-index for organizations holding exactly this name"""
        return self._query(self.organization_model.name_index, self.organizations_table,
                           name, 'query_organizations_by_name')

    def put_organization(self, item: Dict[str, Any]) -> Organization:
        """Insert a full organization record"""
        organization = self.organization_model(
            item['organizationId'],
            name=item['name'],
            description=item['description']
        )
        return self._save(organization, self.organizations_table, 'put_organization')

    def update_organization(self, organization_id: str, updates: Dict[str, Any]) -> Organization:
        """Apply a partial update and return the record as stored afterwards"""
        organization = self.organization_model(organization_id)
        return self._update(organization, updates, self.organizations_table, 'update_organization')

    # Users

    def get_user(self, user_id: str) -> Optional[User]:
        """
        Point lookup by primary key

        Returns:
            User or None if not found
        """
        return self._get(self.user_model, self.users_table, user_id, 'get_user')

    def query_users_by_email(self, email: str) -> List[User]:
        """Query email-index for users holding exactly this email"""
        return self._query(self.user_model.email_index, self.users_table,
                           email, 'query_users_by_email')

    def put_user(self, item: Dict[str, Any]) -> User:
        """Insert a full user record"""
        user = self.user_model(
            item['userId'],
            organization_id=item['organizationId'],
            name=item['name'],
            email=item['email']
        )
        return self._save(user, self.users_table, 'put_user')

    def update_user(self, user_id: str, updates: Dict[str, Any]) -> User:
        """Apply a partial update and return the record as stored afterwards"""
        user = self.user_model(user_id)
        return self._update(user, updates, self.users_table, 'update_user')

    # Shared plumbing

    def _get(self, model_class, table_name: str, key: str, operation: str):
        try:
            item = model_class.get(key)
        except DoesNotExist:
            logger.log_database_operation(
                table_name=table_name,
                operation=operation,
                success=True,
                key=key,
                found=False
            )
            return None
        except (PynamoDBException, BotoCoreError) as e:
            logger.log_database_operation(
                table_name=table_name, operation=operation, success=False, key=key, error=str(e)
            )
            error_handler.raise_dynamodb_error(e, operation, table_name)

        logger.log_database_operation(
            table_name=table_name,
            operation=operation,
            success=True,
            key=key,
            found=True
        )
        return item

    def _query(self, index, table_name: str, hash_key: str, operation: str) -> list:
        try:
            results = list(index.query(hash_key))
        except (PynamoDBException, BotoCoreError) as e:
            logger.log_database_operation(
                table_name=table_name, operation=operation, success=False, error=str(e)
            )
            error_handler.raise_dynamodb_error(e, operation, table_name)

        logger.log_database_operation(
            table_name=table_name,
            operation=operation,
            success=True,
            result_count=len(results)
        )
        return results

    def _save(self, item, table_name: str, operation: str):
        try:
            item.save()
        except (PynamoDBException, BotoCoreError) as e:
            logger.log_database_operation(
                table_name=table_name, operation=operation, success=False, error=str(e)
            )
            error_handler.raise_dynamodb_error(e, operation, table_name)

        logger.log_database_operation(table_name=table_name, operation=operation, success=True)
        return item

    def _update(self, item, updates: Dict[str, Any], table_name: str, operation: str):
        actions = build_update_actions(type(item), updates)
        try:
            item.update(actions=actions)
        except (PynamoDBException, BotoCoreError) as e:
            logger.log_database_operation(
                table_name=table_name, operation=operation, success=False, error=str(e)
            )
            error_handler.raise_dynamodb_error(e, operation, table_name)

        logger.log_database_operation(
            table_name=table_name,
            operation=operation,
            success=True,
            updates=list(updates.keys())
        )
        return item

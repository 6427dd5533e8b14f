"""
PynamoDB model for User entities
"""
from typing import Dict, Any
from pynamodb.models import Model
from pynamodb.attributes import UnicodeAttribute
from pynamodb.indexes import GlobalSecondaryIndex, AllProjection
from ..config import config
from ..constants import DatabaseConstants


class UserEmailIndex(GlobalSecondaryIndex):
    """GSI for looking users up by email"""
    class Meta:
        index_name = DatabaseConstants.USER_EMAIL_INDEX
        projection = AllProjection()

    email = UnicodeAttribute(hash_key=True)


class User(Model):
    """
    User record, owned by exactly one organization

    Email is globally unique across organizations; organization_id never
    changes after creation.
    """

    class Meta:
        table_name = config.users_table_name
        region = config.aws_region
        host = config.dynamodb_host
        billing_mode = DatabaseConstants.BILLING_MODE

    user_id = UnicodeAttribute(hash_key=True, attr_name='userId')
    organization_id = UnicodeAttribute(attr_name='organizationId')
    name = UnicodeAttribute()
    email = UnicodeAttribute()

    email_index = UserEmailIndex()

    def to_dict(self) -> Dict[str, Any]:
        """Convert user to its public record shape"""
        return {
            'userId': self.user_id,
            'organizationId': self.organization_id,
            'name': self.name,
            'email': self.email,
        }

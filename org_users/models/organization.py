"""
PynamoDB model for Organization entities
"""
from typing import Dict, Any
from pynamodb.models import Model
from pynamodb.attributes import UnicodeAttribute
from pynamodb.indexes import GlobalSecondaryIndex, AllProjection
from ..config import config
from ..constants import DatabaseConstants


class OrganizationNameIndex(GlobalSecondaryIndex):
    """GSI for looking organizations up by name"""
    class Meta:
        index_name = DatabaseConstants.ORGANIZATION_NAME_INDEX
        projection = AllProjection()

    name = UnicodeAttribute(hash_key=True)


class Organization(Model):
    """
    Organization record

    Name is globally unique; uniqueness is checked through name-index
    before every write that sets it.
    """

    class Meta:
        table_name = config.organizations_table_name
        region = config.aws_region
        host = config.dynamodb_host
        billing_mode = DatabaseConstants.BILLING_MODE

    organization_id = UnicodeAttribute(hash_key=True, attr_name='organizationId')
    name = UnicodeAttribute()
    description = UnicodeAttribute()

    name_index = OrganizationNameIndex()

    def to_dict(self) -> Dict[str, Any]:
        """Convert organization to its public record shape"""
        return {
            'organizationId': self.organization_id,
            'name': self.name,
            'description': self.description,
        }

"""
Organization Update Lambda Function
PUT /organizations (name and description are mutable, organizationId is not)
"""
import os
import sys

# Make the org_users package importable when deployed from this directory
sys.path.append(os.path.join(os.path.dirname(__file__), '..'))

from org_users.handlers.http import update_organization


def lambda_handler(event, context):
    """Update an organization from an API Gateway proxy event"""
    return update_organization(event, context)

"""
User Update Lambda Function
PUT /organizations/{orgId}/users (users never change organization)
"""
import os
import sys

# Make the org_users package importable when deployed from this directory
sys.path.append(os.path.join(os.path.dirname(__file__), '..'))

from org_users.handlers.http import update_user


def lambda_handler(event, context):
    """Update a user from an API Gateway proxy event"""
    return update_user(event, context)

"""
User Create Lambda Function
POST /organizations/{orgId}/users
"""
import os
import sys

# Make the org_users package importable when deployed from this directory
sys.path.append(os.path.join(os.path.dirname(__file__), '..'))

from org_users.handlers.http import create_user


def lambda_handler(event, context):
    """Create a user from an API Gateway proxy event"""
    return create_user(event, context)

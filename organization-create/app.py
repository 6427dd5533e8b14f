"""
Organization Create Lambda Function
POST /organizations
"""
import os
import sys

# Make the org_users package importable when deployed from this directory
sys.path.append(os.path.join(os.path.dirname(__file__), '..'))

from org_users.handlers.http import create_organization


def lambda_handler(event, context):
    """Create an organization from an API Gateway proxy event"""
    return create_organization(event, context)

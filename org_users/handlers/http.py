"""
API Gateway adapters for the four mutation endpoints

    POST /organizations                  -> create organization
    POST /organizations/{orgId}/users    -> create user
    PUT  /organizations                  -> update organization
    PUT  /organizations/{orgId}/users    -> update user
"""
from typing import Dict, Any
from ..constants import EntityConstants
from ..decorators import api_gateway_handler
from ..operations import EventType, run_operation
from ..results import OperationResult
from ..utils import create_response


ORG_ID_PATH_PARAM = 'orgId'


def result_to_response(result: OperationResult) -> Dict[str, Any]:
    """Format an operation outcome as a Lambda proxy response"""
    return create_response(result.status_code, result.body)


def _with_path_organization(event: dict) -> Dict[str, Any]:
    """Request body with organizationId taken from the {orgId} path segment"""
    payload = dict(event['parsed_body'])
    org_id = event['path_params'].get(ORG_ID_PATH_PARAM)
    if org_id is not None:
        payload[EntityConstants.ORGANIZATION_ID] = org_id
    return payload


@api_gateway_handler()
def create_organization(event, context):
    """
    Create an organization

    Expected request body:
    {
        "name": "Acme",
        "description": "Anvils and rockets"
    }
    """
    result = run_operation(EventType.CREATE_ORGANIZATION, event['parsed_body'])
    return result_to_response(result)


@api_gateway_handler()
def create_user(event, context):
    """
    Create a user under the organization in the path

    Expected request body:
    {
        "name": "Bob",
        "email": "bob@example.com"
    }
    """
    result = run_operation(EventType.CREATE_USER, _with_path_organization(event))
    return result_to_response(result)


@api_gateway_handler()
def update_organization(event, context):
    """
    Update an organization

    Expected request body:
    {
        "organizationId": "...",   # Required
        "name": "Acme Corp",       # Optional
        "description": "..."       # Optional
    }
    """
    result = run_operation(EventType.UPDATE_ORGANIZATION, event['parsed_body'])
    return result_to_response(result)


@api_gateway_handler()
def update_user(event, context):
    """
    Update a user of the organization in the path

    Expected request body:
    {
        "userId": "...",              # Required
        "name": "Robert",             # Optional
        "email": "robert@example.com" # Optional
    }
    """
    result = run_operation(EventType.UPDATE_USER, _with_path_organization(event))
    return result_to_response(result)

"""
Queue Processor Lambda Function
Runs organization and user operations delivered through SQS
"""
import os
import sys

# Make the org_users package importable when deployed from this directory
sys.path.append(os.path.join(os.path.dirname(__file__), '..'))

from org_users.handlers.queue import sqs_handler


def lambda_handler(event, context):
    """Process an SQS batch of operation messages"""
    return sqs_handler(event, context)

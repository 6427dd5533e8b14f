"""
Org-Users Service

Organizations and users in DynamoDB behind API Gateway and SQS Lambdas.
Provides configuration, logging, validation, data models and services.
"""

__version__ = "1.0.0"

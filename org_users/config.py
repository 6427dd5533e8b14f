"""
Configuration management for org-users-service
Supports environment variables, local .env files, SSM Parameter Store and defaults
"""
import os
from typing import Optional, Any
from functools import lru_cache
import boto3
from botocore.exceptions import ClientError, BotoCoreError, NoCredentialsError
from dotenv import load_dotenv

# Local development: pick up a .env file without overriding real env vars
load_dotenv(override=False)


class Config:
    """
    Configuration manager with hybrid approach:
    1. Environment Variables (highest priority)
    2. AWS Parameter Store (environment-specific)
    3. Local defaults (development fallback)
    """

    def __init__(self):
        self.environment = os.environ.get('ENVIRONMENT', 'dev')
        self.parameter_store_prefix = os.environ.get(
            'PARAMETER_STORE_PREFIX',
            f'/org-users/{self.environment}'
        )
        self.parameter_store_enabled = os.environ.get(
            'PARAMETER_STORE_ENABLED', 'true'
        ).lower() in ('true', '1', 'yes', 'on')
        self._ssm_client = None

    @property
    def ssm_client(self):
        """Lazy initialization of SSM client"""
        if self._ssm_client is None and self.parameter_store_enabled:
            try:
                self._ssm_client = boto3.client('ssm', region_name=self.aws_region)
            except (NoCredentialsError, BotoCoreError):
                # Local development without AWS credentials
                self._ssm_client = None
        return self._ssm_client

    def get_parameter(self, key: str, default: Any = None) -> Any:
        """
        Get configuration parameter with fallback hierarchy:
        1. Environment variable
        2. SSM Parameter Store
        3. Default value
        """
        env_key = f"ORG_USERS_{key.upper().replace('-', '_')}"
        env_value = os.environ.get(env_key)
        if env_value is not None:
            return env_value

        env_value = os.environ.get(key.upper().replace('-', '_'))
        if env_value is not None:
            return env_value

        ssm_value = self.get_ssm_parameter(key)
        if ssm_value is not None:
            return ssm_value

        return default

    @lru_cache(maxsize=128)
    def get_ssm_parameter(self, key: str) -> Optional[str]:
        """
        Get parameter from AWS SSM Parameter Store with caching
        """
        if not self.ssm_client:
            return None

        parameter_name = f"{self.parameter_store_prefix}/{key}"

        try:
            response = self.ssm_client.get_parameter(Name=parameter_name)
            return response['Parameter']['Value']
        except ClientError as e:
            if e.response['Error']['Code'] != 'ParameterNotFound':
                print(f"Error getting SSM parameter {parameter_name}: {e}")
            return None
        except BotoCoreError as e:
            print(f"Unexpected error getting SSM parameter {parameter_name}: {e}")
            return None

    def get_bool_parameter(self, key: str, default: bool = False) -> bool:
        """Get boolean parameter"""
        value = self.get_parameter(key, default)
        if isinstance(value, bool):
            return value
        if isinstance(value, str):
            return value.lower() in ('true', '1', 'yes', 'on')
        return default

    @property
    def aws_region(self) -> str:
        """AWS region for DynamoDB and SSM clients"""
        return os.environ.get('AWS_REGION') or os.environ.get('AWS_DEFAULT_REGION', 'eu-west-1')

    @property
    def organizations_table_name(self) -> str:
        """Get organizations table name"""
        return self.get_parameter('organizations-table-name', 'Organizations')

    @property
    def users_table_name(self) -> str:
        """Get users table name"""
        return self.get_parameter('users-table-name', 'Users')

    @property
    def dynamodb_host(self) -> Optional[str]:
        """Custom DynamoDB endpoint, e.g. DynamoDB Local on http://localhost:8000"""
        return self.get_parameter('dynamodb-host') or None

    @property
    def enable_debug_logging(self) -> bool:
        """Get debug logging flag"""
        return self.get_bool_parameter('enable-debug-logging', False)


# Global configuration instance
config = Config()

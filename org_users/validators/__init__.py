from .schemas import (
    CREATE_ORGANIZATION_SCHEMA,
    CREATE_USER_SCHEMA,
    UPDATE_ORGANIZATION_SCHEMA,
    UPDATE_USER_SCHEMA,
    validate,
)

__all__ = [
    'CREATE_ORGANIZATION_SCHEMA',
    'CREATE_USER_SCHEMA',
    'UPDATE_ORGANIZATION_SCHEMA',
    'UPDATE_USER_SCHEMA',
    'validate',
]

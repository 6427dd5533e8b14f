"""
Declarative request schemas for the four mutation operations

Each schema lists its fields once; ``validate`` walks every field, collects
all violations and fails with a single ValidationError.
"""
import re
from dataclasses import dataclass
from typing import Any, Dict, List, Optional, Tuple

from ..constants import EntityConstants, ValidationConstants
from ..exceptions import ValidationError


EMAIL_RE = re.compile(ValidationConstants.EMAIL_PATTERN)


@dataclass(frozen=True)
class Field:
    """A single string field of a request schema"""

    name: str
    label: str
    required: bool = False
    email: bool = False
    required_message: Optional[str] = None

    def check(self, data: Dict[str, Any]) -> Tuple[Optional[str], List[str]]:
        """
        Normalize one field

        Returns:
            (trimmed value or None when absent, list of violations)
        """
        value = data.get(self.name)

        if value is None:
            if self.required:
                return None, [self.required_message or f'{self.label} is required!']
            return None, []

        if not isinstance(value, str):
            return None, [f'{self.label} must be a string!']

        value = value.strip()
        if not value:
            if self.required:
                return None, [self.required_message or f'{self.label} is required!']
            return None, [f'{self.label} cannot be empty!']

        if self.email and not EMAIL_RE.match(value):
            return None, [f'{self.label} is invalid!']

        return value, []


@dataclass(frozen=True)
class Schema:
    """Ordered collection of fields for one operation"""

    name: str
    fields: Tuple[Field, ...]

    @property
    def field_names(self) -> List[str]:
        return [field.name for field in self.fields]


CREATE_ORGANIZATION_SCHEMA = Schema('create-organization', (
    Field(EntityConstants.NAME, 'Organization name', required=True,
          required_message='Organization name is required field!'),
    Field(EntityConstants.DESCRIPTION, 'Organization description', required=True,
          required_message='Organization description is required field!'),
))

CREATE_USER_SCHEMA = Schema('create-user', (
    Field(EntityConstants.NAME, 'User name', required=True,
          required_message='User name is required field!'),
    Field(EntityConstants.EMAIL, 'User email', required=True, email=True,
          required_message='User email is required field!'),
    Field(EntityConstants.ORGANIZATION_ID, 'Organization id', required=True),
))

UPDATE_ORGANIZATION_SCHEMA = Schema('update-organization', (
    Field(EntityConstants.ORGANIZATION_ID, 'Organization id', required=True),
    Field(EntityConstants.NAME, 'Organization name'),
    Field(EntityConstants.DESCRIPTION, 'Organization description'),
))

UPDATE_USER_SCHEMA = Schema('update-user', (
    Field(EntityConstants.USER_ID, 'User id', required=True),
    Field(EntityConstants.NAME, 'User name'),
    Field(EntityConstants.EMAIL, 'User email', email=True),
    Field(EntityConstants.ORGANIZATION_ID, 'Organization id', required=True),
))


def validate(data: Any, schema: Schema) -> Dict[str, str]:
    """
    Validate and normalize a raw payload against a schema

    Args:
        data: Raw input object (decoded JSON)
        schema: Schema to apply

    Returns:
        Dict with only the schema's fields; strings are trimmed and absent
        optional fields are omitted

    Raises:
        ValidationError: with every violation joined into one message
    """
    if not isinstance(data, dict):
        data = {}

    normalized = {}
    errors = []

    for field in schema.fields:
        value, field_errors = field.check(data)
        errors.extend(field_errors)
        if value is not None:
            normalized[field.name] = value

    if errors:
        raise ValidationError(ValidationConstants.ERROR_SEPARATOR.join(errors), errors=errors)

    return normalized

"""
Operation outcome shared by both transports
"""
from dataclasses import dataclass
from typing import Any, Dict, Optional
from .constants import HTTPConstants
from .exceptions import ServiceError


@dataclass
class OperationResult:
    """
    Either an ok record with its success status, or a typed error

    Transports never inspect exceptions; they read status_code and body.
    """

    status_code: int
    data: Optional[Dict[str, Any]] = None
    error: Optional[ServiceError] = None

    @classmethod
    def ok(cls, data: Dict[str, Any], status_code: int = HTTPConstants.OK) -> 'OperationResult':
        return cls(status_code=status_code, data=data)

    @classmethod
    def failure(cls, error: ServiceError) -> 'OperationResult':
        return cls(status_code=error.status_code, error=error)

    @property
    def success(self) -> bool:
        return self.error is None

    @property
    def body(self) -> Dict[str, Any]:
        """Payload for the outbound response: the record or {"message": ...}"""
        if self.error is not None:
            return self.error.to_dict()
        return self.data

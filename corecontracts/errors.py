"""
Custom exception classes for corecontracts.

Every failure raised while decoding or validating a request is a ContractError,
so callers can map the whole family onto a single client-input error response.
"""

from typing import Any, Optional


class ContractError(Exception):
    """Base exception for all contract errors"""

    kind = "ContractError"

    def __init__(self, message: str, details: Optional[dict] = None):
        self.message = message
        self.details = details or {}
        super().__init__(self.message)


class DecodeError(ContractError):
    """Raised when request bytes are empty or not a well-formed request document"""

    kind = "DecodeError"

    def __init__(self, target: str, message: Optional[str] = None):
        msg = message or f"Failed to decode {target}"
        super().__init__(msg, {"target": target})


class FieldRequiredError(ContractError):
    """Raised when a mandatory field is missing or empty"""

    kind = "FieldRequired"

    def __init__(self, field: str, message: Optional[str] = None):
        self.field = field
        msg = message or f"{field} is required"
        super().__init__(msg, {"field": field})


class FieldInvalidError(ContractError):
    """Raised when a present field fails its format or enum check"""

    kind = "FieldInvalid"

    def __init__(self, field: str, value: Any, message: Optional[str] = None):
        self.field = field
        self.value = value
        msg = message or f"{field} has invalid value {value!r}"
        super().__init__(msg, {"field": field, "value": value})

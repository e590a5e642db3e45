"""
Field validation rules shared by the device service requests.

The is_* predicates are pure checks; the check_* helpers raise the matching
ContractError so each request validator can compose them in its own order.
"""

import logging
import re
from typing import Any, Iterable, Optional
from urllib.parse import urlparse

from corecontracts.errors import FieldInvalidError, FieldRequiredError

logger = logging.getLogger(__name__)

UUID_PATTERN = re.compile(
    r"^[0-9a-f]{8}-[0-9a-f]{4}-[0-9a-f]{4}-[0-9a-f]{4}-[0-9a-f]{12}$", re.IGNORECASE
)


def is_uuid(value: Any) -> bool:
    """Check that value is a canonical, hyphenated UUID string"""
    return isinstance(value, str) and UUID_PATTERN.match(value) is not None


def is_one_of(value: Any, allowed: Iterable[str]) -> bool:
    """Check membership of value in a closed set of string constants"""
    return isinstance(value, str) and value in allowed


def is_uri(value: Any) -> bool:
    """Check that value is an absolute URI with a scheme and a host"""
    if not isinstance(value, str) or not value or any(c.isspace() for c in value):
        return False
    try:
        parsed = urlparse(value)
        host = parsed.hostname
    except ValueError:
        return False
    return bool(parsed.scheme) and bool(host)


def require(value: Optional[str], field: str) -> None:
    """Raise FieldRequiredError when value is None or empty"""
    if not value:
        logger.debug(f"Validation failed: {field} is required")
        raise FieldRequiredError(field)


def check_uuid(value: str, field: str) -> None:
    if not is_uuid(value):
        logger.debug(f"Validation failed: {field}={value!r} is not a UUID")
        raise FieldInvalidError(field, value, f"{field} must be a UUID, got {value!r}")


def check_one_of(value: str, allowed: Iterable[str], field: str) -> None:
    if not is_one_of(value, allowed):
        logger.debug(f"Validation failed: {field}={value!r} not in {sorted(allowed)}")
        raise FieldInvalidError(
            field, value, f"{field} must be one of {sorted(allowed)}, got {value!r}"
        )


def check_uri(value: str, field: str) -> None:
    if not is_uri(value):
        logger.debug(f"Validation failed: {field}={value!r} is not a URI")
        raise FieldInvalidError(field, value, f"{field} must be a URI, got {value!r}")


def check_request_id(request_id: Optional[str]) -> None:
    """An empty request id is allowed; a non-empty one must be a UUID"""
    if request_id:
        check_uuid(request_id, "requestId")

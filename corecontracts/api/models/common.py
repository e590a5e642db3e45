"""
Common API models.

This module contains the envelope models shared by every request and response.
"""

import logging
from typing import Type, TypeVar, Union

from pydantic import BaseModel, ConfigDict, field_validator
from pydantic import ValidationError as PydanticValidationError
from pydantic.alias_generators import to_camel

from corecontracts.core.validation import check_request_id
from corecontracts.errors import DecodeError

logger = logging.getLogger(__name__)

RequestT = TypeVar("RequestT", bound="BaseRequest")


class ContractModel(BaseModel):
    """Base model using the camelCase field names of the wire format"""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="ignore",
    )


class BaseRequest(ContractModel):
    """Request envelope carrying the correlation id"""

    request_id: str = ""

    @field_validator("request_id", mode="before")
    @classmethod
    def _null_request_id(cls, v):
        return "" if v is None else v

    def validate(self) -> None:
        """Check the request id; subclasses extend this with their own rules"""
        check_request_id(self.request_id)

    @classmethod
    def from_json(cls: Type[RequestT], data: Union[bytes, str]) -> RequestT:
        """
        Decode a request document and validate it

        Args:
            data: JSON document as bytes or text

        Returns:
            The decoded and validated request

        Raises:
            DecodeError: if data is empty or not a well-formed request
            FieldRequiredError, FieldInvalidError: if validation fails
        """
        try:
            request = cls.model_validate_json(data)
        except PydanticValidationError as e:
            logger.debug(f"Failed to decode {cls.__name__}: {e}")
            raise DecodeError(
                cls.__name__, f"Failed to decode {cls.__name__}: {e.errors()[0]['msg']}"
            ) from e

        request.validate()
        return request

    def to_json(self) -> str:
        return self.model_dump_json(by_alias=True, exclude_none=True)


class BaseResponse(ContractModel):
    """Response envelope echoing the request id with a status"""

    request_id: str = ""
    message: str = ""
    status_code: int = 0

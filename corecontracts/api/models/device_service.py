"""
Device service API models.

This module contains Pydantic models for the device service resource and its
conversions to and from the storage model.
"""

from typing import List, Optional

from pydantic import Field, field_validator

from corecontracts.core.database.models import DeviceService as DeviceServiceModel

from .common import BaseResponse, ContractModel


class DeviceService(ContractModel):
    """Device service model with every field of the resource"""

    id: str = ""
    name: str = ""
    description: str = ""
    base_address: str = ""
    operating_state: str = ""
    admin_state: str = ""
    labels: Optional[List[str]] = None
    created: int = 0
    modified: int = 0
    last_connected: int = 0
    last_reported: int = 0

    # A JSON null leaves a field at its zero value
    @field_validator(
        "id", "name", "description", "base_address", "operating_state", "admin_state", mode="before"
    )
    @classmethod
    def _null_as_empty(cls, v):
        return "" if v is None else v

    @field_validator("created", "modified", "last_connected", "last_reported", mode="before")
    @classmethod
    def _null_as_zero(cls, v):
        return 0 if v is None else v


class UpdateDeviceService(ContractModel):
    """
    Device service patch model with all fields optional

    Presence is read from model_fields_set: a field missing from the input is
    left alone on merge. Labels given as [] or null clear the target labels.
    """

    id: Optional[str] = None
    name: Optional[str] = None
    description: Optional[str] = None
    base_address: Optional[str] = None
    operating_state: Optional[str] = None
    admin_state: Optional[str] = None
    labels: Optional[List[str]] = None

    def is_set(self, field: str) -> bool:
        """Whether field was supplied; null on a scalar field counts as not supplied"""
        if field not in self.model_fields_set:
            return False
        if field == "labels":
            return True
        return getattr(self, field) is not None


class DeviceServiceResponse(BaseResponse):
    """Response carrying a single device service"""

    service: DeviceService = Field(default_factory=DeviceService)


class MultiDeviceServicesResponse(BaseResponse):
    """Response carrying a list of device services"""

    services: List[DeviceService] = Field(default_factory=list)


def to_device_service_model(dto: DeviceService) -> DeviceServiceModel:
    """
    Project a device service DTO onto a new storage model

    An empty id and missing labels are left off the model so the column
    defaults assign them on insert.
    """
    model = DeviceServiceModel(
        name=dto.name,
        description=dto.description,
        base_address=dto.base_address,
        operating_state=dto.operating_state,
        admin_state=dto.admin_state,
    )
    if dto.id:
        model.id = dto.id
    if dto.labels is not None:
        model.labels = list(dto.labels)
    return model


def from_device_service_model(model: DeviceServiceModel) -> DeviceService:
    """Build a device service DTO from a storage model"""
    return DeviceService(
        id=model.id or "",
        name=model.name or "",
        description=model.description or "",
        base_address=model.base_address or "",
        operating_state=model.operating_state or "",
        admin_state=model.admin_state or "",
        labels=list(model.labels) if model.labels is not None else None,
        created=model.created or 0,
        modified=model.modified or 0,
        last_connected=model.last_connected or 0,
        last_reported=model.last_reported or 0,
    )

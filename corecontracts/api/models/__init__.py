"""
API models package.

This package contains the Pydantic DTOs exchanged on the wire.
"""

from .common import BaseRequest, BaseResponse, ContractModel
from .device_service import (
    DeviceService,
    DeviceServiceResponse,
    MultiDeviceServicesResponse,
    UpdateDeviceService,
    from_device_service_model,
    to_device_service_model,
)
from .requests import (
    AddDeviceServiceRequest,
    UpdateDeviceServiceRequest,
    add_device_service_req_to_device_service_models,
    replace_device_service_model_fields_with_dto,
)

__all__ = [
    "ContractModel",
    "BaseRequest",
    "BaseResponse",
    "DeviceService",
    "UpdateDeviceService",
    "DeviceServiceResponse",
    "MultiDeviceServicesResponse",
    "to_device_service_model",
    "from_device_service_model",
    "AddDeviceServiceRequest",
    "UpdateDeviceServiceRequest",
    "add_device_service_req_to_device_service_models",
    "replace_device_service_model_fields_with_dto",
]

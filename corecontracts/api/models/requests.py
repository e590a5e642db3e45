"""
Device service request models.

This module contains the add and update request envelopes for device services,
their validation rules, and the create/merge operations onto storage models.
"""

import logging
from typing import List, Sequence

from pydantic import Field

from corecontracts.core.database.models import AdminState, OperatingState
from corecontracts.core.database.models import DeviceService as DeviceServiceModel
from corecontracts.core.validation import check_one_of, check_uri, check_uuid, require
from corecontracts.errors import FieldRequiredError

from .common import BaseRequest
from .device_service import DeviceService, UpdateDeviceService, to_device_service_model

logger = logging.getLogger(__name__)

SERVER_ASSIGNED_FIELDS = {"created", "modified", "last_connected", "last_reported"}


class AddDeviceServiceRequest(BaseRequest):
    """Request to add a fully populated device service"""

    service: DeviceService = Field(default_factory=DeviceService)

    def validate(self) -> None:
        super().validate()
        service = self.service

        require(service.name, "service.name")

        require(service.operating_state, "service.operatingState")
        check_one_of(service.operating_state, OperatingState.values, "service.operatingState")

        require(service.admin_state, "service.adminState")
        check_one_of(service.admin_state, AdminState.values, "service.adminState")

        require(service.base_address, "service.baseAddress")
        check_uri(service.base_address, "service.baseAddress")

        if service.id:
            check_uuid(service.id, "service.id")

    def to_json(self) -> str:
        # Timestamps are assigned by the server and only appear on responses
        return self.model_dump_json(
            by_alias=True,
            exclude_none=True,
            exclude={"service": SERVER_ASSIGNED_FIELDS},
        )


class UpdateDeviceServiceRequest(BaseRequest):
    """Request to patch an existing device service, found by id or name"""

    service: UpdateDeviceService = Field(default_factory=UpdateDeviceService)

    def validate(self) -> None:
        super().validate()
        service = self.service

        # id or name is the lookup key downstream
        if not service.id and not service.name:
            logger.debug("Validation failed: neither service.id nor service.name given")
            raise FieldRequiredError(
                "service.id", "service.id or service.name is required"
            )

        if service.id:
            check_uuid(service.id, "service.id")
        if service.is_set("operating_state"):
            check_one_of(service.operating_state, OperatingState.values, "service.operatingState")
        if service.is_set("admin_state"):
            check_one_of(service.admin_state, AdminState.values, "service.adminState")
        if service.is_set("base_address"):
            check_uri(service.base_address, "service.baseAddress")

    def to_json(self) -> str:
        # Unset fields stay off the wire so presence survives a round trip
        return self.model_dump_json(by_alias=True, exclude_unset=True)


def add_device_service_req_to_device_service_models(
    add_requests: Sequence[AddDeviceServiceRequest],
) -> List[DeviceServiceModel]:
    """Map validated add requests onto new storage models, preserving order"""
    return [to_device_service_model(req.service) for req in add_requests]


def replace_device_service_model_fields_with_dto(
    ds: DeviceServiceModel, patch: UpdateDeviceService
) -> None:
    """
    Merge the supplied fields of patch onto ds in place

    Fields not supplied on the patch are left untouched, as are id and name.
    Labels supplied as [] or null clear the model's labels.
    """
    if patch.is_set("description"):
        ds.description = patch.description
    if patch.is_set("base_address"):
        ds.base_address = patch.base_address
    if patch.is_set("operating_state"):
        ds.operating_state = patch.operating_state
    if patch.is_set("admin_state"):
        ds.admin_state = patch.admin_state
    if patch.is_set("labels"):
        ds.labels = list(patch.labels) if patch.labels is not None else []

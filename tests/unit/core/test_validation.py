import pytest

from corecontracts.core.database.models import AdminState, OperatingState
from corecontracts.core.validation import (
    check_one_of,
    check_request_id,
    check_uri,
    check_uuid,
    is_one_of,
    is_uri,
    is_uuid,
    require,
)
from corecontracts.errors import ContractError, FieldInvalidError, FieldRequiredError


@pytest.mark.parametrize(
    "value, expected",
    [
        ("82eb2e26-0f24-48aa-ae4c-de9dac3fb9bc", True),
        ("82EB2E26-0F24-48AA-AE4C-DE9DAC3FB9BC", True),
        ("82eb2e260f2448aaae4cde9dac3fb9bc", False),
        ("jfdw324", False),
        ("", False),
        (None, False),
    ],
)
def test_is_uuid(value, expected):
    assert is_uuid(value) is expected


def test_is_one_of():
    assert is_one_of(OperatingState.ENABLED, OperatingState.values)
    assert is_one_of(AdminState.UNLOCKED, AdminState.values)
    assert not is_one_of("enabled", OperatingState.values)
    assert not is_one_of(AdminState.LOCKED, OperatingState.values)
    assert not is_one_of(None, AdminState.values)


@pytest.mark.parametrize(
    "value, expected",
    [
        ("http://localhost:49990", True),
        ("https://device-virtual.edge/api", True),
        ("invalid", False),
        ("localhost:49990", False),
        ("http://", False),
        ("http://exa mple.com", False),
        (" http://localhost:49990", False),
        ("http://:80", False),
        ("http://localhost:80/path", True),
        ("", False),
    ],
)
def test_is_uri(value, expected):
    assert is_uri(value) is expected


def test_require():
    require("name", "service.name")
    with pytest.raises(FieldRequiredError) as exc_info:
        require("", "service.name")
    assert exc_info.value.field == "service.name"
    assert exc_info.value.details == {"field": "service.name"}
    with pytest.raises(FieldRequiredError):
        require(None, "service.name")


def test_check_helpers_raise_field_invalid():
    with pytest.raises(FieldInvalidError) as exc_info:
        check_one_of("invalid", AdminState.values, "service.adminState")
    assert exc_info.value.value == "invalid"
    assert exc_info.value.kind == "FieldInvalid"

    with pytest.raises(FieldInvalidError):
        check_uuid("2h022mc", "service.id")
    with pytest.raises(FieldInvalidError):
        check_uri("invalid", "service.baseAddress")


def test_check_request_id():
    check_request_id("")
    check_request_id(None)
    check_request_id("82eb2e26-0f24-48aa-ae4c-de9dac3fb9bc")
    with pytest.raises(ContractError):
        check_request_id("jfdw324")

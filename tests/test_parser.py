import pytest

from gattpath.core.errors import (
    HandleParseError,
    InvalidArgumentError,
    MalformedHexFieldError,
    NoMarkerFoundError,
)
from gattpath.bt_ref.constants import RESULT_ERR_BAD_ARGS, RESULT_ERR_NOT_FOUND
from gattpath.gatt.handle import AttributeKind, Handle
from gattpath.gatt.parser import is_attribute_path, parse, split_segments, try_parse


def test_parse_descriptor_handle(device_path):
    handle = parse(f"{device_path}/service0025/char0026/descriptor0027")
    assert handle == Handle(kind=AttributeKind.DESCRIPTOR, handle=0x27, parent=0x26)


def test_parse_characteristic_handle(device_path):
    handle = parse(f"{device_path}/service0025/char0026")
    assert handle == Handle(kind=AttributeKind.CHARACTERISTIC, handle=0x26, parent=0x25)


def test_parse_service_handle(device_path):
    handle = parse(f"{device_path}/service0025")
    assert handle == Handle(kind=AttributeKind.SERVICE, handle=0x25, parent=0)


@pytest.mark.parametrize(
    "service, char, desc",
    [(0x0001, 0x0002, 0x0003), (0x00FF, 0x0100, 0xFFFF), (0x1234, 0xABCD, 0xBEEF)],
)
def test_parse_full_width_fields(device_path, service, char, desc):
    service_path = f"{device_path}/service{service:04x}"
    char_path = f"{service_path}/char{char:04x}"
    desc_path = f"{char_path}/descriptor{desc:04x}"

    assert parse(service_path) == Handle(AttributeKind.SERVICE, 0, service)
    assert parse(char_path) == Handle(AttributeKind.CHARACTERISTIC, service, char)
    assert parse(desc_path) == Handle(AttributeKind.DESCRIPTOR, char, desc)


def test_hex_field_starting_with_letters(device_path):
    # A plain "strip leading letters" scan would eat the "ab" of the handle
    assert parse(f"{device_path}/serviceab12").handle == 0xAB12
    assert parse(f"{device_path}/serviceab12/charcd34").parent == 0xAB12


def test_uppercase_hex(device_path):
    assert parse(f"{device_path}/service00AF/char00B0").handle == 0xB0


def test_long_marker_spelling(device_path):
    handle = parse(f"{device_path}/service0025/characteristic0026")
    assert handle == Handle(AttributeKind.CHARACTERISTIC, 0x25, 0x26)


def test_trailing_slash_ignored(device_path):
    assert parse(f"{device_path}/service0025/") == Handle(AttributeKind.SERVICE, 0, 0x25)


def test_no_marker(device_path):
    with pytest.raises(NoMarkerFoundError) as excinfo:
        parse(device_path)
    assert excinfo.value.code == RESULT_ERR_NOT_FOUND
    assert excinfo.value.path == device_path


def test_empty_path():
    with pytest.raises(NoMarkerFoundError):
        parse("")


@pytest.mark.parametrize(
    "suffix, field",
    [
        ("service025", "handle"),
        ("service00zz", "handle"),
        ("service00250", "handle"),
        ("services", "handle"),
        ("service0025/char26", "handle"),
        ("service0025/char0026/descriptor0027x", "handle"),
    ],
)
def test_malformed_handle_field(device_path, suffix, field):
    with pytest.raises(MalformedHexFieldError) as excinfo:
        parse(f"{device_path}/{suffix}")
    assert excinfo.value.field == field
    assert excinfo.value.code == RESULT_ERR_BAD_ARGS


def test_malformed_parent_field(device_path):
    with pytest.raises(MalformedHexFieldError) as excinfo:
        parse(f"{device_path}/service00g5/char0026")
    assert excinfo.value.field == "parent"


def test_descriptor_without_enclosing_characteristic():
    with pytest.raises(MalformedHexFieldError) as excinfo:
        parse("/descriptor0027")
    assert excinfo.value.field == "parent"


def test_characteristic_not_under_service(device_path):
    with pytest.raises(MalformedHexFieldError):
        parse(f"{device_path}/char0026")


def test_parse_errors_share_base_class(device_path):
    for bad in (device_path, f"{device_path}/service00zz"):
        with pytest.raises(HandleParseError):
            parse(bad)


def test_non_string_rejected():
    with pytest.raises(InvalidArgumentError):
        parse(0x25)


def test_try_parse(device_path):
    assert try_parse(f"{device_path}/service0025") == Handle(AttributeKind.SERVICE, 0, 0x25)
    assert try_parse(device_path) is None
    assert try_parse(f"{device_path}/service00zz") is None


def test_is_attribute_path(device_path):
    assert is_attribute_path(f"{device_path}/service0025/char0026")
    assert not is_attribute_path("/org/bluez/hci0")


def test_from_path_matches_parse(device_path):
    path = f"{device_path}/service0025/char0026/descriptor0027"
    assert Handle.from_path(path) == parse(path)


def test_split_segments():
    assert split_segments("/org//bluez/") == ["org", "bluez"]


def test_str_subclass_accepted(device_path):
    class ObjectPath(str):
        pass

    assert parse(ObjectPath(f"{device_path}/service0025")).handle == 0x25

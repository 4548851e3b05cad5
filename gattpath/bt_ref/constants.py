"""
Reference constants for gattpath.

BlueZ object-path layout and the integer result codes carried by every
:class:`gattpath.core.errors.GattPathError`.
"""

# BlueZ Core Constants
ADAPTER_NAME = "hci0"
BLUEZ_NAMESPACE = "/org/bluez/"

# Object path markers, most specific first
PATH_MARKER__DESCRIPTOR = "descriptor"
PATH_MARKER__CHARACTERISTIC = "char"
PATH_MARKER__SERVICE = "service"
PATH_MARKERS = (
    PATH_MARKER__DESCRIPTOR,
    PATH_MARKER__CHARACTERISTIC,
    PATH_MARKER__SERVICE,
)

# Width of the hex handle field that follows a marker
HANDLE_FIELD_WIDTH = 4
HANDLE_MAX = 0xFFFF

# Result/Error Codes
RESULT_ERR = 1
RESULT_ERR_BAD_ARGS = 8
RESULT_ERR_NOT_FOUND = 9
RESULT_ERR_UNKNOWN_OBJECT = 18

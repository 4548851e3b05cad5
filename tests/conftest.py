# tests/conftest.py
import os
import tempfile

# Keep log files and settings out of the real home directory; must happen
# before gattpath.core.config is first imported.
_XDG_ROOT = tempfile.mkdtemp(prefix="gattpath-tests-")
for _var in ("XDG_DATA_HOME", "XDG_CONFIG_HOME"):
    os.environ[_var] = os.path.join(_XDG_ROOT, _var.lower())

import pytest

DEVICE_PATH = "/org/bluez/hci0/dev_01_02_03_04_05_06"


@pytest.fixture
def device_path() -> str:
    return DEVICE_PATH


@pytest.fixture
def managed_paths() -> list:
    """Object paths in the shuffled order a GetManagedObjects reply may use."""
    return [
        f"{DEVICE_PATH}/service0025/char0026/descriptor0027",
        "/org/bluez",
        f"{DEVICE_PATH}/service0010",
        f"{DEVICE_PATH}/service0025/char0029",
        "/org/bluez/hci0",
        f"{DEVICE_PATH}/service0025",
        f"{DEVICE_PATH}/service0010/char0011",
        DEVICE_PATH,
        f"{DEVICE_PATH}/service0025/char0026",
        f"{DEVICE_PATH}/service0025/char0026/descriptor0028",
    ]

from __future__ import annotations

from typing import Any

import hid

from asdbctl.domain.devices import DeviceDescriptor
from asdbctl.errors import DiscoveryError, TransportIoError


class StudioDisplayHid:
    """HID access for Apple Studio Displays.

    - Lists every HID interface the system currently exposes.
    - Opens a handle on one interface by its enumeration path.

    Matching the brightness interface among those is the caller's job
    (see `asdbctl.domain.devices.find_target_devices`).

    Notes on hidapi:
    - `hid.enumerate()` returns plain dicts; an absent serial is reported as "".
    - `hid.device.open_path()` wants the path as bytes.
    """

    def __init__(self, *, vendor_id: int = 0, product_id: int = 0) -> None:
        # 0 means "any" to hidapi.
        self.vendor_id = vendor_id
        self.product_id = product_id

    def list_devices(self) -> list[DeviceDescriptor]:
        try:
            infos = hid.enumerate(self.vendor_id, self.product_id)
        except (OSError, RuntimeError) as exc:
            raise DiscoveryError(f"HID enumeration failed: {exc}") from exc

        return [DeviceDescriptor.from_hid_info(info) for info in infos]

    def open(self, device: DeviceDescriptor) -> Any:
        """Open a blocking handle on `device` and return it.

        The handle is owned by the caller, who must `close()` it.
        """

        handle = hid.device()
        try:
            handle.open_path(device.path)
        except (OSError, ValueError) as exc:
            raise TransportIoError(f"Could not open HID device at {device.path!r}: {exc}") from exc
        return handle

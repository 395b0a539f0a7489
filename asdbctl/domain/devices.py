from __future__ import annotations

from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from typing import Any

from asdbctl.protocol.codes import StudioDisplayIds


@dataclass(frozen=True)
class DeviceDescriptor:
    """One connected HID interface, as reported by enumeration.

    `path` is opaque and only used to open a handle.
    """

    vendor_id: int
    product_id: int
    interface_number: int
    path: bytes
    serial_number: str | None = None
    product_string: str | None = None

    @classmethod
    def from_hid_info(cls, info: Mapping[str, Any]) -> DeviceDescriptor:
        """Build a descriptor from one `hid.enumerate()` entry."""

        path = info.get("path", b"")
        if isinstance(path, str):
            path = path.encode()

        # hidapi reports a missing serial as an empty string.
        serial = info.get("serial_number") or None
        product = info.get("product_string") or None

        return cls(
            vendor_id=int(info.get("vendor_id", 0)),
            product_id=int(info.get("product_id", 0)),
            interface_number=int(info.get("interface_number", -1)),
            path=bytes(path),
            serial_number=serial,
            product_string=product,
        )

    @property
    def label(self) -> str:
        if self.serial_number:
            return f"serial {self.serial_number}"
        return f"path {self.path.decode(errors='replace')}"


@dataclass(frozen=True)
class DeviceMatcher:
    vendor_id: int
    product_id: int
    interface_number: int

    def matches(self, device: DeviceDescriptor) -> bool:
        return (
            device.vendor_id == self.vendor_id
            and device.product_id == self.product_id
            and device.interface_number == self.interface_number
        )


STUDIO_DISPLAY_MATCHER = DeviceMatcher(
    vendor_id=StudioDisplayIds.VENDOR_ID,
    product_id=StudioDisplayIds.PRODUCT_ID,
    interface_number=StudioDisplayIds.INTERFACE_NUMBER,
)


def find_target_devices(
    all_devices: Iterable[DeviceDescriptor],
    matcher: DeviceMatcher = STUDIO_DISPLAY_MATCHER,
) -> list[DeviceDescriptor]:
    """Keep only the interfaces that speak the brightness protocol.

    Enumeration order is preserved. An empty result is not an error here;
    the caller decides whether "no display" is fatal.
    """

    return [device for device in all_devices if matcher.matches(device)]


def filter_by_serial(devices: Iterable[DeviceDescriptor], serial: str | None) -> list[DeviceDescriptor]:
    # A device without a serial number can never satisfy an explicit filter.
    if serial is None:
        return list(devices)
    return [device for device in devices if device.serial_number == serial]

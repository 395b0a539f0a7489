"""Shared fixtures: an in-memory stand-in for an open hidapi handle."""

from __future__ import annotations

import os
import struct

import pytest

# Must be set before any Qt import
os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

from asdbctl.domain.devices import DeviceDescriptor
from asdbctl.protocol.codes import StudioDisplayIds
from asdbctl.transport.hid_transport import HidTransport


class FakeHidHandle:
    """Minimal stand-in for `hid.device` answering brightness feature reports.

    Keeps the last written brightness so get/set scenarios can be replayed
    without hardware.
    """

    def __init__(self, raw: int = 30000, *, response_length: int = 7) -> None:
        self.raw = raw
        self.response_length = response_length
        self.sent: list[bytes] = []
        self.requests: list[tuple[int, int]] = []
        self.closed = False

    def get_feature_report(self, report_id: int, max_length: int) -> list[int]:
        self.requests.append((report_id, max_length))
        report = struct.pack("<BIH", report_id, self.raw, 0)
        if self.response_length <= len(report):
            return list(report[: self.response_length])
        return list(report + bytes(self.response_length - len(report)))

    def send_feature_report(self, data: bytes) -> int:
        data = bytes(data)
        self.sent.append(data)
        self.raw = struct.unpack_from("<I", data, 1)[0]
        return len(data)

    def close(self) -> None:
        self.closed = True


def make_descriptor(
    *,
    serial: str | None = "A",
    path: bytes = b"/dev/hidraw0",
    vendor_id: int = StudioDisplayIds.VENDOR_ID,
    product_id: int = StudioDisplayIds.PRODUCT_ID,
    interface_number: int = StudioDisplayIds.INTERFACE_NUMBER,
) -> DeviceDescriptor:
    return DeviceDescriptor(
        vendor_id=vendor_id,
        product_id=product_id,
        interface_number=interface_number,
        path=path,
        serial_number=serial,
        product_string="Studio Display",
    )


@pytest.fixture
def fake_handle() -> FakeHidHandle:
    return FakeHidHandle()


@pytest.fixture
def transport(fake_handle: FakeHidHandle) -> HidTransport:
    return HidTransport(fake_handle, name="test")

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass

from asdbctl.domain.devices import (
    STUDIO_DISPLAY_MATCHER,
    DeviceDescriptor,
    DeviceMatcher,
    filter_by_serial,
    find_target_devices,
)
from asdbctl.domain.units import STUDIO_DISPLAY_UNITS, BrightnessUnits
from asdbctl.errors import NoDeviceFound
from asdbctl.protocol.brightness import (
    MAX_PERCENT,
    read_brightness_percent,
    step_down,
    step_up,
    write_brightness_percent,
)
from asdbctl.transport.hid_transport import HidTransport
from hid_display import StudioDisplayHid


logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class DisplayReading:
    device: DeviceDescriptor
    percent: int


def _check_percent(percent: int) -> None:
    if not 0 <= percent <= MAX_PERCENT:
        raise ValueError("brightness must be 0..100")


def _check_step(step: int) -> None:
    if not 1 <= step <= MAX_PERCENT:
        raise ValueError("step must be 1..100")


class DisplayBackend:
    """Selection and dispatch of brightness operations across displays.

    Matched displays are handled one at a time in enumeration order, and
    each handle is closed before the next one is opened.
    """

    def __init__(
        self,
        hid_display: StudioDisplayHid | None = None,
        *,
        matcher: DeviceMatcher = STUDIO_DISPLAY_MATCHER,
        units: BrightnessUnits = STUDIO_DISPLAY_UNITS,
    ) -> None:
        self._hid = hid_display if hid_display is not None else StudioDisplayHid()
        self._matcher = matcher
        self.units = units

    def discover(self) -> list[DeviceDescriptor]:
        displays = find_target_devices(self._hid.list_devices(), self._matcher)
        if not displays:
            raise NoDeviceFound("No Apple Studio Display found")

        for display in displays:
            if display.serial_number:
                logger.info("display serial number %s", display.serial_number)
        return displays

    def select(self, serial: str | None = None) -> list[DeviceDescriptor]:
        displays = filter_by_serial(self.discover(), serial)
        if not displays:
            logger.warning("No display with serial number %r", serial)
        return displays

    def open(self, device: DeviceDescriptor) -> HidTransport:
        return HidTransport(self._hid.open(device), name=device.label)

    def open_one(self, serial: str | None = None) -> tuple[DeviceDescriptor, HidTransport]:
        """Open the first selected display; the caller owns the returned transport."""

        displays = self.select(serial)
        if not displays:
            raise NoDeviceFound(f"No display found with serial {serial!r}")
        device = displays[0]
        return device, self.open(device)

    def get(self, serial: str | None = None) -> list[DisplayReading]:
        return self._for_each(serial, lambda t: read_brightness_percent(t, self.units))

    def set(self, percent: int, serial: str | None = None) -> list[DisplayReading]:
        _check_percent(percent)

        def _apply(transport: HidTransport) -> int:
            write_brightness_percent(transport, percent, self.units)
            return percent

        return self._for_each(serial, _apply)

    def up(self, step: int, serial: str | None = None) -> list[DisplayReading]:
        _check_step(step)
        return self._for_each(serial, lambda t: step_up(t, step, self.units))

    def down(self, step: int, serial: str | None = None) -> list[DisplayReading]:
        _check_step(step)
        return self._for_each(serial, lambda t: step_down(t, step, self.units))

    def _for_each(
        self,
        serial: str | None,
        operation: Callable[[HidTransport], int],
    ) -> list[DisplayReading]:
        readings: list[DisplayReading] = []
        for device in self.select(serial):
            with self.open(device) as transport:
                percent = operation(transport)
            logger.debug("%s -> %d%%", device.label, percent)
            readings.append(DisplayReading(device=device, percent=percent))
        return readings

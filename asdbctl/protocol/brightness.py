"""Brightness read/write transactions on an open display handle.

Every call goes to the device. The current value is never cached, since
another agent (the OS, another tool) may change it between calls.
"""

from __future__ import annotations

import logging

from asdbctl.domain.units import STUDIO_DISPLAY_UNITS, BrightnessUnits
from asdbctl.errors import SizeMismatchError
from asdbctl.protocol.codes import REPORT_ID
from asdbctl.protocol.report import decode, encode
from asdbctl.transport.hid_transport import HidTransport


logger = logging.getLogger(__name__)

MAX_PERCENT = 100


def read_raw(handle: HidTransport) -> int:
    """Return the brightness in native units."""

    request = encode(REPORT_ID, 0)
    response = handle.get_feature_report(request)
    if len(response) != len(request):
        raise SizeMismatchError(expected=len(request), actual=len(response))

    value = decode(response)
    logger.debug("Read raw brightness %d", value)
    return value


def write_raw(handle: HidTransport, value: int) -> None:
    logger.debug("Writing raw brightness %d", value)
    handle.send_feature_report(encode(REPORT_ID, value))


def read_brightness_percent(handle: HidTransport, units: BrightnessUnits = STUDIO_DISPLAY_UNITS) -> int:
    return units.to_percent(read_raw(handle))


def write_brightness_percent(
    handle: HidTransport,
    percent: int,
    units: BrightnessUnits = STUDIO_DISPLAY_UNITS,
) -> None:
    write_raw(handle, units.to_raw(percent))


def step_up(handle: HidTransport, step: int, units: BrightnessUnits = STUDIO_DISPLAY_UNITS) -> int:
    """Raise brightness by `step` percent, saturating at 100. Returns the new percent."""

    current = read_brightness_percent(handle, units)
    target = min(MAX_PERCENT, current + step)
    write_brightness_percent(handle, target, units)
    logger.info("Brightness %d%% -> %d%%", current, target)
    return target


def step_down(handle: HidTransport, step: int, units: BrightnessUnits = STUDIO_DISPLAY_UNITS) -> int:
    """Lower brightness by `step` percent, saturating at 0. Returns the new percent."""

    current = read_brightness_percent(handle, units)
    target = max(0, current - step)
    write_brightness_percent(handle, target, units)
    logger.info("Brightness %d%% -> %d%%", current, target)
    return target

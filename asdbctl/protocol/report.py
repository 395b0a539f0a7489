from __future__ import annotations

import struct
from dataclasses import dataclass

from asdbctl.errors import UnexpectedSizeError
from asdbctl.protocol.codes import MAX_U32, REPORT_LENGTH


# report id, brightness (u32 LE), reserved (u16)
_REPORT_STRUCT = struct.Struct("<BIH")


@dataclass(frozen=True)
class FeatureReport:
    report_id: int
    brightness: int
    reserved: int = 0


def encode(report_id: int, brightness: int) -> bytes:
    """Build the 7-byte brightness feature report.

    Output is: <report id> <brightness, 4 bytes LE> 00 00
    """

    if report_id < 0 or report_id > 0xFF:
        raise ValueError("report_id must be 0..255")

    if brightness < 0 or brightness > MAX_U32:
        raise ValueError("brightness must fit in an unsigned 32-bit integer")

    return _REPORT_STRUCT.pack(report_id, brightness, 0)


def decode_report(buffer: bytes | bytearray | list[int]) -> FeatureReport:
    raw = bytes(buffer)
    if len(raw) != REPORT_LENGTH:
        raise UnexpectedSizeError(expected=REPORT_LENGTH, actual=len(raw))

    report_id, brightness, reserved = _REPORT_STRUCT.unpack(raw)
    return FeatureReport(report_id=report_id, brightness=brightness, reserved=reserved)


def decode(buffer: bytes | bytearray | list[int]) -> int:
    """Return the brightness field of a feature report.

    Bytes 0, 5 and 6 are ignored. Raises `UnexpectedSizeError` unless the
    buffer is exactly 7 bytes long.
    """

    return decode_report(buffer).brightness


def format_report_bytes(data: bytes | bytearray | list[int], *, max_len: int = 64) -> str:
    """Format report bytes as hex, truncated for logs."""

    raw = bytes(data)
    truncated = raw[:max_len]
    hex_part = " ".join(f"{b:02X}" for b in truncated)
    if len(raw) > max_len:
        return f"{hex_part} …(+{len(raw) - max_len} bytes)"
    return hex_part

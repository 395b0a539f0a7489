from __future__ import annotations

"""Apple Studio Display brightness protocol constants.

Keep protocol constants here so the rest of the codebase doesn't duplicate them.
"""


class StudioDisplayIds:
    """USB identity of the HID interface that speaks the brightness protocol.

    The display exposes several HID interfaces; only interface 7 answers
    brightness feature reports.
    """

    VENDOR_ID = 0x05AC
    PRODUCT_ID = 0x1114
    INTERFACE_NUMBER = 7


# Feature report: [report id][brightness u32 LE][2 reserved bytes]
REPORT_ID = 0x01
REPORT_LENGTH = 7
BRIGHTNESS_OFFSET = 1
BRIGHTNESS_SIZE = 4

# Native brightness bounds (device-specific, not user-configurable).
MIN_BRIGHTNESS = 400
MAX_BRIGHTNESS = 60000

MAX_U32 = 0xFFFFFFFF

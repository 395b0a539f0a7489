"""Error types raised by the display brightness stack.

Every failure the core can report is one of the classes below, so callers
can branch on the kind of failure instead of parsing messages.
"""

from __future__ import annotations


class AsdbctlError(Exception):
    """Base class for all errors raised by asdbctl."""


class DiscoveryError(AsdbctlError):
    """The HID layer could not be initialized or enumeration failed."""


class NoDeviceFound(AsdbctlError):
    """No connected HID interface matched the supported display."""


class ProtocolError(AsdbctlError):
    """A feature report did not have the expected layout."""


class UnexpectedSizeError(ProtocolError):
    def __init__(self, *, expected: int, actual: int) -> None:
        super().__init__(f"Expected a feature report of {expected} bytes, got {actual}")
        self.expected = expected
        self.actual = actual


class TransportError(AsdbctlError):
    """A feature report transaction with the device failed."""


class SizeMismatchError(TransportError):
    def __init__(self, *, expected: int, actual: int) -> None:
        super().__init__(f"Get HID feature report: expected a size of {expected}, got {actual}")
        self.expected = expected
        self.actual = actual


class TransportIoError(TransportError):
    """The underlying HID call raised (unplugged, permission denied, busy)."""

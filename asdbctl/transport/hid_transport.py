from __future__ import annotations

import logging
from typing import Any

from asdbctl.errors import TransportIoError
from asdbctl.protocol.report import format_report_bytes


logger = logging.getLogger(__name__)


class HidTransport:
    """Thin wrapper around an open hidapi handle with an app-friendly interface.

    Every library failure is re-raised as `TransportIoError`. There are no
    retries: a failed transaction is reported to the caller right away.
    """

    def __init__(self, handle: Any, *, name: str = "display") -> None:
        self._handle = handle
        self.name = name

    @property
    def is_open(self) -> bool:
        return self._handle is not None

    def get_feature_report(self, request: bytes) -> bytes:
        """Issue a get-feature-report transaction shaped like `request`.

        `request[0]` is the report id and `len(request)` the expected size.
        Returns whatever the device answered, without validating its length.
        """

        handle = self._require_handle()
        logger.debug("TX get feature (%s): %s", self.name, format_report_bytes(request))
        try:
            data = handle.get_feature_report(request[0], len(request))
        except (OSError, ValueError) as exc:
            raise TransportIoError(f"Get HID feature report failed: {exc}") from exc

        response = bytes(data) if data else b""
        logger.debug("RX feature (%s): %s", self.name, format_report_bytes(response))
        return response

    def send_feature_report(self, report: bytes) -> int:
        handle = self._require_handle()
        logger.debug("TX send feature (%s): %s", self.name, format_report_bytes(report))
        try:
            written = handle.send_feature_report(report)
        except (OSError, ValueError) as exc:
            raise TransportIoError(f"Send HID feature report failed: {exc}") from exc

        if written is not None and written < 0:
            raise TransportIoError(f"Send HID feature report failed (returned {written})")
        return written

    def close(self) -> None:
        if self._handle is None:
            return
        logger.debug("Closing HID transport (%s)", self.name)
        try:
            self._handle.close()
        finally:
            self._handle = None

    def __enter__(self) -> HidTransport:
        return self

    def __exit__(self, *exc: object) -> None:
        self.close()

    def _require_handle(self) -> Any:
        if self._handle is None:
            raise TransportIoError(f"HID transport ({self.name}) is closed")
        return self._handle

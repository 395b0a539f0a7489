from __future__ import annotations

import logging
import threading

from PySide6 import QtCore

from asdbctl.app.state import SliderState, clamp_percent
from asdbctl.domain.units import STUDIO_DISPLAY_UNITS, BrightnessUnits
from asdbctl.errors import AsdbctlError
from asdbctl.protocol.brightness import (
    read_brightness_percent,
    step_down,
    step_up,
    write_brightness_percent,
)
from asdbctl.transport.hid_transport import HidTransport


class BrightnessWorker(QtCore.QObject):
    """Sole owner of the display handle for a GUI session.

    The window never touches the handle; it sends requests to these slots
    over queued connections. All handle access happens under `_handle_lock`.
    """

    state_changed = QtCore.Signal(object)

    def __init__(
        self,
        transport: HidTransport,
        *,
        display_label: str,
        units: BrightnessUnits = STUDIO_DISPLAY_UNITS,
        initial_percent: int | None = None,
        coalesce_ms: int = 30,
    ) -> None:
        super().__init__()
        self._logger = logging.getLogger(self.__class__.__name__)

        self._transport: HidTransport | None = transport
        self._display_label = display_label
        self._units = units

        self._handle_lock = threading.Lock()
        self._pending_percent: int | None = None
        self._last_state = SliderState(
            connected=True,
            status_text="Connected",
            display_label=display_label,
            percent=initial_percent,
        )

        # Slider drags emit a burst of values; only the latest one is written.
        self._coalesce_ms = coalesce_ms
        self._apply_timer = QtCore.QTimer(self)
        self._apply_timer.setSingleShot(True)
        self._apply_timer.timeout.connect(self.flush)

    @property
    def last_state(self) -> SliderState:
        return self._last_state

    @QtCore.Slot(int)
    def request_percent(self, percent: int) -> None:
        self._pending_percent = clamp_percent(int(percent))
        self._apply_timer.start(self._coalesce_ms)

    @QtCore.Slot()
    def flush(self) -> None:
        percent = self._pending_percent
        self._pending_percent = None
        if percent is None:
            return

        try:
            with self._handle_lock:
                write_brightness_percent(self._require_transport(), percent, self._units)
        except AsdbctlError as exc:
            self._logger.error("Failed to set brightness: %s", exc)
            self._emit_failure(f"Failed to set brightness: {exc}")
            return

        self._emit_state(
            SliderState(
                connected=True,
                status_text="Connected",
                display_label=self._display_label,
                percent=percent,
            )
        )

    @QtCore.Slot(int)
    def adjust(self, delta: int) -> None:
        """Step the brightness by `delta` percent (negative lowers it)."""

        if delta == 0:
            return
        self._apply_timer.stop()
        self.flush()

        try:
            with self._handle_lock:
                transport = self._require_transport()
                if delta > 0:
                    percent = step_up(transport, delta, self._units)
                else:
                    percent = step_down(transport, -delta, self._units)
        except AsdbctlError as exc:
            self._logger.error("Failed to step brightness: %s", exc)
            self._emit_failure(f"Failed to step brightness: {exc}")
            return

        self._emit_state(
            SliderState(
                connected=True,
                status_text="Connected",
                display_label=self._display_label,
                percent=percent,
            )
        )

    @QtCore.Slot()
    def refresh(self) -> None:
        try:
            with self._handle_lock:
                percent = read_brightness_percent(self._require_transport(), self._units)
        except AsdbctlError as exc:
            self._logger.error("Failed to read brightness: %s", exc)
            self._emit_failure(f"Failed to read brightness: {exc}")
            return

        self._emit_state(
            SliderState(
                connected=True,
                status_text="Connected",
                display_label=self._display_label,
                percent=clamp_percent(percent),
            )
        )

    @QtCore.Slot()
    def shutdown(self) -> None:
        self._apply_timer.stop()
        with self._handle_lock:
            if self._transport is not None:
                try:
                    self._transport.close()
                except OSError:
                    self._logger.exception("Error while closing transport")
            self._transport = None
        self._emit_state(
            SliderState(
                connected=False,
                status_text="Disconnected",
                display_label=self._display_label,
                percent=self._last_state.percent,
            )
        )

    def _require_transport(self) -> HidTransport:
        if self._transport is None:
            raise AsdbctlError("Display is not connected")
        return self._transport

    def _emit_failure(self, status_text: str) -> None:
        prev = self._last_state
        self._emit_state(
            SliderState(
                connected=prev.connected,
                status_text=status_text,
                display_label=prev.display_label,
                percent=prev.percent,
            )
        )

    def _emit_state(self, state: SliderState) -> None:
        self._last_state = state
        self.state_changed.emit(state)

from __future__ import annotations

import argparse
import logging
import sys

from PySide6 import QtCore, QtWidgets

from asdbctl.app.backend import DisplayBackend
from asdbctl.app.config import ConfigManager
from asdbctl.app.state import clamp_percent
from asdbctl.app.theme import apply_theme
from asdbctl.app.ui.qt_slider import BrightnessWindow, fit_window_to_screen
from asdbctl.app.ui.qt_worker import BrightnessWorker
from asdbctl.errors import AsdbctlError
from asdbctl.logging_setup import configure_logging
from asdbctl.protocol.brightness import read_brightness_percent


logger = logging.getLogger("ui_main")


def run_gui(config: ConfigManager, *, serial: str | None = None, backend: DisplayBackend | None = None) -> int:
    """Open the display, then run the slider window until it is closed.

    Failing to find or open the display is fatal at launch.
    """

    backend = backend or DisplayBackend()

    transport = None
    try:
        device, transport = backend.open_one(serial)
        initial_percent = clamp_percent(read_brightness_percent(transport, backend.units))
    except AsdbctlError as exc:
        logger.error("%s", exc)
        if transport is not None:
            transport.close()
        return 1

    app = QtWidgets.QApplication.instance() or QtWidgets.QApplication(sys.argv[:1])
    apply_theme(app, config.theme_mode)

    window = BrightnessWindow(step=config.step)
    fit_window_to_screen(window)

    display_label = device.product_string or "Studio Display"
    if device.serial_number:
        display_label = f"{display_label} ({device.serial_number})"

    thread = QtCore.QThread()
    worker = BrightnessWorker(
        transport,
        display_label=display_label,
        units=backend.units,
        initial_percent=initial_percent,
    )
    worker.moveToThread(thread)

    window.percent_requested.connect(worker.request_percent, QtCore.Qt.ConnectionType.QueuedConnection)
    window.adjust_requested.connect(worker.adjust, QtCore.Qt.ConnectionType.QueuedConnection)
    worker.state_changed.connect(window.apply_state)

    window.apply_state(worker.last_state)

    thread.start()
    window.show()

    code = app.exec()

    # Run shutdown on the worker's own thread so the handle is closed by its owner.
    QtCore.QMetaObject.invokeMethod(
        worker,
        "shutdown",
        QtCore.Qt.ConnectionType.BlockingQueuedConnection,
    )
    thread.quit()
    thread.wait(2000)
    return int(code)


def main() -> None:
    parser = argparse.ArgumentParser()
    parser.add_argument(
        "-s",
        "--serial",
        default=None,
        help="Serial number of the display to control.",
    )
    parser.add_argument(
        "--log-level",
        default=None,
        help="Logging level (DEBUG, INFO, WARNING, ERROR). Can also use ASDBCTL_LOG_LEVEL env var.",
    )
    parser.add_argument(
        "--config",
        default=None,
        help="Path to the config file.",
    )
    parser.add_argument(
        "--theme",
        choices=("system", "light", "dark"),
        default=None,
        help="Window theme. Saved to the config file.",
    )
    args = parser.parse_args()

    configure_logging(cli_level=args.log_level, default="INFO")

    config = ConfigManager(args.config)
    if args.theme is not None and args.theme != config.theme_mode:
        config.theme_mode = args.theme

    serial = args.serial if args.serial is not None else config.serial
    raise SystemExit(run_gui(config, serial=serial))


if __name__ == "__main__":
    main()

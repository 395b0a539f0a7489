from __future__ import annotations

from PySide6 import QtCore, QtGui, QtWidgets

from asdbctl.app.state import SliderState, clamp_percent


_WINDOW_SIZE = QtCore.QSize(420, 160)

_SLIDER_STYLESHEET = """
    QSlider::groove:horizontal {
        border: 1px solid #999999;
        height: 10px;
        background: qlineargradient(x1:0, y1:0, x2:1, y2:0,
            stop:0 #333333, stop:1 #dddddd);
        border-radius: 5px;
    }
    QSlider::handle:horizontal {
        background: #ffffff;
        border: 2px solid #666666;
        width: 18px;
        margin: -6px 0;
        border-radius: 9px;
    }
    QSlider::sub-page:horizontal {
        background: palette(highlight);
        border-radius: 5px;
    }
"""


class BrightnessWindow(QtWidgets.QMainWindow):
    percent_requested = QtCore.Signal(int)
    adjust_requested = QtCore.Signal(int)

    def __init__(self, *, step: int = 10) -> None:
        super().__init__()
        self.setWindowTitle("Studio Display Brightness")
        self.resize(_WINDOW_SIZE)
        self._step = step

        title_font = QtGui.QFont()
        title_font.setPointSize(14)
        title_font.setBold(True)

        root = QtWidgets.QWidget()
        self.setCentralWidget(root)

        self._display_label = QtWidgets.QLabel("—")
        self._display_label.setFont(title_font)

        self._percent_label = QtWidgets.QLabel("— %")
        self._percent_label.setFont(title_font)
        self._percent_label.setMinimumWidth(64)
        self._percent_label.setAlignment(QtCore.Qt.AlignmentFlag.AlignRight | QtCore.Qt.AlignmentFlag.AlignVCenter)

        self._slider = QtWidgets.QSlider(QtCore.Qt.Orientation.Horizontal)
        self._slider.setRange(0, 100)
        self._slider.setSingleStep(1)
        self._slider.setPageStep(step)
        self._slider.setStyleSheet(_SLIDER_STYLESHEET)
        self._slider.valueChanged.connect(self._on_slider_changed)

        self._btn_down = QtWidgets.QPushButton("−")
        self._btn_down.setFixedWidth(40)
        self._btn_down.clicked.connect(lambda: self.adjust_requested.emit(-self._step))

        self._btn_up = QtWidgets.QPushButton("+")
        self._btn_up.setFixedWidth(40)
        self._btn_up.clicked.connect(lambda: self.adjust_requested.emit(self._step))

        self._status = QtWidgets.QLabel("Disconnected")

        slider_row = QtWidgets.QHBoxLayout()
        slider_row.setSpacing(8)
        slider_row.addWidget(self._btn_down)
        slider_row.addWidget(self._slider, 1)
        slider_row.addWidget(self._btn_up)
        slider_row.addWidget(self._percent_label)

        layout = QtWidgets.QVBoxLayout(root)
        layout.setContentsMargins(16, 16, 16, 16)
        layout.setSpacing(12)
        layout.addWidget(self._display_label)
        layout.addLayout(slider_row)
        layout.addWidget(self._status)

        self.apply_state(SliderState(connected=False, status_text="Disconnected"))

    @property
    def slider(self) -> QtWidgets.QSlider:
        return self._slider

    def apply_state(self, state: SliderState) -> None:
        self._display_label.setText(state.display_label or "—")
        self._status.setText(state.status_text)

        enabled = state.connected
        self._slider.setEnabled(enabled)
        self._btn_down.setEnabled(enabled)
        self._btn_up.setEnabled(enabled)

        if state.percent is None:
            self._percent_label.setText("— %")
            return

        percent = clamp_percent(state.percent)
        self._percent_label.setText(f"{percent} %")
        # Don't fight the user mid-drag, and don't echo device updates back as requests.
        if not self._slider.isSliderDown() and self._slider.value() != percent:
            self._slider.blockSignals(True)
            self._slider.setValue(percent)
            self._slider.blockSignals(False)

    def _on_slider_changed(self, value: int) -> None:
        self._percent_label.setText(f"{value} %")
        self.percent_requested.emit(value)


def fit_window_to_screen(window: QtWidgets.QWidget, *, preferred: QtCore.QSize = _WINDOW_SIZE) -> None:
    screen = window.screen() or QtGui.QGuiApplication.primaryScreen()
    if screen is None:
        window.resize(preferred)
        return

    avail = screen.availableGeometry()
    width = min(preferred.width(), avail.width())
    height = min(preferred.height(), avail.height())
    window.resize(QtCore.QSize(width, height))

from __future__ import annotations

from dataclasses import dataclass

from asdbctl.protocol.codes import MAX_BRIGHTNESS, MIN_BRIGHTNESS


_U8_MAX = 0xFF


@dataclass(frozen=True)
class BrightnessUnits:
    """Linear mapping between native brightness units and percent.

    Both directions truncate toward zero instead of rounding, so a round trip
    can lose up to one percent.
    """

    min_raw: int
    max_raw: int

    def __post_init__(self) -> None:
        if self.min_raw < 0 or self.max_raw <= self.min_raw:
            raise ValueError("need 0 <= min_raw < max_raw")

    @property
    def span(self) -> int:
        return self.max_raw - self.min_raw

    def to_percent(self, raw: int) -> int:
        """Convert a native value to percent (0 for anything below `min_raw`).

        Values above `max_raw` produce more than 100; the result saturates at 255.
        """

        offset = max(raw, self.min_raw) - self.min_raw
        percent = int(offset / float(self.span) * 100.0)
        return min(percent, _U8_MAX)

    def to_raw(self, percent: int) -> int:
        """Convert percent to a native value, clamped into [min_raw, max_raw]."""

        raw = int((percent * float(self.span)) / 100.0 + self.min_raw)
        # Clamp after the conversion; intermediate values may fall outside the range.
        return max(self.min_raw, min(self.max_raw, raw))


STUDIO_DISPLAY_UNITS = BrightnessUnits(min_raw=MIN_BRIGHTNESS, max_raw=MAX_BRIGHTNESS)


def to_percent(raw: int) -> int:
    return STUDIO_DISPLAY_UNITS.to_percent(raw)


def to_raw(percent: int) -> int:
    return STUDIO_DISPLAY_UNITS.to_raw(percent)

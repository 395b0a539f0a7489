from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class SliderState:
    connected: bool
    status_text: str

    display_label: str | None = None
    percent: int | None = None


def clamp_percent(percent: int) -> int:
    return max(0, min(100, percent))

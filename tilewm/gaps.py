"""Configurable gaps between and around tiled windows."""

from __future__ import annotations

from dataclasses import dataclass

from tilewm.models import Monitor


@dataclass
class GapConfig:
    """Global gap settings: on/off switch, smart-gap factor and defaults."""

    enabled: bool = True
    smartgaps_fact: int = 1
    gappih: int = 20
    gappiv: int = 10
    gappoh: int = 10
    gappov: int = 30

    def toggle(self) -> None:
        """Switch gaps on or off everywhere."""
        self.enabled = not self.enabled

    def gaps_for(self, monitor: Monitor) -> tuple:
        """Return (outer h, outer v, inner h, inner v, tiled client count)."""
        n = len(monitor.tiled_clients())
        outer = inner = 1 if self.enabled else 0
        if n == 1:
            outer *= self.smartgaps_fact
        return (
            monitor.gappoh * outer,
            monitor.gappov * outer,
            monitor.gappih * inner,
            monitor.gappiv * inner,
            n,
        )

    def reset(self, monitor: Monitor) -> None:
        """Restore the monitor's gaps to the configured defaults."""
        set_gaps(monitor, self.gappoh, self.gappov, self.gappih, self.gappiv)


def set_gaps(monitor: Monitor, oh: int, ov: int, ih: int, iv: int) -> None:
    """Set the monitor's gaps, clamping negatives to zero, and re-arrange."""
    monitor.gappoh = max(oh, 0)
    monitor.gappov = max(ov, 0)
    monitor.gappih = max(ih, 0)
    monitor.gappiv = max(iv, 0)
    if monitor.on_arrange is not None:
        monitor.on_arrange(monitor)


def adjust_gaps(monitor: Monitor, oh: int, ov: int, ih: int, iv: int) -> None:
    """Change each of the monitor's gaps by the given amounts."""
    set_gaps(
        monitor,
        monitor.gappoh + oh,
        monitor.gappov + ov,
        monitor.gappih + ih,
        monitor.gappiv + iv,
    )
"""Cycling focus through a monitor's windows with a tab switcher."""

from __future__ import annotations

from typing import Optional

from tilewm.models import Client, Monitor


def _shown(client: Client) -> bool:
    return client.is_visible() and not client.hidden


def tab_window_position(monitor: Monitor, posx: int, posy: int, width: int, height: int) -> tuple:
    """Top-left corner of the switcher window.

    ``posx``/``posy`` select 0 = start, 1 = centre, 2 = end of the monitor.
    """
    px, py = monitor.mx, monitor.my
    if posx == 1:
        px = monitor.mx + monitor.mw // 2 - width // 2
    elif posx == 2:
        px = monitor.mx + monitor.mw - width
    if posy == 1:
        py = monitor.my + monitor.mh // 2 - height // 2
    elif posy == 2:
        py = monitor.my + monitor.mh - height
    return px, py


class AltTab:
    """State of one switching session.

    ``start`` opens a session and moves to the next window, ``advance``
    moves on by one, ``finish`` settles the focus order.
    """

    def __init__(self) -> None:
        self.active = False
        self.monitor: Optional[Monitor] = None
        self.tabs: list = []
        self.index = 0

    def start(self, monitor: Monitor) -> None:
        """Begin a session listing the monitor's shown clients in focus order."""
        if self.active:
            self.finish()
        self.monitor = monitor
        self.active = True
        self.index = 0
        self.tabs = [c for c in monitor.stack if _shown(c)]
        if not any(_shown(c) for c in monitor.clients) or not self.tabs:
            self.tabs = []
            self.finish()
            return
        self.advance()

    def advance(self) -> None:
        """Focus the next client in the list, wrapping around."""
        if not self.active or self.monitor is None:
            return
        m = self.monitor
        sel = m.sel
        if sel is not None and sel in m.stack and m.stack.index(sel) < len(m.stack) - 1:
            self.index += 1
            if self.index >= len(self.tabs):
                self.index = 0
            m.focus(self.tabs[self.index])

    def finish(self) -> Optional[Client]:
        """End the session, putting the chosen client on top; return the focused client."""
        if not self.active:
            return None
        m = self.monitor
        chosen = m.sel if m is not None else None
        if m is not None and len(self.tabs) > 1:
            if self.index:
                self.tabs.insert(0, self.tabs.pop(self.index))
            for client in reversed(self.tabs):
                m.focus(client)
            m.focus(chosen)
        self.active = False
        self.tabs = []
        self.index = 0
        return m.sel if m is not None else None

    def rows(self, height: int) -> list:
        """Rows of the switcher as (client, y, row height, is selected)."""
        if not self.active or not self.tabs or self.monitor is None:
            return []
        row = height // len(self.tabs)
        result = []
        y = 0
        for client in self.tabs:
            if not _shown(client):
                continue
            result.append((client, y, row, client is self.monitor.sel))
            y += row
        return result
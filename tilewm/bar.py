"""Bar geometry: tag icons, tag clicks, the task bar and state indicators."""

from __future__ import annotations

from enum import IntEnum
from typing import Optional, Sequence

from tilewm.models import Client, Monitor

NUMTAGS = 9
TAGSPX = 5
TAGSROWS = 3


class Indicator(IntEnum):
    """Shapes that mark occupied tags or client state."""

    NONE = 0
    TOP_LEFT_SQUARE = 1
    TOP_LEFT_LARGER_SQUARE = 2
    TOP_BAR = 3
    TOP_BAR_SLIM = 4
    BOTTOM_BAR = 5
    BOTTOM_BAR_SLIM = 6
    BOX = 7
    BOX_WIDER = 8
    BOX_FULL = 9
    CLIENT_DOTS = 10
    RIGHT_TAGS = 11
    PLUS = 12
    PLUS_AND_SQUARE = 13
    PLUS_AND_LARGER_SQUARE = 14


def tag_icon(icons: Sequence[str], monitor_num: int, tag: int, numtags: int = NUMTAGS) -> str:
    """The icon for a tag; icon lists may run on per monitor and wrap around."""
    index = tag + numtags * monitor_num
    if index >= len(icons):
        index %= len(icons)
    return icons[index]


def tag_occupancy(monitor: Monitor) -> tuple:
    """Return (occupied tag mask, urgent tag mask) of the monitor's clients."""
    occ = urg = 0
    for c in monitor.clients:
        occ |= c.tags
        if c.isurgent:
            urg |= c.tags
    return occ, urg


def click_tag(widths: Sequence[int], x: int) -> Optional[int]:
    """Index of the tag under ``x`` given the tag widths, or None past the end."""
    right = 0
    for i, width in enumerate(widths):
        right += width
        if x < right:
            return i
    return None


def _tab_scheme(monitor: Monitor, client: Client) -> str:
    if monitor.sel is client:
        return "HidSel" if client.hidden else "TitleSel"
    return "HidNorm" if client.hidden else "TitleNorm"


def awesomebar_tabs(monitor: Monitor, x: int, w: int) -> list:
    """Tabs of the visible clients as (client, x, width, scheme name)."""
    n = len(monitor.visible_clients())
    if n == 0:
        return []
    remainder = w % n
    tabw = w // n
    tabs = []
    for i, c in enumerate(monitor.clients):
        if not c.is_visible():
            continue
        width = tabw + (1 if i < remainder else 0)
        tabs.append((c, x, width, _tab_scheme(monitor, c)))
        x += width
    return tabs


def click_awesomebar(monitor: Monitor, w: int, x: int) -> Optional[Client]:
    """The client whose tab lies under ``x`` in a task bar ``w`` wide."""
    n = len(monitor.visible_clients())
    right = 0
    for c in monitor.clients:
        if c.is_visible():
            right = int(right + (1.0 / n) * w)
        if not x > right:
            return c
    return None


def indicator_rects(
    kind: int,
    x: int,
    y: int,
    w: int,
    h: int,
    font_height: int,
    filled: int,
    tag: int,
    monitor: Optional[Monitor] = None,
    client: Optional[Client] = None,
) -> list:
    """Rectangles (x, y, w, h, filled) that draw an indicator.

    A ``filled`` of -1 fills when the monitor's selected client is on ``tag``.
    Unknown kinds draw the top-left square.
    """
    try:
        kind = Indicator(kind)
    except ValueError:
        kind = Indicator.TOP_LEFT_SQUARE
    if kind is Indicator.NONE:
        return []

    boxs = font_height // 9
    boxw = font_height // 6 + 2
    if filled == -1:
        sel = monitor.sel if monitor is not None else None
        filled = sel is not None and bool(sel.tags & 1 << tag)
    filled = bool(filled)

    if kind is Indicator.TOP_LEFT_SQUARE:
        return [(x + boxs, y + boxs, boxw, boxw, filled)]
    if kind is Indicator.TOP_LEFT_LARGER_SQUARE:
        return [(x + boxs + 2, y + boxs + 1, boxw + 1, boxw + 1, filled)]
    if kind is Indicator.TOP_BAR:
        return [(x + boxw, y, w - (2 * boxw + 1), boxw // 2, filled)]
    if kind is Indicator.TOP_BAR_SLIM:
        return [(x + boxw, y, w - (2 * boxw + 1), 1, False)]
    if kind is Indicator.BOTTOM_BAR:
        return [(x + boxw, y + h - boxw // 2, w - (2 * boxw + 1), boxw // 2, filled)]
    if kind is Indicator.BOTTOM_BAR_SLIM:
        return [(x + boxw, y + h - 1, w - (2 * boxw + 1), 1, False)]
    if kind is Indicator.BOX:
        return [(x + boxw, y, w - 2 * boxw, h, False)]
    if kind is Indicator.BOX_WIDER:
        return [(x + boxw // 2, y, w - boxw, h, False)]
    if kind is Indicator.BOX_FULL:
        return [(x, y, w - 2, h, False)]

    if kind is Indicator.CLIENT_DOTS:
        rects = []
        if monitor is None:
            return rects
        dots = 0
        for c in monitor.clients:
            if c.tags & (1 << tag):
                rects.append((x, 1 + dots * 2, 6 if monitor.sel is c else 1, 1, True))
                dots += 1
            if h <= 1 + dots * 2:
                dots = 0
                x += 2
        return rects

    if kind is Indicator.RIGHT_TAGS:
        if client is None:
            return []
        cols = NUMTAGS // TAGSROWS
        rects = []
        for i in range(NUMTAGS):
            col, row = i % cols, i // cols
            rx = x + w - 2 - cols * TAGSPX - col + col * TAGSPX
            ry = y + 2 + row * TAGSPX - row
            rects.append((rx, ry, TAGSPX, TAGSPX, bool((client.tags >> i) & 1)))
        return rects

    rects = []
    if kind is Indicator.PLUS_AND_LARGER_SQUARE:
        boxs += 2
        boxw += 2
    if kind in (Indicator.PLUS_AND_LARGER_SQUARE, Indicator.PLUS_AND_SQUARE):
        side = boxw if boxw % 2 else boxw + 1
        rects.append((x + boxs, y + boxs, side, side, filled))
    if not boxw % 2:
        boxw += 1
    rects.append((x + boxs + boxw // 2, y + boxs, 1, boxw, filled))
    rects.append((x + boxs, y + boxs + boxw // 2, boxw + 1, 1, filled))
    return rects
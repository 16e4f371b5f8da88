"""Per-tag settings and state kept in window properties across restarts."""

from __future__ import annotations

import sys
from dataclasses import dataclass, field
from typing import Any, Optional, Sequence

from tilewm.models import Client, Monitor

ROOT = 0
"""Window id used for properties stored on the root window."""

CLIENT_TAGS = "_DWM_CLIENT_TAGS"
CLIENT_FIELDS = "_DWM_CLIENT_FIELDS"

_U32 = 0xFFFFFFFF
_ALL_TAGS = (-1, _U32)
_NO_FLOAT_POSITION = -9999


@dataclass
class Pertag:
    """Layout settings remembered separately for every tag.

    Index 0 holds the settings used when all tags are viewed; index ``n``
    holds those of tag ``n - 1``.
    """

    numtags: int = 9
    nmaster: int = 1
    mfact: float = 0.55
    layouts: tuple = ("tile", None)
    curtag: int = field(default=1, init=False)
    nmasters: list = field(init=False)
    mfacts: list = field(init=False)
    sellts: list = field(init=False)
    ltidxs: list = field(init=False)

    def __post_init__(self) -> None:
        count = self.numtags + 1
        self.nmasters = [self.nmaster] * count
        self.mfacts = [self.mfact] * count
        self.sellts = [0] * count
        self.ltidxs = [[self.layouts[0], self.layouts[1]] for _ in range(count)]

    @property
    def tagmask(self) -> int:
        """Mask covering every tag."""
        return (1 << self.numtags) - 1

    def view(self, monitor: Monitor, tagmask: int) -> None:
        """Switch the monitor to the settings of the tag now being viewed."""
        if tagmask in _ALL_TAGS:
            self.curtag = 0
        else:
            viewed = monitor.tagset[monitor.seltags]
            if not viewed:
                raise ValueError("the monitor views no tag")
            self.curtag = (viewed & -viewed).bit_length()
        tag = self.curtag
        monitor.nmaster = self.nmasters[tag]
        monitor.mfact = self.mfacts[tag]
        monitor.sellt = self.sellts[tag]
        monitor.lt[monitor.sellt] = self.ltidxs[tag][monitor.sellt]
        monitor.lt[monitor.sellt ^ 1] = self.ltidxs[tag][monitor.sellt ^ 1]


class PropertyStore:
    """Lists of 32-bit values kept per window under a property name."""

    def __init__(self) -> None:
        self._props: dict = {}

    def set(self, window: int, name: str, values: Sequence[int]) -> None:
        """Replace a property with the given values."""
        self._props[(window, name)] = [int(v) & _U32 for v in values]

    def append(self, window: int, name: str, value: int) -> None:
        """Add one value to the end of a property, creating it if needed."""
        self._props.setdefault((window, name), []).append(int(value) & _U32)

    def get(self, window: int, name: str) -> Optional[list]:
        """The values of a property, or None if it is not set."""
        values = self._props.get((window, name))
        return None if values is None else list(values)


def _first(store: PropertyStore, window: int, name: str) -> int:
    values = store.get(window, name)
    return values[0] if values else 0


def _pertag(monitor: Monitor) -> Pertag:
    if monitor.pertag is None:
        raise ValueError("the monitor has no per-tag settings")
    return monitor.pertag


def layout_index(layouts: Sequence[Any], layout: Any) -> int:
    """Position of ``layout`` in ``layouts``, or 0 if it is not there."""
    return next((i for i, candidate in enumerate(layouts) if candidate == layout), 0)


def encode_monitor_fields(nmaster: int, layout_index: int, showbar: bool) -> int:
    """Pack one tag's settings: nmaster in bits 0-2, layout in 6-9, showbar in 31."""
    return ((nmaster & 0x7) | (layout_index & 0xF) << 6 | int(bool(showbar)) << 31) & _U32


def decode_monitor_fields(value: int) -> tuple:
    """Unpack (nmaster, layout index, showbar) from a packed value."""
    return value & 0x7, (value >> 6) & 0xF, bool((value >> 31) & 0x1)


def encode_client_fields(client: Client) -> int:
    """Pack monitor number, client index and floating, steam and sticky flags."""
    num = client.mon.num if client.mon is not None else 0
    return (
        (num & 0x7)
        | (client.idx & 0xFF) << 3
        | (int(client.isfloating) & 0x1) << 11
        | (int(client.issteam) & 0x1) << 15
        | (int(client.issticky) & 0x1) << 16
    )


def decode_client_fields(client: Client, value: int, monitors: Sequence[Monitor]) -> Client:
    """Apply packed client fields to ``client``; returns the client."""
    num = value & 0x7
    match = next((m for m in monitors if m.num == num), None)
    if match is not None:
        client.mon = match
    client.idx = (value >> 3) & 0xFF
    client.isfloating = bool((value >> 11) & 0x1)
    client.issteam = bool((value >> 15) & 0x1)
    client.issticky = bool((value >> 16) & 0x1)
    return client


def _set_monitor_tags(store: PropertyStore, monitor: Monitor) -> None:
    store.set(ROOT, f"_DWM_MONITOR_TAGS_{monitor.num}", [monitor.tagset[monitor.seltags]])


def _set_monitor_fields(store: PropertyStore, monitor: Monitor, layouts: Sequence[Any]) -> None:
    pertag = _pertag(monitor)
    name = f"_DWM_MONITOR_FIELDS_{monitor.num}"
    store.set(ROOT, name, [])
    for i in range(pertag.numtags + 1):
        index = layout_index(layouts, pertag.ltidxs[i][pertag.sellts[i]])
        store.append(ROOT, name, encode_monitor_fields(pertag.nmasters[i], index, monitor.showbar))


def _get_monitor_tags(store: PropertyStore, monitor: Monitor) -> bool:
    values = store.get(ROOT, f"_DWM_MONITOR_TAGS_{monitor.num}")
    if values is None:
        return False
    if values:
        monitor.tagset[monitor.seltags] = values[0] & _pertag(monitor).tagmask
    return True


def _get_monitor_fields(store: PropertyStore, monitor: Monitor, layouts: Sequence[Any]) -> bool:
    pertag = _pertag(monitor)
    tags = monitor.tagset[monitor.seltags] << 1
    values = store.get(ROOT, f"_DWM_MONITOR_FIELDS_{monitor.num}") or []
    restored = False
    for i, state in enumerate(values[: pertag.numtags + 1]):
        nmaster, index, showbar = decode_monitor_fields(state)
        pertag.nmasters[i] = nmaster
        if index < len(layouts):
            pertag.ltidxs[i][pertag.sellts[i]] = layouts[index]
        if not restored and i and tags & (1 << i):
            monitor.nmaster = pertag.nmasters[i]
            monitor.sellt = pertag.sellts[i]
            monitor.lt[monitor.sellt] = pertag.ltidxs[i][monitor.sellt]
            monitor.showbar = showbar
            restored = True
    return restored


def persist_monitor_state(store: PropertyStore, monitor: Monitor, layouts: Sequence[Any]) -> None:
    """Save the monitor's tags, per-tag settings and all its clients."""
    _set_monitor_tags(store, monitor)
    _set_monitor_fields(store, monitor, layouts)
    for idx, client in enumerate(monitor.clients, start=1):
        client.idx = idx
        persist_client_state(store, client)


def restore_monitor_state(store: PropertyStore, monitor: Monitor, layouts: Sequence[Any]) -> bool:
    """Load saved monitor state; return whether anything was restored."""
    tags = _get_monitor_tags(store, monitor)
    fields = _get_monitor_fields(store, monitor, layouts)
    return tags or fields


def persist_client_state(store: PropertyStore, client: Client) -> None:
    """Save a client's tags, flags and floating geometry."""
    store.set(client.win, CLIENT_TAGS, [client.tags])
    store.set(client.win, CLIENT_FIELDS, [encode_client_fields(client)])
    if client.mon is not None:
        save_float_position(store, client, client.mon)


def restore_client_state(
    store: PropertyStore,
    client: Client,
    monitors: Sequence[Monitor],
    selected: Optional[Monitor],
) -> bool:
    """Load saved client state; return whether its fields were restored."""
    fields = _first(store, client.win, CLIENT_FIELDS)
    restored = bool(fields)
    if restored:
        decode_client_fields(client, fields, monitors)
    tags = _first(store, client.win, CLIENT_TAGS)
    if tags:
        numtags = client.mon.pertag.numtags if client.mon and client.mon.pertag else 9
        client.tags = tags & ((1 << numtags) - 1)
    restore_float_position(store, client, client.mon or selected)
    return restored


def save_float_position(store: PropertyStore, client: Client, monitor: Monitor) -> None:
    """Remember the client's floating geometry relative to the monitor."""
    if client.sfx == _NO_FLOAT_POSITION:
        return
    pos = (max(client.sfx - monitor.mx, 0) & 0xFFFF) | (
        (max(client.sfy - monitor.my, 0) & 0xFFFF) << 16
    )
    size = (client.sfw & 0xFFFF) | ((client.sfh & 0xFFFF) << 16)
    store.set(client.win, f"_DWM_FLOATPOS_{monitor.num}", [pos])
    store.set(client.win, f"_DWM_FLOATSIZE_{monitor.num}", [size])


def restore_float_position(
    store: PropertyStore, client: Client, monitor: Optional[Monitor]
) -> bool:
    """Load the client's saved floating geometry; return whether it was found."""
    if monitor is None:
        return False
    pos = _first(store, client.win, f"_DWM_FLOATPOS_{monitor.num}")
    if not pos:
        return False
    size = _first(store, client.win, f"_DWM_FLOATSIZE_{monitor.num}")
    if not size:
        return False
    x, y = pos & 0xFFFF, pos >> 16
    w, h = size & 0xFFFF, size >> 16
    if w <= 0 or h <= 0:
        sys.stderr.write(
            f"restorewindowfloatposition: bad float values x = {x}, y = {y}, "
            f"w = {w}, h = {h} for client = {client.name}\n"
        )
        return False
    client.sfx = monitor.mx + x
    client.sfy = monitor.my + y
    client.sfw = w
    client.sfh = h
    if client.isfloating:
        client.x, client.y, client.w, client.h = client.sfx, client.sfy, w, h
    return True
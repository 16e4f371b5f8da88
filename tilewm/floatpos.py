"""Positioning floating windows from compact textual specifications."""

from __future__ import annotations

import re
from typing import Optional

from tilewm.models import Client

_INT = re.compile(r"\s*([+-]?\d+)")


def _tdiv(a: int, b: int) -> int:
    q = abs(a) // abs(b)
    return q if (a >= 0) == (b >= 0) else -q


def get_float_pos(
    pos: int,
    pch: str,
    size: int,
    sch: str,
    min_p: int,
    max_s: int,
    cp: int,
    cs: int,
    cbw: int,
    defgrid: int,
) -> tuple:
    """Compute a new (position, size) along one axis.

    ``pch`` and ``sch`` are the one-letter modifiers of position and size;
    an empty string means none. ``cp``/``cs`` are the current position and
    size, ``min_p``/``max_s`` the work area's start and extent.
    """
    abs_p = pch in ("A", "a")
    abs_s = sch in ("A", "a")
    cs += 2 * cbw

    if pch == "A":
        cp = pos
    elif pch == "a":
        cp += pos
    elif pch in ("x", "y"):
        cp = min(cp + pos, min_p + max_s)
    elif pch in ("X", "Y"):
        cp = min_p + min(pos, max_s)
    elif pch in ("S", "C", "Z"):
        if pos != -1:
            pos = max(min(pos, max_s), 0)
            if pch == "Z":
                cs = abs((cp + cs) - (min_p + pos))
            elif pch == "C":
                cs = abs((cp + _tdiv(cs, 2)) - (min_p + pos))
            else:
                cs = abs(cp - (min_p + pos))
            cp = min_p + pos
            sch = ""
    elif pch == "G":
        if pos <= 0:
            pos = defgrid
        if not (size == 0 or pos < 2 or sch not in ("p", "P")):
            delta = _tdiv(max_s - cs, pos - 1)
            rest = max_s - cs - delta * (pos - 1)

            def offset(i: int) -> int:
                return i + rest - pos + 1 if i > pos - rest else 0

            if sch == "P":
                if 1 <= size <= pos:
                    cp = min_p + delta * (size - 1)
            else:
                i = 0
                while i < pos and cp >= min_p + delta * i + offset(i):
                    i += 1
                cp = min_p + delta * (max(min(i + size, pos), 1) - 1) + offset(i)

    if sch == "A":
        cs = size
    elif sch == "a":
        cs = max(1, cs + size)
    elif sch in ("%", "w", "h", "W", "H"):
        apply = True
        if sch == "%":
            if size <= 0:
                apply = False
            else:
                size = _tdiv(max_s * min(size, 100), 100)
        elif sch in ("w", "h"):
            if size == 0:
                apply = False
            else:
                size += cs
        if apply:
            if pch == "S" and cp + size > min_p + max_s:
                size = min_p + max_s - cp
            elif size > max_s:
                size = max_s
            if pch == "C":
                delta = size - cs
                half = _tdiv(delta, 2)
                if delta < 0 or cp - half + size <= min_p + max_s:
                    cp -= half
                elif cp - half < min_p:
                    cp = min_p
                elif delta:
                    cp = min_p + max_s
            elif pch == "Z":
                cp -= size - cs
            cs = size

    if pch == "%":
        cp = min_p + _tdiv(max_s * max(min(pos, 100), 0), 100) - _tdiv(cs, 2)
    if pch in ("m", "M"):
        cp = pos - _tdiv(cs, 2)

    if not abs_p and cp < min_p:
        cp = min_p
    if cp + cs > min_p + max_s and not (abs_p and abs_s):
        if abs_p or cp == min_p:
            cs = min_p + max_s - cp
        else:
            cp = min_p + max_s - cs

    return cp, max(cs - 2 * cbw, 1)


def _scan(spec: str) -> list:
    values: list = []
    index = 0
    for _ in range(4):
        match = _INT.match(spec, index)
        if match is None:
            break
        values.append(int(match.group(1)))
        index = match.end()
        if index >= len(spec):
            break
        values.append(spec[index])
        index += 1
    return values


def _pointer(pointer: Optional[tuple]) -> tuple:
    if pointer is None:
        raise ValueError("a pointer position is needed for 'm' positions")
    return pointer


def parse_float_pos(spec: str, pointer: Optional[tuple] = None) -> Optional[tuple]:
    """Parse a spec into (x, xch, y, ych, w, wch, h, hch), or None if invalid.

    ``pointer`` is the (x, y) pointer position used by 'm' modifiers.
    """
    values = _scan(spec)
    if len(values) == 4:
        x, xch, y, ych = values
        if xch in ("w", "W"):
            return -1, "C", -1, "C", x, xch, y, ych
        if xch in ("p", "P"):
            return 0, "G", 0, "G", x, xch, y, ych
        if xch in ("m", "M"):
            x, y = _pointer(pointer)
        return x, xch, y, ych, 0, "", 0, ""
    if len(values) == 8:
        x, xch, y, ych, w, wch, h, hch = values
        if xch in ("m", "M"):
            x, y = _pointer(pointer)
        return x, xch, y, ych, w, wch, h, hch
    return None


def set_float_pos(
    client: Optional[Client],
    spec: Optional[str],
    grid_x: int,
    grid_y: int,
    pointer: Optional[tuple] = None,
) -> bool:
    """Apply a spec to a floating client; return whether it was applied."""
    if client is None or not spec or client.mon is None:
        return False
    mon = client.mon
    if mon.lt[mon.sellt] is not None and not client.isfloating:
        return False
    parsed = parse_float_pos(spec, pointer)
    if parsed is None:
        return False
    x, xch, y, ych, w, wch, h, hch = parsed
    client.x, client.w = get_float_pos(
        x, xch, w, wch, mon.wx, mon.ww, client.x, client.w, client.bw, grid_x
    )
    client.y, client.h = get_float_pos(
        y, ych, h, hch, mon.wy, mon.wh, client.y, client.h, client.bw, grid_y
    )
    return True
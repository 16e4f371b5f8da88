"""Tiling layouts: tile, fibonacci (spiral and dwindle) and monocle."""

from __future__ import annotations

from tilewm.gaps import GapConfig
from tilewm.models import Monitor


def _tdiv(a: int, b: int) -> int:
    q = abs(a) // abs(b)
    return q if (a >= 0) == (b >= 0) else -q


def get_facts(monitor: Monitor, msize: int, ssize: int) -> tuple:
    """Return (master factor, stack factor, master rest, stack rest)."""
    n = len(monitor.tiled_clients())
    mfacts = float(min(n, monitor.nmaster))
    sfacts = float(n - monitor.nmaster)
    mtotal = stotal = 0
    for i in range(n):
        if i < monitor.nmaster:
            mtotal = int(mtotal + msize / mfacts)
        else:
            stotal = int(stotal + ssize / sfacts)
    return mfacts, sfacts, msize - mtotal, ssize - stotal


def tile(monitor: Monitor, gaps: GapConfig) -> None:
    """Master column on the left, stack column on the right."""
    oh, ov, ih, iv, n = gaps.gaps_for(monitor)
    if n == 0:
        return
    nmaster = monitor.nmaster
    sx = mx = monitor.wx + ov
    sy = my = monitor.wy + oh
    mh = monitor.wh - 2 * oh - ih * (min(n, nmaster) - 1)
    sh = monitor.wh - 2 * oh - ih * (n - nmaster - 1)
    sw = mw = monitor.ww - 2 * ov

    if nmaster and n > nmaster:
        sw = int((mw - iv) * (1 - monitor.mfact))
        mw = int((mw - iv) * monitor.mfact)
        sx = mx + mw + iv

    mfacts, sfacts, mrest, srest = get_facts(monitor, mh, sh)

    for i, c in enumerate(monitor.tiled_clients()):
        if i < nmaster:
            extra = 1 if i < mrest else 0
            c.resize(mx, my, mw - 2 * c.bw, int(mh / mfacts + extra - 2 * c.bw))
            my += c.height + ih
        else:
            extra = 1 if (i - nmaster) < srest else 0
            c.resize(sx, sy, sw - 2 * c.bw, int(sh / sfacts + extra - 2 * c.bw))
            sy += c.height + ih


def fibonacci(monitor: Monitor, gaps: GapConfig, dwindle: bool, bar_height: int) -> None:
    """Split the area in halves, alternately, spiralling or dwindling inwards."""
    oh, ov, ih, iv, n = gaps.gaps_for(monitor)
    if n == 0:
        return

    nx = monitor.wx + ov
    ny = oh
    nw = monitor.ww - 2 * ov
    nh = monitor.wh - 2 * oh
    hrest = wrest = 0
    splitting = True
    i = 0

    for c in monitor.tiled_clients():
        if splitting:
            limit = bar_height + 2 * c.bw
            if (i % 2 and _tdiv(nh - ih, 2) <= limit) or (
                not i % 2 and _tdiv(nw - iv, 2) <= limit
            ):
                splitting = False
            if splitting and i < n - 1:
                if i % 2:
                    nv = _tdiv(nh - ih, 2)
                    hrest = nh - 2 * nv - ih
                    nh = nv
                else:
                    nv = _tdiv(nw - iv, 2)
                    wrest = nw - 2 * nv - iv
                    nw = nv
                if i % 4 == 2 and not dwindle:
                    nx += nw + iv
                elif i % 4 == 3 and not dwindle:
                    ny += nh + ih

            quarter = i % 4
            if quarter == 0:
                if dwindle:
                    ny += nh + ih
                    nh += hrest
                else:
                    nh -= hrest
                    ny -= nh + ih
            elif quarter == 1:
                nx += nw + iv
                nw += wrest
            elif quarter == 2:
                ny += nh + ih
                nh += hrest
                if i < n - 1:
                    nw += wrest
            else:
                if dwindle:
                    nx += nw + iv
                    nw -= wrest
                else:
                    nw -= wrest
                    nx -= nw + iv
                    nh += hrest

            if i == 0:
                if n != 1:
                    span = monitor.ww - iv - 2 * ov
                    nw = int(span - span * (1 - monitor.mfact))
                    wrest = 0
                ny = monitor.wy + oh
            elif i == 1:
                nw = monitor.ww - nw - iv - 2 * ov
            i += 1

        c.resize(nx, ny, nw - 2 * c.bw, nh - 2 * c.bw)


def dwindle(monitor: Monitor, gaps: GapConfig, bar_height: int) -> None:
    """Fibonacci layout shrinking towards the bottom right."""
    fibonacci(monitor, gaps, True, bar_height)


def spiral(monitor: Monitor, gaps: GapConfig, bar_height: int) -> None:
    """Fibonacci layout spiralling inwards."""
    fibonacci(monitor, gaps, False, bar_height)


def monocle(monitor: Monitor, gaps: GapConfig) -> None:
    """Every tiled client fills the whole area; the symbol shows the count."""
    oh, ov, ih, iv, n = gaps.gaps_for(monitor)
    if n > 0:
        monitor.ltsymbol = f"[{n}]"
    for c in monitor.tiled_clients():
        c.resize(
            monitor.wx + ov,
            monitor.wy + oh,
            monitor.ww - 2 * c.bw - 2 * ov,
            monitor.wh - 2 * c.bw - 2 * oh,
        )
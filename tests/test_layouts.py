import itertools

import pytest

from tilewm.gaps import GapConfig
from tilewm.layouts import dwindle, fibonacci, get_facts, monocle, spiral, tile
from tilewm.models import Client, Monitor

WW, WH = 1000, 800


def make_monitor(count, **kwargs):
    mon = Monitor(wx=0, wy=0, ww=WW, wh=WH, mfact=0.5, **kwargs)
    clients = [Client(name=f"c{i}") for i in range(count)]
    for c in reversed(clients):
        mon.attach(c)
    return mon, clients


def overlaps(a, b):
    return not (
        a.x + a.width <= b.x
        or b.x + b.width <= a.x
        or a.y + a.height <= b.y
        or b.y + b.height <= a.y
    )


def assert_partition(clients):
    for a, b in itertools.combinations(clients, 2):
        assert not overlaps(a, b)
    for c in clients:
        assert c.x >= 0 and c.y >= 0
        assert c.x + c.width <= WW and c.y + c.height <= WH
    assert sum(c.width * c.height for c in clients) == WW * WH


def test_get_facts_counts():
    mon, _ = make_monitor(3)
    mf, sf, mr, sr = get_facts(mon, 800, 800)
    assert (mf, sf) == (1.0, 2.0)
    assert 0 <= mr < 1 and 0 <= sr < 2


def test_tile_single_client_fills_area():
    mon, (c,) = make_monitor(1)
    tile(mon, GapConfig())
    assert (c.x, c.y, c.w, c.h) == (0, 0, WW, WH)


def test_tile_master_and_stack():
    mon, (m, s1, s2) = make_monitor(3)
    tile(mon, GapConfig())
    assert m.x == 0 and m.h == WH
    assert s1.x == m.x + m.width == s2.x
    assert s2.y == s1.y + s1.height
    assert_partition([m, s1, s2])


def test_tile_respects_borders():
    mon, clients = make_monitor(3)
    for c in clients:
        c.bw = 2
    tile(mon, GapConfig())
    m, s1, s2 = clients
    assert (m.x, m.y, m.w, m.h) == (0, 0, 496, 796)
    assert (s1.x, s1.y, s1.w, s1.h) == (500, 0, 496, 396)
    assert (s2.x, s2.y, s2.w, s2.h) == (500, 400, 496, 396)
    assert not any(overlaps(a, b) for a, b in itertools.combinations(clients, 2))


def test_tile_with_outer_gaps():
    mon, (c,) = make_monitor(1, gappoh=5, gappov=7)
    tile(mon, GapConfig())
    assert (c.x, c.y) == (7, 5)
    assert c.x + c.w + 7 == WW


def test_tile_without_clients_is_noop():
    mon, _ = make_monitor(0)
    tile(mon, GapConfig())
    assert mon.clients == []


@pytest.mark.parametrize("layout", [dwindle, spiral])
@pytest.mark.parametrize("count", [1, 2, 3, 4])
def test_fibonacci_partitions_area(layout, count):
    mon, clients = make_monitor(count)
    layout(mon, GapConfig(), 20)
    assert_partition(clients)


def test_fibonacci_first_client_takes_mfact():
    mon, clients = make_monitor(3)
    fibonacci(mon, GapConfig(), True, 20)
    assert clients[0].w == int(WW * mon.mfact)
    assert clients[0].h == WH


def test_monocle_stacks_all_and_sets_symbol():
    mon, clients = make_monitor(3)
    monocle(mon, GapConfig())
    assert mon.ltsymbol == "[3]"
    assert {(c.x, c.y, c.w, c.h) for c in clients} == {(0, 0, WW, WH)}


def test_monocle_empty_keeps_symbol():
    mon, _ = make_monitor(0)
    monocle(mon, GapConfig())
    assert mon.ltsymbol == "[]="
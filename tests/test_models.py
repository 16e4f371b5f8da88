from tilewm.models import Client, Monitor


def make_monitor(count=0):
    mon = Monitor(mx=0, my=0, mw=1000, mh=800, wx=0, wy=0, ww=1000, wh=800)
    clients = [Client(name=f"c{i}") for i in range(count)]
    for c in reversed(clients):
        mon.attach(c)
        mon.attach_stack(c)
    return mon, clients


def test_attach_puts_client_first_and_sets_monitor():
    mon, _ = make_monitor()
    a, b = Client(), Client()
    mon.attach(a)
    mon.attach(b)
    assert mon.clients == [b, a]
    assert a.mon is mon


def test_attachx_inserts_by_index():
    mon, _ = make_monitor()
    c1, c2, c3 = Client(idx=1), Client(idx=2), Client(idx=3)
    mon.attach(c3)
    mon.attach(c1)
    mon.attachx(c2)
    assert mon.clients == [c1, c2, c3]


def test_attachx_smaller_index_goes_first():
    mon, _ = make_monitor()
    c5, c2 = Client(idx=5), Client(idx=2)
    mon.attach(c5)
    mon.attachx(c2)
    assert mon.clients[0] is c2


def test_attachx_without_index_attaches_at_head():
    mon, _ = make_monitor()
    c1, c0 = Client(idx=1), Client(idx=0)
    mon.attach(c1)
    mon.attachx(c0)
    assert mon.clients == [c0, c1]


def test_visibility_follows_tags_and_sticky():
    mon, (c,) = make_monitor(1)
    c.tags = 2
    assert c.is_visible() is False
    c.issticky = True
    assert c.is_visible() is True


def test_tiled_clients_skip_floating_hidden_and_invisible():
    mon, (a, b, c, d) = make_monitor(4)
    b.isfloating = True
    c.hidden = True
    d.tags = 4
    assert mon.tiled_clients() == [a]
    assert mon.visible_clients() == [a, b, c]


def test_focus_moves_client_to_top_of_stack():
    mon, (a, b) = make_monitor(2)
    b.isurgent = True
    mon.focus(b)
    assert mon.sel is b
    assert mon.stack[0] is b
    assert b.isurgent is False


def test_focus_none_picks_first_shown_in_stack():
    mon, (a, b) = make_monitor(2)
    a.hidden = True
    mon.focus(None)
    assert mon.sel is b


def test_hide_focuses_next_tiled_and_arranges():
    calls = []
    mon, (a, b) = make_monitor(2)
    mon.on_arrange = calls.append
    mon.focus(a)
    mon.hide(a)
    assert a.hidden is True
    assert mon.sel is b
    assert calls == [mon]


def test_prev_tiled_returns_last_shown_before():
    mon, (a, b, c) = make_monitor(3)
    assert mon.prev_tiled(c) is b
    assert mon.prev_tiled(a) is None


def test_next_tiled_from_client():
    mon, (a, b, c) = make_monitor(3)
    b.isfloating = True
    assert mon.next_tiled(b) is c


def test_toggle_window_hides_then_restores():
    mon, (a, b) = make_monitor(2)
    mon.focus(a)
    mon.toggle_window(a)
    assert a.hidden is True
    mon.toggle_window(a)
    assert a.hidden is False
    assert mon.sel is a


def test_show_hide_defaults_to_selected():
    mon, (a, b) = make_monitor(2)
    mon.focus(b)
    mon.show_hide(None)
    assert b.hidden is True
    mon.show_hide(b)
    assert b.hidden is False
    assert mon.sel is b


def test_toggle_sticky():
    mon, (a,) = make_monitor(1)
    mon.focus(a)
    mon.toggle_sticky()
    assert a.issticky is True
    mon.toggle_sticky()
    assert a.issticky is False


def test_toggle_fullscreen_round_trip():
    mon, (a,) = make_monitor(1)
    a.resize(10, 20, 300, 200)
    a.bw = 2
    mon.focus(a)
    mon.toggle_fullscreen()
    assert a.isfullscreen is True
    assert (a.x, a.y, a.w, a.h) == (mon.mx, mon.my, mon.mw, mon.mh)
    assert a.bw == 0
    mon.toggle_fullscreen()
    assert (a.x, a.y, a.w, a.h, a.bw) == (10, 20, 300, 200, 2)
    assert a.isfloating is False


def test_resize_keeps_size_positive():
    c = Client()
    c.resize(0, 0, -5, 0)
    assert c.w >= 1 and c.h >= 1
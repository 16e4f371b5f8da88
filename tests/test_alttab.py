from tilewm.alttab import AltTab, tab_window_position
from tilewm.models import Client, Monitor


def setup():
    m = Monitor(mx=0, my=0, mw=1000, mh=600)
    a, b, c = Client(name="a"), Client(name="b"), Client(name="c")
    for client in (a, b, c):
        m.attach(client)
        m.attach_stack(client)
    m.focus(c)
    return m, a, b, c


def test_start_lists_stack_and_moves_on():
    m, a, b, c = setup()
    alt = AltTab()
    alt.start(m)
    assert alt.active
    assert alt.tabs == [c, b, a]
    assert m.sel is b


def test_advance_wraps_around():
    m, a, b, c = setup()
    alt = AltTab()
    alt.start(m)
    alt.advance()
    assert m.sel is a
    alt.advance()
    assert m.sel is c
    assert alt.index == 0


def test_finish_puts_chosen_first():
    m, a, b, c = setup()
    alt = AltTab()
    alt.start(m)
    chosen = alt.finish()
    assert chosen is b
    assert m.sel is b
    assert m.stack == [b, c, a]
    assert not alt.active


def test_finish_after_full_cycle_keeps_order():
    m, a, b, c = setup()
    alt = AltTab()
    alt.start(m)
    alt.advance()
    alt.advance()
    assert alt.finish() is c
    assert m.stack == [c, b, a]


def test_hidden_clients_are_skipped():
    m, a, b, c = setup()
    b.hidden = True
    alt = AltTab()
    alt.start(m)
    assert alt.tabs == [c, a]
    assert m.sel is a


def test_no_shown_clients_ends_session():
    m = Monitor()
    hidden = Client(name="x", hidden=True)
    m.attach(hidden)
    m.attach_stack(hidden)
    alt = AltTab()
    alt.start(m)
    assert not alt.active
    assert alt.rows(90) == []


def test_rows_split_height_and_mark_selection():
    m, a, b, c = setup()
    alt = AltTab()
    alt.start(m)
    rows = alt.rows(90)
    assert [r[0] for r in rows] == [c, b, a]
    assert [r[1] for r in rows] == [0, 30, 60]
    assert all(r[2] == 30 for r in rows)
    assert [r[3] for r in rows] == [False, True, False]


def test_restart_finishes_previous_session():
    m, a, b, c = setup()
    alt = AltTab()
    alt.start(m)
    alt.start(m)
    assert alt.active
    assert alt.tabs[0] is b
    assert m.sel is c


def test_tab_window_position():
    m = Monitor(mx=100, my=20, mw=1000, mh=600)
    assert tab_window_position(m, 0, 0, 200, 100) == (m.mx, m.my)
    px, py = tab_window_position(m, 1, 1, 200, 100)
    assert px + 200 // 2 == m.mx + m.mw // 2
    assert py + 100 // 2 == m.my + m.mh // 2
    px, py = tab_window_position(m, 2, 2, 200, 100)
    assert px + 200 == m.mx + m.mw
    assert py + 100 == m.my + m.mh
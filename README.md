# tilewm

The parts of a tiling window manager that do not draw anything, as
plain Python objects, plus a command-line client for the window
manager's IPC socket.

- **Clients and monitors** (`tilewm.models`): `Client` and `Monitor`
  with the client list, focus stack, `attach`/`attachx` (insert at a
  saved index), `focus`, `hide`/`show`, `toggle_window`, `show_hide`,
  `toggle_sticky` and `toggle_fullscreen`. A monitor calls its
  `on_arrange` callback whenever it needs re-arranging.
- **Gaps** (`tilewm.gaps`): `GapConfig` holds the global on/off switch,
  the smart-gap factor and default gap sizes; `set_gaps` and
  `adjust_gaps` change a monitor's gaps, never below zero.
- **Layouts** (`tilewm.layouts`): `tile`, `monocle`, `spiral` and
  `dwindle` (both built on `fibonacci`), plus `get_facts`. Each one
  resizes the tiled clients of a monitor.
- **Floating placement** (`tilewm.floatpos`): `parse_float_pos` reads
  specs such as `"50% 50% 80% 80%"` or `"0x 0y 100W 100H"`,
  `get_float_pos` computes a position and size along one axis, and
  `set_float_pos` applies a spec to a floating client.
- **Restart state** (`tilewm.persistence`): `Pertag` keeps layout
  settings per tag; the `persist_*`/`restore_*` functions write monitor,
  client and floating-geometry state into a `PropertyStore` as packed
  32-bit values and read it back.
- **Alt-tab** (`tilewm.alttab`): `AltTab` cycles focus through a
  monitor's shown clients in stack order; `tab_window_position` places
  the switcher.
- **Bar helpers** (`tilewm.bar`): `tag_icon`, `tag_occupancy`,
  `click_tag`, `awesomebar_tabs`, `click_awesomebar` and
  `indicator_rects` for the `Indicator` shapes.
- **Resources** (`tilewm.xrdb`): `parse_resources` reads
  `name: value` resource text and `load_colors` takes every valid
  `#rrggbb` colour from it.
- **Autostart** (`tilewm.autostart`): `autostart_dir` finds the script
  directory (`$XDG_DATA_HOME/dwm`, `~/.local/share/dwm`, else `~/.dwm`)
  and `run_autostart` runs `autostart_blocking.sh` and waits, then
  starts `autostart.sh` in the background, if they are executable.

## Installing

```
pip install .
```

With the test tools:

```
pip install .[test]
```

## Laying out a monitor

```python
from tilewm.models import Client, Monitor
from tilewm.gaps import GapConfig
from tilewm.layouts import tile

mon = Monitor(wx=0, wy=0, ww=1920, wh=1080)
for name in ("term", "editor", "browser"):
    mon.attach(Client(name=name, tags=1))

tile(mon, GapConfig())
for c in mon.tiled_clients():
    print(c.name, c.x, c.y, c.w, c.h)
```

## Placing a floating window

```python
from tilewm.floatpos import set_float_pos

client = mon.clients[0]
client.isfloating = True
set_float_pos(client, "50% 50% 80% 80%", 5, 5)
```

## Talking to a running window manager

The `tilewm-msg` command sends requests over the IPC socket
(`/tmp/dwm.sock`) and prints the replies it gets back:

```
tilewm-msg get_monitors
tilewm-msg get_tags
tilewm-msg get_layouts
tilewm-msg get_dwm_client 12345
tilewm-msg run_command view 2
tilewm-msg --ignore-reply run_command setmfact 0.6
tilewm-msg subscribe tag_change_event client_focus_change_event
tilewm-msg help
```

Each argument to `run_command` is sent as an integer, a float or a
string, depending on how it looks. `--ignore-reply` suppresses the
replies to `run_command` and `subscribe`. `subscribe` keeps running and
prints each event as it arrives. Usage errors exit with status 1, a
lost connection with status 2.

From Python, `tilewm.ipc.IpcConnection` sends and receives the same
framed messages:

```python
from tilewm.ipc import IpcConnection, MessageType

with IpcConnection() as conn:
    conn.send(MessageType.GET_TAGS, b"\0")
    msg_type, payload = conn.receive()
    print(payload.decode())
```

`pack_message` and `unpack_header` build and check the message header;
problems raise `IpcError`.

## What this package does not do

It is not a window manager you can start. It does not connect to an X
server, draw a bar, handle X events or serve the IPC socket; the
`tilewm-msg` client needs a running window manager to answer it.
`PropertyStore` keeps state in memory rather than in window properties,
and `tilewm.xrdb` works on resource text you hand it rather than
reading it from a display.

## Running the tests

```
pytest
```
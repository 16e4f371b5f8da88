"""Clients, monitors and the operations that manage them."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Callable, Optional


@dataclass(eq=False)
class Client:
    """A managed top-level window."""

    name: str = ""
    win: int = 0
    tags: int = 1
    x: int = 0
    y: int = 0
    w: int = 1
    h: int = 1
    bw: int = 0
    isfloating: bool = False
    isfixed: bool = False
    isurgent: bool = False
    isfullscreen: bool = False
    issticky: bool = False
    issteam: bool = False
    hidden: bool = False
    idx: int = 0
    mon: Optional["Monitor"] = None
    sfx: int = -9999
    sfy: int = 0
    sfw: int = 0
    sfh: int = 0
    _saved: Optional[tuple] = field(default=None, init=False, repr=False)

    @property
    def width(self) -> int:
        """Outer width including the border."""
        return self.w + 2 * self.bw

    @property
    def height(self) -> int:
        """Outer height including the border."""
        return self.h + 2 * self.bw

    def resize(self, x: int, y: int, w: int, h: int) -> None:
        """Move and resize the client; sizes never drop below one pixel."""
        self.x = x
        self.y = y
        self.w = max(w, 1)
        self.h = max(h, 1)

    def is_visible(self) -> bool:
        """True when the client is on a currently viewed tag or is sticky."""
        if self.mon is None:
            return False
        return bool(self.issticky or self.tags & self.mon.current_tags())


def _is_tiled(client: Client) -> bool:
    return not client.isfloating and client.is_visible() and not client.hidden


def _shown(client: Client) -> bool:
    return client.is_visible() and not client.hidden


@dataclass(eq=False)
class Monitor:
    """A screen area with its clients, focus stack and layout state.

    ``lt`` holds the two selectable layouts; a layout of ``None`` leaves
    windows floating. ``on_arrange`` is called whenever the monitor needs
    to be re-arranged.
    """

    num: int = 0
    mx: int = 0
    my: int = 0
    mw: int = 0
    mh: int = 0
    wx: int = 0
    wy: int = 0
    ww: int = 0
    wh: int = 0
    tagset: list = field(default_factory=lambda: [1, 1])
    seltags: int = 0
    nmaster: int = 1
    mfact: float = 0.55
    ltsymbol: str = "[]="
    lt: list = field(default_factory=lambda: ["tile", None])
    sellt: int = 0
    showbar: bool = True
    gappoh: int = 0
    gappov: int = 0
    gappih: int = 0
    gappiv: int = 0
    clients: list = field(default_factory=list)
    stack: list = field(default_factory=list)
    sel: Optional[Client] = None
    pertag: Any = None
    on_arrange: Optional[Callable[["Monitor"], None]] = None

    def current_tags(self) -> int:
        """The tag mask currently viewed."""
        return self.tagset[self.seltags]

    def visible_clients(self) -> list:
        """Clients on a viewed tag, in client-list order."""
        return [c for c in self.clients if c.is_visible()]

    def tiled_clients(self) -> list:
        """Visible, non-floating, non-hidden clients in client-list order."""
        return [c for c in self.clients if _is_tiled(c)]

    def _arrange(self) -> None:
        if self.on_arrange is not None:
            self.on_arrange(self)

    def attach(self, client: Client) -> None:
        """Put the client at the head of the client list."""
        client.mon = self
        self.clients.insert(0, client)

    def attachx(self, client: Client) -> None:
        """Insert the client at its remembered position, or at the head."""
        client.mon = self
        if client.idx > 0:
            last = len(self.clients) - 1
            for i, at in enumerate(self.clients):
                if client.idx < at.idx:
                    self.clients.insert(0, client)
                    return
                if at.idx <= client.idx and (
                    i == last or client.idx <= self.clients[i + 1].idx
                ):
                    self.clients.insert(i + 1, client)
                    return
        self.attach(client)

    def attach_stack(self, client: Client) -> None:
        """Put the client at the top of the focus stack."""
        client.mon = self
        self.stack.insert(0, client)

    def focus(self, client: Optional[Client]) -> None:
        """Focus a client, falling back to the topmost shown one."""
        if client is None or not client.is_visible():
            client = next((c for c in self.stack if _shown(c)), None)
        if client is not None:
            client.isurgent = False
            if client in self.stack:
                self.stack.remove(client)
            self.stack.insert(0, client)
        self.sel = client

    def next_tiled(self, client: Optional[Client]) -> Optional[Client]:
        """The first tiled client from ``client`` onwards in the client list."""
        start = 0 if client is None else self.clients.index(client)
        return next((c for c in self.clients[start:] if _is_tiled(c)), None)

    def prev_tiled(self, client: Optional[Client]) -> Optional[Client]:
        """The last shown client before ``client`` in the client list."""
        if client is None:
            return None
        previous = None
        for c in self.clients:
            if c is client:
                break
            if _shown(c):
                previous = c
        return previous

    def hide(self, client: Optional[Client]) -> None:
        """Iconify a client and move focus to a neighbour."""
        if client is None or client.hidden:
            return
        client.hidden = True
        if client.isfloating or self.lt[self.sellt] is None:
            following = []
            if client in self.stack:
                following = self.stack[self.stack.index(client) + 1:]
            nxt = next((c for c in following if _shown(c)), None)
            if nxt is None:
                nxt = next((c for c in self.stack if _shown(c)), None)
        else:
            nxt = self.next_tiled(client) or self.prev_tiled(client)
        self.focus(nxt)
        self._arrange()

    def show(self, client: Optional[Client]) -> None:
        """Bring an iconified client back."""
        if client is None or not client.hidden:
            return
        client.hidden = False
        self._arrange()

    def toggle_window(self, client: Optional[Client]) -> None:
        """Hide the focused client, or show and focus another one."""
        if client is None:
            return
        if not client.hidden and client is self.sel:
            self.hide(client)
        else:
            if client.hidden:
                self.show(client)
            self.focus(client)

    def show_hide(self, client: Optional[Client]) -> None:
        """Toggle the hidden state of a client, defaulting to the focused one."""
        client = client or self.sel
        if client is None:
            return
        if client.hidden:
            self.show(client)
            self.focus(client)
        else:
            self.hide(client)

    def toggle_sticky(self) -> None:
        """Make the focused client sticky, or stop it being sticky."""
        if self.sel is None:
            return
        self.sel.issticky = not self.sel.issticky
        self._arrange()

    def toggle_fullscreen(self) -> None:
        """Switch the focused client in or out of fullscreen."""
        client = self.sel
        if client is None:
            return
        if not client.isfullscreen:
            client._saved = (
                client.isfloating, client.bw, client.x, client.y, client.w, client.h
            )
            client.isfullscreen = True
            client.isfloating = True
            client.bw = 0
            client.resize(self.mx, self.my, self.mw, self.mh)
        else:
            client.isfullscreen = False
            if client._saved is not None:
                floating, bw, x, y, w, h = client._saved
                client.isfloating = floating
                client.bw = bw
                client.resize(x, y, w, h)
                client._saved = None
        self._arrange()
"""Tiling window manager core: clients, layouts, gaps, floating placement, restart state, bar helpers and an IPC client."""

__version__ = "6.5.0"

__all__ = [
    "alttab",
    "autostart",
    "bar",
    "floatpos",
    "gaps",
    "ipc",
    "layouts",
    "models",
    "msg",
    "persistence",
    "xrdb",
]
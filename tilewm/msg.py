"""Command-line client that talks to the window manager over IPC."""

from __future__ import annotations

import json
import os
import struct
import sys
from typing import Optional, Sequence

from tilewm import ipc
from tilewm.ipc import IpcError, MessageType

_DIGITS = frozenset("0123456789")

EVENTS = (
    "tag_change_event",
    "layout_change_event",
    "client_focus_change_event",
    "monitor_focus_change_event",
    "focused_title_change_event",
    "focused_state_change_event",
)

_EMPTY_PAYLOAD = b"\0"

_SIMPLE_QUERIES = {
    "get_monitors": MessageType.GET_MONITORS,
    "get_tags": MessageType.GET_TAGS,
    "get_layouts": MessageType.GET_LAYOUTS,
}


def is_float(s: str) -> bool:
    """Digits with an optional leading minus and one inner decimal point."""
    dot_used = minus_used = False
    last = len(s) - 1
    for i, ch in enumerate(s):
        if ch in _DIGITS:
            continue
        if not dot_used and ch == "." and i != 0 and i != last:
            dot_used = True
        elif not minus_used and ch == "-" and i == 0:
            minus_used = True
        else:
            return False
    return True


def is_unsigned_int(s: str) -> bool:
    """Only digits."""
    return all(ch in _DIGITS for ch in s)


def is_signed_int(s: str) -> bool:
    """Digits with an optional leading minus."""
    return all(ch in _DIGITS or (i == 0 and ch == "-") for i, ch in enumerate(s))


def _to_int(s: str) -> int:
    digits = s.lstrip("-")
    value = int(digits) if digits else 0
    return -value if s.startswith("-") else value


def _to_single(s: str) -> float:
    return struct.unpack("f", struct.pack("f", float(s)))[0]


def encode_args(args: Sequence[str]) -> list:
    """Turn command arguments into integers, single-precision floats or strings."""
    encoded: list = []
    for arg in args:
        if is_signed_int(arg):
            encoded.append(_to_int(arg))
        elif is_float(arg):
            encoded.append(_to_single(arg))
        else:
            encoded.append(arg)
    return encoded


def _dump(obj: dict) -> bytes:
    return json.dumps(obj, separators=(",", ":"), ensure_ascii=False).encode("utf-8")


def build_run_command(name: str, args: Sequence[str]) -> bytes:
    """Payload asking the window manager to run a named command."""
    return _dump({"command": name, "args": encode_args(args)})


def build_get_client(window: int) -> bytes:
    """Payload asking for the properties of the client owning ``window``."""
    return _dump({"client_window_id": int(window)})


def build_subscribe(event: str) -> bytes:
    """Payload subscribing to one event."""
    return _dump({"event": event, "action": "subscribe"})


def usage_text(prog_name: str) -> str:
    """The help message."""
    pad = " " * 34
    lines = [
        f"usage: {prog_name} [options] <command> [...]",
        "",
        "Commands:",
        "  run_command <name> [args...]    Run an IPC command",
        "",
        "  get_monitors                    Get monitor properties",
        "",
        "  get_tags                        Get list of tags",
        "",
        "  get_layouts                     Get list of layouts",
        "",
        "  get_dwm_client <window_id>      Get dwm client proprties",
        "",
        "  subscribe [events...]           Subscribe to specified events",
        f"{pad}Options: {EVENTS[0]},",
        *(f"{pad}{event}," for event in EVENTS[1:-1]),
        f"{pad}{EVENTS[-1]}",
        "",
        "  help                            Display this message",
        "",
        "Options:",
        "  --ignore-reply                  Don't print reply messages from",
        f"{pad}run_command and subscribe.",
        "",
    ]
    return "\n".join(lines) + "\n"


def _usage_error(prog_name: str, message: str) -> int:
    sys.stderr.write(
        f"Error: {message}\n"
        f"usage: {prog_name} <command> [...]\n"
        f"Try '{prog_name} help'\n"
    )
    return 1


def _print_reply(reply: bytes) -> None:
    text = reply.split(b"\0", 1)[0].decode("utf-8", errors="replace")
    sys.stdout.write(text + "\n")
    sys.stdout.flush()


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run the client; return the process exit status."""
    prog_name = os.path.basename(sys.argv[0]) if sys.argv and sys.argv[0] else "tilewm-msg"
    args = list(sys.argv[1:] if argv is None else argv)

    ignore_reply = False
    if args and args[0] == "--ignore-reply":
        ignore_reply = True
        args = args[1:]

    if not args:
        return _usage_error(prog_name, "Expected an argument, got none")

    command, rest = args[0], args[1:]
    follow = False

    if command == "help":
        sys.stdout.write(usage_text(prog_name))
        return 0
    if command == "run_command":
        if not rest:
            return _usage_error(prog_name, "No command specified")
        requests = [
            (MessageType.RUN_COMMAND, build_run_command(rest[0], rest[1:]), not ignore_reply)
        ]
    elif command in _SIMPLE_QUERIES:
        requests = [(_SIMPLE_QUERIES[command], _EMPTY_PAYLOAD, True)]
    elif command == "get_dwm_client":
        if not rest:
            return _usage_error(prog_name, "Expected the window id")
        if not is_unsigned_int(rest[0]):
            return _usage_error(prog_name, "Expected unsigned integer argument")
        window = int(rest[0]) if rest[0] else 0
        requests = [(MessageType.GET_DWM_CLIENT, build_get_client(window), True)]
    elif command == "subscribe":
        if not rest:
            return _usage_error(prog_name, "Expected event name")
        requests = [
            (MessageType.SUBSCRIBE, build_subscribe(event), not ignore_reply)
            for event in rest
        ]
        follow = True
    else:
        return _usage_error(prog_name, f"Invalid argument '{command}'")

    try:
        conn = ipc.IpcConnection().connect()
    except IpcError:
        sys.stderr.write("Failed to connect to socket\n")
        return 1

    with conn:
        try:
            for msg_type, payload, show in requests:
                conn.send(msg_type, payload)
                _, reply = conn.receive()
                if show:
                    _print_reply(reply)
            while follow:
                _, reply = conn.receive()
                _print_reply(reply)
        except IpcError as exc:
            sys.stderr.write(
                f"{exc}\nError receiving response from socket. "
                "The connection might have been lost.\n"
            )
            return 2
    return 0


if __name__ == "__main__":
    sys.exit(main())
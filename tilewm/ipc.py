"""Framing and transport for the window manager's IPC socket."""

from __future__ import annotations

import socket
import struct
from enum import IntEnum
from typing import Optional, Union

DEFAULT_SOCKET_PATH = "/tmp/dwm.sock"

IPC_MAGIC = b"DWM-IPC"

# magic, payload size, message type; packed, native byte order
_HEADER = struct.Struct("=7sIB")
HEADER_SIZE = _HEADER.size


class MessageType(IntEnum):
    """Kinds of messages exchanged over the IPC socket."""

    RUN_COMMAND = 0
    GET_MONITORS = 1
    GET_TAGS = 2
    GET_LAYOUTS = 3
    GET_DWM_CLIENT = 4
    SUBSCRIBE = 5
    EVENT = 6


class IpcError(Exception):
    """Raised when a message cannot be sent, received or decoded."""


def _as_type(value: int) -> Union[MessageType, int]:
    try:
        return MessageType(value)
    except ValueError:
        return value


def pack_message(msg_type: int, payload: bytes) -> bytes:
    """Return the header followed by the payload, ready to be written."""
    payload = bytes(payload)
    return _HEADER.pack(IPC_MAGIC, len(payload), int(msg_type)) + payload


def unpack_header(data: bytes) -> tuple:
    """Decode a header into (message type, payload size).

    Unknown message types are returned as plain integers.
    """
    if len(data) < HEADER_SIZE:
        raise IpcError(
            f"Header too short: got {len(data)} bytes, expected {HEADER_SIZE}"
        )
    magic, size, msg_type = _HEADER.unpack(bytes(data[:HEADER_SIZE]))
    if magic != IPC_MAGIC:
        shown = magic.decode("latin-1")
        raise IpcError(
            f"Invalid magic string. Got '{shown}', expected '{IPC_MAGIC.decode()}'"
        )
    return _as_type(msg_type), size


class IpcConnection:
    """A stream connection to the IPC socket.

    ``path`` defaults to the module's ``DEFAULT_SOCKET_PATH`` at connect
    time; an already connected ``sock`` may be given instead.
    """

    def __init__(self, path: Optional[str] = None, sock: Optional[socket.socket] = None):
        self.path = path
        self._sock = sock

    def connect(self) -> "IpcConnection":
        """Open the connection unless it is already open."""
        if self._sock is not None:
            return self
        path = self.path or DEFAULT_SOCKET_PATH
        sock = socket.socket(socket.AF_UNIX, socket.SOCK_STREAM)
        try:
            sock.connect(path)
        except OSError as exc:
            sock.close()
            raise IpcError(f"Failed to connect to {path}: {exc}") from exc
        self._sock = sock
        return self

    def _require(self) -> socket.socket:
        if self._sock is None:
            raise IpcError("Not connected")
        return self._sock

    def send(self, msg_type: int, payload: bytes) -> None:
        """Write one framed message."""
        sock = self._require()
        try:
            sock.sendall(pack_message(msg_type, payload))
        except OSError as exc:
            raise IpcError(f"Failed to write message: {exc}") from exc

    def _read_exact(self, count: int, what: str) -> bytes:
        sock = self._require()
        buf = bytearray()
        while len(buf) < count:
            try:
                chunk = sock.recv(count - len(buf))
            except OSError as exc:
                raise IpcError(f"Failed to read {what}: {exc}") from exc
            if not chunk:
                raise IpcError(
                    f"Unexpectedly reached EOF while reading {what}. "
                    f"Read {len(buf)} bytes, expected {count} bytes."
                )
            buf.extend(chunk)
        return bytes(buf)

    def receive(self) -> tuple:
        """Read one framed message and return (message type, payload)."""
        msg_type, size = unpack_header(self._read_exact(HEADER_SIZE, "header"))
        payload = self._read_exact(size, "payload") if size else b""
        return msg_type, payload

    def close(self) -> None:
        """Close the connection; closing twice is harmless."""
        if self._sock is not None:
            self._sock.close()
            self._sock = None

    def __enter__(self) -> "IpcConnection":
        return self.connect()

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()
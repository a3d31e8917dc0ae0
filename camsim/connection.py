"""Client side of the camera-to-server wire protocol."""

from __future__ import annotations

import socket
from collections.abc import Iterable

from camsim.buffer import MessageBuffer

CAMERA_MARK = b"&"
MESSAGE_MARK = b"#"
END_MARK = b"END"


def _camera_byte(camera_id: str) -> bytes:
    if len(camera_id) != 1:
        raise ValueError(f"camera id must be a single character: {camera_id!r}")
    encoded = camera_id.encode("latin-1")
    if encoded in (CAMERA_MARK, MESSAGE_MARK):
        raise ValueError(f"camera id clashes with a protocol marker: {camera_id!r}")
    return encoded


def encode_batch(messages: Iterable[bytes], camera_id: str) -> bytes:
    """Frame a camera's messages as ``&id&``, ``#msg#`` for each, then ``END``."""
    parts = [CAMERA_MARK, _camera_byte(camera_id), CAMERA_MARK]
    for message in messages:
        parts += [MESSAGE_MARK, bytes(message), MESSAGE_MARK]
    parts.append(END_MARK)
    return b"".join(parts)


class ServerConnection:
    """A TCP connection from a camera to the collecting server."""

    def __init__(self, sock: socket.socket | None = None) -> None:
        self._sock = sock

    @property
    def connected(self) -> bool:
        return self._sock is not None

    def connect(self, host: str, port: int) -> None:
        """Open a connection to the server at ``host``:``port``."""
        if self._sock is not None:
            raise RuntimeError("already connected")
        self._sock = socket.create_connection((host, port))
        print("Connected to server!")

    def send_buffer(self, buffer: MessageBuffer, camera_id: str) -> None:
        """Send every message currently held in ``buffer`` as one batch."""
        if self._sock is None:
            raise RuntimeError("not connected to a server")
        self._sock.sendall(encode_batch(buffer.items(), camera_id))

    def close(self) -> None:
        """Close the connection; closing twice is harmless."""
        if self._sock is None:
            return
        self._sock.close()
        self._sock = None
        print("Socket closed.\n")

    def __enter__(self) -> ServerConnection:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()
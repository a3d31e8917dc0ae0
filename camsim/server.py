"""The collecting server: receives camera batches and logs them per camera."""

from __future__ import annotations

import argparse
import socket
import threading
from pathlib import Path
from typing import TextIO

from camsim.messages import (
    DISCOVER_TYPE,
    STATUS_TYPE,
    DiscoverMessage,
    Message,
    StatusMessage,
    decode_message,
)

DEFAULT_PORT = 5555
RECV_SIZE = 1024

_CAMERA = ord("&")
_MESSAGE = ord("#")
_END = b"END"
_MESSAGE_SIZES = {
    STATUS_TYPE: len(StatusMessage().to_bytes()),
    DISCOVER_TYPE: len(DiscoverMessage().to_bytes()),
}


class ClientSession:
    """Parses one client's byte stream and writes each camera's messages to its file."""

    def __init__(self, output_dir: str | Path = ".") -> None:
        self.output_dir = Path(output_dir)
        self.camera_id: str | None = None
        self._pending = bytearray()
        self._file: TextIO | None = None

    def _open(self, camera_id: str) -> None:
        if not camera_id.isalnum():
            raise ValueError(f"invalid camera id: {camera_id!r}")
        self._close_file()
        self.camera_id = camera_id
        self._file = open(self.output_dir / f"camera_{camera_id}.txt", "w", encoding="utf-8")

    def _close_file(self) -> None:
        if self._file is not None:
            self._file.close()
            self._file = None

    def feed(self, data: bytes) -> list[Message]:
        """Consume received bytes; return the messages completed by them."""
        self._pending += data
        messages: list[Message] = []
        pending = self._pending
        while pending:
            lead = pending[0]
            if lead == _CAMERA:
                if len(pending) < 3:
                    break
                if pending[2] != _CAMERA:
                    raise ValueError("malformed camera header")
                self._open(chr(pending[1]))
                del pending[:3]
            elif lead == _MESSAGE:
                if len(pending) < 3:
                    break
                message_type = int.from_bytes(pending[1:3], "little")
                size = _MESSAGE_SIZES.get(message_type)
                if size is None:
                    raise ValueError(f"unknown message type: {message_type}")
                if len(pending) < size + 2:
                    break
                if pending[size + 1] != _MESSAGE:
                    raise ValueError("message not terminated by '#'")
                message = decode_message(bytes(pending[1 : size + 1]))
                if self._file is not None:
                    self._file.write(message.to_record())
                messages.append(message)
                del pending[: size + 2]
            elif lead == _END[0]:
                if len(pending) < len(_END):
                    break
                if pending[: len(_END)] != _END:
                    raise ValueError("malformed end marker")
                self._close_file()
                del pending[: len(_END)]
            else:
                raise ValueError(f"unexpected byte in stream: {lead:#04x}")
        return messages

    def close(self) -> None:
        """Close any open camera file and drop unparsed bytes."""
        self._close_file()
        self._pending.clear()

    def __enter__(self) -> ClientSession:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()


def handle_client(sock: socket.socket, output_dir: str | Path = ".") -> list[Message]:
    """Serve one client until it disconnects; return the messages it sent."""
    print("Client connected!")
    received: list[Message] = []
    with sock, ClientSession(output_dir) as session:
        try:
            while chunk := sock.recv(RECV_SIZE):
                print(f"Client says: {chunk!r}")
                received += session.feed(chunk)
        except (OSError, ValueError) as error:
            print(f"Error: {error}")
    print("Client disconnected.")
    return received


def serve(host: str = "", port: int = DEFAULT_PORT, output_dir: str | Path = ".") -> None:
    """Accept clients forever, handling each on its own thread."""
    with socket.create_server((host, port)) as server:
        print("Listening for incoming connections...")
        while True:
            try:
                client, _ = server.accept()
            except OSError as error:
                print(f"Error: {error}")
                continue
            threading.Thread(
                target=handle_client, args=(client, output_dir), daemon=True
            ).start()


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Collect camera messages.")
    parser.add_argument("--host", default="")
    parser.add_argument("--port", type=int, default=DEFAULT_PORT)
    parser.add_argument("--output-dir", default=".")
    args = parser.parse_args(argv)
    try:
        serve(args.host, args.port, args.output_dir)
    except KeyboardInterrupt:
        pass
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
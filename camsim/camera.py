"""A simulated camera that produces report messages and ships them to a server."""

from __future__ import annotations

import itertools
import random
import threading

from camsim.buffer import MessageBuffer
from camsim.config import Config
from camsim.connection import ServerConnection
from camsim.messages import DISCOVER_TYPE, STATUS_TYPE, DiscoverMessage, Message, StatusMessage

_status_ids = itertools.count(1)
_discover_ids = itertools.count(100)


def create_status_message(rng: random.Random) -> StatusMessage:
    """Make a status message with the next status id and a random status 1..3."""
    return StatusMessage(
        message_id=next(_status_ids),
        message_type=STATUS_TYPE,
        status=rng.randint(1, 3),
    )


def create_discover_message(rng: random.Random) -> DiscoverMessage:
    """Make a discover message with the next discover id and random readings."""
    return DiscoverMessage(
        message_id=next(_discover_ids),
        message_type=DISCOVER_TYPE,
        distance=rng.randrange(500, 10000),
        angle=rng.randrange(0, 361),
        speed=rng.randrange(0, 1001),
    )


class Camera:
    """Generates messages into a pending list, encodes them into a buffer and sends it."""

    def __init__(
        self,
        camera_id: str,
        config: Config,
        connection: ServerConnection | None = None,
        rng: random.Random | None = None,
        send_interval: float = 3.0,
        generate_interval: float = 0.0,
    ) -> None:
        self.camera_id = camera_id
        self.config = config
        self.rng = rng if rng is not None else random.Random()
        self.send_interval = send_interval
        self.generate_interval = generate_interval
        self.pending: list[Message] = []
        self.buffer = MessageBuffer()
        self._stopped = threading.Event()
        if connection is None:
            connection = ServerConnection()
            connection.connect(config.server_ip, config.server_port)
        self.connection = connection

    @property
    def active(self) -> bool:
        return not self._stopped.is_set()

    def generate(self) -> list[Message]:
        """Add one to four random messages to the pending list and return them."""
        created = []
        for _ in range(self.rng.randint(1, 4)):
            if self.rng.randint(1, 2) == 1:
                message: Message = create_status_message(self.rng)
            else:
                message = create_discover_message(self.rng)
            self.pending.append(message)
            created.append(message)
            print(f"generate message: {message.describe()}")
        return created

    def flush_to_buffer(self) -> int:
        """Encode every pending message into the send buffer; return how many moved."""
        print("move from pending messages to the send buffer:")
        moved = len(self.pending)
        for message in self.pending:
            self.buffer.add(message.to_bytes())
            print(message.describe())
        self.pending.clear()
        return moved

    def run(self) -> None:
        """Generate and buffer messages until stopped."""
        while self.active:
            self.generate()
            self.flush_to_buffer()
            self._stopped.wait(self.generate_interval)

    def stop(self) -> None:
        self._stopped.set()

    def send_to_server(self) -> None:
        """Send the buffer to the server, wait, then empty it, until stopped."""
        while self.active:
            self.connection.send_buffer(self.buffer, self.camera_id)
            self._stopped.wait(self.send_interval)
            print("the buffer sending to server...")
            self.buffer.clear()
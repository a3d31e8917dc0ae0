"""Runs a set of simulated cameras against a collecting server."""

from __future__ import annotations

import argparse
import random
import threading
from collections.abc import Callable

from camsim.camera import Camera
from camsim.config import Config
from camsim.connection import ServerConnection

MAX_CAMERA = 20
DEFAULT_CONFIG_FILE = "Text.txt"
STOP_TIMEOUT = 5.0


def _connect(config: Config) -> ServerConnection:
    connection = ServerConnection()
    connection.connect(config.server_ip, config.server_port)
    return connection


class Simulator:
    """Owns the cameras named 'a', 'b', ... and their generating and sending threads."""

    def __init__(
        self,
        config: Config,
        connection_factory: Callable[[Config], ServerConnection] | None = None,
        rng: random.Random | None = None,
        send_interval: float = 3.0,
        generate_interval: float = 0.0,
        stop_timeout: float | None = STOP_TIMEOUT,
    ) -> None:
        if not 0 <= config.num_of_camera <= MAX_CAMERA:
            raise ValueError(
                f"number of cameras must be between 0 and {MAX_CAMERA}, "
                f"got {config.num_of_camera}"
            )
        factory = connection_factory or _connect
        rng = rng if rng is not None else random.Random()
        self.config = config
        self.stop_timeout = stop_timeout
        self.cameras = [
            Camera(
                chr(ord("a") + index),
                config,
                connection=factory(config),
                rng=random.Random(rng.random()),
                send_interval=send_interval,
                generate_interval=generate_interval,
            )
            for index in range(config.num_of_camera)
        ]
        self._threads: list[threading.Thread] = []

    @property
    def running(self) -> bool:
        return any(thread.is_alive() for thread in self._threads)

    def start(self) -> None:
        """Start a generating and a sending thread for every camera."""
        if self._threads:
            raise RuntimeError("simulator already started")
        for camera in self.cameras:
            for target, role in ((camera.run, "run"), (camera.send_to_server, "send")):
                thread = threading.Thread(
                    target=target, name=f"camera-{camera.camera_id}-{role}", daemon=True
                )
                self._threads.append(thread)
                thread.start()

    def stop(self) -> None:
        """Stop every camera and wait for its threads to finish."""
        for camera in self.cameras:
            camera.stop()
        for thread in self._threads:
            thread.join(self.stop_timeout)


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Run simulated cameras.")
    parser.add_argument("config", nargs="?", default=DEFAULT_CONFIG_FILE)
    args = parser.parse_args(argv)
    simulator = Simulator(Config.from_file(args.config))
    simulator.start()
    try:
        input()
    except (EOFError, KeyboardInterrupt):
        pass
    simulator.stop()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
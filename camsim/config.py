"""Simulator settings read from a key=value text file."""

from __future__ import annotations

import re
from dataclasses import dataclass
from pathlib import Path

_INT_PREFIX = re.compile(r"\s*([+-]?\d+)")
_INT_MIN, _INT_MAX = -(2**31), 2**31 - 1


def _parse_int(value: str) -> int:
    """Read a leading integer, ignoring leading whitespace and trailing text."""
    match = _INT_PREFIX.match(value)
    if match is None:
        raise ValueError(f"not an integer: {value!r}")
    number = int(match.group(1))
    if not _INT_MIN <= number <= _INT_MAX:
        raise ValueError(f"integer out of range: {value!r}")
    return number


@dataclass
class Config:
    """Number of cameras, frame rate and the address of the server."""

    num_of_camera: int = 0
    num_of_image_to_second: int = 0
    server_ip: str = ""
    server_port: int = 0

    @classmethod
    def from_file(cls, path: str | Path) -> Config:
        """Load settings; a file that cannot be opened leaves the defaults."""
        config = cls()
        try:
            with open(path, encoding="utf-8") as handle:
                lines = handle.read().splitlines()
        except OSError:
            return config
        for line in lines:
            key, sep, value = line.partition("=")
            if key and sep and value:
                config.insert(key, value)
        return config

    def insert(self, key: str, value: str) -> None:
        """Set one setting by its file key; unknown keys are ignored."""
        if key == "num_of_camera":
            self.num_of_camera = _parse_int(value)
        elif key == "num_of_image_to_second":
            self.num_of_image_to_second = _parse_int(value)
        elif key == "ip_sever":
            self.server_ip = value
        elif key == "port_sever":
            self.server_port = _parse_int(value)
"""Camera report messages and their binary wire format."""

from __future__ import annotations

import struct
from dataclasses import dataclass
from typing import ClassVar

STATUS_TYPE = 1
DISCOVER_TYPE = 2
MESSAGE_TYPES = (STATUS_TYPE, DISCOVER_TYPE)

STATUS_RANGE = (1, 3)
DISTANCE_RANGE = (500.0, 10000.0)
ANGLE_RANGE = (0.0, 360.0)
SPEED_RANGE = (0.0, 1000.0)

_FLOAT32 = struct.Struct("<f")


def _to_float32(value: float) -> float:
    """Round a value to the nearest single-precision float."""
    return _FLOAT32.unpack(_FLOAT32.pack(float(value)))[0]


def _in_range_or_zero(value: float, bounds: tuple[float, float]) -> float:
    low, high = bounds
    value = float(value)
    return _to_float32(value) if low <= value <= high else 0.0


def _fmt(value: object) -> str:
    return f"{value:g}" if isinstance(value, float) else str(value)


@dataclass
class Message:
    """A message with an id and a type; the type is 1 (status) or 2 (discover)."""

    message_id: int = 0
    message_type: int = STATUS_TYPE

    _STRUCT: ClassVar[struct.Struct] = struct.Struct("<H")
    _PAYLOAD: ClassVar[tuple[str, ...]] = ()

    def __post_init__(self) -> None:
        if self.message_type not in MESSAGE_TYPES:
            raise ValueError(f"unknown message type: {self.message_type!r}")

    def _payload(self) -> tuple:
        return tuple(getattr(self, name) for name in self._PAYLOAD)

    def to_bytes(self) -> bytes:
        """Encode the message type and payload in little-endian wire form."""
        return self._STRUCT.pack(self.message_type, *self._payload())

    @classmethod
    def from_bytes(cls, data: bytes) -> Message:
        """Decode a message from its wire form; the id is not transmitted."""
        data = bytes(data)
        if len(data) != cls._STRUCT.size:
            raise ValueError(
                f"{cls.__name__} needs {cls._STRUCT.size} bytes, got {len(data)}"
            )
        message_type, *values = cls._STRUCT.unpack(data)
        return cls(message_type=message_type, **dict(zip(cls._PAYLOAD, values)))

    def describe(self) -> str:
        """Return the one-line console description of the message."""
        parts = [f"type: {self.message_type}"]
        parts += [f"{name}: {_fmt(value)}" for name, value in zip(self._PAYLOAD, self._payload())]
        return "\t".join(parts) + "\n"

    def to_record(self) -> str:
        """Return the line written to a camera's log file."""
        parts = [f"messageId : {self.message_id}", f"messageType: {self.message_type}"]
        parts += [f"{name}: {_fmt(value)}" for name, value in zip(self._PAYLOAD, self._payload())]
        return "\t".join(parts) + "\n"


@dataclass
class StatusMessage(Message):
    """A camera status report; a status outside 1..3 is stored as 0."""

    message_type: int = STATUS_TYPE
    status: int = 0

    _STRUCT: ClassVar[struct.Struct] = struct.Struct("<HB")
    _PAYLOAD: ClassVar[tuple[str, ...]] = ("status",)

    def __post_init__(self) -> None:
        super().__post_init__()
        status = int(self.status)
        low, high = STATUS_RANGE
        self.status = status if low <= status <= high else 0

    def to_bytes(self) -> bytes:
        """Encode as 2 bytes of type followed by 1 byte of status."""
        return self._STRUCT.pack(self.message_type, self.status)

    @classmethod
    def from_bytes(cls, data: bytes) -> StatusMessage:
        """Decode a 3-byte status message."""
        return super().from_bytes(data)

    def describe(self) -> str:
        return f"type: {self.message_type}\tstatus: {self.status}\n"

    def to_record(self) -> str:
        return (
            f"messageId : {self.message_id}\tmessageType: {self.message_type}"
            f"\tstatus: {self.status}\n"
        )


@dataclass
class DiscoverMessage(Message):
    """A detection report; fields outside their valid ranges are stored as 0."""

    message_type: int = DISCOVER_TYPE
    distance: float = 0.0
    angle: float = 0.0
    speed: float = 0.0

    _STRUCT: ClassVar[struct.Struct] = struct.Struct("<Hfff")
    _PAYLOAD: ClassVar[tuple[str, ...]] = ("distance", "angle", "speed")

    def __post_init__(self) -> None:
        super().__post_init__()
        self.distance = _in_range_or_zero(self.distance, DISTANCE_RANGE)
        self.angle = _in_range_or_zero(self.angle, ANGLE_RANGE)
        self.speed = _in_range_or_zero(self.speed, SPEED_RANGE)

    def to_bytes(self) -> bytes:
        """Encode as 2 bytes of type followed by three 32-bit floats."""
        return self._STRUCT.pack(self.message_type, self.distance, self.angle, self.speed)

    @classmethod
    def from_bytes(cls, data: bytes) -> DiscoverMessage:
        """Decode a 14-byte discover message."""
        return super().from_bytes(data)

    def describe(self) -> str:
        return (
            f"type: {self.message_type}\tdistance: {_fmt(self.distance)}"
            f"\tangle: {_fmt(self.angle)}\tspeed:{_fmt(self.speed)}\n"
        )

    def to_record(self) -> str:
        return (
            f"messageId : {self.message_id}\tmessageType: {self.message_type}"
            f"\tdistance: {_fmt(self.distance)}\tangle: {_fmt(self.angle)}"
            f"\tspeed:{_fmt(self.speed)}\n"
        )


def decode_message(data: bytes) -> Message:
    """Decode wire bytes: 14 bytes are a discover message, others a status message."""
    data = bytes(data)
    if len(data) == DiscoverMessage._STRUCT.size:
        return DiscoverMessage.from_bytes(data)
    return StatusMessage.from_bytes(data)